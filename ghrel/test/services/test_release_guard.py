from __future__ import annotations

from pathlib import Path

from ghrel.core.result import Err, Ok
from ghrel.git.repository import Repository
from ghrel.platform.process import MockRunner
from ghrel.services.release.errors import GitFailed, StaleVersionError
from ghrel.services.release.guard import check_version_bump


def _setup(tmp_path: Path, *, latest: str | None, changed: bool) -> tuple[Repository, Path]:
    runner = MockRunner()
    if latest is not None:
        runner.respond(["git", "tag", "--sort=-v:refname"], stdout=f"{latest}\nv0.1.0\n")
    if changed:
        runner.respond(["git", "diff", "--name-only"], stdout="tool.sh\n")
    return Repository(tmp_path, runner=runner), tmp_path / "tool.sh"


def test_changed_file_with_unbumped_version_is_stale(tmp_path: Path) -> None:
    repo, target = _setup(tmp_path, latest="v1.2.0", changed=True)

    result = check_version_bump(repo, target, "v1.2.0")

    assert result == Err(StaleVersionError(path=target, version="v1.2.0"))


def test_changed_file_with_bumped_version_passes(tmp_path: Path) -> None:
    repo, target = _setup(tmp_path, latest="v1.2.0", changed=True)

    assert check_version_bump(repo, target, "v1.3.0") == Ok("v1.2.0")


def test_unchanged_file_with_latest_version_is_not_an_error(tmp_path: Path) -> None:
    repo, target = _setup(tmp_path, latest="v1.2.0", changed=False)

    assert check_version_bump(repo, target, "v1.2.0") == Ok("v1.2.0")


def test_first_release_has_no_latest_tag(tmp_path: Path) -> None:
    repo, target = _setup(tmp_path, latest=None, changed=True)

    assert check_version_bump(repo, target, "v0.1.0") == Ok(None)


def test_git_failure_propagates(tmp_path: Path) -> None:
    runner = MockRunner()
    runner.fail(["git", "tag"], stderr="fatal: not a git repository", returncode=128)
    repo = Repository(tmp_path, runner=runner)

    result = check_version_bump(repo, tmp_path / "tool.sh", "v1.0.0")

    assert isinstance(result, Err)
    assert isinstance(result.error, GitFailed)
    assert result.error.returncode == 128
