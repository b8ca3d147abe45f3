"""Git repository abstraction.

All operations run through a `CommandRunner` and return Result types.

Usage:
    repo = Repository(Path("."), runner=SubprocessRunner(cwd=Path(".")))

    match repo.latest_tag():
        case Ok(tag):
            print(f"Latest tag: {tag or '(none)'}")
        case Err(e):
            print(f"Error: {e.message}")
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from ghrel.core.result import Err, Ok, Result
from ghrel.platform.process import CommandRunner

_GIT_TIMEOUT_SECONDS = 30.0
_GIT_NETWORK_TIMEOUT_SECONDS = 3 * 60.0

__all__ = [
    "GitError",
    "Repository",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git subcommand that failed (e.g. "tag -a")
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


class Repository:
    """A git working tree rooted at `path`.

    Attributes:
        path: Repository working directory (where git is invoked)
    """

    def __init__(self, path: Path, *, runner: CommandRunner) -> None:
        self.path = path
        self._runner = runner

    def relative(self, file: Path) -> str:
        """Path of `file` as passed to git (relative to the working directory)."""
        try:
            return file.relative_to(self.path).as_posix()
        except ValueError:
            return str(file)

    def latest_tag(self) -> Result[str | None, GitError]:
        """Highest tag by version sort, or None when there are no tags."""
        result = self._git(["tag", "--sort=-v:refname"], label="tag --sort")
        match result:
            case Err(e):
                return Err(e)
            case Ok(stdout):
                for line in stdout.splitlines():
                    tag = line.strip()
                    if tag:
                        return Ok(tag)
                return Ok(None)

    def tag_exists(self, tag: str) -> Result[bool, GitError]:
        result = self._git(["tag", "--list", tag], label="tag --list")
        return result.map(lambda stdout: any(ln.strip() == tag for ln in stdout.splitlines()))

    def has_pending_changes(self, file: Path) -> Result[bool, GitError]:
        """True if `file` differs from the index or the index differs from HEAD."""
        rel = self.relative(file)
        for args, label in (
            (["diff", "--name-only", "--", rel], "diff"),
            (["diff", "--cached", "--name-only", "--", rel], "diff --cached"),
        ):
            result = self._git(args, label=label)
            if isinstance(result, Err):
                return result
            if any(line.strip() for line in result.value.splitlines()):
                return Ok(True)
        return Ok(False)

    def add(self, files: Sequence[Path]) -> Result[None, GitError]:
        result = self._git(["add", "--", *[self.relative(f) for f in files]], label="add")
        return result.map(lambda _: None)

    def add_all(self) -> Result[None, GitError]:
        return self._git(["add", "-A"], label="add -A").map(lambda _: None)

    def commit(self, message: str) -> Result[str, GitError]:
        return self._git(["commit", "-m", message], label="commit")

    def create_tag(self, tag: str, message: str) -> Result[None, GitError]:
        """Create an annotated tag at HEAD."""
        return self._git(["tag", "-a", tag, "-m", message], label="tag -a").map(lambda _: None)

    def push(self, remote: str, ref: str) -> Result[None, GitError]:
        result = self._git(
            ["push", remote, ref],
            label=f"push {remote} {ref}",
            timeout=_GIT_NETWORK_TIMEOUT_SECONDS,
        )
        return result.map(lambda _: None)

    def current_branch(self) -> str | None:
        """Current branch name; None if detached HEAD or on error."""
        result = self._git(["rev-parse", "--abbrev-ref", "HEAD"], label="rev-parse")
        if isinstance(result, Err):
            return None
        branch = result.value.strip()
        return None if branch in {"", "HEAD"} else branch

    def _git(
        self,
        args: list[str],
        *,
        label: str,
        timeout: float = _GIT_TIMEOUT_SECONDS,
    ) -> Result[str, GitError]:
        match self._runner.run(["git", *args], timeout=timeout).to_result():
            case Ok(stdout):
                return Ok(stdout)
            case Err(e):
                return Err(
                    GitError(
                        command=label,
                        message=e.stderr.strip() or e.stdout.strip() or f"git {label} failed",
                        returncode=e.returncode,
                    )
                )
