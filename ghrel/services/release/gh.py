from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ghrel.core.result import Err, Ok, Result
from ghrel.platform.process import CommandRunner
from ghrel.services.release.errors import PublishFailed
from ghrel.services.release.timeouts import GH_RELEASE_TIMEOUT_SECONDS

GH_INSTALL_HINT = "Install GitHub CLI: https://cli.github.com/"


@dataclass(frozen=True, slots=True)
class GhRelease:
    version: str
    title: str
    asset: Path
    notes_file: Path

    def command(self) -> list[str]:
        return [
            "gh",
            "release",
            "create",
            self.version,
            str(self.asset),
            "--title",
            self.title,
            "--notes-file",
            str(self.notes_file),
        ]


def gh_available(runner: CommandRunner) -> bool:
    return runner.which("gh") is not None


def release_title(name: str, version: str, *, cwd: Path) -> str:
    return f"{name or cwd.name} {version}"


def create_release(runner: CommandRunner, release: GhRelease) -> Result[str, PublishFailed]:
    """Run `gh release create`; returns the release URL printed by gh."""
    match runner.run(release.command(), timeout=GH_RELEASE_TIMEOUT_SECONDS).to_result():
        case Ok(stdout):
            return Ok(stdout.strip())
        case Err(e):
            return Err(
                PublishFailed(
                    version=release.version,
                    detail=e.stderr.strip() or e.stdout.strip(),
                )
            )
