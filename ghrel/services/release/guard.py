"""Version bump guard.

Refuses to release when the target file has pending changes but its version
header still names the latest existing tag.
"""

from __future__ import annotations

from pathlib import Path

from ghrel.core.result import Err, Ok, Result
from ghrel.git.repository import GitError, Repository
from ghrel.services.release.errors import GitFailed, StaleVersionError


def _git_failed(e: GitError) -> GitFailed:
    return GitFailed(command=e.command, detail=e.message, returncode=e.returncode)


def check_version_bump(
    repo: Repository,
    target: Path,
    version: str,
) -> Result[str | None, StaleVersionError | GitFailed]:
    """Compare `version` with the latest tag.

    Returns:
        Ok(latest_tag) when the release may proceed (latest_tag may be None).
    """
    latest = repo.latest_tag()
    if isinstance(latest, Err):
        return Err(_git_failed(latest.error))

    changed = repo.has_pending_changes(target)
    if isinstance(changed, Err):
        return Err(_git_failed(changed.error))

    if changed.value and version == latest.value:
        return Err(StaleVersionError(path=target, version=version))
    return Ok(latest.value)
