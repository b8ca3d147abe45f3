from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ghrel.core.config import DEFAULT_EXTENSIONS
from ghrel.core.result import Err, Ok, Result
from ghrel.services.release.errors import NotFoundError


def _exists_non_empty(path: Path) -> bool:
    try:
        size = path.stat().st_size
    except OSError:
        return False
    return size > 0 or path.is_dir()


def find_candidate(cwd: Path, extensions: Iterable[str]) -> Path | None:
    """First non-hidden file in cwd (by name) with one of the given extensions."""
    wanted = set(extensions)
    try:
        entries = sorted(cwd.iterdir(), key=lambda p: p.name)
    except OSError:
        return None
    for entry in entries:
        if entry.name.startswith("."):
            continue
        if entry.suffix in wanted and entry.is_file():
            return entry
    return None


def resolve_target_file(
    preferred: Path,
    *,
    cwd: Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> Result[Path, NotFoundError]:
    """Pick the file whose header carries the release metadata.

    The preferred path wins when it exists and is non-empty; otherwise the
    working directory is scanned for a script or source file.
    """
    if _exists_non_empty(preferred):
        target = preferred
    else:
        found = find_candidate(cwd, extensions)
        if found is None:
            return Err(NotFoundError())
        target = found

    if not target.is_file():
        return Err(NotFoundError(path=target))
    return Ok(target)
