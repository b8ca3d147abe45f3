from __future__ import annotations

import re
from dataclasses import dataclass

from ghrel.core.result import Err, Ok, Result
from ghrel.services.release.errors import InvalidVersionError


_TAG_RE = re.compile(r"v([0-9]+)\.([0-9]+)\.([0-9]+)")


@dataclass(frozen=True, slots=True, order=True)
class SemVer:
    major: int
    minor: int
    patch: int

    def to_tag(self) -> str:
        return f"v{self.major}.{self.minor}.{self.patch}"


def is_valid_version(version: str) -> bool:
    return _TAG_RE.fullmatch(version) is not None


def parse_version(version: str) -> Result[SemVer, InvalidVersionError]:
    """Parse a `vMAJOR.MINOR.PATCH` tag (surrounding whitespace ignored)."""
    m = _TAG_RE.fullmatch(version.strip())
    if m is None:
        return Err(InvalidVersionError(version=version))
    return Ok(SemVer(int(m.group(1)), int(m.group(2)), int(m.group(3))))
