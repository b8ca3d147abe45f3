"""CHANGELOG.md parsing and splicing.

A changelog is split into a header (introductory text) and a body (version
entries). The first boundary line decides where the split happens:

- a horizontal rule (``---``, ``***`` or ``___``) closes the header and
  belongs to it;
- a level-2 heading (``## ...``) opens the body, so the header is
  everything above it.

New entries are always inserted between the header and the body, which
keeps the most recent release first and leaves older entries untouched.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ghrel.core.result import Err, Ok, Result
from ghrel.platform.files import atomic_write_text
from ghrel.services.release.errors import ChangelogWriteFailed

_RULE_RE = re.compile(r"^(?:-{3,}|\*{3,}|_{3,})\s*$")
_HEADING_PREFIX = "## "

DEFAULT_PREAMBLE: tuple[str, ...] = (
    "# Changelog",
    "",
    "All notable changes will be documented in this file.",
    "",
    "---",
)


class BoundaryKind(Enum):
    RULE = "rule"
    HEADING = "heading"


@dataclass(frozen=True, slots=True)
class ChangelogEntry:
    version: str
    date: str
    message: str

    @property
    def heading(self) -> str:
        return f"## {self.version} — {self.date}"

    def lines(self) -> tuple[str, ...]:
        return (self.heading, f"- {self.message}", "")


def classify_line(line: str) -> BoundaryKind | None:
    if _RULE_RE.match(line):
        return BoundaryKind.RULE
    if line.startswith(_HEADING_PREFIX):
        return BoundaryKind.HEADING
    return None


@dataclass(frozen=True, slots=True)
class ChangelogDocument:
    header: tuple[str, ...]
    body: tuple[str, ...]
    boundary: BoundaryKind | None = None

    @property
    def lines(self) -> tuple[str, ...]:
        return self.header + self.body

    def insert(self, entry: ChangelogEntry) -> ChangelogDocument:
        """Return a new document with `entry` placed right after the header.

        A separating blank line is added only when the header does not already
        end with one.
        """
        if self.boundary is None or not self.header or not self.header[-1].strip():
            section = entry.lines()
        else:
            section = ("", *entry.lines())
        return ChangelogDocument(
            header=self.header,
            body=section + self.body,
            boundary=self.boundary,
        )

    def render(self) -> str:
        if not self.lines:
            return ""
        return "\n".join(self.lines) + "\n"


def parse_changelog(text: str) -> ChangelogDocument:
    lines = tuple(text.splitlines())
    for index, line in enumerate(lines):
        kind = classify_line(line)
        if kind is BoundaryKind.RULE:
            return ChangelogDocument(lines[: index + 1], lines[index + 1 :], kind)
        if kind is BoundaryKind.HEADING:
            return ChangelogDocument(lines[:index], lines[index:], kind)
    return ChangelogDocument((), lines, None)


def new_changelog(entry: ChangelogEntry) -> str:
    doc = ChangelogDocument(header=DEFAULT_PREAMBLE, body=(), boundary=BoundaryKind.RULE)
    return doc.insert(entry).render()


def splice_changelog(existing: str | None, entry: ChangelogEntry) -> str:
    if existing is None:
        return new_changelog(entry)
    return parse_changelog(existing).insert(entry).render()


def update_changelog(path: Path, entry: ChangelogEntry) -> Result[bool, ChangelogWriteFailed]:
    """Splice `entry` into the changelog at `path`.

    Returns:
        Ok(True) if the file was created, Ok(False) if an existing file was
        updated, Err(ChangelogWriteFailed) on I/O errors.
    """
    existing: str | None = None
    if path.exists():
        try:
            existing = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            return Err(ChangelogWriteFailed(path=path, reason=str(e)))

    try:
        atomic_write_text(path, splice_changelog(existing, entry))
    except OSError as e:
        return Err(ChangelogWriteFailed(path=path, reason=str(e)))
    return Ok(existing is None)
