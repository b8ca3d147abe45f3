"""Release metadata embedded in a file header.

A target file describes itself with comment lines such as:

    # Name   : Github Release CLI
    # Author : Jane Doe
    # Version: v2.0.0

Only the first `# Label:` line counts for each label; blanks may sit between
the label and its colon. The value is whatever follows the colon, stripped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from ghrel.core.result import Err, Ok, Result
from ghrel.services.release.errors import ReadFailed

LABELS = ("Name", "Author", "Version")


@dataclass(frozen=True, slots=True)
class ReleaseMetadata:
    name: str = ""
    author: str = ""
    version: str = ""


def extract_label(lines: list[str], label: str) -> str:
    pattern = re.compile(rf"# {re.escape(label)}\s*:(.*)")
    for line in lines:
        match = pattern.match(line)
        if match:
            return match.group(1).strip()
    return ""


def extract_metadata(text: str) -> ReleaseMetadata:
    lines = text.splitlines()
    name, author, version = (extract_label(lines, label) for label in LABELS)
    return ReleaseMetadata(name=name, author=author, version=version)


def read_metadata(path: Path) -> Result[ReleaseMetadata, ReadFailed]:
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        return Err(ReadFailed(path=path, reason=str(e)))
    return Ok(extract_metadata(text))
