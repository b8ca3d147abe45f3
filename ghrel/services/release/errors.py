from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class NotFoundError:
    """No target file could be resolved, or it is not a regular file."""

    path: Path | None = None

    @property
    def message(self) -> str:
        if self.path is None:
            return "No file specified or found."
        return f"Target file not found: {self.path}"


@dataclass(frozen=True, slots=True)
class ReadFailed:
    path: Path
    reason: str

    @property
    def message(self) -> str:
        return f"failed to read {self.path}: {self.reason}"


@dataclass(frozen=True, slots=True)
class InvalidVersionError:
    version: str

    @property
    def message(self) -> str:
        return f"Invalid version format: '{self.version}'"

    @property
    def hint(self) -> str:
        return "Expected: vMAJOR.MINOR.PATCH (e.g., v1.0.0)"


@dataclass(frozen=True, slots=True)
class StaleVersionError:
    """The target file changed but its version still equals the latest tag."""

    path: Path
    version: str

    @property
    def message(self) -> str:
        return (
            f"Detected changes in {self.path.name} but version header is still '{self.version}'."
        )

    @property
    def hint(self) -> str:
        return "Please bump the version before releasing."


@dataclass(frozen=True, slots=True)
class TagExistsError:
    version: str

    @property
    def message(self) -> str:
        return f"Tag '{self.version}' already exists."

    @property
    def hint(self) -> str:
        return "Bump the version header or delete the existing tag."


@dataclass(frozen=True, slots=True)
class ChangelogWriteFailed:
    path: Path
    reason: str

    @property
    def message(self) -> str:
        return f"failed to write {self.path.name}: {self.reason}"


@dataclass(frozen=True, slots=True)
class GitFailed:
    command: str
    detail: str
    returncode: int = 1

    @property
    def message(self) -> str:
        return f"git {self.command} failed (exit {self.returncode})"


@dataclass(frozen=True, slots=True)
class PublishFailed:
    version: str
    detail: str

    @property
    def message(self) -> str:
        return f"gh release create {self.version} failed"


ReleaseError = (
    NotFoundError
    | ReadFailed
    | InvalidVersionError
    | StaleVersionError
    | TagExistsError
    | ChangelogWriteFailed
    | GitFailed
    | PublishFailed
)
