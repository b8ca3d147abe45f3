"""Error presentation utilities.

Centralized error formatting and exit code mapping for release failures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ghrel.core.errors import ErrorCode
from ghrel.output.console import Style
from ghrel.services.release.errors import (
    ChangelogWriteFailed,
    GitFailed,
    InvalidVersionError,
    NotFoundError,
    PublishFailed,
    ReadFailed,
    ReleaseError,
    StaleVersionError,
    TagExistsError,
)

if TYPE_CHECKING:
    from ghrel.output.console import ConsoleProtocol

__all__ = ["print_release_error", "release_error_exit_code"]


def print_release_error(error: ReleaseError, console: ConsoleProtocol) -> None:
    """Print a release error with its hint, if any."""
    console.error(error.message)
    match error:
        case InvalidVersionError() | StaleVersionError() | TagExistsError():
            console.print(f"hint: {error.hint}", Style.DIM)
        case GitFailed(detail=detail) | PublishFailed(detail=detail) if detail:
            console.print(detail, Style.DIM)
        case PublishFailed():
            console.print("hint: check `gh auth status`", Style.DIM)
        case _:
            pass


def release_error_exit_code(error: ReleaseError) -> int:
    match error:
        case NotFoundError() | ReadFailed():
            return int(ErrorCode.USER_ERROR)
        case InvalidVersionError() | StaleVersionError() | TagExistsError():
            return int(ErrorCode.USER_ERROR)
        case GitFailed():
            return int(ErrorCode.ENV_ERROR)
        case PublishFailed():
            return int(ErrorCode.NETWORK_ERROR)
        case ChangelogWriteFailed():
            return int(ErrorCode.IO_ERROR)
