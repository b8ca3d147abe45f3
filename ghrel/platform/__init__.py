"""Platform adapters: process execution and filesystem helpers."""

from ghrel.platform.files import atomic_write_text
from ghrel.platform.process import (
    CommandOutput,
    CommandRunner,
    MockRunner,
    ProcessError,
    SubprocessRunner,
)

__all__ = [
    "CommandOutput",
    "CommandRunner",
    "MockRunner",
    "ProcessError",
    "SubprocessRunner",
    "atomic_write_text",
]
