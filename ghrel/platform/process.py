"""Command execution behind a mockable runner.

`git` and `gh` are never spawned directly by release code; everything goes
through a `CommandRunner` so the workflow can be exercised without a real
repository.

Usage:
    runner = SubprocessRunner(cwd=Path("."))
    match runner.run(["git", "tag", "--sort=-v:refname"]).to_result():
        case Ok(stdout):
            print(stdout)
        case Err(error):
            print(f"Failed: {error.stderr}")
"""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from ghrel.core.result import Err, Ok, Result

__all__ = [
    "CommandOutput",
    "CommandRunner",
    "MockRunner",
    "ProcessError",
    "SubprocessRunner",
]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed command.

    Attributes:
        command: The command that was executed.
        returncode: The exit code of the process (-1 if it never ran).
        stdout: Standard output (may be empty).
        stderr: Standard error (contains error details).
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


@dataclass(frozen=True, slots=True)
class CommandOutput:
    """Captured outcome of one command."""

    command: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def to_result(self) -> Result[str, ProcessError]:
        if self.ok:
            return Ok(self.stdout)
        return Err(
            ProcessError(
                command=self.command,
                returncode=self.returncode,
                stdout=self.stdout,
                stderr=self.stderr,
            )
        )


class CommandRunner(Protocol):
    """Executes external commands synchronously."""

    def run(self, args: Sequence[str], *, timeout: float | None = None) -> CommandOutput:
        """Run a command to completion and capture its output."""
        ...

    def which(self, name: str) -> str | None:
        """Return the resolved path of an executable, or None if absent."""
        ...


class SubprocessRunner:
    """Production runner backed by `subprocess.run`."""

    def __init__(self, cwd: Path, env: dict[str, str] | None = None) -> None:
        self.cwd = cwd
        self.env = env

    def run(self, args: Sequence[str], *, timeout: float | None = None) -> CommandOutput:
        cmd = tuple(args)
        try:
            proc = subprocess.run(
                list(cmd),
                cwd=str(self.cwd),
                env=self.env,
                capture_output=True,
                text=True,
                timeout=timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            return CommandOutput(
                command=cmd,
                returncode=-1,
                stderr=f"Command timed out after {timeout}s",
            )
        except OSError as e:
            return CommandOutput(command=cmd, returncode=-1, stderr=str(e))

        return CommandOutput(
            command=cmd,
            returncode=proc.returncode,
            stdout=proc.stdout,
            stderr=proc.stderr,
        )

    def which(self, name: str) -> str | None:
        return shutil.which(name)


def _empty_calls() -> list[tuple[str, ...]]:
    return []


def _empty_responders() -> list[tuple[tuple[str, ...], CommandOutput]]:
    return []


@dataclass
class MockRunner:
    """Runner that records invocations and replays canned results.

    Responses are matched by command prefix. The longest matching prefix
    wins; among equal prefixes the latest registration wins. Unmatched
    commands succeed with empty output.

    Example:
        runner = MockRunner(available={"git"})
        runner.respond(["git", "tag"], stdout="v1.0.0\\n")
        runner.fail(["git", "push"], stderr="rejected")
    """

    available: set[str] = field(default_factory=lambda: {"git"})
    calls: list[tuple[str, ...]] = field(default_factory=_empty_calls)
    _responses: list[tuple[tuple[str, ...], CommandOutput]] = field(
        default_factory=_empty_responders, init=False, repr=False
    )

    def respond(self, prefix: Sequence[str], *, stdout: str = "", returncode: int = 0) -> None:
        key = tuple(prefix)
        self._responses.append(
            (key, CommandOutput(command=key, returncode=returncode, stdout=stdout))
        )

    def fail(self, prefix: Sequence[str], *, stderr: str = "", returncode: int = 1) -> None:
        key = tuple(prefix)
        self._responses.append(
            (key, CommandOutput(command=key, returncode=returncode, stderr=stderr))
        )

    def run(self, args: Sequence[str], *, timeout: float | None = None) -> CommandOutput:
        cmd = tuple(args)
        self.calls.append(cmd)

        best: CommandOutput | None = None
        best_len = -1
        for prefix, output in self._responses:
            if cmd[: len(prefix)] == prefix and len(prefix) >= best_len:
                best = output
                best_len = len(prefix)

        if best is None:
            return CommandOutput(command=cmd, returncode=0)
        return CommandOutput(
            command=cmd,
            returncode=best.returncode,
            stdout=best.stdout,
            stderr=best.stderr,
        )

    def which(self, name: str) -> str | None:
        return f"/usr/bin/{name}" if name in self.available else None

    def commands(self, program: str) -> list[tuple[str, ...]]:
        """All recorded invocations of one program."""
        return [c for c in self.calls if c and c[0] == program]
