from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from ghrel.cli.prompt import TyperPrompter
from ghrel.output.console import ConsoleProtocol, RichConsole
from ghrel.output.prompt import Prompter
from ghrel.platform.process import CommandRunner, SubprocessRunner


@dataclass(frozen=True, slots=True)
class CLIContext:
    cwd: Path
    console: ConsoleProtocol
    runner: CommandRunner
    prompter: Prompter
    today: Callable[[], date] = date.today


def build_context() -> CLIContext:
    cwd = Path.cwd().resolve()
    return CLIContext(
        cwd=cwd,
        console=RichConsole(),
        runner=SubprocessRunner(cwd=cwd),
        prompter=TyperPrompter(),
    )
