"""Output abstraction layer."""

from .console import (
    ConsoleProtocol,
    MockConsole,
    RichConsole,
    Style,
)
from .prompt import Prompter, ScriptedPrompter

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "Prompter",
    "RichConsole",
    "ScriptedPrompter",
    "Style",
]
