"""Interactive input abstraction.

The release workflow asks questions through `Prompter` so that it can be
driven by a scripted double in tests instead of a real terminal.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

__all__ = ["Prompter", "ScriptedPrompter"]


class Prompter(Protocol):
    def prompt(self, label: str, default: str = "") -> str:
        """Ask for one line of input; an empty answer yields `default`."""
        ...


def _empty_str_list() -> list[str]:
    return []


@dataclass
class ScriptedPrompter:
    """Replays canned answers in order and records every question asked.

    Once the script runs out, each further question gets its default.
    """

    answers: list[str] = field(default_factory=_empty_str_list)
    asked: list[str] = field(default_factory=_empty_str_list)

    @classmethod
    def of(cls, answers: Iterable[str]) -> ScriptedPrompter:
        return cls(answers=list(answers))

    def prompt(self, label: str, default: str = "") -> str:
        self.asked.append(label)
        if not self.answers:
            return default
        answer = self.answers.pop(0)
        return answer or default
