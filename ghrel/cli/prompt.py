from __future__ import annotations

import typer


class TyperPrompter:
    """Blocking terminal prompt backed by `typer.prompt`."""

    def prompt(self, label: str, default: str = "") -> str:
        answer: str = typer.prompt(label, default=default, show_default=bool(default))
        return answer
