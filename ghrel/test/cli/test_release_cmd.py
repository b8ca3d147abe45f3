from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest
from typer.testing import CliRunner

import ghrel.cli.app as cli_app
from ghrel import __version__
from ghrel.cli.app import app
from ghrel.cli.context import CLIContext
from ghrel.output.console import MockConsole
from ghrel.output.prompt import ScriptedPrompter
from ghrel.platform.process import MockRunner

runner = CliRunner()


class Fakes:
    def __init__(self, cwd: Path, answers: list[str]) -> None:
        self.cwd = cwd
        self.console = MockConsole()
        self.runner = MockRunner(available={"git", "gh"})
        self.runner.respond(["git", "tag", "--sort=-v:refname"], stdout="v1.1.0\n")
        self.prompter = ScriptedPrompter.of(answers)

    def context(self) -> CLIContext:
        return CLIContext(
            cwd=self.cwd,
            console=self.console,
            runner=self.runner,
            prompter=self.prompter,
            today=lambda: date(2026, 10, 18),
        )


def _install(monkeypatch: pytest.MonkeyPatch, fakes: Fakes) -> None:
    monkeypatch.setattr(cli_app, "build_context", fakes.context)


def _project(tmp_path: Path, header: str = "# Name: Tool\n# Version: v1.2.0\n") -> Path:
    (tmp_path / "header-info.txt").write_text(header, encoding="utf-8")
    return tmp_path


def test_help_lists_options() -> None:
    result = runner.invoke(app, ["-h"])

    assert result.exit_code == 0
    for flag in ("--file", "--message", "--add-all", "--dry-run"):
        assert flag in result.output


def test_version_flag() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == __version__


def test_release_end_to_end(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    fakes = Fakes(_project(tmp_path), answers=["", "", "y"])
    _install(monkeypatch, fakes)

    result = runner.invoke(app, [])

    assert result.exit_code == 0, fakes.console.text
    changelog = (tmp_path / "CHANGELOG.md").read_text(encoding="utf-8")
    assert "## v1.2.0 — 2026-10-18" in changelog
    assert ("git", "tag", "-a", "v1.2.0", "-m", "Tool v1.2.0") in fakes.runner.calls
    assert ("git", "push", "origin", "HEAD") in fakes.runner.calls
    assert ("git", "push", "origin", "v1.2.0") in fakes.runner.calls


def test_short_flags(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "tool.sh").write_text("# Version: v3.0.0\n", encoding="utf-8")
    fakes = Fakes(tmp_path, answers=[""])
    _install(monkeypatch, fakes)

    result = runner.invoke(app, ["-f", "tool.sh", "-m", "Big one", "-a", "-d"])

    assert result.exit_code == 0, fakes.console.text
    assert "Commit  : Big one" in fakes.console.messages
    assert "File    : tool.sh" in fakes.console.messages
    assert "Dry Run : true" in fakes.console.messages
    assert not (tmp_path / "CHANGELOG.md").exists()


def test_custom_changelog_and_remote(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    fakes = Fakes(_project(tmp_path), answers=["", "", "y"])
    _install(monkeypatch, fakes)

    result = runner.invoke(app, ["-c", "docs/CHANGES.md", "--remote", "upstream"])

    assert result.exit_code == 0, fakes.console.text
    assert (tmp_path / "docs" / "CHANGES.md").exists()
    assert ("git", "push", "upstream", "v1.2.0") in fakes.runner.calls


def test_abort_exits_zero(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    fakes = Fakes(_project(tmp_path), answers=["", "", "n"])
    _install(monkeypatch, fakes)

    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert "Aborted." in fakes.console.messages


def test_missing_file_exits_one(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    fakes = Fakes(tmp_path, answers=[])
    _install(monkeypatch, fakes)

    result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert "error: No file specified or found." in fakes.console.messages


def test_invalid_version_exits_one(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    fakes = Fakes(_project(tmp_path, header="# Version: 1.2.0\n"), answers=[])
    _install(monkeypatch, fakes)

    result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert fakes.console.find("Invalid version format: '1.2.0'")


def test_stale_version_exits_one(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    fakes = Fakes(_project(tmp_path), answers=[])
    fakes.runner.respond(["git", "tag", "--sort=-v:refname"], stdout="v1.2.0\n")
    fakes.runner.respond(["git", "diff", "--name-only"], stdout="header-info.txt\n")
    _install(monkeypatch, fakes)

    result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert fakes.console.find("Please bump the version")


def test_push_failure_exits_env_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    fakes = Fakes(_project(tmp_path), answers=["", "", "y"])
    fakes.runner.fail(["git", "push"], stderr="fatal: could not read from remote")
    _install(monkeypatch, fakes)

    result = runner.invoke(app, [])

    assert result.exit_code == 2
    assert "fatal: could not read from remote" in fakes.console.messages


def test_bad_settings_file_exits_one(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _project(tmp_path)
    (tmp_path / ".ghrel.toml").write_text("remote = [\n", encoding="utf-8")
    fakes = Fakes(tmp_path, answers=[])
    _install(monkeypatch, fakes)

    result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert fakes.console.find("Invalid TOML syntax")
    assert fakes.runner.calls == []
