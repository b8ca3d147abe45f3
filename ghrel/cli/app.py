from __future__ import annotations

from pathlib import Path

import typer

from ghrel import __version__
from ghrel.cli.context import build_context
from ghrel.core.config import DEFAULT_CHANGELOG, DEFAULT_TARGET_FILE, build_release_config
from ghrel.core.errors import ErrorCode
from ghrel.core.result import Err
from ghrel.output.errors import print_release_error, release_error_exit_code
from ghrel.services.release.workflow import ReleaseContext, run_release


app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.command()
def release(
    file: Path | None = typer.Option(
        None,
        "-f",
        "--file",
        help=f"File to find the release info (default: {DEFAULT_TARGET_FILE})",
    ),
    message: str | None = typer.Option(
        None, "-m", "--message", help='Commit message (default: "Release <version>")'
    ),
    add_all: bool = typer.Option(
        False, "-a", "--add-all", help="Add all changes to the index (git add -A)"
    ),
    dry_run: bool = typer.Option(
        False, "-d", "--dry-run", help="Show what would be done without changing anything"
    ),
    changelog: Path | None = typer.Option(
        None, "-c", "--changelog", help=f"Changelog to update (default: {DEFAULT_CHANGELOG})"
    ),
    remote: str | None = typer.Option(None, "--remote", help="Remote to push to (default: origin)"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Bump-check, changelog, tag, push and publish a release."""
    ctx = build_context()

    config = build_release_config(
        cwd=ctx.cwd,
        file=file,
        changelog=changelog,
        remote=remote,
        message=message,
        add_all=add_all,
        dry_run=dry_run,
    )
    if isinstance(config, Err):
        ctx.console.error(config.error.message)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    outcome = run_release(
        config.value,
        ReleaseContext(
            cwd=ctx.cwd,
            runner=ctx.runner,
            prompter=ctx.prompter,
            console=ctx.console,
            today=ctx.today,
        ),
    )
    if isinstance(outcome, Err):
        print_release_error(outcome.error, ctx.console)
        raise typer.Exit(code=release_error_exit_code(outcome.error))


def main() -> None:
    app()
