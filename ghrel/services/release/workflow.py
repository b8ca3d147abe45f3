"""Release orchestration.

`run_release` drives one release end to end:

    resolve target -> read metadata -> validate version -> stale-version guard
    -> collect messages -> preview -> confirm
    -> splice changelog -> stage/commit -> tag -> push -> gh release

Nothing on disk or in the repository changes before the user confirms, and
nothing changes at all in dry-run mode.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Literal

from ghrel.core.config import ReleaseConfig
from ghrel.core.result import Err, Ok, Result
from ghrel.git.repository import GitError, Repository
from ghrel.output.console import ConsoleProtocol, Style
from ghrel.output.prompt import Prompter
from ghrel.platform.process import CommandRunner
from ghrel.services.release.changelog import ChangelogEntry, update_changelog
from ghrel.services.release.errors import GitFailed, ReleaseError, TagExistsError
from ghrel.services.release.gh import (
    GH_INSTALL_HINT,
    GhRelease,
    create_release,
    gh_available,
    release_title,
)
from ghrel.services.release.guard import check_version_bump
from ghrel.services.release.metadata import ReleaseMetadata, read_metadata
from ghrel.services.release.resolver import resolve_target_file
from ghrel.services.release.semver import parse_version

ReleaseStatus = Literal["dry_run", "aborted", "released"]

VERSION_PROMPT = "Enter version (format vX.Y.Z)"
COMMIT_PROMPT = "Enter commit message"
TAG_PROMPT = "Enter tag message"
CONFIRM_PROMPT = "Proceed with release? [y/N]"


@dataclass(frozen=True, slots=True)
class ReleasePlan:
    target: Path
    metadata: ReleaseMetadata
    version: str
    commit_message: str
    tag_message: str
    title: str
    date: str
    latest_tag: str | None = None

    @property
    def entry(self) -> ChangelogEntry:
        return ChangelogEntry(version=self.version, date=self.date, message=self.commit_message)


@dataclass(frozen=True, slots=True)
class ReleaseOutcome:
    plan: ReleasePlan
    status: ReleaseStatus
    published: bool = False
    changelog_created: bool = False


@dataclass(frozen=True, slots=True)
class ReleaseContext:
    """Collaborators shared by every release step."""

    cwd: Path
    runner: CommandRunner
    prompter: Prompter
    console: ConsoleProtocol
    today: Callable[[], date] = date.today

    @property
    def repo(self) -> Repository:
        return Repository(self.cwd, runner=self.runner)


def _git_failed(e: GitError) -> GitFailed:
    return GitFailed(command=e.command, detail=e.message, returncode=e.returncode)


def _ask(prompter: Prompter, label: str, default: str) -> str:
    return prompter.prompt(label, default).strip() or default


def plan_release(config: ReleaseConfig, ctx: ReleaseContext) -> Result[ReleasePlan, ReleaseError]:
    """Resolve, validate and collect everything a release needs (no side effects)."""
    repo = ctx.repo

    target_r = resolve_target_file(config.target_file, cwd=ctx.cwd, extensions=config.extensions)
    if isinstance(target_r, Err):
        return target_r
    target = target_r.value
    ctx.console.print(f"Target file: {repo.relative(target)}", Style.DIM)

    meta_r = read_metadata(target)
    if isinstance(meta_r, Err):
        return meta_r
    metadata = meta_r.value

    version = metadata.version or ctx.prompter.prompt(VERSION_PROMPT, "").strip()
    parsed = parse_version(version)
    if isinstance(parsed, Err):
        return parsed

    latest = check_version_bump(repo, target, version)
    if isinstance(latest, Err):
        return latest

    default_commit = f"Release {version}"
    if config.commit_message is not None:
        commit_message = config.commit_message
    else:
        commit_message = _ask(ctx.prompter, COMMIT_PROMPT, default_commit)

    default_tag = f"{metadata.name or 'Project'} {version}"
    tag_message = _ask(ctx.prompter, TAG_PROMPT, default_tag)

    return Ok(
        ReleasePlan(
            target=target,
            metadata=metadata,
            version=version,
            commit_message=commit_message,
            tag_message=tag_message,
            title=release_title(metadata.name, version, cwd=ctx.cwd),
            date=ctx.today().isoformat(),
            latest_tag=latest.value,
        )
    )


def print_preview(
    plan: ReleasePlan,
    config: ReleaseConfig,
    *,
    console: ConsoleProtocol,
    repo: Repository,
) -> None:
    console.header("Release")
    console.print(f"Version : {plan.version}")
    console.print(f"Commit  : {plan.commit_message}")
    console.print(f"Tag Msg : {plan.tag_message}")
    console.print(f"File    : {repo.relative(plan.target)}")
    console.print(f"Dry Run : {str(config.dry_run).lower()}")
    if plan.latest_tag:
        console.print(f"Previous: {plan.latest_tag}", Style.DIM)
    branch = repo.current_branch()
    if branch:
        console.print(f"Branch  : {branch}", Style.DIM)

    if config.dry_run:
        console.newline()
        console.print(f"{repo.relative(config.changelog_file)} would gain:", Style.DIM)
        for line in plan.entry.lines():
            if line:
                console.print(f"  {line}", Style.DIM)


def confirm_release(prompter: Prompter) -> bool:
    return prompter.prompt(CONFIRM_PROMPT, "").strip() in {"y", "Y"}


def publish_release(
    plan: ReleasePlan,
    config: ReleaseConfig,
    ctx: ReleaseContext,
) -> Result[ReleaseOutcome, ReleaseError]:
    """Write the changelog, then commit, tag, push and publish."""
    repo = ctx.repo
    console = ctx.console

    exists = repo.tag_exists(plan.version)
    if isinstance(exists, Err):
        return Err(_git_failed(exists.error))
    if exists.value:
        return Err(TagExistsError(version=plan.version))

    written = update_changelog(config.changelog_file, plan.entry)
    if isinstance(written, Err):
        return written
    created = written.value
    changelog_rel = repo.relative(config.changelog_file)
    console.success(f"{'Created' if created else 'Updated'} {changelog_rel}")

    staged = repo.add_all() if config.add_all else repo.add([plan.target, config.changelog_file])
    if isinstance(staged, Err):
        return Err(_git_failed(staged.error))

    committed = repo.commit(plan.commit_message)
    if isinstance(committed, Err):
        console.warning(f"commit skipped: {committed.error.message}")
    else:
        console.success(f"Committed: {plan.commit_message}")

    tagged = repo.create_tag(plan.version, plan.tag_message)
    if isinstance(tagged, Err):
        return Err(_git_failed(tagged.error))
    console.success(f"Tagged {plan.version}")

    for ref in ("HEAD", plan.version):
        pushed = repo.push(config.remote, ref)
        if isinstance(pushed, Err):
            return Err(_git_failed(pushed.error))
    console.success(f"Pushed HEAD and {plan.version} to {config.remote}")

    published = False
    if gh_available(ctx.runner):
        console.info("Creating GitHub release...")
        release = GhRelease(
            version=plan.version,
            title=plan.title,
            asset=Path(repo.relative(plan.target)),
            notes_file=Path(changelog_rel),
        )
        url = create_release(ctx.runner, release)
        if isinstance(url, Err):
            return url
        published = True
        console.success("GitHub release published.")
        if url.value:
            console.print(url.value, Style.DIM)
    else:
        console.warning("GitHub CLI (gh) not found - tag created but release skipped.")
        console.print(f"hint: {GH_INSTALL_HINT}", Style.DIM)

    console.newline()
    console.success(
        f"Done! Tagged {plan.version}, updated {changelog_rel}, and pushed to {config.remote}."
    )
    return Ok(
        ReleaseOutcome(
            plan=plan,
            status="released",
            published=published,
            changelog_created=created,
        )
    )


def run_release(config: ReleaseConfig, ctx: ReleaseContext) -> Result[ReleaseOutcome, ReleaseError]:
    planned = plan_release(config, ctx)
    if isinstance(planned, Err):
        return planned
    plan = planned.value

    print_preview(plan, config, console=ctx.console, repo=ctx.repo)

    if config.dry_run:
        ctx.console.newline()
        ctx.console.info("Dry run only - no git actions performed.")
        return Ok(ReleaseOutcome(plan=plan, status="dry_run"))

    if not confirm_release(ctx.prompter):
        ctx.console.print("Aborted.")
        return Ok(ReleaseOutcome(plan=plan, status="aborted"))

    return publish_release(plan, config, ctx)
