"""Release service: metadata, version guard, changelog, git and gh steps."""

from ghrel.services.release.workflow import (
    ReleaseContext,
    ReleaseOutcome,
    ReleasePlan,
    run_release,
)

__all__ = [
    "ReleaseContext",
    "ReleaseOutcome",
    "ReleasePlan",
    "run_release",
]
