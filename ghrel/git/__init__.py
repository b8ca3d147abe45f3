"""Git operations module.

Usage:
    from ghrel.git import Repository

    repo = Repository(Path("."), runner=SubprocessRunner(cwd=Path(".")))
    latest = repo.latest_tag()
"""

from ghrel.git.repository import GitError, Repository

__all__ = [
    "GitError",
    "Repository",
]
