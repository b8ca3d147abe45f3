"""Error codes for CLI exit status.

Exit codes used by the `ghrel` command. A clean abort at the confirmation
prompt is not an error and exits with OK.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for the CLI.

    These values are used as process exit codes and should remain stable:
    - 0: Success (including dry runs and declined confirmations)
    - 1: User error (missing target file, bad version, stale version)
    - 2: Environment error (git failed, not a repository)
    - 4: Network error (release publication failed)
    - 5: I/O error (changelog could not be written)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    NETWORK_ERROR = 4
    IO_ERROR = 5
