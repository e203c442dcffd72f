"""Error codes for CLI exit status.

The values map directly to process exit codes, so CI marks a run failed
with a code that tells what kind of failure happened.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (bad flags, malformed event payload)
    - 2: Environment error (missing secret, not a git repository)
    - 4: Network error (webhook or API request failed)
    - 5: I/O error (config or event file unreadable)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    NETWORK_ERROR = 4
    IO_ERROR = 5
