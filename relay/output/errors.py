"""Error presentation utilities.

Centralized error formatting and exit code mapping for release jobs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from relay.core.errors import ErrorCode
from relay.output.console import Style
from relay.services.release.errors import ReleaseError

if TYPE_CHECKING:
    from relay.output.console import ConsoleProtocol

__all__ = ["print_release_error", "release_error_exit_code"]


def print_release_error(error: ReleaseError, console: ConsoleProtocol) -> None:
    console.error(error.message)
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)


def release_error_exit_code(error: ReleaseError) -> int:
    match error.kind:
        case "invalid_event" | "invalid_input":
            return int(ErrorCode.USER_ERROR)
        case "config_missing" | "git_failed":
            return int(ErrorCode.ENV_ERROR)
        case "webhook_failed" | "email_failed":
            return int(ErrorCode.NETWORK_ERROR)
    # Fallback for exhaustiveness
    return int(ErrorCode.USER_ERROR)
