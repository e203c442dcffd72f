"""Shared helpers for CLI commands."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

import typer

from relay.core.errors import ErrorCode
from relay.core.result import Err, Result
from relay.output.console import ConsoleProtocol
from relay.output.errors import print_release_error, release_error_exit_code
from relay.services.release.config import EVENT_PATH_ENV, STEP_OUTPUT_ENV
from relay.services.release.errors import ReleaseError
from relay.services.release.event import event_from_values, load_release_event
from relay.services.release.model import JobOutcome, ReleaseEvent

if TYPE_CHECKING:
    from relay.cli.context import CLIContext


def exit_on_error[T](result: Result[T, ReleaseError], ctx: CLIContext) -> T:
    """Return the Ok value, or print the error and exit with its code."""
    if isinstance(result, Err):
        print_release_error(result.error, ctx.console)
        raise typer.Exit(code=release_error_exit_code(result.error))
    return result.value


def exit_with_code(code: int) -> NoReturn:
    raise typer.Exit(code=code)


def resolve_event(
    ctx: CLIContext,
    *,
    event_path: Path | None,
    tag: str | None,
    body: str | None,
    body_file: Path | None,
    prerelease: bool,
    owner: str | None,
) -> ReleaseEvent:
    """Build the release event from flags, or from the event payload file.

    ``--tag`` selects manual mode; otherwise ``--event`` or
    ``$GITHUB_EVENT_PATH`` must name a release event payload.
    """
    if tag is not None:
        text = body or ""
        if body_file is not None:
            try:
                text = body_file.read_text(encoding="utf-8")
            except OSError as e:
                ctx.console.error(f"failed to read --body-file: {e}")
                exit_with_code(int(ErrorCode.IO_ERROR))
        return exit_on_error(
            event_from_values(tag=tag, body=text, prerelease=prerelease, owner=owner),
            ctx,
        )

    if event_path is None:
        env_path = os.environ.get(EVENT_PATH_ENV, "").strip()
        if not env_path:
            ctx.console.error("no release event")
            ctx.console.info(f"pass --event, set {EVENT_PATH_ENV}, or use --tag")
            exit_with_code(int(ErrorCode.USER_ERROR))
        event_path = Path(env_path)

    return exit_on_error(load_release_event(event_path), ctx)


def step_output_path() -> Path | None:
    raw = os.environ.get(STEP_OUTPUT_ENV, "").strip()
    return Path(raw) if raw else None


def report_outcome(outcome: JobOutcome, console: ConsoleProtocol) -> None:
    match outcome.status:
        case "sent":
            console.success(f"{outcome.job}: sent ({outcome.detail})")
        case "skipped":
            console.info(f"{outcome.job}: skipped ({outcome.detail})")
        case "dry_run":
            console.info(f"{outcome.job}: dry run, nothing sent ({outcome.detail})")
