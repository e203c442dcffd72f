from __future__ import annotations

from pathlib import Path

import typer

from relay.cli.commands import options
from relay.cli.commands._helpers import report_outcome, resolve_event, step_output_path
from relay.cli.context import CLIContext, build_context
from relay.core.errors import ErrorCode
from relay.core.result import Err, Result
from relay.git.repository import Repository
from relay.output.errors import print_release_error, release_error_exit_code
from relay.services.release.errors import ReleaseError
from relay.services.release.model import JobOutcome
from relay.services.release.service import run_announce, run_release_notes_email


def _report(result: Result[JobOutcome, ReleaseError], ctx: CLIContext) -> int:
    if isinstance(result, Err):
        print_release_error(result.error, ctx.console)
        return release_error_exit_code(result.error)
    report_outcome(result.value, ctx.console)
    return int(ErrorCode.OK)


def run(
    event: Path | None = options.EVENT,
    tag: str | None = options.TAG,
    body: str | None = options.BODY,
    body_file: Path | None = options.BODY_FILE,
    prerelease: bool = options.PRERELEASE,
    owner: str | None = options.OWNER,
    repo: Path = options.REPO,
    webhook_url: str | None = options.WEBHOOK_URL,
    token: str | None = options.TOKEN,
    dry_run: bool = options.DRY_RUN,
) -> None:
    """Run both release jobs. A failing job does not stop the other one."""
    ctx = build_context()
    release = resolve_event(
        ctx,
        event_path=event,
        tag=tag,
        body=body,
        body_file=body_file,
        prerelease=prerelease,
        owner=owner,
    )
    step_output = step_output_path()

    ctx.console.header("announce")
    announce_code = _report(
        run_announce(
            event=release,
            config=ctx.config,
            http=ctx.http,
            webhook_url=webhook_url,
            console=ctx.console,
            dry_run=dry_run,
            verbose=ctx.verbose,
            step_output=step_output,
        ),
        ctx,
    )

    ctx.console.header("release notes email")
    email_code = _report(
        run_release_notes_email(
            event=release,
            config=ctx.config,
            http=ctx.http,
            repo=Repository(repo),
            token=token,
            console=ctx.console,
            dry_run=dry_run,
            verbose=ctx.verbose,
            step_output=step_output,
        ),
        ctx,
    )

    # First failure wins.
    exit_code = announce_code or email_code
    if exit_code:
        raise typer.Exit(code=exit_code)
