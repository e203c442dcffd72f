from __future__ import annotations

from pathlib import Path

from relay.cli.commands import options
from relay.cli.commands._helpers import (
    exit_on_error,
    report_outcome,
    resolve_event,
    step_output_path,
)
from relay.cli.context import build_context
from relay.services.release.service import run_announce


def announce(
    event: Path | None = options.EVENT,
    tag: str | None = options.TAG,
    body: str | None = options.BODY,
    body_file: Path | None = options.BODY_FILE,
    prerelease: bool = options.PRERELEASE,
    owner: str | None = options.OWNER,
    webhook_url: str | None = options.WEBHOOK_URL,
    dry_run: bool = options.DRY_RUN,
) -> None:
    """Post the release announcement to the chat webhook."""
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

    outcome = exit_on_error(
        run_announce(
            event=release,
            config=ctx.config,
            http=ctx.http,
            webhook_url=webhook_url,
            console=ctx.console,
            dry_run=dry_run,
            verbose=ctx.verbose,
            step_output=step_output_path(),
        ),
        ctx,
    )
    report_outcome(outcome, ctx.console)
