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
from relay.git.repository import Repository
from relay.services.release.service import run_release_notes_email


def notes_email(
    event: Path | None = options.EVENT,
    tag: str | None = options.TAG,
    body: str | None = options.BODY,
    body_file: Path | None = options.BODY_FILE,
    prerelease: bool = options.PRERELEASE,
    owner: str | None = options.OWNER,
    repo: Path = options.REPO,
    token: str | None = options.TOKEN,
    dry_run: bool = options.DRY_RUN,
) -> None:
    """Email the release notes when a stable release was promoted from preview."""
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
        run_release_notes_email(
            event=release,
            config=ctx.config,
            http=ctx.http,
            repo=Repository(repo),
            token=token,
            console=ctx.console,
            dry_run=dry_run,
            verbose=ctx.verbose,
            step_output=step_output_path(),
        ),
        ctx,
    )
    report_outcome(outcome, ctx.console)
