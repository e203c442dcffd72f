from __future__ import annotations

from pathlib import Path

import typer

from relay.cli.commands import options
from relay.cli.commands._helpers import exit_on_error, step_output_path
from relay.cli.context import build_context
from relay.git.repository import Repository
from relay.services.release.event import event_from_values
from relay.services.release.outputs import bool_output
from relay.services.release.service import check_promotion


def check_promotion_cmd(
    tag: str = typer.Argument(..., help="Stable release tag, e.g. v0.150.0"),
    repo: Path = options.REPO,
) -> None:
    """Print whether TAG was promoted from a preview tag (true/false)."""
    ctx = build_context()
    release = exit_on_error(event_from_values(tag=tag), ctx)
    promoted = exit_on_error(
        check_promotion(
            event=release,
            config=ctx.config,
            repo=Repository(repo),
            step_output=step_output_path(),
        ),
        ctx,
    )
    typer.echo(bool_output(promoted))
