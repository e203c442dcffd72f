"""Options shared by the release commands."""

from __future__ import annotations

from pathlib import Path

import typer

from relay.services.release.config import (
    EVENT_PATH_ENV,
    RELEASE_NOTES_TOKEN_ENV,
    WEBHOOK_URL_ENV,
)

EVENT = typer.Option(
    None,
    "--event",
    help=f"Release event payload (default: ${EVENT_PATH_ENV})",
    dir_okay=False,
)
TAG = typer.Option(None, "--tag", help="Release tag (manual mode, ignores --event)")
BODY = typer.Option(None, "--body", help="Release notes (manual mode)")
BODY_FILE = typer.Option(
    None,
    "--body-file",
    help="Read release notes from a file (manual mode)",
    dir_okay=False,
)
PRERELEASE = typer.Option(
    False,
    "--prerelease/--stable",
    help="Whether the release is a preview (manual mode)",
)
OWNER = typer.Option(None, "--owner", help="Repository owner (manual mode)")
REPO = typer.Option(
    Path("."),
    "--repo",
    help="Git checkout used for the preview tag lookup",
    file_okay=False,
)
WEBHOOK_URL = typer.Option(
    None,
    "--webhook-url",
    envvar=WEBHOOK_URL_ENV,
    help="Chat webhook URL",
    show_envvar=True,
    show_default=False,
)
TOKEN = typer.Option(
    None,
    "--token",
    envvar=RELEASE_NOTES_TOKEN_ENV,
    help="Bearer token for the release notes API",
    show_envvar=True,
    show_default=False,
)
DRY_RUN = typer.Option(False, "--dry-run", help="Render payloads without sending them")
