from __future__ import annotations

import os
from pathlib import Path

import typer

from relay import __version__
from relay.cli.commands.announce import announce
from relay.cli.commands.notes_email import notes_email
from relay.cli.commands.promotion import check_promotion_cmd
from relay.cli.commands.run_cmd import run
from relay.cli.context import CONFIG_ENV, NO_COLOR_ENV, VERBOSE_ENV
from relay.core.errors import ErrorCode


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command()(announce)
app.command("notes-email")(notes_email)
app.command("check-promotion")(check_promotion_cmd)
app.command()(run)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Config file (default: ./relay.toml when present)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print rendered payloads."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output."),
) -> None:
    """Announce published releases and email promoted release notes."""
    if config is not None:
        path = config.expanduser()
        if not path.is_file():
            typer.echo(f"error: --config '{path}' is not a file", err=True)
            raise typer.Exit(code=int(ErrorCode.IO_ERROR))
        os.environ[CONFIG_ENV] = str(path)

    if verbose:
        os.environ[VERBOSE_ENV] = "1"
    if no_color:
        os.environ[NO_COLOR_ENV] = "1"


def main() -> None:
    app()
