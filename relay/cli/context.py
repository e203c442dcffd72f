from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from relay.core.config import DEFAULT_CONFIG_FILE, Config, load_config, load_config_or_default
from relay.core.errors import ErrorCode
from relay.core.result import Err
from relay.net.http import HttpClient, RealHttpClient
from relay.output.console import ConsoleProtocol, RichConsole

CONFIG_ENV = "RELAY_CONFIG"
VERBOSE_ENV = "RELAY_VERBOSE"
NO_COLOR_ENV = "NO_COLOR"


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: ConsoleProtocol
    http: HttpClient
    verbose: bool = False


def build_context() -> CLIContext:
    explicit = os.environ.get(CONFIG_ENV, "").strip()
    if explicit:
        config_result = load_config(Path(explicit).expanduser())
    else:
        config_result = load_config_or_default(Path.cwd() / DEFAULT_CONFIG_FILE)

    if isinstance(config_result, Err):
        typer.echo(f"error: {config_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.IO_ERROR))

    config = config_result.value
    return CLIContext(
        config=config,
        console=RichConsole(no_color=bool(os.environ.get(NO_COLOR_ENV))),
        http=RealHttpClient(timeout=config.http.timeout),
        verbose=os.environ.get(VERBOSE_ENV) == "1",
    )
