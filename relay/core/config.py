"""Typed configuration loading and access.

This module provides dataclasses for the relay.toml structure. Every value
has a default, so running without a config file announces Zed releases
exactly as the release workflow does.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_float, get_int, get_str, get_table

__all__ = [
    "AnnounceConfig",
    "Config",
    "ConfigError",
    "EmailConfig",
    "GuardConfig",
    "HttpConfig",
    "DEFAULT_CONFIG_FILE",
    "load_config",
    "load_config_or_default",
]

# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------

DEFAULT_CONFIG_FILE = "relay.toml"

DEFAULT_PRODUCT = "Zed"
DEFAULT_PREVIEW_URL = "https://zed.dev/releases/preview/latest"
DEFAULT_STABLE_URL = "https://zed.dev/releases/stable/latest"
DEFAULT_MAX_LENGTH = 2000
DEFAULT_TRUNCATION_SYMBOL = "..."

DEFAULT_EMAIL_API_URL = "https://zed.dev/api/send_release_notes_email"
DEFAULT_PREVIEW_SUFFIX = "-pre"

DEFAULT_REPOSITORY_OWNER = "zed-industries"

DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class AnnounceConfig:
    """Chat announcement settings."""

    product: str = DEFAULT_PRODUCT
    preview_url: str = DEFAULT_PREVIEW_URL
    stable_url: str = DEFAULT_STABLE_URL
    max_length: int = DEFAULT_MAX_LENGTH
    truncation_symbol: str = DEFAULT_TRUNCATION_SYMBOL


@dataclass(frozen=True, slots=True)
class EmailConfig:
    """Release-notes email settings."""

    api_url: str = DEFAULT_EMAIL_API_URL
    preview_suffix: str = DEFAULT_PREVIEW_SUFFIX


@dataclass(frozen=True, slots=True)
class GuardConfig:
    """Event guard.

    ``repository_owner`` of None disables the owner check.
    """

    repository_owner: str | None = DEFAULT_REPOSITORY_OWNER


@dataclass(frozen=True, slots=True)
class HttpConfig:
    timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    announce: AnnounceConfig = field(default_factory=AnnounceConfig)
    email: EmailConfig = field(default_factory=EmailConfig)
    guard: GuardConfig = field(default_factory=GuardConfig)
    http: HttpConfig = field(default_factory=HttpConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: If a value is present but out of range.
        """
        announce: StrDict = get_table(data, "announce") or {}
        email: StrDict = get_table(data, "email") or {}
        guard: StrDict = get_table(data, "guard") or {}
        http: StrDict = get_table(data, "http") or {}

        max_length = get_int(announce, "max_length")
        if max_length is None:
            max_length = DEFAULT_MAX_LENGTH
        # The symbol may legitimately be "", so it is not read via get_str.
        symbol_obj = announce.get("truncation_symbol", DEFAULT_TRUNCATION_SYMBOL)
        symbol = symbol_obj if isinstance(symbol_obj, str) else DEFAULT_TRUNCATION_SYMBOL
        if max_length <= 0:
            raise ValueError("announce.max_length must be positive")
        if max_length < len(symbol):
            raise ValueError(
                f"announce.max_length ({max_length}) is shorter than the truncation symbol"
            )

        # An explicit empty string turns the owner guard off.
        owner: str | None = DEFAULT_REPOSITORY_OWNER
        if "repository_owner" in guard:
            owner = get_str(guard, "repository_owner")

        timeout = get_float(http, "timeout")
        if timeout is None:
            timeout = DEFAULT_HTTP_TIMEOUT_SECONDS
        if timeout <= 0:
            raise ValueError("http.timeout must be positive")

        return cls(
            announce=AnnounceConfig(
                product=get_str(announce, "product") or DEFAULT_PRODUCT,
                preview_url=get_str(announce, "preview_url") or DEFAULT_PREVIEW_URL,
                stable_url=get_str(announce, "stable_url") or DEFAULT_STABLE_URL,
                max_length=max_length,
                truncation_symbol=symbol,
            ),
            email=EmailConfig(
                api_url=get_str(email, "api_url") or DEFAULT_EMAIL_API_URL,
                preview_suffix=get_str(email, "preview_suffix") or DEFAULT_PREVIEW_SUFFIX,
            ),
            guard=GuardConfig(repository_owner=owner),
            http=HttpConfig(timeout=timeout),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to relay.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Load config if the file exists, otherwise return defaults.

    A file that exists but cannot be parsed is still an error.
    """
    if not path.exists():
        return Ok(Config())
    return load_config(path)
