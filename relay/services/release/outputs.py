from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from relay.core.result import Err, Ok, Result
from relay.services.release.errors import ReleaseError


def write_step_outputs(path: Path, values: Mapping[str, str]) -> Result[None, ReleaseError]:
    """Append ``key=value`` lines to the GitHub Actions step output file."""
    lines: list[str] = []
    for key, value in values.items():
        if "\n" in value or "\r" in value:
            return Err(
                ReleaseError(
                    kind="invalid_input",
                    message=f"step output {key!r} must be a single line",
                )
            )
        lines.append(f"{key}={value}\n")

    try:
        with path.open("a", encoding="utf-8") as f:
            f.writelines(lines)
    except OSError as e:
        return Err(
            ReleaseError(
                kind="invalid_input",
                message=f"failed to write step outputs: {e}",
                hint=str(path),
            )
        )
    return Ok(None)


def bool_output(value: bool) -> str:
    return "true" if value else "false"
