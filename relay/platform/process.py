"""Subprocess execution with Result-based error handling.

The only place in relay that spawns processes. Output is captured and
failures come back as ProcessError values.

Usage:
    match run(["git", "rev-parse", "--verify", "HEAD"], cwd=repo_root):
        case Ok(stdout):
            sha = stdout.strip()
        case Err(error):
            console.error(str(error))
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from relay.core.result import Err, Ok, Result

__all__ = ["ProcessError", "run"]


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: Exit code, or -1 when the process could not be started
            or timed out.
        stdout: Standard output (may be empty).
        stderr: Standard error (contains error details).
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str} failed (exit {self.returncode})"


def _failed(
    cmd: list[str], returncode: int, *, stdout: str = "", stderr: str = ""
) -> Err[ProcessError]:
    return Err(ProcessError(tuple(cmd), returncode, stdout, stderr))


def run(
    cmd: list[str],
    cwd: Path,
    env: dict[str, str] | None = None,
    *,
    timeout: float | None = None,
) -> Result[str, ProcessError]:
    """Run ``cmd`` in ``cwd`` with captured text output.

    ``env`` replaces the inherited environment when given. A process that
    cannot be started or exceeds ``timeout`` seconds is reported with
    returncode -1; any non-zero exit carries the captured streams.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            env=env,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        # With text=True the partial output may still arrive as bytes.
        seen = e.stdout.decode(errors="replace") if isinstance(e.stdout, bytes) else e.stdout
        return _failed(cmd, -1, stdout=seen or "", stderr=f"Command timed out after {timeout}s")
    except OSError as e:
        return _failed(cmd, -1, stderr=str(e))

    if proc.returncode:
        return _failed(cmd, proc.returncode, stdout=proc.stdout, stderr=proc.stderr)
    return Ok(proc.stdout)
