"""Git repository abstraction.

Read-only lookups against the checkout the release workflow runs in.
All operations return Result types.

Usage:
    repo = Repository(Path("."))

    match repo.tag_exists("v0.150.0-pre"):
        case Ok(found):
            print("promoted" if found else "direct stable release")
        case Err(e):
            print(f"git failed: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from relay.core.result import Err, Ok, Result
from relay.platform.process import ProcessError
from relay.platform.process import run as run_process

_GIT_TIMEOUT_SECONDS = 30.0

__all__ = [
    "GitError",
    "Repository",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git command that failed
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


class Repository:
    """Git repository abstraction.

    Attributes:
        path: Path to the repository root (or any directory inside it)
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def tag_exists(self, name: str) -> Result[bool, GitError]:
        """Check whether a tag with this exact name exists.

        Only ``refs/tags/<name>`` is considered, so a branch with the same
        name never counts.

        Returns:
            Ok(True) if the tag exists, Ok(False) if it does not,
            Err(GitError) if the lookup itself failed (not a repository,
            git missing, timeout).
        """
        result = self._run(["rev-parse", "--verify", "--quiet", f"refs/tags/{name}"])
        match result:
            case Ok(_):
                return Ok(True)
            case Err(e) if e.returncode == 1 and not e.stderr.strip():
                # --quiet: a missing ref exits 1 without output.
                return Ok(False)
            case Err(e):
                return Err(
                    GitError(
                        command="rev-parse",
                        message=e.stderr.strip() or "git rev-parse failed",
                        returncode=e.returncode,
                    )
                )

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        """Run a git command in this repository."""
        return run_process(
            ["git", "-C", str(self.path), *args],
            cwd=self.path,
            timeout=_GIT_TIMEOUT_SECONDS,
        )
