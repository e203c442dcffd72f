"""Tests for git/repository.py."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from relay.core.result import Err, Ok
from relay.git.repository import Repository
from relay.platform.process import ProcessError

from .conftest import git


class TestTagExists:
    def test_missing_tag(self, git_repo: Path) -> None:
        assert Repository(git_repo).tag_exists("v0.150.0-pre") == Ok(False)

    def test_lightweight_tag(self, git_repo: Path) -> None:
        git(git_repo, "tag", "v0.150.0-pre")

        assert Repository(git_repo).tag_exists("v0.150.0-pre") == Ok(True)

    def test_annotated_tag(self, git_repo: Path) -> None:
        git(git_repo, "tag", "-a", "v0.150.0-pre", "-m", "preview")

        assert Repository(git_repo).tag_exists("v0.150.0-pre") == Ok(True)

    def test_branch_with_same_name_is_not_a_tag(self, git_repo: Path) -> None:
        git(git_repo, "branch", "v0.150.0-pre")

        assert Repository(git_repo).tag_exists("v0.150.0-pre") == Ok(False)

    def test_prefix_does_not_match(self, git_repo: Path) -> None:
        git(git_repo, "tag", "v0.150.0-pre.1")

        assert Repository(git_repo).tag_exists("v0.150.0-pre") == Ok(False)

    def test_not_a_repository(self, tmp_path: Path) -> None:
        result = Repository(tmp_path).tag_exists("v0.150.0-pre")

        assert isinstance(result, Err)
        assert result.error.command == "rev-parse"
        assert result.error.returncode != 1

    def test_missing_directory(self, tmp_path: Path) -> None:
        result = Repository(tmp_path / "nope").tag_exists("v1")

        assert isinstance(result, Err)

    def test_runs_rev_parse_on_tag_ref(self) -> None:
        with patch("relay.git.repository.run_process", return_value=Ok("abc123\n")) as run:
            result = Repository(Path("/repo")).tag_exists("v1.0.0-pre")

        assert result == Ok(True)
        cmd = run.call_args.args[0]
        assert cmd == [
            "git",
            "-C",
            str(Path("/repo")),
            "rev-parse",
            "--verify",
            "--quiet",
            "refs/tags/v1.0.0-pre",
        ]

    def test_exit_one_with_stderr_is_an_error(self) -> None:
        failure = Err(ProcessError(("git",), 1, "", "error: something odd"))
        with patch("relay.git.repository.run_process", return_value=failure):
            result = Repository(Path("/repo")).tag_exists("v1")

        assert isinstance(result, Err)
        assert result.error.message == "error: something odd"
