from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

from relay.core.result import Err, Ok
from relay.git.repository import GitError, Repository
from relay.services.release.promotion import preview_tag_for, was_promoted_from_preview


def _repo(result: object) -> MagicMock:
    repo = MagicMock(spec=Repository)
    repo.tag_exists.return_value = result
    return repo


def test_preview_tag_name() -> None:
    assert preview_tag_for("v0.150.0") == "v0.150.0-pre"
    assert preview_tag_for("v2.0.0", suffix="-rc") == "v2.0.0-rc"


def test_promoted_when_preview_tag_exists() -> None:
    repo = _repo(Ok(True))

    assert was_promoted_from_preview(repo=repo, tag="v0.150.0") == Ok(True)
    repo.tag_exists.assert_called_once_with("v0.150.0-pre")


def test_not_promoted_when_preview_tag_absent() -> None:
    assert was_promoted_from_preview(repo=_repo(Ok(False)), tag="v0.150.0") == Ok(False)


def test_custom_suffix() -> None:
    repo = _repo(Ok(True))

    was_promoted_from_preview(repo=repo, tag="v3.1.0", suffix="-beta")

    repo.tag_exists.assert_called_once_with("v3.1.0-beta")


def test_git_failure_is_reported() -> None:
    repo = _repo(Err(GitError(command="rev-parse", message="not a git repository", returncode=128)))

    result = was_promoted_from_preview(repo=repo, tag="v0.150.0")

    assert isinstance(result, Err)
    assert result.error.kind == "git_failed"
    assert "v0.150.0-pre" in result.error.message
    assert "fetch-depth" in (result.error.hint or "")


def test_against_real_repository(tmp_path: Path) -> None:
    result = was_promoted_from_preview(repo=Repository(tmp_path / "missing"), tag="v1")

    assert isinstance(result, Err)
