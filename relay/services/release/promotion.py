from __future__ import annotations

from relay.core.result import Err, Ok, Result
from relay.git.repository import Repository
from relay.services.release.errors import ReleaseError


def preview_tag_for(tag: str, *, suffix: str = "-pre") -> str:
    return f"{tag}{suffix}"


def was_promoted_from_preview(
    *,
    repo: Repository,
    tag: str,
    suffix: str = "-pre",
) -> Result[bool, ReleaseError]:
    """Return whether ``<tag><suffix>`` exists in the repository's tags.

    Only existence is checked. The preview tag may point at a different
    commit than the stable tag.
    """
    preview_tag = preview_tag_for(tag, suffix=suffix)
    result = repo.tag_exists(preview_tag)
    if isinstance(result, Err):
        return Err(
            ReleaseError(
                kind="git_failed",
                message=f"failed to look up tag {preview_tag}: {result.error.message}",
                hint="run inside a full clone (actions/checkout with fetch-depth: 0)",
            )
        )
    return Ok(result.value)
