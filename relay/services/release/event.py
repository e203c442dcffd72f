"""Release event loading.

GitHub Actions writes the triggering webhook payload to the file named by
``$GITHUB_EVENT_PATH``. For a release event the relevant fields are::

    {
      "action": "published",
      "release": {"tag_name": "v0.150.0", "body": "...", "prerelease": false},
      "repository": {"owner": {"login": "zed-industries"}}
    }
"""

from __future__ import annotations

import json
from pathlib import Path

from relay.core.result import Err, Ok, Result
from relay.core.structured import as_str_dict, get_bool, get_raw_str, get_str, get_table
from relay.services.release.errors import ReleaseError
from relay.services.release.model import ReleaseEvent

PUBLISHED_ACTION = "published"


def event_from_values(
    *,
    tag: str,
    body: str = "",
    prerelease: bool = False,
    owner: str | None = None,
) -> Result[ReleaseEvent, ReleaseError]:
    tag_name = tag.strip()
    if not tag_name:
        return Err(ReleaseError(kind="invalid_input", message="release tag must not be empty"))
    if any(ch.isspace() for ch in tag_name):
        return Err(
            ReleaseError(
                kind="invalid_input",
                message=f"release tag contains whitespace: {tag_name!r}",
            )
        )

    return Ok(
        ReleaseEvent(
            tag_name=tag_name,
            body=body,
            prerelease=prerelease,
            repository_owner=(owner or "").strip() or None,
        )
    )


def parse_release_event(data: object) -> Result[ReleaseEvent, ReleaseError]:
    root = as_str_dict(data)
    if root is None:
        return Err(ReleaseError(kind="invalid_event", message="event payload must be a JSON object"))

    action = get_str(root, "action")
    if action is not None and action != PUBLISHED_ACTION:
        return Err(
            ReleaseError(
                kind="invalid_event",
                message=f"unsupported release action: {action}",
                hint=f"only '{PUBLISHED_ACTION}' releases are announced",
            )
        )

    release = get_table(root, "release")
    if release is None:
        return Err(
            ReleaseError(
                kind="invalid_event",
                message="event payload has no 'release' object",
                hint="is this workflow triggered by a release event?",
            )
        )

    tag = get_str(release, "tag_name")
    if tag is None:
        return Err(ReleaseError(kind="invalid_event", message="release.tag_name is missing"))

    # GitHub sends null for a release without notes.
    body = get_raw_str(release, "body") or ""
    prerelease = get_bool(release, "prerelease")
    if prerelease is None:
        return Err(
            ReleaseError(kind="invalid_event", message="release.prerelease must be a boolean")
        )

    owner: str | None = None
    repository = get_table(root, "repository")
    if repository is not None:
        owner_table = get_table(repository, "owner")
        if owner_table is not None:
            owner = get_str(owner_table, "login")

    return event_from_values(tag=tag, body=body, prerelease=prerelease, owner=owner)


def load_release_event(path: Path) -> Result[ReleaseEvent, ReleaseError]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        return Err(
            ReleaseError(
                kind="invalid_event",
                message=f"failed to read event file: {e}",
                hint=str(path),
            )
        )

    try:
        data: object = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(
            ReleaseError(
                kind="invalid_event",
                message=f"event file is not valid JSON: {e}",
                hint=str(path),
            )
        )

    return parse_release_event(data)
