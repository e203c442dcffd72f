from __future__ import annotations

from relay.core.result import Err, Ok, Result
from relay.net.http import HttpClient
from relay.services.release.errors import ReleaseError
from relay.services.release.model import ReleaseEvent


def build_email_payload(event: ReleaseEvent) -> dict[str, object]:
    return {"version": event.tag_name, "markdown_body": event.body}


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def send_release_notes_email(
    *,
    http: HttpClient,
    api_url: str,
    token: str,
    event: ReleaseEvent,
) -> Result[None, ReleaseError]:
    result = http.post_json(api_url, build_email_payload(event), auth_headers(token))
    if isinstance(result, Err):
        error = result.error
        hint = error.body or None
        if error.status in {401, 403}:
            hint = "check the release notes API token"
        return Err(
            ReleaseError(
                kind="email_failed",
                message=f"release notes email request failed: {error}",
                hint=hint,
            )
        )
    return Ok(None)
