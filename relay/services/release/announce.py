from __future__ import annotations

from relay.core.config import AnnounceConfig
from relay.core.result import Err, Ok, Result
from relay.net.http import HttpClient
from relay.services.release.errors import ReleaseError
from relay.services.release.model import ReleaseEvent

ANNOUNCEMENT_TEMPLATE = "📣 {product} [{tag}](<{url}>) was just released!\n\n{body}"


def release_url_for(*, prerelease: bool, config: AnnounceConfig) -> str:
    return config.preview_url if prerelease else config.stable_url


def truncate(text: str, *, max_length: int, symbol: str = "...") -> str:
    """Cut ``text`` down to ``max_length`` characters.

    Text that already fits is returned unchanged. Otherwise the tail is
    replaced by ``symbol`` so that the result is exactly ``max_length`` long.

    Raises:
        ValueError: If ``max_length`` cannot hold ``symbol``.
    """
    if max_length < len(symbol):
        raise ValueError(f"max_length {max_length} is shorter than symbol {symbol!r}")
    if len(text) <= max_length:
        return text
    return text[: max_length - len(symbol)] + symbol


def format_announcement(event: ReleaseEvent, *, config: AnnounceConfig) -> str:
    content = ANNOUNCEMENT_TEMPLATE.format(
        product=config.product,
        tag=event.tag_name,
        url=release_url_for(prerelease=event.prerelease, config=config),
        body=event.body,
    )
    return truncate(content, max_length=config.max_length, symbol=config.truncation_symbol)


def webhook_payload(content: str) -> dict[str, object]:
    return {"content": content}


def post_announcement(
    *,
    http: HttpClient,
    webhook_url: str,
    content: str,
) -> Result[None, ReleaseError]:
    result = http.post_json(webhook_url, webhook_payload(content))
    if isinstance(result, Err):
        error = result.error
        # The webhook URL embeds its token; report the status only.
        if error.status:
            status = f"HTTP {error.status}: {error.message}"
        elif webhook_url in error.message:
            status = "invalid URL"
        else:
            status = error.message
        return Err(
            ReleaseError(
                kind="webhook_failed",
                message=f"announcement webhook failed ({status})",
                hint=error.body or None,
            )
        )
    return Ok(None)
