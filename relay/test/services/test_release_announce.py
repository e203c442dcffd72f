from __future__ import annotations

import pytest

from relay.core.config import AnnounceConfig
from relay.core.result import Err, Ok
from relay.net.http import HttpError, MockHttpClient, RealHttpClient
from relay.services.release.announce import (
    format_announcement,
    post_announcement,
    release_url_for,
    truncate,
)
from relay.services.release.model import ReleaseEvent

HOOK = "https://discord.com/api/webhooks/123/secret-token"


def _event(body: str = "- Fixed things", *, prerelease: bool = False) -> ReleaseEvent:
    return ReleaseEvent(tag_name="v0.150.0", body=body, prerelease=prerelease)


class TestReleaseUrl:
    def test_stable(self) -> None:
        assert (
            release_url_for(prerelease=False, config=AnnounceConfig())
            == "https://zed.dev/releases/stable/latest"
        )

    def test_preview(self) -> None:
        assert (
            release_url_for(prerelease=True, config=AnnounceConfig())
            == "https://zed.dev/releases/preview/latest"
        )


class TestTruncate:
    def test_short_text_unchanged(self) -> None:
        assert truncate("hello", max_length=10) == "hello"

    def test_exact_length_unchanged(self) -> None:
        text = "x" * 2000
        assert truncate(text, max_length=2000) == text

    def test_one_over_is_truncated(self) -> None:
        result = truncate("x" * 2001, max_length=2000)
        assert len(result) == 2000
        assert result == "x" * 1997 + "..."

    def test_custom_symbol(self) -> None:
        assert truncate("abcdefghij", max_length=6, symbol="~") == "abcde~"

    def test_empty_symbol(self) -> None:
        assert truncate("abcdefghij", max_length=4, symbol="") == "abcd"

    def test_limit_shorter_than_symbol(self) -> None:
        with pytest.raises(ValueError):
            truncate("abcdef", max_length=2, symbol="...")


class TestFormatAnnouncement:
    def test_stable_template(self) -> None:
        content = format_announcement(_event(), config=AnnounceConfig())
        assert content == (
            "📣 Zed [v0.150.0](<https://zed.dev/releases/stable/latest>) was just released!"
            "\n\n- Fixed things"
        )

    def test_preview_uses_preview_url(self) -> None:
        content = format_announcement(_event(prerelease=True), config=AnnounceConfig())
        assert "(<https://zed.dev/releases/preview/latest>)" in content

    def test_empty_body_keeps_heading(self) -> None:
        content = format_announcement(_event(""), config=AnnounceConfig())
        assert content.endswith("was just released!\n\n")

    def test_long_body_is_cut_to_limit(self) -> None:
        content = format_announcement(_event("y" * 5000), config=AnnounceConfig())
        assert len(content) == 2000
        assert content.endswith("...")
        assert content.startswith("📣 Zed [v0.150.0]")

    def test_body_at_limit_has_no_marker(self) -> None:
        heading = format_announcement(_event(""), config=AnnounceConfig())
        body = "z" * (2000 - len(heading))
        content = format_announcement(_event(body), config=AnnounceConfig())
        assert len(content) == 2000
        assert content == heading + body

    def test_custom_product_and_limit(self) -> None:
        config = AnnounceConfig(product="Acme", max_length=40, truncation_symbol="…")
        content = format_announcement(_event("long " * 50), config=config)
        assert content.startswith("📣 Acme [")
        assert len(content) == 40
        assert content.endswith("…")


class TestPostAnnouncement:
    def test_posts_content_payload(self) -> None:
        http = MockHttpClient()

        result = post_announcement(http=http, webhook_url=HOOK, content="hello")

        assert result == Ok(None)
        assert http.requests[0].url == HOOK
        assert http.requests[0].payload == {"content": "hello"}

    def test_failure_does_not_leak_webhook_url(self) -> None:
        http = MockHttpClient()
        http.set_response(HOOK, HttpError(url=HOOK, status=404, message="Not Found"))

        result = post_announcement(http=http, webhook_url=HOOK, content="hello")

        assert isinstance(result, Err)
        assert result.error.kind == "webhook_failed"
        assert "HTTP 404" in result.error.message
        assert "secret-token" not in result.error.message

    def test_transport_error_echoing_url_is_redacted(self) -> None:
        http = MockHttpClient()
        http.set_response(HOOK, HttpError(url=HOOK, status=0, message=f"unknown url type: {HOOK}"))

        result = post_announcement(http=http, webhook_url=HOOK, content="hello")

        assert isinstance(result, Err)
        assert "secret-token" not in result.error.message
        assert "invalid URL" in result.error.message

    def test_malformed_webhook_url_is_not_echoed(self) -> None:
        url = "discord.com/api/webhooks/123/secret-token"

        result = post_announcement(http=RealHttpClient(), webhook_url=url, content="hello")

        assert isinstance(result, Err)
        assert "secret-token" not in result.error.message

    def test_single_attempt_only(self) -> None:
        http = MockHttpClient()
        http.set_response(HOOK, HttpError(url=HOOK, status=0, message="Connection refused"))

        post_announcement(http=http, webhook_url=HOOK, content="hello")

        assert len(http.requests) == 1
