"""HTTP client abstraction for webhook and API calls.

This module provides:
- HttpClient: Protocol for HTTP operations (injectable for tests)
- RealHttpClient: Real implementation using urllib
- MockHttpClient: Mock implementation that records requests
"""

from __future__ import annotations

import json
import ssl
import urllib.error
import urllib.request
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from relay import __version__
from relay.core.result import Err, Ok, Result

__all__ = [
    "HttpClient",
    "HttpError",
    "HttpResponse",
    "MockHttpClient",
    "RecordedRequest",
    "RealHttpClient",
]


@dataclass(frozen=True, slots=True)
class HttpError:
    """HTTP error details.

    Attributes:
        url: The URL that failed
        status: HTTP status code (0 for network errors)
        message: Human-readable error message
        body: Response body, when the server sent one
    """

    url: str
    status: int
    message: str
    body: str = ""

    def __str__(self) -> str:
        if self.status:
            return f"HTTP {self.status}: {self.message} ({self.url})"
        return f"{self.message} ({self.url})"


@dataclass(frozen=True, slots=True)
class HttpResponse:
    """A successful (2xx) response."""

    status: int
    body: str


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for HTTP operations.

    Lets tests inject a recording client instead of making network calls.
    """

    def post_json(
        self,
        url: str,
        payload: Mapping[str, object],
        headers: Mapping[str, str] | None = None,
    ) -> Result[HttpResponse, HttpError]:
        """POST ``payload`` encoded as JSON.

        Args:
            url: Target URL
            payload: JSON-serializable mapping
            headers: Extra request headers (e.g. Authorization)

        Returns:
            Ok with the response for 2xx statuses, or Err with HttpError
        """
        ...


class RealHttpClient:
    """Real HTTP client using urllib.

    Handles:
    - HTTPS with system certificates
    - JSON request encoding
    - Timeout handling

    Requests are sent once; there is no retry.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str = f"relay/{__version__}",
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self._ssl_context = ssl.create_default_context()

    def post_json(
        self,
        url: str,
        payload: Mapping[str, object],
        headers: Mapping[str, str] | None = None,
    ) -> Result[HttpResponse, HttpError]:
        """POST JSON and return the decoded response body."""
        try:
            data = json.dumps(payload, ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            return Err(HttpError(url=url, status=0, message=f"JSON encode error: {e}"))

        req_headers = {
            "User-Agent": self.user_agent,
            "Content-Type": "application/json",
        }
        if headers:
            req_headers.update(headers)

        try:
            req = urllib.request.Request(url, data=data, headers=req_headers, method="POST")
            with urllib.request.urlopen(
                req,
                timeout=self.timeout,
                context=self._ssl_context,
            ) as response:
                body = response.read().decode("utf-8", errors="replace")
                return Ok(HttpResponse(status=response.status, body=body))
        except urllib.error.HTTPError as e:
            return Err(
                HttpError(
                    url=url,
                    status=e.code,
                    message=str(e.reason),
                    body=_read_error_body(e),
                )
            )
        except urllib.error.URLError as e:
            return Err(HttpError(url=url, status=0, message=str(e.reason)))
        except TimeoutError:
            return Err(HttpError(url=url, status=0, message="Request timed out"))
        except ValueError:
            # urllib echoes the full URL, which may carry credentials.
            return Err(HttpError(url=url, status=0, message="invalid URL"))
        except OSError as e:
            return Err(HttpError(url=url, status=0, message=str(e)))


def _read_error_body(error: urllib.error.HTTPError) -> str:
    try:
        return error.read().decode("utf-8", errors="replace").strip()
    except OSError:
        return ""


@dataclass(frozen=True, slots=True)
class RecordedRequest:
    """A request captured by MockHttpClient."""

    method: str
    url: str
    payload: dict[str, object]
    headers: dict[str, str]


def _empty_requests() -> list[RecordedRequest]:
    return []


@dataclass
class MockHttpClient:
    """Mock HTTP client for testing.

    Every URL answers 204 unless a response was set for it.

    Usage:
        client = MockHttpClient()
        client.set_response("https://hooks.example/x", HttpError(url=..., status=500, message="boom"))
        client.post_json("https://hooks.example/x", {"content": "hi"})
        assert client.requests[0].payload == {"content": "hi"}
    """

    requests: list[RecordedRequest] = field(default_factory=_empty_requests)
    _responses: dict[str, HttpResponse | HttpError] = field(default_factory=dict)

    def set_response(self, url: str, response: HttpResponse | HttpError) -> None:
        self._responses[url] = response

    def post_json(
        self,
        url: str,
        payload: Mapping[str, object],
        headers: Mapping[str, str] | None = None,
    ) -> Result[HttpResponse, HttpError]:
        self.requests.append(
            RecordedRequest(
                method="POST",
                url=url,
                payload=dict(payload),
                headers=dict(headers or {}),
            )
        )

        response = self._responses.get(url, HttpResponse(status=204, body=""))
        if isinstance(response, HttpError):
            return Err(response)
        return Ok(response)

    @property
    def urls(self) -> list[str]:
        return [r.url for r in self.requests]
