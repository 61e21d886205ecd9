"""HTTP transport used to deliver alias requests."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from .config import Settings

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Sends one request and returns the raw response."""

    def send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        debug: bool = False,
    ) -> httpx.Response:
        ...


def _format_headers(headers: httpx.Headers) -> str:
    return "\n".join(f"{name}: {value}" for name, value in headers.items())


def dump_request(request: httpx.Request) -> str:
    """Render an outbound request roughly as it appears on the wire."""
    target = request.url.raw_path.decode("ascii")
    body = request.content.decode("utf-8", errors="replace")
    return f"{request.method} {target} HTTP/1.1\n{_format_headers(request.headers)}\n\n{body}"


def dump_response(response: httpx.Response) -> str:
    """Render an inbound response roughly as it appears on the wire."""
    return (
        f"{response.http_version} {response.status_code} {response.reason_phrase}\n"
        f"{_format_headers(response.headers)}\n\n{response.text}"
    )


class HttpTransport:
    """Blocking httpx transport bound to one cluster endpoint.

    Timeouts and cancellation are whatever the underlying ``httpx.Client``
    enforces. Not safe for concurrent use.
    """

    def __init__(
        self,
        settings: Settings,
        http: httpx.Client | None = None,
    ) -> None:
        self.settings = settings
        self.http = http or httpx.Client(
            base_url=settings.base_url,
            auth=self._basic_auth(settings),
            headers={"Accept": "application/json"},
            timeout=httpx.Timeout(
                connect=settings.connect_timeout,
                read=settings.read_timeout,
                write=settings.write_timeout,
                pool=settings.pool_timeout,
            ),
        )

    @staticmethod
    def _basic_auth(settings: Settings) -> httpx.BasicAuth | None:
        password = settings.password.get_secret_value()
        if settings.username and password:
            return httpx.BasicAuth(settings.username, password)
        return None

    def close(self) -> None:
        self.http.close()

    def send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        debug: bool = False,
    ) -> httpx.Response:
        request = self.http.build_request(method, path, params=params, json=json)
        if debug:
            logger.info("alias_request_dump\n%s", dump_request(request))

        try:
            response = self.http.send(request)
        except httpx.TransportError as exc:
            logger.warning("alias_transport_failed: %s %s: %s", method, path, exc)
            raise

        if debug:
            logger.info("alias_response_dump\n%s", dump_response(response))
        return response
