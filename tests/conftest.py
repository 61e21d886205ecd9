from __future__ import annotations

from typing import Any

import httpx
import pytest
from index_aliases.config import Settings


class RecordingTransport:
    """Transport stub that records requests and replays a canned response."""

    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        self.calls: list[dict[str, Any]] = []

    def send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        debug: bool = False,
    ) -> httpx.Response:
        self.calls.append(
            {"method": method, "path": path, "params": params, "json": json, "debug": debug}
        )
        return self.response


@pytest.fixture
def acknowledged_transport() -> RecordingTransport:
    return RecordingTransport(httpx.Response(200, json={"ok": True, "acknowledged": True}))


@pytest.fixture
def settings() -> Settings:
    return Settings(base_url="http://search.test")


@pytest.fixture
def make_transport():
    def _make(status_code: int = 200, **kwargs: Any) -> RecordingTransport:
        return RecordingTransport(httpx.Response(status_code, **kwargs))

    return _make
