"""Entry point tying settings, transport and alias builders together."""

from __future__ import annotations

import httpx

from .config import Settings
from .service import AliasService
from .transport import HttpTransport


class SearchClient:
    """Client for the search cluster's alias management endpoint."""

    def __init__(
        self,
        settings: Settings | None = None,
        http: httpx.Client | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.transport = HttpTransport(self.settings, http=http)

    def __enter__(self) -> SearchClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self.transport.close()

    def aliases(self) -> AliasService:
        """Start a new alias request seeded with the configured options."""
        return (
            AliasService(self.transport)
            .pretty(self.settings.pretty)
            .debug(self.settings.debug)
        )
