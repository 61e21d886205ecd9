"""Errors raised while executing alias requests."""

from __future__ import annotations

import httpx

# Connection-level failures surface as the transport's own exceptions.
TransportError = httpx.TransportError


class AliasClientError(Exception):
    """Base error for alias request failures."""


class ServiceError(AliasClientError):
    """Raised when the service answers with a non-success status."""

    def __init__(self, status_code: int, body: str, reason: str | None = None) -> None:
        message = f"alias_request_failed_{status_code}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.reason = reason


class DecodeError(AliasClientError):
    """Raised when a success response cannot be decoded into a result."""

    def __init__(self, message: str, body: str = "") -> None:
        super().__init__(message)
        self.body = body
