"""Builder for atomic alias add/remove requests."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from .actions import ActionBatch, AliasAction
from .errors import DecodeError, ServiceError
from .filters import Filter
from .models import AliasResult
from .transport import Transport

logger = logging.getLogger(__name__)

ALIASES_PATH = "/_aliases"


def _extract_error_reason(response: httpx.Response) -> str | None:
    try:
        payload = response.json()
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if isinstance(error, dict):
        return error.get("reason") or error.get("type")
    if isinstance(error, str):
        return error
    return None


def _decode_result(response: httpx.Response) -> AliasResult:
    try:
        payload = response.json()
    except ValueError as exc:
        raise DecodeError("alias_response_not_json", body=response.text) from exc
    try:
        return AliasResult.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError("alias_response_invalid", body=response.text) from exc


class AliasService:
    """Collects alias actions and sends them as one atomic request.

    Every setter returns the service so calls can be chained::

        result = (
            AliasService(transport)
            .add("logs-2024", "logs-current")
            .remove("logs-2023", "logs-current")
            .execute()
        )

    Calling ``execute()`` again re-sends the same actions. Not safe for
    concurrent use.
    """

    def __init__(self, transport: Transport) -> None:
        self.transport = transport
        self._batch = ActionBatch()
        self._pretty = False
        self._debug = False

    def __len__(self) -> int:
        return len(self._batch)

    @property
    def actions(self) -> tuple[AliasAction, ...]:
        return self._batch.actions

    def pretty(self, pretty: bool) -> AliasService:
        self._pretty = pretty
        return self

    def debug(self, debug: bool) -> AliasService:
        self._debug = debug
        return self

    def add(self, index: str, alias: str, *, filter: Filter | None = None) -> AliasService:
        if filter is None:
            self._batch.add(index, alias)
        else:
            self._batch.add_with_filter(index, alias, filter)
        return self

    def add_with_filter(self, index: str, alias: str, filter: Filter) -> AliasService:
        self._batch.add_with_filter(index, alias, filter)
        return self

    def remove(self, index: str, alias: str) -> AliasService:
        self._batch.remove(index, alias)
        return self

    def build_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if self._pretty:
            params["pretty"] = "true"
        return params

    def build_body(self) -> dict[str, Any]:
        return self._batch.to_body()

    def execute(self) -> AliasResult:
        """Send the collected actions and decode the acknowledgement."""
        response = self.transport.send(
            "POST",
            ALIASES_PATH,
            params=self.build_params() or None,
            json=self.build_body(),
            debug=self._debug,
        )

        if not response.is_success:
            logger.warning(
                "alias_request_failed: status=%s actions=%d",
                response.status_code,
                len(self._batch),
            )
            raise ServiceError(
                response.status_code,
                response.text,
                reason=_extract_error_reason(response),
            )

        try:
            return _decode_result(response)
        except DecodeError:
            logger.warning("alias_response_decode_failed: status=%s", response.status_code)
            raise
