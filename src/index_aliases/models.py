"""Response models for alias requests."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class AliasResult(BaseModel):
    """Decoded body of a successful alias request."""

    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    ok: bool = False
    acknowledged: bool = False
