"""Filters that scope an alias to a subset of documents."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class Filter(Protocol):
    """Anything that can render itself as a JSON-serializable filter body."""

    def source(self) -> Any:
        """Return the JSON-serializable representation of the filter."""
        ...


@dataclass(frozen=True)
class RawFilter:
    """Filter backed by a prebuilt JSON mapping."""

    body: Mapping[str, Any] = field(default_factory=dict)

    def source(self) -> dict[str, Any]:
        return copy.deepcopy(dict(self.body))


@dataclass(frozen=True)
class TermFilter:
    """Matches documents whose ``name`` field holds exactly ``value``."""

    name: str
    value: Any

    def source(self) -> dict[str, Any]:
        return {"term": {self.name: self.value}}
