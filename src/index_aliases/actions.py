"""Alias actions and the ordered batch they are collected in."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator

from .filters import Filter


class AliasActionType(str, Enum):
    ADD = "add"
    REMOVE = "remove"


@dataclass(frozen=True)
class AliasAction:
    """A single add or remove instruction for one index/alias pair."""

    type: AliasActionType
    index: str
    alias: str
    filter: Filter | None = None

    def to_dict(self) -> dict[str, Any]:
        details: dict[str, Any] = {"index": self.index, "alias": self.alias}
        # Only adds carry a filter on the wire.
        if self.type is AliasActionType.ADD and self.filter is not None:
            details["filter"] = self.filter.source()
        return {self.type.value: details}


class ActionBatch:
    """Ordered, append-only list of alias actions.

    Duplicate or conflicting actions are kept as recorded; the service
    arbitrates them when it applies the batch.
    """

    def __init__(self) -> None:
        self._actions: list[AliasAction] = []

    def __len__(self) -> int:
        return len(self._actions)

    def __iter__(self) -> Iterator[AliasAction]:
        return iter(self._actions)

    @property
    def actions(self) -> tuple[AliasAction, ...]:
        return tuple(self._actions)

    def add(self, index: str, alias: str) -> None:
        self._actions.append(AliasAction(AliasActionType.ADD, index, alias))

    def add_with_filter(self, index: str, alias: str, filter: Filter) -> None:
        self._actions.append(AliasAction(AliasActionType.ADD, index, alias, filter))

    def remove(self, index: str, alias: str) -> None:
        self._actions.append(AliasAction(AliasActionType.REMOVE, index, alias))

    def to_body(self) -> dict[str, Any]:
        return {"actions": [action.to_dict() for action in self._actions]}
