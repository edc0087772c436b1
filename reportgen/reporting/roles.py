from __future__ import annotations

from dataclasses import replace
from typing import Protocol

from .models import Item, Number


class RoleStrategy(Protocol):
    """Visibility and enrichment rules for one user role."""

    def should_include(self, item: Item) -> bool: ...

    def process_item(self, item: Item) -> Item: ...


class AdminRoleStrategy:
    """Admins see every item; high-value items are flagged as priority."""

    def __init__(self, priority_threshold: Number = 1000, *, copy_on_enrich: bool = True) -> None:
        self._threshold = priority_threshold
        self._copy = copy_on_enrich

    @property
    def priority_threshold(self) -> Number:
        return self._threshold

    @property
    def copy_on_enrich(self) -> bool:
        return self._copy

    def should_include(self, item: Item) -> bool:
        return True

    def process_item(self, item: Item) -> Item:
        if item.value <= self._threshold:
            return item
        if self._copy:
            return replace(item, priority=True)
        item.priority = True
        return item

    def __repr__(self) -> str:
        return f"AdminRoleStrategy(priority_threshold={self._threshold!r}, copy_on_enrich={self._copy!r})"


class StandardRoleStrategy:
    """Standard users only see items up to `max_value`; no enrichment."""

    def __init__(self, max_value: Number = 500) -> None:
        self._max_value = max_value

    @property
    def max_value(self) -> Number:
        return self._max_value

    def should_include(self, item: Item) -> bool:
        return item.value <= self._max_value

    def process_item(self, item: Item) -> Item:
        return item

    def __repr__(self) -> str:
        return f"StandardRoleStrategy(max_value={self._max_value!r})"
