from __future__ import annotations

from typing import Any


class ReportError(Exception):
    """Base class for report generation failures."""


class UnknownStrategyKeyError(ReportError, LookupError):
    """Raised when a report type or user role has no registered strategy."""

    def __init__(self, key: Any, category: str) -> None:
        self.key = key
        self.category = category
        super().__init__(key, category)

    def __str__(self) -> str:
        return f"unknown {self.category} key: {self.key!r}"
