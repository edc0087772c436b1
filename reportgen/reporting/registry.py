from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from .config import ReportConfig
from .errors import UnknownStrategyKeyError
from .formats import CsvReportFormat, FormatStrategy, HtmlReportFormat
from .logging_utils import get_json_logger
from .models import ReportType, Role
from .roles import AdminRoleStrategy, RoleStrategy, StandardRoleStrategy

S = TypeVar("S")


class StrategyRegistry(Generic[S]):
    """Closed mapping from an enum key to its singleton strategy.

    Keys may be passed as enum members or their string values. The mapping is
    fixed at construction; there is no runtime registration.
    """

    def __init__(self, category: str, key_type: type[Enum], strategies: Mapping[Enum, S]) -> None:
        for key in strategies:
            if not isinstance(key, key_type):
                raise TypeError(f"{category} registry key {key!r} is not a {key_type.__name__}")
        self.category = category
        self._key_type = key_type
        self._strategies: Mapping[Enum, S] = MappingProxyType(dict(strategies))

    def _resolve(self, key: Any) -> Enum | None:
        if isinstance(key, self._key_type):
            return key
        if isinstance(key, str):
            try:
                return self._key_type(key)
            except ValueError:
                return None
        return None

    def get_strategy(self, key: Any) -> S:
        member = self._resolve(key)
        if member is None or member not in self._strategies:
            logger = get_json_logger("registry", static_fields={"op": "get_strategy"})
            logger.error("unknown_strategy_key", extra={"key": str(key), "category": self.category})
            raise UnknownStrategyKeyError(key, self.category)
        return self._strategies[member]

    def keys(self) -> list[Enum]:
        return list(self._strategies)

    def __contains__(self, key: Any) -> bool:
        return self._resolve(key) in self._strategies

    def __iter__(self) -> Iterator[Enum]:
        return iter(self._strategies)

    def __len__(self) -> int:
        return len(self._strategies)

    def __repr__(self) -> str:
        keys = ", ".join(k.value for k in self._strategies)
        return f"StrategyRegistry({self.category!r}: {keys})"


def build_format_registry(config: ReportConfig | None = None) -> StrategyRegistry[FormatStrategy]:
    cfg = config or ReportConfig()
    return StrategyRegistry(
        "format",
        ReportType,
        {
            ReportType.CSV: CsvReportFormat(quoting=cfg.csv_quoting),
            ReportType.HTML: HtmlReportFormat(escape=cfg.escape_html),
        },
    )


def build_role_registry(config: ReportConfig | None = None) -> StrategyRegistry[RoleStrategy]:
    cfg = config or ReportConfig()
    return StrategyRegistry(
        "role",
        Role,
        {
            Role.ADMIN: AdminRoleStrategy(
                cfg.admin_priority_threshold, copy_on_enrich=cfg.copy_on_enrich
            ),
            Role.USER: StandardRoleStrategy(cfg.standard_max_value),
        },
    )


@lru_cache(maxsize=None)
def default_format_registry() -> StrategyRegistry[FormatStrategy]:
    """Format registry built from the environment on first use."""
    return build_format_registry()


@lru_cache(maxsize=None)
def default_role_registry() -> StrategyRegistry[RoleStrategy]:
    """Role registry built from the environment on first use."""
    return build_role_registry()
