from __future__ import annotations

import uuid
from collections.abc import Iterable
from decimal import Decimal
from functools import lru_cache
from typing import Any

from .config import ReportConfig
from .formats import FormatStrategy
from .logging_utils import get_json_logger
from .models import Item, Number, ReportType, User
from .registry import (
    StrategyRegistry,
    build_format_registry,
    build_role_registry,
    default_format_registry,
    default_role_registry,
)
from .roles import RoleStrategy


class ReportGenerator:
    """Render items into a CSV or HTML report for a given user.

    The format strategy comes from `report_type`, the role strategy from
    `user.role`. Rows keep input order; excluded items contribute neither a
    row nor a value to the total.
    """

    def __init__(
        self,
        config: ReportConfig | None = None,
        *,
        format_registry: StrategyRegistry[FormatStrategy] | None = None,
        role_registry: StrategyRegistry[RoleStrategy] | None = None,
    ) -> None:
        if format_registry is None:
            format_registry = default_format_registry() if config is None else build_format_registry(config)
        if role_registry is None:
            role_registry = default_role_registry() if config is None else build_role_registry(config)
        self.formats = format_registry
        self.roles = role_registry

    def generate_report(self, report_type: ReportType | str, user: User, items: Iterable[Item]) -> str:
        cid = uuid.uuid4().hex
        logger = get_json_logger(
            "reporting", static_fields={"correlation_id": cid, "op": "generate_report"}
        )
        # Both lookups happen before any output is assembled
        format_strategy = self.formats.get_strategy(report_type)
        role_strategy = self.roles.get_strategy(user.role)

        items = list(items)
        logger.info(
            "start",
            extra={
                "report_type": _key_name(report_type),
                "role": _key_name(user.role),
                "item_count": len(items),
            },
        )

        parts: list[str] = [format_strategy.header(user)]
        total: Number = 0
        included = 0
        for item in items:
            if not role_strategy.should_include(item):
                continue
            processed = role_strategy.process_item(item)
            parts.append(format_strategy.format_item(processed, user))
            total = _add(total, processed.value)
            included += 1
        parts.append(format_strategy.footer(total))

        out = "".join(parts).strip()
        logger.info(
            "done",
            extra={
                "included": included,
                "excluded": len(items) - included,
                "total": total,
                "output_bytes": len(out.encode("utf-8")),
            },
        )
        return out


def _add(total: Number, value: Number) -> Number:
    """Sum two values; a Decimal on either side promotes both to Decimal."""
    if isinstance(total, Decimal) or isinstance(value, Decimal):
        return _to_decimal(total) + _to_decimal(value)
    return total + value


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps the shortest repr of floats (2.5 -> Decimal("2.5"))
    return Decimal(str(value))


def _key_name(key: Any) -> str:
    return str(getattr(key, "value", key))


@lru_cache(maxsize=None)
def _default_generator() -> ReportGenerator:
    return ReportGenerator()


def generate_report(report_type: ReportType | str, user: User, items: Iterable[Item]) -> str:
    """Render a report with the default registries."""
    return _default_generator().generate_report(report_type, user, items)
