"""Role-aware item reporting package.

This package renders a list of line items into a CSV or HTML report:
- Models (dataclasses) and payload schemas (Pydantic)
- Role strategies (visibility and priority enrichment)
- Format strategies (CSV, HTML)
- Closed registries keyed by enum and the report generator

Rendering is pure: no I/O besides JSON log records.
"""
from __future__ import annotations

from .config import ReportConfig
from .errors import ReportError, UnknownStrategyKeyError
from .formats import CsvReportFormat, HtmlReportFormat
from .generator import ReportGenerator, generate_report
from .models import Item, ReportType, Role, User
from .registry import StrategyRegistry, default_format_registry, default_role_registry
from .roles import AdminRoleStrategy, StandardRoleStrategy

__all__ = [
    "AdminRoleStrategy",
    "CsvReportFormat",
    "HtmlReportFormat",
    "Item",
    "ReportConfig",
    "ReportError",
    "ReportGenerator",
    "ReportType",
    "Role",
    "StandardRoleStrategy",
    "StrategyRegistry",
    "UnknownStrategyKeyError",
    "User",
    "default_format_registry",
    "default_role_registry",
    "generate_report",
]
