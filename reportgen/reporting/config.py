from __future__ import annotations

import os

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes"}


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


class ReportConfig(BaseModel):
    """Rendering options for the report generator.

    Values default from environment variables; defaults reproduce the plain
    (unescaped) output byte for byte. Malformed numeric env values raise
    ValidationError when the config is built.
    """

    model_config = {"frozen": True, "validate_default": True}

    copy_on_enrich: bool = Field(default_factory=lambda: _env_flag("REPORT_COPY_ON_ENRICH", "1"))
    escape_html: bool = Field(default_factory=lambda: _env_flag("REPORT_ESCAPE_HTML", "0"))
    csv_quoting: bool = Field(default_factory=lambda: _env_flag("REPORT_CSV_QUOTING", "0"))
    admin_priority_threshold: float = Field(
        default_factory=lambda: os.getenv("REPORT_ADMIN_PRIORITY_THRESHOLD", "1000")
    )
    standard_max_value: float = Field(
        default_factory=lambda: os.getenv("REPORT_STANDARD_MAX_VALUE", "500")
    )
