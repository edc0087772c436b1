from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
import os
from pathlib import Path
from typing import Any

_LOG_STD_KEYS = {
    'name','msg','args','levelname','levelno','pathname','filename','module','exc_info','exc_text',
    'stack_info','lineno','funcName','created','msecs','relativeCreated','thread','threadName',
    'processName','process','asctime','taskName'
}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.now(tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for k, v in record.__dict__.items():
            if k in _LOG_STD_KEYS or k.startswith('_'):
                continue
            if isinstance(v, (str, int, float, bool)) or v is None:
                payload[k] = v
            elif isinstance(v, (list, dict)):
                try:
                    json.dumps(v)
                except (TypeError, ValueError):
                    continue
                payload[k] = v
            else:
                # Decimal totals, enums and the like
                payload[k] = str(v)
        return json.dumps(payload, ensure_ascii=False)


class _ContextAdapter(logging.LoggerAdapter):
    """LoggerAdapter that merges per-call `extra` over the static fields."""

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        kwargs["extra"] = {**(self.extra or {}), **(kwargs.get("extra") or {})}
        return msg, kwargs


def get_json_logger(
    name: str,
    *,
    log_path: Path | None = None,
    level: int = logging.INFO,
    static_fields: dict[str, Any] | None = None,
) -> logging.LoggerAdapter:
    """Create or fetch a JSON logger with optional file output and static fields.

    Env overrides (used only when `log_path` is None):
      - LOG_JSON_TO_FILE: when truthy ("1", "true", "yes"), log to a file.
      - LOG_FILE: path to JSONL log file (default: "logs/reportgen.jsonl").
      - CORRELATION_ID: injected unless `static_fields` already sets one.

    Returns a LoggerAdapter that injects `static_fields` into each record.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate handlers: add only if empty
    if not logger.handlers:
        effective_log_path = log_path
        if effective_log_path is None:
            _to_file = os.getenv("LOG_JSON_TO_FILE", "").strip().lower() in {"1", "true", "yes"}
            if _to_file:
                effective_log_path = Path(os.getenv("LOG_FILE", "logs/reportgen.jsonl"))

        if effective_log_path is not None:
            effective_log_path.parent.mkdir(parents=True, exist_ok=True)
            handler: logging.Handler = logging.FileHandler(effective_log_path, encoding='utf-8')
        else:
            handler = logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
        logger.propagate = False

    fields = dict(static_fields or {})
    _cid = os.getenv("CORRELATION_ID", "").strip()
    if _cid and "correlation_id" not in fields:
        fields["correlation_id"] = _cid
    return _ContextAdapter(logger, extra=fields)
