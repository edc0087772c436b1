from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from reportgen.reporting.config import ReportConfig
from reportgen.reporting.errors import UnknownStrategyKeyError
from reportgen.reporting.generator import ReportGenerator
from reportgen.reporting.schemas import ReportRequest


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Render a CSV or HTML item report from a JSON request file."
    )
    p.add_argument(
        "--request",
        type=Path,
        required=True,
        help='JSON file: {"report_type": "CSV", "user": {"name": ..., "role": ...}, "items": [...]}',
    )
    p.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Output path for the report (default: stdout)",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    request_path: Path = args.request

    if not request_path.exists():
        print(f"[render_item_report] Request not found: {request_path}", file=sys.stderr)
        return 2

    try:
        request = ReportRequest.model_validate_json(request_path.read_bytes())
    except ValidationError as e:
        print(f"[render_item_report] Invalid request: {e}", file=sys.stderr)
        return 2

    try:
        config = ReportConfig()
    except ValidationError as e:
        print(f"[render_item_report] Invalid REPORT_* environment: {e}", file=sys.stderr)
        return 2

    try:
        report = ReportGenerator(config).generate_report(
            request.report_type, request.user.to_user(), request.to_items()
        )
    except UnknownStrategyKeyError as e:
        print(f"[render_item_report] {e}", file=sys.stderr)
        return 2

    if args.out is None:
        print(report)
        return 0
    out_path: Path = args.out
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(report + "\n", encoding="utf-8")
    print(f"Wrote report -> {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
