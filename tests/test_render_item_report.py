from __future__ import annotations

import json
from pathlib import Path

import pytest

from scripts.render_item_report import main


def _write_request(path: Path, **overrides) -> Path:  # noqa: ANN003
    payload = {
        "report_type": "CSV",
        "user": {"name": "Alice", "role": "ADMIN"},
        "items": [
            {"id": 1, "name": "Pen", "value": 200},
            {"id": 2, "name": "Laptop", "value": 1500},
        ],
    }
    payload.update(overrides)
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_main_writes_report_file(tmp_path: Path) -> None:
    """Test that the script writes the rendered report to --out."""
    req = _write_request(tmp_path / "req.json")
    out = tmp_path / "out" / "report.csv"
    assert main(["--request", str(req), "--out", str(out)]) == 0
    assert out.read_text(encoding="utf-8") == (
        "ID,NOME,VALOR,USUARIO\n1,Pen,200,Alice\n2,Laptop,1500,Alice\n\nTotal,,\n1700,,\n"
    )


def test_main_prints_to_stdout(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test that the script prints the report when --out is omitted."""
    req = _write_request(tmp_path / "req.json", report_type="HTML")
    assert main(["--request", str(req)]) == 0
    assert "<h3>Total: 1700</h3>" in capsys.readouterr().out


def test_main_missing_request(tmp_path: Path) -> None:
    """Test exit code 2 for a missing request file."""
    assert main(["--request", str(tmp_path / "missing.json")]) == 2


@pytest.mark.parametrize(
    "content",
    [
        json.dumps({"report_type": "CSV", "items": []}).encode(),
        b"[1, 2]",
        b'"just a string"',
        b"{not json",
        b"\xff\xfe{}",
        b"",
    ],
)
def test_main_invalid_payload(tmp_path: Path, content: bytes, capsys: pytest.CaptureFixture[str]) -> None:
    """Test exit code 2 for payloads that are not a valid request object."""
    req = tmp_path / "bad.json"
    req.write_bytes(content)
    assert main(["--request", str(req)]) == 2
    assert "Invalid request" in capsys.readouterr().err


def test_main_unknown_report_type(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test exit code 2 and the error message for an unknown report type."""
    req = _write_request(tmp_path / "req.json", report_type="PDF")
    assert main(["--request", str(req)]) == 2
    assert "unknown format key: 'PDF'" in capsys.readouterr().err


def test_main_malformed_env_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Test exit code 2 when a REPORT_* threshold is not a number."""
    monkeypatch.setenv("REPORT_ADMIN_PRIORITY_THRESHOLD", "abc")
    req = _write_request(tmp_path / "req.json")
    assert main(["--request", str(req)]) == 2
    assert "REPORT_" in capsys.readouterr().err
