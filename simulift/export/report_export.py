from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from simulift.safety.report import SafetyReport
from simulift.trace.decision_trace import trace_to_ndjson_bytes


def ensure_dirs(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def save_json(path: Path, data: Any) -> None:
    ensure_dirs(path.parent)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


def write_report_json(path: str | Path, report: SafetyReport) -> Path:
    p = Path(path)
    save_json(p, report.to_dict())
    return p


def write_trace_ndjson(path: str | Path, trace: list[dict[str, Any]]) -> Path:
    p = Path(path)
    ensure_dirs(p.parent)
    p.write_bytes(trace_to_ndjson_bytes(trace))
    return p


def write_model_parameters(path: str | Path, params: dict[str, Any]) -> Path:
    """Named inputs for the external model, as a flat JSON object."""
    p = Path(path)
    save_json(p, params)
    return p
