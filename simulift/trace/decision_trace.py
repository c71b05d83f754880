"""
NDJSON decision trace for lift evaluations.

A trace is a plain list of event dicts. Each event carries an id, a
timestamp, a name, a level and a small `data` payload; reports and model
parameters are exported separately.
"""
from __future__ import annotations

import json
import time
import uuid
from collections.abc import Iterable
from typing import Any


def _compact(obj: Any) -> str:
    return json.dumps(obj, ensure_ascii=False, separators=(",", ":"))


def add_trace_event(
    trace: list[dict[str, Any]],
    event: str,
    data: dict[str, Any] | None = None,
    *,
    level: str = "info",
) -> dict[str, Any]:
    entry = {
        "id": uuid.uuid4().hex,
        "ts": time.time(),
        "event": str(event),
        "level": str(level),
        "data": dict(data or {}),
    }
    trace.append(entry)
    return entry


def add_rule_eval(
    trace: list[dict[str, Any]],
    *,
    decision_id: str,
    rule_id: str,
    matched: bool,
    reason: str | None = None,
    metrics: dict[str, Any] | None = None,
    severity: str = "info",
) -> dict[str, Any]:
    """Record one risk rule examined for a decision, matched or not."""
    data: dict[str, Any] = {"decision_id": str(decision_id), "rule_id": str(rule_id), "matched": bool(matched)}
    if reason is not None:
        data["reason"] = str(reason)
    if metrics is not None:
        data["metrics"] = metrics
    return add_trace_event(trace, "rule_eval", data, level=severity)


def _ndjson_lines(trace: Iterable[dict[str, Any]]) -> Iterable[str]:
    for entry in trace:
        try:
            yield _compact(entry)
        except (TypeError, ValueError):
            # Keep the line count; the offending payload is dropped.
            yield _compact(
                {
                    "ts": time.time(),
                    "event": "trace_serialize_error",
                    "level": "error",
                    "data": {"event": str(entry.get("event", "")), "type": type(entry).__name__},
                }
            )


def trace_to_ndjson_bytes(trace: list[dict[str, Any]]) -> bytes:
    return "".join(line + "\n" for line in _ndjson_lines(trace)).encode("utf-8")
