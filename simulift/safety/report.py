from __future__ import annotations

import json
import logging
import uuid
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

from simulift import physics
from simulift.contracts.lift_config import LiftConfiguration
from simulift.errors import DomainError
from simulift.trace.decision_trace import add_rule_eval, add_trace_event

logger = logging.getLogger(__name__)

OVERLOAD_RATIO = 1.0
NEAR_CAPACITY_RATIO = 0.9
MODERATE_LOAD_RATIO = 0.75
DANGEROUS_WIND_MPS = 20.0
DANGEROUS_WIND_SCALE = 8


class RiskLevel(str, Enum):
    CRITICAL = "CRITICAL"
    HIGH_LOAD = "HIGH (near capacity)"
    HIGH_WIND = "HIGH (dangerous wind)"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

    @property
    def severity(self) -> str:
        return self.value.split(" ", 1)[0]

    @property
    def reason(self) -> str:
        return _REASONS[self]

    @property
    def label(self) -> str:
        return f"{self.severity} - {self.reason}"

    def __str__(self) -> str:
        return self.value


_REASONS = {
    RiskLevel.CRITICAL: "Overload",
    RiskLevel.HIGH_LOAD: "Near capacity",
    RiskLevel.HIGH_WIND: "Dangerous wind",
    RiskLevel.MEDIUM: "Moderate load",
    RiskLevel.LOW: "Safe conditions",
}


def _risk_rules(load_ratio: float, wind_speed_mps: float, wind_scale: float):
    # Priority order; the first match wins.
    return (
        ("overload", RiskLevel.CRITICAL, load_ratio > OVERLOAD_RATIO),
        ("near_capacity", RiskLevel.HIGH_LOAD, load_ratio > NEAR_CAPACITY_RATIO),
        (
            "dangerous_wind",
            RiskLevel.HIGH_WIND,
            wind_speed_mps > DANGEROUS_WIND_MPS or wind_scale >= DANGEROUS_WIND_SCALE,
        ),
        ("moderate_load", RiskLevel.MEDIUM, load_ratio > MODERATE_LOAD_RATIO),
        ("safe_conditions", RiskLevel.LOW, True),
    )


def classify_risk(
    load_ratio: float,
    wind_speed_mps: float,
    wind_scale: float,
    *,
    trace: list[dict[str, Any]] | None = None,
    decision_id: str | None = None,
) -> RiskLevel:
    decision_id = decision_id or str(uuid.uuid4())
    metrics = {
        "load_ratio": float(load_ratio),
        "wind_speed_mps": float(wind_speed_mps),
        "wind_scale": float(wind_scale),
    }
    for rule_id, level, matched in _risk_rules(load_ratio, wind_speed_mps, wind_scale):
        if trace is not None:
            add_rule_eval(
                trace,
                decision_id=decision_id,
                rule_id=rule_id,
                matched=matched,
                reason=level.label if matched else None,
                metrics=metrics,
                severity="warn" if matched and level is not RiskLevel.LOW else "info",
            )
        if matched:
            return level
    raise AssertionError("unreachable: last risk rule always matches")


@dataclass(frozen=True)
class SafetyReport:
    """
    Derived safety metrics for one LiftConfiguration.

    `safe_to_lift` follows the overload check only; dangerous wind raises
    `risk_level` but never flips the verdict.
    """

    total_mass: float
    impact_force_newtons: float
    impact_force_kgf: float
    effective_load: float
    load_ratio: float
    overload_safe: bool
    wind_scale: float
    wind_speed_mps: float
    wind_description: str
    wind_force_newtons: float
    drag_coefficient: float
    risk_level: RiskLevel
    safe_to_lift: bool

    def to_dict(self) -> dict[str, Any]:
        out = asdict(self)
        out["risk_level"] = self.risk_level.value
        return out

    def to_json_bytes(self) -> bytes:
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def _as_config(config: LiftConfiguration | Mapping[str, Any]) -> LiftConfiguration:
    if isinstance(config, LiftConfiguration):
        return config
    return LiftConfiguration.model_validate(dict(config))


def evaluate(
    config: LiftConfiguration | Mapping[str, Any],
    *,
    drag_coefficient: float = physics.DEFAULT_DRAG_COEFFICIENT,
    trace: list[dict[str, Any]] | None = None,
) -> SafetyReport:
    """
    Compute the safety report of a lift.

    Raises DomainError when deformation_limit or crane_capacity is not
    positive; nothing is computed in that case.
    """
    cfg = _as_config(config)
    if cfg.deformation_limit <= 0:
        raise DomainError(f"deformation_limit must be positive, got {cfg.deformation_limit}")
    if cfg.crane_capacity <= 0:
        raise DomainError(f"crane_capacity must be positive, got {cfg.crane_capacity}")

    total_mass = cfg.total_mass
    impact_n = physics.impact_force(total_mass, cfg.drop_height, cfg.deformation_limit)

    effective_load = total_mass * cfg.safety_factor
    load_ratio = effective_load / cfg.crane_capacity
    overload_safe = load_ratio <= OVERLOAD_RATIO

    wind_speed = physics.beaufort_to_wind_speed(cfg.wind_scale)
    wind_n = physics.wind_force(wind_speed, cfg.exposed_area, drag_coefficient)

    decision_id = str(uuid.uuid4())
    risk = classify_risk(load_ratio, wind_speed, cfg.wind_scale, trace=trace, decision_id=decision_id)

    report = SafetyReport(
        total_mass=total_mass,
        impact_force_newtons=impact_n,
        impact_force_kgf=physics.newtons_to_kgf(impact_n),
        effective_load=effective_load,
        load_ratio=load_ratio,
        overload_safe=overload_safe,
        wind_scale=cfg.wind_scale,
        wind_speed_mps=wind_speed,
        wind_description=physics.beaufort_description(cfg.wind_scale),
        wind_force_newtons=wind_n,
        drag_coefficient=float(drag_coefficient),
        risk_level=risk,
        safe_to_lift=overload_safe,
    )

    if trace is not None:
        add_trace_event(
            trace,
            "verdict",
            {
                "decision_id": decision_id,
                "risk_level": risk.value,
                "safe_to_lift": report.safe_to_lift,
                "load_ratio": load_ratio,
            },
            level="info" if report.safe_to_lift else "error",
        )
    logger.debug(
        "evaluated lift: load_ratio=%.3f risk=%s safe=%s", load_ratio, risk.value, report.safe_to_lift
    )
    return report


generate_safety_report = evaluate
