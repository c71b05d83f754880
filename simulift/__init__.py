"""SimuLift: crane lift safety estimates."""
from __future__ import annotations

from simulift.contracts.lift_config import Lift3DConfiguration, LiftConfiguration
from simulift.errors import DomainError, RangeWarning
from simulift.physics import (
    beaufort_description,
    beaufort_to_wind_speed,
    check_overload,
    impact_force,
    newtons_to_kgf,
    wind_force,
)
from simulift.safety.report import RiskLevel, SafetyReport, classify_risk, evaluate
from simulift.scenarios import scenario_3d_config, scenario_config

__version__ = "0.2.0"

__all__ = [
    "DomainError",
    "Lift3DConfiguration",
    "LiftConfiguration",
    "RangeWarning",
    "RiskLevel",
    "SafetyReport",
    "beaufort_description",
    "beaufort_to_wind_speed",
    "check_overload",
    "classify_risk",
    "evaluate",
    "impact_force",
    "newtons_to_kgf",
    "scenario_3d_config",
    "scenario_config",
    "wind_force",
]
