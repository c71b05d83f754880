"""Parameter sweeps over the lift formulas, vectorised with numpy."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import numpy as np

from simulift import physics
from simulift.contracts.lift_config import LiftConfiguration
from simulift.errors import DomainError
from simulift.safety.report import SafetyReport, evaluate

BEAUFORT_SCALES: tuple[float, ...] = tuple(float(b) for b in range(physics.BEAUFORT_MIN, physics.BEAUFORT_MAX + 1))
EXPOSED_AREAS: tuple[float, ...] = (0.5, 1.0, 2.0, 3.0, 5.0)  # m²
DROP_HEIGHTS: tuple[float, ...] = (0.5, 1.0, 2.0, 3.0, 5.0)  # m
SAFETY_FACTORS: tuple[float, ...] = (1.0, 1.1, 1.25, 1.5, 2.0)


def wind_speeds(scales: Iterable[float]) -> np.ndarray:
    return np.asarray([physics.beaufort_to_wind_speed(b) for b in scales], dtype=np.float64)


def wind_force_matrix(
    scales: Iterable[float],
    areas: Iterable[float],
    drag_coefficient: float = physics.DEFAULT_DRAG_COEFFICIENT,
    air_density: float = physics.AIR_DENSITY,
) -> np.ndarray:
    """Wind force in newtons; rows follow `areas`, columns follow `scales`."""
    v = wind_speeds(scales)
    a = np.asarray(list(areas), dtype=np.float64)
    return 0.5 * air_density * np.outer(a, v**2) * drag_coefficient


def impact_force_curve(mass: float, heights: Iterable[float], deformation: float) -> np.ndarray:
    if deformation <= 0:
        raise DomainError(f"deformation must be positive, got {deformation}")
    h = np.asarray(list(heights), dtype=np.float64)
    return float(mass) * physics.GRAVITY * h / float(deformation)


def safety_factor_sweep(
    load_mass: float, capacity: float, safety_factors: Iterable[float]
) -> dict[str, np.ndarray]:
    if capacity <= 0:
        raise DomainError(f"capacity must be positive, got {capacity}")
    sf = np.asarray(list(safety_factors), dtype=np.float64)
    effective = float(load_mass) * sf
    return {
        "safety_factor": sf,
        "effective_load": effective,
        "load_ratio": effective / float(capacity),
        "safe": effective <= float(capacity),
    }


def evaluate_batch(
    configs: Iterable[LiftConfiguration | Mapping[str, Any]],
    *,
    drag_coefficient: float = physics.DEFAULT_DRAG_COEFFICIENT,
) -> list[SafetyReport]:
    return [evaluate(c, drag_coefficient=drag_coefficient) for c in configs]
