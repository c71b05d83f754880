"""
Closed-form lift safety formulas.

All functions are pure and operate on SI units (kg, m, s, N).
"""
from __future__ import annotations

import math
import warnings

from simulift.errors import DomainError, RangeWarning

GRAVITY = 9.81  # m/s²
AIR_DENSITY = 1.225  # kg/m³, sea level at 15 °C
DEFAULT_DRAG_COEFFICIENT = 1.0  # flat plate
BEAUFORT_MIN = 0
BEAUFORT_MAX = 12
MPS_TO_KMH = 3.6

BEAUFORT_DESCRIPTIONS: tuple[str, ...] = (
    "Calm",
    "Light air",
    "Light breeze",
    "Gentle breeze",
    "Moderate breeze",
    "Fresh breeze",
    "Strong breeze",
    "High wind/Moderate gale",
    "Gale/Fresh gale",
    "Strong gale",
    "Storm/Whole gale",
    "Violent storm",
    "Hurricane force",
)


def impact_force(mass: float, height: float, deformation: float) -> float:
    """
    Peak force of a dropped load stopped over `deformation` metres.

    F = m * g * h / Δs
    """
    if deformation <= 0:
        raise DomainError(f"deformation must be positive, got {deformation}")
    return (float(mass) * GRAVITY * float(height)) / float(deformation)


def newtons_to_kgf(force: float) -> float:
    return float(force) / GRAVITY


def mps_to_kmh(speed: float) -> float:
    return float(speed) * MPS_TO_KMH


def beaufort_in_range(scale: float) -> bool:
    return BEAUFORT_MIN <= scale <= BEAUFORT_MAX


def beaufort_to_wind_speed(scale: float) -> float:
    """
    Empirical Beaufort conversion v = 0.836 * B^(3/2), in m/s.

    Out-of-range scales warn but are extrapolated, not clamped.
    Negative scales keep their sign so the result stays real.
    """
    scale = float(scale)
    if not beaufort_in_range(scale):
        msg = f"Beaufort scale should be between {BEAUFORT_MIN} and {BEAUFORT_MAX}, got {scale:g}"
        warnings.warn(msg, RangeWarning, stacklevel=2)
    return math.copysign(0.836 * (abs(scale) ** 1.5), scale)


def wind_force(
    speed: float,
    area: float,
    drag_coefficient: float = DEFAULT_DRAG_COEFFICIENT,
    air_density: float = AIR_DENSITY,
) -> float:
    """Aerodynamic drag F = 0.5 * rho * v² * A * Cd, in newtons."""
    return 0.5 * float(air_density) * float(speed) ** 2 * float(area) * float(drag_coefficient)


def beaufort_description(scale: float) -> str:
    # Clamps, unlike beaufort_to_wind_speed. Halves round up (6.5 -> 7).
    scale = float(scale)
    if math.isnan(scale):
        raise DomainError("Beaufort scale is NaN")
    scale = min(max(scale, BEAUFORT_MIN), BEAUFORT_MAX)
    return BEAUFORT_DESCRIPTIONS[int(math.floor(scale + 0.5))]


def check_overload(load_mass: float, capacity: float, safety_factor: float = 1.0) -> bool:
    """True when the factored load fits the crane capacity."""
    return float(load_mass) * float(safety_factor) <= float(capacity)


calculate_impact_force = impact_force
calculate_wind_force = wind_force
