"""
Payload geometry and sling dynamics estimates for the 3D model.

Single-degree-of-freedom mass-spring approximations: the payload hangs on a
sling of stiffness k and damping c. These are planning figures, not a
substitute for running the multibody model.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from simulift import physics
from simulift.contracts.lift_config import Lift3DConfiguration
from simulift.errors import DomainError

LIGHT_DAMPING = 0.3
MODERATE_DAMPING = 0.7
CRITICAL_DAMPING = 1.0
FAST_PERIOD_S = 1.0
SLOW_PERIOD_S = 3.0


def payload_volume(length: float, width: float, height: float) -> float:
    if length <= 0 or width <= 0 or height <= 0:
        raise DomainError(f"payload dimensions must be positive, got {length} x {width} x {height}")
    return float(length) * float(width) * float(height)


def payload_density(mass: float, volume: float) -> float:
    if volume <= 0:
        raise DomainError(f"payload volume must be positive, got {volume}")
    return float(mass) / float(volume)


def exposed_area_estimate(length: float, width: float, height: float) -> float:
    """Front face plus side face."""
    return float(width) * float(height) + float(length) * float(height)


def natural_frequency(stiffness: float, mass: float) -> float:
    """omega_n = sqrt(k / m), rad/s."""
    if mass <= 0:
        raise DomainError(f"mass must be positive, got {mass}")
    if stiffness < 0:
        raise DomainError(f"stiffness must be non-negative, got {stiffness}")
    return math.sqrt(float(stiffness) / float(mass))


def frequency_hz(omega_n: float) -> float:
    return float(omega_n) / (2.0 * math.pi)


def oscillation_period(omega_n: float) -> float:
    if omega_n <= 0:
        return math.inf
    return 2.0 * math.pi / float(omega_n)


def damping_ratio(damping: float, stiffness: float, mass: float) -> float:
    """zeta = c / (2 * sqrt(k * m))."""
    if stiffness * mass <= 0:
        raise DomainError(f"stiffness * mass must be positive, got {stiffness} * {mass}")
    return float(damping) / (2.0 * math.sqrt(float(stiffness) * float(mass)))


def classify_damping(zeta: float) -> str:
    if zeta < LIGHT_DAMPING:
        return "lightly damped - expect oscillations"
    if zeta < MODERATE_DAMPING:
        return "moderately damped"
    if zeta < CRITICAL_DAMPING:
        return "heavily damped"
    return "overdamped - slow settling"


def classify_oscillation(period: float) -> str:
    if period < FAST_PERIOD_S:
        return "Fast oscillations, may need damping"
    if period > SLOW_PERIOD_S:
        return "Slow swinging, stable behavior"
    return "Moderate oscillations, typical"


@dataclass(frozen=True)
class SlingDynamics:
    mass: float
    omega_n: float
    frequency_hz: float
    period_s: float
    damping_ratio: float
    damping_class: str
    oscillation_class: str


def sling_dynamics(config: Lift3DConfiguration) -> SlingDynamics:
    # Payload plus sling; the hook is fixed to the crane.
    mass = config.payload_mass + config.sling_mass
    omega = natural_frequency(config.sling_stiffness, mass)
    period = oscillation_period(omega)
    zeta = damping_ratio(config.sling_damping, config.sling_stiffness, mass)
    return SlingDynamics(
        mass=mass,
        omega_n=omega,
        frequency_hz=frequency_hz(omega),
        period_s=period,
        damping_ratio=zeta,
        damping_class=classify_damping(zeta),
        oscillation_class=classify_oscillation(period),
    )


@dataclass(frozen=True)
class SwingEstimate:
    lateral_acceleration: float  # m/s²
    swing_angle_deg: float


def swing_estimate(wind_force: float, mass: float) -> SwingEstimate:
    """Quasi-static pendulum deflection under a steady lateral force."""
    if mass <= 0:
        raise DomainError(f"mass must be positive, got {mass}")
    accel = float(wind_force) / float(mass)
    return SwingEstimate(
        lateral_acceleration=accel,
        swing_angle_deg=math.degrees(math.atan(accel / physics.GRAVITY)),
    )
