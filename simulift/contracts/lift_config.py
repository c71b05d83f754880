from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

# Field names used by the legacy block-diagram model and its scripts.
# Keys are compared after strip() + lower().
_LEGACY_KEYS: dict[str, str] = {
    "theoretical_weight": "payload_mass",
    "pulley_weight": "pulley_mass",
    "slings_weight": "sling_mass",
    "height": "drop_height",
    "beaufort_scale": "wind_scale",
}

# Block names of the 2D model, canonical field -> block.
MODEL_BLOCK_NAMES: dict[str, str] = {
    "payload_mass": "Theoretical_Weight",
    "pulley_mass": "Pulley_Weight",
    "sling_mass": "Slings_Weight",
    "safety_factor": "Safety_Factor",
    "drop_height": "Height",
    "deformation_limit": "Deformation_Limit",
    "wind_scale": "Beaufort_Scale",
    "exposed_area": "Exposed_Area",
    "crane_capacity": "Crane_Capacity",
}


def _is_finite(x: Any) -> bool:
    return isinstance(x, (int, float)) and math.isfinite(float(x))


def normalize_keys(data: Mapping[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, value in data.items():
        k = str(key).strip().lower()
        k = _LEGACY_KEYS.get(k, k)
        if k in out:
            raise ValueError(f"field given twice: {key!r} duplicates {k!r}")
        out[k] = value
    return out


class LiftConfiguration(BaseModel):
    """One lift to evaluate. Immutable; consumed once per evaluation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    payload_mass: float  # kg
    pulley_mass: float  # kg
    sling_mass: float  # kg
    safety_factor: float
    drop_height: float  # m
    deformation_limit: float  # m
    wind_scale: float  # Beaufort
    exposed_area: float  # m²
    crane_capacity: float  # kg

    @model_validator(mode="before")
    @classmethod
    def _canonical_keys(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return normalize_keys(data)
        return data

    @field_validator(
        "payload_mass",
        "pulley_mass",
        "sling_mass",
        "safety_factor",
        "drop_height",
        "deformation_limit",
        "wind_scale",
        "exposed_area",
        "crane_capacity",
    )
    @classmethod
    def _finite(cls, v):
        if not _is_finite(v):
            raise ValueError("must be finite")
        return float(v)

    @field_validator("payload_mass", "safety_factor")
    @classmethod
    def _positive(cls, v):
        if v <= 0.0:
            raise ValueError("must be > 0")
        return v

    @field_validator("pulley_mass", "sling_mass", "drop_height", "exposed_area")
    @classmethod
    def _non_negative(cls, v):
        if v < 0.0:
            raise ValueError("must be >= 0")
        return v

    @property
    def total_mass(self) -> float:
        return self.payload_mass + self.pulley_mass + self.sling_mass

    def as_model_parameters(self) -> dict[str, float]:
        """Flat block-name -> value map for the external 2D model."""
        return {block: float(getattr(self, name)) for name, block in MODEL_BLOCK_NAMES.items()}


class Lift3DConfiguration(LiftConfiguration):
    """Lift plus the geometry and rigging of the multibody model."""

    payload_length: float = 2.0  # m
    payload_width: float = 1.5  # m
    payload_height: float = 1.0  # m
    hook_mass: float = 50.0  # kg
    sling_length: float = 3.0  # m
    sling_damping: float = 100.0  # N/(m/s)
    sling_stiffness: float = 10000.0  # N/m
    drag_coefficient: float = 1.2
    air_density: float = 1.225  # kg/m³
    simulation_time: float = 10.0  # s
    gravity: tuple[float, float, float] = (0.0, 0.0, -9.81)  # m/s²

    @field_validator(
        "payload_length",
        "payload_width",
        "payload_height",
        "hook_mass",
        "sling_length",
        "sling_damping",
        "sling_stiffness",
        "drag_coefficient",
        "air_density",
        "simulation_time",
    )
    @classmethod
    def _finite_3d(cls, v):
        if not _is_finite(v):
            raise ValueError("must be finite")
        return float(v)

    @field_validator("hook_mass", "sling_length", "sling_damping", "sling_stiffness", "drag_coefficient")
    @classmethod
    def _non_negative_3d(cls, v):
        if v < 0.0:
            raise ValueError("must be >= 0")
        return v

    @field_validator("air_density", "simulation_time")
    @classmethod
    def _positive_3d(cls, v):
        if v <= 0.0:
            raise ValueError("must be > 0")
        return v

    @field_validator("gravity")
    @classmethod
    def _gravity_finite(cls, v):
        out = []
        for x in v:
            if not _is_finite(x):
                raise ValueError("gravity must be finite")
            out.append(float(x))
        return tuple(out)

    @property
    def payload_volume(self) -> float:
        return self.payload_length * self.payload_width * self.payload_height
