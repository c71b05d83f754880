"""
Predefined lift scenarios.

Unknown scenario names resolve to the default configuration; templates are
an explicit catalogue and reject unknown names.
"""
from __future__ import annotations

import logging

from simulift.contracts.lift_config import Lift3DConfiguration, LiftConfiguration

logger = logging.getLogger(__name__)

DEFAULT_SCENARIO = "default"

SCENARIOS: dict[str, LiftConfiguration] = {
    "default": LiftConfiguration(
        payload_mass=3000,
        pulley_mass=50,
        sling_mass=30,
        safety_factor=1.25,
        drop_height=2,
        deformation_limit=0.2,
        wind_scale=6,
        exposed_area=1.5,
        crane_capacity=5000,
    ),
    "light_load": LiftConfiguration(
        payload_mass=500,
        pulley_mass=20,
        sling_mass=10,
        safety_factor=1.5,
        drop_height=1,
        deformation_limit=0.15,
        wind_scale=3,
        exposed_area=0.8,
        crane_capacity=2000,
    ),
    "heavy_load": LiftConfiguration(
        payload_mass=8000,
        pulley_mass=100,
        sling_mass=80,
        safety_factor=1.25,
        drop_height=3,
        deformation_limit=0.25,
        wind_scale=4,
        exposed_area=3.0,
        crane_capacity=12000,
    ),
    "heavy_wind": LiftConfiguration(
        payload_mass=2000,
        pulley_mass=40,
        sling_mass=25,
        safety_factor=1.5,
        drop_height=2,
        deformation_limit=0.2,
        wind_scale=9,  # strong gale
        exposed_area=2.5,
        crane_capacity=5000,
    ),
    "critical": LiftConfiguration(
        payload_mass=4500,
        pulley_mass=60,
        sling_mass=40,
        safety_factor=1.1,
        drop_height=5,
        deformation_limit=0.05,
        wind_scale=7,
        exposed_area=2.0,
        crane_capacity=5000,
    ),
}

# Geometry and rigging added on top of the 2D scenario of the same name.
_EXTRAS_3D: dict[str, dict[str, float]] = {
    "default": {},
    "light_load": {
        "payload_length": 1.0,
        "payload_width": 0.8,
        "payload_height": 0.6,
        "hook_mass": 20,
        "sling_length": 2.0,
        "sling_damping": 80,
        "sling_stiffness": 8000,
        "drag_coefficient": 1.1,
    },
    "heavy_load": {
        "payload_length": 3.0,
        "payload_width": 2.0,
        "payload_height": 1.5,
        "hook_mass": 100,
        "sling_length": 4.0,
        "sling_damping": 150,
        "sling_stiffness": 15000,
        "drag_coefficient": 1.3,
        "simulation_time": 15,
    },
    "heavy_wind": {
        "payload_length": 2.5,
        "payload_width": 2.0,
        "payload_height": 0.8,
        "hook_mass": 40,
        "sling_length": 3.0,
        "sling_damping": 100,
        "sling_stiffness": 10000,
        "drag_coefficient": 1.5,  # flat surface
        "simulation_time": 12,
    },
    "critical": {
        "payload_length": 2.0,
        "payload_width": 1.5,
        "payload_height": 1.2,
        "hook_mass": 60,
        "sling_length": 5.0,
        "sling_damping": 120,
        "sling_stiffness": 12000,
        "drag_coefficient": 1.2,
        "simulation_time": 20,
    },
}

SCENARIOS_3D: dict[str, Lift3DConfiguration] = {
    name: Lift3DConfiguration(**SCENARIOS[name].model_dump(), **extras)
    for name, extras in _EXTRAS_3D.items()
}

TEMPLATES: dict[str, LiftConfiguration] = {
    "light_maintenance": LiftConfiguration(
        payload_mass=800,
        pulley_mass=25,
        sling_mass=15,
        safety_factor=1.5,
        drop_height=1.5,
        deformation_limit=0.2,
        wind_scale=4,
        exposed_area=1.0,
        crane_capacity=3000,
    ),
    "heavy_industrial": LiftConfiguration(
        payload_mass=7000,
        pulley_mass=120,
        sling_mass=80,
        safety_factor=1.3,
        drop_height=3,
        deformation_limit=0.3,
        wind_scale=5,
        exposed_area=4.0,
        crane_capacity=10000,
    ),
    "precision_assembly": LiftConfiguration(
        payload_mass=350,
        pulley_mass=20,
        sling_mass=10,
        safety_factor=1.8,
        drop_height=1,
        deformation_limit=0.15,
        wind_scale=3,
        exposed_area=0.6,
        crane_capacity=1500,
    ),
    "outdoor_windy": LiftConfiguration(
        payload_mass=2000,
        pulley_mass=40,
        sling_mass=25,
        safety_factor=1.5,
        drop_height=2,
        deformation_limit=0.2,
        wind_scale=8,  # gale
        exposed_area=2.5,
        crane_capacity=5000,
    ),
}


def _normalize(name: str | None) -> str:
    return str(name or DEFAULT_SCENARIO).strip().lower()


def available_scenarios() -> list[str]:
    return sorted(SCENARIOS)


def scenario_config(name: str | None) -> LiftConfiguration:
    key = _normalize(name)
    if key not in SCENARIOS:
        logger.debug("unknown scenario %r, using %r", name, DEFAULT_SCENARIO)
        key = DEFAULT_SCENARIO
    return SCENARIOS[key]


def scenario_3d_config(name: str | None) -> Lift3DConfiguration:
    key = _normalize(name)
    if key not in SCENARIOS_3D:
        logger.debug("unknown 3D scenario %r, using %r", name, DEFAULT_SCENARIO)
        key = DEFAULT_SCENARIO
    return SCENARIOS_3D[key]


def template_config(name: str) -> LiftConfiguration:
    key = _normalize(name)
    try:
        return TEMPLATES[key]
    except KeyError:
        raise KeyError(f"unknown template {name!r}; known: {', '.join(sorted(TEMPLATES))}") from None
