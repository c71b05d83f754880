"""
Inputs for the external multibody model.

The model itself is assembled by hand in the modelling tool; this module only
produces the named workspace variables it reads, its solver settings, and the
assembly instructions.
"""
from __future__ import annotations

import logging
from pathlib import Path

from simulift import dynamics, physics
from simulift.contracts.lift_config import Lift3DConfiguration

logger = logging.getLogger(__name__)

SOLVER_SETTINGS: dict[str, str] = {
    "SolverType": "Variable-step",
    "Solver": "ode45",
    "RelTol": "1e-3",
    "AbsTol": "auto",
    "SaveOutput": "on",
    "OutputSaveName": "yout",
}


def workspace_variables(config: Lift3DConfiguration) -> dict[str, float | list[float]]:
    """Variables referenced by the blocks of the 3D model, by name."""
    volume = dynamics.payload_volume(config.payload_length, config.payload_width, config.payload_height)
    return {
        "payload_mass": config.payload_mass,
        "payload_length": config.payload_length,
        "payload_width": config.payload_width,
        "payload_height": config.payload_height,
        "payload_density": dynamics.payload_density(config.payload_mass, volume),
        "hook_mass": config.hook_mass,
        "sling_mass": config.sling_mass,
        "sling_length": config.sling_length,
        "sling_damping": config.sling_damping,
        "sling_stiffness": config.sling_stiffness,
        "wind_speed": physics.beaufort_to_wind_speed(config.wind_scale),
        "beaufort_scale": config.wind_scale,
        "exposed_area": config.exposed_area,
        "drag_coefficient": config.drag_coefficient,
        "air_density": config.air_density,
        "initial_height": config.drop_height,
        "safety_factor": config.safety_factor,
        "deformation_limit": config.deformation_limit,
        "gravity": list(config.gravity),
        "crane_capacity": config.crane_capacity,
    }


def model_settings(config: Lift3DConfiguration) -> dict[str, str]:
    return {"StopTime": f"{config.simulation_time:g}", **SOLVER_SETTINGS}


def lateral_wind_force(config: Lift3DConfiguration) -> float:
    speed = physics.beaufort_to_wind_speed(config.wind_scale)
    return physics.wind_force(
        speed,
        config.exposed_area,
        drag_coefficient=config.drag_coefficient,
        air_density=config.air_density,
    )


def instructions_path(model_path: str | Path) -> Path:
    p = Path(model_path)
    return p.with_name(f"{p.stem}_Instructions.txt")


def build_instructions(config: Lift3DConfiguration, model_path: str | Path) -> str:
    v = workspace_variables(config)
    g = config.gravity
    gravity = f"[{g[0]:g}; {g[1]:g}; {g[2]:g}] m/s²"
    lines = [
        "SimuLift 3D Model Creation Instructions",
        "========================================",
        "",
        f"Model File: {model_path}",
        "",
        "Required Multibody Components:",
        "------------------------------",
        "",
        "1. WORLD FRAME",
        "   - Add: Mechanism Configuration block",
        f"   - Set gravity: {gravity}",
        "",
        "2. CRANE HOOK (Fixed Reference Point)",
        "   - Add: Rigid Transform block",
        "   - Position: [0; 0; initial_height] (from workspace)",
        "   - This represents the crane hook attachment point",
        "",
        "3. HOOK BODY",
        "   - Add: Solid block (or Brick Solid)",
        "   - Mass: hook_mass (from workspace)",
        "   - Small dimensions: [0.1 x 0.1 x 0.2] m",
        "",
        "4. SLING SYSTEM",
        "   Option A - Flexible Cable:",
        "   - Add: Cable block (Body Elements)",
        "   - Length: sling_length (from workspace)",
        "   - Damping: sling_damping (from workspace)",
        "   - Stiffness: sling_stiffness (from workspace)",
        "",
        "   Option B - Rigid Links (simpler):",
        "   - Add: Cylindrical Solid blocks",
        "   - Total mass: sling_mass (from workspace)",
        "   - Connect with Revolute Joints for flexibility",
        "",
        "5. PAYLOAD",
        "   - Add: Brick Solid block",
        "   - Dimensions: [payload_length, payload_width, payload_height] (from workspace)",
        "   - Mass: payload_mass (from workspace)",
        "   - Or use density: payload_density (from workspace)",
        "",
        "6. JOINTS",
        "   - Hook to Sling: Spherical Joint (allows swinging)",
        "   - Sling to Payload: Universal Joint or Spherical Joint",
        "",
        "7. WIND FORCE",
        "   - Add: External Force & Torque block",
        "   - Connect to Payload frame",
        "   - Force calculation (use a function block):",
        "     F_wind = 0.5 * air_density * wind_speed^2 * exposed_area * drag_coefficient",
        "   - Direction: [1; 0; 0] (X-axis, horizontal wind)",
        "",
        "8. SENSORS (Optional for data logging)",
        "   - Add: Transform Sensor (for payload position)",
        "   - Add: Joint Sensor (for cable tensions)",
        "",
        "9. VISUALIZATION",
        "   - Add colors and geometry to Solid blocks",
        "   - Enable Mechanics Explorer",
        "",
        "Workspace Variables:",
        "--------------------",
        f"  payload_mass       = {v['payload_mass']:.2f} kg",
        f"  payload_length     = {v['payload_length']:.2f} m",
        f"  payload_width      = {v['payload_width']:.2f} m",
        f"  payload_height     = {v['payload_height']:.2f} m",
        f"  payload_density    = {v['payload_density']:.2f} kg/m³",
        f"  hook_mass          = {v['hook_mass']:.2f} kg",
        f"  sling_mass         = {v['sling_mass']:.2f} kg",
        f"  sling_length       = {v['sling_length']:.2f} m",
        f"  sling_damping      = {v['sling_damping']:.2f} N/(m/s)",
        f"  sling_stiffness    = {v['sling_stiffness']:.2f} N/m",
        f"  wind_speed         = {v['wind_speed']:.2f} m/s",
        f"  exposed_area       = {v['exposed_area']:.2f} m²",
        f"  drag_coefficient   = {v['drag_coefficient']:.2f}",
        f"  air_density        = {v['air_density']:.3f} kg/m³",
        f"  initial_height     = {v['initial_height']:.2f} m",
        f"  gravity            = {gravity}",
        "",
        "Solver Settings:",
        "----------------",
        f"  Type: {SOLVER_SETTINGS['SolverType']}",
        f"  Solver: {SOLVER_SETTINGS['Solver']} (or ode15s for stiff systems)",
        f"  Stop time: {config.simulation_time:.1f} seconds",
        "",
        "Next Steps:",
        "-----------",
        f"1. Create new model: {model_path}",
        "2. Add multibody components as described above",
        "3. Reference workspace variables in block parameters",
        "4. Connect blocks according to the physical system",
        "5. Run: simulift --3d --scenario heavy_load",
        "",
    ]
    return "\n".join(lines)


def write_instructions(config: Lift3DConfiguration, model_path: str | Path) -> Path:
    out = instructions_path(model_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(build_instructions(config, model_path), encoding="utf-8")
    logger.info("wrote model instructions to %s", out)
    return out
