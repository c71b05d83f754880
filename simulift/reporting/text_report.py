"""Plain-text rendering of configurations and safety reports."""
from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from simulift import dynamics, physics
from simulift.contracts.lift_config import Lift3DConfiguration, LiftConfiguration
from simulift.safety import advice
from simulift.safety.report import SafetyReport

RULE = "=" * 44


def _yes_no(flag: bool) -> str:
    return "YES" if flag else "NO"


def format_config(config: LiftConfiguration) -> str:
    lines = [
        "Configuration Parameters:",
        "-------------------------",
        f"  Payload:            {config.payload_mass:g} kg",
        f"  Pulley Weight:      {config.pulley_mass:g} kg",
        f"  Slings Weight:      {config.sling_mass:g} kg",
        f"  Total Load:         {config.total_mass:g} kg",
        f"  Crane Capacity:     {config.crane_capacity:g} kg",
        f"  Safety Factor:      {config.safety_factor:g}",
        f"  Drop Height:        {config.drop_height:g} m",
        f"  Deformation Limit:  {config.deformation_limit:g} m",
        f"  Beaufort Scale:     {config.wind_scale:g}",
        f"  Exposed Area:       {config.exposed_area:g} m²",
        "",
    ]
    return "\n".join(lines)


def format_report(report: SafetyReport) -> str:
    lines = [
        RULE,
        "  SimuLift - Safety Analysis Report",
        RULE,
        "",
        "LOAD ANALYSIS:",
        f"  Total Mass:        {report.total_mass:.2f} kg",
        f"  Effective Load:    {report.effective_load:.2f} kg",
        f"  Load Ratio:        {report.load_ratio * 100:.1f}%",
        f"  Overload Safe:     {_yes_no(report.overload_safe)}",
        "",
        "IMPACT ANALYSIS:",
        f"  Impact Force:      {report.impact_force_newtons:.2f} N ({report.impact_force_kgf:.2f} kgf)",
        "",
        "WIND ANALYSIS:",
        f"  Beaufort:          {report.wind_description}",
        f"  Wind Speed:        {report.wind_speed_mps:.2f} m/s "
        f"({physics.mps_to_kmh(report.wind_speed_mps):.2f} km/h)",
        f"  Wind Force:        {report.wind_force_newtons:.2f} N",
        "",
        "OVERALL VERDICT:",
        f"  Risk Level:        {report.risk_level.label}",
        f"  Safe to Lift:      {_yes_no(report.safe_to_lift)}",
        "",
        RULE,
        "",
    ]
    return "\n".join(lines)


def format_3d_config(config: Lift3DConfiguration) -> str:
    volume = dynamics.payload_volume(config.payload_length, config.payload_width, config.payload_height)
    speed = physics.beaufort_to_wind_speed(config.wind_scale)
    g = config.gravity
    lines = [
        "3D Configuration Parameters:",
        "============================",
        "",
        "PAYLOAD:",
        f"  Mass:               {config.payload_mass:g} kg",
        f"  Dimensions:         {config.payload_length:.2f} x {config.payload_width:.2f} x "
        f"{config.payload_height:.2f} m",
        f"  Volume:             {volume:.3f} m³",
        f"  Density:            {dynamics.payload_density(config.payload_mass, volume):.2f} kg/m³",
        "",
        "LIFTING SYSTEM:",
        f"  Hook Mass:          {config.hook_mass:g} kg",
        f"  Sling Mass:         {config.sling_mass:g} kg",
        f"  Sling Length:       {config.sling_length:.2f} m",
        f"  Sling Stiffness:    {config.sling_stiffness:g} N/m",
        f"  Sling Damping:      {config.sling_damping:g} N/(m/s)",
        "",
        "OPERATIONAL:",
        f"  Total Mass:         {config.payload_mass + config.hook_mass + config.sling_mass:g} kg",
        f"  Crane Capacity:     {config.crane_capacity:g} kg",
        f"  Safety Factor:      {config.safety_factor:g}",
        f"  Initial Height:     {config.drop_height:g} m",
        f"  Deformation Limit:  {config.deformation_limit:g} m",
        "",
        "ENVIRONMENTAL:",
        f"  Beaufort Scale:     {config.wind_scale:g} ({physics.beaufort_description(config.wind_scale)})",
        f"  Wind Speed:         {speed:.2f} m/s ({physics.mps_to_kmh(speed):.2f} km/h)",
        f"  Exposed Area:       {config.exposed_area:g} m²",
        f"  Drag Coefficient:   {config.drag_coefficient:.2f}",
        f"  Air Density:        {config.air_density:.3f} kg/m³",
        "",
        "SIMULATION:",
        f"  Duration:           {config.simulation_time:g} s",
        f"  Gravity:            [{g[0]:.2f}, {g[1]:.2f}, {g[2]:.2f}] m/s²",
        "",
    ]
    return "\n".join(lines)


def format_dynamics(dyn: dynamics.SlingDynamics, swing: dynamics.SwingEstimate | None = None) -> str:
    lines = [
        "Sling Dynamics:",
        f"  Natural Frequency:  {dyn.omega_n:.2f} rad/s ({dyn.frequency_hz:.2f} Hz)",
        f"  Oscillation Period: {dyn.period_s:.2f} seconds",
        f"  Damping Ratio:      {dyn.damping_ratio:.3f} ({dyn.damping_class})",
    ]
    if swing is not None:
        lines += [
            "",
            "Effect on Payload:",
            f"  Lateral Acceleration: {swing.lateral_acceleration:.3f} m/s²",
            f"  Estimated Swing:      {swing.swing_angle_deg:.2f} degrees",
        ]
    lines.append("")
    return "\n".join(lines)


def format_wind_table(scales: Sequence[float], areas: Sequence[float], forces: np.ndarray) -> str:
    """Area x Beaufort force matrix, as produced by tables.wind_force_matrix."""
    corner = "Area \\ Beaufort"
    header = f"{corner:<15}" + "".join(f"  B={b:<5g} " for b in scales)
    sep = "-" * 15 + "  ------  " * len(scales)
    rows = [header, sep]
    for i, area in enumerate(areas):
        rows.append(f"{area:.1f} m²" + " " * 10 + "".join(f"  {forces[i, j]:6.1f}  " for j in range(len(scales))))
    return "\n".join(rows) + "\n"


def format_impact_curve(mass: float, deformation: float, heights: Sequence[float], forces: np.ndarray) -> str:
    rows = [f"Impact Force Analysis ({mass:.0f} kg object, {deformation:.2f} m deformation):"]
    for h, f in zip(heights, forces):
        rows.append(f"  Drop height {h:.1f} m: {f:.2f} N ({physics.newtons_to_kgf(f):.2f} kgf)")
    return "\n".join(rows) + "\n"


def format_safety_factor_sweep(load_mass: float, capacity: float, sweep: dict[str, np.ndarray]) -> str:
    rows = [f"Safety Factor Analysis (Load: {load_mass:.0f} kg, Capacity: {capacity:.0f} kg):"]
    for sf, eff, ratio, safe in zip(sweep["safety_factor"], sweep["effective_load"], sweep["load_ratio"], sweep["safe"]):
        status = "SAFE" if safe else "OVERLOAD"
        rows.append(f"  SF {sf:.2f}: Effective load = {eff:.0f} kg ({ratio * 100:.1f}% capacity) - {status}")
    return "\n".join(rows) + "\n"


def format_batch(names: Sequence[str], reports: Sequence[SafetyReport]) -> str:
    rows = ["Batch Safety Analysis:", "====================="]
    for i, (name, r) in enumerate(zip(names, reports), start=1):
        rows += [
            f"{i}. {name}:",
            f"   Load: {r.total_mass:.0f} kg, Ratio: {r.load_ratio * 100:.1f}%",
            f"   Status: {'SAFE' if r.safe_to_lift else 'UNSAFE'}",
            f"   Risk: {r.risk_level.value}",
        ]
    return "\n".join(rows) + "\n"


def format_verdict(report: SafetyReport, swing_angle_deg: float | None = None) -> str:
    """Operator summary: recommendations when safe, issues and actions when not."""
    lines = ["SAFETY VERDICT:"]
    if report.safe_to_lift:
        lines += ["  SAFE to proceed with lift", "", "RECOMMENDATIONS:"]
        lines += [f"  - {s}" for s in advice.SAFE_RECOMMENDATIONS]
        cautions = advice.cautions(report, swing_angle_deg)
        if cautions:
            lines += ["", "CAUTIONS:"] + [f"  ! {s}" for s in cautions]
    else:
        lines += ["  NOT SAFE - DO NOT PROCEED", "", "ISSUES:"]
        lines += [f"  - {s}" for s in advice.issues(report)]
        lines += ["", "ACTIONS REQUIRED:"] + [f"  - {s}" for s in advice.REQUIRED_ACTIONS]
    lines.append("")
    return "\n".join(lines)
