from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

from simulift import scenarios, tables
from simulift.config.load_config import AppConfig, find_default_config, load_app_config, load_lift_config
from simulift.contracts.lift_config import Lift3DConfiguration, LiftConfiguration
from simulift.dynamics import sling_dynamics, swing_estimate
from simulift.export.report_export import write_model_parameters, write_report_json, write_trace_ndjson
from simulift.observability.logging import setup_logging
from simulift.physics import newtons_to_kgf
from simulift.reporting.text_report import (
    format_3d_config,
    format_batch,
    format_config,
    format_dynamics,
    format_impact_curve,
    format_report,
    format_safety_factor_sweep,
    format_verdict,
    format_wind_table,
)
from simulift.safety import advice
from simulift.safety.report import SafetyReport, evaluate
from simulift.simulation.parameters import (
    instructions_path,
    lateral_wind_force,
    model_settings,
    workspace_variables,
    write_instructions,
)

logger = logging.getLogger("simulift.cli")

EXIT_SAFE = 0
EXIT_UNSAFE = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="simulift", description="Crane lift safety estimate.")
    ap.add_argument("--scenario", help=f"preset: {', '.join(scenarios.available_scenarios())}")
    ap.add_argument("--template", help=f"worked example: {', '.join(sorted(scenarios.TEMPLATES))}")
    ap.add_argument("--lift", type=Path, help="lift configuration YAML")
    ap.add_argument("--config", type=Path, help="application settings YAML")
    ap.add_argument("--3d", dest="three_d", action="store_true", help="prepare the 3D multibody model")
    ap.add_argument("--model", help="path of the external 3D model file")
    ap.add_argument("--output-dir", type=Path, help="write report and model parameters here")
    ap.add_argument("--trace", type=Path, help="write the decision trace (NDJSON) here")
    ap.add_argument("--json", action="store_true", help="print the report as JSON")
    ap.add_argument("--tables", action="store_true", help="print wind, impact and safety-factor tables for the lift")
    ap.add_argument("--batch", action="store_true", help="evaluate every preset scenario")
    ap.add_argument("--quiet", action="store_true")
    ap.add_argument("--log-level")
    return ap


def _app_config(path: Path | None) -> AppConfig:
    path = path or find_default_config()
    return load_app_config(path) if path is not None else AppConfig()


def _lift(args: argparse.Namespace, app: AppConfig, use_3d: bool) -> LiftConfiguration:
    if args.lift is not None:
        return load_lift_config(args.lift, three_d=use_3d)
    if args.template:
        cfg = scenarios.template_config(args.template)
        return Lift3DConfiguration(**cfg.model_dump()) if use_3d else cfg
    name = args.scenario or app.run.scenario
    return scenarios.scenario_3d_config(name) if use_3d else scenarios.scenario_config(name)


def _verdict(report: SafetyReport) -> int:
    return EXIT_SAFE if report.safe_to_lift else EXIT_UNSAFE


def _write_outputs(
    output_dir: Path | None,
    report: SafetyReport,
    params: dict[str, Any],
    trace: list[dict[str, Any]] | None,
    trace_path: Path | None,
) -> None:
    if output_dir is not None:
        write_report_json(output_dir / "report.json", report)
        write_model_parameters(output_dir / "model_parameters.json", params)
        if trace is not None and trace_path is None:
            write_trace_ndjson(output_dir / "trace.ndjson", trace)
    if trace is not None and trace_path is not None:
        write_trace_ndjson(trace_path, trace)


def run_2d(args: argparse.Namespace, app: AppConfig, config: LiftConfiguration, verbose: bool) -> int:
    output_dir = args.output_dir or _opt_path(app.run.output_dir)
    trace: list[dict[str, Any]] | None = [] if (args.trace or output_dir) else None
    report = evaluate(config, drag_coefficient=app.wind.drag_coefficient, trace=trace)

    if args.json:
        print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    elif verbose:
        print(format_config(config))
        print(format_report(report))
        print(f"Recommendation: {advice.lift_advice(report)}")

    _write_outputs(output_dir, report, config.as_model_parameters(), trace, args.trace)
    return _verdict(report)


def run_3d(args: argparse.Namespace, app: AppConfig, config: Lift3DConfiguration, verbose: bool) -> int:
    output_dir = args.output_dir or _opt_path(app.run.output_dir)
    trace: list[dict[str, Any]] | None = [] if (args.trace or output_dir) else None
    report = evaluate(config, trace=trace)
    params = workspace_variables(config)
    wind_n = lateral_wind_force(config)
    dyn = sling_dynamics(config)
    swing = swing_estimate(wind_n, dyn.mass)

    model_path = Path(args.model or app.run.model_path)
    instructions: Path | None = None
    if not model_path.exists():
        logger.info("3D model not found at %s; writing assembly instructions", model_path)
        instructions = write_instructions(config, model_path)

    if args.json:
        out = {
            "report": report.to_dict(),
            "workspace_variables": params,
            "model_settings": model_settings(config),
            "wind_force_newtons": wind_n,
            "dynamics": asdict(dyn),
            "swing": asdict(swing),
            "recommendations": advice.recommendations(report),
            "instructions": str(instructions) if instructions else None,
        }
        print(json.dumps(out, indent=2, ensure_ascii=False))
    elif verbose:
        print(format_3d_config(config))
        print("SAFETY ANALYSIS:")
        print(f"  Load Ratio:         {report.load_ratio * 100:.1f}% of capacity")
        print(f"  Risk Level:         {report.risk_level.label}")
        print(f"  Safe to Lift:       {'YES' if report.safe_to_lift else 'NO'}\n")
        print("WIND EFFECTS:")
        print(f"  Wind Force:         {wind_n:.2f} N ({newtons_to_kgf(wind_n):.2f} kgf)")
        print(f"  Wind Description:   {report.wind_description}\n")
        print("IMPACT ANALYSIS:")
        print(f"  Calculated Impact:  {report.impact_force_newtons:.2f} N ({report.impact_force_kgf:.2f} kgf)\n")
        print(format_dynamics(dyn, swing))
        print(format_verdict(report, swing.swing_angle_deg))
        print("Next steps:")
        for line in advice.recommendations(report):
            print(f"  - {line}")
        if instructions is not None:
            print(f"\nModel not found. Build it following: {instructions_path(model_path)}")

    _write_outputs(output_dir, report, params, trace, args.trace)
    return _verdict(report)


def run_tables(app: AppConfig, config: LiftConfiguration) -> int:
    cd = app.wind.drag_coefficient
    areas = sorted({*tables.EXPOSED_AREAS, config.exposed_area})
    forces = tables.wind_force_matrix(tables.BEAUFORT_SCALES, areas, drag_coefficient=cd)
    impact = tables.impact_force_curve(config.total_mass, tables.DROP_HEIGHTS, config.deformation_limit)
    sweep = tables.safety_factor_sweep(config.total_mass, config.crane_capacity, tables.SAFETY_FACTORS)

    print(f"Wind Force (N) by exposed area and Beaufort scale, Cd = {cd:.2f}:")
    print(format_wind_table(tables.BEAUFORT_SCALES, areas, forces))
    print(format_impact_curve(config.total_mass, config.deformation_limit, tables.DROP_HEIGHTS, impact))
    print(format_safety_factor_sweep(config.total_mass, config.crane_capacity, sweep))
    return EXIT_SAFE


def run_batch(app: AppConfig) -> int:
    names = scenarios.available_scenarios()
    reports = tables.evaluate_batch(
        [scenarios.scenario_config(n) for n in names], drag_coefficient=app.wind.drag_coefficient
    )
    print(format_batch(names, reports))
    return EXIT_SAFE if all(r.safe_to_lift for r in reports) else EXIT_UNSAFE


def _opt_path(p: str | None) -> Path | None:
    return Path(p) if p else None


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        app = _app_config(args.config)
    except (OSError, ValueError) as e:
        print(f"error: invalid application config: {e}", file=sys.stderr)
        return EXIT_INVALID

    if args.log_level:
        app.logging.level = args.log_level
    setup_logging(app.logging)

    use_3d = bool(args.three_d or app.run.use_3d)
    verbose = app.run.verbose and not args.quiet
    try:
        if args.batch:
            return run_batch(app)
        config = _lift(args, app, use_3d)
        if args.tables:
            return run_tables(app, config)
        if use_3d:
            return run_3d(args, app, config, verbose)
        return run_2d(args, app, config, verbose)
    except (OSError, KeyError, ValueError) as e:
        # DomainError and pydantic ValidationError are ValueErrors.
        logger.error("evaluation failed: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID


if __name__ == "__main__":
    raise SystemExit(main())
