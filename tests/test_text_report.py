from simulift import tables
from simulift.dynamics import sling_dynamics, swing_estimate
from simulift.reporting import text_report
from simulift.safety.report import evaluate
from simulift.scenarios import scenario_3d_config, scenario_config


def test_format_report_shows_verdict():
    text = text_report.format_report(evaluate(scenario_config("critical")))
    assert "CRITICAL - Overload" in text
    assert "Safe to Lift:      NO" in text
    assert "Load Ratio:        101.2%" in text


def test_format_config_lists_totals():
    text = text_report.format_config(scenario_config("default"))
    assert "Total Load:         3080 kg" in text
    assert "Exposed Area:       1.5 m²" in text


def test_format_3d_config_and_dynamics():
    cfg = scenario_3d_config("default")
    text = text_report.format_3d_config(cfg)
    assert "Density:            1000.00 kg/m³" in text
    assert "Strong breeze" in text
    dyn = sling_dynamics(cfg)
    out = text_report.format_dynamics(dyn, swing_estimate(98.1, 10.0))
    assert "Estimated Swing:      45.00 degrees" in out


def test_format_wind_table():
    scales, areas = [0, 6], [1.0, 2.0]
    text = text_report.format_wind_table(scales, areas, tables.wind_force_matrix(scales, areas))
    lines = text.splitlines()
    assert lines[0].startswith("Area \\ Beaufort")
    assert len(lines) == 4
    assert lines[2].startswith("1.0 m²")


def test_format_impact_curve():
    heights = [1.0, 2.0]
    text = text_report.format_impact_curve(40, 0.01, heights, tables.impact_force_curve(40, heights, 0.01))
    assert "Drop height 2.0 m: 78480.00 N (8000.00 kgf)" in text


def test_format_safety_factor_sweep():
    sweep = tables.safety_factor_sweep(2500, 5000, [1.0, 2.5])
    text = text_report.format_safety_factor_sweep(2500, 5000, sweep)
    assert "SF 1.00: Effective load = 2500 kg (50.0% capacity) - SAFE" in text
    assert "SF 2.50: Effective load = 6250 kg (125.0% capacity) - OVERLOAD" in text


def test_format_verdict_branches():
    safe = text_report.format_verdict(evaluate(scenario_config("light_load")))
    assert "Follow standard rigging procedures" in safe
    assert "CAUTIONS:" not in safe
    unsafe = text_report.format_verdict(evaluate(scenario_config("critical")))
    assert "Wait for better weather conditions" in unsafe
    assert "Use tag lines" not in unsafe


def test_format_batch():
    names = ["light_load", "critical"]
    reports = tables.evaluate_batch([scenario_config(n) for n in names])
    text = text_report.format_batch(names, reports)
    assert "1. light_load:" in text
    assert "   Status: UNSAFE" in text
