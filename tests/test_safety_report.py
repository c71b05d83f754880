import json

import pytest

from simulift import physics
from simulift.contracts.lift_config import LiftConfiguration
from simulift.errors import DomainError
from simulift.safety.report import RiskLevel, classify_risk, evaluate, generate_safety_report
from simulift.scenarios import scenario_config, template_config


def _cfg(**overrides) -> LiftConfiguration:
    return scenario_config("default").model_copy(update=overrides)


def test_default_scenario_report():
    r = evaluate(scenario_config("default"))
    assert r.total_mass == pytest.approx(3080.0)
    assert r.effective_load == pytest.approx(3850.0)
    assert r.load_ratio == pytest.approx(0.77)
    assert r.impact_force_newtons == pytest.approx(3080 * 9.81 * 2 / 0.2)
    assert r.impact_force_kgf == pytest.approx(30800.0)
    assert r.wind_description == "Strong breeze"
    assert r.wind_force_newtons == pytest.approx(physics.wind_force(r.wind_speed_mps, 1.5, 1.0))
    assert r.risk_level is RiskLevel.MEDIUM
    assert r.overload_safe is True
    assert r.safe_to_lift is True


def test_critical_scenario_is_overloaded():
    r = evaluate(scenario_config("critical"))
    assert r.load_ratio == pytest.approx(1.012)
    assert r.risk_level is RiskLevel.CRITICAL
    assert r.safe_to_lift is False


def test_light_load_is_low_risk():
    r = evaluate(scenario_config("light_load"))
    assert r.risk_level is RiskLevel.LOW
    assert r.risk_level.label == "LOW - Safe conditions"


def test_dangerous_wind_raises_risk_but_does_not_block_lift():
    r = evaluate(scenario_config("heavy_wind"))
    assert r.risk_level is RiskLevel.HIGH_WIND
    assert r.risk_level.severity == "HIGH"
    assert r.load_ratio < 0.75
    assert r.safe_to_lift is True


def test_beaufort_8_is_dangerous_even_below_20_mps():
    r = evaluate(template_config("outdoor_windy"))
    assert r.wind_speed_mps < 20.0
    assert r.risk_level is RiskLevel.HIGH_WIND


def test_near_capacity_outranks_wind():
    r = evaluate(_cfg(payload_mass=3700, wind_scale=10))
    assert 0.9 < r.load_ratio <= 1.0
    assert r.risk_level is RiskLevel.HIGH_LOAD
    assert r.safe_to_lift is True


def test_load_exactly_at_capacity_is_safe():
    r = evaluate(_cfg(payload_mass=3920, safety_factor=1.25))
    assert r.load_ratio == pytest.approx(1.0)
    assert r.overload_safe is True
    assert r.risk_level is RiskLevel.HIGH_LOAD


@pytest.mark.parametrize(
    "ratio,speed,scale,expected",
    [
        (1.01, 0.0, 0, RiskLevel.CRITICAL),
        (1.05, 0.0, 0, RiskLevel.CRITICAL),
        (0.5, 0.836 * 9**1.5, 9, RiskLevel.HIGH_WIND),
        (0.5, 0.836 * 3**1.5, 3, RiskLevel.LOW),
        (0.95, 30.0, 12, RiskLevel.HIGH_LOAD),
        (0.5, 20.5, 7, RiskLevel.HIGH_WIND),
        (0.5, 5.0, 8, RiskLevel.HIGH_WIND),
        (0.8, 20.0, 7, RiskLevel.MEDIUM),
        (0.75, 0.0, 0, RiskLevel.LOW),
    ],
)
def test_classify_risk_priority(ratio, speed, scale, expected):
    assert classify_risk(ratio, speed, scale) is expected


@pytest.mark.parametrize("field", ["deformation_limit", "crane_capacity"])
def test_non_positive_divisors_raise_domain_error(field):
    with pytest.raises(DomainError):
        evaluate(_cfg(**{field: 0.0}))


def test_domain_error_is_a_value_error():
    with pytest.raises(ValueError):
        evaluate(_cfg(crane_capacity=-10.0))


def test_evaluate_accepts_mapping_with_legacy_names():
    r = generate_safety_report(
        {
            "Theoretical_Weight": 3000,
            "Pulley_Weight": 50,
            "Slings_Weight": 30,
            "Safety_Factor": 1.25,
            "Height": 2,
            "Deformation_Limit": 0.2,
            "Beaufort_Scale": 6,
            "Exposed_Area": 1.5,
            "Crane_Capacity": 5000,
        }
    )
    assert r == evaluate(scenario_config("default"))


def test_custom_drag_coefficient_scales_wind_force():
    base = evaluate(scenario_config("default"))
    r = evaluate(scenario_config("default"), drag_coefficient=1.2)
    assert r.drag_coefficient == 1.2
    assert r.wind_force_newtons == pytest.approx(base.wind_force_newtons * 1.2)


def test_trace_records_each_examined_rule_and_the_verdict():
    trace = []
    evaluate(scenario_config("default"), trace=trace)
    rules = [e for e in trace if e["event"] == "rule_eval"]
    assert [e["data"]["rule_id"] for e in rules] == [
        "overload",
        "near_capacity",
        "dangerous_wind",
        "moderate_load",
    ]
    assert [e["data"]["matched"] for e in rules] == [False, False, False, True]
    assert trace[-1]["event"] == "verdict"
    assert trace[-1]["data"]["risk_level"] == "MEDIUM"
    assert len({e["data"]["decision_id"] for e in trace}) == 1


def test_report_serialises_risk_level_as_text():
    r = evaluate(scenario_config("heavy_wind"))
    d = json.loads(r.to_json_bytes())
    assert d["risk_level"] == "HIGH (dangerous wind)"
    assert d["safe_to_lift"] is True
    assert str(r.risk_level) == "HIGH (dangerous wind)"
