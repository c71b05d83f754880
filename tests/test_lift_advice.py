from simulift.safety import advice
from simulift.safety.report import evaluate
from simulift.scenarios import scenario_config


def _report(name):
    return evaluate(scenario_config(name))


def test_lift_advice_by_verdict():
    assert advice.lift_advice(_report("critical")).startswith("DO NOT PROCEED")
    assert advice.lift_advice(_report("light_load")) == "Proceed with lift. Conditions are favorable."
    assert advice.lift_advice(_report("heavy_wind")).startswith("Proceed with caution")


def test_recommendations_for_critical_lift():
    recs = advice.recommendations(_report("critical"))
    assert recs[0] == "Use 3D simulation to verify dynamics"
    assert "Consider postponing lift" in recs
    assert "Verify crane capacity and stability" in recs


def test_recommendations_for_low_risk():
    assert advice.recommendations(_report("light_load")) == [
        "Standard 3D safety protocols",
        "Monitor conditions during lift",
    ]


def test_cautions_only_for_safe_elevated_risk():
    default = _report("default")
    lines = advice.cautions(default, swing_angle_deg=6.0)
    assert lines[0] == "Load is 77% of crane capacity"
    assert any(line.startswith("Wind speed 12.29 m/s") for line in lines)
    assert lines[-1] == "Expected swing angle: 6.0 degrees"
    assert advice.cautions(_report("light_load")) == []
    assert advice.cautions(_report("critical")) == []


def test_issues_name_the_overload():
    assert advice.issues(_report("critical")) == ["OVERLOAD: Load exceeds crane capacity by 1%"]
    assert advice.issues(_report("default")) == []
    assert len(advice.REQUIRED_ACTIONS) == 4
