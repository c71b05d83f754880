import pytest

from simulift import scenarios
from simulift.contracts.lift_config import Lift3DConfiguration


def test_available_scenarios():
    assert scenarios.available_scenarios() == ["critical", "default", "heavy_load", "heavy_wind", "light_load"]


def test_unknown_scenario_falls_back_to_default():
    assert scenarios.scenario_config("mystery") == scenarios.SCENARIOS["default"]
    assert scenarios.scenario_config(None) == scenarios.SCENARIOS["default"]


def test_scenario_names_ignore_case_and_whitespace():
    assert scenarios.scenario_config("  Heavy_Wind ").wind_scale == 9


def test_3d_scenarios_extend_the_2d_ones():
    for name in scenarios.available_scenarios():
        cfg3 = scenarios.scenario_3d_config(name)
        cfg2 = scenarios.scenario_config(name)
        assert isinstance(cfg3, Lift3DConfiguration)
        assert cfg3.payload_mass == cfg2.payload_mass
        assert cfg3.crane_capacity == cfg2.crane_capacity


def test_3d_heavy_load_geometry():
    cfg = scenarios.scenario_3d_config("heavy_load")
    assert (cfg.payload_length, cfg.payload_width, cfg.payload_height) == (3.0, 2.0, 1.5)
    assert cfg.simulation_time == 15.0
    assert scenarios.scenario_3d_config("unknown") == scenarios.SCENARIOS_3D["default"]


def test_templates():
    assert scenarios.template_config("Precision_Assembly").safety_factor == 1.8
    with pytest.raises(KeyError, match="light_maintenance"):
        scenarios.template_config("skyscraper")
