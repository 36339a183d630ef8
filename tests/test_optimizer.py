import pytest

from plasmafuel.config import EngineSettings
from plasmafuel.errors import ConfigurationError
from plasmafuel.optimizer.process import ProcessParameters, optimize
from plasmafuel.optimizer.rules import (
    DIAGNOSTIC_RULES,
    DiagnosticInputs,
    PredictionCategory,
    classify,
)


def test_default_parameters_known_outputs() -> None:
    result = optimize(ProcessParameters())

    expected_yield = 1.0 * 0.85 * 0.92 * 85.0
    expected_power = 150.0 * (1.0 - 0.92 * 0.3)
    assert result.methane_yield == pytest.approx(expected_yield)
    assert result.power_consumption_kw == pytest.approx(expected_power)
    assert result.efficiency_pct == pytest.approx(expected_yield / expected_power * 100.0)
    assert result.status == "Optimization Complete"


def test_high_temperature_takes_precedence_over_low_catalyst() -> None:
    result = optimize({"temperature": 1400, "catalystEfficiency": 80})

    assert result.prediction is PredictionCategory.HIGH_TEMP_WARNING
    assert "12-15 hours" in result.prediction_message


def test_low_catalyst_alert() -> None:
    result = optimize({"temperature_c": 1200, "catalyst_efficiency_pct": 80})

    assert result.prediction is PredictionCategory.LOW_CATALYST_ALERT
    assert "maintenance cycle" in result.prediction_message


def test_high_efficiency_is_optimal() -> None:
    result = optimize(
        {"temperature": 1250, "flowRate": 100, "catalystEfficiency": 95, "energyInput": 100}
    )

    assert result.efficiency_pct > 75
    assert result.prediction is PredictionCategory.OPTIMAL


def test_reference_operating_point_is_suboptimal() -> None:
    result = optimize(
        {"temperature": 1150, "flowRate": 90, "catalystEfficiency": 95, "energyInput": 150}
    )

    assert result.efficiency_pct == pytest.approx(64.94, abs=0.01)
    assert result.prediction is PredictionCategory.SUBOPTIMAL
    assert "15%" in result.prediction_message


def test_inputs_are_clamped_to_domain() -> None:
    parameters = ProcessParameters.from_mapping(
        {"temperature": 2000, "flowRate": -10, "energyInput": 0, "pressure": "high"}
    )

    assert parameters.temperature_c == 1500.0
    assert parameters.flow_rate_pct == 0.0
    assert parameters.energy_input_kw == 50.0
    assert parameters.pressure_atm == 2.5

    result = optimize(parameters)
    assert result.methane_yield == 0.0
    assert result.efficiency_pct == 0.0


def test_unknown_parameter_is_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        optimize({"voltage": 400})


def test_optimize_is_deterministic() -> None:
    parameters = ProcessParameters(temperature_c=1275.0, catalyst_efficiency_pct=88.5)

    assert optimize(parameters) == optimize(parameters)


def test_thresholds_follow_settings() -> None:
    settings = EngineSettings(high_temperature_c=1100.0)

    result = optimize(ProcessParameters(temperature_c=1200.0), settings=settings)

    assert result.prediction is PredictionCategory.HIGH_TEMP_WARNING


def test_rule_list_is_evaluated_in_order() -> None:
    inputs = DiagnosticInputs(temperature_c=1400.0, catalyst_efficiency_pct=50.0, efficiency_pct=90)
    settings = EngineSettings()

    assert classify(inputs, settings) is PredictionCategory.HIGH_TEMP_WARNING
    assert classify(inputs, settings, DIAGNOSTIC_RULES[1:]) is PredictionCategory.LOW_CATALYST_ALERT
    assert classify(inputs, settings, DIAGNOSTIC_RULES[2:]) is PredictionCategory.OPTIMAL
    assert classify(inputs, settings, ()) is PredictionCategory.SUBOPTIMAL


def test_reported_efficiency_is_clamped_at_domain_corner() -> None:
    result = optimize(
        {"temperature": 1500, "flowRate": 100, "catalystEfficiency": 100, "energyInput": 50}
    )

    assert result.methane_yield == pytest.approx(106.25)
    assert result.power_consumption_kw == pytest.approx(35.0)
    assert result.efficiency_pct == 100.0
    assert result.prediction is PredictionCategory.HIGH_TEMP_WARNING


def test_direct_construction_validates_while_mapping_input_clamps() -> None:
    with pytest.raises(ValueError):
        ProcessParameters(temperature_c=2000.0)

    result = optimize({"temperature": 2000})

    assert result.prediction is PredictionCategory.HIGH_TEMP_WARNING


def test_overflowing_parameter_keeps_default() -> None:
    parameters = ProcessParameters.from_mapping({"temperature": 10**400})

    assert parameters.temperature_c == 1200.0
