import pytest

from plasmafuel.errors import ConfigurationError
from plasmafuel.planning.projections import (
    DailyBaseline,
    ProjectionSchedule,
    project,
    projections_to_frame,
    scaling_factor,
)

BASELINE = DailyBaseline(waste_kg=150.0, methane_kg=85.0, power_kwh=180.0, efficiency_pct=75.0)


def test_reference_crew_has_unit_scaling() -> None:
    assert scaling_factor(4) == 1.0
    assert scaling_factor(6) == pytest.approx(1.5)


def test_first_period_annualizes_baseline() -> None:
    year_one = project(BASELINE, crew_size=4, periods=1)[0]

    assert year_one.label == "year1"
    assert year_one.waste_tonnes == pytest.approx(150.0 * 365 / 1000)
    assert year_one.methane_tonnes == pytest.approx(85.0 * 365 / 1000)
    assert year_one.power_mwh == pytest.approx(180.0 * 365 / 1000)
    assert year_one.efficiency_pct == pytest.approx(75.0 * 0.95)


def test_doubling_crew_doubles_first_period() -> None:
    base = project(BASELINE, crew_size=4, periods=1)[0]
    doubled = project(BASELINE, crew_size=8, periods=1)[0]

    assert doubled.waste_tonnes == pytest.approx(2 * base.waste_tonnes)
    assert doubled.methane_tonnes == pytest.approx(2 * base.methane_tonnes)
    assert doubled.power_mwh == pytest.approx(2 * base.power_mwh)


def test_three_period_multipliers() -> None:
    projections = project(BASELINE, crew_size=4, periods=3)
    year_one, year_two, year_three = projections

    assert [item.period for item in projections] == [1, 2, 3]
    assert year_two.waste_tonnes == pytest.approx(year_one.waste_tonnes * 1.1)
    assert year_three.waste_tonnes == pytest.approx(year_one.waste_tonnes * 1.2)
    assert year_two.methane_tonnes == pytest.approx(year_one.methane_tonnes * 1.15)
    assert year_three.methane_tonnes == pytest.approx(year_one.methane_tonnes * 1.25)
    assert year_two.power_mwh == pytest.approx(year_one.power_mwh * 0.9)
    assert year_three.power_mwh == pytest.approx(year_one.power_mwh * 0.85)
    assert year_two.efficiency_pct == pytest.approx(75.0 * 0.98)
    assert year_three.efficiency_pct == pytest.approx(75.0 * 1.02)


def test_periods_past_schedule_hold_last_multiplier() -> None:
    projections = project(BASELINE, crew_size=4, periods=5)

    assert len(projections) == 5
    assert projections[4].waste_tonnes == pytest.approx(projections[2].waste_tonnes)
    assert projections[4].label == "year5"


def test_zero_periods_and_negative_crew() -> None:
    assert project(BASELINE, crew_size=4, periods=0) == []
    projections = project(BASELINE, crew_size=-3, periods=2)
    assert all(item.waste_tonnes == 0.0 for item in projections)


def test_efficiency_is_clamped() -> None:
    schedule = ProjectionSchedule(efficiency=(2.0,))
    projections = project(
        {"waste": 10, "methane": 5, "power": 20, "efficiency": 90},
        crew_size=4,
        periods=1,
        schedule=schedule,
    )

    assert projections[0].efficiency_pct == 100.0


def test_unknown_baseline_metric_is_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        project({"waste": 10, "steam": 4}, crew_size=4, periods=1)


def test_projections_to_frame() -> None:
    frame = projections_to_frame(project(BASELINE, crew_size=6, periods=3))

    assert list(frame["label"]) == ["year1", "year2", "year3"]
    assert (frame["waste_tonnes"] > 0).all()
    assert frame["waste_tonnes"].is_monotonic_increasing
    assert frame["power_mwh"].is_monotonic_decreasing


def test_overflowing_baseline_metric_becomes_zero() -> None:
    baseline = DailyBaseline.from_mapping({"waste": 10**400, "methane": 85})

    assert baseline.waste_kg == 0.0
    assert baseline.methane_kg == 85.0
