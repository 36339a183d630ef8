import numpy as np
import pytest

from plasmafuel.config import EngineSettings
from plasmafuel.monitoring.context import MonitoringContext
from plasmafuel.optimizer.process import ProcessParameters
from plasmafuel.twin.dashboard import (
    build_dashboard_metrics,
    run_dashboard,
    run_dashboard_cycle,
    sample_daily_baseline,
)


def test_baseline_at_time_zero_is_nominal() -> None:
    baseline = sample_daily_baseline(0.0)

    assert baseline.waste_kg == pytest.approx(150.0)
    assert baseline.methane_kg == pytest.approx(85.0)
    assert baseline.power_kwh == pytest.approx(180.0)
    assert baseline.efficiency_pct == pytest.approx(75.0)


def test_dashboard_metrics_derive_offset_and_uptime() -> None:
    metrics = build_dashboard_metrics(sample_daily_baseline(12_345.0))

    assert metrics.co2_offset_kg == pytest.approx(metrics.waste_processed_kg * 2.3)
    assert metrics.uptime_pct == 98.7
    assert 0.0 <= metrics.system_efficiency_pct <= 100.0


def test_cycle_snapshot_contains_all_sections() -> None:
    snapshot = run_dashboard_cycle(0.0, rng=np.random.default_rng(1))

    assert len(snapshot.projections) == 3
    assert snapshot.projections[0].waste_tonnes == pytest.approx(150.0 * 365 * 1.5 / 1000)
    assert len(snapshot.maintenance) == 4
    payload = snapshot.to_dict()
    assert set(payload) == {"timestamp_ms", "metrics", "projections", "maintenance", "alerts"}


def test_cycle_feeds_drift_into_maintenance() -> None:
    settings = EngineSettings(sensor_drift_probability=1.0)
    snapshot = run_dashboard_cycle(0.0, settings=settings)
    calibration = next(
        task for task in snapshot.maintenance if task.task == "Flow sensor calibration"
    )

    assert calibration.triggered
    assert calibration.time_remaining_days == 0.0


def test_cycle_uses_process_parameters_for_triggers() -> None:
    snapshot = run_dashboard_cycle(
        0.0,
        parameters=ProcessParameters(temperature_c=1400.0),
        settings=EngineSettings(sensor_drift_probability=0.0),
    )
    cleaning = next(task for task in snapshot.maintenance if task.task == "Plasma chamber cleaning")

    assert cleaning.triggered


def test_run_dashboard_returns_one_row_per_cycle() -> None:
    context = MonitoringContext(max_metric_samples=5)
    df = run_dashboard(cycles=12, start_ms=0.0, seed=3, context=context)

    expected_columns = {
        "cycle",
        "timestamp_ms",
        "waste_processed_kg",
        "methane_stored_kg",
        "power_used_kwh",
        "co2_offset_kg",
        "system_efficiency_pct",
        "year1_waste_tonnes",
        "alert_count",
        "sensor_drift",
        "next_maintenance_days",
        "cum_waste_kg",
    }
    assert len(df) == 12
    assert expected_columns.issubset(set(df.columns))
    assert df["timestamp_ms"].diff().dropna().eq(3000.0).all()
    assert (df["waste_processed_kg"] >= 0).all()
    assert df["cum_waste_kg"].is_monotonic_increasing
    assert len(context.metric_samples) == 5
    assert len(context.timings) == 12


def test_run_dashboard_is_repeatable_with_seed() -> None:
    first = run_dashboard(cycles=20, seed=11)
    second = run_dashboard(cycles=20, seed=11)

    assert first.equals(second)


def test_run_dashboard_rejects_non_positive_cycles() -> None:
    with pytest.raises(ValueError):
        run_dashboard(cycles=0)
