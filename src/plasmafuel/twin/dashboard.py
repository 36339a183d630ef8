from __future__ import annotations

import logging
import math
from contextlib import nullcontext
from dataclasses import asdict, dataclass

import numpy as np
import pandas as pd

from plasmafuel.config import EngineSettings, resolve_settings
from plasmafuel.monitoring.context import MonitoringContext
from plasmafuel.optimizer.process import ProcessParameters
from plasmafuel.planning.alerts import SENSOR_DRIFT_ALERT, Alert, evaluate_alerts
from plasmafuel.planning.maintenance import MaintenanceTask, schedule_maintenance
from plasmafuel.planning.projections import DailyBaseline, Projection, project

logger = logging.getLogger(__name__)

CO2_OFFSET_PER_KG_WASTE = 2.3
REFERENCE_UPTIME_PCT = 98.7
DEFAULT_CREW_SIZE = 6
DEFAULT_POLL_INTERVAL_MS = 3000


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


@dataclass(frozen=True)
class DashboardMetrics:
    waste_processed_kg: float
    methane_stored_kg: float
    power_used_kwh: float
    co2_offset_kg: float
    system_efficiency_pct: float
    uptime_pct: float = REFERENCE_UPTIME_PCT

    def alert_readings(self) -> dict[str, float]:
        return {"efficiency": self.system_efficiency_pct, "power": self.power_used_kwh}

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class DashboardSnapshot:
    timestamp_ms: float
    metrics: DashboardMetrics
    projections: list[Projection]
    maintenance: list[MaintenanceTask]
    alerts: list[Alert]

    def to_dict(self) -> dict[str, object]:
        return {
            "timestamp_ms": self.timestamp_ms,
            "metrics": self.metrics.to_dict(),
            "projections": [item.to_dict() for item in self.projections],
            "maintenance": [item.to_dict() for item in self.maintenance],
            "alerts": [item.to_dict() for item in self.alerts],
        }


def sample_daily_baseline(timestamp_ms: float) -> DailyBaseline:
    """Synthetic daily operating signal: slow sinusoids around nominal plant output."""
    t = float(timestamp_ms)
    return DailyBaseline(
        waste_kg=150.0 + (math.sin(t / 10000.0) * 20.0),
        methane_kg=85.0 + (math.sin(t / 8000.0) * 15.0),
        power_kwh=180.0 + (math.sin(t / 12000.0) * 25.0),
        efficiency_pct=75.0 + (math.sin(t / 15000.0) * 15.0),
    )


def build_dashboard_metrics(baseline: DailyBaseline) -> DashboardMetrics:
    waste = max(0.0, baseline.waste_kg)
    return DashboardMetrics(
        waste_processed_kg=waste,
        methane_stored_kg=max(0.0, baseline.methane_kg),
        power_used_kwh=max(0.0, baseline.power_kwh),
        co2_offset_kg=waste * CO2_OFFSET_PER_KG_WASTE,
        system_efficiency_pct=100.0 * _clamp01(baseline.efficiency_pct / 100.0),
    )


def run_dashboard_cycle(
    timestamp_ms: float,
    *,
    crew_size: float = DEFAULT_CREW_SIZE,
    periods: int = 3,
    parameters: ProcessParameters | None = None,
    elapsed_days: float = 0.0,
    rng: np.random.Generator | None = None,
    settings: EngineSettings | None = None,
    context: MonitoringContext | None = None,
) -> DashboardSnapshot:
    """Run one polling pass: sample, project, evaluate alerts, regenerate maintenance."""
    cfg = resolve_settings(settings)
    baseline = sample_daily_baseline(timestamp_ms)
    metrics = build_dashboard_metrics(baseline)
    projections = project(baseline, crew_size, periods, settings=cfg)
    alerts = evaluate_alerts(metrics.alert_readings(), rng=rng, settings=cfg)

    readings = (parameters or ProcessParameters()).to_dict()
    readings["sensor_drift"] = float(any(alert.code == SENSOR_DRIFT_ALERT for alert in alerts))
    maintenance = schedule_maintenance(readings, elapsed_days=elapsed_days, settings=cfg)

    if context is not None:
        context.record_metrics(
            {
                "timestamp_ms": float(timestamp_ms),
                **metrics.alert_readings(),
                "waste": metrics.waste_processed_kg,
                "methane": metrics.methane_stored_kg,
            }
        )
    return DashboardSnapshot(
        timestamp_ms=float(timestamp_ms),
        metrics=metrics,
        projections=projections,
        maintenance=maintenance,
        alerts=alerts,
    )


def run_dashboard(
    *,
    cycles: int,
    start_ms: float = 0.0,
    interval_ms: float = DEFAULT_POLL_INTERVAL_MS,
    crew_size: float = DEFAULT_CREW_SIZE,
    parameters: ProcessParameters | None = None,
    seed: int | None = None,
    settings: EngineSettings | None = None,
    context: MonitoringContext | None = None,
) -> pd.DataFrame:
    """Run consecutive polling cycles and tabulate one row per cycle."""
    if cycles <= 0:
        msg = "cycles must be positive"
        raise ValueError(msg)
    if interval_ms <= 0:
        msg = "interval_ms must be positive"
        raise ValueError(msg)

    rng = np.random.default_rng(seed)
    rows: list[dict[str, float]] = []
    for cycle in range(cycles):
        timestamp_ms = start_ms + (cycle * interval_ms)
        timer = context.timed("dashboard_cycle") if context is not None else nullcontext()
        with timer:
            snapshot = run_dashboard_cycle(
                timestamp_ms,
                crew_size=crew_size,
                periods=1,
                parameters=parameters,
                rng=rng,
                settings=settings,
                context=context,
            )
        year_one = snapshot.projections[0]
        rows.append(
            {
                "cycle": float(cycle),
                "timestamp_ms": snapshot.timestamp_ms,
                **snapshot.metrics.to_dict(),
                "year1_waste_tonnes": year_one.waste_tonnes,
                "year1_methane_tonnes": year_one.methane_tonnes,
                "year1_power_mwh": year_one.power_mwh,
                "alert_count": float(len(snapshot.alerts)),
                "sensor_drift": float(
                    any(alert.code == SENSOR_DRIFT_ALERT for alert in snapshot.alerts)
                ),
                "next_maintenance_days": min(
                    task.time_remaining_days for task in snapshot.maintenance
                ),
            }
        )

    df = pd.DataFrame(rows)
    df["cum_waste_kg"] = df["waste_processed_kg"].cumsum()
    df["cum_co2_offset_kg"] = df["co2_offset_kg"].cumsum()
    logger.debug("Ran %d dashboard cycles", cycles)
    return df


__all__ = [
    "DashboardMetrics",
    "DashboardSnapshot",
    "sample_daily_baseline",
    "build_dashboard_metrics",
    "run_dashboard_cycle",
    "run_dashboard",
]
