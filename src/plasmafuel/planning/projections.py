from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import asdict, dataclass

import numpy as np
import pandas as pd

from plasmafuel.config import EngineSettings, resolve_settings
from plasmafuel.errors import ConfigurationError

logger = logging.getLogger(__name__)

DAYS_PER_PERIOD = 365.0
KG_PER_TONNE = 1000.0

_BASELINE_ALIASES = {
    "waste": "waste_kg",
    "methane": "methane_kg",
    "power": "power_kwh",
    "efficiency": "efficiency_pct",
}


@dataclass(frozen=True)
class DailyBaseline:
    waste_kg: float
    methane_kg: float
    power_kwh: float
    efficiency_pct: float

    @staticmethod
    def from_mapping(raw: Mapping[str, object]) -> DailyBaseline:
        values: dict[str, float] = {}
        for key, value in raw.items():
            name = _BASELINE_ALIASES.get(key, key)
            if name not in _BASELINE_ALIASES.values():
                msg = f"Unknown baseline metric: {key!r}"
                raise ConfigurationError(msg)
            try:
                values[name] = float(value)  # type: ignore[arg-type]
            except (TypeError, ValueError, OverflowError):
                values[name] = 0.0
        return DailyBaseline(
            waste_kg=values.get("waste_kg", 0.0),
            methane_kg=values.get("methane_kg", 0.0),
            power_kwh=values.get("power_kwh", 0.0),
            efficiency_pct=values.get("efficiency_pct", 0.0),
        )

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class ProjectionSchedule:
    """Per-period multipliers relative to the first annualized period."""

    waste: tuple[float, ...] = (1.0, 1.1, 1.2)
    methane: tuple[float, ...] = (1.0, 1.15, 1.25)
    power: tuple[float, ...] = (1.0, 0.9, 0.85)
    efficiency: tuple[float, ...] = (0.95, 0.98, 1.02)

    def __post_init__(self) -> None:
        for name in ("waste", "methane", "power", "efficiency"):
            multipliers = getattr(self, name)
            if not multipliers:
                msg = f"{name} multipliers must not be empty"
                raise ValueError(msg)
            if any(value < 0 for value in multipliers):
                msg = f"{name} multipliers must be non-negative"
                raise ValueError(msg)

    @staticmethod
    def _at(multipliers: tuple[float, ...], index: int) -> float:
        # Periods beyond the table hold the last calibrated multiplier.
        return multipliers[min(index, len(multipliers) - 1)]

    def multipliers(self, index: int) -> tuple[float, float, float, float]:
        return (
            self._at(self.waste, index),
            self._at(self.methane, index),
            self._at(self.power, index),
            self._at(self.efficiency, index),
        )


DEFAULT_SCHEDULE = ProjectionSchedule()


@dataclass(frozen=True)
class Projection:
    period: int
    label: str
    waste_tonnes: float
    methane_tonnes: float
    power_mwh: float
    efficiency_pct: float

    def to_dict(self) -> dict[str, float | int | str]:
        return asdict(self)


def scaling_factor(crew_size: float, settings: EngineSettings | None = None) -> float:
    cfg = resolve_settings(settings)
    return max(0.0, float(crew_size)) / cfg.reference_crew_size


def project(
    daily_baseline: DailyBaseline | Mapping[str, object],
    crew_size: float,
    periods: int,
    *,
    schedule: ProjectionSchedule | None = None,
    settings: EngineSettings | None = None,
) -> list[Projection]:
    """Extrapolate one daily baseline sample into ``periods`` annual projections."""
    if not isinstance(daily_baseline, DailyBaseline):
        daily_baseline = DailyBaseline.from_mapping(daily_baseline)
    plan = schedule or DEFAULT_SCHEDULE
    scale = scaling_factor(crew_size, settings)
    period_count = max(0, int(periods))
    annualize = DAYS_PER_PERIOD * scale / KG_PER_TONNE

    waste = max(0.0, daily_baseline.waste_kg) * annualize
    methane = max(0.0, daily_baseline.methane_kg) * annualize
    power = max(0.0, daily_baseline.power_kwh) * annualize
    efficiency = max(0.0, daily_baseline.efficiency_pct)

    projections: list[Projection] = []
    for index in range(period_count):
        waste_mult, methane_mult, power_mult, efficiency_mult = plan.multipliers(index)
        projections.append(
            Projection(
                period=index + 1,
                label=f"year{index + 1}",
                waste_tonnes=waste * waste_mult,
                methane_tonnes=methane * methane_mult,
                power_mwh=power * power_mult,
                efficiency_pct=float(np.clip(efficiency * efficiency_mult, 0.0, 100.0)),
            )
        )
    logger.debug("Projected %d periods at scaling factor %.2f", period_count, scale)
    return projections


def projections_to_frame(projections: Sequence[Projection]) -> pd.DataFrame:
    columns = ["period", "label", "waste_tonnes", "methane_tonnes", "power_mwh", "efficiency_pct"]
    return pd.DataFrame([item.to_dict() for item in projections], columns=columns)


__all__ = [
    "DailyBaseline",
    "ProjectionSchedule",
    "DEFAULT_SCHEDULE",
    "Projection",
    "scaling_factor",
    "project",
    "projections_to_frame",
]
