from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import asdict, dataclass

from plasmafuel.config import EngineSettings, resolve_settings
from plasmafuel.feedstock.composition import WasteComposition, normalize
from plasmafuel.feedstock.profiles import DEFAULT_PROFILE_TABLE, MaterialCategory, ProfileTable

logger = logging.getLogger(__name__)

METHANE_ENERGY_VALUE = 50.0
HYDROGEN_ENERGY_VALUE = 120.0
SUSTAINABILITY_WEIGHT = 1.2


def _clamp(value: float, min_value: float, max_value: float) -> float:
    return max(min_value, min(value, max_value))


@dataclass(frozen=True)
class SimulationResult:
    energy_needs_kwh: float
    methane_output_kg: float
    carbon_production_kg: float
    hydrogen_output_kg: float
    cycle_efficiency: float
    sustainability_score: float

    def __post_init__(self) -> None:
        if self.energy_needs_kwh < 0:
            msg = "energy_needs_kwh must be non-negative"
            raise ValueError(msg)
        if self.methane_output_kg < 0:
            msg = "methane_output_kg must be non-negative"
            raise ValueError(msg)
        if self.carbon_production_kg < 0:
            msg = "carbon_production_kg must be non-negative"
            raise ValueError(msg)
        if self.hydrogen_output_kg < 0:
            msg = "hydrogen_output_kg must be non-negative"
            raise ValueError(msg)
        if self.cycle_efficiency < 0:
            msg = "cycle_efficiency must be non-negative"
            raise ValueError(msg)
        if not 0 <= self.sustainability_score <= 100:
            msg = "sustainability_score must be between 0 and 100"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


def cycle_efficiency(methane_kg: float, hydrogen_kg: float, energy_needs_kwh: float) -> float:
    """Recovered fuel energy value per unit of input energy; 0 when nothing is fed."""
    if energy_needs_kwh <= 0:
        return 0.0
    recovered = (methane_kg * METHANE_ENERGY_VALUE) + (hydrogen_kg * HYDROGEN_ENERGY_VALUE)
    return max(0.0, recovered / energy_needs_kwh)


def sustainability_score(efficiency: float) -> float:
    return _clamp(efficiency * SUSTAINABILITY_WEIGHT, 0.0, 100.0)


def simulate_decomposition(
    composition: WasteComposition | Mapping[MaterialCategory | str, object],
    total_mass_kg: float | None = None,
    *,
    profiles: ProfileTable | None = None,
    settings: EngineSettings | None = None,
) -> SimulationResult:
    """Convert a feedstock mix and batch mass into energy demand and product outputs.

    ``total_mass_kg`` defaults to ``settings.reference_total_mass_kg``.
    """
    if not isinstance(composition, WasteComposition):
        composition = normalize(composition)
    table = profiles or DEFAULT_PROFILE_TABLE
    if total_mass_kg is None:
        total_mass_kg = resolve_settings(settings).reference_total_mass_kg
    batch_mass = max(0.0, float(total_mass_kg))

    energy_needs = 0.0
    methane = 0.0
    carbon = 0.0
    hydrogen = 0.0
    for category, percentage in composition.items():
        profile = table.profile_for(category)
        category_mass = (percentage / 100.0) * batch_mass
        decomposed = category_mass * profile.decomposition_rate

        energy_needs += category_mass * profile.energy_requirement_kwh_per_kg
        methane += decomposed * profile.methane_fraction
        carbon += decomposed * profile.carbon_fraction
        hydrogen += decomposed * profile.hydrogen_fraction

    efficiency = cycle_efficiency(methane, hydrogen, energy_needs)
    result = SimulationResult(
        energy_needs_kwh=energy_needs,
        methane_output_kg=methane,
        carbon_production_kg=carbon,
        hydrogen_output_kg=hydrogen,
        cycle_efficiency=efficiency,
        sustainability_score=sustainability_score(efficiency),
    )
    logger.debug(
        "Decomposed %.1f kg: energy=%.2f kWh efficiency=%.2f score=%.1f",
        batch_mass,
        result.energy_needs_kwh,
        result.cycle_efficiency,
        result.sustainability_score,
    )
    return result


__all__ = [
    "SimulationResult",
    "simulate_decomposition",
    "cycle_efficiency",
    "sustainability_score",
]
