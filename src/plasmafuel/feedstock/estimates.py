from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

BASE_PROCESSING_MIN_PER_KG = 45.0
LOAD_PENALTY_THRESHOLD_PCT = 80.0
LOAD_PENALTY_PER_PCT = 0.2
EFFICIENCY_FLOOR_PCT = 60.0


class StreamType(str, Enum):
    ORGANIC = "organic"
    PLASTIC = "plastic"
    METAL = "metal"
    PAPER = "paper"
    FOOD = "food"
    MIXED = "mixed"


@dataclass(frozen=True)
class StreamRates:
    energy_kwh_per_kg: float
    time_multiplier: float
    base_efficiency_pct: float


STREAM_RATES: dict[StreamType, StreamRates] = {
    StreamType.ORGANIC: StreamRates(4.2, 0.8, 92.0),
    StreamType.PLASTIC: StreamRates(8.7, 1.2, 87.0),
    StreamType.METAL: StreamRates(2.1, 0.6, 95.0),
    StreamType.PAPER: StreamRates(3.8, 0.9, 89.0),
    StreamType.FOOD: StreamRates(4.5, 0.85, 91.0),
    StreamType.MIXED: StreamRates(4.0, 1.0, 85.0),
}


def resolve_stream(stream: StreamType | str | None) -> StreamType:
    """Unknown or empty stream names fall back to ``StreamType.MIXED``."""
    if isinstance(stream, StreamType):
        return stream
    if isinstance(stream, str):
        try:
            return StreamType(stream.strip().lower())
        except ValueError:
            return StreamType.MIXED
    return StreamType.MIXED


def estimate_energy_output(stream: StreamType | str | None, mass_kg: float) -> float:
    rates = STREAM_RATES[resolve_stream(stream)]
    return max(0.0, mass_kg) * rates.energy_kwh_per_kg


def estimate_processing_time(mass_kg: float, stream: StreamType | str | None) -> int:
    """Minutes of plasma processing for a single batch."""
    rates = STREAM_RATES[resolve_stream(stream)]
    return round(max(0.0, mass_kg) * BASE_PROCESSING_MIN_PER_KG * rates.time_multiplier)


def estimate_efficiency(stream: StreamType | str | None, system_load_pct: float) -> float:
    rates = STREAM_RATES[resolve_stream(stream)]
    load_penalty = max(0.0, (system_load_pct - LOAD_PENALTY_THRESHOLD_PCT) * LOAD_PENALTY_PER_PCT)
    return max(EFFICIENCY_FLOOR_PCT, rates.base_efficiency_pct - load_penalty)


__all__ = [
    "StreamType",
    "StreamRates",
    "STREAM_RATES",
    "resolve_stream",
    "estimate_energy_output",
    "estimate_processing_time",
    "estimate_efficiency",
]
