from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from plasmafuel.config import EngineSettings


class PredictionCategory(str, Enum):
    HIGH_TEMP_WARNING = "HighTempWarning"
    LOW_CATALYST_ALERT = "LowCatalystAlert"
    OPTIMAL = "Optimal"
    SUBOPTIMAL = "Suboptimal"


PREDICTION_MESSAGES: dict[PredictionCategory, str] = {
    PredictionCategory.HIGH_TEMP_WARNING: (
        "WARNING: High temperature detected. Catalyst fouling likely in 12-15 hours."
    ),
    PredictionCategory.LOW_CATALYST_ALERT: (
        "ALERT: Catalyst efficiency below optimal. Recommend maintenance cycle."
    ),
    PredictionCategory.OPTIMAL: (
        "OPTIMAL: System operating at peak efficiency. Methane production maximized."
    ),
    PredictionCategory.SUBOPTIMAL: (
        "SUBOPTIMAL: Adjusting parameters for improved yield. "
        "Efficiency can be increased by 15%."
    ),
}


@dataclass(frozen=True)
class DiagnosticInputs:
    temperature_c: float
    catalyst_efficiency_pct: float
    efficiency_pct: float


@dataclass(frozen=True)
class DiagnosticRule:
    name: str
    predicate: Callable[[DiagnosticInputs, EngineSettings], bool]
    outcome: PredictionCategory


DIAGNOSTIC_RULES: tuple[DiagnosticRule, ...] = (
    DiagnosticRule(
        name="high_temperature",
        predicate=lambda inputs, cfg: inputs.temperature_c > cfg.high_temperature_c,
        outcome=PredictionCategory.HIGH_TEMP_WARNING,
    ),
    DiagnosticRule(
        name="low_catalyst",
        predicate=lambda inputs, cfg: (
            inputs.catalyst_efficiency_pct < cfg.min_catalyst_efficiency_pct
        ),
        outcome=PredictionCategory.LOW_CATALYST_ALERT,
    ),
    DiagnosticRule(
        name="optimal_efficiency",
        predicate=lambda inputs, cfg: inputs.efficiency_pct > cfg.optimal_efficiency_pct,
        outcome=PredictionCategory.OPTIMAL,
    ),
)


def classify(
    inputs: DiagnosticInputs,
    settings: EngineSettings,
    rules: Sequence[DiagnosticRule] = DIAGNOSTIC_RULES,
    default: PredictionCategory = PredictionCategory.SUBOPTIMAL,
) -> PredictionCategory:
    """Return the outcome of the first matching rule; rule order is the precedence."""
    for rule in rules:
        if rule.predicate(inputs, settings):
            return rule.outcome
    return default


__all__ = [
    "PredictionCategory",
    "PREDICTION_MESSAGES",
    "DiagnosticInputs",
    "DiagnosticRule",
    "DIAGNOSTIC_RULES",
    "classify",
]
