from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields

from plasmafuel.config import EngineSettings, resolve_settings
from plasmafuel.errors import ConfigurationError
from plasmafuel.optimizer.rules import (
    PREDICTION_MESSAGES,
    DiagnosticInputs,
    PredictionCategory,
    classify,
)

logger = logging.getLogger(__name__)

REFERENCE_TEMPERATURE_C = 1200.0
MAX_METHANE_YIELD = 85.0
CATALYST_POWER_SAVING = 0.3
STATUS_COMPLETE = "Optimization Complete"

PARAMETER_DOMAINS: dict[str, tuple[float, float]] = {
    "temperature_c": (800.0, 1500.0),
    "flow_rate_pct": (0.0, 100.0),
    "catalyst_efficiency_pct": (0.0, 100.0),
    "energy_input_kw": (50.0, 300.0),
    "pressure_atm": (1.0, 5.0),
}

_PARAMETER_ALIASES = {
    "temperature": "temperature_c",
    "flowRate": "flow_rate_pct",
    "flow_rate": "flow_rate_pct",
    "catalystEfficiency": "catalyst_efficiency_pct",
    "catalyst_efficiency": "catalyst_efficiency_pct",
    "energyInput": "energy_input_kw",
    "energy_input": "energy_input_kw",
    "pressure": "pressure_atm",
}


def _clamp(value: float, min_value: float, max_value: float) -> float:
    return max(min_value, min(value, max_value))


@dataclass(frozen=True)
class ProcessParameters:
    """Validated process settings.

    Direct construction rejects out-of-domain values. Operator or sensor input
    goes through ``from_mapping`` (or a mapping passed to ``optimize``), which
    clamps into ``PARAMETER_DOMAINS`` instead.
    """

    temperature_c: float = 1200.0
    flow_rate_pct: float = 85.0
    catalyst_efficiency_pct: float = 92.0
    energy_input_kw: float = 150.0
    pressure_atm: float = 2.5

    def __post_init__(self) -> None:
        for name, (low, high) in PARAMETER_DOMAINS.items():
            value = getattr(self, name)
            if not low <= value <= high:
                msg = f"{name} must be between {low} and {high}"
                raise ValueError(msg)

    @staticmethod
    def from_mapping(raw: Mapping[str, object]) -> ProcessParameters:
        """Build parameters from operator input, clamping into each domain.

        Keys may be snake_case field names or the console's camelCase names.
        Unknown keys raise ``ConfigurationError``; non-numeric values keep
        the default.
        """
        defaults = ProcessParameters()
        values = asdict(defaults)
        for key, value in raw.items():
            name = _PARAMETER_ALIASES.get(key, key)
            if name not in values:
                msg = f"Unknown process parameter: {key!r}"
                raise ConfigurationError(msg)
            try:
                number = float(value)  # type: ignore[arg-type]
            except (TypeError, ValueError, OverflowError):
                continue
            if math.isnan(number):
                continue
            low, high = PARAMETER_DOMAINS[name]
            values[name] = _clamp(number, low, high)
        return ProcessParameters(**values)

    def to_dict(self) -> dict[str, float]:
        return {field.name: float(getattr(self, field.name)) for field in fields(self)}


@dataclass(frozen=True)
class OptimizationResult:
    methane_yield: float
    power_consumption_kw: float
    efficiency_pct: float
    prediction: PredictionCategory
    prediction_message: str
    status: str = STATUS_COMPLETE

    def __post_init__(self) -> None:
        if self.methane_yield < 0:
            msg = "methane_yield must be non-negative"
            raise ValueError(msg)
        if self.power_consumption_kw < 0:
            msg = "power_consumption_kw must be non-negative"
            raise ValueError(msg)
        if not 0 <= self.efficiency_pct <= 100:
            msg = "efficiency_pct must be between 0 and 100"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, float | str]:
        return {
            "methane_yield": self.methane_yield,
            "power_consumption_kw": self.power_consumption_kw,
            "efficiency_pct": self.efficiency_pct,
            "prediction": self.prediction.value,
            "prediction_message": self.prediction_message,
            "status": self.status,
        }


def optimize(
    parameters: ProcessParameters | Mapping[str, object] | None = None,
    *,
    settings: EngineSettings | None = None,
) -> OptimizationResult:
    """Derive yield, power draw, efficiency and a diagnostic from live process parameters.

    Raw operator mappings are clamped through ``ProcessParameters.from_mapping``.
    The diagnostic sees the raw efficiency ratio; the reported ``efficiency_pct``
    is clamped to [0, 100].
    """
    if parameters is None:
        parameters = ProcessParameters()
    elif not isinstance(parameters, ProcessParameters):
        parameters = ProcessParameters.from_mapping(parameters)
    cfg = resolve_settings(settings)

    catalyst_fraction = parameters.catalyst_efficiency_pct / 100.0
    methane_yield = (
        (parameters.temperature_c / REFERENCE_TEMPERATURE_C)
        * (parameters.flow_rate_pct / 100.0)
        * catalyst_fraction
        * MAX_METHANE_YIELD
    )
    power_consumption = parameters.energy_input_kw * (
        1.0 - (catalyst_fraction * CATALYST_POWER_SAVING)
    )
    efficiency = 0.0
    if power_consumption > 0:
        efficiency = (methane_yield / power_consumption) * 100.0

    prediction = classify(
        DiagnosticInputs(
            temperature_c=parameters.temperature_c,
            catalyst_efficiency_pct=parameters.catalyst_efficiency_pct,
            efficiency_pct=efficiency,
        ),
        cfg,
    )
    logger.debug(
        "Optimized at %.0f C: yield=%.2f power=%.1f kW efficiency=%.1f%% -> %s",
        parameters.temperature_c,
        methane_yield,
        power_consumption,
        efficiency,
        prediction.value,
    )
    return OptimizationResult(
        methane_yield=max(0.0, methane_yield),
        power_consumption_kw=max(0.0, power_consumption),
        efficiency_pct=_clamp(efficiency, 0.0, 100.0),
        prediction=prediction,
        prediction_message=PREDICTION_MESSAGES[prediction],
    )


__all__ = [
    "ProcessParameters",
    "OptimizationResult",
    "optimize",
    "PARAMETER_DOMAINS",
]
