from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import asdict, dataclass

import numpy as np

from plasmafuel.config import EngineSettings, resolve_settings
from plasmafuel.planning.readings import numeric_reading

logger = logging.getLogger(__name__)

EFFICIENCY_ALERT = "efficiency_below_threshold"
POWER_ALERT = "power_above_threshold"
SENSOR_DRIFT_ALERT = "sensor_drift"


@dataclass(frozen=True)
class Alert:
    code: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class AlertRule:
    code: str
    message: str
    predicate: Callable[[Mapping[str, float], EngineSettings], bool]


def _efficiency_low(metrics: Mapping[str, float], cfg: EngineSettings) -> bool:
    value = numeric_reading(metrics, "efficiency")
    return value is not None and value < cfg.alert_efficiency_pct


def _power_high(metrics: Mapping[str, float], cfg: EngineSettings) -> bool:
    value = numeric_reading(metrics, "power")
    return value is not None and value > cfg.alert_power_kw


THRESHOLD_RULES: tuple[AlertRule, ...] = (
    AlertRule(
        code=EFFICIENCY_ALERT,
        message="System efficiency below optimal threshold. Check catalyst status.",
        predicate=_efficiency_low,
    ),
    AlertRule(
        code=POWER_ALERT,
        message="Power consumption elevated. Consider load balancing.",
        predicate=_power_high,
    ),
)

SENSOR_DRIFT_MESSAGE = "Predictive maintenance: Flow rate sensor drift detected."


def evaluate_alerts(
    metrics: Mapping[str, float],
    *,
    rng: np.random.Generator | None = None,
    settings: EngineSettings | None = None,
    rules: Sequence[AlertRule] = THRESHOLD_RULES,
) -> list[Alert]:
    """Evaluate every alert rule independently against one metrics sample.

    ``metrics`` uses the keys ``efficiency`` (percent) and ``power`` (kW);
    missing readings never fire. The sensor drift check is the only random
    rule and draws from ``rng``; pass a seeded generator for repeatable runs.
    """
    cfg = resolve_settings(settings)
    alerts = [Alert(rule.code, rule.message) for rule in rules if rule.predicate(metrics, cfg)]

    if cfg.sensor_drift_probability > 0:
        generator = rng if rng is not None else np.random.default_rng()
        if generator.random() < cfg.sensor_drift_probability:
            alerts.append(Alert(SENSOR_DRIFT_ALERT, SENSOR_DRIFT_MESSAGE))

    if alerts:
        logger.debug("Raised %d alerts: %s", len(alerts), [alert.code for alert in alerts])
    return alerts


__all__ = [
    "Alert",
    "AlertRule",
    "THRESHOLD_RULES",
    "EFFICIENCY_ALERT",
    "POWER_ALERT",
    "SENSOR_DRIFT_ALERT",
    "evaluate_alerts",
]
