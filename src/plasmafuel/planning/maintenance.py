from __future__ import annotations

import logging
import operator
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum

from plasmafuel.config import EngineSettings, resolve_settings
from plasmafuel.planning.readings import numeric_reading

logger = logging.getLogger(__name__)

PRESSURE_INSPECTION_ATM = 4.5


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return {"low": 0, "medium": 1, "high": 2}[self.value]


_COMPARATORS: dict[str, Callable[[float, float], bool]] = {
    ">": operator.gt,
    ">=": operator.ge,
    "<": operator.lt,
    "<=": operator.le,
}


@dataclass(frozen=True)
class MaintenanceTrigger:
    metric: str
    comparator: str
    threshold: float

    def __post_init__(self) -> None:
        if self.comparator not in _COMPARATORS:
            msg = f"comparator must be one of {sorted(_COMPARATORS)}"
            raise ValueError(msg)

    def fires(self, metrics: Mapping[str, object]) -> bool:
        value = numeric_reading(metrics, self.metric)
        if value is None:
            return False
        return _COMPARATORS[self.comparator](value, self.threshold)


@dataclass(frozen=True)
class MaintenanceRule:
    task: str
    recurrence_days: float
    priority: Priority
    duration_hr: float
    first_due_days: float | None = None
    trigger: MaintenanceTrigger | None = None

    def __post_init__(self) -> None:
        if self.recurrence_days <= 0:
            msg = "recurrence_days must be positive"
            raise ValueError(msg)
        if self.duration_hr <= 0:
            msg = "duration_hr must be positive"
            raise ValueError(msg)
        if self.first_due_days is not None and self.first_due_days < 0:
            msg = "first_due_days must be non-negative"
            raise ValueError(msg)

    def days_until_due(self, elapsed_days: float) -> float:
        first_due = self.recurrence_days if self.first_due_days is None else self.first_due_days
        if elapsed_days < first_due:
            return first_due - elapsed_days
        since_first = elapsed_days - first_due
        remainder = since_first % self.recurrence_days
        return 0.0 if remainder == 0 else self.recurrence_days - remainder


@dataclass(frozen=True)
class MaintenanceTask:
    task: str
    time_remaining_days: float
    priority: Priority
    duration_hr: float
    triggered: bool = False

    @property
    def time_remaining(self) -> str:
        days = round(self.time_remaining_days)
        return f"{days} day" if days == 1 else f"{days} days"

    @property
    def duration(self) -> str:
        hours = self.duration_hr
        label = f"{hours:g}"
        return f"{label} hour" if hours == 1 else f"{label} hours"

    def to_dict(self) -> dict[str, float | str | bool]:
        return {
            "task": self.task,
            "time_remaining_days": self.time_remaining_days,
            "time_remaining": self.time_remaining,
            "priority": self.priority.value,
            "duration_hr": self.duration_hr,
            "duration": self.duration,
            "triggered": self.triggered,
        }


def default_maintenance_rules(
    settings: EngineSettings | None = None,
) -> tuple[MaintenanceRule, ...]:
    """Reference rule table; temperature and catalyst triggers follow the diagnostic thresholds."""
    cfg = resolve_settings(settings)
    return (
        MaintenanceRule(
            task="Plasma chamber cleaning",
            recurrence_days=30.0,
            first_due_days=18.0,
            priority=Priority.MEDIUM,
            duration_hr=2.0,
            trigger=MaintenanceTrigger("temperature_c", ">", cfg.high_temperature_c),
        ),
        MaintenanceRule(
            task="Catalyst replacement",
            recurrence_days=90.0,
            first_due_days=45.0,
            priority=Priority.HIGH,
            duration_hr=4.0,
            trigger=MaintenanceTrigger(
                "catalyst_efficiency_pct", "<", cfg.min_catalyst_efficiency_pct
            ),
        ),
        MaintenanceRule(
            task="Flow sensor calibration",
            recurrence_days=14.0,
            first_due_days=8.0,
            priority=Priority.LOW,
            duration_hr=1.0,
            trigger=MaintenanceTrigger("sensor_drift", ">=", 1.0),
        ),
        MaintenanceRule(
            task="Pressure vessel inspection",
            recurrence_days=180.0,
            first_due_days=72.0,
            priority=Priority.HIGH,
            duration_hr=3.0,
            trigger=MaintenanceTrigger("pressure_atm", ">", PRESSURE_INSPECTION_ATM),
        ),
    )


DEFAULT_MAINTENANCE_RULES = default_maintenance_rules()


def schedule_maintenance(
    metrics: Mapping[str, object] | None = None,
    *,
    elapsed_days: float = 0.0,
    rules: Sequence[MaintenanceRule] | None = None,
    settings: EngineSettings | None = None,
) -> list[MaintenanceTask]:
    """Regenerate the whole maintenance schedule from the rule table.

    A rule whose trigger fires on ``metrics`` is due immediately at high
    priority; missing or unreadable readings never fire. Tasks are ordered by
    priority (high first), then by time to due. ``settings`` supplies the
    temperature and catalyst trigger thresholds of the default rule table.
    """
    readings = metrics or {}
    elapsed = max(0.0, float(elapsed_days))
    tasks: list[MaintenanceTask] = []
    for rule in default_maintenance_rules(settings) if rules is None else rules:
        triggered = rule.trigger is not None and rule.trigger.fires(readings)
        tasks.append(
            MaintenanceTask(
                task=rule.task,
                time_remaining_days=0.0 if triggered else rule.days_until_due(elapsed),
                priority=Priority.HIGH if triggered else rule.priority,
                duration_hr=rule.duration_hr,
                triggered=triggered,
            )
        )
        if triggered:
            logger.info("Maintenance triggered early: %s", rule.task)

    tasks.sort(key=lambda item: (-item.priority.rank, item.time_remaining_days))
    return tasks


__all__ = [
    "Priority",
    "MaintenanceTrigger",
    "MaintenanceRule",
    "MaintenanceTask",
    "DEFAULT_MAINTENANCE_RULES",
    "PRESSURE_INSPECTION_ATM",
    "default_maintenance_rules",
    "schedule_maintenance",
]
