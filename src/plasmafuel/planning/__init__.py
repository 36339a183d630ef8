from plasmafuel.planning.alerts import Alert, AlertRule, evaluate_alerts
from plasmafuel.planning.maintenance import (
    DEFAULT_MAINTENANCE_RULES,
    MaintenanceRule,
    MaintenanceTask,
    MaintenanceTrigger,
    Priority,
    default_maintenance_rules,
    schedule_maintenance,
)
from plasmafuel.planning.projections import (
    DailyBaseline,
    Projection,
    ProjectionSchedule,
    project,
    projections_to_frame,
)

__all__ = [
    "DailyBaseline",
    "Projection",
    "ProjectionSchedule",
    "project",
    "projections_to_frame",
    "Priority",
    "MaintenanceTrigger",
    "MaintenanceRule",
    "MaintenanceTask",
    "DEFAULT_MAINTENANCE_RULES",
    "default_maintenance_rules",
    "schedule_maintenance",
    "Alert",
    "AlertRule",
    "evaluate_alerts",
]
