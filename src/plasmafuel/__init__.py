"""plasmafuel public API: waste-to-fuel process simulation and scoring engine."""

from plasmafuel.config import DEFAULT_SETTINGS, EngineSettings, load_settings, save_settings
from plasmafuel.errors import ConfigurationError
from plasmafuel.feedstock.composition import REFERENCE_MIX, WasteComposition, normalize
from plasmafuel.feedstock.estimates import (
    StreamType,
    estimate_efficiency,
    estimate_energy_output,
    estimate_processing_time,
)
from plasmafuel.feedstock.profiles import MaterialCategory, MaterialProfile, ProfileTable
from plasmafuel.monitoring.context import MonitoringContext
from plasmafuel.optimizer.process import OptimizationResult, ProcessParameters, optimize
from plasmafuel.optimizer.rules import PredictionCategory
from plasmafuel.planning.alerts import Alert, evaluate_alerts
from plasmafuel.planning.maintenance import (
    MaintenanceRule,
    MaintenanceTask,
    Priority,
    schedule_maintenance,
)
from plasmafuel.planning.projections import (
    DailyBaseline,
    Projection,
    ProjectionSchedule,
    project,
    projections_to_frame,
)
from plasmafuel.reactor.decomposition import SimulationResult, simulate_decomposition
from plasmafuel.twin.dashboard import (
    DashboardMetrics,
    DashboardSnapshot,
    run_dashboard,
    run_dashboard_cycle,
    sample_daily_baseline,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "EngineSettings",
    "DEFAULT_SETTINGS",
    "load_settings",
    "save_settings",
    "ConfigurationError",
    "MaterialCategory",
    "MaterialProfile",
    "ProfileTable",
    "WasteComposition",
    "REFERENCE_MIX",
    "normalize",
    "SimulationResult",
    "simulate_decomposition",
    "ProcessParameters",
    "OptimizationResult",
    "PredictionCategory",
    "optimize",
    "DailyBaseline",
    "Projection",
    "ProjectionSchedule",
    "project",
    "projections_to_frame",
    "Priority",
    "MaintenanceRule",
    "MaintenanceTask",
    "schedule_maintenance",
    "Alert",
    "evaluate_alerts",
    "DashboardMetrics",
    "DashboardSnapshot",
    "sample_daily_baseline",
    "run_dashboard_cycle",
    "run_dashboard",
    "StreamType",
    "estimate_energy_output",
    "estimate_processing_time",
    "estimate_efficiency",
    "MonitoringContext",
]
