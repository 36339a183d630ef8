from plasmafuel.twin.dashboard import (
    DashboardMetrics,
    DashboardSnapshot,
    build_dashboard_metrics,
    run_dashboard,
    run_dashboard_cycle,
    sample_daily_baseline,
)

__all__ = [
    "DashboardMetrics",
    "DashboardSnapshot",
    "sample_daily_baseline",
    "build_dashboard_metrics",
    "run_dashboard_cycle",
    "run_dashboard",
]
