from plasmafuel.monitoring.context import CallTiming, MonitoringContext

__all__ = ["MonitoringContext", "CallTiming"]
