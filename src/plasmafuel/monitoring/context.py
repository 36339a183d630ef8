from __future__ import annotations

import logging
import time
from collections import deque
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass

import numpy as np
import pandas as pd

from plasmafuel.config import EngineSettings, resolve_settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CallTiming:
    name: str
    duration_ms: float
    timestamp_s: float


class MonitoringContext:
    """Caller-owned rolling buffers for dashboard metrics and engine call timings.

    Create one per application root and pass it to whatever needs it. Buffers
    are bounded; the oldest sample is dropped once a buffer is full.
    """

    def __init__(
        self,
        *,
        max_metric_samples: int = 100,
        max_timing_samples: int = 100,
        settings: EngineSettings | None = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        if max_metric_samples <= 0:
            msg = "max_metric_samples must be positive"
            raise ValueError(msg)
        if max_timing_samples <= 0:
            msg = "max_timing_samples must be positive"
            raise ValueError(msg)
        self.settings = resolve_settings(settings)
        self._clock = clock
        self._metrics: deque[dict[str, float]] = deque(maxlen=max_metric_samples)
        self._timings: deque[CallTiming] = deque(maxlen=max_timing_samples)
        self._cleanup_tasks: list[Callable[[], None]] = []

    @property
    def metric_samples(self) -> list[dict[str, float]]:
        return list(self._metrics)

    @property
    def timings(self) -> list[CallTiming]:
        return list(self._timings)

    def record_metrics(self, metrics: Mapping[str, float]) -> None:
        self._metrics.append({key: float(value) for key, value in metrics.items()})

    def record_timing(self, name: str, duration_ms: float) -> None:
        self._timings.append(CallTiming(name, max(0.0, duration_ms), time.time()))

    @contextmanager
    def timed(self, name: str) -> Iterator[None]:
        start = self._clock()
        try:
            yield
        finally:
            self.record_timing(name, (self._clock() - start) * 1000.0)

    def history_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.metric_samples)

    def report(self) -> dict[str, object]:
        durations = np.array([item.duration_ms for item in self._timings], dtype=float)
        average_ms = float(durations.mean()) if durations.size else 0.0
        efficiencies = np.array(
            [sample["efficiency"] for sample in self._metrics if "efficiency" in sample],
            dtype=float,
        )
        mean_efficiency = float(efficiencies.mean()) if efficiencies.size else float("nan")

        recommendations: list[str] = []
        if average_ms > self.settings.render_budget_ms:
            recommendations.append(
                "Average engine call time exceeds the 60 fps refresh budget; "
                "reduce polling frequency or batch updates."
            )
        if efficiencies.size and mean_efficiency < self.settings.alert_efficiency_pct:
            recommendations.append(
                "Rolling efficiency below alert threshold; schedule a catalyst inspection."
            )

        return {
            "average_call_ms": average_ms,
            "timing_samples": int(durations.size),
            "metric_samples": len(self._metrics),
            "mean_efficiency": mean_efficiency,
            "latest_metrics": dict(self._metrics[-1]) if self._metrics else None,
            "recommendations": recommendations,
        }

    def register_cleanup(self, task: Callable[[], None]) -> None:
        self._cleanup_tasks.append(task)

    def cleanup(self) -> int:
        """Run every registered cleanup task, then clear buffers and the registry.

        Returns the number of tasks that failed; failures are logged and the
        remaining tasks still run.
        """
        failures = 0
        for task in self._cleanup_tasks:
            try:
                task()
            except Exception:
                failures += 1
                logger.warning("Cleanup task %r failed", task, exc_info=True)
        self._cleanup_tasks.clear()
        self._metrics.clear()
        self._timings.clear()
        return failures


__all__ = ["MonitoringContext", "CallTiming"]
