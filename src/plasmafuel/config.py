from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from plasmafuel.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineSettings:
    high_temperature_c: float = 1300.0
    min_catalyst_efficiency_pct: float = 85.0
    optimal_efficiency_pct: float = 75.0
    alert_efficiency_pct: float = 70.0
    alert_power_kw: float = 200.0
    sensor_drift_probability: float = 0.2
    reference_crew_size: float = 4.0
    reference_total_mass_kg: float = 100.0
    render_budget_ms: float = 1000.0 / 60.0

    def __post_init__(self) -> None:
        if not 0 <= self.sensor_drift_probability <= 1:
            msg = "sensor_drift_probability must be between 0 and 1"
            raise ConfigurationError(msg)
        if self.reference_crew_size <= 0:
            msg = "reference_crew_size must be positive"
            raise ConfigurationError(msg)
        if self.reference_total_mass_kg < 0:
            msg = "reference_total_mass_kg must be non-negative"
            raise ConfigurationError(msg)
        if self.render_budget_ms <= 0:
            msg = "render_budget_ms must be positive"
            raise ConfigurationError(msg)

    def to_dict(self) -> dict[str, float]:
        return asdict(self)

    @staticmethod
    def from_dict(payload: dict[str, object]) -> EngineSettings:
        known = {field.name for field in fields(EngineSettings)}
        unknown = sorted(set(payload) - known)
        if unknown:
            msg = f"Unknown engine settings: {unknown}"
            raise ConfigurationError(msg)
        try:
            values = {key: float(value) for key, value in payload.items()}
        except (TypeError, ValueError, OverflowError) as exc:
            msg = f"Engine settings must be numeric: {exc}"
            raise ConfigurationError(msg) from exc
        return EngineSettings(**values)

    def with_overrides(self, **overrides: float) -> EngineSettings:
        merged = {**self.to_dict(), **overrides}
        return EngineSettings.from_dict(merged)


DEFAULT_SETTINGS = EngineSettings()


def load_settings(settings_path: str | Path) -> EngineSettings:
    path = Path(settings_path)
    if not path.exists():
        msg = f"Settings file does not exist: {path}"
        raise FileNotFoundError(msg)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        msg = f"Settings file is not valid JSON: {path}"
        raise ConfigurationError(msg) from exc
    if not isinstance(payload, dict):
        msg = f"Settings file must contain a JSON object: {path}"
        raise ConfigurationError(msg)
    settings = EngineSettings.from_dict(payload)
    logger.debug("Loaded engine settings from %s", path)
    return settings


def save_settings(settings: EngineSettings, settings_path: str | Path) -> Path:
    path = Path(settings_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")
    return path


def resolve_settings(settings: EngineSettings | None) -> EngineSettings:
    return DEFAULT_SETTINGS if settings is None else settings


__all__ = [
    "EngineSettings",
    "DEFAULT_SETTINGS",
    "load_settings",
    "save_settings",
    "resolve_settings",
]
