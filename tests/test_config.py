import json

import pytest

from plasmafuel.config import EngineSettings, load_settings, save_settings
from plasmafuel.errors import ConfigurationError


def test_settings_round_trip(tmp_path) -> None:
    settings = EngineSettings(alert_power_kw=220.0, sensor_drift_probability=0.05)

    path = save_settings(settings, tmp_path / "engine.json")

    assert path.exists()
    assert load_settings(path) == settings


def test_partial_settings_file_keeps_defaults(tmp_path) -> None:
    path = tmp_path / "engine.json"
    path.write_text(json.dumps({"high_temperature_c": 1250}), encoding="utf-8")

    settings = load_settings(path)

    assert settings.high_temperature_c == 1250.0
    assert settings.min_catalyst_efficiency_pct == 85.0


def test_unknown_setting_is_configuration_error(tmp_path) -> None:
    path = tmp_path / "engine.json"
    path.write_text(json.dumps({"plasma_colour": "blue"}), encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_settings(path)


def test_malformed_settings_file(tmp_path) -> None:
    path = tmp_path / "engine.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_settings(path)


def test_missing_settings_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "missing.json")


def test_invalid_probability_rejected() -> None:
    with pytest.raises(ConfigurationError):
        EngineSettings(sensor_drift_probability=1.5)


def test_with_overrides() -> None:
    settings = EngineSettings().with_overrides(reference_crew_size=6)

    assert settings.reference_crew_size == 6.0
    with pytest.raises(ConfigurationError):
        EngineSettings().with_overrides(unknown=1.0)
