import json

import pytest

from plasmafuel.cli import main


def _run(capsys, argv: list[str]) -> object:
    main(argv)
    return json.loads(capsys.readouterr().out)


def test_simulate_command_uses_reference_mix(capsys) -> None:
    payload = _run(capsys, ["simulate"])

    assert payload["composition_total"] == pytest.approx(100.0)
    assert payload["result"]["energy_needs_kwh"] == pytest.approx(228.0)


def test_optimize_command_reports_prediction(capsys) -> None:
    payload = _run(capsys, ["optimize", "--temperature", "1400", "--catalyst-efficiency", "80"])

    assert payload["result"]["prediction"] == "HighTempWarning"


def test_project_command_periods(capsys) -> None:
    payload = _run(capsys, ["project", "--crew-size", "4", "--periods", "2"])

    assert [item["label"] for item in payload["projections"]] == ["year1", "year2"]


def test_dashboard_command_with_settings_file(capsys, tmp_path) -> None:
    settings_path = tmp_path / "engine.json"
    settings_path.write_text(json.dumps({"sensor_drift_probability": 0.0}), encoding="utf-8")

    payload = _run(capsys, ["--settings", str(settings_path), "dashboard", "--seed", "1"])

    assert payload["alerts"] == []
    assert len(payload["maintenance"]) == 4


def test_dashboard_command_multiple_cycles(capsys) -> None:
    payload = _run(capsys, ["dashboard", "--cycles", "3", "--seed", "5"])

    assert len(payload) == 3


def test_simulate_command_reads_batch_mass_from_settings(capsys, tmp_path) -> None:
    settings_path = tmp_path / "engine.json"
    settings_path.write_text(json.dumps({"reference_total_mass_kg": 200.0}), encoding="utf-8")

    payload = _run(capsys, ["--settings", str(settings_path), "simulate"])

    assert payload["result"]["energy_needs_kwh"] == pytest.approx(456.0)
