from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Sequence

import numpy as np

from plasmafuel.config import EngineSettings, load_settings
from plasmafuel.feedstock.composition import REFERENCE_MIX, normalize
from plasmafuel.optimizer.process import ProcessParameters, optimize
from plasmafuel.planning.projections import DailyBaseline, project
from plasmafuel.reactor.decomposition import simulate_decomposition
from plasmafuel.twin.dashboard import run_dashboard, run_dashboard_cycle

logger = logging.getLogger(__name__)


def _settings_from_args(args: argparse.Namespace) -> EngineSettings | None:
    if args.settings is None:
        return None
    return load_settings(args.settings)


def _cmd_simulate(args: argparse.Namespace) -> dict[str, object]:
    composition = normalize(
        {
            "polymers": args.polymers,
            "packaging": args.packaging,
            "structural_residues": args.structural_residues,
            "organics": args.organics,
            "metals": args.metals,
        }
    )
    result = simulate_decomposition(
        composition, args.total_mass, settings=_settings_from_args(args)
    )
    return {
        "composition": composition.to_dict(),
        "composition_total": composition.total,
        "exceeds_full_scale": composition.exceeds_full_scale,
        "result": result.to_dict(),
    }


def _cmd_optimize(args: argparse.Namespace) -> dict[str, object]:
    parameters = ProcessParameters.from_mapping(
        {
            "temperature_c": args.temperature,
            "flow_rate_pct": args.flow_rate,
            "catalyst_efficiency_pct": args.catalyst_efficiency,
            "energy_input_kw": args.energy_input,
            "pressure_atm": args.pressure,
        }
    )
    result = optimize(parameters, settings=_settings_from_args(args))
    return {"parameters": parameters.to_dict(), "result": result.to_dict()}


def _cmd_project(args: argparse.Namespace) -> dict[str, object]:
    baseline = DailyBaseline(
        waste_kg=args.waste,
        methane_kg=args.methane,
        power_kwh=args.power,
        efficiency_pct=args.efficiency,
    )
    projections = project(
        baseline, args.crew_size, args.periods, settings=_settings_from_args(args)
    )
    return {"baseline": baseline.to_dict(), "projections": [p.to_dict() for p in projections]}


def _cmd_dashboard(args: argparse.Namespace) -> dict[str, object] | list[dict[str, object]]:
    settings = _settings_from_args(args)
    if args.cycles > 1:
        frame = run_dashboard(
            cycles=args.cycles,
            start_ms=args.timestamp_ms,
            crew_size=args.crew_size,
            seed=args.seed,
            settings=settings,
        )
        return frame.to_dict(orient="records")
    snapshot = run_dashboard_cycle(
        args.timestamp_ms,
        crew_size=args.crew_size,
        rng=np.random.default_rng(args.seed),
        settings=settings,
    )
    return snapshot.to_dict()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Plasma waste-to-fuel process simulation and scoring engine."
    )
    parser.add_argument(
        "--settings",
        type=str,
        default=None,
        help="Path to a JSON file of engine settings overrides.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    simulate = subparsers.add_parser("simulate", help="Decompose a waste composition.")
    for name, default in REFERENCE_MIX.items():
        simulate.add_argument(
            f"--{name.replace('_', '-')}",
            dest=name,
            type=float,
            default=default,
            help=f"Percentage of {name.replace('_', ' ')} in the feed.",
        )
    simulate.add_argument(
        "--total-mass",
        type=float,
        default=None,
        help="Batch mass in kg (defaults to the reference_total_mass_kg setting).",
    )
    simulate.set_defaults(handler=_cmd_simulate)

    defaults = ProcessParameters()
    optimizer = subparsers.add_parser("optimize", help="Score live process parameters.")
    optimizer.add_argument("--temperature", type=float, default=defaults.temperature_c)
    optimizer.add_argument("--flow-rate", type=float, default=defaults.flow_rate_pct)
    optimizer.add_argument(
        "--catalyst-efficiency", type=float, default=defaults.catalyst_efficiency_pct
    )
    optimizer.add_argument("--energy-input", type=float, default=defaults.energy_input_kw)
    optimizer.add_argument("--pressure", type=float, default=defaults.pressure_atm)
    optimizer.set_defaults(handler=_cmd_optimize)

    projector = subparsers.add_parser("project", help="Project annual throughput.")
    projector.add_argument("--waste", type=float, default=150.0, help="Daily waste in kg.")
    projector.add_argument("--methane", type=float, default=85.0, help="Daily methane in kg.")
    projector.add_argument("--power", type=float, default=180.0, help="Daily power in kWh.")
    projector.add_argument("--efficiency", type=float, default=75.0, help="Efficiency in %%.")
    projector.add_argument("--crew-size", type=float, default=6.0)
    projector.add_argument("--periods", type=int, default=3)
    projector.set_defaults(handler=_cmd_project)

    dashboard = subparsers.add_parser("dashboard", help="Run dashboard polling cycles.")
    dashboard.add_argument("--timestamp-ms", type=float, default=0.0)
    dashboard.add_argument("--cycles", type=int, default=1)
    dashboard.add_argument("--crew-size", type=float, default=6.0)
    dashboard.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the sensor drift check.",
    )
    dashboard.set_defaults(handler=_cmd_dashboard)
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Running %s command", args.command)
    payload = args.handler(args)
    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
