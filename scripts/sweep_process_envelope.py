from __future__ import annotations

import argparse
import time
from datetime import UTC, datetime
from pathlib import Path

import numpy as np
import pandas as pd

from plasmafuel.optimizer.process import PARAMETER_DOMAINS, ProcessParameters, optimize

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_OUTPUT_DIR = PROJECT_ROOT / "data" / "processed" / "process_sweeps"


def sweep_process_envelope(
    *,
    output_dir: Path,
    n_temperature_points: int,
    n_catalyst_points: int,
    energy_input_kw: float,
) -> Path:
    start_time = time.perf_counter()
    output_dir.mkdir(parents=True, exist_ok=True)

    temperatures_c = np.linspace(*PARAMETER_DOMAINS["temperature_c"], n_temperature_points)
    catalyst_pcts = np.linspace(*PARAMETER_DOMAINS["catalyst_efficiency_pct"], n_catalyst_points)

    rows: list[dict[str, float | str]] = []
    for temperature_c in temperatures_c:
        for catalyst_pct in catalyst_pcts:
            parameters = ProcessParameters.from_mapping(
                {
                    "temperature_c": float(temperature_c),
                    "catalyst_efficiency_pct": float(catalyst_pct),
                    "energy_input_kw": energy_input_kw,
                }
            )
            result = optimize(parameters)
            rows.append(
                {
                    "temperature_c": parameters.temperature_c,
                    "catalyst_efficiency_pct": parameters.catalyst_efficiency_pct,
                    "methane_yield": result.methane_yield,
                    "power_consumption_kw": result.power_consumption_kw,
                    "efficiency_pct": result.efficiency_pct,
                    "prediction": result.prediction.value,
                }
            )

    df = (
        pd.DataFrame(rows)
        .sort_values(["temperature_c", "catalyst_efficiency_pct"])
        .reset_index(drop=True)
    )

    timestamp = datetime.now(tz=UTC).strftime("%Y%m%dT%H%M%SZ")
    output_path = output_dir / (
        f"process_sweep_{timestamp}_{n_temperature_points}x{n_catalyst_points}.csv"
    )
    df.to_csv(output_path, index=False)

    elapsed_s = time.perf_counter() - start_time
    print(f"Scored {len(df)} operating points in {elapsed_s:.2f}s")
    print(df["prediction"].value_counts().to_string())
    print(f"Wrote sweep to: {output_path}")
    return output_path


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Score a temperature x catalyst grid of plasma process settings."
    )
    parser.add_argument(
        "--output-dir",
        default=str(DEFAULT_OUTPUT_DIR),
        help="Directory where the CSV sweep is written.",
    )
    parser.add_argument(
        "--n-temperature-points",
        type=int,
        default=15,
        help="Number of temperature points between 800 and 1500 C.",
    )
    parser.add_argument(
        "--n-catalyst-points",
        type=int,
        default=11,
        help="Number of catalyst efficiency points between 0 and 100 %%.",
    )
    parser.add_argument(
        "--energy-input-kw",
        type=float,
        default=ProcessParameters().energy_input_kw,
        help="Fixed energy input in kW.",
    )
    return parser


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    sweep_process_envelope(
        output_dir=Path(args.output_dir),
        n_temperature_points=args.n_temperature_points,
        n_catalyst_points=args.n_catalyst_points,
        energy_input_kw=args.energy_input_kw,
    )


if __name__ == "__main__":
    main()
