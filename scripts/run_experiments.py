import os
import json
import datetime
import hashlib
from typing import Any, Dict

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from dice_sim.core.config import SimulationConfig
from dice_sim.core.normal import theoretical_mean, theoretical_std
from dice_sim.core.result import SimulationResult
from dice_sim.core.simulation import run_config
from dice_sim.exporters import export_all
from dice_sim.persistence import csv_io


def generate_run_id(cfg: SimulationConfig, timestamp: str) -> str:
    raw = f"{timestamp}_{cfg.dice_count}_{cfg.trial_count}_{cfg.rng_seed}"
    return hashlib.sha256(raw.encode()).hexdigest()[:16]


def summarize(result: SimulationResult, run_id: str, timestamp: str) -> Dict[str, Any]:
    """
    Build one summary row comparing the observed distribution of a run with its normal approximation.
    Args:
        result (SimulationResult): Finished run.
        run_id (str): Identifier of the run.
        timestamp (str): ISO timestamp of the run.
    Returns:
        dict: Row keyed by csv_io.SUMMARY_HEADER.
    """
    deviations = [abs(e.count - p.density) for e, p in zip(result.histogram, result.curve)]
    return {
        "run_id": run_id,
        "timestamp": timestamp,
        "dice_count": result.dice_count,
        "trial_count": result.trial_count,
        "distinct_totals": len(result.histogram),
        "sample_mean": round(result.sample_mean(), 4),
        "theoretical_mean": theoretical_mean(result.dice_count),
        "sample_std": round(result.sample_std(), 4),
        "theoretical_std": round(theoretical_std(result.dice_count), 4),
        # relative to trial_count so runs of different sizes are comparable
        "max_abs_deviation": round(max(deviations) / result.trial_count, 6),
    }


def plot_deviation(rows, out_path: str):
    dice_counts = [r["dice_count"] for r in rows]
    deviations = [r["max_abs_deviation"] for r in rows]
    plt.figure(figsize=(6, 4))
    plt.plot(dice_counts, deviations, marker='o', color='C3')
    plt.xlabel('Number of dice')
    plt.ylabel('Max |observed - expected| / rolls')
    plt.title('Distance to the normal curve by dice count')
    plt.xticks(dice_counts)
    plt.grid(True, linestyle='--', alpha=0.5)
    plt.tight_layout()
    plt.savefig(out_path)
    plt.close()


"""
Run the simulator for an increasing number of dice, save every run and a summary, and plot how
quickly the dice-sum distribution approaches the normal curve.
Edit the configuration section to change the dice range, number of rolls or output directory.
"""
def main():
    #################################
    #        Configuration
    ##################################
    max_dice = 8
    trial_count = 20000
    rng_seed = 42 # None for a different sample every time
    results_output_dir = "results" # output directory
    exports = ["json", "png", "histogram"]

    os.makedirs(results_output_dir, exist_ok=True)
    summary_path = os.path.join(results_output_dir, "summary.csv")
    rows = []

    for dice_count in range(1, max_dice + 1):
        print(f"Running {trial_count} rolls of {dice_count} dice...", end=" ")
        seed = None if rng_seed is None else rng_seed + dice_count
        cfg = SimulationConfig(dice_count=dice_count, trial_count=trial_count, rng_seed=seed)
        timestamp = datetime.datetime.now(datetime.timezone.utc).isoformat()
        run_id = generate_run_id(cfg, timestamp)
        result = run_config(cfg)

        run_dir = os.path.join(results_output_dir, f"dice_{dice_count:02d}")
        export_all(result, exports, run_dir, cfg)

        row = summarize(result, run_id, timestamp)
        csv_io.append_row_to_csv(row, summary_path, csv_io.get_summary_header())
        rows.append(row)
        print("done ->", run_dir)

    plot_path = os.path.join(results_output_dir, "deviation_by_dice.png")
    plot_deviation(rows, plot_path)
    print(f"Saved plot to {plot_path}")

    print("All runs finished. Summary:")
    print(json.dumps(rows, indent=2))


if __name__ == "__main__":
    main()
