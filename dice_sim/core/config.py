"""
config.py
Defines the SimulationConfig dataclass, which centralizes the default inputs and presentation options of the simulator.
Related modules:
- simulation.py: run_config builds a run from a SimulationConfig.
- exporters: Use the configured file names when writing exports.
"""

import random
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SimulationConfig:
    """
    Centralizes run inputs and UI/export options for the simulator.
    Fields:
        dice_count (int): Dice rolled per trial (default 3).
        trial_count (int): Number of trials per run (default 1000).
        rng_seed (int|None): Seed for deterministic runs, None for fresh entropy.
        recent_count (int): How many of the latest rolls the UI shows.
        show_normal (bool): Whether charts overlay the normal curve.
        output_dir (str): Directory exports are written to.
        chart_filename (str): File name of the PNG chart export.
        history_filename (str): File name of the roll history CSV export.
        histogram_filename (str): File name of the histogram CSV export.
        json_filename (str): File name of the JSON export.
    """
    dice_count: int = 3
    trial_count: int = 1000
    rng_seed: Optional[int] = None
    recent_count: int = 5
    show_normal: bool = True
    output_dir: str = "data"
    chart_filename: str = "chart.png"
    history_filename: str = "roll_history.csv"
    histogram_filename: str = "histogram.csv"
    json_filename: str = "result.json"

    def make_rng(self) -> random.Random:
        # seed None draws from OS entropy, so unseeded runs differ every time
        return random.Random(self.rng_seed)
