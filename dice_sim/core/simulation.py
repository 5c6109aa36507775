"""
simulation.py
Entry point of the simulator: composes roll engine, frequency aggregation and normal approximation into one SimulationResult.
Related modules:
- engine.py, frequency.py, normal.py: The three steps of a run.
- config.py: run_config reads inputs and the RNG seed from a SimulationConfig.
"""

import random
from typing import Optional

from .config import SimulationConfig
from .engine import RollEngine, validate_parameters
from .frequency import aggregate
from .normal import approximate
from .result import SimulationResult


def run(dice_count: int, trial_count: int, rng: Optional[random.Random] = None) -> SimulationResult:
    """
    Simulate trial_count rolls of dice_count dice and build the aligned histogram and curve.
    Args:
        dice_count (int): Dice per trial (>= 1).
        trial_count (int): Number of trials (>= 1).
        rng (random.Random|None): Generator to draw from; None uses an unseeded one.
    Returns:
        SimulationResult: Independent snapshot; nothing is retained between calls.
    Raises:
        InvalidParameterError: If either count is invalid. Raised before any dice are rolled.
    """
    dice_count, trial_count = validate_parameters(dice_count, trial_count)
    history = RollEngine(rng).simulate(dice_count, trial_count)
    histogram = aggregate(history)
    curve = approximate(histogram, dice_count, trial_count)
    return SimulationResult(
        dice_count=dice_count,
        trial_count=trial_count,
        history=history,
        histogram=histogram,
        curve=curve,
    )


def run_config(config: SimulationConfig) -> SimulationResult:
    """Run with the counts and seed of a SimulationConfig."""
    return run(config.dice_count, config.trial_count, rng=config.make_rng())
