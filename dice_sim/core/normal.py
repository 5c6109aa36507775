"""
normal.py
Computes the normal-distribution approximation of the dice-total distribution, scaled to expected counts.
Related modules:
- frequency.py: The histogram whose totals the curve is evaluated at.
- engine.py: validate_parameters guards against a zero standard deviation.
"""

import math
from typing import Iterable, Tuple

from .dice import FACES
from .engine import validate_parameters
from .outcome import FrequencyEntry, NormalCurvePoint

SIDES = len(FACES)
# mean and variance of a single fair die
DIE_MEAN = (FACES[0] + FACES[-1]) / 2
DIE_VARIANCE = (SIDES ** 2 - 1) / 12


def theoretical_mean(dice_count: int) -> float:
    return dice_count * DIE_MEAN


def theoretical_std(dice_count: int) -> float:
    # variances of independent dice add up
    return math.sqrt(dice_count * DIE_VARIANCE)


def gaussian_density(x: float, mean: float, std: float) -> float:
    """
    Probability density of N(mean, std**2) at x.
    Args:
        x (float): Point to evaluate.
        mean (float): Distribution mean.
        std (float): Standard deviation, must be > 0.
    Returns:
        float: Density value.
    """
    exponent = -((x - mean) ** 2) / (2 * std ** 2)
    return (1 / (std * math.sqrt(2 * math.pi))) * math.exp(exponent)


def approximate(histogram: Iterable[FrequencyEntry], dice_count: int, trial_count: int) -> Tuple[NormalCurvePoint, ...]:
    """
    Evaluate the theoretical normal curve at every total of the histogram.
    Args:
        histogram (iterable[FrequencyEntry]): Observed totals, ascending.
        dice_count (int): Dice per trial.
        trial_count (int): Trials in the run; scales densities to expected counts.
    Returns:
        tuple[NormalCurvePoint]: One point per histogram entry, same order.
    Raises:
        InvalidParameterError: If dice_count or trial_count is not a positive integer.
    """
    dice_count, trial_count = validate_parameters(dice_count, trial_count)
    mean = theoretical_mean(dice_count)
    std = theoretical_std(dice_count)
    return tuple(
        NormalCurvePoint(entry.total, gaussian_density(entry.total, mean, std) * trial_count)
        for entry in histogram
    )
