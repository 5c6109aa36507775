"""
engine.py
Implements the RollEngine class, which rolls the dice of every trial and records the roll history.
Related modules:
- dice.py: roll_n draws the faces of one trial.
- outcome.py: Each trial is recorded as a RollOutcome.
- simulation.py: run() validates its inputs here and drives the engine.
"""

import numbers
import random
from typing import Optional, Tuple

from .dice import roll_n
from .outcome import RollOutcome

RollHistory = Tuple[RollOutcome, ...]


class InvalidParameterError(ValueError):
    """
    Raised when the dice count or trial count is not a positive integer.
    """
    pass


def _check_positive_int(name: str, value) -> int:
    # bool is an Integral subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidParameterError(f"{name} must be at least 1, got {value}")
    return int(value)


def validate_parameters(dice_count, trial_count) -> Tuple[int, int]:
    """
    Check the inputs of a run before any dice are rolled.
    Args:
        dice_count: Number of dice per trial.
        trial_count: Number of trials.
    Returns:
        tuple[int, int]: The counts as plain ints.
    Raises:
        InvalidParameterError: If either value is not an integer >= 1.
    """
    return _check_positive_int("dice_count", dice_count), _check_positive_int("trial_count", trial_count)


class RollEngine:
    """
    Rolls dice_count dice per trial for trial_count trials.
    Holds only the RNG; every simulate() call returns a fresh, independent history.
    """
    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng (random.Random|None): Generator to draw from. None uses an unseeded generator.
        """
        self.rng = rng if rng is not None else random.Random()

    def simulate(self, dice_count: int, trial_count: int) -> RollHistory:
        """
        Roll every trial and return the history in chronological order.
        Args:
            dice_count (int): Dice per trial (>= 1).
            trial_count (int): Number of trials (>= 1).
        Returns:
            tuple[RollOutcome]: Exactly trial_count outcomes of dice_count faces each.
        Raises:
            InvalidParameterError: If the counts are invalid; no dice are rolled in that case.
        """
        dice_count, trial_count = validate_parameters(dice_count, trial_count)
        history = []
        for _ in range(trial_count):
            history.append(RollOutcome(tuple(roll_n(dice_count, self.rng))))
        return tuple(history)
