"""
outcome.py
Defines the value types produced by a simulation run: RollOutcome, FrequencyEntry and NormalCurvePoint.
Related modules:
- engine.py: Produces RollOutcome objects.
- frequency.py: Produces FrequencyEntry objects.
- normal.py: Produces NormalCurvePoint objects.
"""

import numbers
from dataclasses import dataclass
from typing import Tuple

from .dice import FACES


@dataclass(frozen=True)
class RollOutcome:
    """
    The faces shown by one trial's dice, in the order they were drawn.
    Args:
        faces (tuple[int]): Per-die face values (each 1-6).
    Raises:
        ValueError: If a face is not an integer between 1 and 6.
    """
    faces: Tuple[int, ...]

    def __post_init__(self):
        # store a tuple even when handed a list, so the outcome stays hashable
        object.__setattr__(self, "faces", tuple(self.faces))
        for face in self.faces:
            if isinstance(face, bool) or not isinstance(face, numbers.Integral):
                raise ValueError(f"face must be an integer, got {face!r}")
            if not (FACES[0] <= face <= FACES[-1]):
                raise ValueError(f"face must be between 1 and 6, got {face}")

    @property
    def total(self) -> int:
        """Sum of all faces of this roll."""
        return sum(self.faces)


@dataclass(frozen=True)
class FrequencyEntry:
    """
    How often a given total was observed in one run.
    Args:
        total (int): Dice total.
        count (int): Number of trials that produced this total (>= 1).
    """
    total: int
    count: int


@dataclass(frozen=True)
class NormalCurvePoint:
    """
    Theoretical expected count for a total, on the same axis as FrequencyEntry.count.
    Args:
        total (int): Dice total.
        density (float): Normal density at total, scaled by the trial count.
    """
    total: int
    density: float
