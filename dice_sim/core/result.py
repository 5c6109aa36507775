"""
result.py
Defines the SimulationResult dataclass handed to the UI and export layers.
Related modules:
- simulation.py: Creates one SimulationResult per run.
- persistence/csv_io.py, persistence/chart.py: Read the aligned series exposed here.
"""

import math
from dataclasses import dataclass
from typing import List, Tuple

from .outcome import FrequencyEntry, NormalCurvePoint, RollOutcome


@dataclass(frozen=True)
class SimulationResult:
    """
    Immutable snapshot of one run: the raw history, its histogram and the matching normal curve.
    Fields:
        dice_count (int): Dice per trial.
        trial_count (int): Number of trials.
        history (tuple[RollOutcome]): All rolls, chronological.
        histogram (tuple[FrequencyEntry]): Counts per total, ascending.
        curve (tuple[NormalCurvePoint]): Expected counts per total, aligned with histogram.
    """
    dice_count: int
    trial_count: int
    history: Tuple[RollOutcome, ...]
    histogram: Tuple[FrequencyEntry, ...]
    curve: Tuple[NormalCurvePoint, ...]

    def is_empty(self) -> bool:
        return not self.histogram

    def recent(self, n: int = 5) -> Tuple[RollOutcome, ...]:
        """
        The latest n rolls, oldest first.
        Args:
            n (int): Size of the slice; values <= 0 give an empty tuple.
        Returns:
            tuple[RollOutcome]: Up to n outcomes from the end of the history.
        """
        if n <= 0:
            return ()
        return self.history[-n:]

    def totals(self) -> List[int]:
        return [entry.total for entry in self.histogram]

    def counts(self) -> List[int]:
        return [entry.count for entry in self.histogram]

    def densities(self) -> List[float]:
        return [point.density for point in self.curve]

    def sample_mean(self) -> float:
        """Mean of the observed totals (0.0 for an empty result)."""
        if not self.history:
            return 0.0
        return sum(outcome.total for outcome in self.history) / len(self.history)

    def sample_std(self) -> float:
        """Population standard deviation of the observed totals."""
        if not self.history:
            return 0.0
        mean = self.sample_mean()
        return math.sqrt(sum((outcome.total - mean) ** 2 for outcome in self.history) / len(self.history))
