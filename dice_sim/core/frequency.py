"""
frequency.py
Reduces a roll history into a histogram of totals.
Related modules:
- engine.py: Produces the RollHistory consumed here.
- normal.py: Builds the curve on the totals of this histogram, in the same order.
"""

from collections import Counter
from typing import Iterable, Tuple

from .outcome import FrequencyEntry, RollOutcome


def aggregate(history: Iterable[RollOutcome]) -> Tuple[FrequencyEntry, ...]:
    """
    Count how often each total occurs in the history.
    Args:
        history (iterable[RollOutcome]): Rolls of one run.
    Returns:
        tuple[FrequencyEntry]: One entry per distinct total, ascending by total.
        An empty history gives an empty tuple.
    """
    counts = Counter(outcome.total for outcome in history)
    return tuple(FrequencyEntry(total, counts[total]) for total in sorted(counts))
