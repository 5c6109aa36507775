"""
dice.py
Defines dice rolling utilities for the dice-sum simulator.
Related modules:
- engine.py: Uses roll_n to roll the dice of every trial.
- normal.py: Uses FACES to derive the theoretical mean and variance.
"""

import random
from typing import List

# a single fair six-sided die
FACES = (1, 2, 3, 4, 5, 6)


def roll_die(rng: random.Random) -> int:
    """
    Roll a single six-sided die using the provided random number generator.
    Args:
        rng (random.Random): RNG instance.
    Returns:
        int: Die face (1-6).
    """
    return rng.randint(FACES[0], FACES[-1])


def roll_n(n: int, rng: random.Random) -> List[int]:
    """
    Roll n six-sided dice using the provided RNG.
    Args:
        n (int): Number of dice to roll.
        rng (random.Random): RNG instance.
    Returns:
        list[int]: List of die faces, in draw order.
    """
    return [roll_die(rng) for _ in range(n)]


def possible_totals(dice_count: int) -> range:
    """Every total that dice_count dice can show, from all ones to all sixes."""
    return range(dice_count * FACES[0], dice_count * FACES[-1] + 1)
