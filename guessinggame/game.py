"""Game rules: picking the secret number, difficulty ranges and clues."""

from __future__ import annotations

import math
import random
from typing import Optional

_rng = random.SystemRandom()

DEFAULT_RANGE = (1, 100)
_DIFFICULTY_RANGES = {
    "easy": (1, 50),
    "hard": (1, 200),
}

# Upper bounds on the distance (as a fraction of the range) for each clue.
_CLUE_LEVELS = (
    (0.05, "Very hot!"),
    (0.1, "Hot!"),
    (0.2, "Warm."),
    (0.4, "Cool."),
)
_COLDEST = "Cold!"


def generate_random_number(low: int, high: int) -> int:
    """Return a random integer in ``[low, high]``, both ends included."""
    if low > high:
        raise ValueError(f"empty range: {low} > {high}")
    return _rng.randint(low, high)


def generate_clue(guess: int, target: int, low: int, high: int) -> str:
    """Describe how close ``guess`` is to ``target`` within ``[low, high]``."""
    diff = abs(guess - target)
    if diff == 0:
        return "Correct!"

    span = high - low
    fraction = diff / span if span else math.inf
    direction = "higher" if guess < target else "lower"

    heat = next(
        (label for limit, label in _CLUE_LEVELS if fraction <= limit), _COLDEST
    )
    return f"{heat} The number is {direction}."


def difficulty_range(difficulty: Optional[str]) -> tuple[int, int]:
    """Return the ``(low, high)`` range for a difficulty name."""
    return _DIFFICULTY_RANGES.get(difficulty, DEFAULT_RANGE)