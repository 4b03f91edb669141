"""Random sampling helpers shared by every stochastic operator.

All functions take an explicit ``numpy.random.Generator`` so a run seeded at
entry is reproducible end to end.
"""

from collections.abc import Sequence
from typing import TypeVar

import numpy as np

from bitga.errors import EmptyPopulationError

T = TypeVar("T")


def uniform_int(rng: np.random.Generator, low: int, high: int) -> int:
    """Draw an integer uniformly from the closed interval [low, high].

    The value is obtained by scaling a unit sample and flooring it, so every
    integer in the range (including ``high``) has equal probability.

    Args:
        rng: Random number generator.
        low: Smallest value that can be returned.
        high: Largest value that can be returned.

    Returns:
        Integer in [low, high].

    Raises:
        ValueError: If low > high.

    Example:
        >>> rng = np.random.default_rng(0)
        >>> 1 <= uniform_int(rng, 1, 6) <= 6
        True
    """
    if low > high:
        raise ValueError(f"low must not exceed high, got low={low}, high={high}")
    return int(np.floor(rng.random() * (high - low + 1))) + low


def uniform_unit(rng: np.random.Generator) -> float:
    """Draw a float uniformly from [0, 1)."""
    return float(rng.random())


def random_index(rng: np.random.Generator, size: int) -> int:
    """Draw a valid index into a sequence of the given size.

    Raises:
        EmptyPopulationError: If size is not positive.
    """
    if size <= 0:
        raise EmptyPopulationError(f"cannot draw an index from an empty sequence (size={size})")
    return uniform_int(rng, 0, size - 1)


def pick_random(sequence: Sequence[T], rng: np.random.Generator) -> T:
    """Return one element of ``sequence`` chosen uniformly at random.

    Raises:
        EmptyPopulationError: If the sequence is empty.
    """
    return sequence[random_index(rng, len(sequence))]
