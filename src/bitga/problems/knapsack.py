"""Greedy knapsack problem."""

from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from bitga.errors import InvalidConfigurationError
from bitga.problems.mode import FitnessMode


@dataclass(frozen=True)
class Knapsack:
    """Score a chromosome by the value it packs into a capacity-bounded knapsack.

    Bit i selects item i. Items are considered left to right and an item is
    packed only if it still fits in the remaining capacity; items that do not
    fit are skipped and scanning continues. The result is order dependent and
    is a fitness proxy, not an optimal knapsack solution.

    Attributes:
        weight: Item weights, shape (m,).
        value: Item values, shape (m,).
        size: Knapsack capacity.

    Example:
        >>> problem = Knapsack(weight=[2, 3, 4], value=[3, 4, 5], size=5)
        >>> problem(np.array([1, 1, 1]))
        7.0
    """

    weight: np.ndarray
    value: np.ndarray
    size: float

    mode: ClassVar[FitnessMode] = FitnessMode.KNAPSACK

    def __post_init__(self) -> None:
        """Convert items to read-only float arrays and check their shapes.

        Raises:
            InvalidConfigurationError: If weight or value is missing or not 1D,
                if their lengths differ, or if size is negative or not finite.
        """
        if self.weight is None or self.value is None:
            raise InvalidConfigurationError("knapsack mode requires 'weight' and 'value' sequences")

        weight = np.array(self.weight, dtype=np.float64, copy=True)
        value = np.array(self.value, dtype=np.float64, copy=True)
        if weight.ndim != 1:
            raise InvalidConfigurationError(f"weight must be 1D, got shape {weight.shape}")
        if value.ndim != 1:
            raise InvalidConfigurationError(f"value must be 1D, got shape {value.shape}")
        if weight.shape != value.shape:
            raise InvalidConfigurationError(
                f"weight and value must have the same length, got {len(weight)} and {len(value)}"
            )
        if self.size is None or not np.isfinite(self.size) or self.size < 0:
            raise InvalidConfigurationError(f"size must be finite and non-negative, got {self.size}")

        weight.setflags(write=False)
        value.setflags(write=False)
        object.__setattr__(self, "weight", weight)
        object.__setattr__(self, "value", value)

    def __call__(self, chromosome: np.ndarray) -> float:
        score = 0.0
        carried = 0.0
        for i, bit in enumerate(chromosome):
            if bit == 1 and carried + self.weight[i] <= self.size:
                score += self.value[i]
                carried += self.weight[i]
        return float(score)

    def validate(self, chromosome_length: int) -> None:
        if len(self.weight) < chromosome_length:
            raise InvalidConfigurationError(
                f"knapsack has {len(self.weight)} items, fewer than chromosome length {chromosome_length}"
            )
