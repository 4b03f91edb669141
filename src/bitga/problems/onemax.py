"""One-max and deceptive trap problems."""

from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from bitga.errors import InvalidConfigurationError
from bitga.problems.mode import FitnessMode

DECEPTIVE_REWARD_MULTIPLIER = 2
"""Default reward for the all-zero chromosome, in multiples of its length."""


@dataclass(frozen=True)
class OneMax:
    """Score a chromosome by its number of 1 bits.

    Example:
        >>> OneMax()(np.array([1, 0, 1, 1]))
        3.0
    """

    mode: ClassVar[FitnessMode] = FitnessMode.ONE_MAX

    def __call__(self, chromosome: np.ndarray) -> float:
        return float(np.count_nonzero(chromosome))

    def validate(self, chromosome_length: int) -> None:
        pass


@dataclass(frozen=True)
class Deceptive:
    """One-max with a trap: the all-zero chromosome is the global optimum.

    Every chromosome scores its number of 1 bits, except the all-zero one,
    which scores ``reward_multiplier * len(chromosome)``. Selection pressure
    pushes towards all ones, away from the single best solution.

    Attributes:
        reward_multiplier: Reward for the all-zero chromosome, in multiples of
            the chromosome length. Must be greater than 1 for the trap to be
            the global optimum.

    Example:
        >>> Deceptive()(np.zeros(5, dtype=np.int8))
        10.0
        >>> Deceptive(reward_multiplier=10)(np.zeros(5, dtype=np.int8))
        50.0
    """

    reward_multiplier: float = DECEPTIVE_REWARD_MULTIPLIER

    mode: ClassVar[FitnessMode] = FitnessMode.DECEPTIVE

    def __post_init__(self) -> None:
        if self.reward_multiplier <= 0:
            raise InvalidConfigurationError(
                f"reward_multiplier must be positive, got {self.reward_multiplier}"
            )

    def __call__(self, chromosome: np.ndarray) -> float:
        score = float(np.count_nonzero(chromosome))
        if score == 0:
            return float(self.reward_multiplier * len(chromosome))
        return score

    def validate(self, chromosome_length: int) -> None:
        pass
