"""Run configuration for the genetic algorithm."""

from dataclasses import dataclass

import numpy as np

from bitga.errors import InvalidConfigurationError


@dataclass(frozen=True)
class GAConfig:
    """Validated parameters of one genetic algorithm run.

    Attributes:
        population_size: Number of chromosomes per generation. Must be positive.
        chromosome_length: Number of bits per chromosome. Must be positive.
        max_generations: Number of generations to run. Must be non-negative.
        p_crossover: Probability that a slot is filled by crossover, in [0, 1].
        p_mutation: Probability of each mutation draw, in [0, 1].

    Example:
        >>> config = GAConfig(population_size=20, chromosome_length=10, max_generations=50,
        ...                   p_crossover=0.8, p_mutation=0.05)
        >>> GAConfig(population_size=0, chromosome_length=10, max_generations=50,
        ...          p_crossover=0.8, p_mutation=0.05)
        Traceback (most recent call last):
            ...
        bitga.errors.InvalidConfigurationError: population_size must be positive, got 0
    """

    population_size: int
    chromosome_length: int
    max_generations: int
    p_crossover: float
    p_mutation: float

    def __post_init__(self) -> None:
        """Validate all parameters.

        Raises:
            InvalidConfigurationError: If a count is not an integer or any
                parameter is out of range.
        """
        for name in ("population_size", "chromosome_length", "max_generations"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise InvalidConfigurationError(f"{name} must be an integer, got {value!r}")
        if self.population_size <= 0:
            raise InvalidConfigurationError(f"population_size must be positive, got {self.population_size}")
        if self.chromosome_length <= 0:
            raise InvalidConfigurationError(f"chromosome_length must be positive, got {self.chromosome_length}")
        if self.max_generations < 0:
            raise InvalidConfigurationError(f"max_generations must be non-negative, got {self.max_generations}")
        if not 0.0 <= self.p_crossover <= 1.0:
            raise InvalidConfigurationError(f"p_crossover must be in [0, 1], got {self.p_crossover}")
        if not 0.0 <= self.p_mutation <= 1.0:
            raise InvalidConfigurationError(f"p_mutation must be in [0, 1], got {self.p_mutation}")
