"""Population data structure and random population factory.

This module provides:

- Population: An immutable batch of fixed-length binary chromosomes
- random_chromosome: Generate one random chromosome
- init_population: Generate an initial population of random chromosomes

Population is a frozen dataclass and copies its array on construction, so an
operator can never alter a population it did not create.
"""

from dataclasses import dataclass

import numpy as np

from bitga.errors import InvalidConfigurationError
from bitga.sampling import uniform_unit

CHROMOSOME_DTYPE = np.int8


@dataclass(frozen=True)
class Population:
    """Immutable population of binary chromosomes.

    Chromosomes are stored as rows of a 2D integer array. All rows share the
    same length, which is the chromosome length for the whole run.

    Attributes:
        chromosomes: Bit values for all individuals, shape (n, chromosome_length).

    Example:
        >>> pop = Population(chromosomes=np.array([[0, 1, 1], [1, 0, 0]]))
        >>> len(pop)
        2
        >>> pop.chromosome_length
        3
        >>> pop[1]
        array([1, 0, 0], dtype=int8)
    """

    chromosomes: np.ndarray

    def __post_init__(self) -> None:
        """Validate shape and bit values, then copy for immutability.

        Raises:
            TypeError: If chromosomes is not a numpy array.
            ValueError: If the array is not 2D, has no columns, or holds values
                other than 0 and 1.
        """
        if not isinstance(self.chromosomes, np.ndarray):
            raise TypeError(f"chromosomes must be a numpy array, got {type(self.chromosomes).__name__}")
        if self.chromosomes.ndim != 2:
            raise ValueError(f"chromosomes must be 2D, got shape {self.chromosomes.shape}")
        if self.chromosomes.shape[1] == 0:
            raise ValueError("chromosomes must have at least one bit")
        if not np.isin(self.chromosomes, (0, 1)).all():
            raise ValueError("chromosomes must only contain 0 and 1")

        chromosomes = self.chromosomes.astype(CHROMOSOME_DTYPE, copy=True)
        chromosomes.setflags(write=False)
        object.__setattr__(self, "chromosomes", chromosomes)

    def __len__(self) -> int:
        return self.chromosomes.shape[0]

    def __getitem__(self, idx: int) -> np.ndarray:
        """Return a writable copy of one chromosome.

        Raises:
            TypeError: If idx is not an integer.
            IndexError: If idx is out of bounds.
        """
        if not isinstance(idx, (int, np.integer)):
            raise TypeError(f"indices must be integers, got {type(idx).__name__}")

        n = len(self)
        if idx < -n or idx >= n:
            raise IndexError(f"index {idx} is out of bounds for population with {n} individuals")

        return self.chromosomes[idx].copy()

    @property
    def n_individuals(self) -> int:
        """Number of chromosomes (same as len(self))."""
        return self.chromosomes.shape[0]

    @property
    def chromosome_length(self) -> int:
        """Number of bits per chromosome."""
        return self.chromosomes.shape[1]


def random_chromosome(length: int, rng: np.random.Generator) -> np.ndarray:
    """Generate a chromosome whose bits are independently 0 or 1 with equal odds.

    A bit is 1 when its unit sample is strictly greater than 0.5.

    Args:
        length: Number of bits.
        rng: Random number generator.

    Returns:
        Array of shape (length,) with dtype int8.
    """
    return np.array([1 if uniform_unit(rng) > 0.5 else 0 for _ in range(length)], dtype=CHROMOSOME_DTYPE)


def init_population(size: int, length: int, rng: np.random.Generator) -> Population:
    """Create a population of independently generated random chromosomes.

    Args:
        size: Number of chromosomes.
        length: Number of bits per chromosome.
        rng: Random number generator.

    Returns:
        Population with ``size`` rows of ``length`` bits.

    Raises:
        InvalidConfigurationError: If size or length is not positive.

    Example:
        >>> pop = init_population(4, 8, np.random.default_rng(42))
        >>> pop.chromosomes.shape
        (4, 8)
    """
    if size <= 0:
        raise InvalidConfigurationError(f"population size must be positive, got {size}")
    if length <= 0:
        raise InvalidConfigurationError(f"chromosome length must be positive, got {length}")

    return Population(chromosomes=np.stack([random_chromosome(length, rng) for _ in range(size)]))
