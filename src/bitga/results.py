"""Result types for genetic algorithm runs.

This module provides:

- GenerationRecord: Best and average fitness of one generation
- GAHistory: Ordered records of a whole run plus the final population

Both classes are immutable (frozen dataclasses). Chromosomes are copied on
construction and made read-only, so later generations can never alter a
recorded best.
"""

from dataclasses import dataclass

import numpy as np

from bitga.population import CHROMOSOME_DTYPE, Population


@dataclass(frozen=True)
class GenerationRecord:
    """Snapshot of one generation, taken before selection is applied.

    Attributes:
        generation: Zero-based generation index.
        best_chromosome: First best chromosome of the generation, shape (L,).
        best_score: Score of best_chromosome.
        average_score: Mean score of the generation.

    Example:
        >>> record = GenerationRecord(
        ...     generation=0,
        ...     best_chromosome=np.array([1, 1, 0]),
        ...     best_score=2.0,
        ...     average_score=1.25,
        ... )
        >>> record.best_chromosome.flags.writeable
        False
    """

    generation: int
    best_chromosome: np.ndarray
    best_score: float
    average_score: float

    def __post_init__(self) -> None:
        """Validate and copy the chromosome for immutability.

        Raises:
            TypeError: If best_chromosome is not a numpy array.
            ValueError: If best_chromosome is not 1D or generation is negative.
        """
        if not isinstance(self.best_chromosome, np.ndarray):
            raise TypeError(f"best_chromosome must be a numpy array, got {type(self.best_chromosome).__name__}")
        if self.best_chromosome.ndim != 1:
            raise ValueError(f"best_chromosome must be 1D, got shape {self.best_chromosome.shape}")
        if self.generation < 0:
            raise ValueError(f"generation must be non-negative, got {self.generation}")

        chromosome = self.best_chromosome.astype(CHROMOSOME_DTYPE, copy=True)
        chromosome.setflags(write=False)
        object.__setattr__(self, "best_chromosome", chromosome)
        object.__setattr__(self, "best_score", float(self.best_score))
        object.__setattr__(self, "average_score", float(self.average_score))


@dataclass(frozen=True)
class GAHistory:
    """Per-generation history of a genetic algorithm run.

    Records are ordered by generation, one per generation run. The history
    also keeps the population left after the last generation, which has not
    been recorded.

    Attributes:
        records: Generation records in order.
        final_population: Population after the last generation.

    Example:
        >>> history = run_genetic_algorithm(20, 10, 50, 0.8, 0.05, "one-max", seed=42)
        >>> history.generations
        50
        >>> history.best_scores.shape
        (50,)
        >>> best_chromosome, best_score = history.best
    """

    records: tuple[GenerationRecord, ...]
    final_population: Population

    def __post_init__(self) -> None:
        """Freeze records into a tuple and check generation order.

        Raises:
            ValueError: If records are not numbered 0, 1, 2, ... in order.
        """
        records = tuple(self.records)
        for i, record in enumerate(records):
            if record.generation != i:
                raise ValueError(f"record {i} has generation {record.generation}, expected {i}")
        object.__setattr__(self, "records", records)

    def __len__(self) -> int:
        return len(self.records)

    @property
    def generations(self) -> int:
        """Number of recorded generations."""
        return len(self.records)

    @property
    def best_chromosomes(self) -> np.ndarray:
        """Best chromosome of every generation, shape (generations, L)."""
        if not self.records:
            return np.empty((0, self.final_population.chromosome_length), dtype=CHROMOSOME_DTYPE)
        return np.stack([record.best_chromosome for record in self.records])

    @property
    def best_scores(self) -> np.ndarray:
        """Best score of every generation, shape (generations,)."""
        return np.array([record.best_score for record in self.records], dtype=np.float64)

    @property
    def average_scores(self) -> np.ndarray:
        """Average score of every generation, shape (generations,)."""
        return np.array([record.average_score for record in self.records], dtype=np.float64)

    @property
    def best(self) -> tuple[np.ndarray, float]:
        """Best recorded chromosome over the whole run and its score.

        Ties go to the earliest generation.

        Raises:
            ValueError: If no generation was recorded.
        """
        if not self.records:
            raise ValueError("history has no generations")
        best_idx = int(np.argmax(self.best_scores))
        record = self.records[best_idx]
        return record.best_chromosome.copy(), record.best_score
