"""Protocol definitions for fitness problems and genetic operators.

These protocols describe the seams of the evolutionary loop, so that a
problem or operator can be swapped without touching the driver:

1. **FitnessProblem**: Scores one chromosome. The four built-in problems
   (one-max, deceptive, target, knapsack) implement it.

2. **Selector**: Builds the next population from the current one using
   precomputed fitness values (tournament selection).

3. **PopulationOperator**: Transforms a population into a new one of the same
   size (single-point crossover, bit-flip mutation).

Example usage:
    ```python
    def generation(pop, problem: FitnessProblem, select: Selector,
                   crossover: PopulationOperator, mutate: PopulationOperator, rng):
        fitness = score_population(pop, problem)
        pop = select(pop, rng, fitness)
        pop = crossover(pop, rng)
        return mutate(pop, rng)
    ```
"""

from typing import Protocol, runtime_checkable

import numpy as np

from bitga.population import Population


@runtime_checkable
class FitnessProblem(Protocol):
    """Protocol for fitness problems.

    A problem is a pure function of a chromosome: calling it twice with the
    same bits must return the same score. Higher scores are better.

    Attributes:
        mode: Tag of the problem (a FitnessMode member for built-in problems).

    Example:
        ```python
        @dataclass(frozen=True)
        class ZeroMax:
            mode = "zero-max"

            def __call__(self, chromosome: np.ndarray) -> float:
                return float(len(chromosome) - chromosome.sum())

            def validate(self, chromosome_length: int) -> None:
                pass
        ```
    """

    def __call__(self, chromosome: np.ndarray) -> float:
        """Return the non-negative score of one chromosome."""
        ...

    def validate(self, chromosome_length: int) -> None:
        """Check the problem parameters against the chromosome length.

        Raises:
            InvalidConfigurationError: If the parameters cannot score
                chromosomes of this length.
        """
        ...


@runtime_checkable
class Selector(Protocol):
    """Protocol for selection strategies.

    Parameters:
        pop: Current population.
        rng: Random number generator.
        fitness: Score of every member of ``pop``, shape (n,).

    Returns:
        New Population of the same size as ``pop``.
    """

    def __call__(
        self,
        pop: Population,
        rng: np.random.Generator,
        fitness: np.ndarray,
    ) -> Population:
        ...


@runtime_checkable
class PopulationOperator(Protocol):
    """Protocol for variation operators (crossover and mutation).

    Parameters:
        pop: Population to transform. It is never modified.
        rng: Random number generator.

    Returns:
        New Population of the same size and chromosome length as ``pop``.
    """

    def __call__(self, pop: Population, rng: np.random.Generator) -> Population:
        ...
