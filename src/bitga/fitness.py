"""Fitness evaluation over chromosomes and populations.

This module provides:
- resolve_problem: Build the problem for a mode tag once, at run start
- evaluate: Score one chromosome
- score_population: Score every member of a population
- average_fitness: Mean score of a population
- fittest_index / fittest_member: First best member of a population
"""

from collections.abc import Mapping
from typing import Any

import numpy as np

# Import problems to trigger registration of the built-in modes
import bitga.problems  # noqa: F401
from bitga.errors import EmptyPopulationError, InvalidConfigurationError
from bitga.population import Population
from bitga.problems import FitnessMode, Knapsack
from bitga.protocols import FitnessProblem
from bitga.registry import ProblemRegistry

_KNAPSACK_KEYS = ("weight", "value", "size")


def resolve_problem(
    mode: str | FitnessMode | FitnessProblem,
    target: Any = None,
    knapsack: Mapping[str, Any] | Knapsack | None = None,
) -> FitnessProblem:
    """Build the fitness problem selected by a mode tag.

    Only the parameters relevant to the mode are used: ``target`` for target
    mode and ``knapsack`` for knapsack mode. A FitnessProblem
    instance is returned unchanged; any other non-string value is rejected.

    Args:
        mode: Mode tag (e.g. "one-max" or FitnessMode.KNAPSACK), any other
            registered problem name, or a FitnessProblem.
        target: Bit sequence to match in target mode.
        knapsack: Mapping with keys 'weight', 'value' and 'size', or a Knapsack,
            for knapsack mode.

    Returns:
        The configured FitnessProblem.

    Raises:
        InvalidConfigurationError: If the mode is unknown or its required
            parameters are missing or invalid.

    Example:
        >>> problem = resolve_problem("knapsack", knapsack={"weight": [2, 3], "value": [3, 4], "size": 5})
        >>> problem(np.array([1, 1]))
        7.0
    """
    if not isinstance(mode, str):
        if isinstance(mode, FitnessProblem):
            return mode
        raise InvalidConfigurationError(f"unknown fitness mode {mode!r}")

    name = mode.value if isinstance(mode, FitnessMode) else mode
    kwargs: dict[str, Any] = {}

    if name == FitnessMode.TARGET.value:
        if target is None:
            raise InvalidConfigurationError("target mode requires a target sequence")
        kwargs["target"] = target
    elif name == FitnessMode.KNAPSACK.value:
        if isinstance(knapsack, Knapsack):
            return knapsack
        if knapsack is None:
            raise InvalidConfigurationError("knapsack mode requires 'weight', 'value' and 'size' parameters")
        missing = [key for key in _KNAPSACK_KEYS if key not in knapsack]
        if missing:
            raise InvalidConfigurationError(f"knapsack parameters are missing {', '.join(missing)}")
        kwargs.update({key: knapsack[key] for key in _KNAPSACK_KEYS})

    try:
        return ProblemRegistry.get(name, **kwargs)
    except KeyError as e:
        raise InvalidConfigurationError(f"unknown fitness mode '{name}'") from e


def evaluate(chromosome: np.ndarray, problem: FitnessProblem) -> float:
    """Return the score of one chromosome under a problem."""
    return float(problem(chromosome))


def score_population(pop: Population, problem: FitnessProblem) -> np.ndarray:
    """Score every member of a population.

    Args:
        pop: Population to score.
        problem: Fitness problem.

    Returns:
        Float array of shape (n,), in population order.

    Raises:
        EmptyPopulationError: If the population is empty.
    """
    if len(pop) == 0:
        raise EmptyPopulationError("cannot score an empty population")
    return np.array([evaluate(pop.chromosomes[i], problem) for i in range(len(pop))], dtype=np.float64)


def average_fitness(pop: Population, problem: FitnessProblem) -> float:
    """Return the arithmetic mean score of a population."""
    return float(score_population(pop, problem).mean())


def fittest_index(fitness: np.ndarray) -> int:
    """Return the index of the first maximal score.

    A later member replaces the current best only if it scores strictly
    higher, so ties go to the earliest index.

    Raises:
        EmptyPopulationError: If fitness is empty.

    Example:
        >>> fittest_index(np.array([1.0, 3.0, 3.0, 2.0]))
        1
    """
    if len(fitness) == 0:
        raise EmptyPopulationError("cannot find the fittest member of an empty population")

    best = 0
    for i in range(1, len(fitness)):
        if fitness[best] < fitness[i]:
            best = i
    return best


def fittest_member(pop: Population, problem: FitnessProblem) -> tuple[np.ndarray, float]:
    """Return a copy of the first best chromosome of a population and its score.

    Raises:
        EmptyPopulationError: If the population is empty.
    """
    fitness = score_population(pop, problem)
    best = fittest_index(fitness)
    return pop[best], float(fitness[best])
