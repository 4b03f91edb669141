"""Generational genetic algorithm over bit-string chromosomes.

This module provides the evolutionary loop and its entry points:
- Evolution: Step-wise driver with an explicit state
- evolve: Run the loop from a given start population
- run_genetic_algorithm: Validate parameters, create a random population, evolve

Every generation, in order:
    1. Record best chromosome, best score and average score of the current
       population (before any operator is applied)
    2. Replace the population by tournament selection
    3. Replace it by single-point crossover
    4. Replace it by bit-flip mutation

The loop always runs exactly ``max_generations`` generations; there is no
early stopping.

Example:
    >>> from bitga import run_genetic_algorithm
    >>> history = run_genetic_algorithm(
    ...     population_size=20,
    ...     chromosome_length=10,
    ...     max_generations=50,
    ...     p_crossover=0.8,
    ...     p_mutation=0.05,
    ...     fitness_mode="one-max",
    ...     seed=42,
    ... )
    >>> len(history.records)
    50
    >>> best_chromosome, best_score = history.best
"""

import logging
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

import numpy as np

from bitga.config import GAConfig
from bitga.errors import InvalidConfigurationError
from bitga.fitness import fittest_index, resolve_problem, score_population
from bitga.operators import bit_flip_mutation, single_point_crossover
from bitga.population import Population, init_population
from bitga.problems import FitnessMode, Knapsack
from bitga.protocols import FitnessProblem, PopulationOperator, Selector
from bitga.results import GAHistory, GenerationRecord
from bitga.selection import random_tournament

logger = logging.getLogger(__name__)

GenerationCallback = Callable[[GenerationRecord, int], None]


def _problem_name(problem: FitnessProblem) -> str:
    mode = getattr(problem, "mode", None)
    if isinstance(mode, FitnessMode):
        return mode.value
    return str(mode) if mode is not None else type(problem).__name__


class EvolutionState(Enum):
    """Lifecycle of an Evolution."""

    INITIALIZED = "initialized"
    RUNNING = "running"
    COMPLETED = "completed"


class Evolution:
    """Step-wise generational evolution of a population.

    The driver starts INITIALIZED, becomes RUNNING after the first step and
    COMPLETED once ``max_generations`` steps have run. Each operator returns a
    new population; the driver only ever replaces its population reference.

    Args:
        population: Start population. Must not be empty.
        problem: Fitness problem used for recording and selection.
        max_generations: Number of generations to run. Must be non-negative.
        select: Selection strategy.
        crossover: Crossover operator.
        mutate: Mutation operator.
        rng: Random number generator shared by all operators.
        callback: Optional hook called with each new record and its generation.
            Its return value is ignored.

    Raises:
        InvalidConfigurationError: If the population is empty, max_generations
            is negative, or the problem does not fit the chromosome length.

    Example:
        >>> evolution = Evolution(pop, OneMax(), 10, random_tournament(),
        ...                       single_point_crossover(0.8), bit_flip_mutation(0.05), rng)
        >>> record = evolution.step()
        >>> evolution.state
        <EvolutionState.RUNNING: 'running'>
        >>> history = evolution.run()
    """

    def __init__(
        self,
        population: Population,
        problem: FitnessProblem,
        max_generations: int,
        select: Selector,
        crossover: PopulationOperator,
        mutate: PopulationOperator,
        rng: np.random.Generator,
        callback: GenerationCallback | None = None,
    ) -> None:
        if len(population) == 0:
            raise InvalidConfigurationError("start population must not be empty")
        if max_generations < 0:
            raise InvalidConfigurationError(f"max_generations must be non-negative, got {max_generations}")
        problem.validate(population.chromosome_length)

        self.problem = problem
        self.max_generations = max_generations
        self._select = select
        self._crossover = crossover
        self._mutate = mutate
        self._rng = rng
        self._callback = callback

        self._population = population
        self._records: list[GenerationRecord] = []
        self._generation = 0
        self._state = EvolutionState.INITIALIZED

    @property
    def state(self) -> EvolutionState:
        return self._state

    @property
    def generation(self) -> int:
        """Number of generations completed so far."""
        return self._generation

    @property
    def population(self) -> Population:
        return self._population

    @property
    def history(self) -> GAHistory:
        """History of the generations run so far."""
        return GAHistory(records=tuple(self._records), final_population=self._population)

    def step(self) -> GenerationRecord:
        """Run one generation and return its record.

        Raises:
            RuntimeError: If all generations have already run.
        """
        if self._generation >= self.max_generations:
            self._state = EvolutionState.COMPLETED
            raise RuntimeError(f"evolution already completed {self.max_generations} generations")
        self._state = EvolutionState.RUNNING

        fitness = score_population(self._population, self.problem)
        best_idx = fittest_index(fitness)
        record = GenerationRecord(
            generation=self._generation,
            best_chromosome=self._population.chromosomes[best_idx],
            best_score=fitness[best_idx],
            average_score=fitness.mean(),
        )
        self._records.append(record)
        logger.debug(
            f"Generation {record.generation}: best={record.best_score:.4g}, average={record.average_score:.4g}"
        )
        if self._callback is not None:
            self._callback(record, self._generation)

        population = self._select(self._population, self._rng, fitness)
        population = self._crossover(population, self._rng)
        self._population = self._mutate(population, self._rng)

        self._generation += 1
        if self._generation >= self.max_generations:
            self._state = EvolutionState.COMPLETED
        return record

    def run(self) -> GAHistory:
        """Run all remaining generations and return the full history."""
        while self._generation < self.max_generations:
            self.step()
        self._state = EvolutionState.COMPLETED
        return self.history


def evolve(
    start_population: Population,
    problem: FitnessProblem,
    max_generations: int,
    p_crossover: float,
    p_mutation: float,
    seed: int | np.random.Generator | None = None,
    callback: GenerationCallback | None = None,
) -> GAHistory:
    """Evolve a given population with the standard operators.

    Uses random-size tournament selection, single-point crossover and
    bit-flip mutation.

    Args:
        start_population: Population of generation 0.
        problem: Fitness problem (see resolve_problem to build one from a mode tag).
        max_generations: Number of generations to run.
        p_crossover: Crossover probability, in [0, 1].
        p_mutation: Mutation probability, in [0, 1].
        seed: Random seed or generator. If None, uses system entropy.
        callback: Optional per-generation observation hook.

    Returns:
        GAHistory with one record per generation.

    Raises:
        InvalidConfigurationError: If any parameter is invalid.
    """
    evolution = Evolution(
        population=start_population,
        problem=problem,
        max_generations=max_generations,
        select=random_tournament(),
        crossover=single_point_crossover(p_crossover),
        mutate=bit_flip_mutation(p_mutation),
        rng=np.random.default_rng(seed),
        callback=callback,
    )

    logger.info(
        f"Evolving {len(start_population)} chromosomes of {start_population.chromosome_length} bits "
        f"for {max_generations} generations ({_problem_name(problem)})"
    )
    history = evolution.run()
    if history.generations:
        _, best_score = history.best
        logger.info(f"Evolution completed: best score {best_score:.4g} over {history.generations} generations")
    else:
        logger.info("Evolution completed: no generations run")
    return history


def run_genetic_algorithm(
    population_size: int,
    chromosome_length: int,
    max_generations: int,
    p_crossover: float,
    p_mutation: float,
    fitness_mode: str | FitnessMode | FitnessProblem,
    target: Any = None,
    knapsack: Mapping[str, Any] | Knapsack | None = None,
    seed: int | None = None,
    callback: GenerationCallback | None = None,
) -> GAHistory:
    """Run a bit-string genetic algorithm on a random start population.

    All parameters are validated before the start population is created, so
    an invalid configuration never runs a generation.

    Args:
        population_size: Number of chromosomes. Must be positive.
        chromosome_length: Number of bits per chromosome. Must be positive.
        max_generations: Number of generations. Must be non-negative.
        p_crossover: Crossover probability, in [0, 1].
        p_mutation: Mutation probability, in [0, 1].
        fitness_mode: "one-max", "deceptive", "target", "knapsack" (or the
            matching FitnessMode), or a ready FitnessProblem.
        target: Bit sequence to match. Required for target mode, at most
            chromosome_length bits.
        knapsack: Mapping with 'weight', 'value' and 'size' (or a Knapsack).
            Required for knapsack mode; weight and value need at least
            chromosome_length items.
        seed: Random seed for reproducibility. If None, uses system entropy.
        callback: Optional hook called with each GenerationRecord and its
            generation index.

    Returns:
        GAHistory with exactly max_generations records.

    Raises:
        InvalidConfigurationError: If any parameter is invalid.

    Example:
        >>> history = run_genetic_algorithm(
        ...     population_size=30,
        ...     chromosome_length=3,
        ...     max_generations=20,
        ...     p_crossover=0.8,
        ...     p_mutation=0.05,
        ...     fitness_mode="knapsack",
        ...     knapsack={"weight": [2, 3, 4], "value": [3, 4, 5], "size": 5},
        ...     seed=0,
        ... )
        >>> history.best[1]
        7.0
    """
    config = GAConfig(
        population_size=population_size,
        chromosome_length=chromosome_length,
        max_generations=max_generations,
        p_crossover=p_crossover,
        p_mutation=p_mutation,
    )
    problem = resolve_problem(fitness_mode, target=target, knapsack=knapsack)
    problem.validate(config.chromosome_length)

    rng = np.random.default_rng(seed)
    population = init_population(config.population_size, config.chromosome_length, rng)

    return evolve(
        population,
        problem,
        max_generations=config.max_generations,
        p_crossover=config.p_crossover,
        p_mutation=config.p_mutation,
        seed=rng,
        callback=callback,
    )
