"""bitga: Generational genetic algorithm over fixed-length bit strings.

A numpy implementation of a bit-string genetic algorithm with random-size
tournament selection, single-point crossover and bit-flip mutation, and four
built-in fitness problems: one-max, deceptive trap, target matching and
greedy knapsack.

Example (one-max):
    >>> from bitga import run_genetic_algorithm
    >>> history = run_genetic_algorithm(
    ...     population_size=20, chromosome_length=10, max_generations=50,
    ...     p_crossover=0.8, p_mutation=0.05, fitness_mode="one-max", seed=42,
    ... )
    >>> history.generations
    50

Example (target matching from a custom start population):
    >>> import numpy as np
    >>> from bitga import Target, evolve, init_population
    >>> rng = np.random.default_rng(0)
    >>> pop = init_population(30, 8, rng)
    >>> history = evolve(pop, Target(target=[1, 0, 1, 0]), max_generations=10,
    ...                  p_crossover=0.9, p_mutation=0.1, seed=rng)
    >>> history.best_scores.max() <= 4
    True
"""

from bitga.algorithm import Evolution, EvolutionState, evolve, run_genetic_algorithm
from bitga.config import GAConfig
from bitga.errors import EmptyPopulationError, InvalidConfigurationError
from bitga.fitness import (
    average_fitness,
    evaluate,
    fittest_index,
    fittest_member,
    resolve_problem,
    score_population,
)
from bitga.operators import bit_flip_mutation, single_point_crossover
from bitga.population import Population, init_population, random_chromosome
from bitga.problems import (
    DECEPTIVE_REWARD_MULTIPLIER,
    Deceptive,
    FitnessMode,
    Knapsack,
    OneMax,
    Target,
)
from bitga.registry import ProblemRegistry, list_problems
from bitga.results import GAHistory, GenerationRecord
from bitga.sampling import pick_random, random_index, uniform_int, uniform_unit
from bitga.selection import random_tournament

__all__ = [
    # Algorithm
    "run_genetic_algorithm",
    "evolve",
    "Evolution",
    "EvolutionState",
    "GAConfig",
    # Fitness problems
    "FitnessMode",
    "OneMax",
    "Deceptive",
    "Target",
    "Knapsack",
    "DECEPTIVE_REWARD_MULTIPLIER",
    "ProblemRegistry",
    "list_problems",
    # Fitness evaluation
    "resolve_problem",
    "evaluate",
    "score_population",
    "average_fitness",
    "fittest_index",
    "fittest_member",
    # Operators
    "random_tournament",
    "single_point_crossover",
    "bit_flip_mutation",
    # Sampling
    "uniform_int",
    "uniform_unit",
    "random_index",
    "pick_random",
    # Data structures
    "Population",
    "init_population",
    "random_chromosome",
    "GenerationRecord",
    "GAHistory",
    # Errors
    "InvalidConfigurationError",
    "EmptyPopulationError",
]
