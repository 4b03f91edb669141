"""Single-point crossover for bit-string populations."""

from collections.abc import Callable

import numpy as np

from bitga.errors import InvalidConfigurationError
from bitga.population import Population
from bitga.sampling import random_index, uniform_int, uniform_unit


def single_point_crossover(p_crossover: float = 0.8) -> Callable[[Population, np.random.Generator], Population]:
    """Create a single-point crossover operator.

    The operator fills a new population slot by slot. With probability
    ``p_crossover`` a slot gets a child of two parents drawn with replacement:
    the first ``split`` bits of parent 1 followed by the remaining bits of
    parent 2, where ``split`` is drawn from [1, chromosome_length]. When
    ``split`` equals the chromosome length the child is a copy of parent 1.
    Otherwise the slot gets a copy of one randomly drawn member.

    With ``p_crossover=0`` the operator only resamples the population with
    replacement; with ``p_crossover=1`` every slot is a crossover child.

    Args:
        p_crossover: Probability that a slot is filled by crossover, in [0, 1].

    Returns:
        A PopulationOperator callable.

    Raises:
        InvalidConfigurationError: If p_crossover is outside [0, 1].

    Example:
        >>> crossover = single_point_crossover(p_crossover=0.9)
        >>> children = crossover(pop, rng)
        >>> children.chromosomes.shape == pop.chromosomes.shape
        True
    """
    if not 0.0 <= p_crossover <= 1.0:
        raise InvalidConfigurationError(f"p_crossover must be in [0, 1], got {p_crossover}")

    def crossover(pop: Population, rng: np.random.Generator) -> Population:
        """Apply single-point crossover to a population."""
        n, length = pop.chromosomes.shape
        parents = pop.chromosomes
        children = np.empty_like(parents)

        for slot in range(n):
            if uniform_unit(rng) < p_crossover:
                p1 = random_index(rng, n)
                p2 = random_index(rng, n)
                split = uniform_int(rng, 1, length)
                children[slot, :split] = parents[p1, :split]
                children[slot, split:] = parents[p2, split:]
            else:
                children[slot] = parents[random_index(rng, n)]

        return Population(chromosomes=children)

    return crossover
