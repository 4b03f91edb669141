"""Random-size tournament selection."""

import numpy as np

from bitga.fitness import fittest_index
from bitga.population import Population
from bitga.sampling import random_index, uniform_int


def random_tournament():
    """Create a tournament selector whose tournament size is drawn per slot.

    For every slot of the next population a tournament size k is drawn
    uniformly from [1, n], then k entrants are drawn with replacement (the same
    member may enter twice). The first entrant with the highest fitness, in
    draw order, wins the slot.

    Unlike the usual fixed-size tournament, the selection pressure varies from
    slot to slot: k = 1 is a uniform random pick, k = n is close to picking
    the population best.

    Returns:
        A Selector callable.

    Example:
        >>> selector = random_tournament()
        >>> next_pop = selector(pop, rng, fitness)
        >>> len(next_pop) == len(pop)
        True
    """

    def selector(
        pop: Population,
        rng: np.random.Generator,
        fitness: np.ndarray,
    ) -> Population:
        """Select a new population of the same size by tournament.

        Args:
            pop: Population to select from.
            rng: Random number generator.
            fitness: Score of every member of ``pop``, shape (n,).

        Returns:
            New Population holding copies of the winners.

        Raises:
            ValueError: If fitness does not have one entry per member.
            EmptyPopulationError: If the population is empty.
        """
        n = len(pop)
        if fitness.shape != (n,):
            raise ValueError(f"fitness must have shape ({n},), got {fitness.shape}")

        winners = np.empty(n, dtype=np.intp)
        for slot in range(n):
            n_entrants = uniform_int(rng, 1, n)
            entrants = np.array([random_index(rng, n) for _ in range(n_entrants)], dtype=np.intp)
            winners[slot] = entrants[fittest_index(fitness[entrants])]

        return Population(chromosomes=pop.chromosomes[winners])

    return selector
