"""Bit-flip mutation for bit-string populations."""

from collections.abc import Callable

import numpy as np

from bitga.errors import InvalidConfigurationError
from bitga.population import Population
from bitga.sampling import random_index, uniform_int, uniform_unit

MIN_FLIPS = 3
MAX_FLIPS = 5


def bit_flip_mutation(
    p_mutation: float = 0.05,
    min_flips: int = MIN_FLIPS,
    max_flips: int = MAX_FLIPS,
) -> Callable[[Population, np.random.Generator], Population]:
    """Create a bit-flip mutation operator.

    The operator makes one mutation draw per population member. Each draw
    succeeds with probability ``p_mutation``; on success a member is picked at
    random from the population (not necessarily the one at the current loop
    position) and between ``min_flips`` and ``max_flips`` of its bits are
    flipped. Bit positions are drawn independently, so a position may be
    flipped twice and fewer distinct bits may end up changed.

    Because the mutated member is re-drawn, a single member can be mutated
    several times in one pass while others are left untouched.

    Args:
        p_mutation: Probability of each mutation draw, in [0, 1].
        min_flips: Smallest number of flips per mutation (default 3).
        max_flips: Largest number of flips per mutation (default 5).

    Returns:
        A PopulationOperator callable. The input population is never modified.

    Raises:
        InvalidConfigurationError: If p_mutation is outside [0, 1] or the flip
            range is empty or negative.

    Example:
        >>> mutate = bit_flip_mutation(p_mutation=0.05)
        >>> mutated = mutate(pop, rng)
    """
    if not 0.0 <= p_mutation <= 1.0:
        raise InvalidConfigurationError(f"p_mutation must be in [0, 1], got {p_mutation}")
    if min_flips < 0 or min_flips > max_flips:
        raise InvalidConfigurationError(
            f"flip range must satisfy 0 <= min_flips <= max_flips, got [{min_flips}, {max_flips}]"
        )

    def mutate(pop: Population, rng: np.random.Generator) -> Population:
        """Apply bit-flip mutation to a copy of a population."""
        n, length = pop.chromosomes.shape
        mutated = pop.chromosomes.copy()

        for _ in range(n):
            if uniform_unit(rng) < p_mutation:
                member = random_index(rng, n)
                n_flips = uniform_int(rng, min_flips, max_flips)
                for _ in range(n_flips):
                    bit = random_index(rng, length)
                    mutated[member, bit] ^= 1

        return Population(chromosomes=mutated)

    return mutate
