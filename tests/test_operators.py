"""Tests for single-point crossover and bit-flip mutation."""

import numpy as np
import pytest

from bitga.errors import InvalidConfigurationError
from bitga.operators import MAX_FLIPS, MIN_FLIPS, bit_flip_mutation, single_point_crossover
from bitga.population import Population, init_population


def _is_prefix_suffix_child(child: np.ndarray, parents: np.ndarray) -> bool:
    """Check whether child == p1[:s] + p2[s:] for some parents and s in [1, L]."""
    length = len(child)
    for split in range(1, length + 1):
        prefixes = (parents[:, :split] == child[:split]).all(axis=1)
        suffixes = (parents[:, split:] == child[split:]).all(axis=1)
        if prefixes.any() and suffixes.any():
            return True
    return False


# =============================================================================
# Single-point crossover
# =============================================================================


class TestSinglePointCrossover:
    """Tests for single_point_crossover."""

    def test_preserves_shape(self, rng):
        pop = init_population(15, 12, rng)
        children = single_point_crossover(0.8)(pop, rng)
        assert children.chromosomes.shape == (15, 12)

    def test_always_crossover_children_are_prefix_suffix(self, zeros_and_ones):
        """With p_crossover=1 every child is a prefix of one member plus a suffix of another."""
        crossover = single_point_crossover(1.0)
        rng = np.random.default_rng(3)
        for _ in range(20):
            children = crossover(zeros_and_ones, rng)
            for child in children.chromosomes:
                assert _is_prefix_suffix_child(child, zeros_and_ones.chromosomes)

    def test_always_crossover_produces_mixed_children(self, zeros_and_ones):
        """Crossing all-zero with all-one members yields children 1...10...0 or 0...01...1."""
        crossover = single_point_crossover(1.0)
        rng = np.random.default_rng(4)
        mixed = 0
        for _ in range(20):
            children = crossover(zeros_and_ones, rng)
            sums = children.chromosomes.sum(axis=1)
            mixed += int(((sums > 0) & (sums < 12)).sum())
        assert mixed > 0

    def test_children_cover_all_prefix_suffix_combinations(self):
        """Children are exactly the p1[:s] + p2[s:] combinations for s in [1, L]."""
        parents = np.array([[1, 0, 0, 0], [0, 1, 1, 1]])
        expected = {
            tuple(int(bit) for bit in np.concatenate([p1[:split], p2[split:]]))
            for p1 in parents
            for p2 in parents
            for split in range(1, 5)
        }
        pop = Population(chromosomes=parents)
        crossover = single_point_crossover(1.0)
        rng = np.random.default_rng(8)
        seen = set()
        for _ in range(200):
            for child in crossover(pop, rng).chromosomes:
                seen.add(tuple(int(bit) for bit in child))
        assert seen == expected

    def test_never_crossover_is_resampling(self, rng):
        """With p_crossover=0 every output member equals some input member."""
        pop = init_population(10, 16, rng)
        members = {tuple(row) for row in pop.chromosomes}
        children = single_point_crossover(0.0)(pop, rng)
        assert all(tuple(row) in members for row in children.chromosomes)

    def test_never_crossover_on_complementary_population(self, zeros_and_ones, rng):
        children = single_point_crossover(0.0)(zeros_and_ones, rng)
        sums = children.chromosomes.sum(axis=1)
        assert np.all((sums == 0) | (sums == 12))

    def test_input_not_modified(self, rng):
        pop = init_population(10, 8, rng)
        before = pop.chromosomes.copy()
        single_point_crossover(0.5)(pop, rng)
        np.testing.assert_array_equal(pop.chromosomes, before)

    def test_output_does_not_share_memory(self, rng):
        pop = init_population(10, 8, rng)
        children = single_point_crossover(0.0)(pop, rng)
        assert not np.shares_memory(children.chromosomes, pop.chromosomes)

    @pytest.mark.parametrize("p", [-0.1, 1.5])
    def test_invalid_probability_raises(self, p):
        with pytest.raises(InvalidConfigurationError, match="p_crossover must be in"):
            single_point_crossover(p)

    def test_deterministic_with_seed(self, zeros_and_ones):
        crossover = single_point_crossover(0.7)
        a = crossover(zeros_and_ones, np.random.default_rng(11))
        b = crossover(zeros_and_ones, np.random.default_rng(11))
        np.testing.assert_array_equal(a.chromosomes, b.chromosomes)


# =============================================================================
# Bit-flip mutation
# =============================================================================


class TestBitFlipMutation:
    """Tests for bit_flip_mutation."""

    def test_default_flip_range(self):
        assert (MIN_FLIPS, MAX_FLIPS) == (3, 5)

    def test_zero_probability_is_identity(self, rng):
        pop = init_population(20, 10, rng)
        mutated = bit_flip_mutation(0.0)(pop, rng)
        np.testing.assert_array_equal(mutated.chromosomes, pop.chromosomes)

    def test_preserves_shape(self, rng):
        pop = init_population(20, 10, rng)
        mutated = bit_flip_mutation(0.5)(pop, rng)
        assert mutated.chromosomes.shape == (20, 10)

    def test_input_not_modified(self, rng):
        pop = init_population(20, 10, rng)
        before = pop.chromosomes.copy()
        bit_flip_mutation(1.0)(pop, rng)
        np.testing.assert_array_equal(pop.chromosomes, before)

    def test_single_mutation_flips_at_most_five_bits(self, rng):
        """A single-member population gets one mutation of 3 to 5 flips."""
        pop = Population(chromosomes=np.zeros((1, 64), dtype=np.int8))
        mutate = bit_flip_mutation(1.0)
        for _ in range(200):
            changed = int(mutate(pop, rng).chromosomes.sum())
            # A position drawn twice flips back, so fewer bits may change.
            assert changed <= 5

    def test_flip_count_parity(self, rng):
        """With exactly three flips the number of changed bits is odd (3 or 1)."""
        pop = Population(chromosomes=np.zeros((1, 16), dtype=np.int8))
        mutate = bit_flip_mutation(1.0, min_flips=3, max_flips=3)
        for _ in range(100):
            assert int(mutate(pop, rng).chromosomes.sum()) in (1, 3)

    def test_target_member_redrawn(self):
        """The mutated member is drawn at random, so some members stay untouched."""
        pop = Population(chromosomes=np.zeros((10, 32), dtype=np.int8))
        mutate = bit_flip_mutation(1.0, min_flips=1, max_flips=1)
        rng = np.random.default_rng(2)
        untouched_runs = 0
        for _ in range(20):
            mutated = mutate(pop, rng)
            if (mutated.chromosomes.sum(axis=1) == 0).any():
                untouched_runs += 1
        assert untouched_runs > 0

    def test_low_probability_changes_few_members(self, rng):
        pop = Population(chromosomes=np.zeros((200, 20), dtype=np.int8))
        mutated = bit_flip_mutation(0.05)(pop, rng)
        changed_members = int((mutated.chromosomes.sum(axis=1) > 0).sum())
        assert 0 < changed_members < 30

    @pytest.mark.parametrize("p", [-0.01, 1.01])
    def test_invalid_probability_raises(self, p):
        with pytest.raises(InvalidConfigurationError, match="p_mutation must be in"):
            bit_flip_mutation(p)

    def test_invalid_flip_range_raises(self):
        with pytest.raises(InvalidConfigurationError, match="flip range"):
            bit_flip_mutation(0.1, min_flips=5, max_flips=3)
