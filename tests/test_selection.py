"""Tests for random-size tournament selection."""

import numpy as np
import pytest

from bitga.fitness import score_population
from bitga.population import Population
from bitga.problems import OneMax
from bitga.selection import random_tournament


class TestRandomTournament:
    """Tests for random_tournament."""

    def test_preserves_population_size(self, distinct_population, rng):
        selector = random_tournament()
        fitness = score_population(distinct_population, OneMax())
        selected = selector(distinct_population, rng, fitness)
        assert len(selected) == len(distinct_population)
        assert selected.chromosome_length == distinct_population.chromosome_length

    def test_winners_are_members(self, distinct_population, rng):
        """Every selected chromosome is a copy of an input member."""
        selector = random_tournament()
        fitness = score_population(distinct_population, OneMax())
        selected = selector(distinct_population, rng, fitness)
        members = {tuple(row) for row in distinct_population.chromosomes}
        assert all(tuple(row) in members for row in selected.chromosomes)

    def test_returns_new_population(self, distinct_population, rng):
        selector = random_tournament()
        fitness = score_population(distinct_population, OneMax())
        selected = selector(distinct_population, rng, fitness)
        assert selected is not distinct_population
        assert not np.shares_memory(selected.chromosomes, distinct_population.chromosomes)

    def test_increases_mean_fitness(self, zeros_and_ones):
        """Tournaments favour fitter members, so all-one chromosomes take over most slots."""
        selector = random_tournament()
        fitness = score_population(zeros_and_ones, OneMax())
        rng = np.random.default_rng(0)
        shares = []
        for _ in range(50):
            selected = selector(zeros_and_ones, rng, fitness)
            shares.append(selected.chromosomes.all(axis=1).mean())
        assert np.mean(shares) > 0.7

    def test_tournament_size_varies(self, zeros_and_ones):
        """Because k can be 1, weaker members still win slots sometimes."""
        selector = random_tournament()
        fitness = score_population(zeros_and_ones, OneMax())
        rng = np.random.default_rng(1)
        losers_selected = 0
        for _ in range(50):
            selected = selector(zeros_and_ones, rng, fitness)
            losers_selected += int((selected.chromosomes.sum(axis=1) == 0).sum())
        assert losers_selected > 0

    def test_single_member_population(self, rng):
        pop = Population(chromosomes=np.array([[1, 0, 1]]))
        selected = random_tournament()(pop, rng, np.array([2.0]))
        np.testing.assert_array_equal(selected.chromosomes, pop.chromosomes)

    def test_equal_fitness_keeps_first_drawn(self, rng):
        """With all scores equal, the winner is the first entrant drawn, so selection is uniform."""
        pop = Population(chromosomes=np.eye(4, dtype=np.int8))
        fitness = np.ones(4)
        selector = random_tournament()
        counts = np.zeros(4)
        for _ in range(500):
            counts += selector(pop, rng, fitness).chromosomes.sum(axis=0)
        assert np.all(counts > 350)

    def test_fitness_shape_mismatch_raises(self, distinct_population, rng):
        with pytest.raises(ValueError, match="fitness must have shape"):
            random_tournament()(distinct_population, rng, np.ones(3))

    def test_deterministic_with_seed(self, distinct_population):
        fitness = score_population(distinct_population, OneMax())
        selector = random_tournament()
        a = selector(distinct_population, np.random.default_rng(5), fitness)
        b = selector(distinct_population, np.random.default_rng(5), fitness)
        np.testing.assert_array_equal(a.chromosomes, b.chromosomes)
