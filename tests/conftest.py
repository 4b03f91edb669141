"""Shared test fixtures for bitga tests.

This module provides common fixtures used across test modules:
- rng: Seeded random number generator
- distinct_population: Small population whose members are all different
- knapsack_problem: Three-item knapsack instance
"""

import numpy as np
import pytest

from bitga import Knapsack, Population


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for deterministic tests."""
    return np.random.default_rng(42)


@pytest.fixture
def distinct_population() -> Population:
    """Population of 6 distinct 8-bit chromosomes with one-max scores 0..5 (one tie at 3)."""
    chromosomes = np.array(
        [
            [0, 0, 0, 0, 0, 0, 0, 0],
            [1, 0, 0, 0, 0, 0, 0, 0],
            [1, 1, 0, 0, 0, 0, 0, 0],
            [1, 1, 1, 0, 0, 0, 0, 0],
            [0, 0, 0, 0, 0, 1, 1, 1],
            [1, 1, 1, 1, 1, 0, 0, 0],
        ]
    )
    return Population(chromosomes=chromosomes)


@pytest.fixture
def zeros_and_ones() -> Population:
    """Population of 10 all-zero and 10 all-one 12-bit chromosomes."""
    chromosomes = np.vstack([np.zeros((10, 12), dtype=np.int8), np.ones((10, 12), dtype=np.int8)])
    return Population(chromosomes=chromosomes)


@pytest.fixture
def knapsack_problem() -> Knapsack:
    """Knapsack with weights [2, 3, 4], values [3, 4, 5] and capacity 5."""
    return Knapsack(weight=[2, 3, 4], value=[3, 4, 5], size=5)
