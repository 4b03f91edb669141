"""Tests for the fitness problem registry."""

import numpy as np
import pytest

import bitga.problems  # noqa: F401
from bitga.problems import Deceptive, Knapsack, OneMax, Target
from bitga.registry import ProblemRegistry, list_problems


@pytest.fixture
def clean_registry():
    """Snapshot the registry and restore it after the test."""
    saved = dict(ProblemRegistry._registry)
    yield
    ProblemRegistry._registry.clear()
    ProblemRegistry._registry.update(saved)


class TestProblemRegistry:
    """Tests for ProblemRegistry."""

    def test_builtin_problems_registered(self):
        assert list_problems() == ["deceptive", "knapsack", "one-max", "target"]

    def test_get_builds_problem(self):
        assert isinstance(ProblemRegistry.get("one-max"), OneMax)
        assert isinstance(ProblemRegistry.get("deceptive"), Deceptive)

    def test_get_passes_parameters(self):
        problem = ProblemRegistry.get("target", target=[1, 0])
        assert isinstance(problem, Target)
        np.testing.assert_array_equal(problem.target, [1, 0])

        knapsack = ProblemRegistry.get("knapsack", weight=[1], value=[2], size=3)
        assert isinstance(knapsack, Knapsack)

    def test_get_configures_deceptive(self):
        assert ProblemRegistry.get("deceptive", reward_multiplier=10).reward_multiplier == 10

    def test_unknown_name_lists_available(self):
        with pytest.raises(KeyError, match="Available problems: deceptive, knapsack, one-max, target"):
            ProblemRegistry.get("zero-max")

    def test_register_custom_problem(self, clean_registry):
        class ZeroMax:
            mode = "zero-max"

            def __call__(self, chromosome):
                return float(len(chromosome) - np.count_nonzero(chromosome))

            def validate(self, chromosome_length):
                pass

        ProblemRegistry.register("zero-max", ZeroMax)
        assert "zero-max" in list_problems()
        assert ProblemRegistry.get("zero-max")(np.array([0, 0, 1])) == 2.0

    def test_register_overwrites(self, clean_registry):
        ProblemRegistry.register("one-max", lambda: Deceptive())
        assert isinstance(ProblemRegistry.get("one-max"), Deceptive)

    def test_list_is_sorted(self):
        names = ProblemRegistry.list()
        assert names == sorted(names)
