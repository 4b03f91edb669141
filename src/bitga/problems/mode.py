"""Fitness mode tags."""

from enum import Enum


class FitnessMode(str, Enum):
    """Tag selecting one of the built-in fitness problems."""

    ONE_MAX = "one-max"
    DECEPTIVE = "deceptive"
    TARGET = "target"
    KNAPSACK = "knapsack"
