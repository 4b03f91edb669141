"""Built-in fitness problems for bit-string chromosomes."""

from bitga.problems.knapsack import Knapsack
from bitga.problems.mode import FitnessMode
from bitga.problems.onemax import DECEPTIVE_REWARD_MULTIPLIER, Deceptive, OneMax
from bitga.problems.target import Target
from bitga.registry import ProblemRegistry

# Register built-in problems
ProblemRegistry.register(FitnessMode.ONE_MAX.value, OneMax)
ProblemRegistry.register(FitnessMode.DECEPTIVE.value, Deceptive)
ProblemRegistry.register(FitnessMode.TARGET.value, Target)
ProblemRegistry.register(FitnessMode.KNAPSACK.value, Knapsack)

__all__ = [
    "DECEPTIVE_REWARD_MULTIPLIER",
    "Deceptive",
    "FitnessMode",
    "Knapsack",
    "OneMax",
    "Target",
]
