"""Variation operators for bit-string populations.

This package provides:
- single_point_crossover: Single-point crossover factory
- bit_flip_mutation: Random-member bit-flip mutation factory
"""

from bitga.operators.crossover import single_point_crossover
from bitga.operators.mutation import MAX_FLIPS, MIN_FLIPS, bit_flip_mutation

__all__ = ["single_point_crossover", "bit_flip_mutation", "MIN_FLIPS", "MAX_FLIPS"]
