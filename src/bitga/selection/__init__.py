"""Selection strategies for genetic algorithms."""

from bitga.selection.tournament import random_tournament

__all__ = ["random_tournament"]
