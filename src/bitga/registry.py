"""Registry of fitness problem factories.

Problems are registered by their mode tag and built once, when a run starts,
from the mode name and its parameters. The evolutionary loop only ever sees
the resulting problem object, so no mode dispatch happens per evaluation.

The registry enables:
- **Mode tags**: Select a built-in problem by name ("one-max", "knapsack", ...)
- **Custom problems**: Register new factories under new names
- **Discoverability**: List all available problems programmatically

Basic usage:
    ```python
    from bitga.registry import ProblemRegistry, list_problems

    # Get a configured problem
    problem = ProblemRegistry.get("target", target=[1, 0, 1, 1])

    # Register a custom problem factory
    ProblemRegistry.register("zero-max", lambda: ZeroMax())

    # List available problems
    available = list_problems()  # ["deceptive", "knapsack", "one-max", ...]
    ```
"""

from collections.abc import Callable

from bitga.protocols import FitnessProblem


class ProblemRegistry:
    """Registry for fitness problem factories.

    The registry stores factory callables that accept keyword arguments and
    return FitnessProblem instances, so problem parameters are supplied at
    retrieval time.

    Class Attributes:
        _registry: Dictionary mapping problem names to factory functions.
    """

    _registry: dict[str, Callable[..., FitnessProblem]] = {}

    @classmethod
    def register(cls, name: str, factory: Callable[..., FitnessProblem]) -> None:
        """Register a fitness problem factory.

        Args:
            name: Unique name for the problem. Will overwrite if already exists.
            factory: Callable that returns a FitnessProblem. Should accept
                keyword arguments for the problem parameters.
        """
        cls._registry[name] = factory

    @classmethod
    def get(cls, name: str, **kwargs) -> FitnessProblem:
        """Build a configured problem by name.

        Args:
            name: Name of the registered problem.
            **kwargs: Problem parameters passed to the factory function.

        Returns:
            A configured FitnessProblem.

        Raises:
            KeyError: If the problem name is not registered. Error message
                includes list of available problems.

        Example:
            ```python
            problem = ProblemRegistry.get("knapsack", weight=[2, 3], value=[3, 4], size=5)
            score = problem(np.array([1, 1]))
            ```
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry.keys())) or "none"
            raise KeyError(f"Fitness problem '{name}' not found. Available problems: {available}")
        factory = cls._registry[name]
        return factory(**kwargs)

    @classmethod
    def list(cls) -> list[str]:
        """Return sorted list of registered problem names."""
        return sorted(cls._registry.keys())


def list_problems() -> list[str]:
    """List all registered fitness problems.

    Convenience function that returns ProblemRegistry.list().
    """
    return ProblemRegistry.list()
