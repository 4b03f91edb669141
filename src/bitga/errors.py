"""Exception types raised by bitga.

Both classes derive from builtin exceptions so callers can catch them the
usual way (``except ValueError``) without importing this module.
"""


class InvalidConfigurationError(ValueError):
    """Run parameters or problem parameters are invalid.

    Raised before any generation runs. A run is never partially executed.
    """


class EmptyPopulationError(IndexError):
    """Sampling from or scoring an empty sequence or population."""
