"""Target-matching problem."""

from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from bitga.errors import InvalidConfigurationError
from bitga.problems.mode import FitnessMode


@dataclass(frozen=True)
class Target:
    """Score a chromosome by the number of positions matching a target pattern.

    Only the first ``len(target)`` positions are compared, so the target may be
    shorter than the chromosome. Trailing bits never affect the score.

    Attributes:
        target: Bit pattern to match, shape (m,). Copied on construction.

    Example:
        >>> problem = Target(target=[1, 0, 1])
        >>> problem(np.array([1, 1, 1, 0, 0]))
        2.0
    """

    target: np.ndarray

    mode: ClassVar[FitnessMode] = FitnessMode.TARGET

    def __post_init__(self) -> None:
        """Convert the target to a read-only bit array.

        Raises:
            InvalidConfigurationError: If the target is missing, empty, not 1D,
                or holds values other than 0 and 1.
        """
        if self.target is None:
            raise InvalidConfigurationError("target mode requires a target sequence")

        target = np.array(self.target, copy=True)
        if target.ndim != 1:
            raise InvalidConfigurationError(f"target must be 1D, got shape {target.shape}")
        if target.size == 0:
            raise InvalidConfigurationError("target mode requires a non-empty target sequence")
        if not np.isin(target, (0, 1)).all():
            raise InvalidConfigurationError("target must only contain 0 and 1")

        target = target.astype(np.int8)
        target.setflags(write=False)
        object.__setattr__(self, "target", target)

    def __call__(self, chromosome: np.ndarray) -> float:
        m = len(self.target)
        return float(np.count_nonzero(chromosome[:m] == self.target))

    def validate(self, chromosome_length: int) -> None:
        if len(self.target) > chromosome_length:
            raise InvalidConfigurationError(
                f"target has {len(self.target)} bits, which exceeds chromosome length {chromosome_length}"
            )
