"""Exponentially weighted moving average without a seed value."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ewstats.exceptions import InvalidArgument

if TYPE_CHECKING:
    from ewstats.config import AverageConfig


class AverageAccumulator:
    """Decayed average of a stream of values.

    Each value weighs ``1 - alpha`` times as much as the one after it. Unlike
    the classic ``avg = alpha * v + (1 - alpha) * avg`` recurrence, no initial
    value is needed and the first few values are not over-weighted: the
    result is always the exact weighted mean of everything seen so far.

    ``alpha == 0`` gives the arithmetic mean, ``alpha == 1`` the latest value.

    Not thread-safe.
    """

    def __init__(self, alpha: float):
        if not 0.0 <= alpha <= 1.0:
            raise InvalidArgument("alpha", alpha, "between 0 and 1")
        self._alpha = alpha
        self._count: int = 0
        self._average: float | None = None

    @classmethod
    def from_config(cls, config: AverageConfig) -> AverageAccumulator:
        """Build an accumulator from validated configuration."""
        return cls(config.alpha)

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def count(self) -> int:
        """Number of values recorded so far."""
        return self._count

    def record(self, value: float) -> None:
        if self._average is None:
            self._average = value
        else:
            self._average += self._new_value_weight() * (value - self._average)
        self._count += 1

    def query(self) -> float | None:
        """Return the current average, or ``None`` if nothing has been recorded."""
        return self._average

    def _new_value_weight(self) -> float:
        # alpha / (1 - (1 - alpha) ** (count + 1))
        n = self._count + 1
        if self._alpha == 0.0:
            return 1.0 / n
        if self._alpha == 1.0:
            return 1.0
        return self._alpha / -math.expm1(n * math.log1p(-self._alpha))

    def __repr__(self) -> str:
        return f"AverageAccumulator(alpha={self._alpha!r}, count={self._count!r})"
