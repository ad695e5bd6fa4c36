"""Exponentially weighted moving rate."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from ewstats.core.decay import decay_weight
from ewstats.exceptions import InvalidArgument

if TYPE_CHECKING:
    from ewstats.config import RateConfig

log = logging.getLogger(__name__)


class RateAccumulator:
    """Decayed rate of increase of a monotonically increasing counter.

    An increment recorded ``age`` milliseconds ago carries a weight
    proportional to ``exp(-decay_constant * age)``. The rate is kept as a
    single running value updated in O(1) per increment, and can be
    extrapolated to any later instant with :meth:`query`.

    A decay constant of zero gives the plain cumulative rate: total increment
    divided by the time elapsed since *origin_time_millis*.

    Not thread-safe. Callers sharing an instance across threads must
    serialize access to :meth:`record` and :meth:`query` themselves.

    >>> acc = RateAccumulator(1e-6, origin_time_millis=1_000)
    >>> acc.record(10.0, 2_000)
    >>> round(acc.query(2_000), 4)
    0.01
    """

    def __init__(self, decay_constant: float, origin_time_millis: int):
        if not (decay_constant >= 0 and math.isfinite(decay_constant)):
            raise InvalidArgument("decay_constant", decay_constant, "finite and non-negative")
        if origin_time_millis <= 0:
            raise InvalidArgument("origin_time_millis", origin_time_millis, "positive")
        self._decay_constant = decay_constant
        self._origin_time_millis = origin_time_millis
        self._last_event_time_millis: int = 0
        self._rate: float | None = None

    @classmethod
    def from_config(cls, config: RateConfig) -> RateAccumulator:
        """Build an accumulator from validated configuration."""
        return cls(config.decay_constant, config.origin_time_millis)

    @property
    def decay_constant(self) -> float:
        """Weight of an increment ``age`` ms ago is ``exp(-decay_constant * age)``."""
        return self._decay_constant

    @property
    def origin_time_millis(self) -> int:
        """Instant from which decay weight is integrated."""
        return self._origin_time_millis

    @property
    def last_event_time_millis(self) -> int:
        """Time of the latest (possibly clamped) increment, or ``0`` if there is none."""
        return self._last_event_time_millis

    def record(self, increment: float, time_millis: int) -> None:
        """Add a non-negative *increment* that happened at *time_millis*.

        Time never runs backwards for the accumulator: a first increment at
        or before the origin counts as happening one millisecond after it,
        and a later increment older than the previous one counts as happening
        at the previous one's time.
        """
        if self._rate is None:
            if time_millis <= self._origin_time_millis:
                log.debug(
                    "increment at %d is not after origin %d, recording at %d",
                    time_millis,
                    self._origin_time_millis,
                    self._origin_time_millis + 1,
                )
                time_millis = self._origin_time_millis + 1
            self._rate = increment / decay_weight(
                self._decay_constant, time_millis - self._origin_time_millis
            )
        else:
            if time_millis < self._last_event_time_millis:
                log.debug(
                    "increment at %d precedes last increment at %d, recording at %d",
                    time_millis,
                    self._last_event_time_millis,
                    self._last_event_time_millis,
                )
                time_millis = self._last_event_time_millis
            since_last = decay_weight(self._decay_constant, time_millis - self._last_event_time_millis)
            since_origin = decay_weight(self._decay_constant, time_millis - self._origin_time_millis)
            self._rate += (increment - since_last * self._rate) / since_origin
        self._last_event_time_millis = time_millis

    def query(self, time_millis: int) -> float:
        """Return the rate as of *time_millis*.

        Before any increment this is ``0.0``. At or before the latest
        increment it is the rate stored then; past it, the stored rate is
        decayed across the gap, so a quiet counter's rate falls away smoothly
        instead of freezing.
        """
        if self._rate is None:
            return 0.0
        if time_millis <= self._last_event_time_millis:
            return self._rate
        gap = time_millis - self._last_event_time_millis
        return (
            decay_weight(self._decay_constant, self._last_event_time_millis - self._origin_time_millis)
            * math.exp(-self._decay_constant * gap)
            * self._rate
            / decay_weight(self._decay_constant, time_millis - self._origin_time_millis)
        )

    def __repr__(self) -> str:
        return (
            f"RateAccumulator(decay_constant={self._decay_constant!r}, "
            f"origin_time_millis={self._origin_time_millis!r}, "
            f"last_event_time_millis={self._last_event_time_millis!r})"
        )
