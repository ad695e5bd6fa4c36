"""Decay weight function and half-life conversions."""

from __future__ import annotations

import math

from ewstats.exceptions import InvalidArgument

# Tier boundaries on x = decay_constant * elapsed
DIRECT_THRESHOLD = 1.0e-2
EXPM1_THRESHOLD = 1.0e-10


def decay_weight(decay_constant: float, elapsed: float) -> float:
    """Return ``(1 - exp(-decay_constant * elapsed)) / decay_constant``.

    This is the integral of ``exp(-decay_constant * s)`` over ``[0, elapsed]``,
    and tends to *elapsed* as the decay constant goes to zero. Computing it
    directly cancels catastrophically when the product is small, so the
    evaluation is picked by the size of ``decay_constant * elapsed``:

    * ``>= 1e-2``: the direct formula;
    * ``>= 1e-10``: ``-expm1(-x) / decay_constant``;
    * below that: ``elapsed * (1 - 0.5 * x)``, exact for a zero decay constant.

    Both arguments must be non-negative.
    """
    x = decay_constant * elapsed
    if x >= DIRECT_THRESHOLD:
        return (1.0 - math.exp(-x)) / decay_constant
    if x >= EXPM1_THRESHOLD:
        return -math.expm1(-x) / decay_constant
    return elapsed * (1.0 - 0.5 * x)


def decay_constant_for_half_life(half_life_millis: float) -> float:
    """Decay constant whose weights halve every *half_life_millis*."""
    if not half_life_millis > 0:
        raise InvalidArgument("half_life_millis", half_life_millis, "positive")
    decay_constant = math.log(2.0) / half_life_millis
    if not math.isfinite(decay_constant):
        raise InvalidArgument("half_life_millis", half_life_millis, "large enough for a finite decay constant")
    return decay_constant


def half_life_for_decay_constant(decay_constant: float) -> float:
    """Inverse of :func:`decay_constant_for_half_life`; ``inf`` when there is no decay."""
    if not decay_constant >= 0:
        raise InvalidArgument("decay_constant", decay_constant, "non-negative")
    if decay_constant == 0:
        return math.inf
    return math.log(2.0) / decay_constant


def alpha_for_half_life(half_life_values: float) -> float:
    """Per-value decay factor whose weights halve after *half_life_values* values.

    Solves ``(1 - alpha) ** half_life_values == 0.5``.
    """
    if not half_life_values > 0:
        raise InvalidArgument("half_life_values", half_life_values, "positive")
    return -math.expm1(-math.log(2.0) / half_life_values)
