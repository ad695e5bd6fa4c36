"""Accumulators and the decay weight they share."""

from ewstats.core.average import AverageAccumulator
from ewstats.core.decay import (
    alpha_for_half_life,
    decay_constant_for_half_life,
    decay_weight,
    half_life_for_decay_constant,
)
from ewstats.core.rate import RateAccumulator

__all__ = [
    "AverageAccumulator",
    "RateAccumulator",
    "alpha_for_half_life",
    "decay_constant_for_half_life",
    "decay_weight",
    "half_life_for_decay_constant",
]
