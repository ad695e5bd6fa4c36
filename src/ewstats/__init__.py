"""ewstats: decayed rates and averages over irregular event streams."""

from ewstats.config import AverageConfig, RateConfig
from ewstats.core import (
    AverageAccumulator,
    RateAccumulator,
    alpha_for_half_life,
    decay_constant_for_half_life,
    decay_weight,
    half_life_for_decay_constant,
)
from ewstats.exceptions import EwstatsError, InvalidArgument

__version__ = "0.1.0"
__all__ = [
    "AverageAccumulator",
    "AverageConfig",
    "EwstatsError",
    "InvalidArgument",
    "RateAccumulator",
    "RateConfig",
    "alpha_for_half_life",
    "decay_constant_for_half_life",
    "decay_weight",
    "half_life_for_decay_constant",
]
