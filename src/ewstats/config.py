"""ewstats configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from ewstats.core.decay import alpha_for_half_life, decay_constant_for_half_life


class RateConfig(BaseModel):
    """Parameters for a :class:`~ewstats.core.rate.RateAccumulator`.

    Give either ``decay_constant`` or ``half_life_millis``; with neither, the
    rate does not decay.
    """

    origin_time_millis: int = Field(gt=0)
    decay_constant: float | None = Field(default=None, ge=0.0, allow_inf_nan=False)
    half_life_millis: float | None = Field(default=None, gt=0.0, allow_inf_nan=False)

    @model_validator(mode="after")
    def _resolve_decay_constant(self) -> RateConfig:
        if self.decay_constant is not None and self.half_life_millis is not None:
            raise ValueError("give decay_constant or half_life_millis, not both")
        if self.half_life_millis is not None:
            self.decay_constant = decay_constant_for_half_life(self.half_life_millis)
        elif self.decay_constant is None:
            self.decay_constant = 0.0
        return self


class AverageConfig(BaseModel):
    """Parameters for an :class:`~ewstats.core.average.AverageAccumulator`.

    Exactly one of ``alpha`` or ``half_life_values`` is required.
    """

    alpha: float | None = Field(default=None, ge=0.0, le=1.0)
    half_life_values: float | None = Field(default=None, gt=0.0)

    @model_validator(mode="after")
    def _resolve_alpha(self) -> AverageConfig:
        if (self.alpha is None) == (self.half_life_values is None):
            raise ValueError("give exactly one of alpha or half_life_values")
        if self.half_life_values is not None:
            self.alpha = alpha_for_half_life(self.half_life_values)
        return self
