"""Tests for the decay weight function and half-life conversions."""

import math

import pytest

from ewstats import (
    InvalidArgument,
    alpha_for_half_life,
    decay_constant_for_half_life,
    decay_weight,
    half_life_for_decay_constant,
)
from ewstats.core.decay import DIRECT_THRESHOLD, EXPM1_THRESHOLD


# ------------------------------------------------------------------
# decay_weight
# ------------------------------------------------------------------


class TestDecayWeight:
    def test_zero_decay_constant_is_elapsed(self):
        assert decay_weight(0.0, 1234.0) == 1234.0
        assert decay_weight(0.0, 2_000_000) == 2_000_000

    def test_zero_elapsed_is_zero(self):
        assert decay_weight(1.0e-6, 0) == 0.0
        assert decay_weight(0.0, 0) == 0.0

    def test_direct_tier(self):
        assert decay_weight(1.0e-3, 1000) == pytest.approx((1.0 - math.exp(-1.0)) / 1.0e-3)

    def test_expm1_tier(self):
        assert decay_weight(1.0e-6, 1000) == pytest.approx(-math.expm1(-1.0e-3) / 1.0e-6, rel=1.0e-14)

    def test_taylor_tier(self):
        result = decay_weight(1.0e-15, 1000)
        assert result == pytest.approx(1000 * (1.0 - 0.5 * 1.0e-12), rel=1.0e-14)
        assert result == pytest.approx(-math.expm1(-1.0e-12) / 1.0e-15, rel=1.0e-14)

    def test_naive_formula_would_lose_precision(self):
        """The direct formula is badly off for tiny products; the tiers are not."""
        decay_constant, elapsed = 1.0e-14, 1.0
        naive = (1.0 - math.exp(-decay_constant * elapsed)) / decay_constant
        assert naive != pytest.approx(elapsed, rel=1.0e-6)
        assert decay_weight(decay_constant, elapsed) == pytest.approx(elapsed, rel=1.0e-12)

    @pytest.mark.parametrize("x", [
        EXPM1_THRESHOLD * 0.999,
        EXPM1_THRESHOLD,
        EXPM1_THRESHOLD * 1.001,
        1.0e-6,
        DIRECT_THRESHOLD * 0.999,
        DIRECT_THRESHOLD,
        DIRECT_THRESHOLD * 1.001,
        0.5,
        5.0,
        50.0,
    ])
    def test_tiers_agree_with_expm1(self, x: float):
        decay_constant = 1.0e-6
        elapsed = x / decay_constant
        assert decay_weight(decay_constant, elapsed) == pytest.approx(
            -math.expm1(-x) / decay_constant, rel=1.0e-12
        )

    def test_bounded_by_elapsed_and_inverse_decay(self):
        decay_constant = 1.0e-4
        for elapsed in [1, 10, 1000, 100_000, 10_000_000]:
            w = decay_weight(decay_constant, elapsed)
            assert w <= elapsed
            assert w <= 1.0 / decay_constant

    def test_increases_with_elapsed(self):
        weights = [decay_weight(1.0e-4, t) for t in (1, 100, 10_000, 1_000_000)]
        assert all(weights[i] < weights[i + 1] for i in range(len(weights) - 1))

    def test_saturates_for_large_elapsed(self):
        assert decay_weight(1.0e-3, 1.0e9) == pytest.approx(1000.0)


# ------------------------------------------------------------------
# Half-life conversions
# ------------------------------------------------------------------


class TestHalfLife:
    def test_decay_constant_for_half_life(self):
        decay_constant = decay_constant_for_half_life(1000.0)
        assert decay_constant == pytest.approx(math.log(2.0) / 1000.0)
        assert math.exp(-decay_constant * 1000.0) == pytest.approx(0.5)

    def test_half_life_round_trip(self):
        assert half_life_for_decay_constant(decay_constant_for_half_life(60_000.0)) == pytest.approx(60_000.0)

    def test_zero_decay_has_infinite_half_life(self):
        assert half_life_for_decay_constant(0.0) == math.inf

    @pytest.mark.parametrize("bad", [0.0, -1.0, math.nan])
    def test_non_positive_half_life_raises(self, bad: float):
        with pytest.raises(InvalidArgument):
            decay_constant_for_half_life(bad)

    def test_vanishing_half_life_raises(self):
        # ln(2) / 1e-320 overflows to inf
        with pytest.raises(InvalidArgument):
            decay_constant_for_half_life(1.0e-320)

    def test_negative_decay_constant_raises(self):
        with pytest.raises(InvalidArgument):
            half_life_for_decay_constant(-1.0)

    def test_alpha_for_half_life_of_one(self):
        assert alpha_for_half_life(1.0) == pytest.approx(0.5)

    @pytest.mark.parametrize("half_life", [0.5, 2.0, 10.0, 1000.0])
    def test_alpha_halves_weight_after_half_life(self, half_life: float):
        alpha = alpha_for_half_life(half_life)
        assert 0.0 < alpha < 1.0
        assert (1.0 - alpha) ** half_life == pytest.approx(0.5)

    @pytest.mark.parametrize("bad", [0.0, -3.0])
    def test_alpha_for_non_positive_half_life_raises(self, bad: float):
        with pytest.raises(InvalidArgument):
            alpha_for_half_life(bad)
