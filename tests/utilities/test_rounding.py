"""Tests for half-up rounding helpers."""

import math

from coursecalc.utilities.rounding import (
    fraction_digits,
    round_half_up,
    round_to_half,
    round_to_hundredths,
    trim_precision,
)


class TestRoundHalfUp:
    def test_rounds_down_below_half(self):
        assert round_half_up(13.47) == 13.0

    def test_rounds_up_above_half(self):
        assert round_half_up(8.977) == 9.0

    def test_ties_go_up_not_to_even(self):
        assert round_half_up(2.5) == 3.0
        assert round_half_up(4.5) == 5.0

    def test_negative_ties_go_toward_positive_infinity(self):
        assert round_half_up(-0.5) == 0.0
        assert round_half_up(-1.5) == -1.0

    def test_largest_float_below_half_rounds_down(self):
        """x + 0.5 rounds up to 1.0 in binary; the rounding must not."""
        assert round_half_up(0.49999999999999994) == 0.0

    def test_huge_values_are_already_whole(self):
        assert round_half_up(1e300) == 1e300


class TestRoundToHalf:
    def test_nearest_half(self):
        assert round_to_half(4.4888) == 4.5
        assert round_to_half(4.2) == 4.0
        assert round_to_half(4.8) == 5.0

    def test_quarter_ties_go_up(self):
        assert round_to_half(4.25) == 4.5
        assert round_to_half(4.75) == 5.0


class TestRoundToHundredths:
    def test_plain(self):
        assert round_to_hundredths(1007.5) == 1007.5
        assert round_to_hundredths(12.3456) == 12.35

    def test_exact_tie_rounds_up(self):
        assert round_to_hundredths(1007.125) == 1007.13

    def test_uses_exact_binary_value(self):
        """1.005 is stored just below 1.005, so it rounds down."""
        assert round_to_hundredths(1.005) == 1.0

    def test_values_beyond_default_decimal_precision(self):
        assert round_to_hundredths(1e26) == 1e26
        assert round_to_hundredths(1.7e308) == 1.7e308

    def test_non_finite_passes_through(self):
        assert round_to_hundredths(math.inf) == math.inf
        assert math.isnan(round_to_hundredths(math.nan))


class TestTrimPrecision:
    def test_fraction_digits(self):
        assert fraction_digits(100.0) == 1
        assert fraction_digits(1.23456) == 5
        assert fraction_digits(1.5e-05) == 6
        assert fraction_digits(1e20) == 0

    def test_short_values_untouched(self):
        assert trim_precision(1.23456) == 1.23456

    def test_noise_removed(self):
        assert trim_precision(0.30000000000000004) == 0.3
