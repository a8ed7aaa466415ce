"""Tests for unit conversion functions."""

import math

import pytest

from coursecalc.utilities.conversion import MM_PER_UNIT, convert_unit, from_mm, to_mm
from coursecalc.utilities.types import LengthUnit


class TestRates:
    def test_rates(self):
        assert MM_PER_UNIT[LengthUnit.MM] == 1.0
        assert MM_PER_UNIT[LengthUnit.CM] == 10.0
        assert MM_PER_UNIT[LengthUnit.M] == 1000.0

    def test_rates_are_read_only(self):
        with pytest.raises(TypeError):
            MM_PER_UNIT[LengthUnit.MM] = 2.0  # type: ignore[index]


class TestConvertUnit:
    def test_mm_to_cm(self):
        assert convert_unit(1000, LengthUnit.MM, LengthUnit.CM) == 100.0

    def test_m_to_mm(self):
        assert convert_unit(1.2, LengthUnit.M, LengthUnit.MM) == 1200.0

    def test_cm_to_m(self):
        assert convert_unit(250, LengthUnit.CM, LengthUnit.M) == 2.5

    def test_same_unit(self):
        assert convert_unit(215.5, LengthUnit.MM, LengthUnit.MM) == 215.5

    def test_accepts_string_units(self):
        assert convert_unit(5, "cm", "mm") == 50.0

    def test_unknown_unit_raises(self):
        with pytest.raises(ValueError):
            convert_unit(5, "inch", "mm")

    def test_nan_returns_zero(self):
        assert convert_unit(math.nan, LengthUnit.MM, LengthUnit.CM) == 0.0

    def test_infinity_returns_zero(self):
        assert convert_unit(math.inf, LengthUnit.M, LengthUnit.MM) == 0.0

    def test_floating_point_noise_is_trimmed(self):
        """0.1 m + 0.2 m worth of mm would carry float noise without trimming."""
        assert convert_unit(0.1 + 0.2, LengthUnit.M, LengthUnit.MM) == 300.0

    def test_short_fraction_left_unrounded(self):
        assert convert_unit(1.23456, LengthUnit.CM, LengthUnit.CM) == 1.23456

    def test_long_fraction_rounded_to_eight_significant_digits(self):
        assert convert_unit(1, LengthUnit.MM, LengthUnit.M) == 0.001
        assert convert_unit(1234.56789, LengthUnit.MM, LengthUnit.M) == 1.2345679

    def test_small_value_keeps_precision(self):
        assert convert_unit(0.0123, LengthUnit.MM, LengthUnit.M) == pytest.approx(1.23e-5)


class TestRoundTrip:
    def test_mm_cm_mm(self):
        for x in [0.5, 1.0, 10.0, 215.0, 1007.5, 12345.678, 0.001]:
            in_cm = convert_unit(x, LengthUnit.MM, LengthUnit.CM)
            back = convert_unit(in_cm, LengthUnit.CM, LengthUnit.MM)
            assert back == pytest.approx(x, rel=1e-6)

    def test_mm_m_mm(self):
        for x in [1.0, 65.0, 999.99, 4321.5]:
            assert from_mm(to_mm(x, LengthUnit.M), LengthUnit.M) == pytest.approx(x, rel=1e-6)
