"""Tests for discrete-vs-continuous detection and equal-width binning."""

from __future__ import annotations

import numpy as np
import pytest

from histogram_mi.core_utils.validation import ConfigurationError, NonFiniteInputError
from histogram_mi.discretization import (
    discretize,
    discretize_equal_width,
    is_discrete,
    select_strategy,
)


class TestStrategySelection:
    """Tests for the discrete/continuous predicate."""

    def test_python_ints_are_discrete(self):
        assert is_discrete([1, 2, 3])
        assert select_strategy([1, 2, 3]) == "discrete"

    def test_numpy_integer_array_is_discrete(self):
        assert is_discrete(np.array([0, 5, -2], dtype=np.int32))

    def test_single_float_makes_sequence_continuous(self):
        assert not is_discrete([1, 2, 3.5])
        assert select_strategy([1, 2, 3.5]) == "equal_width"

    def test_integral_floats_are_continuous(self):
        """1.0 is a float, not an integer code."""
        assert not is_discrete([1.0, 2.0, 3.0])


class TestDiscretePath:
    """Integer data is returned unchanged regardless of bin count."""

    def test_integers_returned_unchanged(self):
        codes = discretize([7, -3, 7, 100], bins=2)
        np.testing.assert_array_equal(codes, [7, -3, 7, 100])

    def test_bins_ignored_for_integers(self):
        a = discretize([1, 2, 3, 4, 5], bins=1)
        b = discretize([1, 2, 3, 4, 5], bins=50)
        np.testing.assert_array_equal(a, b)


class TestEqualWidthPath:
    """Tests for equal-width binning of continuous data."""

    def test_codes_in_range(self):
        rng = np.random.default_rng(0)
        values = rng.normal(size=500)
        codes = discretize(values, bins=7)
        assert codes.min() == 0
        assert codes.max() == 6

    def test_maximum_lands_in_last_bin(self):
        codes = discretize_equal_width([0.0, 0.5, 1.0], bins=2)
        np.testing.assert_array_equal(codes, [0, 1, 1])

    def test_known_binning(self):
        # width = 0.25 over [0, 1]
        values = [0.0, 0.1, 0.3, 0.55, 0.8, 1.0]
        codes = discretize(values, bins=4)
        np.testing.assert_array_equal(codes, [0, 0, 1, 2, 3, 3])

    def test_zero_variance_maps_to_single_bin(self):
        codes = discretize([2.5, 2.5, 2.5], bins=10)
        np.testing.assert_array_equal(codes, [0, 0, 0])

    def test_single_bin(self):
        codes = discretize([0.1, 0.9, 0.5], bins=1)
        np.testing.assert_array_equal(codes, [0, 0, 0])

    def test_value_range_not_quantiles(self):
        """An outlier stretches the range so most values share bin 0."""
        codes = discretize([0.0, 0.1, 0.2, 0.3, 100.0], bins=10)
        np.testing.assert_array_equal(codes, [0, 0, 0, 0, 9])

    def test_empty_input_gives_empty_codes(self):
        assert discretize_equal_width([], bins=3).size == 0


class TestInvalidDiscretization:
    @pytest.mark.parametrize("bins", [0, -1])
    def test_non_positive_bins_rejected(self, bins):
        with pytest.raises(ConfigurationError):
            discretize([0.1, 0.2], bins=bins)

    def test_non_integer_bins_rejected(self):
        with pytest.raises(ConfigurationError):
            discretize([0.1, 0.2], bins=2.5)

    def test_nan_rejected(self):
        with pytest.raises(NonFiniteInputError):
            discretize([0.1, float("nan"), 0.3], bins=3)

    def test_strings_rejected(self):
        with pytest.raises(TypeError):
            discretize(["a", "b"], bins=3)


class TestExtremeRanges:
    """Codes stay inside [0, bins - 1] at the ends of the float range."""

    def test_range_overflowing_float(self):
        codes = discretize([-1e308, 0.0, 1e308], bins=10)
        np.testing.assert_array_equal(codes, [0, 5, 9])

    def test_subnormal_range(self):
        codes = discretize([0.0, 5e-324], bins=10)
        np.testing.assert_array_equal(codes, [0, 9])

    def test_codes_never_negative(self):
        values = np.array([-np.finfo(float).max, np.finfo(float).max, 1.0, -1.0])
        codes = discretize_equal_width(values, bins=4)
        assert codes.min() >= 0
        assert codes.max() <= 3


class TestLargeIntegers:
    """Python ints beyond int64 are still already-discrete codes."""

    def test_big_ints_are_discrete(self):
        assert is_discrete([1, 2**70])
        assert select_strategy([1, 2**70, -(2**80)]) == "discrete"

    def test_big_ints_returned_unchanged(self):
        codes = discretize([1, 2**70, 2**70 + 1], bins=2)
        assert codes.tolist() == [1, 2**70, 2**70 + 1]
