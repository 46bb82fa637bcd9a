"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object rejection
    - check_series: 1D enforcement, column-vector flattening
    - check_paired: length matching, empty detection
    - check_non_negative_int: horizon-style integer arguments
"""

import numpy as np
import pytest

from pytrendfit.core.exceptions import (
    DimensionError,
    EmptyInputError,
    ShapeMismatchError,
    ValidationError,
)
from pytrendfit.core.validation import (
    check_array,
    check_non_negative_int,
    check_paired,
    check_series,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_int_array_promoted_to_float(self):
        result = check_array(np.array([1, 2, 3], dtype=np.int32), "x")
        assert result.dtype == np.float64

    def test_float32_promoted_to_float64(self):
        result = check_array(np.array([1.5, 2.5], dtype=np.float32), "x")
        assert result.dtype == np.float64

    def test_tuple_accepted(self):
        result = check_array((0.0, 1.0), "x")
        np.testing.assert_array_equal(result, [0.0, 1.0])

    def test_string_rejected(self):
        with pytest.raises(ValidationError, match="y: non-numeric dtype"):
            check_array(["a", "b"], "y")

    def test_mixed_types_rejected(self):
        with pytest.raises(ValidationError, match="x:"):
            check_array([1.0, "two", None], "x")

    def test_ragged_rejected(self):
        with pytest.raises(ValidationError, match="x:"):
            check_array([[1.0, 2.0], [3.0]], "x")

    def test_nan_allowed(self):
        """Non-finite values are not a validation concern."""
        result = check_array([1.0, np.nan, np.inf], "x")
        assert np.isnan(result[1])
        assert np.isinf(result[2])


# ═══════════════════════════════════════════════════════════════════════
# check_series
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSeries:

    def test_1d_passthrough(self):
        arr = np.array([1.0, 2.0, 3.0])
        assert check_series(arr, "x") is arr

    def test_column_vector_flattened(self):
        arr = np.array([[1.0], [2.0], [3.0]])
        result = check_series(arr, "x")
        assert result.shape == (3,)

    def test_matrix_rejected(self):
        with pytest.raises(DimensionError, match="x: expected 1D series, got 2D"):
            check_series(np.zeros((3, 2)), "x")

    def test_scalar_rejected(self):
        with pytest.raises(DimensionError, match="got 0D"):
            check_series(np.asarray(5.0), "y")


# ═══════════════════════════════════════════════════════════════════════
# check_paired
# ═══════════════════════════════════════════════════════════════════════


class TestCheckPaired:

    def test_equal_lengths_pass(self):
        check_paired(np.zeros(4), np.ones(4))

    def test_length_mismatch(self):
        with pytest.raises(ShapeMismatchError, match="x=3, y=4") as exc_info:
            check_paired(np.zeros(3), np.zeros(4))
        assert exc_info.value.x_length == 3
        assert exc_info.value.y_length == 4
        assert not isinstance(exc_info.value, EmptyInputError)

    def test_one_side_empty_is_mismatch(self):
        with pytest.raises(ShapeMismatchError) as exc_info:
            check_paired(np.zeros(0), np.zeros(2))
        assert not isinstance(exc_info.value, EmptyInputError)

    def test_both_empty(self):
        with pytest.raises(EmptyInputError, match="empty"):
            check_paired(np.zeros(0), np.zeros(0))

    def test_custom_names(self):
        with pytest.raises(ShapeMismatchError, match="periods=1, values=2"):
            check_paired(np.zeros(1), np.zeros(2), names=("periods", "values"))


# ═══════════════════════════════════════════════════════════════════════
# check_non_negative_int
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNonNegativeInt:

    @pytest.mark.parametrize("value", [0, 1, 12, np.int64(3)])
    def test_accepts(self, value):
        assert check_non_negative_int(value, "horizon") == int(value)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="horizon: expected non-negative integer, got -1"):
            check_non_negative_int(-1, "horizon")

    @pytest.mark.parametrize("value", [1.5, "3", True, None])
    def test_non_int_rejected(self, value):
        with pytest.raises(ValidationError, match="horizon"):
            check_non_negative_int(value, "horizon")
