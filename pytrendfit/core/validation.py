"""
Input validation utilities for pytrendfit.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pytrendfit.core.exceptions import (
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    EmptyInputError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Rejects inputs that result in object dtype (mixed types or
    non-numeric data) and non-numeric dtypes such as strings.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    # All arithmetic is done in double precision
    return result.astype(np.float64, copy=False)


def check_series(array: NDArray[np.floating[Any]], name: str) -> NDArray[np.floating[Any]]:
    """
    Verify array is a one-dimensional series.

    An (n, 1) column vector is flattened; anything else that is not 1D
    is rejected. A 0-d scalar is not a series.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Returns:
        The 1D array

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim == 2 and array.shape[1] == 1:
        array = array.ravel()
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D series, got {array.ndim}D with shape {array.shape}"
        )
    return array


def check_paired(
    x: NDArray[np.floating[Any]],
    y: NDArray[np.floating[Any]],
    names: tuple[str, str] = ('x', 'y'),
) -> None:
    """
    Verify two series can be consumed pairwise by position.

    Args:
        x: Period series
        y: Observation series
        names: Parameter names for error messages

    Raises:
        ShapeMismatchError: If the lengths differ
        EmptyInputError: If both series are empty
    """
    nx, ny = x.shape[0], y.shape[0]
    if nx != ny:
        raise ShapeMismatchError(
            f"Inconsistent lengths: {names[0]}={nx}, {names[1]}={ny}",
            x_length=nx,
            y_length=ny,
        )
    if nx == 0:
        raise EmptyInputError(
            f"{names[0]} and {names[1]} are empty; at least one pair is required"
        )


def check_non_negative_int(value: Any, name: str) -> int:
    """
    Verify value is an integer >= 0.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Returns:
        The value as a Python int

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected non-negative integer, got {type(value).__name__} {value!r}"
        )
    if value < 0:
        raise ValidationError(f"{name}: expected non-negative integer, got {value}")
    return int(value)
