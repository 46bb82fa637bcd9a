"""
Exception hierarchy for pytrendfit.

All exceptions inherit from PyTrendfitError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages state the actual values that were rejected
    - Only fit() raises; metrics surface NaN/inf instead
"""


class PyTrendfitError(Exception):
    """Base exception for all pytrendfit errors."""
    pass


class ValidationError(PyTrendfitError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when a series is not one-dimensional.
    """
    pass


class ShapeMismatchError(DimensionError):
    """
    The period and observation series cannot be paired.

    Raised by fit() when x and y differ in length, or are empty.

    Attributes:
        x_length: Number of periods supplied, if known
        y_length: Number of observations supplied, if known
    """

    def __init__(
        self,
        message: str,
        x_length: int | None = None,
        y_length: int | None = None,
    ):
        super().__init__(message)
        self.x_length = x_length
        self.y_length = y_length


class EmptyInputError(ShapeMismatchError):
    """
    Both series are empty.

    A ShapeMismatchError, so handlers written against the shape error
    also see empty input.
    """

    def __init__(self, message: str):
        super().__init__(message, x_length=0, y_length=0)


class NumericalError(PyTrendfitError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateInputError(NumericalError):
    """
    The least-squares denominator n·Σx² − (Σx)² is exactly zero.

    Happens when every period value is the same, so the slope is undefined.

    Attributes:
        denominator: The computed denominator (0.0)
        n_observations: Number of (x, y) pairs
    """

    def __init__(
        self,
        message: str,
        denominator: float | None = None,
        n_observations: int | None = None,
    ):
        super().__init__(message)
        self.denominator = denominator
        self.n_observations = n_observations
