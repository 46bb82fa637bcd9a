"""
Core infrastructure for pytrendfit.

Shared abstractions and utilities used by the trend module.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from pytrendfit.core.protocols import Backend
from pytrendfit.core.result import Result
from pytrendfit.core.exceptions import (
    PyTrendfitError,
    ValidationError,
    DimensionError,
    ShapeMismatchError,
    EmptyInputError,
    NumericalError,
    DegenerateInputError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyTrendfitError",
    "ValidationError",
    "DimensionError",
    "ShapeMismatchError",
    "EmptyInputError",
    "NumericalError",
    "DegenerateInputError",
]
