"""
Generic result container for pytrendfit computations.

The Result class is the envelope every backend returns. It carries timing,
warnings and version provenance alongside the domain payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, sums, diagnostics)
    - timing is optional (don't burden unit tests)
    - provenance records library versions for reproducibility
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Version metadata attached to every result unless overridden."""
    from pytrendfit import __version__
    return {
        'pytrendfit_version': __version__,
        'numpy_version': np.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for trend computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (intercept, slope, ...)
        info: Structured metadata (method, sums)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions that produced the result

    Examples:
        >>> Result(
        ...     params=TrendParams(intercept=2.0, slope=2.0, ...),
        ...     info={'method': 'closed_form'},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_closed_form'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
