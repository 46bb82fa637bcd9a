"""
Shared compute infrastructure for pytrendfit.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Precision tiers and the conditioning threshold
"""

from pytrendfit.core.compute.timing import Timer, timed
from pytrendfit.core.compute.tolerances import (
    ToleranceTier,
    CONDITION_THRESHOLD,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "CONDITION_THRESHOLD",
    "select_tolerance",
]
