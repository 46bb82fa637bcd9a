"""
Trend backends.

Available backends:
    CPUClosedFormBackend: CPU reference implementation of the closed-form estimator
"""

from pytrendfit.trend.backends.cpu import CPUClosedFormBackend

__all__ = [
    "CPUClosedFormBackend",
]
