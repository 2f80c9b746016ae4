"""
Utility functions for ksgte.

This module contains numba helpers, parameter checks and synthetic data
generators used by the estimators and their tests.
"""

from .jit import conditional_njit, is_jit_enabled
from .data import (
    check_positive,
    create_coupled_gaussian_points,
    gaussian_transfer_entropy,
)

__all__ = [
    "conditional_njit",
    "is_jit_enabled",
    "check_positive",
    "create_coupled_gaussian_points",
    "gaussian_transfer_entropy",
]
