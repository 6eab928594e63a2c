"""
Validation Framework for Geodesic Shapes.

This module provides geometric consistency checks.
"""

from validation.geometry_checks import (
    GeometryConsistencyChecker,
    ValidationResult,
)

__all__ = [
    "GeometryConsistencyChecker",
    "ValidationResult",
]
