"""
Core module for geometric fitting.

This module contains the value objects, the fitting solvers and the error
types. It depends only on NumPy.
"""

from .constants import EPS
from .exceptions import DegenerateCaseError, SingularMatrixError
from .models import Line, Plane
from .solver import (
    fit_line_2d,
    fit_line_3d,
    fit_plane_3d,
    intersect,
    intersect_2d,
    intersect_3d,
)

__all__ = [
    # Constants
    "EPS",

    # Errors
    "DegenerateCaseError",
    "SingularMatrixError",

    # Models
    "Line",
    "Plane",

    # Solvers
    "fit_line_2d",
    "fit_line_3d",
    "fit_plane_3d",
    "intersect",
    "intersect_2d",
    "intersect_3d",
]
