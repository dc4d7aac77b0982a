"""
Geometry Fitting - closed-form least-squares primitives

Best-fit lines through 2D/3D point sets, best-fit planes through 3D point
sets, and the least-squares intersection point of a set of lines.

Conventions:
- Points: any array-like of 2 or 3 floats; results are NumPy arrays
- Criterion: sum of squared perpendicular distances
- Fitted lines and planes are anchored at the centroid of the input
- Threshold: a single EPS = 1e-8 for every floating-point comparison
- Degenerate input raises DegenerateCaseError, never a best-effort result
"""

__version__ = "1.0.0"

from .core import (
    EPS,
    DegenerateCaseError,
    SingularMatrixError,
    Line,
    Plane,
    fit_line_2d,
    fit_line_3d,
    fit_plane_3d,
    intersect,
    intersect_2d,
    intersect_3d,
)

__all__ = [
    # Version
    "__version__",

    # Errors
    "DegenerateCaseError",
    "SingularMatrixError",

    # Models
    "Line",
    "Plane",

    # Fitting
    "fit_line_2d",
    "fit_line_3d",
    "fit_plane_3d",

    # Intersection
    "intersect",
    "intersect_2d",
    "intersect_3d",

    "EPS",
]
