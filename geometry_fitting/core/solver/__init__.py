"""geometry_fitting.core.solver

Closed-form fitting and intersection solvers.
"""

from .line_fit import fit_line_2d, fit_line_3d
from .plane_fit import fit_plane_3d
from .intersection import intersect, intersect_2d, intersect_3d

__all__ = [
    "fit_line_2d",
    "fit_line_3d",
    "fit_plane_3d",
    "intersect",
    "intersect_2d",
    "intersect_3d",
]
