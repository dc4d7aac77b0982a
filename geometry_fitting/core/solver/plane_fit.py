"""geometry_fitting.core.solver.plane_fit

Least-squares plane fitting for 3D point sets.

The normal of the best plane is the direction of least spread: the
eigenvector of the centered scatter matrix belonging to its smallest
eigenvalue. The plane is only determined when the point set spans two
independent directions, i.e. when the middle eigenvalue is non-zero.
"""

from __future__ import annotations

import logging

from ..constants import EPS
from ..exceptions import DegenerateCaseError
from ..models.plane import Plane
from .linalg import symmetric_eigen
from .scatter import as_point_array, centroid, scatter_matrix

logger = logging.getLogger(__name__)


def fit_plane_3d(points) -> Plane:
    """Find the plane that best fits a 3D point set.

    Args:
        points: Collection of 3D points

    Returns:
        Plane through the centroid with a unit normal

    Raises:
        DegenerateCaseError: If the set is empty or the points are collinear
        ValueError: If the points are not 3D
    """
    pts = as_point_array(points, 3)
    if pts.shape[0] == 0:
        logger.debug("fit_plane_3d: empty point set")
        raise DegenerateCaseError("No points")

    center = centroid(pts)
    values, vectors = symmetric_eigen(scatter_matrix(pts, center))
    logger.debug("fit_plane_3d: n=%d eigenvalues=%s", pts.shape[0], values)

    if abs(values[1]) < EPS:
        logger.debug("fit_plane_3d: middle eigenvalue below EPS, points collinear")
        raise DegenerateCaseError("Points are collinear, cannot fit plane")

    return Plane(center, vectors[:, 0])
