"""geometry_fitting.core.solver.line_fit

Least-squares line fitting for 2D and 3D point sets.

Both fitters minimise the sum of squared perpendicular distances. After
moving the centroid to the origin the best direction is the eigenvector of
the scatter matrix belonging to its largest eigenvalue.

2D: the scatter matrix is

    ( xx  xy )
    ( xy  yy )

and the larger eigenvalue has the closed form

    c = 1/2 * (xx + yy + sqrt((xx - yy)^2 + 4 xy^2))

If xy != 0 the eigenvector can be written with u = 1 as

    (1, (c - xx) / xy) = (1, (yy - xx + root) / (2 xy))

If xy == 0 the matrix is diagonal: the larger of xx, yy wins, and when they
are equal every direction is an eigenvector and the fit is ambiguous.

3D: the 3x3 eigenproblem is handed to ``symmetric_eigen``.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from ..constants import EPS
from ..exceptions import DegenerateCaseError
from ..models.line import Line
from .linalg import symmetric_eigen
from .scatter import as_point_array, centroid, scatter_matrix

logger = logging.getLogger(__name__)


def _require_two_points(pts: np.ndarray) -> None:
    if pts.shape[0] < 2:
        logger.debug("line fit: %d point(s), not enough", pts.shape[0])
        raise DegenerateCaseError("Not enough points, at least 2 are needed for line fitting")


def fit_line_2d(points) -> Line:
    """Find the 2D line that best fits a point set.

    Args:
        points: Collection of 2D points

    Returns:
        Line through the centroid; the direction is not normalised

    Raises:
        DegenerateCaseError: If there are fewer than 2 points or no direction
            is principal (coincident points, square, equilateral triangle...)
        ValueError: If the points are not 2D
    """
    pts = as_point_array(points, 2)
    _require_two_points(pts)

    center = centroid(pts)
    s = scatter_matrix(pts, center)
    xx, xy, yy = s[0, 0], s[0, 1], s[1, 1]
    logger.debug("fit_line_2d: n=%d xx=%.6g xy=%.6g yy=%.6g", pts.shape[0], xx, xy, yy)

    if abs(xy) > EPS:
        root = math.sqrt((xx - yy) * (xx - yy) + 4.0 * xy * xy)
        direction = (1.0, (yy - xx + root) / (2.0 * xy))
    elif yy > xx + EPS:
        direction = (0.0, 1.0)
    elif yy < xx - EPS:
        direction = (1.0, 0.0)
    else:
        logger.debug("fit_line_2d: xx == yy and xy == 0, no principal direction")
        raise DegenerateCaseError("No principal direction in point set")

    return Line(center, direction)


def fit_line_3d(points) -> Line:
    """Find the 3D line that best fits a point set.

    Args:
        points: Collection of 3D points

    Returns:
        Line through the centroid with a unit direction

    Raises:
        DegenerateCaseError: If there are fewer than 2 points, all points
            coincide, or the two strongest directions are equally strong
        ValueError: If the points are not 3D
    """
    pts = as_point_array(points, 3)
    _require_two_points(pts)

    center = centroid(pts)
    values, vectors = symmetric_eigen(scatter_matrix(pts, center))
    logger.debug("fit_line_3d: n=%d eigenvalues=%s", pts.shape[0], values)

    if values[2] < EPS:
        logger.debug("fit_line_3d: largest eigenvalue below EPS, points coincide")
        raise DegenerateCaseError("Points are at the same position, cannot fit line")
    if values[1] > values[2] - EPS:
        logger.debug("fit_line_3d: two largest eigenvalues equal, direction ambiguous")
        raise DegenerateCaseError("The two main directions are equally strong, line is ambiguous")

    return Line(center, vectors[:, 2])
