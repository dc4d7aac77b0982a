"""geometry_fitting.core.solver.intersection

Least-squares intersection point of a set of lines.

For a line with unit direction u through point p, the squared distance of x
from the line is

    |P (x - p)|^2,   P = I - u u^T

P is the projector onto the orthogonal complement of u (symmetric,
idempotent). Summing over all lines and setting the gradient to zero gives
the normal equations

    (sum_i P_i) x = sum_i P_i p_i

which are solved directly. The system is singular when there are no lines
or when all lines are parallel.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

import numpy as np

from ..exceptions import DegenerateCaseError, SingularMatrixError
from ..models.line import Line
from .linalg import solve_linear

logger = logging.getLogger(__name__)


def _validate_lines(lines: Iterable[Line], dim: int) -> List[Line]:
    """Check the dimension argument and every line against it."""
    if isinstance(dim, bool) or not isinstance(dim, (int, np.integer)):
        raise ValueError(f"Dimension must be an integer, got {dim!r}")
    if dim < 1:
        raise ValueError(f"Dimension must be positive, got {dim}")

    lines = list(lines)
    for i, line in enumerate(lines):
        if not isinstance(line, Line):
            raise TypeError(f"Item {i} is not a Line: {line!r}")
        if line.dimension != dim:
            raise ValueError(f"Line {i} has dimension {line.dimension}, expected {dim}")
    return lines


def intersect(lines: Iterable[Line], dim: int) -> np.ndarray:
    """Find the point that best describes the intersection of a set of lines.

    Args:
        lines: Lines, all of dimension ``dim``
        dim: Dimensionality of the problem (e.g. 3 for 3D lines)

    Returns:
        Point (length ``dim``) minimising the sum of squared distances to the lines

    Raises:
        ValueError: If ``dim`` is invalid or does not match a line
        TypeError: If an item is not a Line
        DegenerateCaseError: If there are no lines or the system is singular
    """
    lines = _validate_lines(lines, dim)

    identity = np.eye(dim)
    a = np.zeros((dim, dim))
    b = np.zeros(dim)
    for line in lines:
        u = line.unit_direction
        projector = identity - np.outer(u, u)
        a += projector
        b += projector @ line.point

    try:
        x = solve_linear(a, b)
    except SingularMatrixError as exc:
        if not lines:
            raise DegenerateCaseError("No lines") from exc
        logger.debug("intersect: singular system for %d lines in %dD", len(lines), dim)
        raise DegenerateCaseError(
            "Intersection cannot be computed (coefficient matrix singular)"
        ) from exc

    logger.debug("intersect: %d lines in %dD -> %s", len(lines), dim, x)
    return x


def intersect_2d(lines: Iterable[Line]) -> np.ndarray:
    """Least-squares intersection of 2D lines. See :func:`intersect`."""
    return intersect(lines, 2)


def intersect_3d(lines: Iterable[Line]) -> np.ndarray:
    """Least-squares intersection of 3D lines. See :func:`intersect`."""
    return intersect(lines, 3)
