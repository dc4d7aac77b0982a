"""geometry_fitting.core.solver.scatter

Shared sufficient statistics for the point-set fitters.

Given points p_1..p_n with centroid c, the scatter matrix is

    S = sum_i (p_i - c)(p_i - c)^T

i.e. the matrix of centered second moments. Its eigenvectors are the
principal directions of the point set: the one with the largest eigenvalue
is the axis of greatest spread, the one with the smallest eigenvalue the
axis of least spread.
"""

from __future__ import annotations

import numpy as np


def as_point_array(points, dim: int) -> np.ndarray:
    """Copy a point collection into an (n, dim) float array.

    Args:
        points: Sequence/iterable of array-likes with ``dim`` coordinates each,
            or an array of shape (n, dim)
        dim: Expected number of coordinates per point

    Returns:
        New array of shape (n, dim); the input is not modified

    Raises:
        ValueError: If a point does not have ``dim`` coordinates or a
            coordinate is not finite
    """
    if not isinstance(points, np.ndarray):
        points = list(points)
    arr = np.array(points, dtype=float)

    if arr.ndim == 1 and arr.shape[0] == 0:
        return arr.reshape(0, dim)
    if arr.ndim != 2 or arr.shape[1] != dim:
        raise ValueError(f"Expected a collection of {dim}D points, got array of shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise ValueError("Point coordinates must contain only finite values")
    return arr


def centroid(points: np.ndarray) -> np.ndarray:
    """Arithmetic mean of the rows of ``points`` (must be non-empty)."""
    return points.mean(axis=0)


def scatter_matrix(points: np.ndarray, center: np.ndarray) -> np.ndarray:
    """Symmetric matrix of second moments of ``points`` about ``center``."""
    centered = points - center
    s = centered.T @ centered
    # Exact symmetry for the eigensolver
    return 0.5 * (s + s.T)
