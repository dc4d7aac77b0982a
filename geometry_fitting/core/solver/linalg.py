"""geometry_fitting.core.solver.linalg

Narrow linear-algebra interfaces used by the fitting solvers.

The solvers only need two operations:
  - eigen-decomposition of a small symmetric matrix, eigenvalues ascending
  - solution of a square linear system that reports singularity instead of
    returning an arbitrary vector

Both are delegated to NumPy.
"""

from __future__ import annotations

import logging
from typing import Tuple

import numpy as np

from ..constants import EPS
from ..exceptions import SingularMatrixError

logger = logging.getLogger(__name__)


def symmetric_eigen(matrix: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Eigen-decomposition of a real symmetric matrix.

    Args:
        matrix: Symmetric (n x n) matrix

    Returns:
        (values, vectors) with eigenvalues sorted ascending and the matching
        orthonormal eigenvectors stored as the columns of ``vectors``
    """
    values, vectors = np.linalg.eigh(np.asarray(matrix, dtype=float))
    return values, vectors


def solve_linear(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Solve ``a @ x = b`` for a square matrix ``a``.

    The matrix is treated as singular when it is all zero, or when its
    smallest singular value is below ``EPS`` times the largest one.

    The relative test is stricter than only failing when an exact solve
    breaks down: nearly parallel systems are rejected too. For the
    intersection normal equations of two lines crossing at angle t the
    singular-value ratio is about t^2 / 4, so lines closer than roughly
    2e-4 rad are reported as singular.

    Raises:
        SingularMatrixError: If ``a`` is numerically singular
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)

    singular_values = np.linalg.svd(a, compute_uv=False)
    largest = singular_values[0] if singular_values.size else 0.0
    smallest = singular_values[-1] if singular_values.size else 0.0
    logger.debug("solve_linear: n=%d sigma_max=%.3e sigma_min=%.3e", a.shape[0], largest, smallest)

    if largest == 0.0 or smallest < EPS * largest:
        raise SingularMatrixError("Coefficient matrix is singular")

    try:
        return np.linalg.solve(a, b)
    except np.linalg.LinAlgError as exc:
        raise SingularMatrixError(f"Coefficient matrix is singular: {exc}") from exc
