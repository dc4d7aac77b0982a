"""
Plane class for geometric fitting.

A plane is stored as a point lying on it and a normal vector. The normal
does not have to be unit length.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .line import _as_vector


@dataclass(frozen=True, eq=False)
class Plane:
    """
    Represents a plane in 3D space.

    Attributes:
        point: A point lying on the plane
        normal: Normal vector, non-zero
    """

    point: np.ndarray
    normal: np.ndarray

    def __post_init__(self):
        """Validate and freeze the plane data after initialization."""
        point = _as_vector(self.point, "point")
        normal = _as_vector(self.normal, "normal")

        if point.size != 3 or normal.size != 3:
            raise ValueError("Plane point and normal must both have 3 coordinates")
        if not np.any(normal):
            raise ValueError("Plane normal cannot be the zero vector")

        object.__setattr__(self, "point", point)
        object.__setattr__(self, "normal", normal)

    @property
    def unit_normal(self) -> np.ndarray:
        """Normal vector scaled to unit length."""
        return self.normal / np.linalg.norm(self.normal)

    def signed_distance(self, p) -> float:
        """Distance from ``p`` to the plane, positive on the side the normal points to."""
        return float(np.dot(np.asarray(p, dtype=float) - self.point, self.unit_normal))

    def distance(self, p) -> float:
        """Unsigned distance from ``p`` to the plane."""
        return abs(self.signed_distance(p))

    def project(self, p) -> np.ndarray:
        """Orthogonal projection of ``p`` onto the plane."""
        return np.asarray(p, dtype=float) - self.signed_distance(p) * self.unit_normal

    def __eq__(self, other) -> bool:
        """Planes are equal when their stored point and normal are equal."""
        if not isinstance(other, Plane):
            return NotImplemented
        return np.array_equal(self.point, other.point) and np.array_equal(self.normal, other.normal)

    def __hash__(self) -> int:
        return hash((tuple(self.point), tuple(self.normal)))

    def __repr__(self) -> str:
        """Return string representation of the plane."""
        return f"Plane(point={self.point.tolist()}, normal={self.normal.tolist()})"
