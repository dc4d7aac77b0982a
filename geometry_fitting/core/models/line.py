"""
Line class for geometric fitting.

Conventions:
- A line is stored as an anchor point and a direction vector
- The direction does not have to be unit length; use ``unit_direction``
- Any dimension >= 1 is accepted; fitting produces 2D and 3D lines
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


def _as_vector(value, name: str) -> np.ndarray:
    """Copy an array-like into a read-only 1-D float vector."""
    vec = np.array(value, dtype=float)
    if vec.ndim != 1 or vec.size == 0:
        raise ValueError(f"{name} must be a non-empty 1-D vector, got shape {vec.shape}")
    if not np.all(np.isfinite(vec)):
        raise ValueError(f"{name} must contain only finite values")
    vec.setflags(write=False)
    return vec


@dataclass(frozen=True, eq=False)
class Line:
    """
    Represents an infinite line through ``point`` along ``direction``.

    Attributes:
        point: A point lying on the line
        direction: Direction vector, non-zero, same length as ``point``
    """

    point: np.ndarray
    direction: np.ndarray

    def __post_init__(self):
        """Validate and freeze the line data after initialization."""
        point = _as_vector(self.point, "point")
        direction = _as_vector(self.direction, "direction")

        if point.shape != direction.shape:
            raise ValueError(
                f"point and direction dimensions differ: {point.size} != {direction.size}"
            )
        if not np.any(direction):
            raise ValueError("Line direction cannot be the zero vector")

        object.__setattr__(self, "point", point)
        object.__setattr__(self, "direction", direction)

    @classmethod
    def from_two_points(cls, first, second) -> "Line":
        """
        Create the line passing through two distinct points.

        Args:
            first: Anchor point of the new line
            second: Another point on the line

        Returns:
            New Line directed from ``first`` towards ``second``

        Raises:
            ValueError: If the points coincide
        """
        first = np.asarray(first, dtype=float)
        second = np.asarray(second, dtype=float)
        if np.array_equal(first, second):
            raise ValueError("Cannot create a line from two coincident points")
        return cls(first, second - first)

    @property
    def dimension(self) -> int:
        """Number of coordinates of the space the line lives in."""
        return int(self.point.size)

    @property
    def unit_direction(self) -> np.ndarray:
        """Direction vector scaled to unit length."""
        return self.direction / np.linalg.norm(self.direction)

    def point_at(self, t: float) -> np.ndarray:
        """Return ``point + t * direction``."""
        return self.point + t * self.direction

    def project(self, p) -> np.ndarray:
        """Orthogonal projection of ``p`` onto the line."""
        u = self.unit_direction
        offset = np.asarray(p, dtype=float) - self.point
        return self.point + np.dot(offset, u) * u

    def distance(self, p) -> float:
        """Perpendicular distance from ``p`` to the line."""
        return float(np.linalg.norm(np.asarray(p, dtype=float) - self.project(p)))

    def __eq__(self, other) -> bool:
        """Lines are equal when their stored point and direction are equal."""
        if not isinstance(other, Line):
            return NotImplemented
        return (
            np.array_equal(self.point, other.point)
            and np.array_equal(self.direction, other.direction)
        )

    def __hash__(self) -> int:
        return hash((tuple(self.point), tuple(self.direction)))

    def __repr__(self) -> str:
        """Return string representation of the line."""
        return f"Line(point={self.point.tolist()}, direction={self.direction.tolist()})"
