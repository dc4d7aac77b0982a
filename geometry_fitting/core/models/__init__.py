"""
Geometric value objects used as fitting results and intersection inputs.

- Line: anchor point + direction, any dimension
- Plane: anchor point + normal, 3D
"""

from .line import Line
from .plane import Plane

__all__ = [
    "Line",
    "Plane",
]
