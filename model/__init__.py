# model/__init__.py

"""
Cube calculus value types: ternary cubes representing product terms and
the shape errors raised when cubes of different lengths are combined.
These types carry no minimization logic.
"""

from .cube import Cube, DONT_CARE
from .exceptions import ShapeMismatchError

__all__ = [
    "Cube",
    "DONT_CARE",
    "ShapeMismatchError",
]
