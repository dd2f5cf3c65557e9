"""Geometry types and algorithms for polypath."""

from .types import Point, Line, Bound
from .path import Path
from .simplify import (
    douglas_peucker,
    douglas_peucker_mask,
)

__all__ = [
    "Point",
    "Line",
    "Bound",
    "Path",
    "douglas_peucker",
    "douglas_peucker_mask",
]
