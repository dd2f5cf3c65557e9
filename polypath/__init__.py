"""polypath: polyline paths with simplification and compact text encoding."""

__version__ = "0.1.0"

from .errors import PolypathError, PathIndexError, PolylineDecodeError
from .geometry import Point, Line, Bound, Path
from .clustering import Cluster

__all__ = [
    "Point",
    "Line",
    "Bound",
    "Path",
    "Cluster",
    "PolypathError",
    "PathIndexError",
    "PolylineDecodeError",
]
