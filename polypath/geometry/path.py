"""Path: an ordered, mutable sequence of points treated as a polyline."""

import math
from typing import Callable, Iterable, Iterator, List, Optional, TextIO, Tuple, Union

from .. import polyline
from ..errors import PathIndexError
from .simplify import douglas_peucker_mask
from .types import Bound, Line, Point


class Path:
    """A polyline built from an ordered list of points.

    Point order is significant. Repeated and coincident points are legal,
    and an empty path is valid. Mutating methods return the path so calls
    can be chained::

        Path.decode(encoded).reduce(0.0001).encode()
    """

    def __init__(self, *points: Point):
        self._points: List[Point] = list(points)

    @classmethod
    def from_coords(cls, coords: Iterable[Tuple[float, float]]) -> "Path":
        return cls(*(Point(float(x), float(y)) for x, y in coords))

    @classmethod
    def decode(
        cls,
        encoded: Union[str, bytes],
        factor: float = polyline.DEFAULT_FACTOR,
    ) -> "Path":
        """Build a path from an encoded polyline string.

        Raises:
            PolylineDecodeError: If ``encoded`` is malformed.
        """
        return cls.from_coords(polyline.decode(encoded, factor))

    def encode(self, factor: float = polyline.DEFAULT_FACTOR) -> str:
        """Encode the path as a polyline string (lat, lng field order)."""
        return polyline.encode(self._points, factor)

    @property
    def points(self) -> List[Point]:
        """A copy of the point list."""
        return list(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(list(self._points))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._points == other._points

    def __repr__(self) -> str:
        return f"Path({len(self._points)} points)"

    def length(self) -> int:
        return len(self._points)

    def clone(self) -> "Path":
        return Path(*self._points)

    # Mutation

    def push(self, point: Point) -> "Path":
        self._points.append(point)
        return self

    def pop(self) -> Optional[Point]:
        """Remove and return the last point, or None if the path is empty."""
        if not self._points:
            return None
        return self._points.pop()

    def get_at(self, index: int) -> Optional[Point]:
        """Return the point at ``index``, or None if there is none."""
        if index < 0 or index >= len(self._points):
            return None
        return self._points[index]

    def set_at(self, index: int, point: Point) -> "Path":
        if index < 0 or index >= len(self._points):
            raise PathIndexError("set", index, len(self._points))
        self._points[index] = point
        return self

    def insert_at(self, index: int, point: Point) -> "Path":
        """Insert ``point`` before ``index``. ``index == length`` appends."""
        if index < 0 or index > len(self._points):
            raise PathIndexError("insert", index, len(self._points))
        self._points.insert(index, point)
        return self

    def remove_at(self, index: int) -> "Path":
        if index < 0 or index >= len(self._points):
            raise PathIndexError("remove", index, len(self._points))
        del self._points[index]
        return self

    def transform(self, projection: Callable[[Point], Point]) -> "Path":
        """Replace every point, in order, with ``projection(point)``."""
        self._points = [projection(p) for p in self._points]
        return self

    def reduce(self, threshold: float) -> "Path":
        """Simplify the path in place using Douglas-Peucker.

        No dropped point lies farther than ``threshold`` from the segment
        that replaces it. The first and last points are always kept.
        """
        if len(self._points) < 2:
            return self

        keep = douglas_peucker_mask(self._points, threshold)
        self._points = [p for p, k in zip(self._points, keep) if k]
        return self

    # Queries

    def _segments(self) -> Iterator[Line]:
        for i in range(len(self._points) - 1):
            yield Line(self._points[i], self._points[i + 1])

    def bounds(self) -> Bound:
        """Bounding rectangle of the points. Empty paths give a zero bound."""
        if not self._points:
            return Bound.new(0, 0, 0, 0)

        xs = [p.x for p in self._points]
        ys = [p.y for p in self._points]
        return Bound.new(max(xs), min(xs), max(ys), min(ys))

    def total_distance(self) -> float:
        """Sum of planar distances between consecutive points."""
        return sum(line.length() for line in self._segments())

    def geo_total_distance(self, haversine: bool = False) -> float:
        """Sum of great-circle distances, in meters, between consecutive points."""
        return sum(line.geo_length(haversine) for line in self._segments())

    def distance_from(self, point: Point) -> float:
        """Minimum distance from ``point`` to any segment of the path.

        Returns infinity when the path has fewer than two points.
        """
        return min(
            (line.distance_from(point) for line in self._segments()),
            default=math.inf,
        )

    # Export

    def write_off_file(self, sink: TextIO) -> None:
        """Write the points in Object File Format to ``sink``.

        Useful for viewing in MeshLab and similar tools. The caller owns
        the sink and is responsible for closing it.
        """
        sink.write("OFF\n")
        sink.write(f"{len(self._points)} 0 0\n")
        for p in self._points:
            sink.write(f"{p.x:f} {p.y:f} 0\n")
