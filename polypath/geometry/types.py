"""Type definitions for polypath geometry."""

import math
from dataclasses import dataclass, replace
from typing import Iterable

EARTH_RADIUS = 6378137.0  # meters
METERS_PER_DEGREE_LAT = 111131.75


@dataclass(frozen=True)
class Point:
    """2D point. For geographic data x is longitude and y is latitude."""
    x: float
    y: float

    def __iter__(self):
        yield self.x
        yield self.y

    @property
    def lng(self) -> float:
        return self.x

    @property
    def lat(self) -> float:
        return self.y

    def clone(self) -> "Point":
        return replace(self)

    def equals(self, other: "Point") -> bool:
        return self.x == other.x and self.y == other.y

    def squared_distance_from(self, other: "Point") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance_from(self, other: "Point") -> float:
        """Planar Euclidean distance."""
        return math.sqrt(self.squared_distance_from(other))

    def geo_distance_from(self, other: "Point", haversine: bool = False) -> float:
        """Great-circle distance in meters between two lng/lat points.

        Uses the spherical law of cosines by default, or the haversine
        formula when ``haversine`` is set. The haversine form is better
        conditioned for very short distances.
        """
        lat1 = math.radians(self.lat)
        lat2 = math.radians(other.lat)
        d_lng = math.radians(other.lng - self.lng)

        if haversine:
            d_lat = lat2 - lat1
            sin_lat = math.sin(d_lat / 2)
            sin_lng = math.sin(d_lng / 2)
            a = sin_lat * sin_lat + math.cos(lat1) * math.cos(lat2) * sin_lng * sin_lng
            # near-antipodal points can round a just past 1
            a = min(1.0, max(0.0, a))
            return 2.0 * EARTH_RADIUS * math.atan2(math.sqrt(a), math.sqrt(1 - a))

        cos_angle = (
            math.sin(lat1) * math.sin(lat2)
            + math.cos(lat1) * math.cos(lat2) * math.cos(d_lng)
        )
        # rounding can push the cosine just outside [-1, 1]
        cos_angle = max(-1.0, min(1.0, cos_angle))
        return math.acos(cos_angle) * EARTH_RADIUS


@dataclass(frozen=True)
class Line:
    """A line segment defined by two endpoints."""
    a: Point
    b: Point

    def project(self, point: Point) -> float:
        """Position along the segment of the point closest to ``point``.

        Returns a value clamped to [0, 1], where 0 is ``a`` and 1 is ``b``.
        """
        dx = self.b.x - self.a.x
        dy = self.b.y - self.a.y
        length_sq = dx * dx + dy * dy
        if length_sq == 0:
            return 0.0

        t = ((point.x - self.a.x) * dx + (point.y - self.a.y) * dy) / length_sq
        return min(1.0, max(0.0, t))

    def interpolate(self, percent: float) -> Point:
        return Point(
            self.a.x + percent * (self.b.x - self.a.x),
            self.a.y + percent * (self.b.y - self.a.y),
        )

    def squared_distance_from(self, point: Point) -> float:
        dx = self.b.x - self.a.x
        dy = self.b.y - self.a.y
        length_sq = dx * dx + dy * dy
        if length_sq == 0:
            return self.a.squared_distance_from(point)

        px = point.x - self.a.x
        py = point.y - self.a.y
        t = (px * dx + py * dy) / length_sq
        if t <= 0:
            return self.a.squared_distance_from(point)
        if t >= 1:
            return self.b.squared_distance_from(point)

        # perpendicular distance; exact zero for collinear points
        cross = dx * py - dy * px
        return cross * cross / length_sq

    def distance_from(self, point: Point) -> float:
        """Distance from ``point`` to the closest point on the segment."""
        return math.sqrt(self.squared_distance_from(point))

    def length(self) -> float:
        return self.a.distance_from(self.b)

    def geo_length(self, haversine: bool = False) -> float:
        return self.a.geo_distance_from(self.b, haversine)

    def midpoint(self) -> Point:
        return self.interpolate(0.5)


@dataclass
class Bound:
    """Axis-aligned bounding rectangle given by its corners."""
    sw: Point
    ne: Point

    @classmethod
    def new(cls, max_x: float, min_x: float, max_y: float, min_y: float) -> "Bound":
        """Create a bound from edge values.

        The argument order (max_x, min_x, max_y, min_y) is kept for
        compatibility with existing callers. Each pair is sorted, so
        swapped values still produce a well-formed bound.
        """
        return cls(
            sw=Point(min(max_x, min_x), min(max_y, min_y)),
            ne=Point(max(max_x, min_x), max(max_y, min_y)),
        )

    @classmethod
    def from_points(cls, *points: Point) -> "Bound":
        if not points:
            return cls.new(0, 0, 0, 0)
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls.new(max(xs), min(xs), max(ys), min(ys))

    @property
    def west(self) -> float:
        return self.sw.x

    @property
    def east(self) -> float:
        return self.ne.x

    @property
    def south(self) -> float:
        return self.sw.y

    @property
    def north(self) -> float:
        return self.ne.y

    @property
    def south_west(self) -> Point:
        return self.sw

    @property
    def north_east(self) -> Point:
        return self.ne

    @property
    def north_west(self) -> Point:
        return Point(self.sw.x, self.ne.y)

    @property
    def south_east(self) -> Point:
        return Point(self.ne.x, self.sw.y)

    def width(self) -> float:
        return self.ne.x - self.sw.x

    def height(self) -> float:
        return self.ne.y - self.sw.y

    def center(self) -> Point:
        return Point((self.sw.x + self.ne.x) / 2, (self.sw.y + self.ne.y) / 2)

    def contains(self, point: Point) -> bool:
        return (
            self.sw.x <= point.x <= self.ne.x
            and self.sw.y <= point.y <= self.ne.y
        )

    def intersects(self, other: "Bound") -> bool:
        return not (
            self.ne.x < other.sw.x
            or self.sw.x > other.ne.x
            or self.ne.y < other.sw.y
            or self.sw.y > other.ne.y
        )

    def extend(self, point: Point) -> "Bound":
        """Grow the bound in place to include ``point``."""
        if self.contains(point):
            return self
        self.sw = Point(min(self.sw.x, point.x), min(self.sw.y, point.y))
        self.ne = Point(max(self.ne.x, point.x), max(self.ne.y, point.y))
        return self

    def union(self, other: "Bound") -> "Bound":
        """Grow the bound in place to include ``other``."""
        self.extend(other.sw)
        self.extend(other.ne)
        return self

    def pad(self, distance: float) -> "Bound":
        """Expand (or shrink, for negative values) every edge by ``distance``."""
        self.sw = Point(self.sw.x - distance, self.sw.y - distance)
        self.ne = Point(self.ne.x + distance, self.ne.y + distance)
        return self

    def geo_pad(self, meters: float) -> "Bound":
        """Pad a lng/lat bound by roughly ``meters`` on every side."""
        dy = meters / METERS_PER_DEGREE_LAT
        # longitude degrees shrink towards the poles, so use the wider edge
        dx = max(
            dy / math.cos(math.radians(self.ne.y)),
            dy / math.cos(math.radians(self.sw.y)),
        )
        self.sw = Point(self.sw.x - dx, self.sw.y - dy)
        self.ne = Point(self.ne.x + dx, self.ne.y + dy)
        return self

    def geo_width(self, haversine: bool = False) -> float:
        """East-west extent in meters, measured along the center latitude."""
        c = self.center()
        west = Point(self.sw.x, c.y)
        east = Point(self.ne.x, c.y)
        return west.geo_distance_from(east, haversine)

    def geo_height(self) -> float:
        return METERS_PER_DEGREE_LAT * self.height()

    def empty(self) -> bool:
        """True if the bound has zero or negative area."""
        return self.sw.x >= self.ne.x or self.sw.y >= self.ne.y

    def equals(self, other: "Bound") -> bool:
        return self.sw.equals(other.sw) and self.ne.equals(other.ne)

    def clone(self) -> "Bound":
        return Bound(self.sw, self.ne)

    def corners(self) -> Iterable[Point]:
        """Ring of corners starting and ending at the south-west corner."""
        return [self.sw, self.north_west, self.ne, self.south_east, self.sw]

    def to_mysql_polygon(self) -> str:
        ring = ", ".join(f"{p.x:f} {p.y:f}" for p in self.corners())
        return f"POLYGON(({ring}))"

    def to_mysql_intersects_condition(self, column: str) -> str:
        return f"INTERSECTS({column}, GEOMFROMTEXT('{self.to_mysql_polygon()}'))"

    def __str__(self) -> str:
        return f"[[{self.west:f}, {self.east:f}], [{self.south:f}, {self.north:f}]]"
