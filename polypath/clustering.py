"""Point clustering primitives.

A cluster groups anything that can be reduced to a single point and
tracks the centroid of its members.
"""

from typing import List, Optional, Protocol, Sequence

from .geometry import Line, Point


class Pointer(Protocol):
    """Something that can be point clustered."""

    def center_point(self) -> Point:
        ...


class Cluster:
    """A group of pointers plus their centroid."""

    def __init__(self, centroid: Point, pointers: Optional[Sequence[Pointer]] = None):
        self.centroid = centroid
        self.pointers: List[Pointer] = list(pointers) if pointers is not None else []

    @classmethod
    def from_pointers(cls, *pointers: Pointer) -> "Cluster":
        """Create a cluster whose centroid is the mean of the pointers' centers."""
        if not pointers:
            return cls(Point(0, 0))

        if len(pointers) == 1:
            return cls(pointers[0].center_point().clone(), pointers)

        centers = [p.center_point() for p in pointers]
        centroid = Point(
            sum(c.x for c in centers) / len(centers),
            sum(c.y for c in centers) / len(centers),
        )
        return cls(centroid, pointers)

    @classmethod
    def with_centroid(cls, centroid: Point, *pointers: Pointer) -> "Cluster":
        """Create a cluster with a given centroid, not derived from the pointers."""
        return cls(centroid.clone(), pointers)

    def __len__(self) -> int:
        return len(self.pointers)

    def merge(self, other: "Cluster") -> "Cluster":
        """Absorb ``other`` into this cluster.

        The centroid becomes the count-weighted mean of both centroids.
        """
        total = len(self.pointers) + len(other.pointers)
        if total:
            weight = 1 - len(self.pointers) / total
            self.centroid = Line(self.centroid, other.centroid).interpolate(weight)
        self.pointers.extend(other.pointers)
        return self

    def distance_from(self, other: "Cluster") -> float:
        """Planar distance between the two centroids."""
        return self.centroid.distance_from(other.centroid)

    def __repr__(self) -> str:
        return f"Cluster(centroid={self.centroid!r}, size={len(self.pointers)})"
