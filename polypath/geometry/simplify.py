"""Douglas-Peucker line simplification."""

from typing import List, Sequence
from .types import Point, Line


def douglas_peucker_mask(points: Sequence[Point], threshold: float) -> List[bool]:
    """Mark the points kept by Douglas-Peucker simplification.

    For each range the first and last points are kept. The interior point
    farthest from the segment joining them (first one wins on ties) splits
    the range in two if its distance exceeds ``threshold``; otherwise every
    interior point of the range is dropped.

    Ranges are processed from an explicit stack rather than by recursion,
    so long degenerate inputs cannot exhaust the interpreter stack.

    Returns:
        A list of booleans, one per input point.
    """
    if threshold < 0:
        raise ValueError(f"threshold must be non-negative, got {threshold!r}")

    n = len(points)
    keep = [False] * n
    if n == 0:
        return keep

    stack = [(0, n - 1)]
    while stack:
        start, end = stack.pop()
        keep[start] = True
        keep[end] = True

        line = Line(points[start], points[end])
        max_dist = 0.0
        max_index = start
        for i in range(start + 1, end):
            dist = line.distance_from(points[i])
            if dist > max_dist:
                max_dist = dist
                max_index = i

        if max_dist > threshold:
            stack.append((max_index, end))
            stack.append((start, max_index))

    return keep


def douglas_peucker(points: Sequence[Point], threshold: float) -> List[Point]:
    """Return the simplified subsequence of ``points``."""
    keep = douglas_peucker_mask(points, threshold)
    return [p for p, k in zip(points, keep) if k]
