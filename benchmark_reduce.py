#!/usr/bin/env python3
"""
Douglas-Peucker benchmark: polypath Path.reduce vs Shapely simplify.

Shapely's simplify(preserve_topology=False) runs the GEOS Douglas-Peucker
implementation, so both sides should keep the same number of points.

Usage:
    python benchmark_reduce.py [svg_file] [--threshold T]
    python benchmark_reduce.py                 # random-walk paths
"""

import argparse
import sys
import time
from pathlib import Path as FilePath

try:
    import numpy as np
    from shapely.geometry import LineString
except ImportError as e:
    print(f"Missing dependency: {e}")
    print("Install with: pip install -e '.[benchmark]'")
    sys.exit(1)

from polypath.geometry import Path, Point
from polypath.svg_io import extract_paths_from_svg


def random_walk_paths(count: int = 50, length: int = 5000, seed: int = 7) -> list[Path]:
    """Generate smooth-ish random walks as test input."""
    rng = np.random.default_rng(seed)
    paths = []
    for _ in range(count):
        steps = rng.normal(size=(length, 2)).cumsum(axis=0)
        paths.append(Path.from_coords(steps.tolist()))
    return paths


def benchmark(paths: list[Path], threshold: float):
    """Run both implementations and print a comparison."""
    total_points = sum(len(p) for p in paths)
    print(f"Paths: {len(paths)}, points: {total_points}, threshold: {threshold}")

    start = time.perf_counter()
    ours = [p.clone().reduce(threshold) for p in paths]
    ours_time = time.perf_counter() - start

    lines = [LineString([(pt.x, pt.y) for pt in p]) for p in paths]
    start = time.perf_counter()
    theirs = [ls.simplify(threshold, preserve_topology=False) for ls in lines]
    theirs_time = time.perf_counter() - start

    ours_kept = sum(len(p) for p in ours)
    theirs_kept = sum(len(ls.coords) for ls in theirs)

    print()
    print("=" * 50)
    print("RESULTS")
    print("=" * 50)
    print(f"polypath kept:   {ours_kept} points in {ours_time*1000:.1f}ms")
    print(f"shapely kept:    {theirs_kept} points in {theirs_time*1000:.1f}ms")
    print(f"Speed ratio:     {ours_time / max(theirs_time, 1e-9):.1f}x")
    print("=" * 50)

    return ours_time, theirs_time


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("svg_file", nargs="?")
    parser.add_argument("--threshold", type=float, default=1.0)
    args = parser.parse_args()

    if args.svg_file:
        if not FilePath(args.svg_file).exists():
            print(f"Error: {args.svg_file} not found")
            sys.exit(1)
        paths, _ = extract_paths_from_svg(FilePath(args.svg_file).read_text())
    else:
        paths = random_walk_paths()

    benchmark(paths, args.threshold)
