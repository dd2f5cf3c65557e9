"""vpype plugin for polypath.

This module provides vpype integration, allowing polypath simplification
and polyline decoding to be used in vpype pipelines.

Usage:
    vpype read input.svg polysimplify --threshold 0.5 write output.svg
    vpype polydecode "_p~iF~ps|U_ulLnnqC_mqNvxq`@" show
"""

import click
import numpy as np
import vpype
import vpype_cli

from .geometry import Path, Point
from .polyline import DEFAULT_FACTOR


def line_to_path(line: np.ndarray) -> Path:
    """Convert a vpype line (complex array, x + yj) to a Path."""
    return Path(*(Point(float(p.real), float(p.imag)) for p in line))


def path_to_line(path: Path) -> np.ndarray:
    return np.array([complex(p.x, p.y) for p in path], dtype=complex)


@click.command("polysimplify")
@click.option('--threshold', '-t', required=True, type=vpype_cli.LengthType(),
              help='Maximum distance a dropped point may lie from the simplified line')
@vpype_cli.layer_processor
def simplify(lines: vpype.LineCollection, threshold: float) -> vpype.LineCollection:
    """Simplify every line of a layer with Douglas-Peucker."""
    result = vpype.LineCollection()
    for line in lines:
        result.append(path_to_line(line_to_path(line).reduce(threshold)))
    return result


@click.command("polydecode")
@click.argument('encoded', type=str)
@click.option('--factor', '-f', default=DEFAULT_FACTOR, type=float,
              help='Fixed-point scale used by the polyline encoding')
@vpype_cli.generator
def decode(encoded: str, factor: float) -> vpype.LineCollection:
    """Add a line decoded from an encoded polyline string."""
    return vpype.LineCollection([path_to_line(Path.decode(encoded, factor))])
