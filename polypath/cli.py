"""Command-line interface for polypath."""

import io
import sys
import time
import click

from .errors import PolylineDecodeError
from .geometry import Path, Point
from .polyline import DEFAULT_FACTOR
from .svg_io import extract_paths_from_svg, create_svg_from_paths
from .text_io import parse_xy, format_xy, read_text, write_text

factor_option = click.option(
    '--factor', '-f', default=DEFAULT_FACTOR, type=float, show_default=True,
    help='Fixed-point scale used by the polyline encoding',
)


def _read(input):
    try:
        return read_text(input if input != '-' else None)
    except OSError as e:
        click.echo(f"Error reading input: {e}", err=True)
        sys.exit(1)


def _write(content, output):
    try:
        write_text(content, output if output != '-' else None)
    except OSError as e:
        click.echo(f"Error writing output: {e}", err=True)
        sys.exit(1)


def _decode(content, factor):
    try:
        return Path.decode(content.strip(), factor)
    except PolylineDecodeError as e:
        click.echo(f"Invalid polyline: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option()
def main():
    """polypath: encode, decode and simplify polylines.

    Paths travel between commands as encoded polyline strings, the
    compact format used by common mapping platforms.

    Examples:

        polypath encode points.txt > route.txt

        cat route.txt | polypath simplify -t 0.0005 | polypath decode --to svg
    """
    pass


@main.command()
@click.argument('input', default='-', required=False)
@click.option('-o', '--output', default='-', help='Output file (default: stdout)')
@click.option('--from', 'source', default='xy',
              type=click.Choice(['xy', 'svg']),
              help='Input format: x,y lines or SVG (first shape is used)')
@factor_option
def encode(input, output, source, factor):
    """Encode points into a polyline string.

    INPUT: file path, or - for stdin (default)
    """
    content = _read(input)

    try:
        if source == 'svg':
            paths, _ = extract_paths_from_svg(content)
            if not paths:
                click.echo("No line shapes found in input", err=True)
                sys.exit(1)
            path = paths[0]
        else:
            path = parse_xy(content)
    except ValueError as e:
        click.echo(f"Error parsing input: {e}", err=True)
        sys.exit(1)

    _write(path.encode(factor) + '\n', output)


@main.command()
@click.argument('input', default='-', required=False)
@click.option('-o', '--output', default='-', help='Output file (default: stdout)')
@click.option('--to', 'target', default='xy',
              type=click.Choice(['xy', 'off', 'svg']),
              help='Output format')
@click.option('--precision', default=6, type=int, show_default=True,
              help='Decimal places for xy and svg output')
@factor_option
def decode(input, output, target, precision, factor):
    """Decode a polyline string.

    INPUT: file path, or - for stdin (default)
    """
    path = _decode(_read(input), factor)

    if target == 'off':
        buf = io.StringIO()
        path.write_off_file(buf)
        content = buf.getvalue()
    elif target == 'svg':
        content = create_svg_from_paths([path], precision=precision) + '\n'
    else:
        content = format_xy(path, precision)

    _write(content, output)


@main.command()
@click.argument('input', default='-', required=False)
@click.option('-o', '--output', default='-', help='Output file (default: stdout)')
@click.option('--threshold', '-t', required=True, type=click.FloatRange(min=0),
              help='Maximum distance a dropped point may lie from the simplified line')
@factor_option
@click.option('--verbose', '-v', is_flag=True, help='Print timing and statistics')
def simplify(input, output, threshold, factor, verbose):
    """Simplify an encoded polyline with Douglas-Peucker.

    INPUT: file path, or - for stdin (default)
    """
    start_time = time.time()

    path = _decode(_read(input), factor)
    before = len(path)

    path.reduce(threshold)

    if verbose:
        click.echo(f"Reduced {before} points to {len(path)}", err=True)

    _write(path.encode(factor) + '\n', output)

    elapsed = time.time() - start_time
    if verbose:
        click.echo(f"Completed in {elapsed:.3f}s", err=True)


@main.command()
@click.argument('input', default='-', required=False)
@click.option('--haversine', is_flag=True,
              help='Use the haversine formula for geographic distance')
@factor_option
def stats(input, haversine, factor):
    """Print point count, distances and bounds of an encoded polyline."""
    path = _decode(_read(input), factor)
    bound = path.bounds()

    click.echo(f"points:         {len(path)}")
    click.echo(f"distance:       {path.total_distance():.6f}")
    click.echo(f"geo distance:   {path.geo_total_distance(haversine):.1f} m")
    click.echo(f"bounds:         {bound}")


@main.command()
@click.argument('input', default='-', required=False)
@click.option('--point', '-p', required=True, nargs=2, type=float,
              metavar='X Y', help='Point to measure from; negative values are allowed')
@factor_option
def distance(input, point, factor):
    """Print the distance from a point to an encoded polyline.

    INPUT: file path, or - for stdin (default)
    """
    path = _decode(_read(input), factor)
    x, y = point
    click.echo(f"{path.distance_from(Point(x, y)):.6f}")


if __name__ == '__main__':
    main()
