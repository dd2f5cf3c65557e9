"""SVG input/output for polypath."""

import re
from typing import List, Tuple
from xml.etree import ElementTree as ET

from .geometry import Path, Point

_COMMAND_RE = re.compile(r'([MLHVCSQTAZ])([^MLHVCSQTAZ]*)', re.IGNORECASE)
_NUMBER_RE = re.compile(r'[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?')

# Arguments consumed per repetition, and the index of the end point x
# within each repetition (None for the single-axis H and V commands).
_ARITY = {
    'M': (2, 0), 'L': (2, 0), 'T': (2, 0),
    'H': (1, None), 'V': (1, None),
    'S': (4, 2), 'Q': (4, 2),
    'C': (6, 4),
    'A': (7, 5),
    'Z': (0, None),
}


def parse_path_d(d: str) -> List[List[Point]]:
    """Parse an SVG path d attribute into subpaths of points.

    Every moveto starts a new subpath, so pieces the SVG never connects
    stay separate. Drawing after a close command also starts a new
    subpath, from the closed subpath's start. Curves and arcs contribute
    only their end points.
    """
    subpaths: List[List[Point]] = []
    current: List[Point] = []
    x, y = 0.0, 0.0
    start_x, start_y = 0.0, 0.0

    for cmd, args_str in _COMMAND_RE.findall(d or ''):
        upper = cmd.upper()
        relative = cmd.islower()
        args = [float(a) for a in _NUMBER_RE.findall(args_str)]
        size, end_index = _ARITY[upper]

        if upper == 'Z':
            if current and (x, y) != (start_x, start_y):
                current.append(Point(start_x, start_y))
            x, y = start_x, start_y
            current = []
            continue

        for i in range(0, len(args) - size + 1, size):
            group = args[i:i + size]
            if upper == 'H':
                x = group[0] + (x if relative else 0.0)
            elif upper == 'V':
                y = group[0] + (y if relative else 0.0)
            else:
                ex, ey = group[end_index], group[end_index + 1]
                if relative:
                    ex += x
                    ey += y
                x, y = ex, ey

            if upper == 'M' and i == 0:
                start_x, start_y = x, y
                current = []
                subpaths.append(current)
            elif not current:
                current = [Point(start_x, start_y)]
                subpaths.append(current)
            current.append(Point(x, y))

    return subpaths


def _parse_points_attr(value: str) -> List[Point]:
    coords = [float(c) for c in _NUMBER_RE.findall(value or '')]
    return [Point(coords[i], coords[i + 1]) for i in range(0, len(coords) - 1, 2)]


def element_to_paths(element: ET.Element) -> List[Path]:
    """Convert a single SVG shape element to Paths, one per subpath."""
    tag = element.tag.split('}')[-1].lower()

    if tag == 'path':
        return [Path(*points) for points in parse_path_d(element.get('d', ''))]

    if tag in ('polyline', 'polygon'):
        points = _parse_points_attr(element.get('points', ''))
        if tag == 'polygon' and len(points) > 1 and points[0] != points[-1]:
            points.append(points[0])
        return [Path(*points)]

    if tag == 'line':
        return [Path(
            Point(float(element.get('x1', 0)), float(element.get('y1', 0))),
            Point(float(element.get('x2', 0)), float(element.get('y2', 0))),
        )]

    return []


def extract_paths_from_svg(svg_content: str) -> Tuple[List[Path], dict]:
    """Extract every line-like shape from SVG content.

    Returns:
        Tuple of (list of paths with at least two points, SVG metadata
        dict with viewBox, width, height)

    Raises:
        ValueError: If the content is not well-formed XML.
    """
    try:
        root = ET.fromstring(svg_content)
    except ET.ParseError as e:
        raise ValueError(f"malformed SVG: {e}") from e

    metadata = {
        'viewBox': root.get('viewBox', ''),
        'width': root.get('width', ''),
        'height': root.get('height', ''),
    }

    paths: List[Path] = []
    for elem in root.iter():
        paths.extend(p for p in element_to_paths(elem) if len(p) >= 2)

    return paths, metadata


def path_to_svg_d(path: Path, precision: int = 2) -> str:
    """Convert a Path to an open SVG path d attribute."""
    commands = []
    for i, p in enumerate(path):
        op = 'M' if i == 0 else 'L'
        commands.append(f"{op}{p.x:.{precision}f},{p.y:.{precision}f}")
    return ' '.join(commands)


def create_svg_from_paths(
    paths: List[Path],
    viewbox: str = '',
    width: str = '',
    height: str = '',
    stroke: str = 'black',
    stroke_width: str = '1',
    precision: int = 2,
) -> str:
    """Create a complete SVG document with one path element per Path.

    When no viewBox is given, one is computed from the combined bounds.
    """
    if not viewbox and paths:
        bound = paths[0].bounds()
        for path in paths[1:]:
            bound.union(path.bounds())
        viewbox = f"{bound.west:g} {bound.south:g} {bound.width():g} {bound.height():g}"

    attrs = ['xmlns="http://www.w3.org/2000/svg"']
    if viewbox:
        attrs.append(f'viewBox="{viewbox}"')
    if width:
        attrs.append(f'width="{width}"')
    if height:
        attrs.append(f'height="{height}"')

    elements = [
        f'  <path d="{path_to_svg_d(path, precision)}" fill="none" '
        f'stroke="{stroke}" stroke-width="{stroke_width}"/>'
        for path in paths
        if len(path)
    ]

    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f"<svg {' '.join(attrs)}>\n"
        + ''.join(e + '\n' for e in elements)
        + '</svg>'
    )
