"""Plain-text input/output helpers for polypath."""

import re
import sys
from typing import Optional

from .geometry import Path, Point

_SEPARATOR_RE = re.compile(r'[,\s]+')


def parse_xy(text: str) -> Path:
    """Parse one ``x,y`` (or ``x y``) pair per line into a Path.

    Blank lines and lines starting with ``#`` are ignored.

    Raises:
        ValueError: If a line does not hold exactly two numbers.
    """
    path = Path()
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith('#'):
            continue

        fields = [f for f in _SEPARATOR_RE.split(line) if f]
        if len(fields) != 2:
            raise ValueError(f"line {lineno}: expected 2 coordinates, got {len(fields)}")
        path.push(Point(float(fields[0]), float(fields[1])))

    return path


def format_xy(path: Path, precision: int = 6) -> str:
    """Format a Path as one ``x,y`` line per point."""
    return ''.join(f"{p.x:.{precision}f},{p.y:.{precision}f}\n" for p in path)


def read_text(path: Optional[str] = None) -> str:
    """Read text from a file, or from stdin when path is None or '-'."""
    if path is None or path == '-':
        return sys.stdin.read()
    with open(path, 'r') as f:
        return f.read()


def write_text(content: str, path: Optional[str] = None):
    """Write text to a file, or to stdout when path is None or '-'."""
    if path is None or path == '-':
        sys.stdout.write(content)
    else:
        with open(path, 'w') as f:
            f.write(content)
