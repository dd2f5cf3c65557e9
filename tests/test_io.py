"""Tests for SVG and plain-text input/output."""

import pytest
from polypath import Path, Point
from polypath.svg_io import (
    parse_path_d,
    extract_paths_from_svg,
    create_svg_from_paths,
    path_to_svg_d,
)
from polypath.text_io import parse_xy, format_xy, read_text, write_text


def test_parse_path_d_absolute():
    subpaths = parse_path_d("M 0 0 L 10 0 H 20 V 5")
    assert subpaths == [[Point(0, 0), Point(10, 0), Point(20, 0), Point(20, 5)]]


def test_parse_path_d_relative():
    subpaths = parse_path_d("m1,1 l2,0 h3 v-1")
    assert subpaths == [[Point(1, 1), Point(3, 1), Point(6, 1), Point(6, 0)]]


def test_parse_path_d_implicit_lineto():
    subpaths = parse_path_d("M0,0 1,1 2,0")
    assert subpaths == [[Point(0, 0), Point(1, 1), Point(2, 0)]]


def test_parse_path_d_curve_end_points():
    """Curves contribute their end points only."""
    subpaths = parse_path_d("M0 0 C 1 1 2 1 3 0 Q 4 1 5 0 A 1 1 0 0 1 7 0")
    assert subpaths == [[Point(0, 0), Point(3, 0), Point(5, 0), Point(7, 0)]]


def test_parse_path_d_close():
    (points,) = parse_path_d("M0 0 L4 0 L4 4 Z")
    assert points[-1] == Point(0, 0)
    assert len(points) == 4


def test_parse_path_d_exponent():
    assert parse_path_d("M1e2,-2.5E-1") == [[Point(100, -0.25)]]


def test_parse_path_d_empty():
    assert parse_path_d("") == []
    assert parse_path_d("   ") == []


def test_parse_path_d_moveto_starts_subpath():
    """Each moveto begins a separate subpath instead of joining the last one."""
    subpaths = parse_path_d("M0 0 L1 0 M5 5 L6 5")
    assert subpaths == [
        [Point(0, 0), Point(1, 0)],
        [Point(5, 5), Point(6, 5)],
    ]


def test_parse_path_d_draw_after_close():
    """Drawing after Z continues from the closed subpath's start."""
    subpaths = parse_path_d("M1 1 L3 1 L3 3 Z l2 0")
    assert subpaths == [
        [Point(1, 1), Point(3, 1), Point(3, 3), Point(1, 1)],
        [Point(1, 1), Point(3, 1)],
    ]


SVG = """<?xml version="1.0"?>
<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100" width="100">
  <g>
    <path d="M 0 0 L 10 10 L 20 0"/>
    <polyline points="0,50 10,60 20,50"/>
  </g>
  <polygon points="0,0 10,0 10,10"/>
  <line x1="1" y1="2" x2="3" y2="4"/>
  <rect x="0" y="0" width="5" height="5"/>
  <path d="M 5 5"/>
</svg>"""


def test_extract_paths_from_svg():
    paths, metadata = extract_paths_from_svg(SVG)

    assert metadata["viewBox"] == "0 0 100 100"
    assert metadata["width"] == "100"
    assert len(paths) == 4
    assert paths[0].points == [Point(0, 0), Point(10, 10), Point(20, 0)]
    assert paths[1].get_at(1) == Point(10, 60)
    # polygons are closed back to their first point
    assert paths[2].points[-1] == Point(0, 0)
    assert len(paths[2]) == 4
    assert paths[3].points == [Point(1, 2), Point(3, 4)]


def test_extract_paths_splits_subpaths():
    svg = (
        '<svg xmlns="http://www.w3.org/2000/svg">'
        '<path d="M0 0 L1 0 M5 5 L6 5 M9 9"/></svg>'
    )
    paths, _ = extract_paths_from_svg(svg)

    # the lone moveto has a single point and is dropped
    assert len(paths) == 2
    assert paths[0].points == [Point(0, 0), Point(1, 0)]
    assert paths[1].points == [Point(5, 5), Point(6, 5)]


def test_extract_paths_malformed_svg():
    with pytest.raises(ValueError, match="malformed SVG"):
        extract_paths_from_svg("<svg><polyline")


def test_create_svg_round_trip():
    path = Path(Point(0, 0), Point(10.5, 3), Point(20, 0))
    svg = create_svg_from_paths([path])

    assert 'viewBox="0 0 20 3"' in svg
    paths, _ = extract_paths_from_svg(svg)
    assert paths[0].points == path.points


def test_path_to_svg_d():
    path = Path(Point(0, 0), Point(1.234, 5))
    assert path_to_svg_d(path, precision=1) == "M0.0,0.0 L1.2,5.0"
    assert path_to_svg_d(Path()) == ""


def test_parse_xy():
    text = "# route\n1,2\n\n3.5 4\n  -5 ,  6  \n"
    path = parse_xy(text)
    assert path.points == [Point(1, 2), Point(3.5, 4), Point(-5, 6)]


def test_parse_xy_bad_line():
    with pytest.raises(ValueError, match="line 2"):
        parse_xy("1,2\n1,2,3\n")


def test_format_xy():
    path = Path(Point(1, 2), Point(-3.25, 4))
    assert format_xy(path, precision=2) == "1.00,2.00\n-3.25,4.00\n"
    assert parse_xy(format_xy(path)) == path


def test_read_write_text(tmp_path):
    target = tmp_path / "route.txt"
    write_text("hello", str(target))
    assert read_text(str(target)) == "hello"


def test_write_text_stdout(capsys):
    write_text("to stdout", "-")
    assert capsys.readouterr().out == "to stdout"
