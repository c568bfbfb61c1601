"""Tests for geometry and journey path serialization."""

import random
import re

import pytest

from travel_sketch.geo.model import Anchor
from travel_sketch.geo.projection import bbox_from_anchors, calculate_projection, project_to_svg
from travel_sketch.layout.humanize import build_journey_path
from travel_sketch.render.path import (
    geometry_to_path,
    line_to_path,
    points_to_path,
    to_path_string,
)

COMMAND = re.compile(r"([ML]) (-?\d+\.\d{2}),(-?\d+\.\d{2})")


def identity(lng, lat):
    return lng, lat


def _commands(path):
    return COMMAND.findall(path)


def test_line_string_commands():
    path = geometry_to_path({"type": "LineString", "coordinates": [[1, 2], [3, 4], [5, 6]]},
                            identity)
    assert path == "M 1.00,2.00 L 3.00,4.00 L 5.00,6.00"


def test_two_decimal_rounding():
    assert line_to_path([[1.23456, -7.891]], identity) == "M 1.23,-7.89"


def test_invalid_latitude_breaks_line():
    geometry = {"type": "LineString", "coordinates": [[0, 0], [1, 1], [2, 95], [3, 3], [4, 4]]}
    path = geometry_to_path(geometry, identity)
    assert path == "M 0.00,0.00 L 1.00,1.00 M 3.00,3.00 L 4.00,4.00"
    assert path.count("M") == 2


def test_invalid_longitude_and_junk_are_skipped():
    coords = [[-181, 0], [10, 10], None, ["a", "b"], [11, 11]]
    assert line_to_path(coords, identity) == "M 10.00,10.00 M 11.00,11.00"


def test_leading_invalid_points_start_with_move():
    assert line_to_path([[0, 91], [0, 92], [1, 1]], identity) == "M 1.00,1.00"


def test_polygon_one_subpath_per_ring():
    outer = [[0, 0], [4, 0], [4, 4], [0, 0]]
    hole = [[1, 1], [2, 1], [2, 2], [1, 1]]
    path = geometry_to_path({"type": "Polygon", "coordinates": [outer, hole]}, identity)
    assert path.count("M") == 2
    assert path.startswith("M 0.00,0.00")
    assert " M 1.00,1.00" in path


def test_multi_geometries():
    multi_line = {"type": "MultiLineString", "coordinates": [[[0, 0], [1, 1]], [[2, 2], [3, 3]]]}
    assert geometry_to_path(multi_line, identity) == (
        "M 0.00,0.00 L 1.00,1.00 M 2.00,2.00 L 3.00,3.00"
    )

    square = [[0, 0], [1, 0], [1, 1], [0, 0]]
    multi_poly = {"type": "MultiPolygon", "coordinates": [[square], [square, square]]}
    assert geometry_to_path(multi_poly, identity).count("M") == 3


def test_feature_wrapper_and_unknowns():
    feature = {"type": "Feature", "geometry": {"type": "LineString", "coordinates": [[0, 0]]}}
    assert geometry_to_path(feature, identity) == "M 0.00,0.00"
    assert geometry_to_path({"type": "Point", "coordinates": [0, 0]}, identity) == ""
    assert geometry_to_path({"type": "LineString"}, identity) == ""
    assert geometry_to_path(None, identity) == ""
    # Empty child geometries leave no stray separators
    multi = {"type": "MultiLineString", "coordinates": [[], [[0, 0]], []]}
    assert geometry_to_path(multi, identity) == "M 0.00,0.00"


def test_projection_is_applied():
    def double(lng, lat):
        return lng * 2, lat * 2

    assert line_to_path([[1, 1]], double) == "M 2.00,2.00"


def test_journey_segments_each_start_with_move():
    segments = [[Anchor(0, 0), Anchor(1, 1)], [Anchor(1, 1), Anchor(2, 0)]]
    assert points_to_path(segments, identity) == (
        "M 0.00,0.00 L 1.00,1.00 M 1.00,1.00 L 2.00,0.00"
    )


def test_to_path_string_dispatch():
    assert to_path_string({"type": "LineString", "coordinates": [[0, 0]]}, identity) == "M 0.00,0.00"
    assert to_path_string([Anchor(0, 0), Anchor(1, 1)], identity) == "M 0.00,0.00 L 1.00,1.00"
    assert to_path_string([[Anchor(0, 0)], [Anchor(1, 1)]], identity) == "M 0.00,0.00 M 1.00,1.00"


def test_end_to_end_two_anchor_journey():
    anchors = [Anchor(0, 0), Anchor(10, 10)]
    params = calculate_projection(bbox_from_anchors(anchors), 340, 514, 0)

    def project(lng, lat):
        return project_to_svg(lng, lat, params)

    segments = build_journey_path(anchors, "balanced", random.Random(2024))
    path = points_to_path(segments, project)

    assert path.startswith("M")
    commands = _commands(path)
    assert len(commands) >= 100

    start_x, start_y = project(0, 0)
    end_x, end_y = project(10, 10)
    _, sx, sy = commands[0]
    _, ex, ey = commands[-1]
    assert float(sx) == pytest.approx(start_x, abs=0.01)
    assert float(sy) == pytest.approx(start_y, abs=0.01)
    assert float(ex) == pytest.approx(end_x, abs=0.01)
    assert float(ey) == pytest.approx(end_y, abs=0.01)
