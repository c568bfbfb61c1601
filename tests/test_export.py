"""Tests for print export and the live overlay output."""

import random
import xml.etree.ElementTree as ET
from datetime import date

import pytest

from travel_sketch.convert import journey_to_feature
from travel_sketch.export import export_filename, export_svg, write_export
from travel_sketch.geo.loader import empty_layers
from travel_sketch.geo.model import Anchor, Journey
from travel_sketch.layout.constants import BEZIER_STEPS

ANCHORS = [Anchor(-9.14, 38.72), Anchor(-3.70, 40.42), Anchor(2.17, 41.39)]


@pytest.mark.parametrize("title,expected", [
    ("Highlands Loop", "highlands-loop.svg"),
    ("Lisbon → Istanbul!", "lisbon---istanbul-.svg"),
    ("ROUTE 66", "route-66.svg"),
])
def test_export_filename_from_title(title, expected):
    assert export_filename(title) == expected


def test_export_filename_without_title():
    assert export_filename("", date(2026, 10, 19)) == "path-2026-10-19.svg"


def test_export_document_is_print_sized():
    journey = Journey(title="Iberia", anchors=list(ANCHORS))
    svg = export_svg(journey, empty_layers(), rng=random.Random(1), created=date(2026, 1, 2))
    assert svg.startswith("<?xml")
    root = ET.fromstring(svg)
    assert root.get("width") == "420mm"
    assert root.get("height") == "594mm"
    assert root.get("viewBox") == "0 0 420 594"


def test_write_export_default_name(tmp_path):
    journey = Journey(title="Iberia Rail", anchors=list(ANCHORS))
    out = write_export(journey, empty_layers(), directory=tmp_path, rng=random.Random(1))
    assert out == tmp_path / "iberia-rail.svg"
    assert "<svg" in out.read_text(encoding="utf-8")


def test_write_export_unwritable(tmp_path):
    journey = Journey(anchors=list(ANCHORS))
    with pytest.raises(OSError):
        write_export(journey, empty_layers(), tmp_path / "missing" / "map.svg")


def test_overlay_feature():
    journey = Journey(anchors=list(ANCHORS), curvature="calm")
    feature = journey_to_feature(journey, random.Random(3))
    assert feature["type"] == "Feature"
    assert feature["properties"] == {}
    coords = feature["geometry"]["coordinates"]
    assert feature["geometry"]["type"] == "LineString"
    assert len(coords) == (len(ANCHORS) - 1) * (BEZIER_STEPS + 1)
    assert coords[0] == [ANCHORS[0].lng, ANCHORS[0].lat]
    assert coords[-1] == [ANCHORS[-1].lng, ANCHORS[-1].lat]


def test_overlay_needs_two_anchors():
    with pytest.raises(ValueError):
        journey_to_feature(Journey(anchors=[Anchor(0, 0)]))
