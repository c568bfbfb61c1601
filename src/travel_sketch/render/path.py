"""Serialization of geometries and journey segments to SVG path data."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from numbers import Real
from typing import Any

from travel_sketch.geo.model import Anchor

Projector = Callable[[float, float], tuple[float, float]]


def _fmt(x: float, y: float) -> str:
    return f"{x:.2f},{y:.2f}"


def _valid_coordinate(coord: Any) -> bool:
    if not isinstance(coord, (list, tuple)) or len(coord) < 2:
        return False
    lng, lat = coord[0], coord[1]
    if not isinstance(lng, Real) or not isinstance(lat, Real):
        return False
    return abs(lng) <= 180 and abs(lat) <= 90


def line_to_path(coords: Any, project: Projector) -> str:
    """One ``M``/``L`` run per contiguous stretch of valid coordinates.

    An invalid coordinate breaks the line: the next valid one starts a new
    subpath instead of being joined across the gap.
    """
    if not isinstance(coords, (list, tuple)):
        return ""

    parts: list[str] = []
    pen_down = False
    for coord in coords:
        if not _valid_coordinate(coord):
            pen_down = False
            continue
        x, y = project(coord[0], coord[1])
        parts.append(("L " if pen_down else "M ") + _fmt(x, y))
        pen_down = True
    return " ".join(parts)


def _join(parts: list[str]) -> str:
    return " ".join(p for p in parts if p)


def polygon_to_path(rings: Any, project: Projector) -> str:
    if not isinstance(rings, (list, tuple)):
        return ""
    return _join([line_to_path(ring, project) for ring in rings])


def geometry_to_path(geometry: Any, project: Projector) -> str:
    """Path data for a GeoJSON geometry (or a feature wrapping one)."""
    if not isinstance(geometry, dict):
        return ""
    if geometry.get("type") == "Feature":
        return geometry_to_path(geometry.get("geometry"), project)

    kind = geometry.get("type")
    coords = geometry.get("coordinates")
    if not isinstance(coords, (list, tuple)):
        return ""

    if kind == "Polygon":
        return polygon_to_path(coords, project)
    if kind == "MultiPolygon":
        return _join([polygon_to_path(poly, project) for poly in coords])
    if kind == "LineString":
        return line_to_path(coords, project)
    if kind == "MultiLineString":
        return _join([line_to_path(line, project) for line in coords])
    return ""


def points_to_path(segments: Sequence[Sequence[Anchor]], project: Projector) -> str:
    """Path data for the journey: one subpath per humanized segment."""
    return _join([
        line_to_path([(p.lng, p.lat) for p in segment], project)
        for segment in segments
    ])


def to_path_string(shape: Any, project: Projector) -> str:
    """Serialize a GeoJSON geometry/feature or a list of anchor segments."""
    if isinstance(shape, dict):
        return geometry_to_path(shape, project)
    if shape and isinstance(shape[0], Anchor):
        return points_to_path([shape], project)
    return points_to_path(shape, project)
