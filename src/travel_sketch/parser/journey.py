"""Parser for journey definition files.

A journey file is a JSON object holding the same fields the editor stores
for a drawn path::

    {
      "title": "Highlands Loop",
      "origin": "Edinburgh",
      "destination": "Inverness",
      "curvature_mode": "balanced",
      "points": [{"lng": -3.19, "lat": 55.95}, {"lng": -4.22, "lat": 57.48}]
    }

Points may also be given as ``[lng, lat]`` pairs.
"""

from __future__ import annotations

import json
import math
from numbers import Real
from typing import Any

from travel_sketch.geo.model import Anchor, Journey
from travel_sketch.layout.constants import CURVATURE_PRESETS, DEFAULT_CURVATURE


def _parse_point(raw: Any, index: int) -> Anchor:
    if isinstance(raw, dict):
        lng, lat = raw.get("lng"), raw.get("lat")
    elif isinstance(raw, (list, tuple)) and len(raw) == 2:
        lng, lat = raw
    else:
        raise ValueError(f"Point {index} must be an object with lng/lat or a [lng, lat] pair")

    for name, value in (("lng", lng), ("lat", lat)):
        if not isinstance(value, Real) or isinstance(value, bool):
            raise ValueError(f"Point {index} has a non-numeric {name}: {value!r}")
        if not math.isfinite(value):
            raise ValueError(f"Point {index} has a non-finite {name}: {value!r}")
    if abs(lng) > 180 or abs(lat) > 90:
        raise ValueError(f"Point {index} is out of range: lng={lng}, lat={lat}")
    return Anchor(lng=float(lng), lat=float(lat))


def _text_field(data: dict, key: str) -> str:
    value = data.get(key) or ""
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string")
    return value.strip()


def parse_journey(text: str) -> Journey:
    """Parse a JSON journey definition."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Journey file is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValueError("Journey file must contain a JSON object")

    curvature = data.get("curvature_mode", data.get("curvature")) or DEFAULT_CURVATURE
    if not isinstance(curvature, str) or curvature not in CURVATURE_PRESETS:
        choices = ", ".join(CURVATURE_PRESETS)
        raise ValueError(f"Unknown curvature mode '{curvature}' (expected one of: {choices})")

    points = data.get("points", [])
    if not isinstance(points, list):
        raise ValueError("'points' must be a list")

    return Journey(
        title=_text_field(data, "title"),
        origin=_text_field(data, "origin"),
        destination=_text_field(data, "destination"),
        curvature=curvature,
        anchors=[_parse_point(p, i) for i, p in enumerate(points)],
    )


def dump_journey(journey: Journey) -> str:
    """Serialize a journey back to its JSON file form."""
    return json.dumps(
        {
            "title": journey.title,
            "origin": journey.origin,
            "destination": journey.destination,
            "curvature_mode": journey.curvature,
            "points": [{"lng": a.lng, "lat": a.lat} for a in journey.anchors],
        },
        indent=2,
        ensure_ascii=False,
    ) + "\n"
