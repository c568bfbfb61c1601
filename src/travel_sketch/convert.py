"""Convert a journey to a GeoJSON line for a live map overlay.

The interactive map draws the humanized journey on top of its own tiles, so
it only needs the points in geographic coordinates: one ``LineString``
feature holding every segment back to back.
"""

from __future__ import annotations

import random
from typing import Any

from travel_sketch.geo.model import Journey
from travel_sketch.layout.humanize import build_journey_path, flatten_segments


def journey_to_feature(
    journey: Journey,
    rng: random.Random | None = None,
) -> dict[str, Any]:
    """GeoJSON ``Feature`` with the full humanized journey as a LineString."""
    segments = build_journey_path(journey.anchors, journey.curvature, rng)
    return {
        "type": "Feature",
        "geometry": {
            "type": "LineString",
            "coordinates": [[p.lng, p.lat] for p in flatten_segments(segments)],
        },
        "properties": {},
    }
