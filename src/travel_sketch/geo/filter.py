"""Coarse bounding-box filtering of GeoJSON feature collections.

A feature is kept when any vertex anywhere in its coordinate tree falls in
the padded region. This is not exact clipping: a feature whose vertices all
lie outside the region while its edges cross it is dropped. The padding
keeps that case rare for the coarse datasets this is used with.
"""

from __future__ import annotations

from numbers import Real
from typing import Any

from travel_sketch.geo.model import BoundingBox, FeatureCollection, empty_collection

FILTER_PADDING_DEGREES: float = 5.0
"""Degrees added around the region before testing features."""


def filter_by_region(
    collection: Any,
    bbox: BoundingBox,
    padding: float = FILTER_PADDING_DEGREES,
) -> FeatureCollection:
    """Keep only the features with at least one vertex near ``bbox``."""
    if not isinstance(collection, dict):
        return empty_collection()
    features = collection.get("features")
    if not isinstance(features, list):
        return empty_collection()

    region = bbox.expanded(padding)
    kept = [f for f in features if _feature_intersects(f, region)]
    return {"type": "FeatureCollection", "features": kept}


def _feature_intersects(feature: Any, region: BoundingBox) -> bool:
    if not isinstance(feature, dict):
        return False
    geometry = feature.get("geometry")
    if not isinstance(geometry, dict) or "coordinates" not in geometry:
        return False
    return coords_in_bbox(geometry["coordinates"], region)


def _is_coordinate(coords: list | tuple) -> bool:
    return (
        len(coords) >= 2
        and isinstance(coords[0], Real)
        and isinstance(coords[1], Real)
        and not isinstance(coords[0], bool)
    )


def coords_in_bbox(coords: Any, bbox: BoundingBox) -> bool:
    """True if any coordinate pair nested anywhere in ``coords`` is in ``bbox``."""
    if not isinstance(coords, (list, tuple)) or not coords:
        return False
    if _is_coordinate(coords):
        return bbox.contains(coords[0], coords[1])
    return any(coords_in_bbox(child, bbox) for child in coords)
