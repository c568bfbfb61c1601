"""Linear projection of geographic coordinates onto a drawing surface.

The projection is plate carree with a uniform scale: the geography is fitted
into the margin-reduced canvas using the smaller of the two per-axis scales,
and the unused space on the other axis is split evenly on both sides.
"""

from __future__ import annotations

from collections.abc import Sequence

from travel_sketch.geo.model import Anchor, BoundingBox, ProjectionParams

BBOX_PADDING_RATIO: float = 0.1
"""Fraction of each axis span added on both sides of the anchor extent."""

MIN_SPAN_DEGREES: float = 0.01
"""Smallest geographic span allowed on either axis."""


def bbox_from_anchors(
    anchors: Sequence[Anchor],
    padding_ratio: float = BBOX_PADDING_RATIO,
) -> BoundingBox:
    """Bounding box of the anchors, padded by ``padding_ratio`` of each span.

    An axis whose span is zero (all anchors share the coordinate) is widened
    to ``MIN_SPAN_DEGREES`` around the shared value.
    """
    if not anchors:
        raise ValueError("Cannot compute a bounding box without anchors")

    lngs = [a.lng for a in anchors]
    lats = [a.lat for a in anchors]
    min_lng, max_lng = _padded_range(min(lngs), max(lngs), padding_ratio)
    min_lat, max_lat = _padded_range(min(lats), max(lats), padding_ratio)
    return BoundingBox(min_lng=min_lng, max_lng=max_lng, min_lat=min_lat, max_lat=max_lat)


def _padded_range(lo: float, hi: float, padding_ratio: float) -> tuple[float, float]:
    span = hi - lo
    if span < MIN_SPAN_DEGREES:
        centre = (lo + hi) / 2
        return centre - MIN_SPAN_DEGREES / 2, centre + MIN_SPAN_DEGREES / 2
    pad = span * padding_ratio
    return lo - pad, hi + pad


def calculate_projection(
    bbox: BoundingBox,
    canvas_width: float,
    canvas_height: float,
    margin: float = 0.0,
) -> ProjectionParams:
    """Fit ``bbox`` into the canvas without anisotropic stretching."""
    available_width = canvas_width - margin * 2
    available_height = canvas_height - margin * 2
    if available_width <= 0 or available_height <= 0:
        raise ValueError(
            f"Canvas {canvas_width}x{canvas_height} leaves no drawable area "
            f"with margin {margin}"
        )

    geo_width = max(bbox.width, MIN_SPAN_DEGREES)
    geo_height = max(bbox.height, MIN_SPAN_DEGREES)

    scale = min(available_width / geo_width, available_height / geo_height)

    return ProjectionParams(
        bbox=bbox,
        width=geo_width,
        height=geo_height,
        offset_x=margin + (available_width - geo_width * scale) / 2,
        offset_y=margin + (available_height - geo_height * scale) / 2,
        scale=scale,
    )


def project_to_svg(lng: float, lat: float, params: ProjectionParams) -> tuple[float, float]:
    """Project a coordinate; north maps to smaller y."""
    x = params.offset_x + (lng - params.bbox.min_lng) * params.scale
    y = params.offset_y + (params.bbox.max_lat - lat) * params.scale
    return x, y
