"""Data model for journeys, bounding boxes and reference layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any

LAYER_NAMES: tuple[str, ...] = ("coastlines", "rivers", "lakes", "land", "borders")
"""Reference layer names, in fetch order."""

LAYER_DATASETS: dict[str, str] = {
    "coastlines": "physical/ne_110m_coastline",
    "rivers": "physical/ne_110m_rivers_lake_centerlines",
    "lakes": "physical/ne_110m_lakes",
    "land": "physical/ne_110m_land",
    "borders": "cultural/ne_110m_admin_0_boundary_lines_land",
}
"""Upstream Natural Earth dataset requested for each layer."""

FeatureCollection = dict[str, Any]


def empty_collection() -> FeatureCollection:
    """Return a fresh, empty GeoJSON FeatureCollection."""
    return {"type": "FeatureCollection", "features": []}


@dataclass(frozen=True)
class Anchor:
    """A user-placed geographic waypoint."""

    lng: float
    lat: float


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned geographic rectangle (degrees)."""

    min_lng: float
    max_lng: float
    min_lat: float
    max_lat: float

    def __post_init__(self) -> None:
        if self.min_lng > self.max_lng or self.min_lat > self.max_lat:
            raise ValueError(
                f"Invalid bounding box: lng [{self.min_lng}, {self.max_lng}], "
                f"lat [{self.min_lat}, {self.max_lat}]"
            )

    @property
    def width(self) -> float:
        return self.max_lng - self.min_lng

    @property
    def height(self) -> float:
        return self.max_lat - self.min_lat

    def expanded(self, padding: float) -> BoundingBox:
        """Return a copy grown by ``padding`` degrees on every side."""
        return BoundingBox(
            min_lng=self.min_lng - padding,
            max_lng=self.max_lng + padding,
            min_lat=self.min_lat - padding,
            max_lat=self.max_lat + padding,
        )

    def contains(self, lng: float, lat: float) -> bool:
        return (
            self.min_lng <= lng <= self.max_lng
            and self.min_lat <= lat <= self.max_lat
        )


@dataclass(frozen=True)
class ProjectionParams:
    """Fixed parameters mapping a bounding box onto a drawing surface."""

    bbox: BoundingBox
    width: float
    height: float
    offset_x: float
    offset_y: float
    scale: float


@dataclass
class MapMetadata:
    """Text printed around the map."""

    title: str = ""
    origin: str = ""
    destination: str = ""
    created: date | None = None


@dataclass
class Journey:
    """A titled, ordered sequence of anchors with its drawing options."""

    title: str = ""
    origin: str = ""
    destination: str = ""
    curvature: str = "balanced"
    anchors: list[Anchor] = field(default_factory=list)

    @property
    def is_drawable(self) -> bool:
        """True when the journey has enough anchors to form a path."""
        return len(self.anchors) >= 2

    def metadata(self, created: date | None = None) -> MapMetadata:
        return MapMetadata(
            title=self.title,
            origin=self.origin,
            destination=self.destination,
            created=created,
        )
