"""Geographic model, projection, filtering and reference data loading."""

from travel_sketch.geo.filter import filter_by_region
from travel_sketch.geo.loader import load_reference_layers, start_reference_fetch
from travel_sketch.geo.model import Anchor, BoundingBox, Journey, ProjectionParams
from travel_sketch.geo.projection import bbox_from_anchors, calculate_projection, project_to_svg

__all__ = [
    "Anchor",
    "BoundingBox",
    "Journey",
    "ProjectionParams",
    "bbox_from_anchors",
    "calculate_projection",
    "filter_by_region",
    "load_reference_layers",
    "project_to_svg",
    "start_reference_fetch",
]
