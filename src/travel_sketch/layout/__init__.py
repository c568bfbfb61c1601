"""Journey path synthesis."""

from travel_sketch.layout.humanize import build_journey_path, humanize, resolve_curvature

__all__ = ["build_journey_path", "humanize", "resolve_curvature"]
