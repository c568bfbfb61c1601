"""SVG rendering for travel maps."""

from travel_sketch.render.svg import compose, render_svg

__all__ = ["compose", "render_svg"]
