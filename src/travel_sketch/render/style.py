"""Theme and style constants for travel map rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for a travel map."""

    name: str
    paper_color: str
    vignette_color: str
    ink_color: str
    land_fill: str
    lake_fill: str
    river_stroke: str
    coastline_stroke: str
    border_stroke: str
    grid_stroke: str
    label_color: str
    caption_color: str
    frame_stroke: str
    font_family: str = "Georgia, serif"
    frame_stroke_width: float = 0.3
    # Paper texture
    texture_frequency: float = 0.9
    texture_octaves: int = 4
    texture_alpha: float = 0.02
