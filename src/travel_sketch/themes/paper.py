"""Warm paper theme (default print look)."""

from travel_sketch.render.style import Theme

PAPER_THEME = Theme(
    name="paper",
    paper_color="#F5F1E8",
    vignette_color="rgba(139,125,107,0.08)",
    ink_color="#3f3b36",
    land_fill="#D4C9BA",
    lake_fill="#A8C5D6",
    river_stroke="#7B9CAA",
    coastline_stroke="#8B7D6B",
    border_stroke="#A39B8F",
    grid_stroke="#8B7D6B",
    label_color="#8B7D6B",
    caption_color="#A39B8F",
    frame_stroke="#D4C9BA",
)
