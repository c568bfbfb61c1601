"""Charcoal theme: light ink on dark stock."""

from travel_sketch.render.style import Theme

CHARCOAL_THEME = Theme(
    name="charcoal",
    paper_color="#2b2a28",
    vignette_color="rgba(0,0,0,0.25)",
    ink_color="#efe9dc",
    land_fill="#8a8275",
    lake_fill="#5f7d8c",
    river_stroke="#7fa3b3",
    coastline_stroke="#c9bfae",
    border_stroke="#a39b8f",
    grid_stroke="#c9bfae",
    label_color="#c9bfae",
    caption_color="#a39b8f",
    frame_stroke="#57534c",
    texture_alpha=0.04,
)
