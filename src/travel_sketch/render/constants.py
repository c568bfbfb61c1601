"""Render constants used across render modules.

Page geometry, layer styling and typography offsets. Colours that vary by
theme remain in style.py.
"""

# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------
PAGE_WIDTH: int = 420
"""Page width (A2 portrait, millimetres in the exported document)."""

PAGE_HEIGHT: int = 594
"""Page height (A2 portrait, millimetres in the exported document)."""

PAGE_MARGIN: float = 40.0
"""Margin around the drawable area."""

TITLE_BAND_HEIGHT: float = 80.0
"""Height reserved above the map for the title block."""

FOOTER_BAND_HEIGHT: float = 60.0
"""Height reserved below the map for the caption."""

FRAME_INSET: float = 5.0
"""Distance the border frame sits outside the margin."""

EXPORT_UNITS: str = "mm"
"""Physical unit of the exported document size."""

# ---------------------------------------------------------------------------
# Layer styles, back to front
# ---------------------------------------------------------------------------
LAND_OPACITY: float = 0.06
LAKES_OPACITY: float = 0.12
RIVERS_OPACITY: float = 0.22
RIVERS_STROKE_WIDTH: float = 0.35
COASTLINES_OPACITY: float = 0.28
COASTLINES_STROKE_WIDTH: float = 0.55
BORDERS_OPACITY: float = 0.15
BORDERS_STROKE_WIDTH: float = 0.3
BORDERS_DASHARRAY: str = "2,1"

# ---------------------------------------------------------------------------
# Fallback grid
# ---------------------------------------------------------------------------
GRID_MERIDIANS: int = 10
"""Longitude lines drawn when no reference data is available."""

GRID_PARALLELS: int = 8
"""Latitude lines drawn when no reference data is available."""

GRID_OPACITY: float = 0.12
GRID_STROKE_WIDTH: float = 0.2

# ---------------------------------------------------------------------------
# Journey
# ---------------------------------------------------------------------------
PATH_STROKE_WIDTH: float = 0.75
ENDPOINT_RADIUS: float = 1.5
WAYPOINT_RADIUS: float = 1.2
WAYPOINT_STROKE_WIDTH: float = 0.4

# ---------------------------------------------------------------------------
# Typography
# ---------------------------------------------------------------------------
TITLE_Y_OFFSET: float = 45.0
"""Title baseline below the top margin."""

TITLE_FONT_SIZE: float = 18.0
TITLE_LETTER_SPACING: float = 0.5

ROUTE_Y_OFFSET: float = 62.0
"""Route label baseline below the top margin."""

ROUTE_FONT_SIZE: float = 6.0
ROUTE_LETTER_SPACING: float = 1.5

YEAR_Y_OFFSET: float = 72.0
"""Year baseline below the top margin."""

YEAR_FONT_SIZE: float = 5.0
YEAR_LETTER_SPACING: float = 0.8

FOOTER_Y_INSET: float = 20.0
"""Footer baseline above the bottom margin."""

FOOTER_FONT_SIZE: float = 4.5
FOOTER_LETTER_SPACING: float = 0.5

DEFAULT_TITLE: str = "Untitled Journey"
ROUTE_PLACEHOLDER: str = "ORIGIN — DESTINATION"
ROUTE_SEPARATOR: str = " — "

# ---------------------------------------------------------------------------
# Paper finish
# ---------------------------------------------------------------------------
PAPER_FILTER_ID: str = "paper-texture"
VIGNETTE_ID: str = "vignette"
MAP_CLIP_ID: str = "map-area"
