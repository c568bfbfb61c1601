"""Theme definitions for travel maps."""

from travel_sketch.themes.charcoal import CHARCOAL_THEME
from travel_sketch.themes.paper import PAPER_THEME

THEMES = {
    "paper": PAPER_THEME,
    "charcoal": CHARCOAL_THEME,
}

__all__ = ["THEMES", "PAPER_THEME", "CHARCOAL_THEME"]
