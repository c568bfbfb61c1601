"""travel-sketch: hand-drawn travel maps from waypoint journeys."""

__version__ = "0.1.0"
