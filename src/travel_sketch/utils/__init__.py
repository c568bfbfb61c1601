"""Utility helpers."""

from travel_sketch.utils.logging import configure_logging

__all__ = ["configure_logging"]
