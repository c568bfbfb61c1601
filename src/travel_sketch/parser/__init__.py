"""Journey file parsing."""

from travel_sketch.parser.journey import dump_journey, parse_journey

__all__ = ["dump_journey", "parse_journey"]
