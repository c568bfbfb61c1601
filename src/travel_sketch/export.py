"""Print export: physical page size and file naming."""

from __future__ import annotations

import random
import re
from datetime import date
from pathlib import Path

import structlog

from travel_sketch.geo.loader import ReferenceLayers
from travel_sketch.geo.model import Journey
from travel_sketch.render.constants import EXPORT_UNITS
from travel_sketch.render.style import Theme
from travel_sketch.render.svg import render_svg

logger = structlog.get_logger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9]", re.IGNORECASE)


def export_filename(title: str, today: date | None = None) -> str:
    """File name for an exported map.

    Every non-alphanumeric character of the title becomes ``-``; an empty
    title falls back to a date-stamped name.
    """
    if title:
        return f"{_NON_ALNUM.sub('-', title).lower()}.svg"
    today = today or date.today()
    return f"path-{today.isoformat()}.svg"


def export_svg(
    journey: Journey,
    layers: ReferenceLayers,
    *,
    theme: Theme | None = None,
    rng: random.Random | None = None,
    created: date | None = None,
) -> str:
    """Self-contained print document sized in physical units."""
    return render_svg(
        journey,
        layers,
        theme=theme,
        rng=rng,
        created=created,
        units=EXPORT_UNITS,
    )


def write_export(
    journey: Journey,
    layers: ReferenceLayers,
    output: Path | None = None,
    *,
    directory: Path = Path("."),
    theme: Theme | None = None,
    rng: random.Random | None = None,
    created: date | None = None,
) -> Path:
    """Render and write the print document; returns the written path.

    Raises OSError when the file cannot be written.
    """
    svg = export_svg(journey, layers, theme=theme, rng=rng, created=created)
    if output is None:
        output = directory / export_filename(journey.title, created)
    output.write_text(svg, encoding="utf-8")
    logger.info("Exported map", path=str(output), anchors=len(journey.anchors))
    return output
