"""CLI for travel-sketch."""

from __future__ import annotations

import json
import random
from pathlib import Path

import click

from travel_sketch import __version__
from travel_sketch.convert import journey_to_feature
from travel_sketch.export import write_export
from travel_sketch.geo.loader import empty_layers, load_reference_layers
from travel_sketch.geo.model import Journey
from travel_sketch.geo.projection import bbox_from_anchors
from travel_sketch.layout.constants import CURVATURE_PRESETS
from travel_sketch.parser import parse_journey
from travel_sketch.render import render_svg
from travel_sketch.settings import settings
from travel_sketch.themes import THEMES
from travel_sketch.utils import configure_logging


def _load_journey(input_file: Path, curvature: str | None = None) -> Journey:
    """Parse a journey file, exiting with a message on bad input."""
    try:
        journey = parse_journey(input_file.read_text(encoding="utf-8"))
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)
    if curvature:
        journey.curvature = curvature
    return journey


def _require_drawable(journey: Journey) -> None:
    if not journey.is_drawable:
        click.echo(f"Need at least 2 points to draw a path, got {len(journey.anchors)}",
                   err=True)
        raise SystemExit(1)


def _make_rng(seed: int | None) -> random.Random:
    return random.Random(seed) if seed is not None else random.Random()


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", default=None,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              help="Logging level (default: $TRAVEL_SKETCH_LOG_LEVEL or WARNING)")
def cli(log_level: str | None) -> None:
    """travel-sketch: Draw hand-sketched travel maps from waypoint journeys."""
    configure_logging(log_level or settings.LOG_LEVEL)


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG path. Defaults to a name derived from the title, "
                   "next to the input file")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="paper",
              help="Visual theme (default: paper)")
@click.option("--curvature", type=click.Choice(list(CURVATURE_PRESETS)), default=None,
              help="Override the journey's curvature mode")
@click.option("--seed", type=int, default=None,
              help="Random seed for a reproducible hand-drawn path")
@click.option("--offline", is_flag=True, default=False,
              help="Skip reference geography (draws the fallback grid)")
@click.option("--proxy-url", default=None,
              help="Geo proxy endpoint (default: $TRAVEL_SKETCH_GEO_PROXY_URL)")
@click.option("--timeout", type=float, default=None,
              help="Per-layer fetch timeout in seconds")
@click.option("--preview", is_flag=True, default=False,
              help="Write an on-screen preview (unitless size) instead of a print export")
def render(
    input_file: Path,
    output: Path | None,
    theme: str,
    curvature: str | None,
    seed: int | None,
    offline: bool,
    proxy_url: str | None,
    timeout: float | None,
    preview: bool,
) -> None:
    """Render a journey file to an SVG travel map."""
    journey = _load_journey(input_file, curvature)
    _require_drawable(journey)

    if offline:
        layers = empty_layers()
    else:
        layers = load_reference_layers(
            bbox_from_anchors(journey.anchors),
            base_url=proxy_url,
            timeout=timeout,
        )

    rng = _make_rng(seed)
    theme_obj = THEMES[theme]
    loaded = sum(len(fc["features"]) for fc in layers.values())

    try:
        if preview:
            if output is None:
                output = input_file.with_suffix(".svg")
            output.write_text(render_svg(journey, layers, theme=theme_obj, rng=rng),
                              encoding="utf-8")
        else:
            output = write_export(journey, layers, output,
                                  directory=input_file.parent, theme=theme_obj, rng=rng)
    except OSError as e:
        click.echo(f"Export failed: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"Rendered {len(journey.anchors)} waypoints, "
               f"{loaded} reference features -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output GeoJSON path. Defaults to <input>.geojson")
@click.option("--curvature", type=click.Choice(list(CURVATURE_PRESETS)), default=None,
              help="Override the journey's curvature mode")
@click.option("--seed", type=int, default=None,
              help="Random seed for a reproducible hand-drawn path")
def overlay(
    input_file: Path,
    output: Path | None,
    curvature: str | None,
    seed: int | None,
) -> None:
    """Write the humanized journey as a GeoJSON line for a live map."""
    journey = _load_journey(input_file, curvature)
    _require_drawable(journey)

    feature = journey_to_feature(journey, _make_rng(seed))
    if output is None:
        output = input_file.with_suffix(".geojson")
    output.write_text(json.dumps(feature), encoding="utf-8")
    click.echo(f"Wrote {len(feature['geometry']['coordinates'])} points -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a journey file."""
    journey = _load_journey(input_file)
    _require_drawable(journey)
    click.echo(f"Valid: {len(journey.anchors)} waypoints, "
               f"curvature {journey.curvature}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def info(input_file: Path) -> None:
    """Show information about a journey file."""
    journey = _load_journey(input_file)

    click.echo(f"Title: {journey.title or '(none)'}")
    click.echo(f"Route: {journey.origin or '?'} -> {journey.destination or '?'}")
    click.echo(f"Curvature: {journey.curvature} ({CURVATURE_PRESETS[journey.curvature]})")
    click.echo(f"Waypoints: {len(journey.anchors)}")
    for i, anchor in enumerate(journey.anchors):
        click.echo(f"  [{i}] {anchor.lng:.4f}, {anchor.lat:.4f}")
    if journey.anchors:
        bbox = bbox_from_anchors(journey.anchors)
        click.echo(f"BBox: lng {bbox.min_lng:.4f}..{bbox.max_lng:.4f}, "
                   f"lat {bbox.min_lat:.4f}..{bbox.max_lat:.4f}")
