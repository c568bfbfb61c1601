"""SVG composition for travel maps using drawsvg."""

from __future__ import annotations

import random
from collections.abc import Sequence
from datetime import date

import drawsvg as draw
import structlog

from travel_sketch.geo.loader import ReferenceLayers
from travel_sketch.geo.model import Anchor, BoundingBox, Journey, MapMetadata, ProjectionParams
from travel_sketch.geo.projection import bbox_from_anchors, calculate_projection, project_to_svg
from travel_sketch.layout.humanize import build_journey_path
from travel_sketch.render.constants import (
    BORDERS_DASHARRAY,
    BORDERS_OPACITY,
    BORDERS_STROKE_WIDTH,
    COASTLINES_OPACITY,
    COASTLINES_STROKE_WIDTH,
    DEFAULT_TITLE,
    ENDPOINT_RADIUS,
    FOOTER_BAND_HEIGHT,
    FOOTER_FONT_SIZE,
    FOOTER_LETTER_SPACING,
    FOOTER_Y_INSET,
    FRAME_INSET,
    GRID_MERIDIANS,
    GRID_OPACITY,
    GRID_PARALLELS,
    GRID_STROKE_WIDTH,
    LAKES_OPACITY,
    LAND_OPACITY,
    MAP_CLIP_ID,
    PAGE_HEIGHT,
    PAGE_MARGIN,
    PAGE_WIDTH,
    PAPER_FILTER_ID,
    PATH_STROKE_WIDTH,
    RIVERS_OPACITY,
    RIVERS_STROKE_WIDTH,
    ROUTE_FONT_SIZE,
    ROUTE_LETTER_SPACING,
    ROUTE_PLACEHOLDER,
    ROUTE_SEPARATOR,
    ROUTE_Y_OFFSET,
    TITLE_BAND_HEIGHT,
    TITLE_FONT_SIZE,
    TITLE_LETTER_SPACING,
    TITLE_Y_OFFSET,
    VIGNETTE_ID,
    WAYPOINT_RADIUS,
    WAYPOINT_STROKE_WIDTH,
    YEAR_FONT_SIZE,
    YEAR_LETTER_SPACING,
    YEAR_Y_OFFSET,
)
from travel_sketch.render.path import Projector, geometry_to_path, points_to_path
from travel_sketch.render.style import Theme

logger = structlog.get_logger(__name__)

MAP_AREA_WIDTH = PAGE_WIDTH - PAGE_MARGIN * 2
MAP_AREA_HEIGHT = PAGE_HEIGHT - PAGE_MARGIN * 2 - TITLE_BAND_HEIGHT - FOOTER_BAND_HEIGHT


def map_projection(bbox: BoundingBox) -> ProjectionParams:
    """Projection of ``bbox`` onto the central map area of the page."""
    return calculate_projection(bbox, MAP_AREA_WIDTH, MAP_AREA_HEIGHT, 0)


def page_projector(projection: ProjectionParams) -> Projector:
    """Project into page coordinates, below the title band."""
    def project(lng: float, lat: float) -> tuple[float, float]:
        x, y = project_to_svg(lng, lat, projection)
        return PAGE_MARGIN + x, PAGE_MARGIN + TITLE_BAND_HEIGHT + y
    return project


def route_label(origin: str, destination: str) -> str:
    if origin and destination:
        return f"{origin.upper()}{ROUTE_SEPARATOR}{destination.upper()}"
    if origin:
        return origin.upper()
    return ROUTE_PLACEHOLDER


def footer_caption(n_anchors: int, created: date) -> str:
    return f"{n_anchors} waypoints · Created {created.day} {created.strftime('%B %Y')}"


def _paper_defs(theme: Theme) -> str:
    return (
        f'<filter id="{PAPER_FILTER_ID}">'
        f'<feTurbulence type="fractalNoise" baseFrequency="{theme.texture_frequency}" '
        f'numOctaves="{theme.texture_octaves}" result="noise"/>'
        '<feColorMatrix in="noise" type="saturate" values="0" result="desaturatedNoise"/>'
        '<feComponentTransfer in="desaturatedNoise" result="theNoise">'
        f'<feFuncA type="discrete" tableValues="0 0 0 0 0 {theme.texture_alpha} 0"/>'
        '</feComponentTransfer>'
        '<feBlend in="SourceGraphic" in2="theNoise" mode="multiply"/>'
        '</filter>'
        f'<radialGradient id="{VIGNETTE_ID}">'
        '<stop offset="30%" stop-color="rgba(0,0,0,0)"/>'
        f'<stop offset="100%" stop-color="{theme.vignette_color}"/>'
        '</radialGradient>'
    )


def _map_clip() -> draw.ClipPath:
    """Clip region covering the central map area."""
    clip = draw.ClipPath(id=MAP_CLIP_ID)
    clip.append(draw.Rectangle(
        PAGE_MARGIN, PAGE_MARGIN + TITLE_BAND_HEIGHT, MAP_AREA_WIDTH, MAP_AREA_HEIGHT,
    ))
    return clip


def _render_paper(d: draw.Drawing, theme: Theme) -> None:
    """Paper fill, grain texture and vignette."""
    d.append_def(draw.Raw(_paper_defs(theme)))
    d.append(draw.Rectangle(0, 0, PAGE_WIDTH, PAGE_HEIGHT, fill=theme.paper_color))
    d.append(draw.Rectangle(
        0, 0, PAGE_WIDTH, PAGE_HEIGHT,
        fill=theme.paper_color,
        filter=f"url(#{PAPER_FILTER_ID})",
    ))
    d.append(draw.Rectangle(0, 0, PAGE_WIDTH, PAGE_HEIGHT, fill=f"url(#{VIGNETTE_ID})"))


def _layer_styles(theme: Theme) -> list[tuple[str, dict]]:
    """Reference layers back to front with their group styles."""
    return [
        ("land", dict(opacity=LAND_OPACITY, fill=theme.land_fill, stroke="none")),
        ("lakes", dict(opacity=LAKES_OPACITY, fill=theme.lake_fill, stroke="none")),
        ("rivers", dict(
            opacity=RIVERS_OPACITY,
            stroke=theme.river_stroke,
            stroke_width=RIVERS_STROKE_WIDTH,
            fill="none",
            stroke_linecap="round",
        )),
        ("coastlines", dict(
            opacity=COASTLINES_OPACITY,
            stroke=theme.coastline_stroke,
            stroke_width=COASTLINES_STROKE_WIDTH,
            fill="none",
            stroke_linecap="round",
            stroke_linejoin="round",
        )),
        ("borders", dict(
            opacity=BORDERS_OPACITY,
            stroke=theme.border_stroke,
            stroke_width=BORDERS_STROKE_WIDTH,
            fill="none",
            stroke_dasharray=BORDERS_DASHARRAY,
            stroke_linecap="round",
        )),
    ]


def _render_reference_layers(
    d: draw.Drawing,
    layers: ReferenceLayers,
    project: Projector,
    theme: Theme,
    clip: draw.ClipPath,
) -> int:
    """Render each non-empty reference layer as one styled group.

    A feature that cannot be serialized is skipped; its siblings still render.
    Returns the number of groups appended.
    """
    emitted = 0
    for name, style in _layer_styles(theme):
        features = layers.get(name, {}).get("features") or []
        group = draw.Group(id=f"layer-{name}", clip_path=clip, **style)
        count = 0
        for feature in features:
            try:
                path_data = geometry_to_path(feature, project)
            except (TypeError, ValueError, KeyError) as exc:
                logger.warning("Skipping unrenderable feature", layer=name, error=str(exc))
                continue
            if path_data:
                group.append(draw.Path(d=path_data))
                count += 1
        if count:
            d.append(group)
            emitted += 1
    return emitted


def _render_grid(
    d: draw.Drawing,
    bbox: BoundingBox,
    project: Projector,
    theme: Theme,
    clip: draw.ClipPath,
) -> None:
    """Evenly spaced meridians and parallels across the bounding box."""
    group = draw.Group(
        id="layer-grid",
        clip_path=clip,
        opacity=GRID_OPACITY,
        stroke=theme.grid_stroke,
        stroke_width=GRID_STROKE_WIDTH,
        fill="none",
    )
    for i in range(GRID_MERIDIANS):
        lng = bbox.min_lng + bbox.width * i / (GRID_MERIDIANS - 1)
        x1, y1 = project(lng, bbox.max_lat)
        x2, y2 = project(lng, bbox.min_lat)
        group.append(draw.Line(x1, y1, x2, y2))
    for i in range(GRID_PARALLELS):
        lat = bbox.min_lat + bbox.height * i / (GRID_PARALLELS - 1)
        x1, y1 = project(bbox.min_lng, lat)
        x2, y2 = project(bbox.max_lng, lat)
        group.append(draw.Line(x1, y1, x2, y2))
    d.append(group)


def _render_journey(
    d: draw.Drawing,
    segments: Sequence[Sequence[Anchor]],
    anchors: Sequence[Anchor],
    project: Projector,
    theme: Theme,
) -> None:
    """Journey stroke, then endpoint dots and hollow waypoint rings."""
    d.append(draw.Path(
        d=points_to_path(segments, project),
        id="journey",
        stroke=theme.ink_color,
        stroke_width=PATH_STROKE_WIDTH,
        fill="none",
        stroke_linecap="round",
        stroke_linejoin="round",
    ))

    markers = draw.Group(id="anchors")
    last = len(anchors) - 1
    for i, anchor in enumerate(anchors):
        x, y = project(anchor.lng, anchor.lat)
        if i == 0 or i == last:
            markers.append(draw.Circle(x, y, ENDPOINT_RADIUS, fill=theme.ink_color))
        else:
            markers.append(draw.Circle(
                x, y, WAYPOINT_RADIUS,
                fill="none",
                stroke=theme.ink_color,
                stroke_width=WAYPOINT_STROKE_WIDTH,
            ))
    d.append(markers)


def _render_typography(
    d: draw.Drawing,
    metadata: MapMetadata,
    n_anchors: int,
    theme: Theme,
) -> None:
    created = metadata.created or date.today()
    cx = PAGE_WIDTH / 2
    text_style = dict(text_anchor="middle", font_family=theme.font_family)

    d.append(draw.Text(
        metadata.title or DEFAULT_TITLE,
        TITLE_FONT_SIZE,
        cx, PAGE_MARGIN + TITLE_Y_OFFSET,
        fill=theme.ink_color,
        letter_spacing=TITLE_LETTER_SPACING,
        **text_style,
    ))
    d.append(draw.Text(
        route_label(metadata.origin, metadata.destination),
        ROUTE_FONT_SIZE,
        cx, PAGE_MARGIN + ROUTE_Y_OFFSET,
        fill=theme.label_color,
        letter_spacing=ROUTE_LETTER_SPACING,
        **text_style,
    ))
    d.append(draw.Text(
        str(created.year),
        YEAR_FONT_SIZE,
        cx, PAGE_MARGIN + YEAR_Y_OFFSET,
        fill=theme.label_color,
        letter_spacing=YEAR_LETTER_SPACING,
        **text_style,
    ))
    d.append(draw.Text(
        footer_caption(n_anchors, created),
        FOOTER_FONT_SIZE,
        cx, PAGE_HEIGHT - PAGE_MARGIN - FOOTER_Y_INSET,
        fill=theme.caption_color,
        letter_spacing=FOOTER_LETTER_SPACING,
        **text_style,
    ))


def compose(
    layers: ReferenceLayers,
    segments: Sequence[Sequence[Anchor]],
    anchors: Sequence[Anchor],
    metadata: MapMetadata,
    projection: ProjectionParams,
    *,
    theme: Theme | None = None,
    units: str | None = None,
) -> draw.Drawing:
    """Assemble the full page.

    Back to front: paper, reference layers clipped to the map area (or the
    fallback grid when no layer draws anything), journey, anchors, typography,
    frame. ``units`` sets the physical size of the document (e.g. ``"mm"``);
    None leaves it unitless.
    """
    if len(anchors) < 2:
        raise ValueError(f"A travel map needs at least 2 anchors, got {len(anchors)}")

    d = draw.Drawing(PAGE_WIDTH, PAGE_HEIGHT)
    if units:
        d.set_render_size(f"{PAGE_WIDTH:g}{units}", f"{PAGE_HEIGHT:g}{units}")

    if theme is None:
        from travel_sketch.themes import PAPER_THEME
        theme = PAPER_THEME

    project = page_projector(projection)

    _render_paper(d, theme)

    clip = _map_clip()
    if not _render_reference_layers(d, layers, project, theme, clip):
        logger.info("No reference geography, drawing fallback grid")
        _render_grid(d, projection.bbox, project, theme, clip)

    _render_journey(d, segments, anchors, project, theme)
    _render_typography(d, metadata, len(anchors), theme)

    d.append(draw.Rectangle(
        PAGE_MARGIN - FRAME_INSET, PAGE_MARGIN - FRAME_INSET,
        PAGE_WIDTH - PAGE_MARGIN * 2 + FRAME_INSET * 2,
        PAGE_HEIGHT - PAGE_MARGIN * 2 + FRAME_INSET * 2,
        fill="none",
        stroke=theme.frame_stroke,
        stroke_width=theme.frame_stroke_width,
    ))
    return d


def render_svg(
    journey: Journey,
    layers: ReferenceLayers,
    *,
    theme: Theme | None = None,
    rng: random.Random | None = None,
    created: date | None = None,
    units: str | None = None,
) -> str:
    """Render a journey and its reference layers to SVG text."""
    if not journey.is_drawable:
        raise ValueError(
            f"A travel map needs at least 2 anchors, got {len(journey.anchors)}"
        )
    bbox = bbox_from_anchors(journey.anchors)
    projection = map_projection(bbox)
    segments = build_journey_path(journey.anchors, journey.curvature, rng)
    d = compose(
        layers,
        segments,
        journey.anchors,
        journey.metadata(created),
        projection,
        theme=theme,
        units=units,
    )
    return d.as_svg()
