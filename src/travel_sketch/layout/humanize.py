"""Hand-drawn path synthesis between consecutive anchors.

Each segment is a quadratic Bezier whose control point sits off the chord
midpoint, sampled densely, perturbed perpendicular to the chord by three
sine bands of random frequency and phase, then lightly smoothed. The
segment always starts and ends exactly on its anchors, so consecutive
segments join without gaps.
"""

from __future__ import annotations

import math
import random
from collections.abc import Sequence

from travel_sketch.geo.model import Anchor
from travel_sketch.layout.constants import (
    ASYMMETRY_RANGE,
    BEZIER_STEPS,
    CURVATURE_PRESETS,
    CURVE_VARIATION_RANGE,
    NOISE_AMPLITUDE_RATIO,
    NOISE_BANDS,
    PERP_JITTER_RATIO,
    SMOOTHING_RADIUS,
)


def resolve_curvature(curvature: str | float) -> float:
    """Map a preset name (or a plain number) to a curvature intensity."""
    if isinstance(curvature, str):
        try:
            return CURVATURE_PRESETS[curvature]
        except KeyError:
            choices = ", ".join(CURVATURE_PRESETS)
            raise ValueError(
                f"Unknown curvature preset '{curvature}' (expected one of: {choices})"
            ) from None
    return float(curvature)


def _control_point(
    p0: Anchor,
    p2: Anchor,
    perp: tuple[float, float],
    distance: float,
    curvature: float,
    rng: random.Random,
) -> Anchor:
    d_lng = p2.lng - p0.lng
    d_lat = p2.lat - p0.lat
    mid_lng = (p0.lng + p2.lng) / 2
    mid_lat = (p0.lat + p2.lat) / 2

    offset = distance * curvature * rng.uniform(*CURVE_VARIATION_RANGE)
    asymmetry = rng.uniform(*ASYMMETRY_RANGE)
    jitter = (rng.random() - 0.5) * distance * PERP_JITTER_RATIO

    lateral = offset + jitter
    return Anchor(
        lng=mid_lng + perp[0] * lateral + d_lng * asymmetry,
        lat=mid_lat + perp[1] * lateral + d_lat * asymmetry,
    )


def _sample_bezier(p0: Anchor, p1: Anchor, p2: Anchor, steps: int) -> list[Anchor]:
    points = []
    for i in range(steps + 1):
        t = i / steps
        mt = 1 - t
        points.append(Anchor(
            lng=mt * mt * p0.lng + 2 * mt * t * p1.lng + t * t * p2.lng,
            lat=mt * mt * p0.lat + 2 * mt * t * p1.lat + t * t * p2.lat,
        ))
    return points


def _add_noise(
    points: list[Anchor],
    perp: tuple[float, float],
    distance: float,
    rng: random.Random,
) -> list[Anchor]:
    base = distance * NOISE_AMPLITUDE_RATIO
    freqs = [rng.uniform(lo, hi) for lo, hi, _ in NOISE_BANDS]
    phases = [rng.uniform(0.0, 2 * math.pi) for _ in NOISE_BANDS]
    weights = [w for _, _, w in NOISE_BANDS]

    n = len(points)
    noisy = []
    for i, p in enumerate(points):
        t = i / n
        noise = base * sum(
            w * math.sin(t * math.pi * f + ph)
            for f, ph, w in zip(freqs, phases, weights)
        )
        noisy.append(Anchor(lng=p.lng + perp[0] * noise, lat=p.lat + perp[1] * noise))
    return noisy


def _smooth(points: list[Anchor], radius: int = SMOOTHING_RADIUS) -> list[Anchor]:
    """Centred moving average; ``radius`` points at each end stay as they are."""
    n = len(points)
    window = radius * 2 + 1
    smoothed = []
    for i, p in enumerate(points):
        if i < radius or i >= n - radius:
            smoothed.append(p)
            continue
        neighbours = points[i - radius:i + radius + 1]
        smoothed.append(Anchor(
            lng=sum(q.lng for q in neighbours) / window,
            lat=sum(q.lat for q in neighbours) / window,
        ))
    return smoothed


def humanize(
    p0: Anchor,
    p2: Anchor,
    curvature: str | float,
    rng: random.Random | None = None,
) -> list[Anchor]:
    """Synthesize a hand-drawn polyline from ``p0`` to ``p2`` inclusive.

    ``rng`` supplies every random draw; pass a seeded ``random.Random`` for
    reproducible output. Coincident anchors give a two-point segment.
    """
    k = resolve_curvature(curvature)
    rng = rng or random.Random()

    d_lng = p2.lng - p0.lng
    d_lat = p2.lat - p0.lat
    distance = math.hypot(d_lng, d_lat)
    if distance == 0:
        return [p0, p2]

    perp = (-d_lat / distance, d_lng / distance)
    p1 = _control_point(p0, p2, perp, distance, k, rng)

    points = _sample_bezier(p0, p1, p2, BEZIER_STEPS)
    points = _add_noise(points, perp, distance, rng)
    points = _smooth(points)

    # Pin the ends so segments meet exactly at shared anchors
    points[0] = p0
    points[-1] = p2
    return points


def build_journey_path(
    anchors: Sequence[Anchor],
    curvature: str | float,
    rng: random.Random | None = None,
) -> list[list[Anchor]]:
    """Humanized segments for every consecutive anchor pair, in travel order."""
    if len(anchors) < 2:
        raise ValueError(f"A journey path needs at least 2 anchors, got {len(anchors)}")
    rng = rng or random.Random()
    return [
        humanize(anchors[i], anchors[i + 1], curvature, rng)
        for i in range(len(anchors) - 1)
    ]


def flatten_segments(segments: Sequence[Sequence[Anchor]]) -> list[Anchor]:
    """Concatenate segments into one point list."""
    return [p for segment in segments for p in segment]
