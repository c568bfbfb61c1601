"""Path humanizer constants.

Centralizes the numbers that shape a hand-drawn journey segment.
"""

# ---------------------------------------------------------------------------
# Curvature
# ---------------------------------------------------------------------------
CURVATURE_PRESETS: dict[str, float] = {
    "calm": 0.08,
    "balanced": 0.11,
    "tension": 0.14,
}
"""Named curvature tiers: control point offset as a fraction of chord length."""

DEFAULT_CURVATURE: str = "balanced"
"""Preset used when none is given."""

CURVE_VARIATION_RANGE: tuple[float, float] = (0.8, 1.0)
"""Random factor applied to the curvature offset of each segment."""

PERP_JITTER_RATIO: float = 0.03
"""Total width of the lateral control point jitter (+/-1.5% of chord)."""

ASYMMETRY_RANGE: tuple[float, float] = (-0.05, 0.05)
"""Shift of the control point along the chord, as a fraction of chord."""

# ---------------------------------------------------------------------------
# Sampling
# ---------------------------------------------------------------------------
BEZIER_STEPS: int = 100
"""Parameter steps along the quadratic Bezier (steps + 1 samples)."""

# ---------------------------------------------------------------------------
# Noise
# ---------------------------------------------------------------------------
NOISE_AMPLITUDE_RATIO: float = 0.008
"""Base noise amplitude as a fraction of chord length."""

NOISE_BANDS: tuple[tuple[float, float, float], ...] = (
    (3.0, 5.0, 1.0),
    (8.0, 12.0, 0.5),
    (15.0, 20.0, 0.25),
)
"""(min frequency, max frequency, amplitude weight) per sine band."""

# ---------------------------------------------------------------------------
# Smoothing
# ---------------------------------------------------------------------------
SMOOTHING_RADIUS: int = 2
"""Half-width of the centred moving average window."""
