#!/usr/bin/env python3
"""Batch render every example journey to SVG (and optionally PNG).

Outputs go to /tmp/travel_sketch_renders/.

Usage:
    python scripts/render_examples.py [--online] [--seed N]
"""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from travel_sketch.geo.loader import (  # noqa: E402
    empty_layers,
    has_any_features,
    load_reference_layers,
)
from travel_sketch.geo.projection import bbox_from_anchors  # noqa: E402
from travel_sketch.parser import parse_journey  # noqa: E402
from travel_sketch.render.svg import render_svg  # noqa: E402

OUTPUT_DIR = Path("/tmp/travel_sketch_renders")
EXAMPLES_DIR = project_root / "examples"


def render_file(
    journey_path: Path, output_dir: Path, *, online: bool = False, seed: int | None = None
) -> tuple[str, list[str]]:
    """Parse and render a journey file to SVG (and optionally PNG).

    Returns (name, list_of_issues).
    """
    name = journey_path.stem
    issues: list[str] = []

    try:
        journey = parse_journey(journey_path.read_text(encoding="utf-8"))
    except ValueError as e:
        return name, [f"PARSE ERROR: {e}"]

    if not journey.is_drawable:
        return name, [f"SKIPPED: {len(journey.anchors)} waypoint(s)"]

    layers = (
        load_reference_layers(bbox_from_anchors(journey.anchors))
        if online
        else empty_layers()
    )
    if online and not has_any_features(layers):
        issues.append("no reference layers loaded")

    rng = random.Random(seed) if seed is not None else None
    try:
        svg_str = render_svg(journey, layers, rng=rng)
    except ValueError as e:
        return name, [f"RENDER ERROR: {e}"]

    svg_path = output_dir / f"{name}.svg"
    svg_path.write_text(svg_str, encoding="utf-8")

    # Try PNG conversion via cairosvg (optional)
    try:
        import cairosvg

        png_path = output_dir / f"{name}.png"
        cairosvg.svg2png(bytestring=svg_str.encode(), write_to=str(png_path), scale=2)
    except ImportError:
        issues.append("cairosvg not available, skipping PNG")
    except Exception as e:
        issues.append(f"PNG conversion error: {e}")

    return name, issues


def main():
    parser = argparse.ArgumentParser(description="Batch render example journeys")
    parser.add_argument(
        "--online", action="store_true", help="Fetch reference layers from the geo proxy"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for paths")
    args = parser.parse_args()

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    all_files = sorted(EXAMPLES_DIR.glob("*.json"))
    print(f"Rendering {len(all_files)} files to {OUTPUT_DIR}/")
    print()

    max_name_len = max(len(f.stem) for f in all_files)
    any_errors = False

    for journey_path in all_files:
        name, issues = render_file(journey_path, OUTPUT_DIR, online=args.online, seed=args.seed)
        status = "OK" if not issues else "ISSUES"
        if any("ERROR" in i for i in issues):
            status = "FAIL"
            any_errors = True

        print(f"  {name:<{max_name_len}}  [{status}]")
        for issue in issues:
            print(f"    - {issue}")

    print(f"\nOutputs in: {OUTPUT_DIR}/")

    if any_errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
