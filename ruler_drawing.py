#!/usr/bin/env python3
"""
RULER_DRAWING.PY - Build the ruler as a list of drawables

Contains:
- render_ruler: EDO steps + JI intervals -> ordered Drawable list
- IntervalSurface: anything that can materialize a Drawable
- draw_ruler: feed drawables to a surface
"""

import logging
from typing import Iterable, List, Protocol, Sequence

from ruler_encoder import edo_style, position_for_cents, style_for_interval
from ruler_intervals import edo_steps, generate_intervals
from ruler_models import EDO_SIDE, JI_SIDE, Drawable, InvalidParameterError

logger = logging.getLogger(__name__)


class IntervalSurface(Protocol):
    """Output target for drawables (SVG file, matplotlib axes, Tk canvas)."""

    def draw_interval(self, drawable: Drawable) -> None: ...


def _unique(values: Iterable[int]) -> List[int]:
    seen = []
    for v in values:
        if v not in seen:
            seen.append(v)
    return seen


def render_ruler(edo_values: Sequence[int], prime_limit: int, odd_limit: int,
                 ruler_height: float) -> List[Drawable]:
    """Compute every tick of the ruler.

    EDO ticks come first (right side, one color/length per EDO system),
    followed by the JI ticks (left side, colored and sized by dominant prime).

    Args:
        edo_values: One or more EDO step counts
        prime_limit: Largest prime allowed in a JI ratio (>= 2)
        odd_limit: Largest odd part allowed in a JI ratio (>= 1)
        ruler_height: Pixel distance from unison to octave

    Raises:
        InvalidParameterError: for an empty/non-positive EDO list, a
            non-positive height, or limits below their minimum.
    """
    edos = _unique(edo_values)
    if not edos:
        raise InvalidParameterError("At least one EDO value is required")
    for edo in edos:
        if edo < 1:
            raise InvalidParameterError(f"EDO values must be positive (got {edo})")
    if ruler_height <= 0:
        raise InvalidParameterError(f"Ruler height must be positive (got {ruler_height})")

    # Generate first so bad limits fail before any work is done
    intervals = generate_intervals(prime_limit, odd_limit)

    drawables = []
    batch_min, batch_max = min(edos), max(edos)

    for edo in edos:
        color, length = edo_style(edo, batch_min, batch_max)
        for step in edo_steps(edo):
            drawables.append(Drawable(
                position=position_for_cents(step.cents, ruler_height),
                label=step.label,
                color=color,
                line_length=length,
                side=EDO_SIDE,
                cents=step.cents,
            ))

    for interval in intervals:
        color, length = style_for_interval(interval, prime_limit)
        drawables.append(Drawable(
            position=position_for_cents(interval.cents, ruler_height),
            label=interval.label,
            color=color,
            line_length=length,
            side=JI_SIDE,
            cents=interval.cents,
        ))

    logger.info("Ruler: %d EDO ticks from %s, %d JI ticks (%d-limit, %d-odd-limit)",
                len(drawables) - len(intervals), edos, len(intervals),
                prime_limit, odd_limit)
    return drawables


def draw_ruler(drawables: Iterable[Drawable], surface: IntervalSurface) -> int:
    """Hand each drawable to the surface in order. Returns the count drawn."""
    count = 0
    for drawable in drawables:
        surface.draw_interval(drawable)
        count += 1
    return count
