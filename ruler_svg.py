#!/usr/bin/env python3
"""
RULER_SVG.PY - SVG rendering for EDO/JI rulers

Contains:
- tick_geometry: horizontal layout of one tick and its label
- SvgRulerRenderer: collects drawables and writes them with svgwrite
"""

from typing import Iterable, List, Optional, Tuple

import svgwrite

from ruler_drawing import draw_ruler
from ruler_models import (
    EDO_LINE_RIGHT_POSITION,
    JI_LINE_LEFT_POSITION,
    LABEL_PADDING,
    Drawable,
)

AXIS_COLOR = '#999999'
LINE_THICKNESS = 1.0


def tick_geometry(drawable: Drawable) -> Tuple[float, float, float, str]:
    """Return (x_start, x_end, label_x, label_anchor) relative to the ruler origin.

    JI ticks start at JI_LINE_LEFT_POSITION and extend right with the label
    after the tick. EDO ticks end at EDO_LINE_RIGHT_POSITION and extend
    left with a right-aligned label before the tick.
    """
    if drawable.is_ji:
        x_start = JI_LINE_LEFT_POSITION
        x_end = x_start + drawable.line_length
        return x_start, x_end, x_end + LABEL_PADDING, 'start'
    x_end = EDO_LINE_RIGHT_POSITION
    x_start = x_end - drawable.line_length
    return x_start, x_end, x_start - LABEL_PADDING, 'end'


class SvgRulerRenderer:
    """Renders ruler drawables to SVG using svgwrite."""

    def __init__(self, ruler_height: Optional[float] = None, font_size: float = 10,
                 padding: float = 20):
        self.ruler_height = ruler_height
        self.font_size = font_size
        self.padding = padding
        self.drawables: List[Drawable] = []

    def draw_interval(self, drawable: Drawable):
        """Queue one tick; nothing is written until save()."""
        self.drawables.append(drawable)

    def _text_width(self, text: str) -> float:
        """Rough label width; SVG has no text metrics before display."""
        return len(text) * self.font_size * 0.6

    def _calculate_bounds(self):
        """Calculate SVG bounds from tick and label extents."""
        left = [0.0]
        right = [JI_LINE_LEFT_POSITION]
        for d in self.drawables:
            x_start, x_end, label_x, anchor = tick_geometry(d)
            if anchor == 'end':
                left.append(label_x - self._text_width(d.label))
            else:
                right.append(label_x + self._text_width(d.label))

        height = self.ruler_height
        if height is None:
            height = max((d.position for d in self.drawables), default=0.0)

        # Shift everything right so the widest EDO label fits
        self.origin_x = self.padding - min(left)
        self.origin_y = self.padding + self.font_size / 2
        self.width = int(self.origin_x + max(right) + self.padding)
        self.height = int(height + 2 * self.origin_y)
        self.axis_height = height

    def _tx(self, x: float) -> float:
        """Transform ruler X to SVG space."""
        return self.origin_x + x

    def _ty(self, y: float) -> float:
        """Transform ruler position to SVG space."""
        return self.origin_y + y

    def render(self, drawables: Iterable[Drawable], output_path: str):
        """Draw all drawables and save to output_path."""
        self.drawables = []
        draw_ruler(drawables, self)
        self.save(output_path)

    def save(self, output_path: str):
        """Write the queued drawables to an SVG file."""
        self._calculate_bounds()

        dwg = svgwrite.Drawing(output_path, size=(self.width, self.height),
                               viewBox=f'0 0 {self.width} {self.height}')

        # White background
        dwg.add(dwg.rect((0, 0), (self.width, self.height), fill='white'))

        self._draw_axis(dwg)

        edo_group = dwg.g(id='edo')
        ji_group = dwg.g(id='ji')
        for d in self.drawables:
            self._draw_tick(dwg, ji_group if d.is_ji else edo_group, d)
        dwg.add(edo_group)
        dwg.add(ji_group)

        dwg.save()
        print(f"SVG saved to {output_path} ({len(self.drawables)} ticks)")

    def _draw_axis(self, dwg):
        """Vertical line through the gap between EDO and JI ticks."""
        axis_x = self._tx((EDO_LINE_RIGHT_POSITION + JI_LINE_LEFT_POSITION) / 2)
        dwg.add(dwg.line(
            (axis_x, self._ty(0)),
            (axis_x, self._ty(self.axis_height)),
            stroke=AXIS_COLOR,
            stroke_width=0.5,
        ))

    def _draw_tick(self, dwg, group, d: Drawable):
        """Draw a tick line and its label."""
        x_start, x_end, label_x, anchor = tick_geometry(d)
        y = self._ty(d.position)

        group.add(dwg.line(
            (self._tx(x_start), y),
            (self._tx(x_end), y),
            stroke=d.color,
            stroke_width=LINE_THICKNESS,
        ))
        group.add(dwg.text(
            d.label,
            insert=(self._tx(label_x), y),
            text_anchor=anchor,
            dominant_baseline='middle',
            font_size=f"{self.font_size}px",
            font_family='sans-serif',
            # EDO labels stay black for legibility against light grays
            fill=d.color if d.is_ji else 'black',
        ))
