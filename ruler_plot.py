#!/usr/bin/env python3
"""
RULER_PLOT.PY - Raster (PNG) rendering of a ruler with matplotlib

Same layout as the SVG output, drawn in pixel units on a matplotlib
axes with faint 100-cent gridlines. Useful for quick previews.
"""

from typing import Iterable, List, Optional

import matplotlib.pyplot as plt
import numpy as np

from ruler_drawing import draw_ruler
from ruler_models import CENTS_PER_OCTAVE, EDO_LINE_RIGHT_POSITION, JI_LINE_LEFT_POSITION, Drawable
from ruler_svg import tick_geometry

GRID_COLOR = '#dddddd'
GRID_STEP_CENTS = 100
DPI = 100


class PlotRulerRenderer:
    """Renders ruler drawables onto a matplotlib figure."""

    def __init__(self, ruler_height: float, font_size: float = 7, width_px: int = 900):
        self.ruler_height = ruler_height
        self.font_size = font_size
        self.width_px = width_px
        self.drawables: List[Drawable] = []

    def draw_interval(self, drawable: Drawable):
        self.drawables.append(drawable)

    def build_figure(self):
        """Create the figure for the queued drawables. Returns (fig, ax)."""
        margin = 40
        height_px = self.ruler_height + 2 * margin
        fig = plt.figure(figsize=(self.width_px / DPI, height_px / DPI), dpi=DPI)
        ax = fig.add_axes([0, 0, 1, 1])

        # Ruler origin sits mid-canvas so EDO labels have room on the left
        x_offset = self.width_px / 2 - JI_LINE_LEFT_POSITION
        ax.set_xlim(0, self.width_px)
        ax.set_ylim(self.ruler_height + margin, -margin)  # unison at the top
        ax.axis('off')

        grid = np.arange(0, CENTS_PER_OCTAVE + 1, GRID_STEP_CENTS) / CENTS_PER_OCTAVE * self.ruler_height
        ax.hlines(grid, 0, self.width_px, colors=GRID_COLOR, linewidth=0.5, zorder=0)

        axis_x = x_offset + (EDO_LINE_RIGHT_POSITION + JI_LINE_LEFT_POSITION) / 2
        ax.vlines(axis_x, 0, self.ruler_height, colors='#999999', linewidth=0.5, zorder=1)

        for d in self.drawables:
            x_start, x_end, label_x, anchor = tick_geometry(d)
            ax.hlines(d.position, x_offset + x_start, x_offset + x_end,
                      colors=d.color, linewidth=1.0, zorder=2)
            ax.text(x_offset + label_x, d.position, d.label,
                    ha='left' if anchor == 'start' else 'right', va='center',
                    fontsize=self.font_size, family='sans-serif',
                    color=d.color if d.is_ji else 'black', zorder=3)

        return fig, ax

    def render(self, drawables: Iterable[Drawable], output_path: Optional[str] = None):
        """Draw all drawables; save to output_path or show interactively."""
        self.drawables = []
        draw_ruler(drawables, self)
        fig, _ = self.build_figure()
        if output_path is None:
            plt.show()
        else:
            fig.savefig(output_path, dpi=DPI, facecolor='white')
            print(f"Plot saved to {output_path} ({len(self.drawables)} ticks)")
        plt.close(fig)
