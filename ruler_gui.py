#!/usr/bin/env python3
"""
RULER_GUI.PY - Tkinter viewer for EDO/JI rulers

Four entry fields (EDO list, prime limit, odd limit, height) drive a
vertically scrollable canvas. Up/Down arrows step the limits through
valid values only (primes for the prime limit, odd numbers for the odd
limit); leaving a field snaps it to the nearest valid value.
"""

import tkinter as tk
from tkinter import ttk

from ruler_config import get_defaults
from ruler_drawing import draw_ruler, render_ruler
from ruler_models import EDO_LINE_RIGHT_POSITION, Drawable, InvalidParameterError
from ruler_svg import tick_geometry
from ruler_validation import (
    coerce_odd,
    coerce_prime,
    has_errors,
    parse_edo_values,
    step_odd,
    step_prime,
    validate_parameters,
)

CANVAS_WIDTH = 900
CANVAS_MARGIN = 20
HEIGHT_STEP = 50


def _step_edo_text(text, direction):
    """Step the last EDO of a comma-separated list by one."""
    values = parse_edo_values(text)
    if values:
        values[-1] = max(values[-1] + direction, 1)
    return ", ".join(str(v) for v in values)


class CanvasSurface:
    """Draws ticks onto a Tk canvas, offset so EDO labels fit on the left."""

    def __init__(self, canvas: tk.Canvas, x_offset: float, y_offset: float):
        self.canvas = canvas
        self.x_offset = x_offset
        self.y_offset = y_offset

    def draw_interval(self, drawable: Drawable):
        x_start, x_end, label_x, anchor = tick_geometry(drawable)
        y = self.y_offset + drawable.position
        self.canvas.create_line(self.x_offset + x_start, y, self.x_offset + x_end, y,
                                fill=drawable.color)
        self.canvas.create_text(self.x_offset + label_x, y, text=drawable.label,
                                anchor='w' if anchor == 'start' else 'e',
                                fill=drawable.color if drawable.is_ji else 'black',
                                font=('TkDefaultFont', 8))


class RulerViewer:
    """GUI for exploring EDO/JI rulers."""

    def __init__(self, root):
        self.root = root
        self.root.title("EDO / JI Ruler")
        defaults = get_defaults()

        main_frame = ttk.Frame(root, padding="10")
        main_frame.grid(row=0, column=0, sticky="nsew")
        root.columnconfigure(0, weight=1)
        root.rowconfigure(0, weight=1)
        main_frame.columnconfigure(0, weight=1)
        main_frame.rowconfigure(1, weight=1)

        # Input row
        input_frame = ttk.Frame(main_frame)
        input_frame.grid(row=0, column=0, sticky="ew", pady=(0, 10))

        self.edo_var = tk.StringVar(value=", ".join(str(e) for e in defaults.edo_values))
        self.prime_var = tk.StringVar(value=str(defaults.prime_limit))
        self.odd_var = tk.StringVar(value=str(defaults.odd_limit))
        self.height_var = tk.StringVar(value=str(defaults.ruler_height))

        self._create_entry(input_frame, 0, "EDO(s)", self.edo_var, _step_edo_text, None, width=14)
        self._create_entry(input_frame, 2, "Prime limit", self.prime_var,
                           lambda text, d: str(step_prime(int(text), d)), coerce_prime)
        self._create_entry(input_frame, 4, "Odd limit", self.odd_var,
                           lambda text, d: str(step_odd(int(text), d)), coerce_odd)
        self._create_entry(input_frame, 6, "Height (px)", self.height_var,
                           lambda text, d: str(max(int(text) + d * HEIGHT_STEP, HEIGHT_STEP)), None)

        ttk.Button(input_frame, text="Apply", command=self.redraw).grid(row=0, column=8, padx=5)

        # Scrollable canvas
        canvas_frame = ttk.Frame(main_frame)
        canvas_frame.grid(row=1, column=0, sticky="nsew")
        canvas_frame.columnconfigure(0, weight=1)
        canvas_frame.rowconfigure(0, weight=1)

        self.canvas = tk.Canvas(canvas_frame, width=CANVAS_WIDTH, height=600, background='white')
        scrollbar = ttk.Scrollbar(canvas_frame, orient=tk.VERTICAL, command=self.canvas.yview)
        self.canvas.configure(yscrollcommand=scrollbar.set)
        self.canvas.grid(row=0, column=0, sticky="nsew")
        scrollbar.grid(row=0, column=1, sticky="ns")

        # Status label
        self.status_var = tk.StringVar(value="Ready")
        ttk.Label(main_frame, textvariable=self.status_var).grid(row=2, column=0, sticky="w", pady=(10, 0))

        root.bind("<Return>", lambda event: self.redraw())
        self.redraw()

    def _create_entry(self, parent, column, label, var, stepper, coercer, width=6):
        """Create a labeled entry with arrow-key stepping."""
        ttk.Label(parent, text=label).grid(row=0, column=column, sticky="w", padx=(0, 3))
        entry = ttk.Entry(parent, textvariable=var, width=width)
        entry.grid(row=0, column=column + 1, sticky="w", padx=(0, 10))

        def on_arrow(direction):
            try:
                var.set(stepper(var.get(), direction))
            except ValueError:
                return "break"
            self.redraw()
            return "break"

        def on_leave(event):
            if coercer is None:
                return
            try:
                var.set(str(coercer(int(var.get()))))
            except ValueError:
                pass  # left for validation to report

        entry.bind("<Up>", lambda event: on_arrow(+1))
        entry.bind("<Down>", lambda event: on_arrow(-1))
        entry.bind("<FocusOut>", on_leave)

    def _read_inputs(self):
        """Parse the entry fields. Raises ValueError on non-numeric input."""
        return (parse_edo_values(self.edo_var.get()),
                int(self.prime_var.get()),
                int(self.odd_var.get()),
                int(self.height_var.get()))

    def redraw(self):
        """Rebuild the ruler from the current inputs."""
        try:
            edo_values, prime_limit, odd_limit, ruler_height = self._read_inputs()
        except ValueError as e:
            self.status_var.set(f"Error: {e}")
            return

        violations = validate_parameters(edo_values, prime_limit, odd_limit, ruler_height)
        if has_errors(violations):
            self.status_var.set("Error: " + "; ".join(v.message for v in violations
                                                      if v.severity == "error"))
            return

        try:
            drawables = render_ruler(edo_values, prime_limit, odd_limit, ruler_height)
        except InvalidParameterError as e:
            self.status_var.set(f"Error: {e}")
            return

        self.canvas.delete("all")
        surface = CanvasSurface(self.canvas, x_offset=CANVAS_WIDTH / 2 - EDO_LINE_RIGHT_POSITION,
                                y_offset=CANVAS_MARGIN)
        count = draw_ruler(drawables, surface)
        self.canvas.configure(scrollregion=(0, 0, CANVAS_WIDTH, ruler_height + 2 * CANVAS_MARGIN))

        warnings = [v.message for v in violations if v.severity == "warning"]
        status = f"{count} ticks"
        if warnings:
            status += " | " + "; ".join(warnings)
        self.status_var.set(status)


def main():
    root = tk.Tk()
    RulerViewer(root)
    root.mainloop()


if __name__ == "__main__":
    main()
