#!/usr/bin/env python3
"""
EDO_RULER.PY - Compare equal divisions of the octave against just intonation

Draws a vertical ruler with EDO steps on the left of the axis and all JI
ratios within a prime limit and odd limit on the right, colored and
sized by each ratio's largest prime.

Usage:
    python3 edo_ruler.py                                   # 12-EDO, 7-limit, 15-odd-limit
    python3 edo_ruler.py --edo 12,19,31 --prime-limit 5    # Several EDOs at once
    python3 edo_ruler.py --odd-limit 9 --png ruler.png     # Also write a PNG preview
    python3 edo_ruler.py --report-only                     # Only print the interval table
    python3 edo_ruler.py --config ruler.json               # Defaults from a JSON file
"""

import argparse
import logging
import sys

from ruler_config import load_config
from ruler_drawing import render_ruler
from ruler_intervals import generate_intervals
from ruler_models import InvalidParameterError
from ruler_report import generate_report, print_report
from ruler_svg import SvgRulerRenderer
from ruler_validation import has_errors, parse_edo_values, print_violation_report, validate_parameters

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Generate an EDO vs. JI ruler')
    parser.add_argument('--config', default=None,
                        help='JSON file with default parameters')
    parser.add_argument('--edo', default=None,
                        help='Comma-separated EDO step counts (default: 12)')
    parser.add_argument('--prime-limit', type=int, default=None,
                        help='Largest prime allowed in JI ratios (default: 7)')
    parser.add_argument('--odd-limit', type=int, default=None,
                        help='Largest odd part allowed in JI ratios (default: 15)')
    parser.add_argument('--height', type=int, default=None,
                        help='Ruler height in pixels from 1/1 to 2/1 (default: 1200)')
    parser.add_argument('--output', default=None,
                        help='Output SVG path (default: ruler.svg)')
    parser.add_argument('--png', default=None,
                        help='Also render a PNG preview to this path')
    parser.add_argument('--report', action='store_true',
                        help='Print the interval table')
    parser.add_argument('--report-only', action='store_true',
                        help='Only print the interval table, do not render')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    try:
        config = load_config(args.config)
        if args.edo is not None:
            config.edo_values = parse_edo_values(args.edo)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.prime_limit is not None:
        config.prime_limit = args.prime_limit
    if args.odd_limit is not None:
        config.odd_limit = args.odd_limit
    if args.height is not None:
        config.ruler_height = args.height
    if args.output is not None:
        config.output = args.output
    logger.debug("Effective config: %s", config)

    print(f"EDO(s): {', '.join(str(e) for e in config.edo_values)}")
    print(f"Prime limit: {config.prime_limit}, odd limit: {config.odd_limit}")
    print(f"Ruler height: {config.ruler_height} px")

    violations = validate_parameters(config.edo_values, config.prime_limit,
                                     config.odd_limit, config.ruler_height)
    if violations:
        print_violation_report(violations)
    if has_errors(violations):
        print("ERROR: Invalid parameters, nothing rendered", file=sys.stderr)
        return 2

    try:
        if args.report or args.report_only:
            intervals = generate_intervals(config.prime_limit, config.odd_limit)
            print_report(generate_report(intervals, config.edo_values))
        if args.report_only:
            return 0
        drawables = render_ruler(config.edo_values, config.prime_limit,
                                 config.odd_limit, config.ruler_height)
    except InvalidParameterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    SvgRulerRenderer(ruler_height=config.ruler_height).render(drawables, config.output)

    if args.png:
        from ruler_plot import PlotRulerRenderer
        PlotRulerRenderer(ruler_height=config.ruler_height).render(drawables, args.png)

    return 0


if __name__ == '__main__':
    sys.exit(main())
