#!/usr/bin/env python3
"""Command-line interface for freehand stroke rendering.

Usage:
    freehand render strokes.json -o strokes.png
    freehand render strokes.json -o strokes.svg --width 300 --height 300
    freehand serve --port 5050 --log-level DEBUG

Or run via the module:
    python -m freehand_lib.cli render strokes.json -o out.png

The input file holds stroke JSON: either ``{"strokes": [[[x, y], ...], ...]}``
or the legacy flat ``[[x, y], ..., [0, 0], ...]`` list where the origin ends
a stroke. Without --width/--height the canvas is sized to fit the drawing.
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from . import config
from .api.services import PracticeService
from .app import app, configure_logging, set_service
from .domain.buffer import PointBuffer
from .domain.geometry import BBox
from .errors import BufferFormatError
from .rendering.planner import StrokeRenderer
from .utils.canvas import PillowCanvas, SvgCanvas
from .utils.interchange import buffer_from_json

logger = logging.getLogger(__name__)


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='freehand',
        description='Render freehand strokes as pressure-simulated ink'
    )
    parser.add_argument('--log-level', type=str, default='WARNING',
                        help='Log level (default: WARNING)')
    parser.add_argument('--log-file', type=str, default=None,
                        help='Also write logs to this file')
    sub = parser.add_subparsers(dest='command', required=True)

    render = sub.add_parser('render', help='Render stroke JSON to PNG or SVG')
    render.add_argument('input', type=str, help='Stroke JSON file')
    render.add_argument('--output', '-o', type=str, required=True,
                        help='Output file, .png or .svg')
    render.add_argument('--width', type=int, default=None,
                        help='Canvas width (default: fit drawing)')
    render.add_argument('--height', type=int, default=None,
                        help='Canvas height (default: fit drawing)')
    render.add_argument('--supersample', type=int, default=config.SUPERSAMPLE,
                        help=f'Raster supersampling factor (default: {config.SUPERSAMPLE})')

    serve = sub.add_parser('serve', help='Run the practice web service')
    serve.add_argument('--host', type=str, default=config.DEFAULT_HOST,
                       help=f'Bind address (default: {config.DEFAULT_HOST})')
    serve.add_argument('--port', type=int, default=config.DEFAULT_PORT,
                       help=f'Port (default: {config.DEFAULT_PORT})')
    return parser


def fit_canvas_size(buffer: PointBuffer, margin: float = config.STROKE_SIZE) -> Tuple[int, int]:
    """Smallest canvas (from the origin) that holds the drawing plus margin.

    Each side is capped at config.MAX_CANVAS_SIZE; samples beyond it are
    clipped rather than allocating an unbounded image.
    """
    points = buffer.points()
    if not points:
        return config.CANVAS_WIDTH, config.CANVAS_HEIGHT
    bbox = BBox.from_points(points).expanded(margin)
    width = min(max(1, math.ceil(bbox.x_max)), config.MAX_CANVAS_SIZE)
    height = min(max(1, math.ceil(bbox.y_max)), config.MAX_CANVAS_SIZE)
    return width, height


def _render_command(args) -> int:
    """Handle the render subcommand."""
    try:
        with open(args.input, 'r', encoding='utf-8') as f:
            buffer = buffer_from_json(json.load(f))
    except (OSError, json.JSONDecodeError, BufferFormatError) as e:
        print(f"Error: cannot read {args.input}: {e}", file=sys.stderr)
        return 1

    width, height = fit_canvas_size(buffer)
    width = args.width or width
    height = args.height or height

    if max(width, height) > config.MAX_CANVAS_SIZE:
        print(f"Error: canvas {width}x{height} exceeds {config.MAX_CANVAS_SIZE} per side",
              file=sys.stderr)
        return 1
    if not 1 <= args.supersample <= config.MAX_SUPERSAMPLE:
        print(f"Error: --supersample must be between 1 and {config.MAX_SUPERSAMPLE}",
              file=sys.stderr)
        return 1

    output = Path(args.output)
    suffix = output.suffix.lower()
    try:
        if suffix == '.svg':
            canvas = SvgCanvas(width, height)
        elif suffix == '.png':
            canvas = PillowCanvas(width, height, supersample=args.supersample)
        else:
            print(f"Error: unsupported output type {suffix or '(none)'}, use .png or .svg",
                  file=sys.stderr)
            return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    commands = StrokeRenderer().render(buffer, canvas)
    canvas.save(output)

    kinds: List[str] = [c.kind for c in commands]
    print(f"Rendered {len(commands)} strokes to {output} ({width}x{height}): "
          f"{kinds.count('outline')} outline, {kinds.count('dot')} dot, "
          f"{kinds.count('curve')} curve")
    return 0


def _serve_command(args) -> int:
    """Handle the serve subcommand."""
    set_service(PracticeService())
    logger.info("Serving on http://%s:%d", args.host, args.port)
    app.run(host=args.host, port=args.port)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = _create_argument_parser()
    args = parser.parse_args(argv)
    configure_logging(level=args.log_level, log_file=args.log_file)

    if args.command == 'render':
        return _render_command(args)
    return _serve_command(args)


if __name__ == '__main__':
    sys.exit(main())
