"""Flask application and shared web utilities for the practice service.

This module provides:
    - The Flask application instance serving one practice surface
    - Logging configuration for the web service and the CLI
    - get_service()/set_service() to reach the PracticeService from routes
    - Helpers for parsing pointer events and sending images

Routes:
    POST /api/pointer       {"type": "down|move|up|cancel", "x": .., "y": ..}
                            or {"events": [...]} for a batch
    POST /api/key           {"key": "space"} clears the drawing
    POST /api/clear         clear the drawing
    GET  /api/strokes       current buffer as stroke JSON
    GET  /api/render.png    current drawing as PNG
    GET  /api/render.svg    current drawing as SVG
    POST /api/render        render posted stroke JSON (?format=png|svg),
                            without touching the current drawing
    POST /api/check         recognize and judge the current drawing

Example:
    Run the development server::

        from freehand_lib.app import app, configure_logging, set_service
        configure_logging(level='DEBUG')
        set_service(PracticeService(recognizer=my_recognizer))
        app.run(port=5050)
"""

from __future__ import annotations

import io
import logging

from flask import Flask, jsonify, request, send_file

from .api.services import PracticeService
from .errors import BufferFormatError
from .interaction.controller import PointerEvent
from .utils.canvas import PillowCanvas, SvgCanvas
from .utils.interchange import buffer_from_json, buffer_to_json

# Module logger
logger = logging.getLogger(__name__)


def configure_logging(level: str = 'INFO', log_file: str | None = None) -> None:
    """Configure application-wide logging.

    Sets up logging with a consistent format across all modules. Call this
    once at startup, before serving or rendering.

    Args:
        level: Log level string ('DEBUG', 'INFO', 'WARNING', 'ERROR').
        log_file: Optional path to log file. If None, logs to stderr only.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)-8s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Set third-party loggers to WARNING to reduce noise
    logging.getLogger('werkzeug').setLevel(logging.WARNING)
    logging.getLogger('PIL').setLevel(logging.WARNING)

    logger.info("Logging configured: level=%s, file=%s", level, log_file or 'stderr')


# Flask application
app = Flask(__name__)

_service: PracticeService | None = None


def set_service(service: PracticeService | None) -> None:
    """Install the PracticeService the routes operate on.

    Passing None drops the current one; the next request creates a default
    service without a recognizer.
    """
    global _service
    _service = service


def get_service() -> PracticeService:
    """Return the installed PracticeService, creating a default one if needed."""
    global _service
    if _service is None:
        _service = PracticeService()
        logger.info("Created default practice service (no recognizer)")
    return _service


def parse_pointer_event(data) -> PointerEvent:
    """Build a PointerEvent from a decoded JSON object.

    Raises:
        ValueError: If the object is not a valid pointer event.
    """
    if not isinstance(data, dict):
        raise ValueError('pointer event must be an object')
    event_type = data.get('type')
    if event_type in ('down', 'move'):
        try:
            return PointerEvent(event_type, float(data['x']), float(data['y']))
        except (KeyError, TypeError) as e:
            raise ValueError(f'{event_type} event needs numeric x and y') from e
    return PointerEvent(event_type)


def send_png_bytes(data: bytes):
    """Send encoded PNG data as a Flask response."""
    return send_file(io.BytesIO(data), mimetype='image/png')


def send_svg(markup: str):
    return app.response_class(markup, mimetype='image/svg+xml')


@app.route('/api/pointer', methods=['POST'])
def api_pointer():
    """Apply one pointer event, or a batch under "events"."""
    data = request.get_json(silent=True)
    if data is None:
        return jsonify(error='Expected a JSON body'), 400
    raw_events = data.get('events') if isinstance(data, dict) and 'events' in data else [data]
    if not isinstance(raw_events, list):
        return jsonify(error="'events' must be a list"), 400
    try:
        events = [parse_pointer_event(e) for e in raw_events]
    except ValueError as e:
        return jsonify(error=str(e)), 400

    controller = get_service().controller
    accepted = sum(1 for event in events if controller.handle(event))
    return jsonify(ok=True, accepted=accepted, size=len(controller.snapshot()),
                   pen_down=controller.pen_down)


@app.route('/api/key', methods=['POST'])
def api_key():
    data = request.get_json(silent=True) or {}
    handled = get_service().controller.key_pressed(str(data.get('key', '')))
    return jsonify(ok=True, handled=handled)


@app.route('/api/clear', methods=['POST'])
def api_clear():
    get_service().controller.clear()
    return jsonify(ok=True)


@app.route('/api/strokes')
def api_strokes():
    return jsonify(buffer_to_json(get_service().controller.snapshot()))


@app.route('/api/render.png')
def api_render_png():
    return send_png_bytes(get_service().render_png())


@app.route('/api/render.svg')
def api_render_svg():
    return send_svg(get_service().render_svg())


@app.route('/api/render', methods=['POST'])
def api_render():
    """Render posted stroke JSON without touching the current drawing."""
    try:
        buffer = buffer_from_json(request.get_json(silent=True))
    except BufferFormatError as e:
        return jsonify(error=str(e)), 400

    service = get_service()
    fmt = request.args.get('format', 'png')
    if fmt == 'svg':
        canvas = SvgCanvas(service.width, service.height)
        service.renderer.render(buffer, canvas)
        return send_svg(canvas.to_svg())
    if fmt == 'png':
        canvas = PillowCanvas(service.width, service.height)
        service.renderer.render(buffer, canvas)
        return send_png_bytes(canvas.to_png_bytes())
    return jsonify(error=f'Unsupported format: {fmt}'), 400


@app.route('/api/check', methods=['POST'])
def api_check():
    notification = get_service().check()
    return jsonify(notification=notification.to_dict() if notification else None)
