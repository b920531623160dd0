"""Shared configuration for the freehand practice pipeline.

This module centralizes the constants used by:
    - rendering.planner (stroke size, dot radius, fallback width)
    - utils.canvas (colors, canvas size, supersampling)
    - interaction.controller (idle auto-clear delay)
    - api.services and app (recognizer language, expected character)

Having these values in one place keeps the web service, the CLI and the
tests drawing with the same pen.
"""

# Outline synthesis: base stroke diameter in surface units
STROKE_SIZE = 16

# Single-point strokes (taps) are drawn as a filled dot of this radius
DOT_RADIUS = 8.0

# Fallback curve: stroked with round caps and joins
FALLBACK_STROKE_WIDTH = 4.0

# Colors (RGB)
INK_COLOR = (0, 0, 0)
BACKGROUND_COLOR = (255, 255, 255)

# Drawing surface
CANVAS_WIDTH = 400
CANVAS_HEIGHT = 400
SUPERSAMPLE = 2  # Raster backends draw at Nx and downsample for smooth edges
MAX_CANVAS_SIZE = 4096  # Largest width or height the CLI will render, before supersampling
MAX_SUPERSAMPLE = 8

# Max deviation when flattening quadratic segments for raster output
CURVE_TOLERANCE = 0.5

# Seconds of inactivity after a stroke ends before the buffer is cleared
IDLE_CLEAR_SECONDS = 3.0

# Recognition
LANGUAGE_CODE = 'ja'
EXPECTED_CHARACTER = 'カ'

# Web service
DEFAULT_HOST = '127.0.0.1'
DEFAULT_PORT = 5050
