#!/usr/bin/env python3
"""
Shared constants for the camera viewport (screen pixels unless stated otherwise).

Keeping constants in one place helps ensure values are consistent across the
codebase and makes tuning easier.
"""

# Window
WINDOW_TITLE = "Camera Test"
VIEW_WIDTH = 500
VIEW_HEIGHT = 500
FPS = 60

# Rendering
BACKGROUND_COLOR = (255, 255, 255)
GRID_COLOR = (0, 0, 0)
GRID_HIGHLIGHT_COLOR = (255, 0, 0)
GRID_LINE_WIDTH = 1

# Debug grid defaults
GRID_LINES = 10
GRID_SPACING = 50.0  # world units between lines
GRID_HIGHLIGHT_INDEX = 5
MAX_GRID_LINES = 1000  # upper bound for lines loaded from scene templates

# Camera defaults
DEFAULT_CAMERA_POS = (0.0, 0.0)
DEFAULT_CAMERA_SCALE = (1.0, 1.0)

# Wheel input
WHEEL_PAN_STEP = 10.0  # world units per wheel notch with a modifier held
WHEEL_ZOOM_OUT = 0.95
WHEEL_ZOOM_IN = 1.05
