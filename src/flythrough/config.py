from __future__ import annotations

import math

# Window / viewport (fixed for the whole session)
WIDTH = 1280
HEIGHT = 720
TITLE = "Wireframe Flythrough"
BACKGROUND_COLOR = "#101010"

# Projection
FOV_DEG = 60.0
NEAR = 0.1
FAR = 1000.0

# Camera
CAMERA_START = (10.0, 5.0, 10.0)
CAMERA_TARGET = (0.0, 0.5, 0.0)
UP = (0.0, 1.0, 0.0)
MOUSE_SENSITIVITY = 0.001
PITCH_LIMIT = math.pi / 2 - 0.01

# Movement (world units per second)
MOVE_SPEED = 25.0
BOOST_MULTIPLIER = 5.0

# Scene
ROTATION_SPEED_DEG = 90.0
GRID_HALF_EXTENT = 10
GRID_SCALE = (3.0, 1.0, 3.0)
GRID_OFFSET = (0.0, -1.0, 0.0)
GRID_COLOR = "#808080"
GRID_LINE_WIDTH = 1.0
BOX_LINE_WIDTH = 2.0
SPINNER_COLOR = "#ff0000"
COUNTER_SPINNER_COLOR = "#0000ff"
STATIC_BOX_COLOR = "#00ff00"

# Static boxes scattered once at startup
SEED = 1234
STATIC_BOX_COUNT = 30
STATIC_BOX_RANGE = (30.0, 20.0, 30.0)
STATIC_BOX_SCALE = (0.5, 3.5)
