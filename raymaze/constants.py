# -*- coding: utf-8 -*-
"""Project-wide constants and type aliases for the terminal raycaster."""
from __future__ import annotations

import math
from typing import Literal

# ----- World constants -----
WALL = "#"
OPEN = " "

MIN_MAZE_SIZE = 5
DEFAULT_MAZE_SIZE = 23

# ----- Raycasting -----
MAX_DEPTH = 25.0
RAY_STEP = 0.1  # march step in map units; smaller skips fewer thin walls

# ----- Movement -----
MOVE_SPEED = 0.5
ANGULAR_STEP = math.pi / 32.0

# FOV control
FOV_DEFAULT = math.pi / 4.0
FOV_STEP = math.pi / 32.0
FOV_MIN = 0.05 * math.pi
FOV_MAX = 0.95 * math.pi

# ----- Shading -----
SHADES = 20

# ASCII fallback shading, brightest first
ASCII_WALL_SHADES = "@%#*+=-:. "
ASCII_FLOOR_SHADES = "#x!-. "

Action = Literal[
    "move_forward",
    "move_backward",
    "strafe_left",
    "strafe_right",
    "rotate_left",
    "rotate_right",
    "widen_fov",
    "narrow_fov",
    "quit",
]
MapSource = Literal["maze", "static"]
