# -*- coding: utf-8 -*-
"""Core data models (viewer pose, ray hits, frame records, configuration)."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .constants import (
    ANGULAR_STEP,
    DEFAULT_MAZE_SIZE,
    FOV_DEFAULT,
    FOV_STEP,
    MAX_DEPTH,
    MOVE_SPEED,
    RAY_STEP,
    SHADES,
    MapSource,
)


@dataclass(frozen=True)
class Pose:
    x: float
    y: float
    heading: float
    fov: float = FOV_DEFAULT


@dataclass(frozen=True)
class RayHit:
    distance: float
    hit_wall: bool
    capped: bool = False  # march ran out of depth or left the grid


@dataclass(frozen=True)
class ColumnSpan:
    """Everything the frame composer needs to draw one screen column.

    Rows ``[ceiling, floor)`` are wall, rows ``[floor, screen_height)`` are
    floor, each with its own shade level in ``floor_levels``.
    """

    column: int
    ceiling: int
    floor: int
    wall_level: int
    capped: bool
    floor_levels: list[tuple[int, int]] = field(default_factory=list)


@dataclass
class Settings:
    map_source: MapSource = "maze"
    width: int = DEFAULT_MAZE_SIZE
    height: int = DEFAULT_MAZE_SIZE
    seed: Optional[int] = None

    max_depth: float = MAX_DEPTH
    ray_step: float = RAY_STEP
    move_speed: float = MOVE_SPEED
    angular_step: float = ANGULAR_STEP
    fov_step: float = FOV_STEP
    fov: float = FOV_DEFAULT
    shades: int = SHADES

    show_minimap: bool = True
    debug: bool = True
