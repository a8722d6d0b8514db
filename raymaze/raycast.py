"""Per-column ray marching against the grid map."""

from __future__ import annotations

import math
from collections.abc import Iterator

from .constants import MAX_DEPTH, RAY_STEP
from .maze import GridMap
from .models import Pose, RayHit


def ray_angle(pose: Pose, column: int, column_count: int) -> float:
    return pose.heading - pose.fov / 2.0 + (column / column_count) * pose.fov


def cast_ray(
    grid: GridMap,
    px: float,
    py: float,
    ang: float,
    max_depth: float = MAX_DEPTH,
    step: float = RAY_STEP,
) -> RayHit:
    """March from (px, py) along ``ang`` in fixed steps until a wall.

    Distances are sampled at ``step, 2*step, ...`` up to ``max_depth``.
    Leaving the grid counts as striking the boundary: a wall hit capped at
    ``max_depth``. Running out of depth inside the grid is a capped miss.
    """
    if step <= 0:
        raise ValueError(f"ray step must be positive, got {step}")
    if not math.isfinite(max_depth) or max_depth < 0:
        raise ValueError(f"max depth must be finite and non-negative, got {max_depth}")

    dx = math.cos(ang)
    dy = math.sin(ang)
    samples = max(1, math.ceil(max_depth / step - 1e-9))

    for n in range(1, samples + 1):
        dist = min(n * step, max_depth)
        test_x = math.floor(px + dx * dist)
        test_y = math.floor(py + dy * dist)
        if not grid.in_bounds(test_x, test_y):
            return RayHit(distance=max_depth, hit_wall=True, capped=True)
        if grid.is_wall(test_x, test_y):
            return RayHit(distance=dist, hit_wall=True)

    return RayHit(distance=max_depth, hit_wall=False, capped=True)


def cast_column(
    pose: Pose,
    column: int,
    column_count: int,
    grid: GridMap,
    max_depth: float = MAX_DEPTH,
    step: float = RAY_STEP,
) -> RayHit:
    if column_count <= 0:
        raise ValueError(f"column count must be positive, got {column_count}")
    return cast_ray(grid, pose.x, pose.y, ray_angle(pose, column, column_count), max_depth, step)


def cast_frame(
    pose: Pose,
    column_count: int,
    grid: GridMap,
    max_depth: float = MAX_DEPTH,
    step: float = RAY_STEP,
) -> Iterator[RayHit]:
    """Lazily cast every column, left to right."""
    for column in range(column_count):
        yield cast_column(pose, column, column_count, grid, max_depth, step)
