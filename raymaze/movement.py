# -*- coding: utf-8 -*-
"""Viewer movement, rotation and FOV control with wall collision."""
from __future__ import annotations

import math
from dataclasses import replace

from .constants import ANGULAR_STEP, FOV_MAX, FOV_MIN, FOV_STEP, MOVE_SPEED, Action
from .maze import GridMap
from .models import Pose
from .util import clamp


def _step(pose: Pose, action: Action, move_speed: float) -> tuple[float, float]:
    ca = math.cos(pose.heading)
    sa = math.sin(pose.heading)
    if action == "move_forward":
        return pose.x + move_speed * ca, pose.y + move_speed * sa
    if action == "move_backward":
        return pose.x - move_speed * ca, pose.y - move_speed * sa
    if action == "strafe_left":
        return pose.x + move_speed * sa, pose.y - move_speed * ca
    # strafe_right
    return pose.x - move_speed * sa, pose.y + move_speed * ca


def apply_action(
    pose: Pose,
    action: Action,
    grid: GridMap,
    move_speed: float = MOVE_SPEED,
    angular_step: float = ANGULAR_STEP,
    fov_step: float = FOV_STEP,
) -> Pose:
    """Return the pose after ``action``.

    Translations either land entirely in an open cell or leave the pose
    untouched; there is no sliding along walls.
    """
    if action in ("move_forward", "move_backward", "strafe_left", "strafe_right"):
        nx, ny = _step(pose, action, move_speed)
        if grid.is_wall(math.floor(nx), math.floor(ny)):
            return pose
        return replace(pose, x=nx, y=ny)

    if action == "rotate_left":
        return replace(pose, heading=pose.heading - angular_step)
    if action == "rotate_right":
        return replace(pose, heading=pose.heading + angular_step)

    if action == "widen_fov":
        return replace(pose, fov=clamp(pose.fov + fov_step, FOV_MIN, FOV_MAX))
    if action == "narrow_fov":
        return replace(pose, fov=clamp(pose.fov - fov_step, FOV_MIN, FOV_MAX))

    # quit is handled by the game loop
    return pose
