# -*- coding: utf-8 -*-
"""Distance and screen-row shading, plus projected wall height.

Shade levels run from 0 (darkest, background) to ``levels - 1`` (brightest).
"""
from __future__ import annotations

from functools import lru_cache

from .util import clamp


@lru_cache(maxsize=32)
def shade_bands(max_depth: float, levels: int) -> tuple[tuple[float, int], ...]:
    """Distance thresholds for wall shading, brightest band first.

    Level ``L`` applies while ``distance < max_depth / L``; level 0 catches
    everything else.
    """
    return tuple((max_depth / level, level) for level in range(levels - 1, 0, -1))


def wall_shade(distance: float, max_depth: float, levels: int) -> int:
    if levels <= 1:
        return 0
    for limit, level in shade_bands(max_depth, levels):
        if distance < limit:
            return level
    return 0


def floor_shade(row: int, screen_height: int, levels: int) -> int:
    """Shade for a floor row: dark at the horizon, bright at the bottom edge."""
    if screen_height <= 0 or levels <= 1:
        return 0
    half = screen_height / 2.0
    b = (row - half) / half
    return int(clamp(b, 0.0, 1.0) * (levels - 1))


def wall_span(distance: float, screen_height: int) -> tuple[int, int]:
    """Rows ``(ceiling, floor)`` covered by a wall seen at ``distance``.

    A zero distance draws a full-height column.
    """
    if distance <= 0:
        return 0, screen_height
    ceiling = int(screen_height / 2.0 - screen_height / distance)
    if ceiling < 0:
        ceiling = 0
    return ceiling, screen_height - ceiling
