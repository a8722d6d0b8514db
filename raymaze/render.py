# -*- coding: utf-8 -*-
"""Frame composer: draws column spans, the minimap and the status line."""
from __future__ import annotations

import curses
from typing import Optional

from .constants import WALL
from .maze import GridMap
from .models import ColumnSpan, Pose
from .style import Style
from .util import normalize_angle, safe_addstr


def span_cells(
    spans: list[ColumnSpan], view_h: int, style: Style, levels: int
) -> list[list[tuple[str, int]]]:
    """Rasterize spans into a ``view_h`` x ``len(spans)`` grid of (char, attr)."""
    out = [[(" ", curses.A_NORMAL)] * len(spans) for _ in range(view_h)]
    for span in spans:
        x = span.column
        if span.capped:
            wall = (" ", curses.A_NORMAL)
        else:
            wall = (style.wall_char(span.wall_level, levels), style.wall_attr(span.wall_level, levels))
        for y in range(span.ceiling, min(span.floor, view_h)):
            out[y][x] = wall
        for y, level in span.floor_levels:
            if 0 <= y < view_h:
                out[y][x] = (style.floor_char(level, levels), style.floor_attr(level, levels))
    return out


def draw_view(stdscr, spans: list[ColumnSpan], view_h: int, style: Style, levels: int) -> None:
    cells = span_cells(spans, view_h, style, levels)
    for y, row in enumerate(cells):
        x = 0
        while x < len(row):
            ch, attr = row[x]
            start = x
            buf = [ch]
            x += 1
            while x < len(row) and row[x][1] == attr:
                buf.append(row[x][0])
                x += 1
            safe_addstr(stdscr, y, start, "".join(buf), attr)


def draw_minimap(stdscr, grid: GridMap, pose: Pose, style: Style) -> None:
    """Map in the top-right corner, two characters per cell."""
    h, w = stdscr.getmaxyx()
    start_x = w - 1 - 2 * grid.width
    if start_x < 0 or grid.height >= h:
        return

    attr = curses.A_NORMAL
    if style.colors_ok and style.map_pair:
        attr = curses.color_pair(style.map_pair)
    for y, row in enumerate(grid.rows()):
        line = "".join("[]" if ch == WALL else "  " for ch in row)
        safe_addstr(stdscr, y, start_x, line, attr)

    px, py = int(pose.x), int(pose.y)
    if grid.in_bounds(px, py):
        safe_addstr(stdscr, py, start_x + 2 * px, "><", attr | curses.A_BOLD)


def status_line(
    pose: Pose,
    fps: float,
    columns: int,
    rows: int,
    steps_to_exit: Optional[int] = None,
) -> str:
    line = (
        f"Angle: {normalize_angle(pose.heading):.3f} X: {pose.x:f} Y: {pose.y:f} "
        f"FOV: {pose.fov:f} Fps: {fps:.0f} Cols: {columns}, Rows: {rows}"
    )
    if steps_to_exit is not None:
        line += f" Exit: {steps_to_exit}"
    return line


def draw_status(stdscr, text: str, style: Style) -> None:
    h, w = stdscr.getmaxyx()
    safe_addstr(stdscr, h - 1, 0, text[: max(0, w - 1)], style.text_attr())
