"""Main game loop and curses entrypoint.

Each frame runs two phases in order:
- input: poll at most one key, map it to an action and update the pose
- render: cast and shade every column, then draw the view, minimap and status
"""

from __future__ import annotations

import curses
import locale
import logging
import math
import random
import time
from dataclasses import dataclass, replace
from typing import Optional

from .constants import Action
from .frame import compose_frame
from .maze import GridMap, find_path_cells, generate_maze, maze_exit, static_map
from .models import Pose, Settings
from .movement import apply_action
from .render import draw_minimap, draw_status, draw_view, status_line
from .style import init_style

logger = logging.getLogger(__name__)

KEY_ACTIONS: dict[int, Action] = {
    ord("w"): "move_forward",
    ord("W"): "move_forward",
    ord("s"): "move_backward",
    ord("S"): "move_backward",
    ord("a"): "strafe_left",
    ord("A"): "strafe_left",
    ord("d"): "strafe_right",
    ord("D"): "strafe_right",
    curses.KEY_LEFT: "rotate_left",
    curses.KEY_RIGHT: "rotate_right",
    ord("+"): "widen_fov",
    ord("="): "widen_fov",
    ord("-"): "narrow_fov",
    ord("q"): "quit",
    ord("Q"): "quit",
}


def action_for_key(key: int) -> Optional[Action]:
    return KEY_ACTIONS.get(key)


def _build_map(settings: Settings, rng: random.Random) -> tuple[GridMap, Pose, Optional[tuple[int, int]]]:
    if settings.map_source == "static":
        grid, pose = static_map()
        return grid, pose, None
    logger.info(
        "building %dx%d maze (seed %s)",
        settings.width,
        settings.height,
        "random" if settings.seed is None else settings.seed,
    )
    grid, pose = generate_maze(settings.width, settings.height, rng)
    return grid, pose, maze_exit(grid)


@dataclass
class GameState:
    """Map, viewer pose and exit for one session."""

    settings: Settings
    rng: random.Random
    grid: GridMap
    pose: Pose
    exit_xy: Optional[tuple[int, int]] = None
    levels_cleared: int = 0

    @classmethod
    def new(cls, settings: Settings, rng: Optional[random.Random] = None) -> GameState:
        rng = rng if rng is not None else random.Random(settings.seed)
        grid, pose, exit_xy = _build_map(settings, rng)
        return cls(
            settings=settings,
            rng=rng,
            grid=grid,
            pose=replace(pose, fov=settings.fov),
            exit_xy=exit_xy,
        )

    def new_level(self) -> None:
        """Swap in a freshly built map, keeping the current FOV."""
        fov = self.pose.fov
        self.grid, pose, self.exit_xy = _build_map(self.settings, self.rng)
        self.pose = replace(pose, fov=fov)

    def cell(self) -> tuple[int, int]:
        return math.floor(self.pose.x), math.floor(self.pose.y)

    def at_exit(self) -> bool:
        return self.exit_xy is not None and self.cell() == self.exit_xy

    def steps_to_exit(self) -> Optional[int]:
        if self.exit_xy is None:
            return None
        path = find_path_cells(self.grid, self.cell(), self.exit_xy)
        if path[-1] != self.exit_xy:
            return None
        return len(path) - 1

    def apply(self, action: Action) -> bool:
        """Apply one action. Returns False when the session should end."""
        if action == "quit":
            return False
        s = self.settings
        self.pose = apply_action(
            self.pose, action, self.grid, s.move_speed, s.angular_step, s.fov_step
        )
        if self.at_exit():
            self.levels_cleared += 1
            logger.info("exit reached, %d maze(s) cleared", self.levels_cleared)
            self.new_level()
        return True


def _read_input(stdscr, state: GameState) -> bool:
    key = stdscr.getch()
    if key == -1:
        return True
    action = action_for_key(key)
    if action is None:
        return True
    return state.apply(action)


def _render_frame(stdscr, state: GameState, style, fps: float) -> None:
    settings = state.settings
    h, w = stdscr.getmaxyx()
    view_h = max(1, h - 1) if settings.debug else h

    spans = compose_frame(
        state.pose,
        state.grid,
        view_h,
        w,
        settings.max_depth,
        settings.ray_step,
        settings.shades,
    )

    stdscr.erase()
    draw_view(stdscr, spans, view_h, style, settings.shades)
    if settings.show_minimap:
        draw_minimap(stdscr, state.grid, state.pose, style)
    if settings.debug:
        draw_status(stdscr, status_line(state.pose, fps, w, h, state.steps_to_exit()), style)
    stdscr.refresh()


def main(stdscr, settings: Settings) -> None:
    # curses setup
    curses.curs_set(0)
    stdscr.keypad(True)
    curses.noecho()
    curses.cbreak()
    stdscr.nodelay(True)

    style = init_style(stdscr)
    state = GameState.new(settings)
    logger.info("session started on %s map", settings.map_source)

    fps = 0.0
    last_tick = time.monotonic()
    while True:
        if not _read_input(stdscr, state):
            logger.info("quit requested")
            return

        _render_frame(stdscr, state, style, fps)

        now = time.monotonic()
        dt = now - last_tick
        last_tick = now
        if dt > 0:
            fps = 1.0 / dt

        time.sleep(0.01)


def run(settings: Optional[Settings] = None) -> None:
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        pass
    curses.wrapper(main, settings if settings is not None else Settings())
