import curses
import logging
import math
import random

import pytest

from raymaze.game import GameState, _read_input, action_for_key
from raymaze.maze import maze_exit
from raymaze.models import Pose, Settings


class FakeScreen:
    def __init__(self, keys):
        self.keys = list(keys)

    def getch(self) -> int:
        return self.keys.pop(0) if self.keys else -1


def test_key_mapping() -> None:
    assert action_for_key(ord("w")) == "move_forward"
    assert action_for_key(ord("S")) == "move_backward"
    assert action_for_key(ord("a")) == "strafe_left"
    assert action_for_key(ord("d")) == "strafe_right"
    assert action_for_key(curses.KEY_LEFT) == "rotate_left"
    assert action_for_key(curses.KEY_RIGHT) == "rotate_right"
    assert action_for_key(ord("+")) == "widen_fov"
    assert action_for_key(ord("-")) == "narrow_fov"
    assert action_for_key(ord("q")) == "quit"
    assert action_for_key(ord("z")) is None


def test_new_state_from_seed_is_reproducible() -> None:
    settings = Settings(width=15, height=11, seed=99, fov=1.0)
    a = GameState.new(settings)
    b = GameState.new(settings)
    assert a.grid == b.grid
    assert a.pose == b.pose
    assert a.pose.fov == 1.0
    assert a.exit_xy == maze_exit(a.grid)


def test_maze_build_logs_size_and_seed(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="raymaze"):
        GameState.new(Settings(width=9, height=7, seed=31))
    assert "building 9x7 maze (seed 31)" in caplog.text
    assert "generated 9x7 maze" in caplog.text


def test_static_state_has_no_exit() -> None:
    state = GameState.new(Settings(map_source="static"))
    assert state.exit_xy is None
    assert state.steps_to_exit() is None
    assert (state.pose.x, state.pose.y) == (8.0, 8.0)


def test_apply_moves_and_quit_stops() -> None:
    state = GameState.new(Settings(width=9, height=9), rng=random.Random(3))
    start = state.pose
    assert state.apply("rotate_right")
    assert state.pose.heading == pytest.approx(start.heading + state.settings.angular_step)
    assert state.apply("quit") is False


def test_steps_to_exit_from_entrance() -> None:
    state = GameState.new(Settings(width=9, height=9), rng=random.Random(4))
    steps = state.steps_to_exit()
    assert steps is not None
    assert steps >= (state.grid.width - 3) + (state.grid.height - 1)


def test_reaching_exit_builds_a_new_maze() -> None:
    state = GameState.new(Settings(width=5, height=5, fov=0.9), rng=random.Random(0))
    ex, ey = state.exit_xy
    state.pose = Pose(x=ex + 0.5, y=ey - 0.5, heading=math.pi / 2, fov=1.2)

    assert state.apply("move_forward")

    assert state.levels_cleared == 1
    assert (math.floor(state.pose.x), math.floor(state.pose.y)) == (1, 0)
    assert state.pose.fov == 1.2


def test_read_input_consumes_one_key_per_frame() -> None:
    state = GameState.new(Settings(width=9, height=9), rng=random.Random(1))
    screen = FakeScreen([curses.KEY_RIGHT, curses.KEY_RIGHT, ord("q")])
    heading = state.pose.heading

    assert _read_input(screen, state)
    assert len(screen.keys) == 2
    assert state.pose.heading == pytest.approx(heading + state.settings.angular_step)

    assert _read_input(screen, state)
    assert not _read_input(screen, state)
    assert _read_input(screen, state)  # no key pending
