"""Grid map, maze generation and grid helpers."""

from __future__ import annotations

import logging
import math
import random
from collections import deque
from dataclasses import dataclass
from typing import Optional, Sequence

from .constants import MIN_MAZE_SIZE, OPEN, WALL
from .errors import AllocationFailure, InvalidMapSize
from .models import Pose

logger = logging.getLogger(__name__)

# Carve directions in rotation order: east, south, west, north.
DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))

STATIC_MAP = (
    "####################",
    "#..................#",
    "#..................#",
    "#..................#",
    "###############....#",
    "#..................#",
    "#..................#",
    "#..................#",
    "#..................#",
    "#..................#",
    "#..................#",
    "#..................#",
    "#..................#",
    "#..................#",
    "#..........#########",
    "#..........#.......#",
    "#..................#",
    "#..........#.......#",
    "#..........#.......#",
    "####################",
)


@dataclass(frozen=True)
class GridMap:
    """Immutable row-major grid of WALL/OPEN cells.

    Cell ``(x, y)`` lives at ``cells[y * width + x]``.
    """

    width: int
    height: int
    cells: tuple[str, ...]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidMapSize(f"grid must be non-empty, got {self.width}x{self.height}")
        if len(self.cells) != self.width * self.height:
            raise InvalidMapSize(
                f"expected {self.width * self.height} cells, got {len(self.cells)}"
            )

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> GridMap:
        """Build a grid from text rows; any character other than WALL is open."""
        if not rows or not rows[0]:
            raise InvalidMapSize("grid must have at least one row and column")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise InvalidMapSize("grid rows must all have the same length")
        cells = tuple(WALL if ch == WALL else OPEN for row in rows for ch in row)
        return cls(width=width, height=len(rows), cells=cells)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_wall(self, x: int, y: int) -> bool:
        """Whether cell (x, y) blocks movement and rays.

        Coordinates outside the grid count as wall.
        """
        if not self.in_bounds(x, y):
            return True
        return self.cells[y * self.width + x] == WALL

    def rows(self) -> list[str]:
        w = self.width
        return ["".join(self.cells[y * w:(y + 1) * w]) for y in range(self.height)]


def _check_size(width: int, height: int) -> None:
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidMapSize(f"maze {name} must be an integer, got {value!r}")
        if value < MIN_MAZE_SIZE:
            raise InvalidMapSize(f"maze {name} must be at least {MIN_MAZE_SIZE}, got {value}")
        if value % 2 == 0:
            raise InvalidMapSize(f"maze {name} must be odd, got {value}")


def _allocate(width: int, height: int) -> list[str]:
    try:
        return [WALL] * (width * height)
    except MemoryError as exc:
        raise AllocationFailure(f"cannot allocate a {width}x{height} maze") from exc


def _interior(x: int, y: int, width: int, height: int) -> bool:
    return 0 < x < width - 1 and 0 < y < height - 1


def _attach(cells: list[str], x: int, y: int, width: int, height: int, rng: random.Random) -> None:
    """Open lattice cell (x, y) and join it to one already carved lattice neighbour."""
    joins = []
    for dx, dy in DIRECTIONS:
        x2, y2 = x + 2 * dx, y + 2 * dy
        if _interior(x2, y2, width, height) and cells[y2 * width + x2] == OPEN:
            joins.append((x + dx, y + dy))
    cells[y * width + x] = OPEN
    if joins:
        jx, jy = rng.choice(joins)
        cells[jy * width + jx] = OPEN


def _carve(cells: list[str], x: int, y: int, width: int, height: int, rng: random.Random) -> None:
    d = rng.randrange(4)
    trials = 0
    while trials < 4:
        dx, dy = DIRECTIONS[d]
        x1, y1 = x + dx, y + dy
        x2, y2 = x1 + dx, y1 + dy
        if (
            _interior(x2, y2, width, height)
            and cells[y1 * width + x1] == WALL
            and cells[y2 * width + x2] == WALL
        ):
            cells[y1 * width + x1] = OPEN
            cells[y2 * width + x2] = OPEN
            x, y = x2, y2
            d = rng.randrange(4)
            trials = 0
        else:
            d = (d + 1) % 4
            trials += 1


def maze_entrance(grid: GridMap) -> tuple[int, int]:
    return 1, 0


def maze_exit(grid: GridMap) -> tuple[int, int]:
    return grid.width - 2, grid.height - 1


def generate_maze(width: int, height: int, rng: random.Random) -> tuple[GridMap, Pose]:
    """Carve a perfect maze and return it with the starting pose.

    Carving walks two cells at a time from odd (lattice) coordinates, so a
    wall always separates parallel corridors. A lattice seed that is still
    solid when the sweep reaches it is first joined to a carved neighbour,
    which keeps every open cell connected without introducing loops.
    """
    _check_size(width, height)
    cells = _allocate(width, height)

    # first corridor: start cell plus one carve step south
    for y in (1, 2, 3):
        cells[y * width + 1] = OPEN

    for y in range(1, height - 1, 2):
        for x in range(1, width - 1, 2):
            if cells[y * width + x] == WALL:
                _attach(cells, x, y, width, height, rng)
            _carve(cells, x, y, width, height, rng)

    cells[0 * width + 1] = OPEN
    cells[(height - 1) * width + (width - 2)] = OPEN

    grid = GridMap(width=width, height=height, cells=tuple(cells))
    logger.info("generated %dx%d maze", width, height)
    if logger.isEnabledFor(logging.DEBUG):
        for row_no, row in enumerate(grid.rows()):
            logger.debug("row%2d: %s", row_no, row)

    ex, ey = maze_entrance(grid)
    return grid, Pose(x=ex + 0.5, y=ey + 0.5, heading=math.pi / 2.0)


def static_map() -> tuple[GridMap, Pose]:
    """The hand-drawn open level with its fixed starting pose."""
    return GridMap.from_rows(STATIC_MAP), Pose(x=8.0, y=8.0, heading=0.0)


def find_path_cells(
    grid: GridMap, start: tuple[int, int], goal: tuple[int, int]
) -> list[tuple[int, int]]:
    """Shortest 4-connected path over open cells, or ``[start]`` if none."""
    sx, sy = start
    gx, gy = goal
    if not (grid.in_bounds(sx, sy) and grid.in_bounds(gx, gy)):
        return [start]

    q = deque([start])
    prev: dict[tuple[int, int], Optional[tuple[int, int]]] = {start: None}

    while q:
        x, y = q.popleft()
        if (x, y) == goal:
            break
        for dx, dy in DIRECTIONS:
            nx, ny = x + dx, y + dy
            if not grid.is_wall(nx, ny) and (nx, ny) not in prev:
                prev[(nx, ny)] = (x, y)
                q.append((nx, ny))

    if goal not in prev:
        return [start]

    path: list[tuple[int, int]] = []
    cur: Optional[tuple[int, int]] = goal
    while cur is not None:
        path.append(cur)
        cur = prev[cur]
    path.reverse()
    return path
