"""Turn ray hits into per-column draw records."""

from __future__ import annotations

from .constants import MAX_DEPTH, RAY_STEP, SHADES
from .maze import GridMap
from .models import ColumnSpan, Pose
from .raycast import cast_frame
from .shading import floor_shade, wall_shade, wall_span


def compose_frame(
    pose: Pose,
    grid: GridMap,
    rows: int,
    columns: int,
    max_depth: float = MAX_DEPTH,
    step: float = RAY_STEP,
    levels: int = SHADES,
) -> list[ColumnSpan]:
    """Cast one ray per column and shade it for a ``rows`` x ``columns`` view."""
    if rows <= 0 or columns <= 0:
        return []

    # the floor gradient depends on the row only
    row_levels = [floor_shade(row, rows, levels) for row in range(rows)]

    spans: list[ColumnSpan] = []
    for column, hit in enumerate(cast_frame(pose, columns, grid, max_depth, step)):
        ceiling, floor = wall_span(hit.distance, rows)
        spans.append(
            ColumnSpan(
                column=column,
                ceiling=ceiling,
                floor=floor,
                wall_level=wall_shade(hit.distance, max_depth, levels),
                capped=hit.capped,
                floor_levels=[(row, row_levels[row]) for row in range(floor, rows)],
            )
        )
    return spans
