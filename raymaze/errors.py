"""Exceptions raised while building maps."""
from __future__ import annotations


class RayMazeError(Exception):
    """Base class for map construction failures."""


class InvalidMapSize(RayMazeError, ValueError):
    """Requested map dimensions cannot hold a carved maze."""


class AllocationFailure(RayMazeError, MemoryError):
    """The cell buffer for a map could not be created."""
