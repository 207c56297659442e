"""
Grid state snapshots and navigation metadata
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional

import numpy as np

from .cells import check_buffer, in_bounds


@dataclass(frozen=True)
class Point:
    """Integer cell coordinate"""
    x: int
    y: int

    def translated(self, dx: int, dy: int) -> 'Point':
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Origin:
    """World pose of internal cell (0, 0)"""
    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0


@dataclass(frozen=True)
class GridMetadata:
    resolution: float = 0.05  # meters per cell
    origin: Origin = field(default_factory=Origin)
    start: Optional[Point] = None
    goal: Optional[Point] = None

    def validate(self) -> 'GridMetadata':
        if not self.resolution > 0:
            raise ValueError(f"Resolution must be positive, got {self.resolution}")
        return self

    def with_start(self, start: Optional[Point]) -> 'GridMetadata':
        return replace(self, start=start)

    def with_goal(self, goal: Optional[Point]) -> 'GridMetadata':
        return replace(self, goal=goal)


@dataclass(frozen=True, eq=False)
class GridState:
    """
    Immutable snapshot of the whole grid.

    The buffer is copied on construction and flagged read-only, so a state
    held in the history can never change underneath it.
    """
    width: int
    height: int
    buffer: np.ndarray
    metadata: GridMetadata = field(default_factory=GridMetadata)

    def __post_init__(self):
        buffer = np.array(check_buffer(self.buffer, self.width, self.height))
        buffer.flags.writeable = False
        object.__setattr__(self, 'buffer', buffer)
        self.metadata.validate()
        for name in ('start', 'goal'):
            p = getattr(self.metadata, name)
            if p is not None and not in_bounds(p.x, p.y, self.width, self.height):
                raise ValueError(
                    f"{name} {p} is outside the {self.width}x{self.height} grid"
                )

    def __eq__(self, other):
        if not isinstance(other, GridState):
            return NotImplemented
        return (self.width == other.width
                and self.height == other.height
                and self.metadata == other.metadata
                and np.array_equal(self.buffer, other.buffer))

    __hash__ = None

    def copy_buffer(self) -> np.ndarray:
        """Writable copy of the cells, for callers that want to edit them"""
        return self.buffer.copy()

    def with_metadata(self, metadata: GridMetadata) -> 'GridState':
        return GridState(self.width, self.height, self.buffer, metadata)


def clamp_points(metadata: GridMetadata, width: int, height: int) -> GridMetadata:
    """Drop start/goal points that fall outside a width x height grid"""
    start, goal = metadata.start, metadata.goal
    if start is not None and not in_bounds(start.x, start.y, width, height):
        start = None
    if goal is not None and not in_bounds(goal.x, goal.y, width, height):
        goal = None
    return replace(metadata, start=start, goal=goal)
