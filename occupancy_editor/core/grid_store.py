"""
Grid state store: current grid, edits, resize and undo/redo
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List, Optional

import numpy as np

from .cells import CELL_FREE, VALID_CELL_VALUES, as_grid, check_buffer, new_buffer
from .grid_state import GridMetadata, GridState, Point, clamp_points
from .history import MAX_HISTORY, History

logger = logging.getLogger(__name__)


def bresenham(p0: Point, p1: Point) -> List[Point]:
    """Cells on the straight line from p0 to p1, both ends included"""
    x0, y0, x1, y1 = p0.x, p0.y, p1.x, p1.y
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy
    points = []
    while True:
        points.append(Point(x0, y0))
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy
    return points


def resize_buffer(buffer, width, height, new_width, new_height, offset_x=0, offset_y=0):
    """
    Clip-and-paste `buffer` into a FREE grid of the new size, moving every
    cell (x, y) to (x + offset_x, y + offset_y). Cells landing outside the
    new grid are dropped.
    """
    out = new_buffer(new_width, new_height, CELL_FREE)
    src = as_grid(np.asarray(buffer), width, height)
    dst = as_grid(out, new_width, new_height)

    # overlap of the shifted source with the destination, in source coords
    x_lo = max(0, -offset_x)
    x_hi = min(width, new_width - offset_x)
    y_lo = max(0, -offset_y)
    y_hi = min(height, new_height - offset_y)
    if x_lo < x_hi and y_lo < y_hi:
        dst[y_lo + offset_y:y_hi + offset_y, x_lo + offset_x:x_hi + offset_x] = \
            src[y_lo:y_hi, x_lo:x_hi]
    return out


class GridStore:
    """
    Owns the current grid and its history.

    Every mutating call commits exactly one history entry and returns the new
    GridState. undo/redo only move the history cursor and return None when
    no move is available.
    """

    def __init__(self, width=50, height=50, resolution=0.05,
                 metadata: Optional[GridMetadata] = None,
                 buffer=None, capacity=MAX_HISTORY):
        if metadata is None:
            metadata = GridMetadata(resolution=resolution)
        if buffer is None:
            buffer = new_buffer(width, height, CELL_FREE)
        self.history = History.start(GridState(width, height, buffer, metadata), capacity)

    @classmethod
    def from_state(cls, state: GridState, capacity=MAX_HISTORY) -> 'GridStore':
        store = cls.__new__(cls)
        store.history = History.start(state, capacity)
        return store

    # ---------- read access ----------

    @property
    def state(self) -> GridState:
        return self.history.current

    @property
    def width(self) -> int:
        return self.state.width

    @property
    def height(self) -> int:
        return self.state.height

    @property
    def buffer(self) -> np.ndarray:
        return self.state.buffer

    @property
    def metadata(self) -> GridMetadata:
        return self.state.metadata

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    # ---------- commits ----------

    def _push(self, state: GridState) -> GridState:
        self.history = self.history.push(state)
        logger.debug("Committed %dx%d grid (history %d/%d)",
                     state.width, state.height,
                     self.history.cursor + 1, len(self.history))
        return state

    def commit(self, buffer, width=None, height=None) -> GridState:
        """
        Replace the grid content, keeping the metadata.

        Raises:
            ValueError: If the buffer does not hold width*height valid cells
        """
        width = self.width if width is None else width
        height = self.height if height is None else height
        buffer = check_buffer(buffer, width, height)
        metadata = clamp_points(self.metadata, width, height)
        return self._push(GridState(width, height, buffer, metadata))

    def clear(self) -> GridState:
        return self.commit(new_buffer(self.width, self.height, CELL_FREE))

    def resize(self, new_width, new_height, offset_x=0, offset_y=0) -> GridState:
        """
        Resize the grid, pasting old cell (x, y) at (x+offset_x, y+offset_y).

        Start and goal travel with the content and are cleared when they end
        up outside the new grid.
        """
        state = self.state
        buffer = resize_buffer(state.buffer, state.width, state.height,
                               new_width, new_height, offset_x, offset_y)
        metadata = state.metadata
        metadata = replace(
            metadata,
            start=metadata.start.translated(offset_x, offset_y) if metadata.start else None,
            goal=metadata.goal.translated(offset_x, offset_y) if metadata.goal else None,
        )
        metadata = clamp_points(metadata, new_width, new_height)
        logger.debug("Resize %dx%d -> %dx%d, offset (%d, %d)",
                     state.width, state.height, new_width, new_height, offset_x, offset_y)
        return self._push(GridState(new_width, new_height, buffer, metadata))

    def update_metadata(self, metadata: GridMetadata) -> GridState:
        state = self.state
        return self._push(GridState(state.width, state.height, state.buffer, metadata))

    def set_start(self, x, y) -> GridState:
        return self.update_metadata(self.metadata.with_start(Point(x, y)))

    def set_goal(self, x, y) -> GridState:
        return self.update_metadata(self.metadata.with_goal(Point(x, y)))

    def clear_start(self) -> GridState:
        return self.update_metadata(self.metadata.with_start(None))

    def clear_goal(self) -> GridState:
        return self.update_metadata(self.metadata.with_goal(None))

    # ---------- painting ----------

    def paint_cells(self, points: Iterable[Point], value) -> Optional[GridState]:
        """
        Set every in-bounds point to `value`. Out-of-bounds points are
        skipped. Returns None, without committing, when no cell changed.
        """
        if value not in VALID_CELL_VALUES:
            raise ValueError(f"Invalid cell value: {value}")
        state = self.state
        buffer = state.copy_buffer()
        grid = as_grid(buffer, state.width, state.height)
        changed = False
        for p in points:
            if 0 <= p.x < state.width and 0 <= p.y < state.height and grid[p.y, p.x] != value:
                grid[p.y, p.x] = value
                changed = True
        if not changed:
            return None
        return self.commit(buffer)

    def paint_line(self, p0: Point, p1: Point, value) -> Optional[GridState]:
        return self.paint_cells(bresenham(p0, p1), value)

    def paint_rect(self, x, y, w, h, value) -> Optional[GridState]:
        points = [Point(px, py) for py in range(y, y + h) for px in range(x, x + w)]
        return self.paint_cells(points, value)

    # ---------- generators ----------

    def generate(self, options, rng=None) -> GridState:
        """Run a generator on a snapshot of the current grid and commit the result"""
        # imported here, generation depends on core
        from ..generation import generate

        state = self.state
        buffer = generate(state.buffer, state.width, state.height, options, rng=rng)
        return self.commit(buffer)

    # ---------- history ----------

    def undo(self) -> Optional[GridState]:
        history = self.history.undo()
        if history is None:
            logger.debug("Undo unavailable")
            return None
        self.history = history
        return history.current

    def redo(self) -> Optional[GridState]:
        history = self.history.redo()
        if history is None:
            logger.debug("Redo unavailable")
            return None
        self.history = history
        return history.current
