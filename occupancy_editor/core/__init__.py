"""
Grid model: cells, snapshots, history, store and coordinate frames
"""

from .cells import (CELL_FREE, CELL_OCCUPIED, CELL_UNKNOWN, VALID_CELL_VALUES,
                    new_buffer, check_buffer, as_grid, in_bounds)
from .grid_state import Point, Origin, GridMetadata, GridState, clamp_points
from .history import History, MAX_HISTORY
from .grid_store import GridStore, bresenham, resize_buffer
from .transforms import (Frame, grid_center, internal_to_display, display_to_internal,
                         internal_to_start_relative, start_relative_to_internal,
                         to_internal, from_internal, cell_to_world, world_to_cell,
                         shift_origin_to_start, start_relative_view)

__all__ = [
    'CELL_FREE', 'CELL_OCCUPIED', 'CELL_UNKNOWN', 'VALID_CELL_VALUES',
    'new_buffer', 'check_buffer', 'as_grid', 'in_bounds',
    'Point', 'Origin', 'GridMetadata', 'GridState', 'clamp_points',
    'History', 'MAX_HISTORY',
    'GridStore', 'bresenham', 'resize_buffer',
    'Frame', 'grid_center', 'internal_to_display', 'display_to_internal',
    'internal_to_start_relative', 'start_relative_to_internal',
    'to_internal', 'from_internal', 'cell_to_world', 'world_to_cell',
    'shift_origin_to_start', 'start_relative_view',
]
