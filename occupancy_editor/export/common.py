"""
Shared pieces of the encoders and importers: cell palette, frame handling
and the import-side state builder
"""

import logging

import numpy as np

from ..core.cells import CELL_FREE, CELL_OCCUPIED, CELL_UNKNOWN, check_buffer
from ..core.grid_state import GridMetadata, GridState, Origin
from ..core.transforms import Frame, start_relative_view, to_internal

logger = logging.getLogger(__name__)

MAX_IMPORT_DIM = 2000

# map-server grayscale: occupied darkest, unknown in between, free lightest
PGM_VALUES = {
    CELL_OCCUPIED: 0,
    CELL_UNKNOWN: 205,
    CELL_FREE: 254,
}

RGB_COLORS = {
    CELL_OCCUPIED: (0, 0, 0),
    CELL_UNKNOWN: (209, 213, 219),
    CELL_FREE: (255, 255, 255),
}
START_COLOR = (34, 197, 94)
GOAL_COLOR = (239, 68, 68)


def to_pgm_pixels(buffer):
    pixels = np.full(np.shape(buffer), PGM_VALUES[CELL_UNKNOWN], dtype=np.uint8)
    pixels[buffer == CELL_OCCUPIED] = PGM_VALUES[CELL_OCCUPIED]
    pixels[buffer == CELL_FREE] = PGM_VALUES[CELL_FREE]
    return pixels


def to_rgb(state, mark_points=True):
    """
    (height, width, 3) uint8 image of a grid state. Start and goal, when
    present and requested, are drawn as single green/red pixels.
    """
    grid = state.buffer.reshape(state.height, state.width)
    image = np.empty((state.height, state.width, 3), dtype=np.uint8)
    for value, color in RGB_COLORS.items():
        image[grid == value] = color
    if mark_points:
        if state.metadata.start is not None:
            image[state.metadata.start.y, state.metadata.start.x] = START_COLOR
        if state.metadata.goal is not None:
            image[state.metadata.goal.y, state.metadata.goal.x] = GOAL_COLOR
    return image


def export_view(state, shift_to_start=False):
    """
    (metadata, frame, anchor) an encoder should write. In shift mode the
    origin is moved to the start and the points become start-relative;
    otherwise the state's own metadata in the internal frame.
    """
    if shift_to_start:
        return start_relative_view(state)
    return state.metadata, Frame.INTERNAL, None


def parse_frame(name):
    try:
        return Frame(name)
    except ValueError:
        raise ValueError(f"Unknown coordinate frame: {name!r}") from None


def check_dimensions(width, height):
    for name, value in (('width', width), ('height', height)):
        if not 1 <= value <= MAX_IMPORT_DIM:
            raise ValueError(f"Grid {name} must be in 1..{MAX_IMPORT_DIM}, got {value}")


def build_state(width, height, data, resolution=0.05, origin=None,
                frame=Frame.INTERNAL, anchor=None, start=None, goal=None):
    """
    GridState from imported values, with start/goal converted from `frame`
    to internal coordinates.

    Raises:
        ValueError: On bad dimensions, cells, metadata or points
    """
    check_dimensions(width, height)
    buffer = check_buffer(np.asarray(data), width, height)
    if start is not None:
        start = to_internal(start, frame, width, height, anchor)
    if goal is not None:
        goal = to_internal(goal, frame, width, height, anchor)
    metadata = GridMetadata(resolution=resolution,
                            origin=origin if origin is not None else Origin(),
                            start=start, goal=goal)
    state = GridState(width, height, buffer, metadata)
    logger.debug("Imported %dx%d grid (frame %s)", width, height, frame.value)
    return state
