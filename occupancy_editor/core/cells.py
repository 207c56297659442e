"""
Cell alphabet and flat row-major buffer helpers
"""

import numpy as np

CELL_FREE = 0
CELL_OCCUPIED = 100
CELL_UNKNOWN = -1

VALID_CELL_VALUES = (CELL_FREE, CELL_OCCUPIED, CELL_UNKNOWN)

BUFFER_DTYPE = np.int8

def new_buffer(width, height, fill=CELL_FREE):
    """
    Allocate a flat buffer of width*height cells

    Args:
        width: Grid width in cells
        height: Grid height in cells
        fill: Cell value every cell starts with

    Returns:
        1-D int8 numpy array
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
    if fill not in VALID_CELL_VALUES:
        raise ValueError(f"Invalid cell value: {fill}")
    return np.full(width * height, fill, dtype=BUFFER_DTYPE)

def check_buffer(buffer, width, height):
    """
    Validate a buffer against its dimensions and the cell alphabet

    Returns:
        The buffer as a 1-D int8 array (a copy only if a conversion was needed)

    Raises:
        ValueError: If the dimensions are not positive, the length does not
            match width*height, or a cell holds a value outside the alphabet
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
    buffer = np.asarray(buffer)
    if buffer.ndim != 1:
        raise ValueError(f"Buffer must be flat, got shape {buffer.shape}")
    if buffer.size != width * height:
        raise ValueError(
            f"Buffer length {buffer.size} does not match {width}x{height} grid"
        )
    invalid = ~np.isin(buffer, VALID_CELL_VALUES)
    if np.any(invalid):
        bad = int(buffer[np.argmax(invalid)])
        raise ValueError(f"Invalid cell value in buffer: {bad}")
    return buffer.astype(BUFFER_DTYPE, copy=False)

def as_grid(buffer, width, height):
    # row-major view, index as grid[y, x]
    return buffer.reshape(height, width)

def in_bounds(x, y, width, height):
    return 0 <= x < width and 0 <= y < height
