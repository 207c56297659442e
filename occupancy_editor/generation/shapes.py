"""
Random shape scattering with rejection sampling
"""

import logging

import numpy as np
from scipy import ndimage

from ..core.cells import CELL_FREE, CELL_OCCUPIED, as_grid, new_buffer
from .options import ShapeType

logger = logging.getLogger(__name__)

# attempts allowed per requested shape
ATTEMPTS_PER_SHAPE = 100


def _rect_cells(cx, cy, w, h):
    x0 = cx - w // 2
    y0 = cy - h // 2
    return [(x0 + x, y0 + y) for y in range(h) for x in range(w)]


def shape_cells(shape, cx, cy, size, size2):
    """
    Integer cells covered by a shape centered at (cx, cy).

    `size2` is the second side length for rect and room; the other shapes
    only use `size`. Cells may fall outside the grid.
    """
    shape = ShapeType(shape)
    if shape is ShapeType.SQUARE:
        return _rect_cells(cx, cy, size, size)
    if shape is ShapeType.RECT:
        return _rect_cells(cx, cy, size, size2)
    if shape is ShapeType.CIRCLE:
        r = size // 2
        return [(cx + x, cy + y)
                for y in range(-r, r + 1) for x in range(-r, r + 1)
                if x * x + y * y <= r * r]
    if shape is ShapeType.TRIANGLE:
        # apex on top, half-width grows one cell per row
        tri_height = size
        y0 = cy - tri_height // 2
        cells = []
        for y in range(tri_height):
            half = y * size // tri_height
            cells.extend((cx + x, y0 + y) for x in range(-half, half + 1))
        return cells
    if shape is ShapeType.CROSS:
        t = max(1, size // 3)
        return _rect_cells(cx, cy, size, t) + _rect_cells(cx, cy, t, size)
    if shape is ShapeType.ROOM:
        return [(x, y) for (x, y) in _rect_cells(cx, cy, size, size2)
                if x in (cx - size // 2, cx - size // 2 + size - 1)
                or y in (cy - size2 // 2, cy - size2 // 2 + size2 - 1)]
    raise ValueError(f"Unknown shape type: {shape}")


def _footprint(cells, width, height):
    """In-grid cells of a shape as (ys, xs) index arrays"""
    xy = np.array(cells, dtype=np.intp).reshape(-1, 2)
    keep = (xy[:, 0] >= 0) & (xy[:, 0] < width) & (xy[:, 1] >= 0) & (xy[:, 1] < height)
    return xy[keep, 1], xy[keep, 0]


def _clear_of_obstacles(ys, xs, occupied, spacing):
    # a footprint is acceptable if its spacing-cell neighborhood (8-connected,
    # Chebyshev distance) touches no occupied cell; only a window around the
    # footprint padded by `spacing` is examined
    height, width = occupied.shape
    y0 = max(int(ys.min()) - spacing, 0)
    y1 = min(int(ys.max()) + spacing + 1, height)
    x0 = max(int(xs.min()) - spacing, 0)
    x1 = min(int(xs.max()) + spacing + 1, width)
    local = np.zeros((y1 - y0, x1 - x0), dtype=bool)
    local[ys - y0, xs - x0] = True
    if spacing > 0:
        local = ndimage.binary_dilation(
            local, structure=np.ones((3, 3), dtype=bool), iterations=spacing)
    return not np.any(local & occupied[y0:y1, x0:x1])


def random_shape(shapes, width, height, min_size, max_size, rng):
    shape = shapes[rng.integers(len(shapes))]
    cx = int(rng.integers(width))
    cy = int(rng.integers(height))
    size = int(rng.integers(min_size, max_size + 1))
    size2 = int(rng.integers(min_size, max_size + 1))
    return shape, shape_cells(shape, cx, cy, size, size2)


def scatter_shapes(buffer, width, height, options, rng=None):
    """
    Place up to `options.count` random shapes on a new buffer.

    Starts from an all-FREE grid when `options.clear_first` is set, else
    from a copy of `buffer`. Candidates overlapping existing obstacles (or
    within `options.spacing` cells of one) are rejected unless
    `options.allow_overlap`. At most count * 100 candidates are drawn;
    placing fewer shapes than requested is not an error.

    Returns:
        New flat int8 buffer
    """
    out, _ = place_shapes(buffer, width, height, options, rng=rng)
    return out


def place_shapes(buffer, width, height, options, rng=None):
    """Same as scatter_shapes, also returning the in-grid footprint mask of each placed shape"""
    rng = np.random.default_rng() if rng is None else rng
    if options.clear_first:
        out = new_buffer(width, height, CELL_FREE)
    else:
        out = np.array(buffer, dtype=np.int8)
    grid = as_grid(out, width, height)
    occupied = grid == CELL_OCCUPIED

    footprints = []
    max_attempts = options.count * ATTEMPTS_PER_SHAPE
    attempts = 0
    placed = 0
    while placed < options.count and attempts < max_attempts:
        attempts += 1
        shape, cells = random_shape(options.shapes, width, height,
                                    options.min_size, options.max_size, rng)
        ys, xs = _footprint(cells, width, height)
        if ys.size == 0:
            continue
        if not options.allow_overlap and \
                not _clear_of_obstacles(ys, xs, occupied, options.spacing):
            continue
        grid[ys, xs] = CELL_OCCUPIED
        occupied[ys, xs] = True
        footprint = np.zeros((height, width), dtype=bool)
        footprint[ys, xs] = True
        footprints.append(footprint)
        placed += 1

    if placed < options.count:
        logger.debug("Placed %d of %d shapes after %d attempts",
                     placed, options.count, attempts)
    return out, footprints
