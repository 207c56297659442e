"""
Perfect maze carving with a randomized depth-first backtracker
"""

import numpy as np

from ..core.cells import CELL_FREE, CELL_OCCUPIED, as_grid, new_buffer

# up, right, down, left on the step-2 lattice
DIRECTIONS = ((0, -2), (2, 0), (0, 2), (-2, 0))


def generate_maze(width, height, rng=None):
    """
    Carve a perfect maze into a fresh all-OCCUPIED buffer.

    Passages run through lattice cells with odd coordinates, starting at
    (1, 1), with a one-cell occupied border. Grids smaller than 3x3 come back
    fully occupied.

    Args:
        width, height: Grid dimensions
        rng: numpy Generator; a fresh unseeded one when None

    Returns:
        New flat int8 buffer
    """
    rng = np.random.default_rng() if rng is None else rng
    maze = new_buffer(width, height, CELL_OCCUPIED)
    if width < 3 or height < 3:
        return maze

    grid = as_grid(maze, width, height)
    start = (1, 1)
    grid[start[1], start[0]] = CELL_FREE
    visited = {start}
    stack = [start]

    while stack:
        x, y = stack[-1]
        neighbors = []
        for dx, dy in DIRECTIONS:
            nx, ny = x + dx, y + dy
            if 0 < nx < width - 1 and 0 < ny < height - 1 and (nx, ny) not in visited:
                neighbors.append((nx, ny))

        if not neighbors:
            stack.pop()
            continue

        nx, ny = neighbors[rng.integers(len(neighbors))]
        # open the wall between the two lattice cells, then the neighbor
        grid[(y + ny) // 2, (x + nx) // 2] = CELL_FREE
        grid[ny, nx] = CELL_FREE
        visited.add((nx, ny))
        stack.append((nx, ny))

    return maze
