"""
Bugtrap: U-shaped local-minimum obstacle centered on the grid
"""

from ..core.cells import CELL_OCCUPIED, as_grid


def _fill(grid, x0, y0, w, h):
    # clipped rectangle fill
    height, width = grid.shape
    xa, xb = max(0, x0), min(width, x0 + w)
    ya, yb = max(0, y0), min(height, y0 + h)
    if xa < xb and ya < yb:
        grid[ya:yb, xa:xb] = CELL_OCCUPIED


def draw_bugtrap_in_place(buffer, width, height, options):
    """
    Draw a bugtrap into `buffer`, mutating it in place.

    The trap opens to the right: a vertical back wall on the left and two
    horizontal arms of length `options.length`, spanning `options.width`
    cells top to bottom, all `options.thickness` thick. The back wall keeps
    a gap of `options.aperture` rows around the grid's vertical center,
    floor(a/2) above and ceil(a/2) below. Everything is clipped to the grid.

    Returns:
        The same buffer, for chaining
    """
    grid = as_grid(buffer, width, height)
    cx, cy = width // 2, height // 2
    w, l, t = options.width, options.length, options.thickness

    x0 = cx - l // 2
    y0 = cy - w // 2

    # arms
    _fill(grid, x0, y0, l, t)
    _fill(grid, x0, y0 + w - t, l, t)

    # back wall, split around the aperture
    gap_top = cy - options.aperture // 2
    gap_bottom = cy + options.aperture // 2 + options.aperture % 2
    if options.aperture > 0:
        _fill(grid, x0, y0, t, min(y0 + w, gap_top) - y0)
        _fill(grid, x0, max(y0, gap_bottom), t, y0 + w - max(y0, gap_bottom))
    else:
        _fill(grid, x0, y0, t, w)
    return buffer
