"""
Matplotlib preview of a grid state
"""

import matplotlib.pyplot as plt

from ..core.transforms import grid_center
from ..export.common import to_rgb


def plot_grid(state, ax=None, title="Occupancy Grid", show_center=False):
    """
    Draw the grid on a matplotlib axis, start/goal as markers

    Args:
        state: GridState to draw
        ax: Axis to draw on; a new figure when None
        title: Axis title
        show_center: Also mark the display-frame origin

    Returns:
        The axis
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))
    ax.imshow(to_rgb(state, mark_points=False), interpolation='nearest')

    start, goal = state.metadata.start, state.metadata.goal
    if start is not None:
        ax.plot(start.x, start.y, 'o', color='tab:green', label='start')
    if goal is not None:
        ax.plot(goal.x, goal.y, '*', color='tab:red', markersize=10, label='goal')
    if show_center:
        c = grid_center(state.width, state.height)
        ax.plot(c.x, c.y, '+', color='tab:blue', label='center')
    if start is not None or goal is not None or show_center:
        ax.legend(loc='upper right', fontsize='small')

    ax.set_title(f"{title} ({state.width}x{state.height}, "
                 f"{state.metadata.resolution} m/cell)")
    return ax
