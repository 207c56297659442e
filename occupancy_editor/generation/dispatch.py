"""
Single entry point that runs the generator matching an options variant
"""

import logging

import numpy as np

from ..core.cells import check_buffer
from .bugtrap import draw_bugtrap_in_place
from .maze import generate_maze
from .options import BugtrapOptions, MazeOptions, ShapesOptions
from .shapes import scatter_shapes

logger = logging.getLogger(__name__)


def generate(buffer, width, height, options, rng=None):
    """
    Run the generator selected by the type of `options`.

    The caller's buffer is never modified; bugtrap draws into a copy.

    Raises:
        ValueError: If the buffer or options are invalid
        TypeError: If `options` is not a known variant
    """
    buffer = check_buffer(buffer, width, height)
    if isinstance(options, MazeOptions):
        out = generate_maze(width, height, rng=rng)
    elif isinstance(options, BugtrapOptions):
        options.validate()
        out = draw_bugtrap_in_place(np.array(buffer, dtype=np.int8), width, height, options)
    elif isinstance(options, ShapesOptions):
        options.validate()
        out = scatter_shapes(buffer, width, height, options, rng=rng)
    else:
        raise TypeError(f"Unknown generator options: {type(options).__name__}")
    logger.debug("Generated %s on %dx%d grid", type(options).__name__, width, height)
    return out
