"""
PNG raster export through matplotlib
"""

import io
import logging
import os

import matplotlib.image as mpimg

from .common import to_rgb

logger = logging.getLogger(__name__)


def encode_png(state):
    """
    PNG bytes of the grid, one pixel per cell. Start/goal keep their pixel
    positions in every export mode, only the origin metadata would change,
    and PNG carries none.
    """
    buf = io.BytesIO()
    mpimg.imsave(buf, to_rgb(state), format='png')
    return buf.getvalue()


def write_png(state, path):
    os.makedirs(os.path.dirname(path) or '.', exist_ok=True)
    with open(path, 'wb') as f:
        f.write(encode_png(state))
    logger.info("Wrote PNG image %s", path)
    return path
