"""
Occupancy grid editor: grid store, coordinate frames, procedural generators
and map exporters
"""

from .core import GridStore, GridState, GridMetadata, Point, Origin
from .generation import MazeOptions, BugtrapOptions, ShapesOptions, ShapeType

__version__ = "0.1.0"

__all__ = [
    'GridStore', 'GridState', 'GridMetadata', 'Point', 'Origin',
    'MazeOptions', 'BugtrapOptions', 'ShapesOptions', 'ShapeType',
]
