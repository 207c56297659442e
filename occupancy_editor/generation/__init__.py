"""
Procedural map generators: maze, bugtrap and random shapes
"""

from .options import (ShapeType, ALL_SHAPES, MazeOptions, BugtrapOptions,
                      ShapesOptions, GENERATOR_MODES)
from .maze import generate_maze
from .bugtrap import draw_bugtrap_in_place
from .shapes import shape_cells, scatter_shapes, place_shapes
from .dispatch import generate

__all__ = [
    'ShapeType', 'ALL_SHAPES', 'MazeOptions', 'BugtrapOptions', 'ShapesOptions',
    'GENERATOR_MODES', 'generate_maze', 'draw_bugtrap_in_place', 'shape_cells',
    'scatter_shapes', 'place_shapes', 'generate',
]
