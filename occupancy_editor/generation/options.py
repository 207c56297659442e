"""
Generator option variants, one type per generation mode
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class ShapeType(Enum):
    RECT = 'rect'
    SQUARE = 'square'
    CIRCLE = 'circle'
    TRIANGLE = 'triangle'
    CROSS = 'cross'
    ROOM = 'room'


ALL_SHAPES = tuple(ShapeType)


@dataclass(frozen=True)
class MazeOptions:
    """Perfect maze over the whole grid; takes no parameters"""

    def validate(self) -> 'MazeOptions':
        return self


@dataclass(frozen=True)
class BugtrapOptions:
    width: int = 20       # outer span across the arms
    length: int = 30      # arm length
    thickness: int = 2
    aperture: int = 0     # gap in the back wall, 0 for a closed trap

    def validate(self) -> 'BugtrapOptions':
        if self.width <= 0 or self.length <= 0:
            raise ValueError(f"Bugtrap width and length must be positive, "
                             f"got {self.width}x{self.length}")
        if self.thickness < 0 or self.aperture < 0:
            raise ValueError("Bugtrap thickness and aperture cannot be negative")
        return self


@dataclass(frozen=True)
class ShapesOptions:
    shapes: Tuple[ShapeType, ...] = ALL_SHAPES
    count: int = 10
    min_size: int = 3
    max_size: int = 10
    spacing: int = 1
    allow_overlap: bool = False
    clear_first: bool = False

    def __post_init__(self):
        shapes = self.shapes
        if isinstance(shapes, (str, ShapeType)):
            shapes = (shapes,)
        # accept plain strings from config files
        object.__setattr__(self, 'shapes', tuple(ShapeType(s) for s in shapes))

    def validate(self) -> 'ShapesOptions':
        if not self.shapes:
            raise ValueError("At least one shape type must be enabled")
        if self.count <= 0:
            raise ValueError(f"Shape count must be positive, got {self.count}")
        if self.min_size <= 0 or self.max_size <= 0:
            raise ValueError("Shape sizes must be positive")
        if self.min_size > self.max_size:
            raise ValueError(f"min_size {self.min_size} exceeds max_size {self.max_size}")
        if self.spacing < 0:
            raise ValueError(f"Spacing cannot be negative, got {self.spacing}")
        return self


GENERATOR_MODES = {
    'maze': MazeOptions,
    'bugtrap': BugtrapOptions,
    'shapes': ShapesOptions,
}
