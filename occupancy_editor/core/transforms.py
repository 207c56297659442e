"""
Coordinate frames over the grid buffer

Internal coordinates are 0-based with a top-left origin and index the
buffer directly. Display coordinates put floor(width/2), floor(height/2) at
(0, 0). Start-relative coordinates put the start cell at (0, 0).
World coordinates follow the map-server convention
world = origin + index * resolution.
"""

from __future__ import annotations

import math
from dataclasses import replace
from enum import Enum
from typing import Optional, Tuple

from .grid_state import GridMetadata, GridState, Origin, Point


class Frame(Enum):
    INTERNAL = 'internal'
    DISPLAY = 'display'
    START_RELATIVE = 'start_relative'


def grid_center(width: int, height: int) -> Point:
    return Point(width // 2, height // 2)


def internal_to_display(p: Point, width: int, height: int) -> Point:
    c = grid_center(width, height)
    return Point(p.x - c.x, p.y - c.y)


def display_to_internal(p: Point, width: int, height: int) -> Point:
    c = grid_center(width, height)
    return Point(p.x + c.x, p.y + c.y)


def internal_to_start_relative(p: Point, start: Point) -> Point:
    return Point(p.x - start.x, p.y - start.y)


def start_relative_to_internal(p: Point, start: Point) -> Point:
    return Point(p.x + start.x, p.y + start.y)


def to_internal(p: Point, frame: Frame, width: int, height: int,
                anchor: Optional[Point] = None) -> Point:
    """
    Convert a point tagged with its frame into internal coordinates.

    Args:
        p: Point expressed in `frame`
        frame: Frame the point was serialized in
        width, height: Grid dimensions (display frame only)
        anchor: Internal start cell (start-relative frame only)

    Raises:
        ValueError: If a start-relative point comes without an anchor
    """
    if frame is Frame.INTERNAL:
        return p
    if frame is Frame.DISPLAY:
        return display_to_internal(p, width, height)
    if anchor is None:
        raise ValueError("Start-relative points need the internal start cell as anchor")
    return start_relative_to_internal(p, anchor)


def from_internal(p: Point, frame: Frame, width: int, height: int,
                  anchor: Optional[Point] = None) -> Point:
    """Inverse of to_internal"""
    if frame is Frame.INTERNAL:
        return p
    if frame is Frame.DISPLAY:
        return internal_to_display(p, width, height)
    if anchor is None:
        raise ValueError("Start-relative points need the internal start cell as anchor")
    return internal_to_start_relative(p, anchor)


def cell_to_world(p: Point, metadata: GridMetadata) -> Tuple[float, float]:
    r = metadata.resolution
    return (metadata.origin.x + p.x * r, metadata.origin.y + p.y * r)


def world_to_cell(x: float, y: float, metadata: GridMetadata) -> Point:
    r = metadata.resolution
    return Point(int(math.floor((x - metadata.origin.x) / r)),
                 int(math.floor((y - metadata.origin.y) / r)))


def shift_origin_to_start(state: GridState) -> GridMetadata:
    """
    Metadata whose origin puts the world coordinate of the start cell at
    (0, 0). Buffer, dimensions and the stored start/goal indices are left
    alone; without a start the metadata is returned unchanged.
    """
    metadata = state.metadata
    if metadata.start is None:
        return metadata
    r = metadata.resolution
    origin = Origin(x=-(metadata.start.x * r),
                    y=-(metadata.start.y * r),
                    theta=metadata.origin.theta)
    return replace(metadata, origin=origin)


def start_relative_view(state: GridState) -> Tuple[GridMetadata, Frame, Optional[Point]]:
    """
    Metadata as seen by an exporter in "start at (0,0)" mode.

    Returns:
        (metadata, frame, anchor): origin shifted to the start, start and goal
        expressed relative to the start, the frame tag, and the internal start
        cell needed to undo the conversion. Without a start the state's own
        metadata is returned in the internal frame.
    """
    metadata = state.metadata
    if metadata.start is None:
        return metadata, Frame.INTERNAL, None
    anchor = metadata.start
    shifted = shift_origin_to_start(state)
    goal = None
    if metadata.goal is not None:
        goal = internal_to_start_relative(metadata.goal, anchor)
    # GridMetadata does not range-check points; only GridState does
    view = replace(shifted, start=Point(0, 0), goal=goal)
    return view, Frame.START_RELATIVE, anchor
