"""
CSV grid format

    # frame,internal
    # resolution,0.05
    # origin,0.0,0.0,0.0
    # anchor,x,y        (start-relative frame only)
    # start,x,y         (optional)
    # goal,x,y          (optional)
    0,100,-1,...
    ...

Every comment line is optional on import; files without a frame line are
read as internal coordinates.
"""

import logging
import os

from ..core.grid_state import Origin, Point
from ..core.transforms import Frame
from .common import build_state, export_view, parse_frame

logger = logging.getLogger(__name__)


def generate_csv(state, shift_to_start=False):
    metadata, frame, anchor = export_view(state, shift_to_start)
    lines = [
        f"# frame,{frame.value}",
        f"# resolution,{metadata.resolution}",
        f"# origin,{metadata.origin.x},{metadata.origin.y},{metadata.origin.theta}",
    ]
    if anchor is not None:
        lines.append(f"# anchor,{anchor.x},{anchor.y}")
    if metadata.start is not None:
        lines.append(f"# start,{metadata.start.x},{metadata.start.y}")
    if metadata.goal is not None:
        lines.append(f"# goal,{metadata.goal.x},{metadata.goal.y}")
    grid = state.buffer.reshape(state.height, state.width)
    for row in grid:
        lines.append(','.join(str(int(v)) for v in row))
    return '\n'.join(lines) + '\n'


def _parse_point(values, key):
    if len(values) < 2:
        raise ValueError(f"'{key}' needs x and y")
    try:
        return Point(int(values[0]), int(values[1]))
    except ValueError:
        raise ValueError(f"Invalid '{key}' coordinates: {values}") from None


def parse_csv(text, resolution=0.05):
    """
    Parse CSV text into a GridState

    Args:
        text: File contents
        resolution: Resolution used when the file does not carry one

    Raises:
        ValueError: If the file has no data, ragged rows or invalid cells
    """
    frame = Frame.INTERNAL
    origin = Origin()
    anchor = start = goal = None
    rows = []

    for line_no, line in enumerate(text.splitlines(), 1):
        line = line.strip()
        if not line:
            continue
        if line.startswith('#'):
            parts = [p.strip() for p in line[1:].split(',')]
            key, values = parts[0], parts[1:]
            if key == 'frame' and values:
                frame = parse_frame(values[0])
            elif key == 'resolution' and values:
                resolution = float(values[0])
            elif key == 'origin' and len(values) >= 3:
                origin = Origin(*(float(v) for v in values[:3]))
            elif key == 'anchor':
                anchor = _parse_point(values, key)
            elif key == 'start':
                start = _parse_point(values, key)
            elif key == 'goal':
                goal = _parse_point(values, key)
            continue
        try:
            rows.append([int(v) for v in line.split(',')])
        except ValueError:
            raise ValueError(f"Invalid cell value on line {line_no}: {line!r}") from None

    if not rows:
        raise ValueError("CSV file contains no data rows")
    width = len(rows[0])
    for y, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"Row {y + 1} has {len(row)} columns, expected {width}")

    data = [v for row in rows for v in row]
    return build_state(width, len(rows), data, resolution=resolution, origin=origin,
                       frame=frame, anchor=anchor, start=start, goal=goal)


def write_csv(state, path, shift_to_start=False):
    os.makedirs(os.path.dirname(path) or '.', exist_ok=True)
    with open(path, 'w') as f:
        f.write(generate_csv(state, shift_to_start))
    logger.info("Wrote CSV grid %s", path)
    return path


def read_csv(path, resolution=0.05):
    with open(path, 'r') as f:
        return parse_csv(f.read(), resolution)
