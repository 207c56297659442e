"""
ROS map_server export: plain PGM (P2) image plus YAML description
"""

import logging
import os

import yaml

from .common import export_view, to_pgm_pixels

logger = logging.getLogger(__name__)

MAX_LINE_LENGTH = 70
OCCUPIED_THRESH = 0.65
FREE_THRESH = 0.196


def generate_pgm(state):
    """
    P2 PGM text of the grid. Lines are wrapped at 70 characters.

    The pixels never move in start-relative mode, so there is no shift option.
    """
    out = [f"P2\n{state.width} {state.height}\n255\n"]
    line = ''
    for value in to_pgm_pixels(state.buffer):
        segment = f"{value} "
        if len(line) + len(segment) > MAX_LINE_LENGTH:
            out.append(line.rstrip() + '\n')
            line = segment
        else:
            line += segment
    if line:
        out.append(line.rstrip() + '\n')
    return ''.join(out)


def generate_yaml(state, image_filename='map.pgm', shift_to_start=False):
    metadata, _, _ = export_view(state, shift_to_start)
    doc = {
        'image': image_filename,
        'resolution': float(metadata.resolution),
        'origin': [float(metadata.origin.x), float(metadata.origin.y),
                   float(metadata.origin.theta)],
        'negate': 0,
        'occupied_thresh': OCCUPIED_THRESH,
        'free_thresh': FREE_THRESH,
    }
    return yaml.safe_dump(doc, sort_keys=False, default_flow_style=None)


def write_ros_map(state, directory='.', basename='map', shift_to_start=False):
    """
    Write <basename>.pgm and <basename>.yaml into `directory`

    Returns:
        (pgm_path, yaml_path)
    """
    os.makedirs(directory, exist_ok=True)
    pgm_path = os.path.join(directory, f"{basename}.pgm")
    yaml_path = os.path.join(directory, f"{basename}.yaml")
    with open(pgm_path, 'w') as f:
        f.write(generate_pgm(state))
    with open(yaml_path, 'w') as f:
        f.write(generate_yaml(state, os.path.basename(pgm_path), shift_to_start))
    logger.info("Wrote map_server files %s, %s", pgm_path, yaml_path)
    return pgm_path, yaml_path
