"""
JSON grid document: {width, height, data, metadata}
"""

import json
import logging
import os
from typing import List, Optional

from pydantic import BaseModel, ValidationError, confloat, conint, StrictInt

from ..core.grid_state import Origin, Point
from .common import MAX_IMPORT_DIM, build_state, export_view, parse_frame

logger = logging.getLogger(__name__)


class OriginModel(BaseModel):
    x: float
    y: float
    theta: float


class PointModel(BaseModel):
    x: StrictInt
    y: StrictInt

    def to_point(self):
        return Point(self.x, self.y)


class MetadataModel(BaseModel):
    """
    Grid metadata block. start/goal/anchor are in the coordinate frame
    named by `frame`.
    """
    resolution: confloat(gt=0)
    origin: OriginModel
    frame: str = 'internal'
    anchor: Optional[PointModel] = None
    start: Optional[PointModel] = None
    goal: Optional[PointModel] = None


class GridDocument(BaseModel):
    """
    Top-level JSON import document
    """
    width: conint(strict=True, ge=1, le=MAX_IMPORT_DIM)
    height: conint(strict=True, ge=1, le=MAX_IMPORT_DIM)
    data: List[StrictInt]
    metadata: MetadataModel


def _point_dict(p):
    return {'x': int(p.x), 'y': int(p.y)}


def _to_point(model):
    return None if model is None else model.to_point()


def generate_json(state, shift_to_start=False, indent=2):
    metadata, frame, anchor = export_view(state, shift_to_start)
    meta = {
        'resolution': metadata.resolution,
        'origin': {'x': metadata.origin.x, 'y': metadata.origin.y,
                   'theta': metadata.origin.theta},
        'frame': frame.value,
    }
    if anchor is not None:
        meta['anchor'] = _point_dict(anchor)
    if metadata.start is not None:
        meta['start'] = _point_dict(metadata.start)
    if metadata.goal is not None:
        meta['goal'] = _point_dict(metadata.goal)
    doc = {
        'width': state.width,
        'height': state.height,
        'data': [int(v) for v in state.buffer],
        'metadata': meta,
    }
    return json.dumps(doc, indent=indent)


def parse_json(text):
    """
    Parse a JSON grid document into a GridState

    Raises:
        ValueError: On malformed JSON or any missing/ill-typed field
    """
    try:
        doc = GridDocument.model_validate_json(text)
    except ValidationError as e:
        raise ValueError(f"Invalid grid document: {e}") from e

    meta = doc.metadata
    origin = Origin(meta.origin.x, meta.origin.y, meta.origin.theta)
    return build_state(doc.width, doc.height, doc.data,
                       resolution=meta.resolution, origin=origin,
                       frame=parse_frame(meta.frame),
                       anchor=_to_point(meta.anchor),
                       start=_to_point(meta.start),
                       goal=_to_point(meta.goal))


def write_json(state, path, shift_to_start=False):
    os.makedirs(os.path.dirname(path) or '.', exist_ok=True)
    with open(path, 'w') as f:
        f.write(generate_json(state, shift_to_start))
    logger.info("Wrote JSON grid %s", path)
    return path


def read_json(path):
    with open(path, 'r') as f:
        return parse_json(f.read())
