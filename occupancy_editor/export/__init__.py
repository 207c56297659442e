"""
Export encoders and importers for grid states
"""

from .common import PGM_VALUES, RGB_COLORS, MAX_IMPORT_DIM, to_pgm_pixels, to_rgb, export_view
from .ros_map import generate_pgm, generate_yaml, write_ros_map
from .csv_format import generate_csv, parse_csv, write_csv, read_csv
from .json_format import generate_json, parse_json, write_json, read_json
from .png_format import encode_png, write_png

__all__ = [
    'PGM_VALUES', 'RGB_COLORS', 'MAX_IMPORT_DIM', 'to_pgm_pixels', 'to_rgb', 'export_view',
    'generate_pgm', 'generate_yaml', 'write_ros_map',
    'generate_csv', 'parse_csv', 'write_csv', 'read_csv',
    'generate_json', 'parse_json', 'write_json', 'read_json',
    'encode_png', 'write_png',
]
