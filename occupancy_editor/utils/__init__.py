"""
Utility functions for configuration parsing and visualization
"""

from .config_parser import (load_config, get_grid_params, get_generator_options,
                            get_export_params, print_config, Config)
from .visualization import plot_grid

__all__ = [
    'load_config',
    'get_grid_params',
    'get_generator_options',
    'get_export_params',
    'print_config',
    'Config',
    'plot_grid',
]
