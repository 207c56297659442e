"""
Configuration file parser for the map editor
"""

import yaml
import os
from typing import Dict, Any

from ..generation import GENERATOR_MODES, BugtrapOptions, MazeOptions, ShapesOptions


class Config:
    """Configuration container with dot notation access"""
    
    def __init__(self, config_dict: Dict[str, Any]):
        for key, value in config_dict.items():
            if isinstance(value, dict):
                setattr(self, key, Config(value))
            else:
                setattr(self, key, value)
    
    def __repr__(self):
        return f"Config({self.__dict__})"
    
    def get(self, key: str, default=None):
        return getattr(self, key, default)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config back to dictionary"""
        result = {}
        for key, value in self.__dict__.items():
            if isinstance(value, Config):
                result[key] = value.to_dict()
            else:
                result[key] = value
        return result


def load_config(config_path: str = "config.yaml") -> Config:
    """
    Load configuration from YAML file
    
    Args:
        config_path: Path to configuration file
        
    Returns:
        Config object with dot notation access
        
    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If a required section is missing
        yaml.YAMLError: If config file is invalid
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found: {config_path}")
    
    with open(config_path, 'r') as f:
        config_dict = yaml.safe_load(f) or {}
    
    # Validate required sections
    required_sections = ['grid', 'generator', 'export']
    for section in required_sections:
        if section not in config_dict:
            raise ValueError(f"Missing required configuration section: {section}")
    
    return Config(config_dict)


def get_grid_params(config: Config) -> Dict[str, Any]:
    """
    Extract grid store parameters from config
    
    Args:
        config: Configuration object
        
    Returns:
        Dictionary of GridStore keyword arguments
    """
    return {
        'width': config.grid.width,
        'height': config.grid.height,
        'resolution': config.grid.resolution,
    }


def get_generator_options(config: Config):
    """
    Build the generator options variant named by generator.mode
    
    Args:
        config: Configuration object
        
    Returns:
        MazeOptions, BugtrapOptions or ShapesOptions, validated

    Raises:
        ValueError: If the mode is unknown or the options are invalid
    """
    gen = config.generator
    mode = gen.mode
    if mode not in GENERATOR_MODES:
        raise ValueError(f"Unknown generator mode: {mode} "
                         f"(expected one of {', '.join(GENERATOR_MODES)})")

    if mode == 'maze':
        return MazeOptions()

    if mode == 'bugtrap':
        bt = gen.bugtrap
        return BugtrapOptions(
            width=bt.width,
            length=bt.length,
            thickness=bt.thickness,
            aperture=bt.aperture,
        ).validate()

    sh = gen.shapes
    return ShapesOptions(
        shapes=tuple(sh.types),
        count=sh.count,
        min_size=sh.min_size,
        max_size=sh.max_size,
        spacing=sh.spacing,
        allow_overlap=sh.allow_overlap,
        clear_first=sh.clear_first,
    ).validate()


def get_export_params(config: Config) -> Dict[str, Any]:
    """
    Extract export parameters from config
    
    Args:
        config: Configuration object
        
    Returns:
        Dictionary with output directory, basename, formats and shift flag
    """
    ex = config.export
    return {
        'directory': ex.directory,
        'basename': ex.basename,
        'formats': list(ex.formats),
        'shift_to_start': bool(ex.shift_to_start),
    }


def print_config(config: Config, indent: int = 0):
    """
    Pretty print configuration
    
    Args:
        config: Configuration object
        indent: Indentation level
    """
    for key, value in config.__dict__.items():
        if isinstance(value, Config):
            print("  " * indent + f"{key}:")
            print_config(value, indent + 1)
        else:
            print("  " * indent + f"{key}: {value}")
