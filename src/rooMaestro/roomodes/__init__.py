"""
Roo Code Modes (roomodes) package
Provides utilities for generating and rendering Roo Code mode configurations.
"""
from .utils import slugify, normalize_slug
from .mode_generation import DEFAULT_MODE_NAMES, create_mode_descriptor, generate_modes_from_names, generate_mode_entry
from .serialization import render_yaml, render_json, render_modes
from .markdown_parsing import ModeFileError, parse_mode_file, load_modes_from_directory

__all__ = [
    'slugify',
    'normalize_slug',
    'DEFAULT_MODE_NAMES',
    'create_mode_descriptor',
    'generate_modes_from_names',
    'generate_mode_entry',
    'render_yaml',
    'render_json',
    'render_modes',
    'ModeFileError',
    'parse_mode_file',
    'load_modes_from_directory',
]
