"""
Utility package for hex formatting and configuration support functions.
"""

from .hex_utils import (
    is_hex_digit,
    is_printable_graphic,
    gutter_char,
    format_byte,
    format_offset
)
from .config import Config, load_config, resolve_log_level, setup_logging

__all__ = [
    'is_hex_digit',
    'is_printable_graphic',
    'gutter_char',
    'format_byte',
    'format_offset',
    'Config',
    'load_config',
    'resolve_log_level',
    'setup_logging'
]
