"""
hexrev - Hex dump a file or reverse a hex dump into bytes.
"""

from .errors import HexrevError, ConfigError, InputError, OutputError
from .core import Mode, chunk, render, parse

__version__ = '0.1.0'

__all__ = [
    'HexrevError',
    'ConfigError',
    'InputError',
    'OutputError',
    'Mode',
    'chunk',
    'render',
    'parse',
    '__version__'
]
