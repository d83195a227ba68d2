"""
Core package for chunking, rendering and parsing hex dumps.

This package implements the codec itself. It includes the chunker that
splits a buffer into 16-byte groups, the line renderer for the graphical
and hex modes, and the hex text parser used by reverse mode.
"""

from .mode import Mode
from .chunker import GROUP_SIZE, chunk, enumerate_groups, group_count
from .renderer import render, render_buffer, format_hex, format_text
from .parser import ScanState, parse, parse_bytes, filter_hex_digits

__all__ = [
    'Mode',
    'GROUP_SIZE',
    'chunk',
    'enumerate_groups',
    'group_count',
    'render',
    'render_buffer',
    'format_hex',
    'format_text',
    'ScanState',
    'parse',
    'parse_bytes',
    'filter_hex_digits'
]
