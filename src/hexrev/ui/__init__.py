"""
UI package for writing dumps to the terminal.

This package implements the output side of hexrev, including the
DumpWriter that drives the core for each mode and the DumpHighlighter
for colorizing graphical dumps with Pygments.
"""

from .highlight import DumpHighlighter
from .output import DumpWriter

__all__ = ['DumpHighlighter', 'DumpWriter']
