"""
Dump writer module that drives the core for each mode.
"""

import logging
from typing import BinaryIO, Optional, TextIO

from ..core.chunker import chunk, enumerate_groups
from ..core.mode import Mode
from ..core.parser import parse_bytes
from ..core.renderer import render
from ..errors import OutputError
from .highlight import DumpHighlighter

logger = logging.getLogger(__name__)


class DumpWriter:
    """Writes a buffer to an output stream in the configured mode."""

    def __init__(
        self,
        stream: TextIO,
        mode: Mode,
        highlighter: Optional[DumpHighlighter] = None,
        binary_stream: Optional[BinaryIO] = None,
    ) -> None:
        self.stream = stream
        self.mode = mode
        self.highlighter = highlighter or DumpHighlighter(False)
        self.binary_stream = binary_stream or getattr(stream, 'buffer', None)

    def write(self, buffer: bytes) -> int:
        """
        Write the whole buffer.

        Args:
            buffer (bytes): File contents

        Returns:
            int: Number of failed writes, only nonzero in reverse mode

        Raises:
            OutputError: If a write fails in graphical or hex mode
        """

        if self.mode is Mode.REVERSE:
            return self._write_reverse(buffer)

        if self.mode is Mode.GRAPHICAL:
            self._write_graphical(buffer)
        else:
            self._write_hex(buffer)

        return 0

    def _emit(self, text: str) -> None:
        try:
            self.stream.write(text)
            self.stream.flush()
        except OSError as e:
            raise OutputError(f"Failed to write output: {e.strerror or e}") from e

    def _write_graphical(self, buffer: bytes) -> None:
        lines = 0
        for line_index, group in enumerate_groups(buffer):
            line = render(line_index, group, Mode.GRAPHICAL)
            self._emit(self.highlighter.highlight_line(line))
            lines += 1

        logger.debug("Wrote %d graphical lines", lines)

    def _write_hex(self, buffer: bytes) -> None:
        for line_index, group in enumerate_groups(buffer):
            self._emit(render(line_index, group, Mode.HEX))

        isatty = getattr(self.stream, 'isatty', None)
        if buffer and isatty and isatty():
            self._emit('\n')

    def _write_reverse(self, buffer: bytes) -> int:
        if self.binary_stream is None:
            raise OutputError("Reverse mode needs a binary output stream")

        decoded = parse_bytes(buffer)
        logger.debug("Decoded %d bytes from %d bytes of hex text", len(decoded), len(buffer))

        failures = 0
        for line_index, group in enumerate(chunk(decoded)):
            try:
                self.binary_stream.write(group)
                self.binary_stream.flush()
            except OSError as e:
                failures += 1
                logger.error("Failed to write group %d: %s", line_index, e.strerror or e)

        return failures
