"""
Terminal highlighting of graphical dump lines using Pygments.
"""

from typing import Optional, TextIO

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers.hexdump import HexdumpLexer


class DumpHighlighter:
    """Colorizes graphical dump lines for terminal output."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self.lexer = HexdumpLexer(stripnl=False)
        self.formatter = TerminalFormatter()

    @classmethod
    def for_stream(cls, color: str, stream: Optional[TextIO]) -> 'DumpHighlighter':
        """
        Create a highlighter for a color setting and output stream.

        Args:
            color: 'always', 'never' or 'auto'
            stream: Stream the dump is written to

        Returns:
            A highlighter, disabled unless colors should be used
        """

        if color == 'always':
            return cls(True)

        if color == 'auto':
            isatty = getattr(stream, 'isatty', None)
            return cls(bool(isatty and isatty()))

        return cls(False)

    def highlight_line(self, line: str) -> str:
        """Highlight a single dump line, keeping its trailing newline."""

        if not self.enabled or not line:
            return line

        return highlight(line, self.lexer, self.formatter)
