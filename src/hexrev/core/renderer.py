"""
Line renderer module for turning byte groups into dump text.
"""

from typing import Final, Iterator

from .chunker import GROUP_SIZE, enumerate_groups
from .mode import Mode
from ..utils.hex_utils import format_byte, format_offset, gutter_char

HEX_FIELD_WIDTH: Final[int] = GROUP_SIZE * 3


def format_hex(group: bytes) -> str:
    """Format every byte of a group as 'bb ' and join the results."""

    return ''.join(format_byte(b) for b in group)


def format_text(group: bytes) -> str:
    """Format the ASCII gutter for a group."""

    return ''.join(gutter_char(b) for b in group)


def render_graphical(line_index: int, group: bytes) -> str:
    """
    Render a group as an address, padded hex field and ASCII gutter.

    The hex field is padded to a fixed width so the gutter of a short
    remainder group lines up with the full groups above it.

    Args:
        line_index (int): Zero-based group number
        group (bytes): Up to 16 bytes

    Returns:
        str: Newline-terminated dump line
    """

    hex_field = format_hex(group).ljust(HEX_FIELD_WIDTH)
    return f"{format_offset(line_index)}: {hex_field} {format_text(group)}\n"


def render_hex(group: bytes) -> str:
    """Render a group as bare hex triples without a newline."""

    return format_hex(group)


def render(line_index: int, group: bytes, mode: Mode) -> str:
    """
    Render one group in the given mode.

    Args:
        line_index (int): Zero-based group number
        group (bytes): Group to render
        mode (Mode): GRAPHICAL or HEX

    Returns:
        str: Rendered text

    Raises:
        ValueError: For REVERSE, which has no rendered form
    """

    if mode is Mode.GRAPHICAL:
        return render_graphical(line_index, group)

    if mode is Mode.HEX:
        return render_hex(group)

    raise ValueError(f"Mode {mode.value!r} does not render groups")


def render_buffer(buffer: bytes, mode: Mode) -> Iterator[str]:
    """Render a whole buffer group by group."""

    for line_index, group in enumerate_groups(buffer):
        yield render(line_index, group, mode)
