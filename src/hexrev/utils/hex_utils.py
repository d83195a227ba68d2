"""
Utility functions for hex formatting and hex text scanning.
"""

from typing import Final

HEX_DIGITS: Final[frozenset] = frozenset('0123456789abcdefABCDEF')
COMMENT_MARKERS: Final[frozenset] = frozenset(';/')
PLACEHOLDER: Final[str] = '.'


def is_hex_digit(char: str) -> bool:
    """
    Check whether a character is an ASCII hex digit.

    Args:
        char (str): Single character to check

    Returns:
        bool: True for 0-9, a-f and A-F
    """

    return char in HEX_DIGITS


def is_printable_graphic(value: int) -> bool:
    """
    Check whether a byte is a printable ASCII character other than space.

    Args:
        value (int): Byte value to check

    Returns:
        bool: True for letters, digits and punctuation
    """

    return 0x21 <= value <= 0x7e


def gutter_char(value: int) -> str:
    """Get the ASCII gutter character for a byte."""

    return chr(value) if is_printable_graphic(value) else PLACEHOLDER


def format_byte(value: int) -> str:
    """Format a byte as two lowercase hex digits followed by a space."""

    return f"{value:02x} "


def format_offset(line_index: int, width: int = 7) -> str:
    """
    Format the address column for a group.

    The group number is printed in `width` hex digits followed by a
    literal 0, which gives the 16-byte aligned offset.

    Args:
        line_index (int): Zero-based group number
        width (int): Number of hex digits for the group number

    Returns:
        str: Formatted address
    """

    return f"{line_index:0{width}x}0"
