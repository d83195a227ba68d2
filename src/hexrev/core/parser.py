"""
Hex text parser for reversing a dump back into bytes.

The input is scanned once, left to right. A ';' or '/' starts a comment
that runs to the end of the line. Outside comments, ASCII hex digits are
kept and everything else is dropped. The kept digits are then paired up
into bytes, and a trailing unpaired digit is ignored.
"""

from enum import Enum
from functools import reduce
from typing import List, Tuple

from ..utils.hex_utils import COMMENT_MARKERS, is_hex_digit


class ScanState(Enum):
    """Comment suppression state of the scanner."""

    NORMAL = 'normal'
    IN_COMMENT = 'in_comment'


def next_state(state: ScanState, char: str) -> ScanState:
    """
    Compute the scanner state after reading a character.

    Args:
        state (ScanState): State before the character
        char (str): Character just read

    Returns:
        ScanState: State after the character
    """

    if char == '\n':
        return ScanState.NORMAL

    if char in COMMENT_MARKERS:
        return ScanState.IN_COMMENT

    return state


def _step(acc: Tuple[ScanState, List[str]], char: str) -> Tuple[ScanState, List[str]]:
    state, digits = acc
    state = next_state(state, char)

    if state is ScanState.NORMAL and is_hex_digit(char):
        digits.append(char)

    return state, digits


def filter_hex_digits(text: str) -> str:
    """
    Keep only the hex digits that are outside of comments.

    Args:
        text (str): Hex dump text

    Returns:
        str: The retained hex digits in input order
    """

    _, digits = reduce(_step, text, (ScanState.NORMAL, []))
    return ''.join(digits)


def parse(text: str) -> bytes:
    """
    Decode hex text into bytes.

    Args:
        text (str): Hex text, optionally with ';' or '/' line comments

    Returns:
        bytes: Decoded bytes, half the number of retained digits
    """

    digits = filter_hex_digits(text)
    even = len(digits) - len(digits) % 2

    return bytes.fromhex(digits[:even])


def parse_bytes(data: bytes) -> bytes:
    """Decode raw file contents as hex text."""

    return parse(data.decode('latin-1'))
