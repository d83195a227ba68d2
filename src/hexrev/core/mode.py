"""
Output mode selection.
"""

from enum import Enum

from ..errors import ConfigError


class Mode(Enum):
    """Transform applied to the input buffer."""

    GRAPHICAL = 'graphical'
    HEX = 'hex'
    REVERSE = 'reverse'

    @classmethod
    def from_name(cls, name: str) -> 'Mode':
        """
        Look up a mode by its configuration name.

        Args:
            name (str): One of 'graphical', 'hex' or 'reverse'

        Returns:
            Mode: The matching mode

        Raises:
            ConfigError: If the name does not match any mode
        """

        try:
            return cls(name.strip().lower())
        except (ValueError, AttributeError):
            pass

        choices = ', '.join(mode.value for mode in cls)
        raise ConfigError(f"Invalid mode {name!r} (expected one of: {choices})")
