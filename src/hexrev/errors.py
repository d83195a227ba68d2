"""
Exception types raised by hexrev.
"""


class HexrevError(Exception):
    """Base class for all hexrev errors."""

    exit_code = 1


class ConfigError(HexrevError):
    """Raised when a configuration value is invalid."""

    exit_code = 2


class InputError(HexrevError):
    """Raised when the input file cannot be read."""


class OutputError(HexrevError):
    """Raised when writing the dump to the output stream fails."""
