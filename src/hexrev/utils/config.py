"""
Layered configuration and logging setup.

Values are merged from four sources, later ones winning:
defaults < config file < environment < command line.
"""

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from typing import Any, Dict, Final, Mapping, Optional, Sequence, Tuple

from ..core.mode import Mode
from ..errors import ConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX: Final[str] = 'HEXREV_'
CONFIG_ENV: Final[str] = ENV_PREFIX + 'CONFIG'
LOG_FORMAT: Final[str] = '%(levelname)s %(name)s: %(message)s'

DEFAULTS: Final[Dict[str, Optional[str]]] = {
    'mode': 'graphical',
    'input': None,
    'log_level': 'info',
    'color': 'never',
}

COLOR_CHOICES: Final[tuple] = ('auto', 'always', 'never')

LOG_LEVELS: Final[Dict[str, int]] = {
    'trace': logging.DEBUG,
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warn': logging.WARNING,
    'warning': logging.WARNING,
    'error': logging.ERROR,
    'critical': logging.CRITICAL,
}


@dataclass(frozen=True)
class Config:
    """Finished configuration for one run."""

    mode: Mode
    input: Optional[str]
    log_level: int
    color: str


def resolve_log_level(name: str) -> int:
    """
    Map a log level name to a logging level.

    Args:
        name (str): Level name such as 'info' or 'debug'

    Returns:
        int: The logging module level

    Raises:
        ConfigError: If the name is not a known level
    """

    level = LOG_LEVELS.get(str(name).strip().lower())
    if level is None:
        raise ConfigError(
            f"Invalid log level {name!r} (expected one of: {', '.join(LOG_LEVELS)})"
        )

    return level


def resolve_color(name: str) -> str:
    """Validate a color setting."""

    color = str(name).strip().lower()
    if color not in COLOR_CHOICES:
        raise ConfigError(
            f"Invalid color {name!r} (expected one of: {', '.join(COLOR_CHOICES)})"
        )

    return color


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""

    parser = argparse.ArgumentParser(
        prog='hexrev',
        description="hexrev - Hex dump a file or reverse a hex dump into bytes",
        usage='%(prog)s [options] <path> [mode=<graphical|hex|reverse>]',
        add_help=False,
    )
    parser.add_argument(
        "args",
        nargs="*",
        metavar="ARG",
        help="Input file path, or key=value settings (mode, input, log_level, color)"
    )
    parser.add_argument(
        "-h", "--help",
        action="store_true",
        help="Show this help message and exit"
    )
    parser.add_argument(
        "-m", "--mode",
        help="Output mode: graphical, hex or reverse (default: graphical)"
    )
    parser.add_argument(
        "-i", "--input",
        help="Input file path, overrides the positional path"
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        help="Log level: debug, info, warning, error or critical (default: info)"
    )
    parser.add_argument(
        "--color",
        help="Colorize graphical output: auto, always or never (default: never)"
    )
    parser.add_argument(
        "-c", "--config",
        help=f"JSON config file (default: ${CONFIG_ENV})"
    )
    return parser


def read_config_file(path: str) -> Dict[str, Any]:
    """
    Read settings from a JSON config file.

    Args:
        path (str): Path to the config file

    Returns:
        Dict[str, Any]: Known settings found in the file

    Raises:
        ConfigError: If the file is unreadable or not a JSON object
    """

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e.strerror or e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    settings = {}
    for key, value in data.items():
        if key not in DEFAULTS:
            logger.debug("Ignoring unknown config key %r in %s", key, path)
            continue
        settings[key] = value

    return settings


def read_environment(environ: Mapping[str, str]) -> Dict[str, str]:
    """Collect HEXREV_* settings from the environment."""

    settings = {}
    for key in DEFAULTS:
        value = environ.get(ENV_PREFIX + key.upper())
        if value:
            settings[key] = value

    return settings


def read_command_line(args: argparse.Namespace) -> Tuple[Dict[str, str], Optional[str]]:
    """
    Collect settings given on the command line.

    Positional arguments of the form key=value set a key; the first plain
    positional argument is the input path. The path is returned on its own
    so that an `input` setting from any layer takes precedence over it.

    Returns:
        Tuple[Dict[str, str], Optional[str]]: Settings and the positional path

    Raises:
        ConfigError: For an unknown key or a second input path
    """

    settings: Dict[str, str] = {}
    path: Optional[str] = None

    for arg in args.args:
        key, sep, value = arg.partition('=')
        if sep and key in DEFAULTS:
            settings[key] = value
            continue

        if sep and key.isidentifier():
            raise ConfigError(f"Unknown setting {key!r}")

        if path is not None:
            raise ConfigError(f"Only one input file is supported, got {path!r} and {arg!r}")
        path = arg

    for key in DEFAULTS:
        value = getattr(args, key, None)
        if value is not None:
            settings[key] = value

    return settings, path


def require_string(settings: Mapping[str, Any], key: str, optional: bool = False) -> Optional[str]:
    """
    Get a setting that must be a string.

    Raises:
        ConfigError: If the value has any other type
    """

    value = settings.get(key)
    if value is None and optional:
        return None

    if not isinstance(value, str):
        raise ConfigError(f"Setting {key!r} must be a string, got {value!r}")

    return value


def merge_settings(*layers: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge setting layers, later layers overriding earlier ones."""

    merged: Dict[str, Any] = {}
    for layer in layers:
        merged.update(layer)

    return merged


def load_config(
    argv: Sequence[str],
    environ: Optional[Mapping[str, str]] = None,
    parser: Optional[argparse.ArgumentParser] = None,
) -> Config:
    """
    Build the finished configuration from all sources.

    Args:
        argv (Sequence[str]): Command line arguments without the program name
        environ (Mapping[str, str]): Environment, defaults to none
        parser (ArgumentParser): Parser to use, defaults to build_parser()

    Returns:
        Config: Validated configuration

    Raises:
        ConfigError: If any value is invalid
    """

    environ = environ if environ is not None else {}
    parser = parser or build_parser()
    args = parser.parse_args(list(argv))

    config_path = args.config or environ.get(CONFIG_ENV)
    file_settings = read_config_file(config_path) if config_path else {}

    cli_settings, path = read_command_line(args)
    settings = merge_settings(
        DEFAULTS,
        file_settings,
        read_environment(environ),
        cli_settings,
    )

    input_path = require_string(settings, 'input', optional=True)

    return Config(
        mode=Mode.from_name(require_string(settings, 'mode')),
        input=input_path if input_path is not None else path,
        log_level=resolve_log_level(require_string(settings, 'log_level')),
        color=resolve_color(require_string(settings, 'color')),
    )


def setup_logging(level: int, stream=None) -> None:
    """Send log records to stderr at the given level."""

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        stream=stream or sys.stderr,
        force=True,
    )
