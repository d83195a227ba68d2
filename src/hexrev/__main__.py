"""
Entry point for hexrev.
"""

import logging
import os
import sys
from typing import Mapping, Optional, Sequence

from .errors import ConfigError, HexrevError, InputError, OutputError
from .ui.highlight import DumpHighlighter
from .ui.output import DumpWriter
from .utils.config import build_parser, load_config, setup_logging

logger = logging.getLogger('hexrev')


def read_input(path: str) -> bytes:
    """
    Read the whole input file in one go.

    Raises:
        InputError: If the file cannot be read
    """

    try:
        with open(path, 'rb') as f:
            return f.read()
    except OSError as e:
        raise InputError(f"Cannot read {path}: {e.strerror or e}") from e


def run(
    argv: Sequence[str],
    environ: Optional[Mapping[str, str]] = None,
    stdout=None,
) -> int:
    """Run hexrev with the given arguments and return the exit code."""

    stdout = stdout or sys.stdout
    parser = build_parser()

    if not argv or '-h' in argv or '--help' in argv:
        parser.print_help(sys.stderr)
        return 1

    config = load_config(argv, environ if environ is not None else os.environ, parser)
    setup_logging(config.log_level)

    if not config.input:
        raise ConfigError("Path to the input file is required")

    logger.info("Reading %s in %s mode", config.input, config.mode.value)
    buffer = read_input(config.input)
    logger.debug("Read %d bytes", len(buffer))

    writer = DumpWriter(stdout, config.mode, DumpHighlighter.for_stream(config.color, stdout))
    failures = writer.write(buffer)
    if failures:
        logger.error("%d output writes failed", failures)
        return 1

    return 0


def silence_stdout() -> None:
    """Point stdout at devnull so the final flush cannot fail again."""

    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return

    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def main() -> None:
    """Entry point for the application."""

    try:
        code = run(sys.argv[1:])
    except OutputError as e:
        print(f"hexrev: {e}", file=sys.stderr)
        silence_stdout()
        sys.exit(e.exit_code)
    except HexrevError as e:
        print(f"hexrev: {e}", file=sys.stderr)
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        sys.exit(130)

    sys.exit(code)


if __name__ == "__main__":
    main()
