"""
common.py: Shared helpers for the pytail command line.

- Logging setup (level and optional log file from the run's settings).
- Console diagnostics on stderr, colored when stderr is a terminal.
"""

import sys
import logging
from pathlib import Path

from colorama import Fore, Style

PROGRAM = "tail"


def setup_logging(config):
    """
    Configures Python's logging module.

    Log records go to stderr (and OUTFILE when given) so that standard
    output carries nothing but tailed bytes.
    """
    log_level_str = config.get('LOG_LEVEL', 'WARNING').upper()
    log_file_path = config.get('OUTFILE', None)

    numeric_level = getattr(logging, log_level_str, None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {log_level_str}')

    log_format = '%(asctime)s - %(levelname)s - %(message)s'

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file_path:
        Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file_path))

    logging.basicConfig(level=numeric_level, format=log_format, handlers=handlers, force=True)
    logging.debug(f"Logging setup with level {log_level_str}.")


def _use_color(stream) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def print_error(message: str, stream=None):
    """Print 'tail: <message>' to stderr."""
    if stream is None:
        stream = sys.stderr
    text = f"{PROGRAM}: {message}"
    if _use_color(stream):
        text = f"{Fore.RED}{text}{Style.RESET_ALL}"
    print(text, file=stream)
