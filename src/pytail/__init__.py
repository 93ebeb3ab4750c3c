"""
pytail: print the last part of files, a Python clone of Unix 'tail'.
"""

from .version import __version__
from .config import Direction, TailConfig
from .dispatcher import TailDispatcher, SourceResult
from .errors import TailError, OpenFailure, SeekFailure, ReadFailure, WriteFailure

__all__ = [
    "__version__",
    "Direction",
    "TailConfig",
    "TailDispatcher",
    "SourceResult",
    "TailError",
    "OpenFailure",
    "SeekFailure",
    "ReadFailure",
    "WriteFailure",
]
