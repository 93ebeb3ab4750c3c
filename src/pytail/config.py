"""
config.py: Resolved run configuration for pytail.

The CLI turns its arguments into a TailConfig once; the dispatcher only ever
sees the resolved, validated values.
"""

import argparse
import enum
import re
from dataclasses import dataclass
from typing import Sequence, Tuple

from .sources import STDIN_NAME

DEFAULT_LINES = 10


class Direction(enum.Enum):
    FROM_BOTTOM = "from_bottom"
    FROM_TOP = "from_top"


@dataclass(frozen=True)
class TailConfig:
    """
    item_count means "lines to print" for FROM_BOTTOM and "lines to skip"
    for FROM_TOP.
    """
    item_count: int = DEFAULT_LINES
    direction: Direction = Direction.FROM_BOTTOM
    show_headers: bool = False
    sources: Tuple[str, ...] = (STDIN_NAME,)

    def __post_init__(self):
        if self.item_count < 0:
            raise ValueError(f"item_count must be non-negative, got {self.item_count}")
        # Accept any sequence, store a tuple
        object.__setattr__(self, 'sources', tuple(self.sources))


def parse_line_count(text: str) -> Tuple[int, Direction]:
    """
    Parse the argument of -n/--lines.

    'NUM' or '-NUM' selects the last NUM lines. '+NUM' starts output at line
    NUM, i.e. skips NUM-1 lines ('+0' behaves like '+1').

    Raises:
        argparse.ArgumentTypeError: If text is not a whole number.
    """
    value = text.strip()
    direction = Direction.FROM_BOTTOM
    if value.startswith('+'):
        direction = Direction.FROM_TOP
        value = value[1:]
    elif value.startswith('-'):
        value = value[1:]

    if not re.fullmatch(r"\d+", value, re.ASCII):
        raise argparse.ArgumentTypeError(f"invalid number of lines: '{text}'")

    count = int(value)
    if direction is Direction.FROM_TOP:
        count = max(count - 1, 0)
    return count, direction


def should_show_headers(headers, source_count: int) -> bool:
    """-q/-v win when given; otherwise headers appear only for several sources."""
    if headers is not None:
        return headers
    return source_count > 1


def resolve_config(args: argparse.Namespace) -> TailConfig:
    """Build a TailConfig from parsed command line arguments."""
    sources: Sequence[str] = args.files or [STDIN_NAME]
    item_count, direction = args.lines
    return TailConfig(
        item_count=item_count,
        direction=direction,
        show_headers=should_show_headers(args.headers, len(sources)),
        sources=tuple(sources),
    )
