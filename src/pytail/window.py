"""
window.py: Keep the last N lines of a stream that cannot be rewound.
"""

import sys
from collections import deque

from .sources import Source, Sink


class BoundedLineWindow:
    """
    Rolling window over the most recent `line_count` lines of a source.

    Uses a deque with maxlen so the oldest line is dropped in O(1) once the
    window is full.
    """

    def __init__(self, line_count: int):
        self.line_count = line_count
        # No stream can hold more than sys.maxsize lines
        self.lines = deque(maxlen=min(line_count, sys.maxsize))

    def collect(self, source: Source) -> None:
        """Consume the source to the end, keeping only the newest lines."""
        if self.line_count == 0:
            return
        for line in source.lines():
            self.lines.append(line)

    def flush(self, sink: Sink) -> int:
        """Write the retained lines in arrival order and empty the window."""
        emitted = len(self.lines)
        while self.lines:
            sink.write(self.lines.popleft())
        return emitted
