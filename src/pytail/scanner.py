"""
scanner.py: Locate the last N lines of a seekable source by reading it
backward in fixed-size blocks, then copy the rest of it to the output.

Only the blocks that hold the last N lines are ever read, so tailing a
multi-gigabyte log costs the same as tailing a small one.
"""

import os
import errno
import logging
from dataclasses import dataclass

from .errors import ReadFailure
from .sources import Source, Sink

BLOCK_SIZE = 1024
NEWLINE = b"\n"


@dataclass
class ScanState:
    """Bookkeeping for a single backward scan."""
    bytes_remaining: int
    newline_count: int = 0
    last_read_length: int = 0
    bytes_scanned: int = 0


class ChunkedBackwardScanner:
    """
    Find the byte offset at which the last `line_count` lines of a seekable
    source begin.

    The cursor walks backward one block at a time. After reading a block it
    sits at that block's end, so stepping back over the block just read plus
    the block about to be read lands on the start of the preceding block.
    """

    def __init__(self, line_count: int, block_size: int = BLOCK_SIZE):
        if block_size <= 0:
            raise ValueError(f"block_size must be positive, got {block_size}")
        self.line_count = line_count
        self.block_size = block_size
        self.state = None

    def scan(self, source: Source, sink: Sink) -> int:
        """
        Scan backward from the end of `source`.

        When the boundary is found the part of the current block that follows
        it is written to `sink` straight away and the source is left at the
        end of that block, ready for StreamCopier. When the source runs out
        first it is rewound to 0 and the whole of it still has to be copied.

        Returns:
            Offset of the first byte of the last `line_count` lines.
        """
        size = source.seek(0, os.SEEK_END)
        state = ScanState(bytes_remaining=size)
        self.state = state

        if self.line_count == 0:
            # Cursor already at end of source: nothing left to copy
            return size

        buffer = bytearray(self.block_size)
        view = memoryview(buffer)

        while state.bytes_remaining > 0:
            block_length = min(state.bytes_remaining, self.block_size)
            source.seek(-(block_length + state.last_read_length), os.SEEK_CUR)

            read_length = source.readinto(view[:block_length])
            if read_length != block_length:
                raise ReadFailure(source.display_name, OSError(
                    errno.EIO, f"short read ({read_length} of {block_length} bytes)"))

            first_block = state.last_read_length == 0
            state.last_read_length = read_length
            state.bytes_remaining -= read_length
            state.bytes_scanned += read_length
            block_start = state.bytes_remaining

            # An unterminated final line is still a line
            if first_block and buffer[read_length - 1:read_length] != NEWLINE:
                state.newline_count = 1

            end = read_length
            while True:
                index = buffer.rfind(NEWLINE, 0, end)
                if index < 0:
                    break
                state.newline_count += 1
                if state.newline_count > self.line_count:
                    sink.write(bytes(view[index + 1:read_length]))
                    offset = block_start + index + 1
                    logging.debug(f"{source.display_name}: last {self.line_count} lines start at "
                                  f"offset {offset} ({state.bytes_scanned} of {size} bytes scanned)")
                    return offset
                end = index

        logging.debug(f"{source.display_name}: at most {self.line_count} lines, copying from start")
        source.seek(0, os.SEEK_SET)
        return 0


class StreamCopier:
    """Copy everything from the source's current position to the sink, byte for byte."""

    def __init__(self, block_size: int = BLOCK_SIZE):
        self.block_size = block_size

    def copy(self, source: Source, sink: Sink) -> int:
        copied = 0
        while True:
            chunk = source.read(self.block_size)
            if not chunk:
                return copied
            sink.write(chunk)
            copied += len(chunk)
