"""
sources.py: Named input sources and the shared output sink.

Source wraps an opened binary stream and converts OSError from every read or
seek into the matching tagged failure, so the tailing components never have
to know which file they are working on. Sink does the same for writes.
"""

import errno
import io
import os
import stat
import sys
import logging
from typing import BinaryIO, Iterator, Optional

from .errors import OpenFailure, SeekFailure, ReadFailure, WriteFailure

STDIN_NAME = "-"
STDIN_DISPLAY_NAME = "standard input"


def display_name(name: str) -> str:
    """Name used in headers and diagnostics."""
    return STDIN_DISPLAY_NAME if name == STDIN_NAME else name


def is_seekable(stream) -> bool:
    """
    True when the stream supports repositioning and a length query.

    Streams backed by a file descriptor only count as seekable when the
    descriptor is a regular file; character devices and FIFOs may accept a
    seek but do not report a meaningful length.
    """
    try:
        if not stream.seekable():
            return False
    except (AttributeError, ValueError, OSError):
        return False

    try:
        fd = stream.fileno()
    except (AttributeError, io.UnsupportedOperation):
        # In-memory stream
        return True
    try:
        return stat.S_ISREG(os.fstat(fd).st_mode)
    except OSError:
        return False


class Source:
    """A named, readable byte stream with tagged error reporting."""

    def __init__(self, name: str, stream: BinaryIO, owned: bool = True):
        self.name = name
        self.stream = stream
        self.owned = owned
        self.seekable = is_seekable(stream)

    @property
    def display_name(self) -> str:
        return display_name(self.name)

    def read(self, size: int) -> bytes:
        try:
            return self.stream.read(size)
        except OSError as e:
            raise ReadFailure(self.display_name, e) from e

    def readinto(self, buffer) -> int:
        try:
            return self.stream.readinto(buffer)
        except OSError as e:
            raise ReadFailure(self.display_name, e) from e

    def readline(self) -> bytes:
        try:
            return self.stream.readline()
        except OSError as e:
            raise ReadFailure(self.display_name, e) from e

    def lines(self) -> Iterator[bytes]:
        """Yield lines forward, terminator included; the last may be unterminated."""
        while True:
            line = self.readline()
            if not line:
                return
            yield line

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> int:
        try:
            return self.stream.seek(offset, whence)
        except OSError as e:
            raise SeekFailure(self.display_name, e) from e

    def close(self):
        if self.owned:
            self.stream.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def __repr__(self):
        return f"Source({self.name!r}, seekable={self.seekable})"


def open_source(name: str, stdin: Optional[BinaryIO] = None) -> Source:
    """
    Open a source by name. '-' means standard input, which is wrapped but
    never closed.

    Raises:
        OpenFailure: If the file cannot be opened.
    """
    if name == STDIN_NAME:
        if stdin is None:
            if sys.stdin is None:
                # fd 0 was closed before startup
                raise OpenFailure(display_name(name), OSError(errno.EBADF, os.strerror(errno.EBADF)))
            stdin = sys.stdin.buffer
        return Source(name, stdin, owned=False)

    try:
        stream = open(name, 'rb')
    except OSError as e:
        raise OpenFailure(name, e) from e
    logging.debug(f"Opened '{name}'")
    return Source(name, stream)


class Sink:
    """The single binary output stream shared by every source in a run."""

    def __init__(self, stream: Optional[BinaryIO] = None, name: str = "standard output"):
        if stream is None:
            stream = sys.stdout.buffer
        self.stream = stream
        self.name = name

    def write(self, data) -> None:
        if not data:
            return
        try:
            written = self.stream.write(data)
        except OSError as e:
            raise WriteFailure(None, e, self.name) from e
        if written is not None and written < len(data):
            raise WriteFailure(None, OSError(errno.EIO, f"short write ({written} of {len(data)} bytes)"), self.name)

    def flush(self) -> None:
        try:
            self.stream.flush()
        except OSError as e:
            raise WriteFailure(None, e, self.name) from e
