"""
Pytest configuration and shared fixtures for pytail tests.

This module provides common fixtures used across multiple test files.
"""

import pytest
import tempfile
import os
import sys
import logging
from pathlib import Path

# Add the src directory to the path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


@pytest.fixture(autouse=True)
def restore_logging():
    """main() reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_file(temp_dir):
    """Factory: write bytes to a file in temp_dir and return its path."""
    def _write(name, data: bytes):
        path = temp_dir / name
        path.write_bytes(data)
        return path
    return _write


@pytest.fixture
def numbered_file(write_file):
    """A file with 20 numbered lines."""
    return write_file("numbered.txt", b"".join(b"line %d\n" % i for i in range(1, 21)))


@pytest.fixture
def sample_inputs():
    """Inputs covering empty, unterminated, blank-line and multi-block cases."""
    return [
        b"",
        b"\n",
        b"\n\n\n",
        b"a",
        b"a\n",
        b"a\nb\nc\nd\n",
        b"a\nb\nc",
        b"\r\nwindows\r\nline endings\r\n",
        b"no newline at all in this rather long single line",
        b"".join(b"line %d\n" % i for i in range(1, 60)),
        b"".join(b"x" * (i % 13) + b"\n" for i in range(40)) + b"tail",
        bytes(range(256)) * 3,
    ]
