"""
errors.py: Tagged I/O failures raised while tailing a single source.

Every failure carries the name of the offending source and the underlying
OSError. The dispatcher catches them per source and moves on to the next one.
"""

from typing import Optional


class TailError(Exception):
    """Base class for all per-source I/O failures."""

    action = "error processing"

    def __init__(self, source_name: Optional[str], error: OSError):
        self.source_name = source_name
        self.error = error
        super().__init__(self.describe())

    @property
    def reason(self) -> str:
        return self.error.strerror or str(self.error)

    def describe(self) -> str:
        return f"{self.action} '{self.source_name}': {self.reason}"

    def __str__(self) -> str:
        # source_name may be filled in after construction
        return self.describe()


class OpenFailure(TailError):
    """The source could not be opened or accessed."""

    def describe(self) -> str:
        return f"cannot open '{self.source_name}' for reading: {self.reason}"


class SeekFailure(TailError):
    action = "error seeking in"


class ReadFailure(TailError):
    action = "error reading"


class WriteFailure(TailError):
    """Writing to the output sink failed, e.g. a closed downstream pipe."""

    action = "error writing"

    def __init__(self, source_name: Optional[str], error: OSError, sink_name: str = "standard output"):
        self.sink_name = sink_name
        super().__init__(source_name, error)

    def describe(self) -> str:
        return f"error writing '{self.sink_name}': {self.reason}"
