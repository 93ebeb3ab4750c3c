"""
dispatcher.py: Run the tail of every configured source, one after another.

For each source the dispatcher prints the optional header, opens the source,
picks the strategy that fits the direction and the kind of stream, and
records the outcome. A failure on one source never stops the others.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from .config import Direction, TailConfig
from .errors import TailError
from .scanner import BLOCK_SIZE, ChunkedBackwardScanner, StreamCopier
from .skipper import ForwardSkipper
from .sources import Sink, Source, display_name, open_source
from .window import BoundedLineWindow


class SourceState(enum.Enum):
    OPENING = "opening"
    SCANNING = "scanning"
    WINDOWING = "windowing"
    SKIPPING = "skipping"
    COPYING = "copying"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class SourceResult:
    """Completion signal for one source: error is None on success."""
    source_name: str
    error: Optional[TailError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def format_header(name: str) -> bytes:
    # Names are written back as the raw bytes they came from
    return b"==> " + display_name(name).encode('utf-8', 'surrogateescape') + b" <==\n"


class TailDispatcher:
    """
    Drives a whole run for one TailConfig against a single output sink.

    Args:
        config: The resolved configuration.
        sink: Where all output goes.
        opener: Callable that turns a source name into an open Source;
            it must raise OpenFailure when the source is not accessible.
        block_size: Block size for the backward scan and the copier.
    """

    def __init__(self, config: TailConfig, sink: Sink,
                 opener: Callable[[str], Source] = open_source,
                 block_size: int = BLOCK_SIZE):
        self.config = config
        self.sink = sink
        self.opener = opener
        self.block_size = block_size
        self.results: List[SourceResult] = []
        self.states: List[SourceState] = []

    @property
    def failed(self) -> bool:
        return any(not result.ok for result in self.results)

    def run(self) -> List[SourceResult]:
        """Process every source in order and return one result per source."""
        self.results = []
        for index, name in enumerate(self.config.sources):
            self.results.append(self.process(name, first=index == 0))
        return self.results

    def process(self, name: str, first: bool = True) -> SourceResult:
        """Tail a single source, turning any TailError into a failed result."""
        self.states = []
        try:
            if self.config.show_headers:
                if not first:
                    self.sink.write(b"\n")
                self.sink.write(format_header(name))

            self._enter(name, SourceState.OPENING)
            with self.opener(name) as source:
                self._tail(source)
            self.sink.flush()
        except TailError as e:
            if e.source_name is None:
                e.source_name = display_name(name)
            self._enter(name, SourceState.FAILED)
            logging.info(f"{display_name(name)}: failed: {e}")
            return SourceResult(name, e)

        self._enter(name, SourceState.DONE)
        return SourceResult(name)

    def _tail(self, source: Source) -> None:
        count = self.config.item_count

        if self.config.direction is Direction.FROM_TOP:
            self._enter(source.name, SourceState.SKIPPING)
            ForwardSkipper(count).run(source, self.sink)
        elif source.seekable:
            self._enter(source.name, SourceState.SCANNING)
            ChunkedBackwardScanner(count, self.block_size).scan(source, self.sink)
            self._enter(source.name, SourceState.COPYING)
            StreamCopier(self.block_size).copy(source, self.sink)
        else:
            self._enter(source.name, SourceState.WINDOWING)
            window = BoundedLineWindow(count)
            window.collect(source)
            window.flush(self.sink)

    def _enter(self, name: str, state: SourceState) -> None:
        self.states.append(state)
        logging.debug(f"{display_name(name)}: {state.value}")
