"""
skipper.py: Drop the first N lines of a source and pass the rest through.
"""

from .sources import Source, Sink


class ForwardSkipper:
    """Streaming pass-through that discards the first `skip_count` lines."""

    def __init__(self, skip_count: int):
        self.skip_count = skip_count

    def run(self, source: Source, sink: Sink) -> int:
        """
        Copy every line after the first `skip_count` to the sink as it is read.

        Returns:
            Number of lines written.
        """
        emitted = 0
        for index, line in enumerate(source.lines()):
            if index < self.skip_count:
                continue
            sink.write(line)
            emitted += 1
        return emitted
