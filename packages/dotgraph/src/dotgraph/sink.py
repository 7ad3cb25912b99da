import logging
from typing import Protocol

from dotgraph.errors import WriteError

logger = logging.getLogger(__name__)


class Sink(Protocol):
    def write(self, data: bytes) -> int | None: ...


class SinkWriter:
    """Counts the bytes a sink accepts across many write calls."""

    __slots__ = ("sink", "written")

    def __init__(self, sink: Sink):
        self.sink = sink
        self.written = 0

    def write(self, text: str) -> int:
        data = text.encode("utf-8")
        try:
            count = self.sink.write(data)
        except Exception as exc:
            logger.debug("sink failed after %d bytes: %s", self.written, exc)
            raise WriteError(
                f"sink write failed after {self.written} bytes",
                written=self.written,
                cause=exc,
            ) from exc

        if count is None:
            count = len(data)
        self.written += count
        if count < len(data):
            logger.debug("short write: %d of %d bytes", count, len(data))
            raise WriteError(
                f"short write: sink accepted {count} of {len(data)} bytes",
                written=self.written,
            )
        return count


def writer_for(sink: Sink | SinkWriter) -> SinkWriter:
    if isinstance(sink, SinkWriter):
        return sink
    return SinkWriter(sink)
