"""Human-readable output helpers.

Nothing here knows about the graph model: both writers are sinks that sit
between a serializer and the final destination.
"""

from __future__ import annotations

import codecs
import io
from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum

from dotgraph.sink import Sink


class IndentedWriter:
    """Pass-through sink that tracks an indentation level for new lines."""

    def __init__(self, sink: Sink, indent: str = "\t"):
        self.sink = sink
        self.unit = indent
        self.level = 0

    def write(self, data: bytes) -> int | None:
        return self.sink.write(data)

    def write_string(self, text: str) -> int:
        data = text.encode("utf-8")
        count = self.sink.write(data)
        return len(data) if count is None else count

    def indent(self) -> None:
        self.level += 1

    def back_indent(self) -> None:
        if self.level > 0:
            self.level -= 1

    def new_line(self) -> None:
        self.write_string("\n" + self.unit * self.level)

    @contextmanager
    def indented(self) -> Iterator[IndentedWriter]:
        self.indent()
        try:
            yield self
        finally:
            self.back_indent()

    @contextmanager
    def new_line_indented(self) -> Iterator[IndentedWriter]:
        with self.indented():
            self.new_line()
            yield self
        self.new_line()


class _State(Enum):
    NORMAL = "normal"
    QUOTED = "quoted"
    HTML = "html"
    LINE_COMMENT = "line_comment"
    BLOCK_COMMENT = "block_comment"


class PrettyWriter:
    """Sink that re-indents DOT text.

    Statements end a line after ``{``, ``;`` and ``}``, every open block adds
    one indentation level, and quoted ids, HTML ids and comments pass through
    untouched. State is kept between calls, so the text may arrive in chunks
    split anywhere, including inside a multi-byte character.
    """

    def __init__(self, sink: Sink, indent: str = "  "):
        self.sink = sink
        self._buffer = io.BytesIO()
        self._lines = IndentedWriter(self._buffer, indent)
        self._decoder = codecs.getincrementaldecoder("utf-8")()
        self._state = _State.NORMAL
        self._previous = ""
        self._escaped = False
        self._html_depth = 0
        self._line_started = False
        self._pending_line = False

    def write(self, data: bytes) -> int:
        text = self._decoder.decode(data)
        run: list[str] = []
        for char in text:
            self._feed(char, run)
        self._emit(run)
        self._flush_buffer()
        return len(data)

    def flush(self) -> None:
        """Terminate the last line if output is pending one."""
        if self._pending_line:
            self._lines.write_string("\n")
            self._pending_line = False
            self._line_started = False
        self._flush_buffer()

    def _feed(self, char: str, run: list[str]) -> None:
        state = self._state
        if state is _State.QUOTED:
            run.append(char)
            if self._escaped:
                self._escaped = False
            elif char == "\\":
                self._escaped = True
            elif char == '"':
                self._state = _State.NORMAL
        elif state is _State.HTML:
            run.append(char)
            if char == "<":
                self._html_depth += 1
            elif char == ">":
                self._html_depth -= 1
                if self._html_depth == 0:
                    self._state = _State.NORMAL
        elif state is _State.LINE_COMMENT:
            if char == "\n":
                self._end_line(run)
                self._state = _State.NORMAL
            else:
                run.append(char)
        elif state is _State.BLOCK_COMMENT:
            run.append(char)
            if self._previous == "*" and char == "/":
                self._state = _State.NORMAL
                char = ""
        else:
            self._feed_normal(char, run)
            if self._state is _State.BLOCK_COMMENT:
                # "/*/" does not close the comment
                char = ""
        self._previous = char

    def _feed_normal(self, char: str, run: list[str]) -> None:
        if char == "\n":
            if self._line_started:
                self._end_line(run)
            return
        if char.isspace():
            if self._line_started and not self._pending_line:
                run.append(char)
            return

        if char == "}":
            self._emit(run)
            self._lines.back_indent()
            if self._line_started or self._pending_line:
                self._lines.new_line()
            self._lines.write_string("}")
            self._line_started = True
            self._pending_line = True
            return

        fresh = self._start_line(run)
        run.append(char)
        if char == "{":
            self._emit(run)
            self._lines.indent()
            self._pending_line = True
        elif char == ";":
            self._pending_line = True
        elif char == '"':
            self._state = _State.QUOTED
        elif char == "<":
            self._state = _State.HTML
            self._html_depth = 1
        elif char == "#" and fresh:
            self._state = _State.LINE_COMMENT
        elif char == "/" and self._previous == "/":
            self._state = _State.LINE_COMMENT
        elif char == "*" and self._previous == "/":
            self._state = _State.BLOCK_COMMENT

    def _start_line(self, run: list[str]) -> bool:
        fresh = self._pending_line or not self._line_started
        if self._pending_line:
            self._emit(run)
            self._lines.new_line()
            self._pending_line = False
        self._line_started = True
        return fresh

    def _end_line(self, run: list[str]) -> None:
        self._emit(run)
        self._pending_line = True

    def _emit(self, run: list[str]) -> None:
        if run:
            self._lines.write_string("".join(run))
            run.clear()

    def _flush_buffer(self) -> None:
        data = self._buffer.getvalue()
        if data:
            self._buffer.seek(0)
            self._buffer.truncate()
            count = self.sink.write(data)
            if count is not None and count < len(data):
                raise OSError(f"short write: sink accepted {count} of {len(data)} bytes")


def prettify(text: str, indent: str = "  ") -> str:
    buffer = io.BytesIO()
    writer = PrettyWriter(buffer, indent)
    writer.write(text.encode("utf-8"))
    writer.flush()
    return buffer.getvalue().decode("utf-8")
