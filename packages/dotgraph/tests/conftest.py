"""Pytest configuration and fixtures."""

import pytest

from dotgraph.generators import RandomIDGenerator


class LimitedSink:
    """Accepts ``limit`` write calls, then fails every further one."""

    def __init__(self, limit: int):
        self.limit = limit
        self.calls = 0
        self.data = bytearray()

    def write(self, data: bytes) -> int:
        if self.calls >= self.limit:
            raise OSError("sink is full")
        self.calls += 1
        self.data.extend(data)
        return len(data)

    def text(self) -> str:
        return self.data.decode("utf-8")


class ChunkSink:
    """Records every write call separately."""

    def __init__(self):
        self.chunks: list[bytes] = []

    def write(self, data: bytes) -> int:
        self.chunks.append(bytes(data))
        return len(data)


@pytest.fixture
def limited_sink():
    """Factory for sinks that fail after a fixed number of write calls."""
    return LimitedSink


@pytest.fixture
def chunk_sink() -> ChunkSink:
    return ChunkSink()


@pytest.fixture
def generator() -> RandomIDGenerator:
    """Generator with a fixed seed for reproducible ids."""
    return RandomIDGenerator(seed=42)
