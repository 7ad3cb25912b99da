import random
import time
from typing import Protocol

ID_CHARSET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
DEFAULT_ID_LENGTH = 24


class IDGenerator(Protocol):
    def next(self, length: int | None = None) -> str: ...


class RandomIDGenerator:
    """Random uppercase alphanumeric identifiers.

    Each instance owns its own ``random.Random`` seeded from the monotonic
    clock unless an explicit ``seed`` is given.
    """

    __slots__ = ("length", "_random")

    def __init__(self, length: int = DEFAULT_ID_LENGTH, seed: int | None = None):
        if length <= 0:
            raise ValueError("id length must be positive")
        self.length = length
        self._random = random.Random(time.monotonic_ns() if seed is None else seed)

    def next(self, length: int | None = None) -> str:
        size = self.length if length is None or length <= 0 else length
        return "".join(self._random.choice(ID_CHARSET) for _ in range(size))
