"""Error hierarchy for graph construction, serialization and tokenizing."""

from __future__ import annotations


class DotGraphError(Exception):
    """Base error for all dotgraph errors."""

    def __init__(self, message: str, *, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


# --- Construction errors ---


class ConfigurationError(DotGraphError):
    """Invalid combination of graph options."""


class GraphWithoutGeneratorError(ConfigurationError):
    def __init__(self) -> None:
        super().__init__("graph requires an id generator")


class SubgraphWithoutParentError(ConfigurationError):
    def __init__(self) -> None:
        super().__init__("subgraph requires a parent graph")


class NonSubgraphWithParentError(ConfigurationError):
    def __init__(self, kind: str) -> None:
        super().__init__(f"graph of kind {kind!r} cannot have a parent")
        self.kind = kind


class RootClusterError(ConfigurationError):
    def __init__(self) -> None:
        super().__init__("root graph cannot be a cluster")


# --- Output errors ---


class WriteError(DotGraphError):
    """The sink failed; ``written`` bytes were accepted before the failure."""

    def __init__(self, message: str, *, written: int, cause: BaseException | None = None):
        super().__init__(message, cause=cause)
        self.written = written


# --- Input errors ---


class TokenizeError(DotGraphError, ValueError):
    def __init__(self, message: str, position: int):
        super().__init__(f"{message} at index {position}")
        self.position = position
