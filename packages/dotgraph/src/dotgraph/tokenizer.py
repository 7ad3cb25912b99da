from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from dotgraph.errors import TokenizeError


class TokenKind(str, Enum):
    EOF = "eof"
    STRICT = "strict"
    GRAPH = "graph"
    DIGRAPH = "digraph"
    SUBGRAPH = "subgraph"
    NODE = "node"
    EDGE = "edge"
    LINE_COMMENT = "line_comment"
    BLOCK_COMMENT = "block_comment"
    OPEN_BLOCK = "open_block"
    CLOSE_BLOCK = "close_block"
    OPEN_SQUARE_BLOCK = "open_square_block"
    CLOSE_SQUARE_BLOCK = "close_square_block"
    SEMICOLON = "semicolon"
    COMMA = "comma"
    EQUALS = "equals"
    DIRECTED_EDGE = "directed_edge"
    UNDIRECTED_EDGE = "undirected_edge"
    LITERAL_ID = "literal_id"
    QUOTED_ID = "quoted_id"
    HTML_ID = "html_id"


@dataclass(slots=True, frozen=True)
class Token:
    kind: TokenKind
    value: str
    position: int


SINGLE_CHAR_TOKENS = {
    "{": TokenKind.OPEN_BLOCK,
    "}": TokenKind.CLOSE_BLOCK,
    "[": TokenKind.OPEN_SQUARE_BLOCK,
    "]": TokenKind.CLOSE_SQUARE_BLOCK,
    "=": TokenKind.EQUALS,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
}

KEYWORDS = {
    "strict": TokenKind.STRICT,
    "graph": TokenKind.GRAPH,
    "digraph": TokenKind.DIGRAPH,
    "subgraph": TokenKind.SUBGRAPH,
    "node": TokenKind.NODE,
    "edge": TokenKind.EDGE,
}


def lex(source: str) -> list[Token]:
    return list(iter_tokens(source))


def iter_tokens(source: str) -> Iterator[Token]:
    index = 0
    length = len(source)
    line_start = True

    while index < length:
        char = source[index]
        if char.isspace():
            if char == "\n":
                line_start = True
            index += 1
            continue

        start = index
        at_line_start = line_start
        line_start = False

        if source.startswith("//", index) or (char == "#" and at_line_start):
            index = _skip_to_line_end(source, index)
            yield Token(TokenKind.LINE_COMMENT, source[start:index], start)
            continue

        if source.startswith("/*", index):
            index = _read_block_comment(source, index)
            yield Token(TokenKind.BLOCK_COMMENT, source[start:index], start)
            continue

        if char == '"':
            index = _read_quoted(source, index)
            yield Token(TokenKind.QUOTED_ID, source[start:index], start)
            continue

        if char == "<":
            index = _read_html(source, index)
            yield Token(TokenKind.HTML_ID, source[start:index], start)
            continue

        if source.startswith("->", index):
            yield Token(TokenKind.DIRECTED_EDGE, "->", start)
            index += 2
            continue

        if source.startswith("--", index):
            yield Token(TokenKind.UNDIRECTED_EDGE, "--", start)
            index += 2
            continue

        token_kind = SINGLE_CHAR_TOKENS.get(char)
        if token_kind is not None:
            yield Token(token_kind, char, start)
            index += 1
            continue

        if char == ">":
            raise TokenizeError("Unbalanced '>'", index)

        if _is_identifier_part(char):
            value, index = _read_identifier(source, index)
            yield Token(KEYWORDS.get(value.lower(), TokenKind.LITERAL_ID), value, start)
            continue

        raise TokenizeError(f"Unexpected character {char!r}", index)

    yield Token(TokenKind.EOF, "", length)


def _skip_to_line_end(source: str, index: int) -> int:
    while index < len(source) and source[index] != "\n":
        index += 1
    return index


def _read_block_comment(source: str, index: int) -> int:
    end = source.find("*/", index + 2)
    if end < 0:
        raise TokenizeError("Unterminated block comment", index)
    return end + 2


def _read_quoted(source: str, index: int) -> int:
    start = index
    index += 1
    while index < len(source):
        char = source[index]
        if char == '"':
            return index + 1
        if char == "\\":
            index += 1
        index += 1
    raise TokenizeError("Unterminated quoted id", start)


def _read_html(source: str, index: int) -> int:
    start = index
    depth = 0
    while index < len(source):
        char = source[index]
        if char == "<":
            depth += 1
        elif char == ">":
            depth -= 1
            if depth == 0:
                return index + 1
        index += 1
    raise TokenizeError("Unterminated HTML id", start)


def _read_identifier(source: str, index: int) -> tuple[str, int]:
    start = index
    while index < len(source) and _is_identifier_part(source[index]):
        if source.startswith("--", index) or source.startswith("->", index):
            break
        index += 1
    return source[start:index], index


def _is_identifier_part(char: str) -> bool:
    return char.isalnum() or char in "_.-" or ord(char) >= 0x80
