from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum

from dotgraph.sink import Sink, SinkWriter, writer_for

_SHORT_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def quote(text: str) -> str:
    """Double-quote ``text`` using backslash escapes for non-printable characters."""
    parts = ['"']
    for char in text:
        escaped = _SHORT_ESCAPES.get(char)
        if escaped is not None:
            parts.append(escaped)
        elif char.isprintable():
            parts.append(char)
        else:
            code = ord(char)
            if code < 0x80:
                parts.append(f"\\x{code:02x}")
            elif code < 0x10000:
                parts.append(f"\\u{code:04x}")
            else:
                parts.append(f"\\U{code:08x}")
    parts.append('"')
    return "".join(parts)


@dataclass(slots=True, frozen=True)
class String:
    value: str

    def format(self) -> str:
        return quote(self.value)


@dataclass(slots=True, frozen=True)
class Literal:
    value: str

    def format(self) -> str:
        return self.value


@dataclass(slots=True, frozen=True)
class HTML:
    value: str

    def format(self) -> str:
        return f"<{self.value}>"


AttributeValue = String | Literal | HTML


def _key(key: str | Enum) -> str:
    if isinstance(key, Enum):
        return str(key.value)
    return key


def _coerce(value: AttributeValue | str) -> AttributeValue:
    if isinstance(value, (String, Literal, HTML)):
        return value
    if isinstance(value, str):
        return String(value)
    raise TypeError(f"unsupported attribute value {value!r}")


class Attributes:
    """Key/value styling attributes, always written in ascending key order."""

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str | Enum, AttributeValue | str] | None = None):
        self._values: dict[str, AttributeValue] = {}
        if values:
            self.update(values)

    @classmethod
    def from_reader(
        cls, source: Attributes | Mapping[str | Enum, AttributeValue | str] | None
    ) -> Attributes:
        if source is None:
            return cls()
        if isinstance(source, Attributes):
            return cls(source.all())
        return cls(source)

    def set(self, key: str | Enum, value: AttributeValue | str) -> Attributes:
        self._values[_key(key)] = _coerce(value)
        return self

    def set_string(self, key: str | Enum, value: str) -> Attributes:
        return self.set(key, String(value))

    def set_literal(self, key: str | Enum, value: str) -> Attributes:
        return self.set(key, Literal(value))

    def set_html(self, key: str | Enum, value: str) -> Attributes:
        return self.set(key, HTML(value))

    def update(self, values: Attributes | Mapping[str | Enum, AttributeValue | str]) -> Attributes:
        if isinstance(values, Attributes):
            values = values.all()
        for key, value in values.items():
            self.set(key, value)
        return self

    def update_strings(self, values: Mapping[str | Enum, str]) -> Attributes:
        for key, value in values.items():
            self.set_string(key, value)
        return self

    def update_literals(self, values: Mapping[str | Enum, str]) -> Attributes:
        for key, value in values.items():
            self.set_literal(key, value)
        return self

    def update_html(self, values: Mapping[str | Enum, str]) -> Attributes:
        for key, value in values.items():
            self.set_html(key, value)
        return self

    def get(self, key: str | Enum) -> AttributeValue | None:
        return self._values.get(_key(key))

    def get_string(self, key: str | Enum) -> str:
        value = self.get(key)
        return "" if value is None else value.value

    def delete(self, key: str | Enum) -> None:
        self._values.pop(_key(key), None)

    def all(self) -> dict[str, AttributeValue]:
        return dict(self._values)

    def is_empty(self) -> bool:
        return not self._values

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (str, Enum)):
            return False
        return _key(key) in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._values))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attributes):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"Attributes({self.format()})"

    def format(self, bracketed: bool = True) -> str:
        if not self._values:
            return ""
        pairs = [f"{key}={self._values[key].format()}" for key in sorted(self._values)]
        if bracketed:
            return "[" + ",".join(pairs) + "]"
        return "".join(f"{pair};" for pair in pairs)

    def write_to(self, sink: Sink | SinkWriter, bracketed: bool = True) -> int:
        text = self.format(bracketed)
        if not text:
            return 0
        return writer_for(sink).write(text)


class Styleable:
    """Base for entities that carry an :class:`Attributes` store."""

    __slots__ = ("attributes",)

    def __init__(self) -> None:
        self.attributes = Attributes()

    def set_attribute(self, key: str | Enum, value: AttributeValue | str):
        self.attributes.set(key, value)
        return self

    def set_attribute_string(self, key: str | Enum, value: str):
        self.attributes.set_string(key, value)
        return self

    def set_attribute_literal(self, key: str | Enum, value: str):
        self.attributes.set_literal(key, value)
        return self

    def set_attribute_html(self, key: str | Enum, value: str):
        self.attributes.set_html(key, value)
        return self

    def set_attributes(self, values: Attributes | Mapping[str | Enum, AttributeValue | str]):
        self.attributes.update(values)
        return self

    def set_attributes_string(self, values: Mapping[str | Enum, str]):
        self.attributes.update_strings(values)
        return self

    def get_attribute(self, key: str | Enum) -> AttributeValue | None:
        return self.attributes.get(key)

    def get_attribute_string(self, key: str | Enum) -> str:
        return self.attributes.get_string(key)

    def get_attributes(self) -> dict[str, AttributeValue]:
        return self.attributes.all()

    def delete_attribute(self, key: str | Enum) -> None:
        self.attributes.delete(key)

    def has_attributes(self) -> bool:
        return not self.attributes.is_empty()
