"""Line-oriented INI parsing with case-insensitive lookups and a streaming API."""

from __future__ import annotations

import enum
import re
from collections.abc import Callable
from dataclasses import dataclass, field

MAX_LINE_LENGTH = 256
_LIMIT = MAX_LINE_LENGTH - 1
_WS = " \t\n\v\f\r"

_SECTION_BODY = re.compile(r"[^\]\n]*")
_SEPARATOR = re.compile(r"[=:]")
_LINE_END = re.compile(r"[\r\n]")
_STREAM_BREAK = re.compile(r"[\r\n]+")


class IniError(Exception):
    """Raised when INI content cannot be loaded."""


class LineType(enum.Enum):
    """Classification of a single INI line."""

    EMPTY = enum.auto()
    SECTION = enum.auto()
    KEY_VALUE = enum.auto()
    COMMENT = enum.auto()
    INVALID = enum.auto()


class EventType(enum.Enum):
    """Kinds of events delivered by :func:`parse_stream`."""

    SECTION = enum.auto()
    KEY_VALUE = enum.auto()
    COMMENT = enum.auto()
    ERROR = enum.auto()


@dataclass
class KeyValue:
    """A key and its value inside a section."""

    key: str
    value: str


@dataclass
class Section:
    """A named section holding its entries in file order."""

    name: str
    key_values: list[KeyValue] = field(default_factory=list)


Handler = Callable[[EventType, "str | None", "str | None", "str | None"], bool]


def parse_line(line: str) -> tuple[LineType, str, str, str]:
    """Classify one line, returning (type, section, key, value).

    Fields that do not apply to the line's type are empty strings.
    """
    text = line.lstrip(_WS)
    if not text:
        return LineType.EMPTY, "", "", ""
    if text[0] in ";#":
        return LineType.COMMENT, "", "", ""

    if text[0] == "[":
        body = text[1:]
        end = _SECTION_BODY.match(body).end()
        if end < len(body) and body[end] == "]":
            return LineType.SECTION, body[:end][:_LIMIT].strip(_WS), "", ""
        return LineType.INVALID, "", "", ""

    separator = _SEPARATOR.search(text)
    if separator is None:
        return LineType.INVALID, "", "", ""
    key = text[: separator.start()][:_LIMIT].strip(_WS)
    if not key:
        return LineType.INVALID, "", "", ""
    rest = text[separator.end():].lstrip(_WS)
    value = _LINE_END.split(rest, 1)[0][:_LIMIT].strip(_WS)
    return LineType.KEY_VALUE, "", key, value


def _same_name(left: str, right: str) -> bool:
    return left.lower() == right.lower()


class IniContext:
    """Parsed INI document with its sections in file order."""

    def __init__(self, content: str) -> None:
        if not content:
            raise IniError("no content to parse")
        self.sections: list[Section] = []
        current: Section | None = None
        text = content.split("\0", 1)[0]
        for raw in text.split("\n"):
            if raw.endswith("\r"):
                raw = raw[:-1]
            kind, name, key, value = parse_line(raw[:_LIMIT])
            if kind is LineType.SECTION:
                current = Section(name)
                self.sections.append(current)
            elif kind is LineType.KEY_VALUE and current is not None:
                current.key_values.append(KeyValue(key, value))

    def _find_section(self, section: str | None) -> Section | None:
        if section is None:
            return None
        return next((s for s in self.sections if _same_name(s.name, section)), None)

    def has_section(self, section: str | None) -> bool:
        """Whether a section of that name exists."""
        return self._find_section(section) is not None

    def has_key(self, section: str | None, key: str | None) -> bool:
        """Whether the first section of that name holds the key."""
        found = self._find_section(section)
        if found is None or key is None:
            return False
        return any(_same_name(kv.key, key) for kv in found.key_values)

    def has_value(self, section: str | None, key: str | None) -> bool:
        """Whether the key exists and its value is not empty."""
        return bool(self.get_value(section, key))

    def get_value(
        self, section: str | None, key: str | None, max_len: int | None = None
    ) -> str | None:
        """Return the last value given to the key, or None when absent.

        With ``max_len`` the result holds at most ``max_len - 1`` characters.
        """
        if max_len is not None and max_len <= 0:
            raise ValueError("max_len must be positive")
        found = self._find_section(section)
        if found is None or key is None:
            return None
        value = None
        for kv in found.key_values:
            if _same_name(kv.key, key):
                value = kv.value
        if value is not None and max_len is not None:
            value = value[: max_len - 1]
        return value


def parse_stream(content: str, handler: Handler) -> bool:
    """Feed parse events to ``handler``; return False once it returns False."""
    current_section = ""
    for raw in _STREAM_BREAK.split(content):
        if not raw:
            continue
        line = raw[:_LIMIT]
        kind, section, key, value = parse_line(line)
        if kind is LineType.SECTION:
            current_section = section
            keep_going = handler(EventType.SECTION, current_section, None, None)
        elif kind is LineType.KEY_VALUE:
            keep_going = handler(EventType.KEY_VALUE, current_section, key, value)
        elif kind is LineType.COMMENT:
            keep_going = handler(EventType.COMMENT, None, None, line)
        elif kind is LineType.INVALID:
            keep_going = handler(EventType.ERROR, None, None, line)
        else:
            continue
        if not keep_going:
            return False
    return True