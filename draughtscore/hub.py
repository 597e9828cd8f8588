"""Line protocol helpers: parsing commands and ``name=value`` pairs, writing replies."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

from .board import BadInput

_BLANKS = " \t\n\v\f\r"


@dataclass(frozen=True)
class Pair:
    """A ``name=value`` pair; ``value`` is empty when no value was given."""

    name: str
    value: str = ""


class Scanner:
    """Tokenizer for a single protocol line."""

    def __init__(self, s: str) -> None:
        self._text = s
        self._pos = 0

    def get_command(self) -> str:
        return self.get_name()

    def get_pair(self) -> Pair:
        name = self.get_name()
        value = ""
        self._skip_blank()
        if self._peek() == "=":
            self._pos += 1
            value = self.get_value()
        return Pair(name, value)

    def get_name(self) -> str:
        self._skip_blank()
        start = self._pos
        while self._is_id(self._peek()):
            self._pos += 1
        name = self._text[start:self._pos]
        if not name:
            raise BadInput("expected a name")
        return name

    def get_value(self) -> str:
        self._skip_blank()
        if self._peek() != '"':
            return self.get_name()
        self._pos += 1
        start = self._pos
        while self._peek() != '"':
            if self._at_end():
                raise BadInput('missing closing \'"\'')
            self._pos += 1
        value = self._text[start:self._pos]
        self._pos += 1
        return value

    def eos(self) -> bool:
        """True when only blanks remain."""
        self._skip_blank()
        return self._at_end()

    @staticmethod
    def is_name(s: str) -> bool:
        return s != "" and all(Scanner._is_id(c) for c in s)

    def _skip_blank(self) -> None:
        while self._is_blank(self._peek()):
            self._pos += 1

    def _at_end(self) -> bool:
        return self._pos >= len(self._text)

    def _peek(self) -> str:
        return "" if self._at_end() else self._text[self._pos]

    @staticmethod
    def _is_blank(c: str) -> bool:
        return c != "" and c in _BLANKS

    @staticmethod
    def _is_id(c: str) -> bool:
        if c == "":
            return False
        code = ord(c)
        if code < 32 or code == 127:
            return False
        return not Scanner._is_blank(c) and c not in '="'


def _format_value(value: str) -> str:
    return value if Scanner.is_name(value) else f'"{value}"'


def format_pair(name: str, value: str) -> str:
    """Render ``name=value``, quoting the value unless it is a bare name."""
    return f"{name}={_format_value(value)}"


def add_pair(line: str, name: str, value: int | float | str) -> str:
    """Return ``line`` with a pair appended."""
    if isinstance(value, bool):
        text = str(int(value))
    elif isinstance(value, float):
        text = f"{value:f}"
    else:
        text = str(value)
    return f"{line} {format_pair(name, text)}"


def error_line(msg: str) -> str:
    return "error " + format_pair("message", msg)


def read(stream: TextIO | None = None) -> str:
    """Read one line without its newline; raise EOFError at end of input."""
    source = stream if stream is not None else sys.stdin
    line = source.readline()
    if line == "":
        raise EOFError("end of input")
    return line[:-1] if line.endswith("\n") else line


def write(line: str, stream: TextIO | None = None) -> None:
    print(line, file=stream if stream is not None else sys.stdout, flush=True)