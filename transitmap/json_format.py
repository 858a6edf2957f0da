"""Reading and writing JSON documents in the catalogue's text format."""

from __future__ import annotations

import math
from typing import Any, IO

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_INDENT_STEP = 4


class ParsingError(ValueError):
    """Raised when JSON text cannot be parsed."""


def _is_alpha(ch: str) -> bool:
    return bool(ch) and ch.isascii() and ch.isalpha()


def _is_digit(ch: str) -> bool:
    return bool(ch) and ch in _DIGITS


class _Parser:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _get(self) -> str:
        ch = self._peek()
        if ch:
            self._pos += 1
        return ch

    def _next_token(self) -> str:
        while self._peek() and self._peek() in _WHITESPACE:
            self._pos += 1
        return self._get()

    def _unget(self) -> None:
        self._pos -= 1

    def parse_node(self) -> Any:
        ch = self._next_token()
        if not ch:
            raise ParsingError("Unexpected EOF")
        if ch == "[":
            return self._parse_array()
        if ch == "{":
            return self._parse_dict()
        if ch == '"':
            return self._parse_string()
        self._unget()
        if ch in "tf":
            return self._parse_bool()
        if ch == "n":
            return self._parse_null()
        return self._parse_number()

    def _parse_literal(self) -> str:
        start = self._pos
        while _is_alpha(self._peek()):
            self._pos += 1
        return self._text[start:self._pos]

    def _parse_array(self) -> list:
        result = []
        while True:
            ch = self._next_token()
            if not ch:
                raise ParsingError("Array parsing error")
            if ch == "]":
                return result
            if ch != ",":
                self._unget()
            result.append(self.parse_node())

    def _parse_dict(self) -> dict:
        result: dict[str, Any] = {}
        while True:
            ch = self._next_token()
            if not ch:
                raise ParsingError("Dictionary parsing error")
            if ch == "}":
                return result
            if ch == '"':
                key = self._parse_string()
                ch = self._next_token()
                if ch != ":":
                    raise ParsingError(f": is expected but '{ch}' has been found")
                if key in result:
                    raise ParsingError(f"Duplicate key '{key}' have been found")
                result[key] = self.parse_node()
            elif ch != ",":
                raise ParsingError(f"',' is expected but '{ch}' has been found")

    def _parse_string(self) -> str:
        escapes = {"n": "\n", "t": "\t", "r": "\r", '"': '"', "\\": "\\"}
        chars = []
        while True:
            ch = self._get()
            if not ch:
                raise ParsingError("String parsing error")
            if ch == '"':
                return "".join(chars)
            if ch == "\\":
                escaped = self._get()
                if not escaped:
                    raise ParsingError("String parsing error")
                if escaped not in escapes:
                    raise ParsingError(f"Unrecognized escape sequence \\{escaped}")
                chars.append(escapes[escaped])
            elif ch in "\n\r":
                raise ParsingError("Unexpected end of line")
            else:
                chars.append(ch)

    def _parse_bool(self) -> bool:
        literal = self._parse_literal()
        if literal == "true":
            return True
        if literal == "false":
            return False
        raise ParsingError(f"Failed to parse '{literal}' as bool")

    def _parse_null(self) -> None:
        literal = self._parse_literal()
        if literal != "null":
            raise ParsingError(f"Failed to parse '{literal}' as null")
        return None

    def _read_digits(self, chars: list[str]) -> None:
        if not _is_digit(self._peek()):
            raise ParsingError("A digit is expected")
        while _is_digit(self._peek()):
            chars.append(self._get())

    def _parse_number(self) -> int | float:
        chars: list[str] = []
        if self._peek() == "-":
            chars.append(self._get())
        if self._peek() == "0":
            chars.append(self._get())
        else:
            self._read_digits(chars)

        is_int = True
        if self._peek() == ".":
            chars.append(self._get())
            self._read_digits(chars)
            is_int = False

        if self._peek() in ("e", "E") and self._peek():
            chars.append(self._get())
            if self._peek() in ("+", "-") and self._peek():
                chars.append(self._get())
            self._read_digits(chars)
            is_int = False

        text = "".join(chars)
        if is_int:
            number = int(text)
            if _INT_MIN <= number <= _INT_MAX:
                return number
        result = float(text)
        if math.isinf(result):
            raise ParsingError(f"Failed to convert {text} to number")
        return result


def loads(text: str) -> Any:
    """Parse the first JSON value in ``text``."""
    return _Parser(text).parse_node()


def load(input: IO[str]) -> Any:
    """Parse the first JSON value read from a text stream."""
    return loads(input.read())


def _quote(text: str) -> str:
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\r", "\\r")
        .replace("\n", "\\n")
    )
    return f'"{escaped}"'


def _render(value: Any, indent: int) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format(value, "g")
    if isinstance(value, str):
        return _quote(value)
    inner = indent + _INDENT_STEP
    padding = " " * inner
    if isinstance(value, (list, tuple)):
        items = ",\n".join(padding + _render(item, inner) for item in value)
        return "[\n" + items + "\n" + " " * indent + "]"
    if isinstance(value, dict):
        for key in value:
            if not isinstance(key, str):
                raise TypeError(f"dictionary keys must be strings, not {type(key).__name__}")
        items = ",\n".join(
            f"{padding}{_quote(key)}: {_render(item, inner)}"
            for key, item in sorted(value.items())
        )
        return "{\n" + items + "\n" + " " * indent + "}"
    raise TypeError(f"cannot serialize {type(value).__name__} as JSON")


def dumps(value: Any) -> str:
    """Serialize ``value`` as indented JSON text with sorted keys."""
    return _render(value, 0)


def dump(value: Any, output: IO[str]) -> None:
    """Write ``value`` as indented JSON text to a text stream."""
    output.write(dumps(value))