"""Turns the text of a .env file into an ordered key/value mapping.

Supports:
- Comments (lines starting with #) and blank lines
- Inline comments: everything from the first # is dropped, even inside quotes
- One layer of matching single or double quotes around a value
- Values containing "=" (only the first "=" separates key from value)

Lines without "=" are skipped and reported, never raised.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_WHITESPACE = " \t\n\r\0\x0b"
_QUOTES = ("'", '"')


@dataclass
class MalformedLine:
    lineno: int
    text: str


@dataclass
class ParsedContents:
    values: dict[str, str] = field(default_factory=dict)
    malformed: list[MalformedLine] = field(default_factory=list)


def split_lines(contents: str) -> list[str]:
    return _LINE_BREAK.split(contents)


def strip_inline_comment(line: str) -> str:
    # A quoted "#" is not special-cased: 'a#b' becomes 'a
    return line.split("#", 1)[0].strip(_WHITESPACE)


def strip_quotes(value: str) -> str:
    """Remove one layer of matching surrounding quotes, if present."""
    for quote in _QUOTES:
        if len(value) >= 2 and value.startswith(quote) and value.endswith(quote):
            return value[1:-1]
    return value


def parse_contents(contents: str) -> ParsedContents:
    result = ParsedContents()
    for lineno, raw in enumerate(split_lines(contents), start=1):
        line = raw.strip(_WHITESPACE)
        if not line or line.startswith("#"):
            continue

        line = strip_inline_comment(line)
        key, sep, value = line.partition("=")
        if not sep:
            result.malformed.append(MalformedLine(lineno, raw))
            continue

        key = key.strip(_WHITESPACE)
        value = strip_quotes(value.strip(_WHITESPACE))
        result.values[key] = value
    return result


def parse_env_contents(contents: str) -> dict[str, str]:
    """Parse .env text and return only the key/value pairs."""
    return parse_contents(contents).values
