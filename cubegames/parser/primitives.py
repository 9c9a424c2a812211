"""Smallest parsing units of the game record grammar.

Every primitive has the shape ``(text, pos) -> (value, new_pos)`` and raises a
``GameParseError`` subclass when it cannot match at ``pos``.
"""
from __future__ import annotations

import re
from typing import Callable, Tuple, TypeVar

from .enums import COLOR_VOCABULARY, Color
from .errors import ExpectedDigits, UnexpectedToken, UnknownColor

T = TypeVar("T")
Parser = Callable[[str, int], Tuple[T, int]]

_SPACE_RE = re.compile(r"[ \t]*")
_DIGITS_RE = re.compile(r"[0-9]+")
_WORD_RE = re.compile(r"[A-Za-z]+")

NEWLINES = ("\r\n", "\n")


def skip_space(text: str, pos: int) -> int:
    return _SPACE_RE.match(text, pos).end()


def ws(parser: Parser) -> Parser:
    """Wrap `parser` so horizontal whitespace around it is consumed."""

    def wrapped(text: str, pos: int):
        value, pos = parser(text, skip_space(text, pos))
        return value, skip_space(text, pos)

    return wrapped


def literal(tag: str) -> Parser:
    def match(text: str, pos: int) -> Tuple[str, int]:
        if text.startswith(tag, pos):
            return tag, pos + len(tag)
        raise UnexpectedToken(text, pos, [tag])

    return match


def unsigned_int(text: str, pos: int) -> Tuple[int, int]:
    m = _DIGITS_RE.match(text, pos)
    if not m:
        raise ExpectedDigits(text, pos)
    return int(m.group(0)), m.end()


def color_name(text: str, pos: int) -> Tuple[Color, int]:
    for color in COLOR_VOCABULARY:
        if text.startswith(color.value, pos):
            return color, pos + len(color.value)
    raise UnknownColor(text, pos)


def color_word(text: str, pos: int) -> Tuple[Tuple[Color, str], int]:
    """Lenient color matcher: any word is accepted, unrecognised ones map to UNKNOWN.

    The word is checked with `color_name` and must be matched in full, so
    "reddish" is UNKNOWN. Returns the tag together with the raw word so
    callers can report what was dropped.
    """
    m = _WORD_RE.match(text, pos)
    if not m:
        raise UnknownColor(text, pos)
    word = m.group(0)
    try:
        color, end = color_name(word, 0)
    except UnknownColor:
        color, end = Color.UNKNOWN, len(word)
    if end != len(word):
        color = Color.UNKNOWN
    return (color, word), m.end()


def newline(text: str, pos: int) -> Tuple[str, int]:
    for sep in NEWLINES:
        if text.startswith(sep, pos):
            return sep, pos + len(sep)
    raise UnexpectedToken(text, pos, ["\\n"])
