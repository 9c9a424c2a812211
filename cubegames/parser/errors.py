from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class SourceLocation:
    offset: int
    line: int
    column: int

    def __str__(self) -> str:
        return f"line {self.line}, col {self.column}"

    @staticmethod
    def at(text: str, offset: int) -> "SourceLocation":
        """Resolve a character offset into a 1-based line/column pair."""
        line = text.count("\n", 0, offset) + 1
        line_start = text.rfind("\n", 0, offset) + 1
        return SourceLocation(offset=offset, line=line, column=offset - line_start + 1)


def _snippet(text: str, offset: int, width: int = 12) -> str:
    rest = text[offset:offset + width].split("\n", 1)[0].rstrip("\r")
    return repr(rest) if rest else "end of line" if offset < len(text) else "end of input"


class GameParseError(ValueError):
    """Base class for all game record parse failures."""

    def __init__(self, message: str, location: SourceLocation) -> None:
        super().__init__(f"{message} at {location}")
        self.message = message
        self.location = location


class UnexpectedToken(GameParseError):
    def __init__(self, text: str, offset: int, expected: Sequence[str]) -> None:
        self.expected = tuple(expected)
        self.found = _snippet(text, offset)
        wanted = " or ".join(repr(e) for e in self.expected)
        super().__init__(f"expected {wanted}, found {self.found}", SourceLocation.at(text, offset))


class ExpectedDigits(GameParseError):
    def __init__(self, text: str, offset: int) -> None:
        self.found = _snippet(text, offset)
        super().__init__(f"expected digits, found {self.found}", SourceLocation.at(text, offset))


class UnknownColor(GameParseError):
    def __init__(self, text: str, offset: int) -> None:
        self.found = _snippet(text, offset)
        super().__init__(f"expected a color name, found {self.found}", SourceLocation.at(text, offset))


class TrailingInput(GameParseError):
    def __init__(self, text: str, offset: int) -> None:
        self.found = _snippet(text, offset)
        super().__init__(f"unexpected trailing input {self.found}", SourceLocation.at(text, offset))
