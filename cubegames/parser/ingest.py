from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .enums import Color
from .errors import TrailingInput
from .primitives import NEWLINES, color_word, literal, newline, skip_space, unsigned_int, ws
from .records import ColorCount, GameRecord

PARSER_VERSION = "1.0.0"

logger = logging.getLogger(__name__)

_game_tag = ws(literal("Game"))
_game_id = ws(unsigned_int)
_colon = ws(literal(":"))
_count = ws(unsigned_int)
_color = ws(color_word)


@dataclass(frozen=True)
class IgnoredPair:
    """A (count, color) pair dropped from its round because the color word is unknown."""

    game_id: int
    round_index: int
    count: int
    word: str


@dataclass
class ParsedDocument:
    games: List[GameRecord]
    ignored: List[IgnoredPair] = field(default_factory=list)
    parser_version: str = PARSER_VERSION

    @property
    def game_count(self) -> int:
        return len(self.games)


def _at_line_end(text: str, pos: int) -> bool:
    return pos >= len(text) or text.startswith(NEWLINES, pos)


def _peek(text: str, pos: int, token: str) -> Optional[int]:
    """Position after `token` (surrounding spaces included) if it comes next, else None."""
    pos = skip_space(text, pos)
    if text.startswith(token, pos):
        return skip_space(text, pos + len(token))
    return None


def parse_pair(text: str, pos: int) -> Tuple[Tuple[int, Color, str], int]:
    count, pos = _count(text, pos)
    (color, word), pos = _color(text, pos)
    return (count, color, word), pos


def parse_round(
    text: str, pos: int, dropped: Optional[List[Tuple[int, str]]] = None
) -> Tuple[ColorCount, int]:
    """Parse one comma-separated round and fold its pairs into a single count.

    Pairs whose color is UNKNOWN are left out of the fold; when `dropped` is
    given they are appended to it as (count, word).
    """
    total = ColorCount()
    while True:
        (count, color, word), pos = parse_pair(text, pos)
        if color is Color.UNKNOWN:
            if dropped is not None:
                dropped.append((count, word))
        else:
            total = total.add(color, count)
        nxt = _peek(text, pos, ",")
        if nxt is None:
            return total, pos
        pos = nxt


def _parse_record(
    text: str, pos: int, ignored: Optional[List[IgnoredPair]] = None
) -> Tuple[GameRecord, int]:
    _, pos = _game_tag(text, pos)
    game_id, pos = _game_id(text, pos)
    _, pos = _colon(text, pos)

    rounds: List[ColorCount] = []
    if _at_line_end(text, pos):
        return GameRecord(id=game_id, rounds=()), pos

    while True:
        dropped: List[Tuple[int, str]] = []
        count, pos = parse_round(text, pos, dropped)
        if ignored is not None:
            ignored.extend(IgnoredPair(game_id, len(rounds), c, w) for c, w in dropped)
        rounds.append(count)
        nxt = _peek(text, pos, ";")
        if nxt is None:
            break
        pos = nxt

    pos = skip_space(text, pos)
    if not _at_line_end(text, pos):
        raise TrailingInput(text, pos)
    return GameRecord(id=game_id, rounds=tuple(rounds)), pos


def parse_record(text: str, pos: int = 0) -> Tuple[GameRecord, int]:
    """Parse a single `Game <id>: ...` record starting at `pos`.

    Returns the record and the position of the end of its line (the newline,
    if any, is left unconsumed).
    """
    return _parse_record(text, pos)


def _only_blank_lines(text: str, pos: int) -> bool:
    return not text[pos:].strip(" \t\r\n")


def parse_document(text: str) -> ParsedDocument:
    """Parse a complete input into game records plus leniency metadata.

    The parse is all-or-nothing: the first error raised anywhere propagates
    and no records are returned.
    """
    games: List[GameRecord] = []
    ignored: List[IgnoredPair] = []
    if _only_blank_lines(text or "", 0):
        return ParsedDocument(games=games, ignored=ignored)

    pos = 0
    while True:
        game, pos = _parse_record(text, pos, ignored)
        games.append(game)
        if pos >= len(text):
            break
        _, pos = newline(text, pos)
        if _only_blank_lines(text, pos):
            break

    logger.debug("parse_document: parsed %s games", len(games))
    if ignored:
        words = sorted({p.word for p in ignored})
        logger.warning(
            "parse_document: ignored %s pairs with unknown colors: %s", len(ignored), ", ".join(words)
        )
    return ParsedDocument(games=games, ignored=ignored)


def parse_games(text: str) -> List[GameRecord]:
    """Parse newline-separated game records, in input order."""
    return parse_document(text).games

