from __future__ import annotations

from typing import Iterable, List

from .enums import COLOR_VOCABULARY
from .records import ColorCount, GameRecord


def render_round(count: ColorCount) -> str:
    parts: List[str] = []
    for color in COLOR_VOCABULARY:
        n = getattr(count, color.value)
        if n:
            parts.append(f"{n} {color.value}")
    # A round needs at least one pair to be parseable again.
    return ", ".join(parts) if parts else "0 red"


def render_record(game: GameRecord) -> str:
    head = f"Game {game.id}:"
    if not game.rounds:
        return head
    return head + " " + "; ".join(render_round(r) for r in game.rounds)


def render_games(games: Iterable[GameRecord]) -> str:
    """Render records back into the input grammar, one per line."""
    return "\n".join(render_record(g) for g in games)
