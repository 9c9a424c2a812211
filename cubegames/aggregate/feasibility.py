"""Feasibility filter over parsed games."""
from __future__ import annotations

from typing import Iterable, List

from cubegames.parser.records import ColorCount, GameRecord


def feasible_games(games: Iterable[GameRecord], ceiling: ColorCount) -> List[GameRecord]:
    """Games whose every round fits inside `ceiling`, in input order.

    A game without rounds is always feasible.
    """
    return [g for g in games if g.is_feasible(ceiling)]


def feasibility_sum(games: Iterable[GameRecord], ceiling: ColorCount) -> int:
    return sum(g.id for g in feasible_games(games, ceiling))
