"""Minimum bounding sets and their products."""
from __future__ import annotations

from typing import Iterable, List, Tuple

from cubegames.parser.records import ColorCount, GameRecord


def minimum_sets(games: Iterable[GameRecord]) -> List[Tuple[int, ColorCount]]:
    return [(g.id, g.minimum_set()) for g in games]


def bounding_product_sum(games: Iterable[GameRecord]) -> int:
    """Sum over games of red * green * blue of each game's minimum set.

    Python ints are unbounded so large ids or counts cannot overflow.
    """
    return sum(bag.product for _, bag in minimum_sets(games))
