"""Tabular views of parsed games for export and inspection."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Sequence

import numpy as np
import pandas as pd

from cubegames.parser.records import ColorCount, GameRecord

from .bounding import bounding_product_sum
from .config import DEFAULT_CEILING
from .feasibility import feasibility_sum, feasible_games

COLOR_COLUMNS = ["red", "green", "blue"]
ROUND_COLUMNS = ["game_id", "round_index", *COLOR_COLUMNS]
GAME_COLUMNS = ["game_id", "n_rounds", "max_red", "max_green", "max_blue", "power", "feasible"]

_INT64_MAX = np.iinfo(np.int64).max


def _int_array(values: List[int]) -> np.ndarray:
    """int64 when every value fits, otherwise an object array of exact Python ints."""
    if all(v <= _INT64_MAX for v in values):
        return np.array(values, dtype=np.int64)
    return np.array(values, dtype=object)


def _int_frame(columns: Dict[str, List[int]]) -> pd.DataFrame:
    return pd.DataFrame({name: _int_array(values) for name, values in columns.items()})


def build_round_frame(games: Iterable[GameRecord]) -> pd.DataFrame:
    """One row per round, in input order.

    Columns are int64 unless a value (ids are unbounded) needs a Python int.
    """

    columns: Dict[str, List[int]] = {col: [] for col in ROUND_COLUMNS}
    for g in games:
        for idx, r in enumerate(g.rounds):
            columns["game_id"].append(g.id)
            columns["round_index"].append(idx)
            for color, n in r.as_dict().items():
                columns[color].append(n)
    return _int_frame(columns)


def build_game_frame(
    games: Sequence[GameRecord], ceiling: ColorCount = DEFAULT_CEILING
) -> pd.DataFrame:
    """One row per game with its minimum set, power and feasibility flag.

    Games without rounds keep zero maxima and count as feasible. Powers are
    exact: a column that would overflow int64 holds Python ints instead.
    """

    games = list(games)
    bags = [g.minimum_set() for g in games]
    df = _int_frame(
        {
            "game_id": [g.id for g in games],
            "n_rounds": [len(g.rounds) for g in games],
            "max_red": [b.red for b in bags],
            "max_green": [b.green for b in bags],
            "max_blue": [b.blue for b in bags],
            "power": [b.product for b in bags],
        }
    )
    df["feasible"] = np.array([g.is_feasible(ceiling) for g in games], dtype=bool)
    return df[GAME_COLUMNS]


def summarize(games: Sequence[GameRecord], ceiling: ColorCount = DEFAULT_CEILING) -> Dict[str, int]:
    games = list(games)
    return {
        "games": len(games),
        "feasible_games": len(feasible_games(games, ceiling)),
        "feasibility_sum": feasibility_sum(games, ceiling),
        "power_sum": bounding_product_sum(games),
    }


def write_game_summary(
    games: Sequence[GameRecord], out_csv: Path, ceiling: ColorCount = DEFAULT_CEILING
) -> pd.DataFrame:
    out_csv = Path(out_csv)
    out_csv.parent.mkdir(parents=True, exist_ok=True)
    df = build_game_frame(games, ceiling)
    df.to_csv(out_csv, index=False)
    return df
