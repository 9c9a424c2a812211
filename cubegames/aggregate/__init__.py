"""Aggregate passes over parsed cube games."""
from .config import (
    DEFAULT_CEILING,
    GamesPaths,
    ceiling_from_args,
)
from .feasibility import feasibility_sum, feasible_games
from .bounding import bounding_product_sum, minimum_sets
from .data import build_game_frame, build_round_frame, summarize, write_game_summary

__all__ = [
    "DEFAULT_CEILING",
    "GamesPaths",
    "ceiling_from_args",
    "feasibility_sum",
    "feasible_games",
    "bounding_product_sum",
    "minimum_sets",
    "build_game_frame",
    "build_round_frame",
    "summarize",
    "write_game_summary",
]
