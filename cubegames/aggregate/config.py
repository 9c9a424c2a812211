"""Configuration objects and defaults for the cube game aggregates."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from cubegames.parser.records import ColorCount


DEFAULT_CEILING = ColorCount(red=12, green=13, blue=14)


@dataclass(frozen=True)
class GamesPaths:
    """Default output locations used by the CLI."""

    summary_csv: Path = Path("outputs/games/game_summary.csv")
    qa_summary_csv: Path = Path("outputs/games/qa_summary.csv")

    def ensure(self) -> None:
        """Create parent directories for all registered artefacts."""

        for path in (self.summary_csv, self.qa_summary_csv):
            parent = Path(path).expanduser().resolve().parent
            parent.mkdir(parents=True, exist_ok=True)


def ceiling_from_args(
    red: Optional[int] = None,
    green: Optional[int] = None,
    blue: Optional[int] = None,
    base: ColorCount = DEFAULT_CEILING,
) -> ColorCount:
    """Overlay the given per-color limits on `base`; None keeps the base value."""

    return ColorCount(
        red=base.red if red is None else red,
        green=base.green if green is None else green,
        blue=base.blue if blue is None else blue,
    )


__all__ = [
    "DEFAULT_CEILING",
    "GamesPaths",
    "ceiling_from_args",
]
