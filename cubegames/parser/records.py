from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple

from .enums import Color


class Relation(Enum):
    """Outcome of a component-wise comparison between two color counts."""

    EQUAL = "EQUAL"
    WITHIN = "WITHIN"
    EXCEEDS = "EXCEEDS"
    INCOMPARABLE = "INCOMPARABLE"


@dataclass(frozen=True)
class ColorCount:
    red: int = 0
    green: int = 0
    blue: int = 0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} count must be non-negative, got {getattr(self, name)}")

    def add(self, color: Color, count: int) -> "ColorCount":
        """Return a new count with `count` cubes of `color` added.

        UNKNOWN colors leave the value unchanged.
        """
        if color is Color.RED:
            return ColorCount(self.red + count, self.green, self.blue)
        if color is Color.GREEN:
            return ColorCount(self.red, self.green + count, self.blue)
        if color is Color.BLUE:
            return ColorCount(self.red, self.green, self.blue + count)
        return self

    def __add__(self, other: "ColorCount") -> "ColorCount":
        if not isinstance(other, ColorCount):
            return NotImplemented
        return ColorCount(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def maximum(self, other: "ColorCount") -> "ColorCount":
        return ColorCount(
            max(self.red, other.red),
            max(self.green, other.green),
            max(self.blue, other.blue),
        )

    def relation_to(self, other: "ColorCount") -> Relation:
        pairs = ((self.red, other.red), (self.green, other.green), (self.blue, other.blue))
        below = any(a < b for a, b in pairs)
        above = any(a > b for a, b in pairs)
        if below and above:
            return Relation.INCOMPARABLE
        if above:
            return Relation.EXCEEDS
        if below:
            return Relation.WITHIN
        return Relation.EQUAL

    def within(self, ceiling: "ColorCount") -> bool:
        """True when no component exceeds the matching component of `ceiling`."""
        return self.relation_to(ceiling) in (Relation.EQUAL, Relation.WITHIN)

    @property
    def product(self) -> int:
        return self.red * self.green * self.blue

    def as_dict(self) -> Dict[str, int]:
        return {"red": self.red, "green": self.green, "blue": self.blue}


@dataclass(frozen=True)
class GameRecord:
    """One parsed game: its id and the folded count of every round, in source order."""

    id: int
    rounds: Tuple[ColorCount, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any sequence but store a tuple so records stay hashable.
        object.__setattr__(self, "rounds", tuple(self.rounds))

    def is_feasible(self, ceiling: ColorCount) -> bool:
        return all(r.within(ceiling) for r in self.rounds)

    def minimum_set(self) -> ColorCount:
        """Smallest bag of cubes that could have produced every round."""
        bag = ColorCount()
        for r in self.rounds:
            bag = bag.maximum(r)
        return bag

    @property
    def power(self) -> int:
        return self.minimum_set().product
