from enum import Enum
from typing import Tuple


class Color(Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    UNKNOWN = "unknown"


# Matching priority order; the literals are prefix-free so the order is cosmetic.
COLOR_VOCABULARY: Tuple[Color, ...] = (Color.RED, Color.GREEN, Color.BLUE)
