from __future__ import annotations

from decimal import (
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
)
from enum import Enum


class RoundingPolicy(str, Enum):
    REQUIRE_EXACT = "REQUIRE_EXACT"
    HALF_UP = "HALF_UP"
    HALF_DOWN = "HALF_DOWN"
    HALF_EVEN = "HALF_EVEN"
    UP = "UP"
    DOWN = "DOWN"
    CEILING = "CEILING"
    FLOOR = "FLOOR"

    @property
    def decimal_rounding(self) -> str:
        # REQUIRE_EXACT still needs a mode for quantize(); the result is checked afterwards
        return _DECIMAL_ROUNDING[self]

    @property
    def is_exact(self) -> bool:
        return self is RoundingPolicy.REQUIRE_EXACT


_DECIMAL_ROUNDING = {
    RoundingPolicy.REQUIRE_EXACT: ROUND_HALF_EVEN,
    RoundingPolicy.HALF_UP: ROUND_HALF_UP,
    RoundingPolicy.HALF_DOWN: ROUND_HALF_DOWN,
    RoundingPolicy.HALF_EVEN: ROUND_HALF_EVEN,
    RoundingPolicy.UP: ROUND_UP,
    RoundingPolicy.DOWN: ROUND_DOWN,
    RoundingPolicy.CEILING: ROUND_CEILING,
    RoundingPolicy.FLOOR: ROUND_FLOOR,
}
