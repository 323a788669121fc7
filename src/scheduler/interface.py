from __future__ import annotations

from enum import Enum
from typing import Protocol, Union


class Direction(Enum):
    """Travel direction of a car or a rider."""

    UP = "UP"
    DOWN = "DOWN"
    IDLE = "IDLE"

    @classmethod
    def parse(cls, value: Union[str, "Direction"]) -> "Direction":
        if isinstance(value, Direction):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise ValueError(f"Unknown direction '{value}'. Available: {', '.join(d.value for d in cls)}") from None


class PendingCall(Protocol):
    """What the heuristic needs to know about a waiting rider."""

    @property
    def origin_floor(self) -> int:
        ...

    @property
    def direction(self) -> Direction:
        ...
