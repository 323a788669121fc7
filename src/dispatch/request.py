from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from scheduler.interface import Direction


@dataclass(frozen=True)
class Request:
    """A rider's trip from an origin floor to a destination floor."""

    origin_floor: int
    direction: Direction
    destination_floor: int
    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self) -> None:
        for name in ("origin_floor", "destination_floor"):
            floor = getattr(self, name)
            if isinstance(floor, bool) or not isinstance(floor, int):
                raise TypeError(f"{name} must be an int, got {type(floor).__name__}")
        direction = Direction.parse(self.direction)
        # frozen dataclass; normalise string directions in place
        object.__setattr__(self, "direction", direction)
        if direction is Direction.IDLE:
            raise ValueError("Direction of request cannot be IDLE")
        if direction is Direction.DOWN and self.destination_floor >= self.origin_floor:
            raise ValueError("If direction is DOWN, destination must be lower than origin floor")
        if direction is Direction.UP and self.destination_floor <= self.origin_floor:
            raise ValueError("If direction is UP, destination must be higher than origin floor")

    @classmethod
    def between(cls, origin_floor: int, destination_floor: int) -> "Request":
        if origin_floor == destination_floor:
            raise ValueError("Origin and destination floors must differ")
        direction = Direction.UP if destination_floor > origin_floor else Direction.DOWN
        return cls(origin_floor, direction, destination_floor)
