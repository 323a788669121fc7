from __future__ import annotations

from .greedy import can_pick_up, direction_towards, next_floor
from .interface import Direction, PendingCall

__all__ = [
    "Direction",
    "PendingCall",
    "can_pick_up",
    "direction_towards",
    "next_floor",
]
