from __future__ import annotations

from typing import Sequence

from .interface import Direction, PendingCall


def can_pick_up(request: PendingCall, direction: Direction, queue_empty: bool) -> bool:
    """An empty car takes anything; a loaded car only takes on-direction work."""
    return queue_empty or request.direction is direction


def next_floor(
    current_floor: int,
    direction: Direction,
    has_destinations: bool,
    pending: Sequence[PendingCall],
) -> int:
    """Return the floor one step from ``current_floor``, or the floor itself.

    A loaded car keeps moving in its committed direction until its queue
    empties. An empty car heads toward the origin of the *first* pending
    request in admission order, not the nearest one.
    """

    if has_destinations:
        if direction is Direction.UP:
            return current_floor + 1
        if direction is Direction.DOWN:
            return current_floor - 1
        return current_floor

    if not pending:
        return current_floor
    if pending[0].origin_floor < current_floor:
        return current_floor - 1
    return current_floor + 1


def direction_towards(current_floor: int, target_floor: int) -> Direction:
    if target_floor == current_floor:
        return Direction.IDLE
    if target_floor < current_floor:
        return Direction.DOWN
    return Direction.UP
