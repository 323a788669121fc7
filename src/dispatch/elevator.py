from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import List, Optional, Tuple

from scheduler import can_pick_up, direction_towards, next_floor

from .config import DispatchTiming
from .logger import get_logger
from .registry import RequestRegistry
from .request import Direction, Request

logger = get_logger(__name__)


@dataclass(frozen=True)
class TickOutcome:
    """What one pass of the decision loop did."""

    floor: int
    next_floor: int
    direction: Direction
    dropped_off: bool
    picked_up: bool

    @property
    def stopped_at_floor(self) -> bool:
        return self.dropped_off or self.picked_up


@dataclass(frozen=True)
class CarSnapshot:
    """Read-only view of a car for monitoring."""

    name: str
    current_floor: int
    direction: Direction
    destinations: Tuple[int, ...]
    running: bool


class ElevatorCar:
    """One car in the bank, driven by its own thread.

    Each tick the car takes the registry lock, drops off riders bound for the
    current floor, maybe picks up a waiting rider and picks its next floor.
    It then releases the lock and sleeps for the simulated dwell and travel
    time before advancing.
    """

    def __init__(
        self,
        name: str,
        registry: RequestRegistry,
        timing: Optional[DispatchTiming] = None,
    ) -> None:
        self.name = name
        self.registry = registry
        self.timing = timing or DispatchTiming()
        self.current_floor: int = self.timing.ground_floor
        self.direction: Direction = Direction.IDLE
        self._destinations: List[Request] = []
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def start(self) -> threading.Thread:
        if self.is_running():
            raise RuntimeError(f"Elevator {self.name} is already running")
        self._stop_event.clear()
        self._thread = threading.Thread(target=self.run, name=f"elevator-{self.name}", daemon=True)
        self._thread.start()
        return self._thread

    def stop(self) -> None:
        self._stop_event.set()

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def stop_requested(self) -> bool:
        return self._stop_event.is_set()

    def run(self) -> None:
        logger.info("[%s] Starting at floor %s", self.name, self.current_floor)
        while not self._stop_event.is_set():
            if self.direction is not Direction.IDLE:
                logger.debug("[%s] At floor %s; direction=%s", self.name, self.current_floor, self.direction.value)
            outcome = self.tick()
            if outcome.direction is Direction.IDLE and not outcome.stopped_at_floor:
                # nothing to do; poll the registry again shortly
                self._stop_event.wait(self.timing.idle_poll_seconds)
        logger.info("[%s] Stopped at floor %s", self.name, self.current_floor)

    def tick(self) -> TickOutcome:
        with self.registry.locked():
            dropped_off = self._drop_off_passengers()
            picked_up = self._pick_up_passenger()
            target = next_floor(
                self.current_floor,
                self.direction,
                bool(self._destinations),
                self.registry.get_pending_requests(),
            )

        self.direction = direction_towards(self.current_floor, target)
        outcome = TickOutcome(
            floor=self.current_floor,
            next_floor=target,
            direction=self.direction,
            dropped_off=dropped_off,
            picked_up=picked_up,
        )
        self._wait(outcome)
        self.current_floor = target
        return outcome

    def add_destination(self, request: Request) -> None:
        self._destinations.append(request)
        self._destinations.sort(key=lambda r: r.destination_floor)

    def get_destinations(self) -> Tuple[Request, ...]:
        return tuple(self._destinations)

    def get_current_floor(self) -> int:
        return self.current_floor

    def get_direction(self) -> Direction:
        return self.direction

    def get_name(self) -> str:
        return self.name

    def set_status(self, direction: Direction) -> None:
        self.direction = Direction.parse(direction)

    def snapshot(self) -> CarSnapshot:
        return CarSnapshot(
            name=self.name,
            current_floor=self.current_floor,
            direction=self.direction,
            destinations=tuple(r.destination_floor for r in self._destinations),
            running=self.is_running(),
        )

    def _drop_off_passengers(self) -> bool:
        arrived = [r for r in self._destinations if r.destination_floor == self.current_floor]
        for request in arrived:
            logger.info("[%s] Dropping off passenger on floor %s", self.name, self.current_floor)
            self.registry.request_completed(request)
        if arrived:
            self._destinations = [r for r in self._destinations if r not in arrived]
        return bool(arrived)

    def _pick_up_passenger(self) -> bool:
        request = self.registry.get_request(self.current_floor)
        if request is None or not can_pick_up(request, self.direction, not self._destinations):
            return False
        logger.info("[%s] Picking up passenger on floor %s", self.name, self.current_floor)
        self.add_destination(request)
        self.registry.request_serviced(request)
        self.direction = request.direction
        return True

    def _wait(self, outcome: TickOutcome) -> None:
        # Event.wait returns early once stop() is called; that is not an error.
        if outcome.stopped_at_floor:
            self._stop_event.wait(self.timing.service_dwell_seconds)
        if outcome.direction is not Direction.IDLE:
            self._stop_event.wait(self.timing.floor_travel_seconds)
