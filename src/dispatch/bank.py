from __future__ import annotations

import time
from dataclasses import asdict, dataclass, field
from typing import List, Optional, Sequence

from .config import DispatchTiming
from .elevator import ElevatorCar
from .registry import RequestRegistry
from .request import Request


@dataclass
class ElevatorBank:
    """A fixed set of cars sharing one request registry."""

    names: Sequence[str] = ("A", "B")
    timing: DispatchTiming = field(default_factory=DispatchTiming)
    registry: RequestRegistry = field(default_factory=RequestRegistry)
    cars: List[ElevatorCar] = field(init=False)

    def __post_init__(self) -> None:
        if len(set(self.names)) != len(self.names):
            raise ValueError(f"Elevator names must be unique: {list(self.names)}")
        self.cars = [ElevatorCar(name, self.registry, self.timing) for name in self.names]

    def start(self) -> None:
        for car in self.cars:
            if not car.is_running():
                car.start()

    def stop(self) -> None:
        for car in self.cars:
            car.stop()

    def join(self, timeout: Optional[float] = None) -> None:
        for car in self.cars:
            car.join(timeout)

    def submit(self, request: Request) -> Request:
        self.registry.add_request(request)
        return request

    def get_car(self, name: str) -> Optional[ElevatorCar]:
        for car in self.cars:
            if car.name == name:
                return car
        return None

    def is_settled(self) -> bool:
        # cars only touch their queues while holding the registry lock
        with self.registry.locked():
            if self.registry.get_pending_requests():
                return False
            return all(not car.get_destinations() for car in self.cars)

    def wait_until_settled(self, timeout: float, poll_interval: float = 0.05) -> bool:
        """Block until every request is completed or ``timeout`` elapses."""
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            if self.is_settled():
                return True
            time.sleep(poll_interval)
        return self.is_settled()

    def snapshot(self) -> dict:
        stats = self.registry.get_current_stats()
        return {
            "elevators": [
                {
                    "name": snap.name,
                    "floor": snap.current_floor,
                    "direction": snap.direction.value,
                    "destinations": list(snap.destinations),
                    "running": snap.running,
                }
                for snap in (car.snapshot() for car in self.cars)
            ],
            "requests": self.registry.counts(),
            "statistics": asdict(stats),
        }
