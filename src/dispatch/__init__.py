"""Request registry and elevator cars for a bank of elevators."""

from .request import Direction, Request
from .config import DispatchTiming
from .registry import ElevatorStatistics, RequestRegistry, RequestStats, UnknownRequestError
from .elevator import CarSnapshot, ElevatorCar, TickOutcome
from .bank import ElevatorBank

__all__ = [
    "CarSnapshot",
    "Direction",
    "DispatchTiming",
    "ElevatorBank",
    "ElevatorCar",
    "ElevatorStatistics",
    "Request",
    "RequestRegistry",
    "RequestStats",
    "TickOutcome",
    "UnknownRequestError",
]
