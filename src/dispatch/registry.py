from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Callable, Dict, Iterator, List, Optional

from .logger import get_logger
from .request import Direction, Request

logger = get_logger(__name__)


class UnknownRequestError(LookupError):
    """Raised when a request is not tracked in the state an operation expects."""


@dataclass(frozen=True)
class RequestStats:
    """Timing record for one request. Times are clock readings in seconds."""

    requested_at: float
    picked_up_at: Optional[float] = None
    completed_at: Optional[float] = None

    @property
    def wait_seconds(self) -> int:
        if self.picked_up_at is None:
            return 0
        return int(self.picked_up_at - self.requested_at)

    @property
    def trip_seconds(self) -> int:
        if self.picked_up_at is None or self.completed_at is None:
            return 0
        return int(self.completed_at - self.picked_up_at)


@dataclass(frozen=True)
class ElevatorStatistics:
    average_wait_seconds: int
    average_trip_seconds: int
    completed_count: int = 0


class RequestRegistry:
    """Tracks every request from admission to drop-off.

    There is one registry per bank of cars. It does not know how many cars
    service it; it only records each request's lifecycle:

    * requested (added to ``pending``)
    * serviced (picked up by a car and removed from ``pending``)
    * completed (dropped off at its destination floor)

    All state sits behind a single reentrant lock. Cars hold it through
    :meth:`locked` for their whole pickup/drop-off decision so two cars never
    take the same request.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._lock = threading.RLock()
        self._pending: List[Request] = []
        self._completed: List[Request] = []
        self._stats: Dict[str, RequestStats] = {}

    @contextmanager
    def locked(self) -> Iterator["RequestRegistry"]:
        with self._lock:
            yield self

    def add_request(self, request: Request) -> None:
        if not isinstance(request, Request):
            raise TypeError(f"Expected a Request, got {type(request).__name__}")
        with self._lock:
            if request.request_id in self._stats:
                raise ValueError(f"Request {request.request_id} was already added")
            self._pending.append(request)
            self._stats[request.request_id] = RequestStats(requested_at=self._clock())
        logger.info(
            "Request added [%s; %s -> %s]",
            request.origin_floor,
            request.direction.value,
            request.destination_floor,
        )

    def get_request(self, floor: int) -> Optional[Request]:
        with self._lock:
            return next((r for r in self._pending if r.origin_floor == floor), None)

    def get_pending_requests(self) -> List[Request]:
        with self._lock:
            return list(self._pending)

    def get_completed_requests(self) -> List[Request]:
        with self._lock:
            return list(self._completed)

    def has_requests_for(self, direction: Direction) -> bool:
        with self._lock:
            if direction is Direction.IDLE:
                return bool(self._pending)
            return any(r.direction is direction for r in self._pending)

    def request_serviced(self, request: Request) -> None:
        with self._lock:
            index = self._pending_index(request.request_id)
            if index is None:
                raise UnknownRequestError(f"Request {request.request_id} is not pending")
            del self._pending[index]
            stats = self._stats[request.request_id]
            self._stats[request.request_id] = replace(stats, picked_up_at=self._clock())

    def request_completed(self, request: Request) -> None:
        with self._lock:
            stats = self._stats.get(request.request_id)
            if stats is None or stats.picked_up_at is None:
                raise UnknownRequestError(f"Request {request.request_id} was never picked up")
            if stats.completed_at is not None:
                raise UnknownRequestError(f"Request {request.request_id} is already completed")
            stats = replace(stats, completed_at=self._clock())
            self._stats[request.request_id] = stats
            self._completed.append(request)
            current = self.get_current_stats()
        logger.info("Trip time: %ss, wait time: %ss", stats.trip_seconds, stats.wait_seconds)
        logger.info(
            "Current elevator statistics: average wait %ss, average trip %ss over %s requests",
            current.average_wait_seconds,
            current.average_trip_seconds,
            current.completed_count,
        )

    def get_request_stats(self, request_id: str) -> RequestStats:
        with self._lock:
            stats = self._stats.get(request_id)
        if stats is None:
            raise UnknownRequestError(f"Request {request_id} is not tracked")
        return stats

    def get_current_stats(self) -> ElevatorStatistics:
        """Integer-second averages over completed requests; zeros when none."""
        with self._lock:
            count = len(self._completed)
            if not count:
                return ElevatorStatistics(0, 0, 0)
            total_wait = sum(self._stats[r.request_id].wait_seconds for r in self._completed)
            total_trip = sum(self._stats[r.request_id].trip_seconds for r in self._completed)
        return ElevatorStatistics(total_wait // count, total_trip // count, count)

    def counts(self) -> Dict[str, int]:
        with self._lock:
            return {
                "pending": len(self._pending),
                "completed": len(self._completed),
                "tracked": len(self._stats),
            }

    def _pending_index(self, request_id: str) -> Optional[int]:
        for index, pending in enumerate(self._pending):
            if pending.request_id == request_id:
                return index
        return None
