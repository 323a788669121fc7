from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Optional

from dotenv import load_dotenv


@dataclass
class DispatchTiming:
    """Simulated delays and starting position used by every car."""

    service_dwell_ms: int = 1000
    floor_travel_ms: int = 1000
    ground_floor: int = 1
    idle_poll_ms: int = 50

    def __post_init__(self) -> None:
        if min(self.service_dwell_ms, self.floor_travel_ms, self.idle_poll_ms) < 0:
            raise ValueError("Dwell, travel and idle poll delays must not be negative")

    @property
    def service_dwell_seconds(self) -> float:
        return self.service_dwell_ms / 1000

    @property
    def floor_travel_seconds(self) -> float:
        return self.floor_travel_ms / 1000

    @property
    def idle_poll_seconds(self) -> float:
        return self.idle_poll_ms / 1000

    @classmethod
    def from_dict(cls, config: Optional[Dict]) -> "DispatchTiming":
        config = config or {}
        return cls(
            service_dwell_ms=int(config.get("service_dwell_ms", 1000)),
            floor_travel_ms=int(config.get("floor_travel_ms", 1000)),
            ground_floor=int(config.get("ground_floor", 1)),
            idle_poll_ms=int(config.get("idle_poll_ms", 50)),
        )

    @classmethod
    def from_env(cls) -> "DispatchTiming":
        load_dotenv()
        return cls(
            service_dwell_ms=int(os.getenv("DISPATCH_SERVICE_DWELL_MS", "1000")),
            floor_travel_ms=int(os.getenv("DISPATCH_FLOOR_TRAVEL_MS", "1000")),
            ground_floor=int(os.getenv("DISPATCH_GROUND_FLOOR", "1")),
            idle_poll_ms=int(os.getenv("DISPATCH_IDLE_POLL_MS", "50")),
        )
