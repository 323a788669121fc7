"""CLI for running elevator bank scenarios defined in JSON configs."""
from __future__ import annotations

import argparse
import json
import time
from dataclasses import asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from dispatch import DispatchTiming, ElevatorBank, Request
from dispatch.logger import get_logger

logger = get_logger("run_scenario")


def build_bank(config: Dict) -> ElevatorBank:
    names = config.get("elevators", ["A", "B"])
    timing = DispatchTiming.from_dict(config.get("timing"))
    return ElevatorBank(names=tuple(names), timing=timing)


def build_requests(config: Dict) -> List[Tuple[float, Request]]:
    """Return (offset seconds, request) pairs ordered by offset."""
    timed: List[Tuple[float, Request]] = []
    for entry in config.get("requests", []):
        origin = entry["origin"]
        destination = entry["destination"]
        direction = entry.get("direction")
        if direction is None:
            request = Request.between(origin, destination)
        else:
            request = Request(origin, direction, destination)
        timed.append((float(entry.get("at", 0.0)), request))
    timed.sort(key=lambda item: item[0])
    return timed


def run_scenario(bank: ElevatorBank, requests: List[Tuple[float, Request]], duration: float) -> bool:
    bank.start()
    started = time.monotonic()
    try:
        for offset, request in requests:
            delay = offset - (time.monotonic() - started)
            if delay > 0:
                time.sleep(delay)
            bank.submit(request)
        remaining = max(0.0, duration - (time.monotonic() - started))
        return bank.wait_until_settled(remaining)
    finally:
        bank.stop()
        bank.join(timeout=5.0)


def save_results(output_path: Optional[Path], data: Dict) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("config", type=Path, help="Path to a JSON scenario configuration file")
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional file path to write the final statistics as JSON",
    )
    args = parser.parse_args()

    config = json.loads(args.config.read_text())
    bank = build_bank(config)
    requests = build_requests(config)
    duration = float(config.get("duration", 60))
    settled = run_scenario(bank, requests, duration)
    if not settled:
        logger.warning("Scenario ended with requests still outstanding")

    state = bank.snapshot()
    results = {
        "scenario": config.get("name", args.config.stem),
        "description": config.get("description"),
        "elevators": [car.name for car in bank.cars],
        "timing": asdict(bank.timing),
        "settled": settled,
        "final_statistics": state["statistics"],
        "requests": state["requests"],
    }

    save_results(args.output, results)

    print(f"Scenario: {results['scenario']}")
    if results["description"]:
        print(results["description"])
    print(f"Elevators: {', '.join(results['elevators'])}")
    print("Final statistics:")
    for key, value in results["final_statistics"].items():
        print(f"  {key}: {value}")
    if args.output:
        print(f"Saved statistics to {args.output}")


if __name__ == "__main__":
    main()
