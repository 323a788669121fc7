import json
import tempfile
import unittest
from pathlib import Path

from dispatch import Direction
from run_scenario import build_bank, build_requests, run_scenario, save_results


class RunScenarioTest(unittest.TestCase):
    config = {
        "elevators": ["A", "B"],
        "timing": {"service_dwell_ms": 1, "floor_travel_ms": 1, "idle_poll_ms": 5},
        "duration": 20,
        "requests": [
            {"origin": 4, "destination": 2, "at": 0.05},
            {"origin": 2, "direction": "UP", "destination": 6},
        ],
    }

    def test_build_bank_applies_timing(self):
        bank = build_bank(self.config)
        self.assertEqual([car.name for car in bank.cars], ["A", "B"])
        self.assertEqual(bank.timing.floor_travel_ms, 1)

    def test_build_requests_orders_by_offset(self):
        timed = build_requests(self.config)
        self.assertEqual([offset for offset, _ in timed], [0.0, 0.05])
        self.assertIs(timed[0][1].direction, Direction.UP)
        self.assertIs(timed[1][1].direction, Direction.DOWN)

    def test_invalid_request_aborts_before_running(self):
        with self.assertRaises(ValueError):
            build_requests({"requests": [{"origin": 4, "direction": "UP", "destination": 2}]})

    def test_run_scenario_settles(self):
        bank = build_bank(self.config)
        settled = run_scenario(bank, build_requests(self.config), self.config["duration"])
        self.assertTrue(settled)
        self.assertEqual(bank.registry.counts()["completed"], 2)

    def test_save_results(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "out" / "results.json"
            save_results(path, {"settled": True})
            self.assertEqual(json.loads(path.read_text()), {"settled": True})


if __name__ == "__main__":
    unittest.main()
