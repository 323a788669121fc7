import unittest

from dispatch import Direction, DispatchTiming, ElevatorBank, Request

FAST = DispatchTiming(service_dwell_ms=1, floor_travel_ms=1, idle_poll_ms=5)


class ElevatorBankTest(unittest.TestCase):
    def test_rejects_duplicate_names(self):
        with self.assertRaises(ValueError):
            ElevatorBank(names=("A", "A"))

    def test_cars_share_the_registry(self):
        bank = ElevatorBank(names=("A", "B", "C"), timing=FAST)
        self.assertEqual([car.name for car in bank.cars], ["A", "B", "C"])
        self.assertTrue(all(car.registry is bank.registry for car in bank.cars))
        self.assertIsNone(bank.get_car("Z"))

    def test_snapshot_shape(self):
        bank = ElevatorBank(timing=FAST)
        bank.submit(Request(3, Direction.UP, 6))
        state = bank.snapshot()
        self.assertEqual(state["requests"]["pending"], 1)
        self.assertEqual(state["statistics"]["completed_count"], 0)
        self.assertEqual(state["elevators"][0]["floor"], 1)
        self.assertEqual(state["elevators"][0]["direction"], "IDLE")
        self.assertFalse(bank.is_settled())

    def test_demo_requests_are_all_delivered(self):
        bank = ElevatorBank(names=("A", "B"), timing=FAST)
        bank.start()
        try:
            bank.submit(Request(5, Direction.UP, 10))
            bank.submit(Request(7, Direction.UP, 9))
            bank.submit(Request(6, Direction.DOWN, 1))
            bank.submit(Request(10, Direction.DOWN, 1))
            self.assertTrue(bank.wait_until_settled(timeout=20))
        finally:
            bank.stop()
            bank.join(timeout=5)

        state = bank.snapshot()
        self.assertEqual(state["requests"], {"pending": 0, "completed": 4, "tracked": 4})
        self.assertEqual(state["statistics"]["completed_count"], 4)
        self.assertFalse(any(car["running"] for car in state["elevators"]))


if __name__ == "__main__":
    unittest.main()
