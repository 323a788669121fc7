import unittest

from fastapi.testclient import TestClient

from server.app import app, manager


class ServerTest(unittest.TestCase):
    # Not used as a context manager, so startup never launches the car threads.
    client = TestClient(app)

    def test_add_request_derives_direction(self):
        before = manager.bank.registry.counts()["pending"]
        response = self.client.post("/requests", json={"origin": 5, "destination": 10})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["direction"], "UP")
        self.assertEqual(manager.bank.registry.counts()["pending"], before + 1)

    def test_add_request_with_explicit_direction(self):
        response = self.client.post("/requests", json={"origin": 6, "destination": 1, "direction": "down"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["direction"], "DOWN")

    def test_invalid_request_is_rejected(self):
        response = self.client.post("/requests", json={"origin": 5, "destination": 10, "direction": "DOWN"})
        self.assertEqual(response.status_code, 400)
        response = self.client.post("/requests", json={"origin": 3, "destination": 3})
        self.assertEqual(response.status_code, 400)

    def test_state_and_stats(self):
        state = self.client.get("/state").json()
        self.assertEqual([car["name"] for car in state["elevators"]], ["A", "B"])
        stats = self.client.get("/stats").json()
        self.assertEqual(stats["completed_count"], 0)
        self.assertEqual(stats["average_wait_seconds"], 0)


if __name__ == "__main__":
    unittest.main()
