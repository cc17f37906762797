"""
Locust Load Test Suite

Run scenarios against a running server:
  locust -f locustfile.py --tags contention   # Many users, one seat
  locust -f locustfile.py --tags throughput   # Seat map reads
  locust -f locustfile.py --tags edge         # Bad seat ids
  locust -f locustfile.py                     # All tests
"""

import random
from locust import HttpUser, task, between, tag, events

TOTAL_SEATS = 20
CONTENTION_SEAT = 1


@events.test_start.add_listener
def on_test_start(environment, **kwargs):
    print("\n" + "="*60)
    print(f"Seat pool: {TOTAL_SEATS}, contention seat: {CONTENTION_SEAT}")
    print("="*60)


class ContentionUser(HttpUser):
    """
    TEST 1: Contention - every user fights for the same seat

    Run: locust -f locustfile.py --tags contention -u 100 -r 50 --run-time 30s

    After test, verify with GET /seats that the seat is locked or booked
    and that exactly one confirm succeeded per lock window.
    """
    wait_time = between(0, 0.1)

    @tag("contention")
    @task
    def lock_and_confirm_same_seat(self):
        with self.client.post(f"/seats/lock/{CONTENTION_SEAT}",
            name="/seats/lock/{id} [contended]",
            catch_response=True
        ) as resp:
            if resp.status_code == 200:
                resp.success()
            elif resp.status_code == 400:
                resp.success()  # Expected: someone else holds it
                return
            else:
                resp.failure(f"Unexpected: {resp.status_code}")
                return

        with self.client.post(f"/seats/confirm/{CONTENTION_SEAT}",
            name="/seats/confirm/{id} [contended]",
            catch_response=True
        ) as resp:
            if resp.status_code == 200:
                resp.success()
            else:
                resp.failure(f"Winner could not confirm: {resp.status_code}")


class ThroughputUser(HttpUser):
    """
    TEST 2: Throughput - seat map reads with a full expiry sweep each

    Run: locust -f locustfile.py --tags throughput -u 100 -r 20 --run-time 60s
    """
    wait_time = between(0.1, 0.5)

    @tag("throughput", "read")
    @task(10)
    def list_seats(self):
        self.client.get("/seats")

    @tag("throughput")
    @task(1)
    def health_check(self):
        self.client.get("/health")


class EdgeCaseUser(HttpUser):
    """
    TEST 3: Edge cases - bad seat ids

    Run: locust -f locustfile.py --tags edge -u 20 -r 5 --run-time 30s

    System should NOT crash, return 404 for unknown seats.
    """
    wait_time = between(0.5, 1.5)

    @tag("edge")
    @task
    def out_of_range_seat(self):
        with self.client.post("/seats/lock/999",
            name="/seats/lock/{id} [unknown]",
            catch_response=True
        ) as resp:
            if resp.status_code == 404:
                resp.success()
            else:
                resp.failure(f"Expected 404, got {resp.status_code}")

    @tag("edge")
    @task
    def non_numeric_seat(self):
        with self.client.post("/seats/confirm/abc",
            name="/seats/confirm/{id} [unknown]",
            catch_response=True
        ) as resp:
            if resp.status_code == 404:
                resp.success()
            else:
                resp.failure(f"Expected 404, got {resp.status_code}")

    @tag("edge")
    @task
    def confirm_unlocked_seat(self):
        with self.client.post(f"/seats/confirm/{random.randint(1, TOTAL_SEATS)}",
            name="/seats/confirm/{id} [unlocked]",
            catch_response=True
        ) as resp:
            if resp.status_code in [200, 400]:
                resp.success()
            else:
                resp.failure(f"Expected 200/400, got {resp.status_code}")


class RealisticUser(HttpUser):
    """
    TEST 4: Realistic mixed workload

    Run: locust -f locustfile.py -u 200 -r 20 --run-time 120s

      - Mostly browsing the seat map
      - Some lock attempts, most of which go on to confirm
      - Some abandoned locks that expire on their own
    """
    wait_time = between(1, 3)

    @task(50)
    def browse_seats(self):
        self.client.get("/seats")

    @task(10)
    def lock_then_confirm(self):
        seat_id = random.randint(1, TOTAL_SEATS)
        resp = self.client.post(f"/seats/lock/{seat_id}", name="/seats/lock/{id}")
        if resp.status_code == 200:
            self.client.post(f"/seats/confirm/{seat_id}", name="/seats/confirm/{id}")

    @task(3)
    def abandon_lock(self):
        seat_id = random.randint(1, TOTAL_SEATS)
        self.client.post(f"/seats/lock/{seat_id}", name="/seats/lock/{id} [abandoned]")
