"""
Pytest fixtures for the seat ledger and the HTTP client.

Each test gets a fresh ledger driven by a hand-cranked clock, so lock
expiry is exercised without sleeping.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from seatlock.main import app
from seatlock.api.dependencies import get_ledger
from seatlock.services.seat_ledger import SeatLedger

TOTAL_SEATS = 20
LOCK_TIMEOUT_MS = 60_000


class FakeClock:
    """Callable clock returning epoch milliseconds that only moves when told to."""

    def __init__(self, start_ms: int = 1_700_000_000_000):
        self.now = start_ms

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def ledger(clock: FakeClock) -> SeatLedger:
    """20 seats, 60 second lock window."""
    return SeatLedger(total_seats=TOTAL_SEATS, lock_timeout_ms=LOCK_TIMEOUT_MS, clock=clock)


@pytest_asyncio.fixture(scope="function")
async def client(ledger: SeatLedger) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client that overrides the ledger dependency with the test ledger."""
    app.dependency_overrides[get_ledger] = lambda: ledger

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
