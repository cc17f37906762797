"""
Request-scoped access to objects created in the application lifespan.
"""

from fastapi import Request

from seatlock.services.seat_ledger import SeatLedger


def get_ledger(request: Request) -> SeatLedger:
    """The SeatLedger built at startup and stored on app.state."""
    return request.app.state.ledger
