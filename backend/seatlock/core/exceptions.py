"""
Seat ledger error taxonomy.

Every failure is non-fatal and local to one request: the ledger raises,
the API layer maps `code` to an HTTP status, and nothing is retried.
"""

from typing import Optional


class SeatLedgerError(Exception):
    """Base exception for all seat ledger failures."""

    code = "seat_error"

    def __init__(self, seat_id, message: Optional[str] = None):
        self.seat_id = seat_id
        self.message = message or self.default_message()
        super().__init__(self.message)

    def default_message(self) -> str:
        return f"Seat {self.seat_id} cannot be processed."


class SeatNotFound(SeatLedgerError):
    """Seat id is outside the configured range."""

    code = "not_found"

    def default_message(self) -> str:
        return "Seat not found."


class SeatAlreadyLocked(SeatLedgerError):
    """Seat is held by a lock that has not expired yet."""

    code = "already_locked"

    def default_message(self) -> str:
        return f"Seat {self.seat_id} is currently locked."


class SeatAlreadyBooked(SeatLedgerError):
    code = "already_booked"

    def default_message(self) -> str:
        return f"Seat {self.seat_id} is already booked."


class SeatLockExpired(SeatLedgerError):
    """
    The lock that would have authorized a confirm timed out.
    The seat has already been released back to available when this is raised.
    """

    code = "lock_expired"

    def default_message(self) -> str:
        return "Lock on the seat has expired. Please lock it again."


class SeatNotLocked(SeatLedgerError):
    """Confirm attempted on a seat that is available or already booked."""

    code = "not_locked"

    def default_message(self) -> str:
        return "Seat is not locked and cannot be booked"


class InvalidSeatTransition(SeatLedgerError):
    """
    Raised when a Seat record is asked for a transition its state machine
    does not allow. The ledger checks state first, so this signals misuse.
    """

    code = "invalid_transition"

    def __init__(self, seat_id, from_state: str, to_state: str):
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(
            seat_id,
            f"Illegal seat transition for seat {seat_id}: {from_state} -> {to_state}",
        )
