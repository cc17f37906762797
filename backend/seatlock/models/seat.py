"""
Seat record and its state machine.

  available --lock--> locked --book--> booked
                        |
                        +--release--> available   (lock expired)

booked is terminal. lock_timestamp is set if and only if status is locked;
the transition methods are the only writers, which keeps that pairing intact.
"""

from dataclasses import dataclass, replace
from typing import Optional
import enum

from seatlock.core.exceptions import InvalidSeatTransition


class SeatStatus(str, enum.Enum):
    AVAILABLE = "available"
    LOCKED = "locked"
    BOOKED = "booked"


@dataclass
class Seat:
    id: int
    status: SeatStatus = SeatStatus.AVAILABLE
    lock_timestamp: Optional[int] = None  # epoch ms, only while locked

    def is_lock_expired(self, now: int, timeout_ms: int) -> bool:
        if self.status is not SeatStatus.LOCKED or self.lock_timestamp is None:
            return False
        return now - self.lock_timestamp > timeout_ms

    def lock(self, now: int) -> None:
        self._require(SeatStatus.AVAILABLE, SeatStatus.LOCKED)
        self.status = SeatStatus.LOCKED
        self.lock_timestamp = now

    def book(self) -> None:
        self._require(SeatStatus.LOCKED, SeatStatus.BOOKED)
        self.status = SeatStatus.BOOKED
        self.lock_timestamp = None

    def release(self) -> None:
        self._require(SeatStatus.LOCKED, SeatStatus.AVAILABLE)
        self.status = SeatStatus.AVAILABLE
        self.lock_timestamp = None

    def snapshot(self) -> "Seat":
        """Detached copy safe to hand out of the ledger."""
        return replace(self)

    def _require(self, expected: SeatStatus, target: SeatStatus) -> None:
        if self.status is not expected:
            raise InvalidSeatTransition(self.id, self.status.value, target.value)

    def __repr__(self) -> str:
        return f"<Seat(id={self.id}, status={self.status.value}, lock_timestamp={self.lock_timestamp})>"
