"""
Seat ledger: authoritative in-memory state for a fixed pool of seats.

CONCURRENCY STRATEGY: One Mutex per Seat
========================================

Problem:
  Two users try to lock seat 5 at the same instant.
  Both read status=available, both write status=locked, both succeed.
  Result: Double-sold seat.

Solution:
  Every seat has its own threading.Lock. The expiry check, the status
  inspection and the resulting mutation for a seat all run inside that
  seat's critical section, so each request sees one consistent pre-image
  and decides exactly once. Route handlers are plain `def` functions that
  FastAPI runs on its threadpool, which is why the mutexes are real.

  - Different seats never contend with each other
  - list_seats takes each seat's lock in turn: no torn {status, timestamp}
    pair, but no global snapshot lock either
  - Critical sections are a few attribute writes; nothing blocks on I/O

EXPIRY: Lazy, on access
=======================

  There is no background sweeper. A lock is expired when
  `now - lock_timestamp > lock_timeout_ms`, evaluated when a request touches
  the seat. list_seats sweeps every seat; lock_seat and confirm_seat sweep
  only the seat they address.
"""

import threading
from collections import Counter
from typing import Dict, Optional, Union

from seatlock.core.clock import Clock, system_clock
from seatlock.core.exceptions import (
    SeatAlreadyBooked,
    SeatAlreadyLocked,
    SeatLedgerError,
    SeatLockExpired,
    SeatNotFound,
    SeatNotLocked,
)
from seatlock.core.logging import get_logger
from seatlock.core.metrics import (
    record_confirm_attempt,
    record_lock_attempt,
    record_lock_expiration,
    record_status_counts,
)
from seatlock.models.seat import Seat, SeatStatus

logger = get_logger(__name__)

SeatId = Union[int, str]


class SeatLedger:
    """Owns every Seat record and arbitrates lock/confirm requests."""

    def __init__(self, total_seats: int, lock_timeout_ms: int, clock: Optional[Clock] = None):
        if total_seats <= 0:
            raise ValueError(f"total_seats must be positive, got {total_seats}")
        if lock_timeout_ms <= 0:
            raise ValueError(f"lock_timeout_ms must be positive, got {lock_timeout_ms}")

        self._total_seats = total_seats
        self._lock_timeout_ms = lock_timeout_ms
        self._clock = clock or system_clock
        self._seats: Dict[int, Seat] = {i: Seat(id=i) for i in range(1, total_seats + 1)}
        self._mutexes: Dict[int, threading.Lock] = {i: threading.Lock() for i in self._seats}
        self._ids: Dict[str, int] = {str(i): i for i in self._seats}

    @classmethod
    def from_settings(cls, settings, clock: Optional[Clock] = None) -> "SeatLedger":
        return cls(
            total_seats=settings.TOTAL_SEATS,
            lock_timeout_ms=settings.LOCK_TIMEOUT_MS,
            clock=clock,
        )

    @property
    def total_seats(self) -> int:
        return self._total_seats

    @property
    def lock_timeout_ms(self) -> int:
        return self._lock_timeout_ms

    def list_seats(self) -> Dict[int, Seat]:
        """
        Release every expired lock, then return a snapshot of all seats
        keyed by id. Never fails.
        """
        now = self._clock()
        snapshot: Dict[int, Seat] = {}

        for seat_id, seat in self._seats.items():
            with self._mutexes[seat_id]:
                self._release_if_expired(seat, now)
                snapshot[seat_id] = seat.snapshot()

        record_status_counts(self._count(snapshot))
        return snapshot

    def status_counts(self) -> Dict[SeatStatus, int]:
        """Seat count per status, after a full expiry sweep."""
        return self._count(self.list_seats())

    def lock_seat(self, seat_id: SeatId) -> Seat:
        """
        Place a time-boxed hold on an available seat.

        Raises:
            SeatNotFound: id outside 1..total_seats
            SeatAlreadyLocked: seat held by an unexpired lock
            SeatAlreadyBooked: seat permanently booked
        """
        try:
            key = self._resolve(seat_id)
            with self._mutexes[key]:
                seat = self._seats[key]
                now = self._clock()
                self._release_if_expired(seat, now)

                if seat.status is SeatStatus.LOCKED:
                    raise SeatAlreadyLocked(key)
                if seat.status is SeatStatus.BOOKED:
                    raise SeatAlreadyBooked(key)

                seat.lock(now)
                result = seat.snapshot()
        except SeatLedgerError as e:
            record_lock_attempt(e.code)
            logger.info("seat_lock_rejected", seat_id=seat_id, reason=e.code)
            raise

        record_lock_attempt("locked")
        logger.info("seat_locked", seat_id=key, lock_timestamp=result.lock_timestamp)
        return result

    def confirm_seat(self, seat_id: SeatId) -> Seat:
        """
        Turn a valid lock into a permanent booking.

        An expired lock is released here and the confirm fails; the caller
        has to lock the seat again.

        Raises:
            SeatNotFound: id outside 1..total_seats
            SeatLockExpired: lock timed out (seat is now available)
            SeatNotLocked: seat is available or already booked
        """
        try:
            key = self._resolve(seat_id)
            with self._mutexes[key]:
                seat = self._seats[key]
                now = self._clock()

                if seat.status is not SeatStatus.LOCKED:
                    raise SeatNotLocked(key)
                if self._release_if_expired(seat, now):
                    raise SeatLockExpired(key)

                seat.book()
                result = seat.snapshot()
        except SeatLedgerError as e:
            record_confirm_attempt(e.code)
            logger.info("seat_confirm_rejected", seat_id=seat_id, reason=e.code)
            raise

        record_confirm_attempt("booked")
        logger.info("seat_booked", seat_id=key)
        return result

    def _resolve(self, seat_id: SeatId) -> int:
        """
        Map an int or path-derived string to a seat key.
        Only canonical decimal strings resolve ("5", not "05" or "5.0").
        """
        key = None
        if isinstance(seat_id, int) and not isinstance(seat_id, bool):
            key = seat_id
        elif isinstance(seat_id, str):
            key = self._ids.get(seat_id)

        if key is None or key not in self._seats:
            raise SeatNotFound(seat_id)
        return key

    def _release_if_expired(self, seat: Seat, now: int) -> bool:
        """Caller must hold the seat's mutex."""
        if not seat.is_lock_expired(now, self._lock_timeout_ms):
            return False

        held_ms = now - seat.lock_timestamp
        seat.release()
        record_lock_expiration()
        logger.info("seat_lock_expired", seat_id=seat.id, held_ms=held_ms)
        return True

    @staticmethod
    def _count(seats: Dict[int, Seat]) -> Dict[SeatStatus, int]:
        counts = Counter(seat.status for seat in seats.values())
        return {status: counts.get(status, 0) for status in SeatStatus}
