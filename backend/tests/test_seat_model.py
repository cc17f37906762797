"""
Tests for the Seat record state machine.
"""

import pytest

from seatlock.core.exceptions import InvalidSeatTransition
from seatlock.models.seat import Seat, SeatStatus


def test_new_seat_is_available():
    seat = Seat(id=1)
    assert seat.status is SeatStatus.AVAILABLE
    assert seat.lock_timestamp is None


def test_lock_then_book_clears_timestamp():
    seat = Seat(id=1)
    seat.lock(1000)
    assert seat.status is SeatStatus.LOCKED
    assert seat.lock_timestamp == 1000

    seat.book()
    assert seat.status is SeatStatus.BOOKED
    assert seat.lock_timestamp is None


def test_release_returns_seat_to_available():
    seat = Seat(id=1)
    seat.lock(1000)
    seat.release()
    assert seat.status is SeatStatus.AVAILABLE
    assert seat.lock_timestamp is None


def test_expiry_is_strictly_after_timeout():
    seat = Seat(id=1)
    seat.lock(1000)
    assert not seat.is_lock_expired(now=1000 + 500, timeout_ms=500)
    assert seat.is_lock_expired(now=1000 + 501, timeout_ms=500)


def test_unlocked_seat_never_expires():
    assert not Seat(id=1).is_lock_expired(now=10**15, timeout_ms=1)
    booked = Seat(id=2)
    booked.lock(0)
    booked.book()
    assert not booked.is_lock_expired(now=10**15, timeout_ms=1)


@pytest.mark.parametrize("action", ["book", "release"])
def test_available_seat_rejects_non_lock_transitions(action):
    seat = Seat(id=3)
    with pytest.raises(InvalidSeatTransition) as exc_info:
        getattr(seat, action)()
    assert exc_info.value.from_state == "available"
    assert seat.status is SeatStatus.AVAILABLE


def test_booked_is_terminal():
    seat = Seat(id=4)
    seat.lock(0)
    seat.book()
    with pytest.raises(InvalidSeatTransition):
        seat.lock(10)
    with pytest.raises(InvalidSeatTransition):
        seat.release()
    assert seat.status is SeatStatus.BOOKED


def test_snapshot_is_detached():
    seat = Seat(id=5)
    copy = seat.snapshot()
    seat.lock(42)
    assert copy.status is SeatStatus.AVAILABLE
    assert copy.lock_timestamp is None
