"""
Seat endpoints: list, lock, confirm.

Handlers are sync so FastAPI runs them on its threadpool; the ledger's
per-seat mutexes make that safe. Ledger errors propagate to the handler
registered in seatlock.api.errors.
"""

from fastapi import APIRouter, Depends

from seatlock.api.dependencies import get_ledger
from seatlock.schemas.seat import SeatState, SeatMap, MessageResponse, ErrorResponse
from seatlock.services.seat_ledger import SeatLedger

router = APIRouter(prefix="/seats", tags=["Seats"])

LOCK_ERRORS = {
    404: {"model": ErrorResponse, "description": "Seat not found"},
    400: {"model": ErrorResponse, "description": "Seat already locked or booked"},
}
CONFIRM_ERRORS = {
    404: {"model": ErrorResponse, "description": "Seat not found"},
    400: {"model": ErrorResponse, "description": "Lock expired or seat not locked"},
}


def describe_timeout(timeout_ms: int) -> str:
    """Human wording for the lock window, e.g. '1 minute' or '30 seconds'."""
    if timeout_ms % 60_000 == 0:
        minutes = timeout_ms // 60_000
        return f"{minutes} minute" if minutes == 1 else f"{minutes} minutes"
    if timeout_ms % 1000 == 0:
        seconds = timeout_ms // 1000
        return f"{seconds} second" if seconds == 1 else f"{seconds} seconds"
    return f"{timeout_ms} ms"


@router.get("", response_model=SeatMap)
def list_seats(ledger: SeatLedger = Depends(get_ledger)):
    """
    Current status of every seat.
    Expired locks are released before the snapshot is taken.
    """
    return {
        seat_id: SeatState.model_validate(seat)
        for seat_id, seat in ledger.list_seats().items()
    }


@router.post("/lock/{seat_id}", response_model=MessageResponse, responses=LOCK_ERRORS)
def lock_seat(seat_id: str, ledger: SeatLedger = Depends(get_ledger)):
    """Hold a seat for the configured lock window."""
    seat = ledger.lock_seat(seat_id)
    window = describe_timeout(ledger.lock_timeout_ms)
    return MessageResponse(
        message=f"Seat {seat.id} locked successfully. Confirm within {window}."
    )


@router.post("/confirm/{seat_id}", response_model=MessageResponse, responses=CONFIRM_ERRORS)
def confirm_seat(seat_id: str, ledger: SeatLedger = Depends(get_ledger)):
    """Book a seat that is currently locked and whose lock has not expired."""
    seat = ledger.confirm_seat(seat_id)
    return MessageResponse(message=f"Seat {seat.id} booked successfully!")
