"""
Maps seat ledger errors to HTTP responses.
No business decisions happen here: the ledger already chose the outcome.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from seatlock.core.exceptions import SeatLedgerError
from seatlock.core.logging import get_logger

logger = get_logger(__name__)

STATUS_BY_CODE = {
    "not_found": status.HTTP_404_NOT_FOUND,
    "already_locked": status.HTTP_400_BAD_REQUEST,
    "already_booked": status.HTTP_400_BAD_REQUEST,
    "lock_expired": status.HTTP_400_BAD_REQUEST,
    "not_locked": status.HTTP_400_BAD_REQUEST,
}


async def seat_ledger_error_handler(request: Request, exc: SeatLedgerError) -> JSONResponse:
    status_code = STATUS_BY_CODE.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code >= 500:
        logger.error("seat_ledger_error_unmapped", code=exc.code, error=exc.message)
    return JSONResponse(
        status_code=status_code,
        content={"message": exc.message, "error": exc.code},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SeatLedgerError, seat_ledger_error_handler)
