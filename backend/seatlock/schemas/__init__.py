from seatlock.schemas.seat import SeatState, SeatMap, MessageResponse, ErrorResponse, HealthResponse

__all__ = [
    "SeatState", "SeatMap", "MessageResponse", "ErrorResponse", "HealthResponse",
]
