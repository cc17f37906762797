"""
Seat Lock Service - Main Application Entry Point

An in-memory seat reservation coordinator:
- Fixed pool of seats built once at startup
- Time-boxed locks that expire lazily on access
- Per-seat mutual exclusion for concurrent lock/confirm requests
- Structured logging with request correlation
"""

from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from seatlock.core.config import get_settings
from seatlock.core.logging import setup_logging, get_logger
from seatlock.core.metrics import metrics_endpoint
from seatlock.api.dependencies import get_ledger
from seatlock.api.errors import register_exception_handlers
from seatlock.api.router import api_router
from seatlock.api.middleware import RequestLoggingMiddleware
from seatlock.schemas.seat import HealthResponse
from seatlock.services.seat_ledger import SeatLedger

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: the ledger lives exactly as long as the process."""
    setup_logging()
    logger = get_logger(__name__)

    logger.info(
        "application_starting",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
    )

    app.state.ledger = SeatLedger.from_settings(settings)
    logger.info(
        "seat_ledger_ready",
        total_seats=settings.TOTAL_SEATS,
        lock_timeout_ms=settings.LOCK_TIMEOUT_MS,
    )

    yield

    logger.info("application_shutdown")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="In-memory seat locking and booking with lazy lock expiry",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestLoggingMiddleware)

register_exception_handlers(app)

app.include_router(api_router)


@app.get("/health", response_model=HealthResponse, tags=["Health"])
def health_check(ledger: SeatLedger = Depends(get_ledger)):
    """Health check endpoint for Docker and load balancers."""
    return HealthResponse(
        status="healthy",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        seats=ledger.status_counts(),
    )


@app.get("/metrics", tags=["Health"], include_in_schema=False)
def metrics():
    return metrics_endpoint()


@app.get("/", tags=["Root"])
async def root():
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/docs",
    }
