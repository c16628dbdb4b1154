"""
FastAPI app entrypoint.

Expert booking API: services, weekly availability, free slots, bookings. All routes under /api.
"""
import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load .env from backend/ before any app code
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

from app.api.routes import availability, bookings, services, sessions, users
from app.config import settings
from app.core.errors import register_error_handlers

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Expert Booking", version="0.1.0")

# CORS: CORS_ORIGINS env (comma-separated) for the production frontend; otherwise reflect any origin
_cors_origins = settings.cors_origin_list()
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_origin_regex=None if _cors_origins else ".*",
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)

register_error_handlers(app)

app.include_router(sessions.router, prefix="/api", tags=["sessions"])
app.include_router(users.router, prefix="/api", tags=["users"])
app.include_router(services.router, prefix="/api", tags=["services"])
app.include_router(availability.router, prefix="/api", tags=["availability"])
app.include_router(bookings.router, prefix="/api", tags=["bookings"])


@app.get("/", include_in_schema=False)
def root():
    """Root: point to API docs and health."""
    return {"message": "Expert Booking API", "docs": "/docs", "health": "/health"}


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
