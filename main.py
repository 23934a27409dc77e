"""
FastAPI application entry point for the Health Tracker API.

Architecture Overview:
    ┌─────────────────────────────────────────────────────────────┐
    │                     FastAPI Application                      │
    ├─────────────────────────────────────────────────────────────┤
    │  Middleware                                                  │
    │    └── LoggingMiddleware  - Request logging & metrics       │
    ├─────────────────────────────────────────────────────────────┤
    │  Routers (api/routers/)                                     │
    │    ├── health.py         - /health, /ready, /metrics        │
    │    ├── users.py          - User profiles                    │
    │    ├── records.py        - Vitals readings                  │
    │    ├── medications.py    - Medication reminders             │
    │    ├── consultations.py  - Virtual consultations            │
    │    ├── diet.py           - Diet records                     │
    │    ├── exercise.py       - Exercise recommendations         │
    │    ├── mental_health.py  - Mood check-ins                   │
    │    └── challenges.py     - Fitness challenges & participants│
    ├─────────────────────────────────────────────────────────────┤
    │  HealthTrackerService      ← Injected via Depends()         │
    │    └── RecordService x9    - validate, reference-check, save│
    ├─────────────────────────────────────────────────────────────┤
    │  RecordStore x9 (repositories/) → Database (SQLite)         │
    └─────────────────────────────────────────────────────────────┘
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
import uvicorn

from core.config import API_HOST, API_PORT, API_RELOAD, settings
from core.dependencies import get_tracker_service
from core.exceptions import setup_exception_handlers
from core.logging_config import setup_logging
from core.middleware import LoggingMiddleware
from api.routers import health_router, ENTITY_ROUTERS


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging, then open the database and create the
    record tables so the first request does not pay for it.
    """
    setup_logging(level=settings.log_level, json_format=settings.log_format == "json")

    logger = logging.getLogger(__name__)
    logger.info("Starting Health Tracker API...")

    get_tracker_service()
    logger.info("Record stores ready", extra={"db_path": settings.database_path})

    yield

    logger.info("Health Tracker API shutting down...")


def create_app() -> FastAPI:
    """Build the FastAPI application with handlers, middleware and routers."""
    app = FastAPI(
        title="Health Tracker API",
        description="Personal health tracking: users, vitals, medication reminders, consultations, "
                    "diet, exercise, mood check-ins and fitness challenges.",
        version="1.0.0",
        lifespan=lifespan
    )

    setup_exception_handlers(app)
    app.add_middleware(LoggingMiddleware)

    app.include_router(health_router)
    for router in ENTITY_ROUTERS:
        app.include_router(router)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=API_HOST,
        port=API_PORT,
        reload=API_RELOAD
    )
