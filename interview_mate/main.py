"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException

from interview_mate.api.errors import setup_domain_error_handler
from interview_mate.api.forms import router as forms_router
from interview_mate.api.me import router as me_router
from interview_mate.api.records import router as records_router
from interview_mate.core.database import db
from interview_mate.core.logging import logger, setup_logging
from interview_mate.middleware import (
    LoggingMiddleware,
    RequestIDMiddleware,
    setup_cors,
    setup_exception_handlers,
    setup_rate_limiting,
)
from interview_mate.services.form_sessions import form_sessions
from interview_mate.services.scheduler import (
    scheduler,
    setup_scheduler,
    shutdown_scheduler,
    start_scheduler,
)

setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the database pool and start the idle-form purge job; undo both on exit."""
    logger.info("interview_mate_starting")
    await db.connect()

    setup_scheduler()
    start_scheduler()

    logger.info("interview_mate_ready", routes=len(app.routes))

    yield

    logger.info("interview_mate_stopping", open_forms=len(form_sessions.sessions))
    shutdown_scheduler()
    await db.disconnect()
    logger.info("interview_mate_stopped")


app = FastAPI(
    title="Interview Mate",
    description="Structured candidate interview notes with AI summaries",
    version="1.0.0",
    lifespan=lifespan,
)

# Added last runs first: request id must be bound before the request is logged
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestIDMiddleware)
setup_cors(app)

setup_rate_limiting(app)
setup_exception_handlers(app)
setup_domain_error_handler(app)

app.include_router(me_router)
app.include_router(records_router)
app.include_router(forms_router)


def _pool_stats() -> dict[str, int]:
    if not db.pool:
        raise RuntimeError("Database pool not initialized")
    size = db.pool.get_size()
    idle = db.pool.get_idle_size()
    return {"size": size, "free": idle, "in_use": size - idle}


@app.get("/health")
async def health_check() -> dict[str, Any]:
    """
    Liveness plus a database round trip.

    Also reports connection pool usage, the scheduler and how many forms are open.
    Responds 503 when the database cannot be reached.
    """
    try:
        await db.fetchval("SELECT 1")
        pool = _pool_stats()
    except Exception as e:
        logger.error("health_check_failed", error=str(e))
        raise HTTPException(status_code=503, detail="Database unavailable") from e

    return {
        "status": "healthy",
        "database": "connected",
        "scheduler": "running" if scheduler.running else "stopped",
        "pool": pool,
        "open_forms": len(form_sessions.sessions),
    }


@app.get("/")
async def root() -> dict[str, str]:
    return {"message": "Interview Mate API"}
