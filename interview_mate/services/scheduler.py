"""Background jobs: purging idle form sessions."""

from __future__ import annotations

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from structlog import get_logger

from interview_mate.core.config import settings
from interview_mate.services.form_sessions import purge_idle_form_sessions

logger = get_logger()

scheduler = AsyncIOScheduler()


def setup_scheduler() -> None:
    """
    Register background jobs.

    Jobs:
    - purge_idle_form_sessions: every form_session_purge_interval_minutes
    """
    scheduler.add_job(
        purge_idle_form_sessions,
        trigger="interval",
        minutes=settings.form_session_purge_interval_minutes,
        id="purge_idle_form_sessions",
        replace_existing=True,
        coalesce=True,
        max_instances=1,
    )

    logger.info(
        "scheduler_configured",
        jobs=1,
        purge_interval_minutes=settings.form_session_purge_interval_minutes,
    )


def start_scheduler() -> None:
    scheduler.start()
    logger.info("scheduler_started")


def shutdown_scheduler() -> None:
    """Stop the scheduler, waiting for a running purge to finish."""
    scheduler.shutdown(wait=True)
    logger.info("scheduler_shutdown")
