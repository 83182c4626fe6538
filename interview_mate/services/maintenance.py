"""Operator queries over the records table (used by scripts/records_admin.py)."""

from __future__ import annotations

from typing import Any

from structlog import get_logger

from interview_mate.core.database import db
from interview_mate.core.errors import service_boundary
from interview_mate.models.interview import InterviewType

logger = get_logger()


@service_boundary
async def count_records() -> int:
    count = await db.fetchval("SELECT COUNT(*) FROM interview_records")
    return int(count or 0)


@service_boundary
async def list_record_names() -> list[dict[str, Any]]:
    """Candidate name and created_at of every record, newest first."""
    rows = await db.fetch(
        """
        SELECT id, basic_info->>'name' AS name, created_at
        FROM interview_records
        ORDER BY created_at DESC
    """
    )
    return [dict(row) for row in rows]


@service_boundary
async def set_interview_type(names: list[str], interview_type: InterviewType) -> dict[str, int]:
    """
    Set basicInfo.interviewType on every record whose candidate name matches.

    Returns:
        Candidate name -> number of records updated
    """
    updated: dict[str, int] = {}

    for name in names:
        rows = await db.fetch(
            """
            UPDATE interview_records
            SET basic_info = jsonb_set(basic_info, '{interviewType}', to_jsonb($2::text))
            WHERE basic_info->>'name' = $1
            RETURNING id
        """,
            name,
            interview_type.value,
        )
        updated[name] = len(rows)

        if rows:
            logger.info(
                "record_interview_type_set",
                name=name,
                interview_type=interview_type,
                count=len(rows),
            )
        else:
            logger.warning("record_interview_type_no_match", name=name)

    return updated
