"""Interview record persistence.

RecordStore is the storage port used by the rest of the application. The
Postgres adapter targets the `interview_records` table; the in-memory adapter
backs tests and local runs. Both scope managers to their own records.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Protocol

from structlog import get_logger

from interview_mate.core.database import db
from interview_mate.core.errors import PermissionDeniedError, service_boundary
from interview_mate.models.auth import AuthContext
from interview_mate.models.interview import (
    Acknowledgement,
    BasicInfo,
    InterviewRecord,
    ResumeAttachment,
)

logger = get_logger()

RECORD_COLUMNS = (
    "id",
    "user_id",
    "basic_info",
    "answers",
    "acknowledgements",
    "resume",
    "ai_summary",
    "created_at",
)

# Flags older rows folded into the answers map
_LEGACY_NOTICE_KEY = re.compile(r"^notice-(?P<section>.+)-(?P<index>\d+)$")
_LEGACY_CONSENT_KEY = re.compile(r"^consent-(?P<section>.+)$")


# ============================================
# Field mapping
# ============================================


def record_to_row(record: InterviewRecord) -> dict[str, Any]:
    """Map a record to underscored column names (nested JSON keeps camelCase)."""
    return {
        "id": record.id,
        "user_id": record.user_id,
        "basic_info": record.basic_info.model_dump(by_alias=True, mode="json"),
        "answers": dict(record.answers),
        "acknowledgements": {
            section_id: ack.model_dump(by_alias=True)
            for section_id, ack in record.acknowledgements.items()
        },
        "resume": record.resume.model_dump(by_alias=True) if record.resume else None,
        "ai_summary": record.ai_summary,
        "created_at": record.created_at,
    }


def _is_checked(value: str) -> bool:
    return value.strip().lower() == "true"


def split_legacy_flags(
    answers: dict[str, str],
) -> tuple[dict[str, str], dict[str, Acknowledgement]]:
    """
    Lift `notice-<section>-<n>` and `consent-<section>` keys out of answers.

    Notice indices are zero-based. Returns the cleaned answers and the
    acknowledgements found.
    """
    cleaned: dict[str, str] = {}
    consents: dict[str, bool] = {}
    notices: dict[str, dict[int, bool]] = {}

    for key, value in answers.items():
        if match := _LEGACY_CONSENT_KEY.match(key):
            consents[match["section"]] = _is_checked(value)
        elif match := _LEGACY_NOTICE_KEY.match(key):
            notices.setdefault(match["section"], {})[int(match["index"])] = _is_checked(value)
        else:
            cleaned[key] = value

    acknowledgements: dict[str, Acknowledgement] = {}
    for section_id in {*consents, *notices}:
        flags = notices.get(section_id, {})
        size = max(flags) + 1 if flags else 0
        acknowledgements[section_id] = Acknowledgement(
            consent=consents.get(section_id, False),
            notices=[flags.get(i, False) for i in range(size)],
        )

    return cleaned, acknowledgements


def _created_at_ms(value: Any) -> int:
    if isinstance(value, datetime):
        return int(value.timestamp() * 1000)
    return int(value)


def row_to_record(row: Any) -> InterviewRecord:
    """Map a table row (asyncpg Record or dict) back to an InterviewRecord."""
    data = dict(row)

    answers, legacy = split_legacy_flags(dict(data.get("answers") or {}))
    acknowledgements = {
        section_id: Acknowledgement.model_validate(ack)
        for section_id, ack in (data.get("acknowledgements") or {}).items()
    }
    for section_id, ack in legacy.items():
        acknowledgements.setdefault(section_id, ack)

    resume = data.get("resume")

    return InterviewRecord(
        id=str(data["id"]),
        user_id=str(data["user_id"]) if data.get("user_id") else None,
        basic_info=BasicInfo.model_validate(data.get("basic_info") or {}),
        answers=answers,
        acknowledgements=acknowledgements,
        resume=ResumeAttachment.model_validate(resume) if resume else None,
        ai_summary=data.get("ai_summary"),
        created_at=_created_at_ms(data["created_at"]),
    )


# ============================================
# Port
# ============================================


class RecordStore(Protocol):
    """Storage port for interview records."""

    async def list(self, auth: AuthContext) -> list[InterviewRecord]:
        """Visible records, newest first."""
        ...

    async def get(self, auth: AuthContext, record_id: str) -> InterviewRecord | None:
        """A visible record, or None."""
        ...

    async def upsert(self, auth: AuthContext, record: InterviewRecord) -> InterviewRecord:
        """Insert or update a record; returns the stored version."""
        ...

    async def delete(self, auth: AuthContext, record_id: str) -> bool:
        """Delete a visible record; False if nothing was deleted."""
        ...


# ============================================
# Postgres adapter
# ============================================


class PostgresRecordStore:
    """RecordStore backed by the interview_records table."""

    _select = f"SELECT {', '.join(RECORD_COLUMNS)} FROM interview_records"

    @service_boundary
    async def list(self, auth: AuthContext) -> list[InterviewRecord]:
        if auth.is_admin:
            rows = await db.fetch(f"{self._select} ORDER BY created_at DESC")
        else:
            rows = await db.fetch(
                f"{self._select} WHERE user_id = $1 ORDER BY created_at DESC",
                auth.user_id,
            )

        logger.info("records_listed", user_id=auth.user_id, count=len(rows))
        return [row_to_record(row) for row in rows]

    @service_boundary
    async def get(self, auth: AuthContext, record_id: str) -> InterviewRecord | None:
        if auth.is_admin:
            row = await db.fetchrow(f"{self._select} WHERE id = $1", record_id)
        else:
            row = await db.fetchrow(
                f"{self._select} WHERE id = $1 AND user_id = $2",
                record_id,
                auth.user_id,
            )

        return row_to_record(row) if row else None

    @service_boundary
    async def upsert(self, auth: AuthContext, record: InterviewRecord) -> InterviewRecord:
        """
        Insert or update a record.

        created_at and user_id are written on insert only.

        Raises:
            PermissionDeniedError: If a manager targets another user's record
        """
        if record.user_id is None:
            record = record.model_copy(update={"user_id": auth.user_id})
        row = record_to_row(record)

        # Managers may only overwrite their own rows
        owner_guard = "" if auth.is_admin else "WHERE interview_records.user_id = $9"
        args: list[Any] = [row[column] for column in RECORD_COLUMNS]
        if not auth.is_admin:
            args.append(auth.user_id)

        stored = await db.fetchrow(
            f"""
            INSERT INTO interview_records
            ({", ".join(RECORD_COLUMNS)})
            VALUES ($1, $2, $3, $4, $5, $6, $7, $8)
            ON CONFLICT (id) DO UPDATE SET
                basic_info = EXCLUDED.basic_info,
                answers = EXCLUDED.answers,
                acknowledgements = EXCLUDED.acknowledgements,
                resume = EXCLUDED.resume,
                ai_summary = EXCLUDED.ai_summary
            {owner_guard}
            RETURNING user_id, created_at
        """,
            *args,
        )

        if stored is None:
            logger.warning("record_upsert_denied", record_id=record.id, user_id=auth.user_id)
            raise PermissionDeniedError(
                "Record belongs to another user", context={"record_id": record.id}
            )

        record = record.model_copy(
            update={
                "user_id": str(stored["user_id"]),
                "created_at": _created_at_ms(stored["created_at"]),
            }
        )
        logger.info("record_upserted", record_id=record.id, user_id=auth.user_id)
        return record

    @service_boundary
    async def delete(self, auth: AuthContext, record_id: str) -> bool:
        if auth.is_admin:
            deleted = await db.fetchval(
                "DELETE FROM interview_records WHERE id = $1 RETURNING id", record_id
            )
        else:
            deleted = await db.fetchval(
                "DELETE FROM interview_records WHERE id = $1 AND user_id = $2 RETURNING id",
                record_id,
                auth.user_id,
            )

        logger.info("record_delete", record_id=record_id, deleted=deleted is not None)
        return deleted is not None


# ============================================
# In-memory adapter
# ============================================


class InMemoryRecordStore:
    """RecordStore kept in a dict; used by tests and local runs."""

    def __init__(self, records: list[InterviewRecord] | None = None) -> None:
        self.records: dict[str, InterviewRecord] = {r.id: r for r in records or []}

    async def list(self, auth: AuthContext) -> list[InterviewRecord]:
        visible = [r for r in self.records.values() if auth.can_access(r.user_id)]
        return sorted(visible, key=lambda r: r.created_at, reverse=True)

    async def get(self, auth: AuthContext, record_id: str) -> InterviewRecord | None:
        record = self.records.get(record_id)
        if record is None or not auth.can_access(record.user_id):
            return None
        return record

    async def upsert(self, auth: AuthContext, record: InterviewRecord) -> InterviewRecord:
        existing = self.records.get(record.id)

        if existing is not None:
            if not auth.can_access(existing.user_id):
                raise PermissionDeniedError(
                    "Record belongs to another user", context={"record_id": record.id}
                )
            record = record.model_copy(
                update={"user_id": existing.user_id, "created_at": existing.created_at}
            )
        elif record.user_id is None:
            record = record.model_copy(update={"user_id": auth.user_id})

        self.records[record.id] = record
        return record

    async def delete(self, auth: AuthContext, record_id: str) -> bool:
        record = self.records.get(record_id)
        if record is None or not auth.can_access(record.user_id):
            return False
        del self.records[record_id]
        return True


# Default store used by the API
record_store = PostgresRecordStore()
