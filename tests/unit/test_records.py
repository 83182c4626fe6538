"""Tests for record mapping and stores (interview_mate/services/records.py)."""

from __future__ import annotations

from datetime import UTC, datetime
from unittest.mock import AsyncMock, patch

import asyncpg
import pytest

from interview_mate.core.errors import DatabaseError, PermissionDeniedError
from interview_mate.models.interview import Acknowledgement
from interview_mate.services.records import (
    InMemoryRecordStore,
    PostgresRecordStore,
    record_to_row,
    row_to_record,
    split_legacy_flags,
)
from tests.fixtures.factories import (
    MANAGER_ID,
    OTHER_MANAGER_ID,
    create_record,
    create_record_row,
)

# ============================================
# Field mapping
# ============================================


def test_record_to_row_uses_column_names_and_camel_json():
    record = create_record(
        with_resume=True,
        ai_summary="good",
        acknowledgements={"s-intro-notice": Acknowledgement(consent=True, notices=[True] * 3)},
    )

    row = record_to_row(record)

    assert row["ai_summary"] == "good"
    assert row["created_at"] == record.created_at
    assert row["user_id"] == MANAGER_ID
    assert row["basic_info"]["interviewType"] == "STANDARD"
    assert row["basic_info"]["hasSushiExperience"] is False
    assert row["resume"] == {"fileName": "resume.pdf", "fileData": record.resume.file_data}
    assert row["acknowledgements"]["s-intro-notice"] == {
        "consent": True,
        "notices": [True, True, True],
    }


def test_row_to_record_round_trips_record():
    record = create_record(with_resume=True, answers={"s-q-intro-1": "hi"})
    assert row_to_record(record_to_row(record)) == record


def test_row_to_record_accepts_timestamp_created_at():
    row = create_record_row(created_at=datetime(2024, 5, 1, tzinfo=UTC))
    assert row_to_record(row).created_at == 1_714_521_600_000


def test_split_legacy_flags_lifts_notice_and_consent_keys():
    answers = {
        "s-q-intro-1": "hello",
        "notice-s-intro-notice-0": "true",
        "notice-s-intro-notice-2": "true",
        "consent-s-intro-notice": "true",
        "consent-s-closing-policy": "false",
    }

    cleaned, acks = split_legacy_flags(answers)

    assert cleaned == {"s-q-intro-1": "hello"}
    assert acks["s-intro-notice"] == Acknowledgement(consent=True, notices=[True, False, True])
    assert acks["s-closing-policy"] == Acknowledgement(consent=False, notices=[])


def test_row_to_record_prefers_structured_acknowledgements():
    row = create_record_row(
        answers={"notice-s-intro-notice-0": "true", "s-q-intro-1": "hi"},
        acknowledgements={"s-intro-notice": {"consent": False, "notices": [False, True, False]}},
    )

    record = row_to_record(row)

    assert record.answers == {"s-q-intro-1": "hi"}
    assert record.acknowledgements["s-intro-notice"].notices == [False, True, False]


# ============================================
# In-memory store
# ============================================


@pytest.mark.asyncio
async def test_memory_store_scopes_managers(manager, other_manager, admin):
    mine = create_record("mine", user_id=MANAGER_ID, created_at=1)
    theirs = create_record("theirs", user_id=OTHER_MANAGER_ID, created_at=2)
    store = InMemoryRecordStore([mine, theirs])

    assert [r.id for r in await store.list(manager)] == ["mine"]
    assert await store.get(manager, "theirs") is None
    assert await store.delete(manager, "theirs") is False
    assert [r.id for r in await store.list(admin)] == ["theirs", "mine"]


@pytest.mark.asyncio
async def test_memory_store_upsert_sets_owner_and_keeps_created_at(manager):
    store = InMemoryRecordStore()

    first = await store.upsert(manager, create_record(user_id=None, created_at=100))
    second = await store.upsert(
        manager, create_record(user_id=None, created_at=999, name="김민준")
    )

    assert first.user_id == MANAGER_ID
    assert second.created_at == 100
    assert second.basic_info.name == "김민준"
    assert len(store.records) == 1


@pytest.mark.asyncio
async def test_memory_store_rejects_overwriting_foreign_record(manager):
    store = InMemoryRecordStore([create_record(user_id=OTHER_MANAGER_ID)])

    with pytest.raises(PermissionDeniedError):
        await store.upsert(manager, create_record(user_id=None))


@pytest.mark.asyncio
async def test_memory_store_admin_can_delete_any(admin):
    store = InMemoryRecordStore([create_record(user_id=OTHER_MANAGER_ID)])

    assert await store.delete(admin, "rec-1") is True
    assert store.records == {}


# ============================================
# Postgres store
# ============================================


@pytest.mark.asyncio
async def test_postgres_list_filters_by_user_for_managers(manager):
    with patch("interview_mate.services.records.db") as mock_db:
        mock_db.fetch = AsyncMock(return_value=[create_record_row()])

        records = await PostgresRecordStore().list(manager)

    query, user_id = mock_db.fetch.call_args.args
    assert "WHERE user_id = $1" in query
    assert "ORDER BY created_at DESC" in query
    assert user_id == MANAGER_ID
    assert records[0].id == "rec-1"


@pytest.mark.asyncio
async def test_postgres_list_is_unscoped_for_admins(admin):
    with patch("interview_mate.services.records.db") as mock_db:
        mock_db.fetch = AsyncMock(return_value=[])

        await PostgresRecordStore().list(admin)

    args = mock_db.fetch.call_args.args
    assert len(args) == 1
    assert "WHERE" not in args[0]


@pytest.mark.asyncio
async def test_postgres_get_missing_returns_none(manager):
    with patch("interview_mate.services.records.db") as mock_db:
        mock_db.fetchrow = AsyncMock(return_value=None)

        assert await PostgresRecordStore().get(manager, "missing") is None


@pytest.mark.asyncio
async def test_postgres_upsert_guards_manager_writes(manager):
    record = create_record(user_id=None, created_at=555)

    with patch("interview_mate.services.records.db") as mock_db:
        mock_db.fetchrow = AsyncMock(
            return_value={"user_id": MANAGER_ID, "created_at": 100}
        )

        stored = await PostgresRecordStore().upsert(manager, record)

    query, *args = mock_db.fetchrow.call_args.args
    assert "ON CONFLICT (id) DO UPDATE" in query
    assert "WHERE interview_records.user_id = $9" in query
    assert args[0] == record.id
    assert args[1] == MANAGER_ID
    assert args[-1] == MANAGER_ID
    assert stored.created_at == 100
    assert stored.user_id == MANAGER_ID


@pytest.mark.asyncio
async def test_postgres_upsert_foreign_row_is_denied(manager):
    with patch("interview_mate.services.records.db") as mock_db:
        mock_db.fetchrow = AsyncMock(return_value=None)

        with pytest.raises(PermissionDeniedError):
            await PostgresRecordStore().upsert(manager, create_record(user_id=None))


@pytest.mark.asyncio
async def test_postgres_delete_reports_result(manager):
    with patch("interview_mate.services.records.db") as mock_db:
        mock_db.fetchval = AsyncMock(side_effect=["rec-1", None])
        store = PostgresRecordStore()

        assert await store.delete(manager, "rec-1") is True
        assert await store.delete(manager, "rec-1") is False


@pytest.mark.asyncio
async def test_postgres_errors_become_database_errors(manager):
    with patch("interview_mate.services.records.db") as mock_db:
        mock_db.fetch = AsyncMock(side_effect=asyncpg.PostgresError("connection lost"))

        with pytest.raises(DatabaseError) as exc_info:
            await PostgresRecordStore().list(manager)

    assert "connection lost" in exc_info.value.message
