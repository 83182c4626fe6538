"""Tests for operator queries (interview_mate/services/maintenance.py)."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from interview_mate.models.interview import InterviewType
from interview_mate.services.maintenance import (
    count_records,
    list_record_names,
    set_interview_type,
)


@pytest.mark.asyncio
async def test_count_records():
    with patch("interview_mate.services.maintenance.db") as mock_db:
        mock_db.fetchval = AsyncMock(return_value=12)

        assert await count_records() == 12


@pytest.mark.asyncio
async def test_list_record_names():
    rows = [{"id": "rec-1", "name": "김민수", "created_at": 1_714_521_600_000}]

    with patch("interview_mate.services.maintenance.db") as mock_db:
        mock_db.fetch = AsyncMock(return_value=rows)

        assert await list_record_names() == rows


@pytest.mark.asyncio
async def test_set_interview_type_per_name():
    with patch("interview_mate.services.maintenance.db") as mock_db:
        mock_db.fetch = AsyncMock(side_effect=[[{"id": "a"}, {"id": "b"}], []])

        result = await set_interview_type(["이재원", "오동욱"], InterviewType.DEPTH)

    assert result == {"이재원": 2, "오동욱": 0}
    query, name, interview_type = mock_db.fetch.call_args_list[0].args
    assert "jsonb_set(basic_info, '{interviewType}'" in query
    assert name == "이재원"
    assert interview_type == "DEPTH"
