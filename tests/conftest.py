"""Pytest configuration for tests."""

import os
from pathlib import Path

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient

# Load .env.test file if it exists
env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path)

# Set test environment variables before any imports (only if not already set)
os.environ.setdefault("DATABASE_URL", "postgresql://localhost:5432/interview_mate_test")
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test_anon_key")
os.environ.setdefault("LOG_LEVEL", "INFO")

from tests.fixtures.factories import (  # noqa: E402
    ADMIN_ID,
    MANAGER_ID,
    OTHER_MANAGER_ID,
    create_auth_context,
)


@pytest.fixture
def manager():
    return create_auth_context(MANAGER_ID, email="manager@elleo.kr")


@pytest.fixture
def other_manager():
    return create_auth_context(OTHER_MANAGER_ID, email="other@elleo.kr")


@pytest.fixture
def admin():
    from interview_mate.models.interview import Role

    return create_auth_context(ADMIN_ID, email="admin@elleo.kr", role=Role.ADMIN)


@pytest.fixture
def store():
    """Empty in-memory record store."""
    from interview_mate.services.records import InMemoryRecordStore

    return InMemoryRecordStore()


@pytest.fixture
def summarizer():
    """Summary requestor stand-in returning a fixed markdown summary."""
    from unittest.mock import AsyncMock

    return AsyncMock(return_value="### 핵심 강점\n* **성실함**이 돋보임\n---\n종합: 추천")


@pytest.fixture
def sessions(store, summarizer):
    from interview_mate.services.form_sessions import FormSessionManager

    return FormSessionManager(store, summarizer=summarizer)


@pytest.fixture
def auth_holder(manager):
    """Mutable holder for the caller identity used by the HTTP client."""
    return {"auth": manager}


@pytest_asyncio.fixture
async def http_client(store, sessions, auth_holder):
    """
    HTTP client against the app with auth, store and form sessions overridden.

    Switch users by assigning auth_holder["auth"].
    """
    from interview_mate.api.deps import get_auth_context, get_form_sessions, get_record_store
    from interview_mate.main import app

    app.dependency_overrides[get_auth_context] = lambda: auth_holder["auth"]
    app.dependency_overrides[get_record_store] = lambda: store
    app.dependency_overrides[get_form_sessions] = lambda: sessions

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests (fast)")
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (medium speed)"
    )
