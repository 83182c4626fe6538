"""Tests for configuration settings (interview_mate/core/config.py)."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from interview_mate.core.config import Settings

REQUIRED = {
    "database_url": "postgresql://localhost/test",
    "supabase_url": "https://abc.supabase.co",
    "supabase_anon_key": "anon",
}


def test_defaults():
    settings = Settings(**REQUIRED)

    assert settings.gemini_model == "gemini-3-flash-preview"
    assert settings.form_session_ttl_minutes == 240
    assert settings.analyze_rate_limit == "10/minute"


def test_supabase_url_is_normalized():
    settings = Settings(**{**REQUIRED, "supabase_url": "  https://abc.supabase.co/ "})
    assert settings.supabase_url == "https://abc.supabase.co"


def test_empty_supabase_url_raises_error():
    with pytest.raises(ValidationError) as exc_info:
        Settings(**{**REQUIRED, "supabase_url": "   "})

    assert "SUPABASE_URL is required" in str(exc_info.value)


@pytest.mark.parametrize("ttl", [0, -5])
def test_non_positive_session_ttl_raises_error(ttl):
    with pytest.raises(ValidationError):
        Settings(**{**REQUIRED, "form_session_ttl_minutes": ttl})


def test_frontend_urls_split_on_commas():
    settings = Settings(**{**REQUIRED, "frontend_url": "http://a.test, https://b.test"})
    assert settings.frontend_urls == ["http://a.test", "https://b.test"]
