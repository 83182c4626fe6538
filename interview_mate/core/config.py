"""Settings for database, Supabase, Gemini and form sessions, read from the environment."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(env_file=".env")

    # Database
    database_url: str

    # Supabase Auth
    supabase_url: str
    supabase_anon_key: str

    # Gemini (AI summary)
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-3-flash-preview"
    gemini_timeout_seconds: int = 60

    # Application
    log_level: str = "INFO"
    expose_error_details: bool = False

    # Frontend (for CORS)
    frontend_url: str = "http://localhost:5173"

    # Form sessions
    form_session_ttl_minutes: int = 240
    form_session_purge_interval_minutes: int = 15

    # Rate limit for AI analysis requests
    analyze_rate_limit: str = "10/minute"

    @property
    def frontend_urls(self) -> list[str]:
        """Parse frontend URLs from comma-separated env var."""
        return [url.strip() for url in self.frontend_url.split(",")]

    @field_validator("supabase_url")
    @classmethod
    def normalize_supabase_url(cls, v: str) -> str:
        """Strip whitespace and trailing slash from the Supabase project URL."""
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError(
                "SUPABASE_URL is required. Find it in Supabase: Project Settings > API"
            )
        return v

    @field_validator("form_session_ttl_minutes")
    @classmethod
    def validate_session_ttl(cls, v: int) -> int:
        """Session TTL must be positive."""
        if v <= 0:
            raise ValueError("FORM_SESSION_TTL_MINUTES must be greater than zero")
        return v


settings = Settings()
