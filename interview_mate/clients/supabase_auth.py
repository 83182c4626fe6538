"""Supabase Auth client for access-token validation."""

from __future__ import annotations

from typing import Any

import aiohttp
from structlog import get_logger

from interview_mate.core.config import settings

logger = get_logger()


class SupabaseAuthClient:
    """HTTP client for the Supabase Auth REST API."""

    def __init__(self) -> None:
        """Initialize client with project URL and anon key from settings."""
        self.base_url = f"{settings.supabase_url}/auth/v1"
        self.anon_key = settings.supabase_anon_key
        self.timeout = aiohttp.ClientTimeout(total=10)

    async def get_user(self, access_token: str) -> dict[str, Any] | None:
        """
        Fetch the user owning an access token.

        Args:
            access_token: Bearer token issued by Supabase Auth

        Returns:
            User payload, or None if the token is rejected

        Raises:
            aiohttp.ClientError: On transport failure or unexpected status
        """
        headers = {
            "apikey": self.anon_key,
            "Authorization": f"Bearer {access_token}",
        }

        async with aiohttp.ClientSession(timeout=self.timeout) as session:
            async with session.get(f"{self.base_url}/user", headers=headers) as response:
                if response.status in (401, 403):
                    logger.info("supabase_token_rejected", status=response.status)
                    return None

                response.raise_for_status()
                user: dict[str, Any] = await response.json()
                return user


# Module-level singleton
supabase_auth = SupabaseAuthClient()
