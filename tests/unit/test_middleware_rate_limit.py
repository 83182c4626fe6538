"""Tests for rate limiting."""

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient
from slowapi.errors import RateLimitExceeded

from interview_mate.middleware.rate_limit import (
    get_limiter,
    limiter,
    rate_limit_exceeded_handler,
    setup_rate_limiting,
)


def test_setup_attaches_shared_limiter():
    app = FastAPI()

    returned = setup_rate_limiting(app)

    assert returned is limiter
    assert app.state.limiter is limiter
    assert RateLimitExceeded in app.exception_handlers


@pytest.mark.asyncio
async def test_exceeded_limit_returns_error_envelope():
    app = FastAPI()
    local_limiter = get_limiter()
    app.state.limiter = local_limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    @app.post("/analyze")
    @local_limiter.limit("1/minute")
    async def analyze(request: Request):
        return {"status": "ok"}

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        first = await client.post("/analyze")
        second = await client.post("/analyze")

    assert first.status_code == 200
    assert second.status_code == 429
    assert second.json()["error"]["code"] == "RATE_LIMITED"
