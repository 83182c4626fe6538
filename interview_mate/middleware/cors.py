"""CORS configuration for the browser front end."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from interview_mate.core.config import settings


def setup_cors(app: FastAPI) -> None:
    """
    Allow the configured front-end origins to call the API.

    The client sends its Supabase access token in the Authorization header.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.frontend_urls,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )
