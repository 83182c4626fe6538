"""Current-user endpoint for the session header."""

from fastapi import APIRouter

from interview_mate.api.deps import Auth
from interview_mate.models.api import MeResponse

router = APIRouter(tags=["session"])


@router.get("/me", response_model=MeResponse)
async def get_me(auth: Auth) -> MeResponse:
    """Signed-in user, shown by the local part of the email address."""
    display_name = auth.email.split("@", 1)[0] if auth.email else auth.user_id
    return MeResponse(
        user_id=auth.user_id,
        email=auth.email,
        display_name=display_name,
        role=auth.role,
    )
