"""Authenticated caller context."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from interview_mate.models.interview import Role


class AuthContext(BaseModel):
    """Identity and role of the user making a request."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    email: str | None = None
    role: Role = Role.MANAGER

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    def can_access(self, owner_id: str | None) -> bool:
        """Admins access every record; managers only their own."""
        return self.is_admin or owner_id == self.user_id
