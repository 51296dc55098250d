from typing import Any

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """Represents the caller of a request, built once from the JWT claims."""

    user_id: int
    is_admin: bool = False
    login: str | None = None
    email: str | None = None
    name: str | None = None
    claims: dict[str, Any] = Field(default_factory=dict)
