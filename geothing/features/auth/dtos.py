"""Login DTOs."""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """Credentials posted to the login endpoint."""

    username: str
    password: str


class LoginResponse(BaseModel):
    """Bearer token issued on a successful login."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int
