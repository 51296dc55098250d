"""Login and token status routes."""

from functools import lru_cache
from typing import Any, Protocol

from fastapi import APIRouter, Depends

from geothing.core.authentication import (
    JwtChecker,
    get_current_user,
    get_jwt_checker,
    get_password_hash,
    verify_password,
)
from geothing.core.schemas import AuthenticatedUser
from geothing.core.settings import get_settings
from geothing.features.auth.dtos import LoginRequest, LoginResponse
from geothing.features.auth.usecases.login_usecase import LoginUseCaseImpl

# Public routes, mounted at the root of the application.
router = APIRouter(tags=["auth"])

# Routes mounted under the secured API prefix.
secured_router = APIRouter(tags=["auth"])


class PasswordVerifierImpl:
    """Wrapper for password verification to match protocol."""

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        return verify_password(plain_password, hashed_password)


class LoginUseCase(Protocol):
    """Protocol for the login use case."""

    async def execute(self, username: str, password: str) -> LoginResponse:
        """Authenticate the user and return a token."""
        ...


@lru_cache
def _admin_password_hash(password: str) -> str:
    return get_password_hash(password)


async def get_login_use_case(
    jwt_checker: JwtChecker = Depends(get_jwt_checker),
) -> LoginUseCase:
    """Dependency injection for the login use case."""
    settings = get_settings()
    return LoginUseCaseImpl(
        password_verifier=PasswordVerifierImpl(),
        token_creator=jwt_checker,
        admin=settings,
        admin_password_hash=_admin_password_hash(settings.admin_password),
    )


@router.post("/login", response_model=LoginResponse)
async def login_for_access_token(
    login_data: LoginRequest,
    use_case: LoginUseCase = Depends(get_login_use_case),
) -> LoginResponse:
    """Authenticate the admin account and return a bearer token."""
    return await use_case.execute(login_data.username, login_data.password)


@secured_router.get("/status")
async def token_status(
    user: AuthenticatedUser = Depends(get_current_user),
) -> dict[str, Any]:
    """Return the claims of the bearer token of the caller."""
    return {
        "user_id": user.user_id,
        "is_admin": user.is_admin,
        "login": user.login,
        "email": user.email,
        "name": user.name,
        "claims": user.claims,
    }
