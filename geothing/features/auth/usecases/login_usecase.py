"""Use case for the development login against the configured admin account."""

import logging
from typing import Protocol

from fastapi import HTTPException, status

from geothing.core.schemas import AuthenticatedUser
from geothing.features.auth.dtos import LoginResponse

logger = logging.getLogger(__name__)


class PasswordVerifier(Protocol):
    """Protocol for password verification operations."""

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        ...


class TokenCreator(Protocol):
    """Protocol for JWT token creation operations."""

    expire_minutes: int

    def create_access_token(self, user: AuthenticatedUser) -> str:
        """Create an access token for the user."""
        ...


class AdminAccount(Protocol):
    """The single account the login endpoint knows about."""

    admin_user: str
    admin_email: str
    admin_id: int


class LoginUseCaseImpl:
    """Implementation of the login use case."""

    def __init__(
        self,
        password_verifier: PasswordVerifier,
        token_creator: TokenCreator,
        admin: AdminAccount,
        admin_password_hash: str,
    ):
        """Initialize the use case with dependencies.

        Args:
            password_verifier: Service for verifying passwords
            token_creator: Service for creating access tokens
            admin: Settings holding the admin login, email and id
            admin_password_hash: Hash of the admin password
        """
        self.password_verifier = password_verifier
        self.token_creator = token_creator
        self.admin = admin
        self.admin_password_hash = admin_password_hash

    async def execute(self, username: str, password: str) -> LoginResponse:
        """Authenticate the admin account and return a bearer token.

        Raises:
            HTTPException: 401 when the credentials do not match
        """
        if username.strip() != self.admin.admin_user or not self.password_verifier.verify(
            password, self.admin_password_hash
        ):
            logger.warning("login refused", extra={"login": username})
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Incorrect username or password",
                headers={"WWW-Authenticate": "Bearer"},
            )

        user = AuthenticatedUser(
            user_id=self.admin.admin_id,
            is_admin=True,
            login=self.admin.admin_user,
            email=self.admin.admin_email,
            name="Administrator",
        )
        token = self.token_creator.create_access_token(user)
        logger.info("login successful", extra={"login": username})
        return LoginResponse(
            access_token=token, expires_in=self.token_creator.expire_minutes * 60
        )
