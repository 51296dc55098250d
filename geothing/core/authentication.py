"""Authentication utilities for JWT token validation and user retrieval."""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext

from geothing.core.schemas import AuthenticatedUser
from geothing.core.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Password hashing - using argon2 as bcrypt has issues.
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

# JWT token scheme
security = HTTPBearer(auto_error=False)


def _unauthenticated(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


class JwtChecker:
    """Issues and validates the bearer tokens of the API."""

    def __init__(self, secret_key: str, algorithm: str, expire_minutes: int):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    @classmethod
    def from_settings(cls, settings: Settings) -> "JwtChecker":
        return cls(
            secret_key=settings.secret_key,
            algorithm=settings.algorithm,
            expire_minutes=settings.access_token_expire_minutes,
        )

    def create_access_token(
        self, user: AuthenticatedUser, expires_delta: timedelta | None = None
    ) -> str:
        """Create a JWT access token carrying the user id and admin flag."""
        expire = datetime.now(UTC) + (
            expires_delta or timedelta(minutes=self.expire_minutes)
        )
        to_encode: dict[str, Any] = {
            "sub": str(user.user_id),
            "is_admin": user.is_admin,
            "login": user.login,
            "email": user.email,
            "name": user.name,
            "exp": expire,
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def parse_token(self, token: str) -> AuthenticatedUser:
        """Verify a JWT token and build the authenticated user from its claims.

        Raises:
            HTTPException 401 if the token is invalid or lacks a user id
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.warning("invalid JWT token: %s", e)
            raise _unauthenticated("Could not validate credentials")

        user_id = payload.get("sub")
        if user_id is None:
            raise _unauthenticated("Token missing required user information")

        try:
            return AuthenticatedUser(
                user_id=int(user_id),
                is_admin=bool(payload.get("is_admin", False)),
                login=payload.get("login"),
                email=payload.get("email"),
                name=payload.get("name"),
                claims=payload,
            )
        except ValueError:
            raise _unauthenticated("Invalid user id format in token")


def get_jwt_checker() -> JwtChecker:
    """Dependency providing the JWT checker built from settings."""
    return JwtChecker.from_settings(get_settings())


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    jwt_checker: JwtChecker = Depends(get_jwt_checker),
) -> AuthenticatedUser:
    """Get current user from the bearer token of the request."""
    if credentials is None:
        raise _unauthenticated("Not authenticated")
    return jwt_checker.parse_token(credentials.credentials)
