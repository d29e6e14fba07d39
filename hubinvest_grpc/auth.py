"""JWT token handling and token validators for the gRPC edge.

``JWTTokenService`` mints and verifies HS256 tokens carrying the claims
``username``, ``userId``, ``exp`` and ``iat``. The validators adapt either
that service or the remote User service to the interceptor's
``validate(token) -> user_id`` contract.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from shared.clients.user_client import UserServiceClient

from .errors import InvalidTokenError
from .models import TokenClaims

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class JWTTokenService:
    """Creates and verifies HS256 signed access tokens.

    Args:
        secret_key: Shared HMAC secret.
        expire_minutes: Access token lifetime in minutes.

    Raises:
        ValueError: If the secret key is empty.
    """

    algorithm = "HS256"

    def __init__(self, secret_key: str, expire_minutes: int = 10) -> None:
        if not secret_key:
            raise ValueError("HS256 requires a non-empty secret key")
        self._secret_key = secret_key
        self.access_expire = timedelta(minutes=expire_minutes)

    def create_token(self, email: str, user_id: str) -> str:
        """Create a signed access token for ``user_id``.

        Raises:
            ValueError: If email or user_id is empty.
        """
        if not email or not user_id:
            raise ValueError("email and user ID are required to create a token")

        now = datetime.now(timezone.utc)
        claims: dict[str, Any] = {
            "username": email,
            "userId": user_id,
            "exp": now + self.access_expire,
            "iat": now,
        }
        token = jwt.encode(claims, self._secret_key, algorithm=self.algorithm)
        logger.debug(f"Created access token for user: {user_id}")
        return token

    def verify_token(self, token: str) -> TokenClaims:
        """Verify a token and return its claims.

        A leading ``Bearer `` is ignored.

        Raises:
            InvalidTokenError: If the token is empty, expired, badly signed
                or carries no user id.
        """
        if token.startswith(BEARER_PREFIX):
            token = token[len(BEARER_PREFIX):]
        if not token:
            raise InvalidTokenError("token is empty")

        try:
            claims = jwt.decode(token, self._secret_key, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError as e:
            logger.debug("Token validation failed: expired")
            raise InvalidTokenError("token has expired") from e
        except jwt.InvalidTokenError as e:
            logger.debug(f"Token validation failed: {e}")
            raise InvalidTokenError(str(e)) from e

        user_id = claims.get("userId")
        if not user_id:
            raise InvalidTokenError("token carries no userId claim")

        return TokenClaims(
            user_id=str(user_id),
            email=claims.get("username", ""),
            expires_at=int(claims.get("exp", 0)),
        )

    def get_access_token_expire_seconds(self) -> int:
        return int(self.access_expire.total_seconds())


class LocalTokenValidator:
    """Validates tokens with an in-process token service."""

    def __init__(self, token_service: Any) -> None:
        self.token_service = token_service

    async def validate(self, token: str) -> str:
        return self.token_service.verify_token(token).user_id


class UserServiceTokenValidator:
    """Validates tokens by asking the User service.

    The client is dialled lazily on the first validation.
    """

    def __init__(self, user_client: UserServiceClient) -> None:
        self.user_client = user_client

    async def validate(self, token: str) -> str:
        user_id, _ = await self.user_client.validate_token(token)
        return user_id
