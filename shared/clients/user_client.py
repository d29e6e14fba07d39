"""User Service gRPC client.

The User service owns accounts and token issuance for the wider platform.
The edge server uses it as a remote token validator; peers use it for
login, registration and profile lookups.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from shared.generated import user_pb2, user_pb2_grpc

from .base import ClientConfig, ClientError, GrpcClient

logger = logging.getLogger(__name__)

DEFAULT_USER_SERVICE_ADDRESS = "localhost:50052"


class UserServiceError(ClientError):
    """The User service answered but rejected the request."""


@dataclass
class UserProfile:
    """User profile as returned by the User service."""

    user_id: str
    email: str
    first_name: str
    last_name: str
    is_active: bool
    email_verified: bool


class UserServiceClient(GrpcClient):
    """Client for ``hubinvest.user.UserService``."""

    service_label = "UserService"
    stub_factory = user_pb2_grpc.UserServiceStub

    def __init__(self, config: Optional[ClientConfig] = None) -> None:
        super().__init__(config or ClientConfig(server_address=DEFAULT_USER_SERVICE_ADDRESS))

    async def validate_token(self, token: str) -> tuple[str, str]:
        """Validate a token remotely.

        Returns:
            Tuple of (user_id, email).

        Raises:
            ValueError: If the token is empty.
            UserServiceError: If the User service reports the token invalid.
            ClientError: On transport failure.
        """
        if not token:
            raise ValueError("token cannot be empty")

        response = await self._invoke(
            "UserValidateToken", user_pb2.UserValidateTokenRequest(token=token)
        )
        if not response.valid:
            raise UserServiceError(f"invalid token: {response.error_message}")
        return response.user_id, response.email

    async def login(self, email: str, password: str) -> tuple[str, str, str]:
        """Authenticate a user.

        Returns:
            Tuple of (token, user_id, email).
        """
        if not email or not password:
            raise ValueError("email and password are required")

        response = await self._invoke(
            "UserLogin", user_pb2.UserLoginRequest(email=email, password=password)
        )
        if not response.success:
            raise UserServiceError(f"login failed: {response.error_message}")
        return response.token, response.user_id, response.email

    async def register_user(self, email: str, password: str, first_name: str, last_name: str) -> str:
        """Create a user and return its id."""
        if not all((email, password, first_name, last_name)):
            raise ValueError("all fields are required")

        response = await self._invoke(
            "RegisterUser",
            user_pb2.RegisterUserRequest(
                email=email,
                password=password,
                first_name=first_name,
                last_name=last_name,
            ),
        )
        if not response.success:
            raise UserServiceError(f"registration failed: {response.error_message}")
        logger.info(f"Registered user {response.user_id}")
        return response.user_id

    async def get_user_profile(self, user_id: str) -> UserProfile:
        if not user_id:
            raise ValueError("user ID is required")

        response = await self._invoke(
            "GetUserProfile", user_pb2.GetUserProfileRequest(user_id=user_id)
        )
        if not response.success:
            raise UserServiceError(f"failed to get profile: {response.error_message}")
        return UserProfile(
            user_id=response.user_id,
            email=response.email,
            first_name=response.first_name,
            last_name=response.last_name,
            is_active=response.is_active,
            email_verified=response.email_verified,
        )

    async def health_check(self) -> tuple[bool, str]:
        """Returns (healthy, version) of the User service."""
        response = await self._invoke("HealthCheck", user_pb2.HealthCheckRequest())
        return response.healthy, response.version
