"""
AuthService servicer.

Implements the AuthService gRPC interface with:
- Login: Check credentials with the login use case and mint a bearer token
- ValidateToken: Verify a bearer token with the local token service

Both methods are public (no bearer token required) and report every
failure inside the response envelope.
"""

import logging

import grpc
from shared.generated import auth_pb2, auth_pb2_grpc
from shared.utils.metrics import track_grpc_call

from ..container import LoginUseCase, TokenService
from ..envelope import Outcome, Reply, api_response, deliver, with_error

logger = logging.getLogger(__name__)


class AuthServicer(auth_pb2_grpc.AuthServiceServicer):
    """
    gRPC servicer implementing the AuthService interface.

    Credential checks are delegated to the login use case; token minting
    and verification to the token service.
    """

    def __init__(self, login_usecase: LoginUseCase, token_service: TokenService) -> None:
        """
        Initialize the servicer with required dependencies.

        Args:
            login_usecase: Resolves an email/password pair to a user.
            token_service: Creates and verifies bearer tokens.
        """
        self.login_usecase = login_usecase
        self.token_service = token_service

    @track_grpc_call(service="auth", method="Login")
    async def Login(
        self,
        request: auth_pb2.LoginRequest,
        context: grpc.aio.ServicerContext,
    ) -> auth_pb2.LoginResponse:
        """
        Authenticate user credentials and return a bearer token.

        Args:
            request: The gRPC request containing email and password.
            context: The gRPC servicer context.

        Returns:
            LoginResponse with token and user info if successful, a failed
            envelope otherwise.
        """
        return await deliver(await self._login(request), context)

    @track_grpc_call(service="auth", method="ValidateToken")
    async def ValidateToken(
        self,
        request: auth_pb2.ValidateTokenRequest,
        context: grpc.aio.ServicerContext,
    ) -> auth_pb2.ValidateTokenResponse:
        """Verify a bearer token and report the user it belongs to."""
        return await deliver(await self._validate_token(request), context)

    async def _login(self, request: auth_pb2.LoginRequest) -> Outcome[auth_pb2.LoginResponse]:
        if not request.email or not request.password:
            logger.debug("Login failed: email and password are required")
            return Reply(
                auth_pb2.LoginResponse(
                    api_response=api_response(
                        grpc.StatusCode.INVALID_ARGUMENT, "Email and password are required"
                    )
                )
            )

        try:
            user = await self.login_usecase.execute(request.email, request.password)
        except (ConnectionError, TimeoutError) as e:
            logger.error(f"Login failed: authentication backend unavailable: {e}")
            return Reply(
                auth_pb2.LoginResponse(
                    api_response=api_response(
                        grpc.StatusCode.UNAVAILABLE,
                        with_error("Authentication service unavailable", e),
                    )
                )
            )
        except Exception as e:
            logger.info(f"Login failed: {e}")
            return Reply(
                auth_pb2.LoginResponse(
                    api_response=api_response(grpc.StatusCode.UNAUTHENTICATED, "Invalid credentials")
                )
            )

        try:
            token = self.token_service.create_token(user.email, user.id)
        except Exception as e:
            logger.error(f"Token creation failed for user {user.id}: {e}", exc_info=True)
            return Reply(
                auth_pb2.LoginResponse(
                    api_response=api_response(grpc.StatusCode.INTERNAL, "Failed to generate token")
                )
            )

        logger.info(f"Login successful for user: {user.id}")
        return Reply(
            auth_pb2.LoginResponse(
                api_response=api_response(grpc.StatusCode.OK, "Login successful"),
                token=token,
                user_info=auth_pb2.UserInfo(
                    user_id=user.id,
                    email=user.email,
                    first_name=getattr(user, "first_name", ""),
                    last_name=getattr(user, "last_name", ""),
                ),
            )
        )

    async def _validate_token(
        self, request: auth_pb2.ValidateTokenRequest
    ) -> Outcome[auth_pb2.ValidateTokenResponse]:
        if not request.token:
            return Reply(
                auth_pb2.ValidateTokenResponse(
                    api_response=api_response(grpc.StatusCode.INVALID_ARGUMENT, "Token is required"),
                    is_valid=False,
                )
            )

        try:
            claims = self.token_service.verify_token(request.token)
        except Exception as e:
            logger.debug(f"Token validation failed: {e}")
            return Reply(
                auth_pb2.ValidateTokenResponse(
                    api_response=api_response(grpc.StatusCode.UNAUTHENTICATED, "Invalid token"),
                    is_valid=False,
                )
            )

        return Reply(
            auth_pb2.ValidateTokenResponse(
                api_response=api_response(grpc.StatusCode.OK, "Token is valid"),
                is_valid=True,
                user_info=auth_pb2.UserInfo(user_id=claims.user_id),
                expires_at=claims.expires_at,
            )
        )
