"""Auth Service gRPC client."""

from shared.generated import auth_pb2, auth_pb2_grpc

from .base import GrpcClient


class AuthClient(GrpcClient):
    """Client for ``hubinvest.auth.AuthService``."""

    service_label = "Auth"
    stub_factory = auth_pb2_grpc.AuthServiceStub

    async def login(self, email: str, password: str) -> auth_pb2.LoginResponse:
        """Exchange credentials for a token.

        Domain failures (bad credentials, missing fields) come back in the
        response envelope; only transport failures raise.
        """
        request = auth_pb2.LoginRequest(email=email, password=password)
        return await self._invoke("Login", request)

    async def validate_token(self, token: str) -> auth_pb2.ValidateTokenResponse:
        request = auth_pb2.ValidateTokenRequest(token=token)
        return await self._invoke("ValidateToken", request)
