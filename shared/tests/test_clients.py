"""
Unit tests for the outbound gRPC clients.

Channels are patched out; stubs are MagicMocks with AsyncMock methods.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import grpc
import pytest

from shared.clients import (
    AuthClient,
    ClientConfig,
    ClientError,
    OrderClient,
    PositionClient,
    UserServiceClient,
    UserServiceError,
)
from shared.generated import user_pb2


class FakeRpcError(grpc.RpcError):
    def __init__(self, code: grpc.StatusCode, details: str) -> None:
        self._code = code
        self._details = details

    def code(self) -> grpc.StatusCode:
        return self._code

    def details(self) -> str:
        return self._details


def _connected(client, **rpcs):
    """Attach a fake channel and stub to ``client``."""
    client.channel = AsyncMock()
    client.stub = MagicMock()
    for name, rpc in rpcs.items():
        setattr(client.stub, name, rpc)
    return client


class TestClientConfig:
    def test_defaults(self) -> None:
        config = ClientConfig()

        assert config.server_address == "localhost:50051"
        assert config.timeout == 30.0

    def test_immutable(self) -> None:
        with pytest.raises(AttributeError):
            ClientConfig().timeout = 1.0  # type: ignore[misc]


class TestConnection:
    @pytest.mark.asyncio
    async def test_connect_is_idempotent(self) -> None:
        client = OrderClient(ClientConfig(server_address="edge:50051"))

        with patch("shared.clients.base.grpc.aio.insecure_channel") as dial:
            await client.connect()
            await client.connect()

        dial.assert_called_once()
        assert dial.call_args.args[0] == "edge:50051"
        assert client.stub is not None

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self) -> None:
        client = _connected(OrderClient())
        channel = client.channel

        await client.close()
        await client.close()

        channel.close.assert_awaited_once()
        assert client.channel is None
        assert client.stub is None

    @pytest.mark.asyncio
    async def test_call_after_close_redials(self) -> None:
        client = _connected(OrderClient())
        await client.close()

        with patch("shared.clients.base.grpc.aio.insecure_channel") as dial:
            dial.return_value = MagicMock()
            with patch.object(OrderClient, "stub_factory") as stub_factory:
                stub_factory.return_value.CancelOrder = AsyncMock(return_value="response")
                assert await client.cancel("TKN", "ord-1", "u-1") == "response"

        dial.assert_called_once()


class TestInvoke:
    @pytest.mark.asyncio
    async def test_order_call_attaches_bearer_and_deadline(self) -> None:
        rpc = AsyncMock(return_value="response")
        client = _connected(OrderClient(ClientConfig(timeout=2.5)), SubmitOrder=rpc)

        await client.submit("TKN", "u-1", "AAPL", "LIMIT", "BUY", 10, price=150.0)

        request = rpc.await_args.args[0]
        assert request.symbol == "AAPL"
        assert request.price == 150.0
        assert rpc.await_args.kwargs["timeout"] == 2.5
        assert rpc.await_args.kwargs["metadata"] == (("authorization", "Bearer TKN"),)

    @pytest.mark.asyncio
    async def test_market_order_leaves_price_unset(self) -> None:
        rpc = AsyncMock()
        client = _connected(OrderClient(), SubmitOrder=rpc)

        await client.submit("TKN", "u-1", "AAPL", "MARKET", "BUY", 1)

        assert not rpc.await_args.args[0].HasField("price")

    @pytest.mark.asyncio
    async def test_empty_token_sends_no_metadata(self) -> None:
        rpc = AsyncMock()
        client = _connected(AuthClient(), Login=rpc)

        await client.login("alice@example.com", "pw")

        assert rpc.await_args.kwargs["metadata"] is None

    @pytest.mark.asyncio
    async def test_rpc_error_wrapped_with_method_name(self) -> None:
        rpc = AsyncMock(side_effect=FakeRpcError(grpc.StatusCode.PERMISSION_DENIED, "access denied"))
        client = _connected(PositionClient(), GetPositions=rpc)

        with pytest.raises(ClientError) as exc_info:
            await client.get_positions("TKN", "u-2")

        assert str(exc_info.value) == "Position.GetPositions failed: access denied"
        assert exc_info.value.code == grpc.StatusCode.PERMISSION_DENIED


class TestUserServiceClient:
    def test_default_address(self) -> None:
        assert UserServiceClient().address == "localhost:50052"

    @pytest.mark.asyncio
    async def test_validate_token(self) -> None:
        rpc = AsyncMock(
            return_value=user_pb2.UserValidateTokenResponse(valid=True, user_id="u-1", email="a@b.c")
        )
        client = _connected(UserServiceClient(), UserValidateToken=rpc)

        assert await client.validate_token("TKN") == ("u-1", "a@b.c")

    @pytest.mark.asyncio
    async def test_validate_token_rejected(self) -> None:
        rpc = AsyncMock(
            return_value=user_pb2.UserValidateTokenResponse(valid=False, error_message="expired")
        )
        client = _connected(UserServiceClient(), UserValidateToken=rpc)

        with pytest.raises(UserServiceError, match="expired"):
            await client.validate_token("TKN")

    @pytest.mark.asyncio
    async def test_validate_empty_token(self) -> None:
        with pytest.raises(ValueError):
            await UserServiceClient().validate_token("")

    @pytest.mark.asyncio
    async def test_get_user_profile(self) -> None:
        rpc = AsyncMock(
            return_value=user_pb2.GetUserProfileResponse(
                success=True,
                user_id="u-1",
                email="alice@example.com",
                first_name="Alice",
                last_name="Smith",
                is_active=True,
                email_verified=False,
            )
        )
        client = _connected(UserServiceClient(), GetUserProfile=rpc)

        profile = await client.get_user_profile("u-1")

        assert profile.first_name == "Alice"
        assert profile.is_active is True
        assert profile.email_verified is False

    @pytest.mark.asyncio
    async def test_login_failure(self) -> None:
        rpc = AsyncMock(return_value=user_pb2.UserLoginResponse(success=False, error_message="locked"))
        client = _connected(UserServiceClient(), UserLogin=rpc)

        with pytest.raises(UserServiceError, match="locked"):
            await client.login("alice@example.com", "pw")

    @pytest.mark.asyncio
    async def test_register_requires_all_fields(self) -> None:
        with pytest.raises(ValueError):
            await UserServiceClient().register_user("alice@example.com", "pw", "", "Smith")

    @pytest.mark.asyncio
    async def test_health_check(self) -> None:
        rpc = AsyncMock(return_value=user_pb2.HealthCheckResponse(healthy=True, version="1.2.0"))
        client = _connected(UserServiceClient(), HealthCheck=rpc)

        assert await client.health_check() == (True, "1.2.0")
