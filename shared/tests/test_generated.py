"""Tests for the protoc-generated wire schemas and service bindings."""

from unittest.mock import MagicMock

import grpc
import pytest

from shared.generated import (
    auth_pb2,
    auth_pb2_grpc,
    common_pb2,
    market_data_pb2,
    order_pb2,
    order_pb2_grpc,
    position_pb2,
    position_pb2_grpc,
    user_pb2,
    user_pb2_grpc,
)


class TestMessages:
    def test_full_names(self) -> None:
        assert common_pb2.APIResponse.DESCRIPTOR.full_name == "hubinvest.common.APIResponse"
        assert order_pb2.SubmitOrderRequest.DESCRIPTOR.full_name == "hubinvest.order.SubmitOrderRequest"
        assert position_pb2.Position.DESCRIPTOR.full_name == "hubinvest.position.Position"

    def test_optional_price_tracks_presence(self) -> None:
        request = order_pb2.SubmitOrderRequest(symbol="AAPL", quantity=1)
        assert not request.HasField("price")

        request.price = 0.0
        assert request.HasField("price")

    def test_envelope_survives_the_wire(self) -> None:
        response = auth_pb2.LoginResponse(
            api_response=common_pb2.APIResponse(success=True, message="Login successful", code=0, timestamp=1),
            token="TKN",
            user_info=auth_pb2.UserInfo(user_id="u-1"),
        )

        decoded = auth_pb2.LoginResponse.FromString(response.SerializeToString())

        assert decoded.api_response.message == "Login successful"
        assert decoded.user_info.user_id == "u-1"

    def test_repeated_positions(self) -> None:
        response = position_pb2.GetPositionsResponse(
            positions=[position_pb2.Position(position_id="pos-AAPL"), position_pb2.Position(position_id="pos-VOO")]
        )

        assert [p.position_id for p in response.positions] == ["pos-AAPL", "pos-VOO"]


class TestServiceBindings:
    @pytest.mark.parametrize(
        "module,service,full_name",
        [
            (auth_pb2, "AuthService", "hubinvest.auth.AuthService"),
            (order_pb2, "OrderService", "hubinvest.order.OrderService"),
            (position_pb2, "PositionService", "hubinvest.position.PositionService"),
            (market_data_pb2, "MarketDataService", "hubinvest.market_data.MarketDataService"),
            (user_pb2, "UserService", "hubinvest.user.UserService"),
        ],
    )
    def test_service_names(self, module, service: str, full_name: str) -> None:
        assert module.DESCRIPTOR.services_by_name[service].full_name == full_name

    def test_field_numbers_match_contract(self) -> None:
        fields = order_pb2.SubmitOrderRequest.DESCRIPTOR.fields_by_name

        assert fields["user_id"].number == 1
        assert fields["price"].number == 6
        assert position_pb2.PositionAggregation.DESCRIPTOR.fields_by_name["positions"].number == 8

    def test_stub_binds_every_method(self) -> None:
        channel = MagicMock()

        stub = order_pb2_grpc.OrderServiceStub(channel)

        paths = [c.args[0] for c in channel.unary_unary.call_args_list]
        assert paths == [
            "/hubinvest.order.OrderService/SubmitOrder",
            "/hubinvest.order.OrderService/GetOrderDetails",
            "/hubinvest.order.OrderService/GetOrderStatus",
            "/hubinvest.order.OrderService/CancelOrder",
        ]
        assert stub.CancelOrder is channel.unary_unary.return_value

    def test_user_stub_paths(self) -> None:
        channel = MagicMock()

        user_pb2_grpc.UserServiceStub(channel)

        paths = [c.args[0] for c in channel.unary_unary.call_args_list]
        assert "/hubinvest.user.UserService/UserValidateToken" in paths
        assert len(paths) == 5

    def test_add_servicer_registers_generic_handler(self) -> None:
        server = MagicMock()

        auth_pb2_grpc.add_AuthServiceServicer_to_server(auth_pb2_grpc.AuthServiceServicer(), server)

        server.add_generic_rpc_handlers.assert_called_once()

    def test_base_servicer_is_unimplemented(self) -> None:
        context = MagicMock()

        with pytest.raises(NotImplementedError):
            position_pb2_grpc.PositionServiceServicer().GetPositions(position_pb2.GetPositionsRequest(), context)

        context.set_code.assert_called_once_with(grpc.StatusCode.UNIMPLEMENTED)
