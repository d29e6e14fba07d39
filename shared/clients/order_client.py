"""Order Service gRPC client."""

from typing import Optional

from shared.generated import order_pb2, order_pb2_grpc

from .base import GrpcClient


class OrderClient(GrpcClient):
    """Client for ``hubinvest.order.OrderService``.

    Every call takes the caller's bearer token first; an empty token sends
    no ``authorization`` metadata.
    """

    service_label = "Order"
    stub_factory = order_pb2_grpc.OrderServiceStub

    async def submit(
        self,
        token: str,
        user_id: str,
        symbol: str,
        order_type: str,
        order_side: str,
        quantity: float,
        price: Optional[float] = None,
    ) -> order_pb2.SubmitOrderResponse:
        """Submit a new order.

        Args:
            token: Bearer token of the caller.
            user_id: Owner of the order; must match the token's principal.
            symbol: Instrument symbol.
            order_type: MARKET, LIMIT, STOP_LOSS or STOP_LIMIT.
            order_side: BUY or SELL.
            quantity: Positive quantity.
            price: Limit/stop price; omitted for market orders.
        """
        request = order_pb2.SubmitOrderRequest(
            user_id=user_id,
            symbol=symbol,
            order_type=order_type,
            order_side=order_side,
            quantity=quantity,
        )
        if price is not None:
            request.price = price
        return await self._invoke("SubmitOrder", request, token)

    async def get_status(self, token: str, order_id: str, user_id: str) -> order_pb2.GetOrderStatusResponse:
        request = order_pb2.GetOrderStatusRequest(order_id=order_id, user_id=user_id)
        return await self._invoke("GetOrderStatus", request, token)

    async def get_details(self, token: str, order_id: str, user_id: str) -> order_pb2.GetOrderDetailsResponse:
        request = order_pb2.GetOrderDetailsRequest(order_id=order_id, user_id=user_id)
        return await self._invoke("GetOrderDetails", request, token)

    async def cancel(self, token: str, order_id: str, user_id: str) -> order_pb2.CancelOrderResponse:
        request = order_pb2.CancelOrderRequest(order_id=order_id, user_id=user_id)
        return await self._invoke("CancelOrder", request, token)
