"""
OrderService servicer.

Every method requires an authenticated principal, and the ``user_id`` of
the request must name that principal. Checks run in this order: principal
present, request fields, ownership, then the use case.
"""

import logging

import grpc
from shared.generated import order_pb2, order_pb2_grpc
from shared.utils.metrics import record_order_submitted, track_grpc_call

from ..container import CancelOrderUseCase, GetOrderStatusUseCase, SubmitOrderUseCase
from ..envelope import (
    Outcome,
    Reject,
    Reply,
    api_response,
    authorize,
    deliver,
    rfc3339,
    rfc3339_now,
    with_error,
)
from ..models import CancelOrderCommand, SubmitOrderCommand

logger = logging.getLogger(__name__)

CANCEL_REASON = "User cancellation request via gRPC"
CANCELLED_STATUS = "CANCELLED"


def _lookup_failure_code(error: Exception) -> grpc.StatusCode:
    if isinstance(error, LookupError):
        return grpc.StatusCode.NOT_FOUND
    return grpc.StatusCode.INTERNAL


class OrderServicer(order_pb2_grpc.OrderServiceServicer):
    """
    gRPC servicer implementing the OrderService interface.

    Translates wire requests into order commands, dispatches them to the
    order use cases and projects the results back onto responses.
    """

    def __init__(
        self,
        submit_order_usecase: SubmitOrderUseCase,
        get_order_status_usecase: GetOrderStatusUseCase,
        cancel_order_usecase: CancelOrderUseCase,
    ) -> None:
        """
        Initialize the servicer with required dependencies.

        Args:
            submit_order_usecase: Places new orders.
            get_order_status_usecase: Reads an order owned by a user; serves
                both GetOrderStatus and GetOrderDetails.
            cancel_order_usecase: Cancels an order owned by a user.
        """
        self.submit_order_usecase = submit_order_usecase
        self.get_order_status_usecase = get_order_status_usecase
        self.cancel_order_usecase = cancel_order_usecase

    @track_grpc_call(service="order", method="SubmitOrder")
    async def SubmitOrder(
        self,
        request: order_pb2.SubmitOrderRequest,
        context: grpc.aio.ServicerContext,
    ) -> order_pb2.SubmitOrderResponse:
        """
        Submit a new order for the authenticated user.

        The symbol is upper-cased before dispatch. Empty symbols and
        non-positive quantities never reach the use case.
        """
        return await deliver(await self._submit_order(request), context)

    @track_grpc_call(service="order", method="GetOrderDetails")
    async def GetOrderDetails(
        self,
        request: order_pb2.GetOrderDetailsRequest,
        context: grpc.aio.ServicerContext,
    ) -> order_pb2.GetOrderDetailsResponse:
        return await deliver(await self._get_order_details(request), context)

    @track_grpc_call(service="order", method="GetOrderStatus")
    async def GetOrderStatus(
        self,
        request: order_pb2.GetOrderStatusRequest,
        context: grpc.aio.ServicerContext,
    ) -> order_pb2.GetOrderStatusResponse:
        return await deliver(await self._get_order_status(request), context)

    @track_grpc_call(service="order", method="CancelOrder")
    async def CancelOrder(
        self,
        request: order_pb2.CancelOrderRequest,
        context: grpc.aio.ServicerContext,
    ) -> order_pb2.CancelOrderResponse:
        """
        Cancel an order of the authenticated user.

        A successful cancellation always reports status CANCELLED; cancelling
        an order twice surfaces the use case error in the envelope.
        """
        return await deliver(await self._cancel_order(request), context)

    async def _submit_order(
        self, request: order_pb2.SubmitOrderRequest
    ) -> Outcome[order_pb2.SubmitOrderResponse]:
        principal = authorize()
        if isinstance(principal, Reject):
            return principal

        if not request.symbol or request.quantity <= 0:
            return Reply(
                order_pb2.SubmitOrderResponse(
                    api_response=api_response(
                        grpc.StatusCode.INVALID_ARGUMENT,
                        "Symbol and positive quantity are required",
                    )
                )
            )

        owner = authorize(request.user_id)
        if isinstance(owner, Reject):
            logger.warning(f"User {principal} tried to submit an order for {request.user_id}")
            return owner

        command = SubmitOrderCommand(
            user_id=owner,
            symbol=request.symbol.upper(),
            order_type=request.order_type,
            order_side=request.order_side,
            quantity=request.quantity,
            price=request.price if request.HasField("price") else None,
        )

        try:
            result = await self.submit_order_usecase.execute(command)
        except Exception as e:
            logger.error(f"Order submission failed for {command.symbol}: {e}")
            record_order_submitted(command.order_side, success=False)
            return Reply(
                order_pb2.SubmitOrderResponse(
                    api_response=api_response(
                        grpc.StatusCode.INTERNAL, with_error("Order submission failed", e)
                    )
                )
            )

        record_order_submitted(command.order_side, success=True)
        logger.info(
            f"Order submitted: {result.order_id}",
            extra={"symbol": command.symbol, "order_side": command.order_side},
        )

        response = order_pb2.SubmitOrderResponse(
            api_response=api_response(
                grpc.StatusCode.OK, result.message or "Order submitted successfully"
            ),
            order_id=result.order_id,
            status=result.status,
            submitted_at=rfc3339_now(),
        )
        if result.estimated_execution_price is not None:
            response.estimated_price = result.estimated_execution_price
        if result.market_price_at_submission is not None:
            response.market_price = result.market_price_at_submission
        return Reply(response)

    async def _get_order_details(
        self, request: order_pb2.GetOrderDetailsRequest
    ) -> Outcome[order_pb2.GetOrderDetailsResponse]:
        principal = authorize()
        if isinstance(principal, Reject):
            return principal

        if not request.order_id:
            return Reply(
                order_pb2.GetOrderDetailsResponse(
                    api_response=api_response(grpc.StatusCode.INVALID_ARGUMENT, "Order ID is required")
                )
            )

        owner = authorize(request.user_id)
        if isinstance(owner, Reject):
            return owner

        try:
            result = await self.get_order_status_usecase.execute(request.order_id, owner)
        except Exception as e:
            logger.info(f"Order details lookup failed for {request.order_id}: {e}")
            return Reply(
                order_pb2.GetOrderDetailsResponse(
                    api_response=api_response(
                        _lookup_failure_code(e),
                        with_error("Failed to retrieve order details", e),
                    )
                )
            )

        details = order_pb2.OrderDetails(
            order_id=result.order_id,
            user_id=result.user_id,
            symbol=result.symbol,
            order_type=result.order_type,
            order_side=result.order_side,
            quantity=result.quantity,
            status=result.status,
            created_at=rfc3339(result.created_at),
            updated_at=rfc3339(result.updated_at),
            # not computed by the order read model yet
            estimated_value=0.0,
        )
        if result.price is not None:
            details.price = result.price

        return Reply(
            order_pb2.GetOrderDetailsResponse(
                api_response=api_response(grpc.StatusCode.OK, "Order details retrieved successfully"),
                order=details,
            )
        )

    async def _get_order_status(
        self, request: order_pb2.GetOrderStatusRequest
    ) -> Outcome[order_pb2.GetOrderStatusResponse]:
        principal = authorize()
        if isinstance(principal, Reject):
            return principal

        if not request.order_id:
            return Reply(
                order_pb2.GetOrderStatusResponse(
                    api_response=api_response(grpc.StatusCode.INVALID_ARGUMENT, "Order ID is required")
                )
            )

        owner = authorize(request.user_id)
        if isinstance(owner, Reject):
            return owner

        try:
            result = await self.get_order_status_usecase.execute(request.order_id, owner)
        except Exception as e:
            logger.info(f"Order status lookup failed for {request.order_id}: {e}")
            return Reply(
                order_pb2.GetOrderStatusResponse(
                    api_response=api_response(
                        _lookup_failure_code(e),
                        with_error("Failed to retrieve order status", e),
                    )
                )
            )

        return Reply(
            order_pb2.GetOrderStatusResponse(
                api_response=api_response(grpc.StatusCode.OK, "Order status retrieved successfully"),
                order_id=result.order_id,
                status=result.status,
                status_message=f"Order is currently {result.status}",
                updated_at=rfc3339(result.updated_at),
            )
        )

    async def _cancel_order(
        self, request: order_pb2.CancelOrderRequest
    ) -> Outcome[order_pb2.CancelOrderResponse]:
        principal = authorize()
        if isinstance(principal, Reject):
            return principal

        if not request.order_id:
            return Reply(
                order_pb2.CancelOrderResponse(
                    api_response=api_response(grpc.StatusCode.INVALID_ARGUMENT, "Order ID is required")
                )
            )

        owner = authorize(request.user_id)
        if isinstance(owner, Reject):
            return owner

        command = CancelOrderCommand(order_id=request.order_id, user_id=owner, reason=CANCEL_REASON)
        try:
            result = await self.cancel_order_usecase.execute(command)
        except Exception as e:
            logger.info(f"Order cancellation failed for {request.order_id}: {e}")
            return Reply(
                order_pb2.CancelOrderResponse(
                    api_response=api_response(
                        _lookup_failure_code(e), with_error("Failed to cancel order", e)
                    ),
                    order_id=request.order_id,
                )
            )

        logger.info(f"Order cancelled: {request.order_id}")
        return Reply(
            order_pb2.CancelOrderResponse(
                api_response=api_response(grpc.StatusCode.OK, "Order cancelled successfully"),
                order_id=result.order_id or request.order_id,
                status=CANCELLED_STATUS,
                cancelled_at=rfc3339_now(),
            )
        )
