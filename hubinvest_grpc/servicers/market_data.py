"""MarketDataService servicer: quotes for one or many symbols."""

import logging

import grpc
from shared.generated import market_data_pb2, market_data_pb2_grpc
from shared.utils.metrics import track_grpc_call

from ..container import MarketDataUseCase
from ..envelope import Outcome, Reject, Reply, api_response, authorize, deliver, rfc3339_now, with_error
from ..models import MarketDataModel

logger = logging.getLogger(__name__)


def _to_proto(item: MarketDataModel, now: str) -> market_data_pb2.MarketData:
    return market_data_pb2.MarketData(
        symbol=item.symbol,
        company_name=item.name,
        current_price=item.last_quote,
        category=item.category,
        last_updated=now,
    )


class MarketDataServicer(market_data_pb2_grpc.MarketDataServiceServicer):
    """
    gRPC servicer implementing the MarketDataService interface.

    Requires an authenticated principal; requests carry no owner.
    """

    def __init__(self, market_data_usecase: MarketDataUseCase) -> None:
        self.market_data_usecase = market_data_usecase

    @track_grpc_call(service="market_data", method="GetMarketData")
    async def GetMarketData(
        self,
        request: market_data_pb2.GetMarketDataRequest,
        context: grpc.aio.ServicerContext,
    ) -> market_data_pb2.GetMarketDataResponse:
        return await deliver(await self._get_market_data(request), context)

    @track_grpc_call(service="market_data", method="GetBatchMarketData")
    async def GetBatchMarketData(
        self,
        request: market_data_pb2.GetBatchMarketDataRequest,
        context: grpc.aio.ServicerContext,
    ) -> market_data_pb2.GetBatchMarketDataResponse:
        """
        Fetch quotes for several symbols in one call.

        Blank symbols are dropped; symbols without data are left out of the
        response.
        """
        return await deliver(await self._get_batch_market_data(request), context)

    async def _get_market_data(
        self, request: market_data_pb2.GetMarketDataRequest
    ) -> Outcome[market_data_pb2.GetMarketDataResponse]:
        principal = authorize()
        if isinstance(principal, Reject):
            return principal

        if not request.symbol:
            return Reply(
                market_data_pb2.GetMarketDataResponse(
                    api_response=api_response(grpc.StatusCode.INVALID_ARGUMENT, "Symbol is required")
                )
            )

        try:
            items = await self.market_data_usecase.execute([request.symbol])
        except Exception as e:
            logger.error(f"Market data lookup failed for {request.symbol}: {e}")
            return Reply(
                market_data_pb2.GetMarketDataResponse(
                    api_response=api_response(
                        grpc.StatusCode.INTERNAL, with_error("Failed to retrieve market data", e)
                    )
                )
            )

        if not items:
            return Reply(
                market_data_pb2.GetMarketDataResponse(
                    api_response=api_response(
                        grpc.StatusCode.NOT_FOUND, f"Market data not found for symbol {request.symbol}"
                    )
                )
            )

        return Reply(
            market_data_pb2.GetMarketDataResponse(
                api_response=api_response(grpc.StatusCode.OK, "Market data retrieved successfully"),
                market_data=_to_proto(items[0], rfc3339_now()),
            )
        )

    async def _get_batch_market_data(
        self, request: market_data_pb2.GetBatchMarketDataRequest
    ) -> Outcome[market_data_pb2.GetBatchMarketDataResponse]:
        principal = authorize()
        if isinstance(principal, Reject):
            return principal

        symbols = [symbol for symbol in request.symbols if symbol]
        if not symbols:
            return Reply(
                market_data_pb2.GetBatchMarketDataResponse(
                    api_response=api_response(
                        grpc.StatusCode.INVALID_ARGUMENT, "At least one symbol is required"
                    )
                )
            )

        try:
            items = await self.market_data_usecase.execute(symbols)
        except Exception as e:
            logger.error(f"Batch market data lookup failed for {len(symbols)} symbols: {e}")
            return Reply(
                market_data_pb2.GetBatchMarketDataResponse(
                    api_response=api_response(
                        grpc.StatusCode.INTERNAL,
                        with_error("Failed to retrieve batch market data", e),
                    )
                )
            )

        if not items:
            return Reply(
                market_data_pb2.GetBatchMarketDataResponse(
                    api_response=api_response(
                        grpc.StatusCode.NOT_FOUND, "No market data found for the requested symbols"
                    )
                )
            )

        now = rfc3339_now()
        return Reply(
            market_data_pb2.GetBatchMarketDataResponse(
                api_response=api_response(
                    grpc.StatusCode.OK, "Batch market data retrieved successfully"
                ),
                market_data=[_to_proto(item, now) for item in items],
            )
        )
