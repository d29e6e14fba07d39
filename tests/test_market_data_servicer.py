"""Unit tests for MarketDataServicer."""

from unittest.mock import AsyncMock, MagicMock

import grpc
import pytest
from shared.generated import market_data_pb2

from hubinvest_grpc.interceptors import authenticated_as
from hubinvest_grpc.models import MarketDataModel
from hubinvest_grpc.servicers import MarketDataServicer


@pytest.fixture
def market_data_usecase() -> AsyncMock:
    mock = AsyncMock()
    mock.execute = AsyncMock(
        return_value=[
            MarketDataModel(symbol="AAPL", name="Apple Inc.", last_quote=190.5, category=1),
            MarketDataModel(symbol="VOO", name="Vanguard S&P 500 ETF", last_quote=430.0, category=2),
        ]
    )
    return mock


@pytest.fixture
def servicer(market_data_usecase: AsyncMock) -> MarketDataServicer:
    return MarketDataServicer(market_data_usecase=market_data_usecase)


class TestGetMarketData:
    @pytest.mark.asyncio
    async def test_success(
        self, servicer: MarketDataServicer, market_data_usecase: AsyncMock, mock_context: MagicMock
    ) -> None:
        market_data_usecase.execute.return_value = market_data_usecase.execute.return_value[:1]

        with authenticated_as("u-1"):
            response = await servicer.GetMarketData(
                market_data_pb2.GetMarketDataRequest(symbol="AAPL"), mock_context
            )

        market_data_usecase.execute.assert_awaited_once_with(["AAPL"])
        assert response.api_response.success is True
        assert response.api_response.message == "Market data retrieved successfully"
        assert response.market_data.symbol == "AAPL"
        assert response.market_data.company_name == "Apple Inc."
        assert response.market_data.current_price == 190.5
        assert response.market_data.category == 1
        assert response.market_data.last_updated.endswith("Z")

    @pytest.mark.asyncio
    async def test_empty_symbol(
        self, servicer: MarketDataServicer, market_data_usecase: AsyncMock, mock_context: MagicMock
    ) -> None:
        with authenticated_as("u-1"):
            response = await servicer.GetMarketData(market_data_pb2.GetMarketDataRequest(), mock_context)

        assert response.api_response.code == grpc.StatusCode.INVALID_ARGUMENT.value[0]
        market_data_usecase.execute.assert_not_called()

    @pytest.mark.asyncio
    async def test_not_found(
        self, servicer: MarketDataServicer, market_data_usecase: AsyncMock, mock_context: MagicMock
    ) -> None:
        market_data_usecase.execute.return_value = []

        with authenticated_as("u-1"):
            response = await servicer.GetMarketData(
                market_data_pb2.GetMarketDataRequest(symbol="ZZZZ"), mock_context
            )

        assert response.api_response.code == grpc.StatusCode.NOT_FOUND.value[0]
        assert response.api_response.message == "Market data not found for symbol ZZZZ"

    @pytest.mark.asyncio
    async def test_usecase_failure(
        self, servicer: MarketDataServicer, market_data_usecase: AsyncMock, mock_context: MagicMock
    ) -> None:
        market_data_usecase.execute.side_effect = RuntimeError("feed down")

        with authenticated_as("u-1"):
            response = await servicer.GetMarketData(
                market_data_pb2.GetMarketDataRequest(symbol="AAPL"), mock_context
            )

        assert response.api_response.code == grpc.StatusCode.INTERNAL.value[0]
        assert response.api_response.message == "Failed to retrieve market data: feed down"

    @pytest.mark.asyncio
    async def test_without_principal(self, servicer: MarketDataServicer, mock_context: MagicMock) -> None:
        with pytest.raises(grpc.aio.AbortError):
            await servicer.GetMarketData(market_data_pb2.GetMarketDataRequest(symbol="AAPL"), mock_context)


class TestGetBatchMarketData:
    @pytest.mark.asyncio
    async def test_success(
        self, servicer: MarketDataServicer, market_data_usecase: AsyncMock, mock_context: MagicMock
    ) -> None:
        with authenticated_as("u-1"):
            response = await servicer.GetBatchMarketData(
                market_data_pb2.GetBatchMarketDataRequest(symbols=["AAPL", "", "VOO"]), mock_context
            )

        market_data_usecase.execute.assert_awaited_once_with(["AAPL", "VOO"])
        assert response.api_response.message == "Batch market data retrieved successfully"
        assert [item.symbol for item in response.market_data] == ["AAPL", "VOO"]

    @pytest.mark.asyncio
    async def test_no_symbols(
        self, servicer: MarketDataServicer, market_data_usecase: AsyncMock, mock_context: MagicMock
    ) -> None:
        with authenticated_as("u-1"):
            response = await servicer.GetBatchMarketData(
                market_data_pb2.GetBatchMarketDataRequest(symbols=[""]), mock_context
            )

        assert response.api_response.code == grpc.StatusCode.INVALID_ARGUMENT.value[0]
        assert response.api_response.message == "At least one symbol is required"
        market_data_usecase.execute.assert_not_called()

    @pytest.mark.asyncio
    async def test_nothing_found(
        self, servicer: MarketDataServicer, market_data_usecase: AsyncMock, mock_context: MagicMock
    ) -> None:
        market_data_usecase.execute.return_value = []

        with authenticated_as("u-1"):
            response = await servicer.GetBatchMarketData(
                market_data_pb2.GetBatchMarketDataRequest(symbols=["ZZZZ"]), mock_context
            )

        assert response.api_response.code == grpc.StatusCode.NOT_FOUND.value[0]
        assert len(response.market_data) == 0
