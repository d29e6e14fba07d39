"""Unit tests for PositionServicer and the position projections."""

from unittest.mock import AsyncMock, MagicMock

import grpc
import pytest
from shared.generated import position_pb2

from hubinvest_grpc.interceptors import authenticated_as
from hubinvest_grpc.models import AssetModel, AucAggregationModel
from hubinvest_grpc.servicers import PositionServicer
from hubinvest_grpc.servicers.position import project_aggregation, project_position


@pytest.fixture
def aggregation_usecase(auc: AucAggregationModel) -> AsyncMock:
    mock = AsyncMock()
    mock.execute = AsyncMock(return_value=auc)
    return mock


@pytest.fixture
def servicer(aggregation_usecase: AsyncMock) -> PositionServicer:
    return PositionServicer(position_aggregation_usecase=aggregation_usecase)


class TestProjection:
    def test_position_fields(self) -> None:
        asset = AssetModel(symbol="AAPL", quantity=10, average_price=150.0, last_price=160.0)

        position = project_position("u-1", asset, "2024-01-15T10:30:00Z")

        assert position.position_id == "pos-AAPL"
        assert position.user_id == "u-1"
        assert position.total_investment == 1500.0
        assert position.market_value == 1600.0
        assert position.unrealized_pnl == 100.0
        assert position.unrealized_pnl_pct == pytest.approx(6.6667, rel=1e-3)
        assert position.position_type == "LONG"
        assert position.status == "ACTIVE"
        assert position.created_at == position.updated_at == "2024-01-15T10:30:00Z"

    def test_zero_investment_pnl_pct(self) -> None:
        asset = AssetModel(symbol="GIFT", quantity=1, average_price=0.0, last_price=10.0)

        assert project_position("u-1", asset, "now").unrealized_pnl_pct == 0.0

    def test_aggregation_totals(self, auc: AucAggregationModel) -> None:
        auc.current_total = 3600.0

        aggregation = project_aggregation("u-1", auc)

        assert aggregation.total_invested == 3500.0
        assert aggregation.total_current_value == 3600.0
        assert aggregation.total_unrealized_pnl == 100.0
        assert aggregation.total_unrealized_pnl_pct == 0.0
        assert aggregation.total_positions == 2
        assert aggregation.active_positions == 2
        assert [c.category_name for c in aggregation.categories] == ["Category 1", "Category 2"]
        assert all(c.weight_pct == 0.0 for c in aggregation.categories)
        assert aggregation.categories[1].total_unrealized_pnl == -100.0
        assert aggregation.categories[0].position_count == 1

    def test_empty_aggregation(self) -> None:
        aggregation = project_aggregation("u-1", AucAggregationModel(total_invested=0.0, current_total=0.0))

        assert aggregation.total_positions == 0
        assert len(aggregation.categories) == 0


class TestGetPositions:
    """Tests for GetPositions gRPC method."""

    @pytest.mark.asyncio
    async def test_flattens_categories(
        self, servicer: PositionServicer, aggregation_usecase: AsyncMock, mock_context: MagicMock
    ) -> None:
        with authenticated_as("u-1"):
            response = await servicer.GetPositions(
                position_pb2.GetPositionsRequest(user_id="u-1"), mock_context
            )

        aggregation_usecase.execute.assert_awaited_once_with("u-1")
        assert response.api_response.success is True
        assert response.api_response.message == "Retrieved 2 positions"
        assert [p.position_id for p in response.positions] == ["pos-AAPL", "pos-VOO"]
        assert all(p.position_type == "LONG" and p.status == "ACTIVE" for p in response.positions)

    @pytest.mark.asyncio
    async def test_other_user_is_permission_denied(
        self, servicer: PositionServicer, aggregation_usecase: AsyncMock, mock_context: MagicMock
    ) -> None:
        with authenticated_as("u-1"):
            with pytest.raises(grpc.aio.AbortError):
                await servicer.GetPositions(position_pb2.GetPositionsRequest(user_id="u-2"), mock_context)

        mock_context.abort.assert_awaited_once_with(grpc.StatusCode.PERMISSION_DENIED, "access denied")
        aggregation_usecase.execute.assert_not_called()

    @pytest.mark.asyncio
    async def test_without_principal_is_unauthenticated(
        self, servicer: PositionServicer, mock_context: MagicMock
    ) -> None:
        with pytest.raises(grpc.aio.AbortError):
            await servicer.GetPositions(position_pb2.GetPositionsRequest(user_id="u-1"), mock_context)

        assert mock_context.abort.await_args.args[0] == grpc.StatusCode.UNAUTHENTICATED

    @pytest.mark.asyncio
    async def test_usecase_failure(
        self, servicer: PositionServicer, aggregation_usecase: AsyncMock, mock_context: MagicMock
    ) -> None:
        aggregation_usecase.execute.side_effect = RuntimeError("quotes unavailable")

        with authenticated_as("u-1"):
            response = await servicer.GetPositions(
                position_pb2.GetPositionsRequest(user_id="u-1"), mock_context
            )

        assert response.api_response.code == grpc.StatusCode.INTERNAL.value[0]
        assert response.api_response.message == "Failed to retrieve positions: quotes unavailable"
        assert len(response.positions) == 0


class TestGetPositionAggregation:
    """Tests for GetPositionAggregation gRPC method."""

    @pytest.mark.asyncio
    async def test_aggregation_success(self, servicer: PositionServicer, mock_context: MagicMock) -> None:
        with authenticated_as("u-1"):
            response = await servicer.GetPositionAggregation(
                position_pb2.GetPositionAggregationRequest(user_id="u-1"), mock_context
            )

        assert response.api_response.message == "Position aggregation retrieved successfully"
        assert response.aggregation.total_positions == 2
        assert len(response.aggregation.categories) == 2
        assert len(response.aggregation.positions) == 2

    @pytest.mark.asyncio
    async def test_usecase_failure(
        self, servicer: PositionServicer, aggregation_usecase: AsyncMock, mock_context: MagicMock
    ) -> None:
        aggregation_usecase.execute.side_effect = RuntimeError("boom")

        with authenticated_as("u-1"):
            response = await servicer.GetPositionAggregation(
                position_pb2.GetPositionAggregationRequest(user_id="u-1"), mock_context
            )

        assert response.api_response.success is False
        assert response.api_response.message == "Failed to retrieve position aggregation: boom"
        assert not response.HasField("aggregation")

    @pytest.mark.asyncio
    async def test_other_user_is_permission_denied(
        self, servicer: PositionServicer, aggregation_usecase: AsyncMock, mock_context: MagicMock
    ) -> None:
        with authenticated_as("u-1"):
            with pytest.raises(grpc.aio.AbortError):
                await servicer.GetPositionAggregation(
                    position_pb2.GetPositionAggregationRequest(user_id="u-2"), mock_context
                )

        mock_context.abort.assert_awaited_once_with(grpc.StatusCode.PERMISSION_DENIED, "access denied")
        aggregation_usecase.execute.assert_not_called()


class TestUnimplemented:
    @pytest.mark.asyncio
    async def test_create_position(
        self, servicer: PositionServicer, aggregation_usecase: AsyncMock, mock_context: MagicMock
    ) -> None:
        with authenticated_as("u-1"):
            response = await servicer.CreatePosition(
                position_pb2.CreatePositionRequest(user_id="u-1", symbol="AAPL", quantity=1, price=10),
                mock_context,
            )

        assert response.api_response.success is False
        assert response.api_response.code == grpc.StatusCode.UNIMPLEMENTED.value[0]
        assert response.api_response.message == "CreatePosition is not implemented yet"
        assert not response.HasField("position")
        aggregation_usecase.execute.assert_not_called()
        mock_context.abort.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_position(self, servicer: PositionServicer, mock_context: MagicMock) -> None:
        with authenticated_as("u-1"):
            response = await servicer.UpdatePosition(
                position_pb2.UpdatePositionRequest(position_id="pos-AAPL", user_id="u-1"), mock_context
            )

        assert response.api_response.code == grpc.StatusCode.UNIMPLEMENTED.value[0]
        assert response.api_response.message == "UpdatePosition is not implemented yet"
