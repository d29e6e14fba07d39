"""
PositionService servicer.

Positions are projected from the position aggregation use case on every
call. The use case returns derived figures only, so ``position_id``,
``position_type``, ``status`` and the timestamps are manufactured here.
"""

import logging

import grpc
from shared.generated import position_pb2, position_pb2_grpc
from shared.utils.metrics import track_grpc_call

from ..container import PositionAggregationUseCase
from ..envelope import Outcome, Reject, Reply, api_response, authorize, deliver, rfc3339_now, with_error
from ..models import AssetModel, AucAggregationModel

logger = logging.getLogger(__name__)

POSITION_TYPE_LONG = "LONG"
POSITION_STATUS_ACTIVE = "ACTIVE"


def project_position(user_id: str, asset: AssetModel, now: str) -> position_pb2.Position:
    """Build a wire Position from an aggregated asset."""
    # TODO: take id, type, status and timestamps from the position store once it is wired in
    return position_pb2.Position(
        position_id=f"pos-{asset.symbol}",
        user_id=user_id,
        symbol=asset.symbol,
        quantity=asset.quantity,
        average_price=asset.average_price,
        total_investment=asset.calculate_investment(),
        current_price=asset.last_price,
        market_value=asset.calculate_current_value(),
        unrealized_pnl=asset.calculate_pnl(),
        unrealized_pnl_pct=asset.calculate_pnl_percentage(),
        position_type=POSITION_TYPE_LONG,
        status=POSITION_STATUS_ACTIVE,
        created_at=now,
        updated_at=now,
    )


def project_positions(user_id: str, auc: AucAggregationModel) -> list[position_pb2.Position]:
    """Flatten every category's assets into one position list."""
    now = rfc3339_now()
    return [
        project_position(user_id, asset, now)
        for aggregation in auc.position_aggregation
        for asset in aggregation.assets
    ]


def project_aggregation(user_id: str, auc: AucAggregationModel) -> position_pb2.PositionAggregation:
    """Build per-category summaries and the totals block.

    ``weight_pct`` and ``total_unrealized_pnl_pct`` are reported as 0 until
    portfolio weights are computed upstream.
    """
    positions = project_positions(user_id, auc)
    categories = [
        position_pb2.CategoryAggregation(
            category_id=aggregation.category,
            category_name=f"Category {aggregation.category}",
            total_invested=aggregation.total_invested,
            total_current_value=aggregation.current_total,
            total_unrealized_pnl=aggregation.pnl,
            unrealized_pnl_pct=aggregation.pnl_percentage,
            position_count=len(aggregation.assets),
            weight_pct=0.0,
        )
        for aggregation in auc.position_aggregation
    ]
    return position_pb2.PositionAggregation(
        total_invested=auc.total_invested,
        total_current_value=auc.current_total,
        total_unrealized_pnl=auc.current_total - auc.total_invested,
        total_unrealized_pnl_pct=0.0,
        total_positions=len(positions),
        active_positions=len(positions),
        categories=categories,
        positions=positions,
    )


class PositionServicer(position_pb2_grpc.PositionServiceServicer):
    """gRPC servicer implementing the PositionService interface."""

    def __init__(self, position_aggregation_usecase: PositionAggregationUseCase) -> None:
        self.position_aggregation_usecase = position_aggregation_usecase

    @track_grpc_call(service="position", method="GetPositions")
    async def GetPositions(
        self,
        request: position_pb2.GetPositionsRequest,
        context: grpc.aio.ServicerContext,
    ) -> position_pb2.GetPositionsResponse:
        """List the authenticated user's positions across all categories."""
        return await deliver(await self._get_positions(request), context)

    @track_grpc_call(service="position", method="GetPositionAggregation")
    async def GetPositionAggregation(
        self,
        request: position_pb2.GetPositionAggregationRequest,
        context: grpc.aio.ServicerContext,
    ) -> position_pb2.GetPositionAggregationResponse:
        """Summarize the authenticated user's positions per category and in total."""
        return await deliver(await self._get_position_aggregation(request), context)

    @track_grpc_call(service="position", method="CreatePosition")
    async def CreatePosition(
        self,
        request: position_pb2.CreatePositionRequest,
        context: grpc.aio.ServicerContext,
    ) -> position_pb2.CreatePositionResponse:
        return position_pb2.CreatePositionResponse(
            api_response=api_response(
                grpc.StatusCode.UNIMPLEMENTED, "CreatePosition is not implemented yet"
            )
        )

    @track_grpc_call(service="position", method="UpdatePosition")
    async def UpdatePosition(
        self,
        request: position_pb2.UpdatePositionRequest,
        context: grpc.aio.ServicerContext,
    ) -> position_pb2.UpdatePositionResponse:
        return position_pb2.UpdatePositionResponse(
            api_response=api_response(
                grpc.StatusCode.UNIMPLEMENTED, "UpdatePosition is not implemented yet"
            )
        )

    async def _load(self, request_user_id: str) -> "AucAggregationModel | Reject | Exception":
        owner = authorize(request_user_id)
        if isinstance(owner, Reject):
            return owner
        try:
            return await self.position_aggregation_usecase.execute(owner)
        except Exception as e:
            logger.error(f"Position aggregation failed for user {owner}: {e}")
            return e

    async def _get_positions(
        self, request: position_pb2.GetPositionsRequest
    ) -> Outcome[position_pb2.GetPositionsResponse]:
        auc = await self._load(request.user_id)
        if isinstance(auc, Reject):
            return auc
        if isinstance(auc, Exception):
            return Reply(
                position_pb2.GetPositionsResponse(
                    api_response=api_response(
                        grpc.StatusCode.INTERNAL, with_error("Failed to retrieve positions", auc)
                    )
                )
            )

        positions = project_positions(request.user_id, auc)
        return Reply(
            position_pb2.GetPositionsResponse(
                api_response=api_response(grpc.StatusCode.OK, f"Retrieved {len(positions)} positions"),
                positions=positions,
            )
        )

    async def _get_position_aggregation(
        self, request: position_pb2.GetPositionAggregationRequest
    ) -> Outcome[position_pb2.GetPositionAggregationResponse]:
        auc = await self._load(request.user_id)
        if isinstance(auc, Reject):
            return auc
        if isinstance(auc, Exception):
            return Reply(
                position_pb2.GetPositionAggregationResponse(
                    api_response=api_response(
                        grpc.StatusCode.INTERNAL,
                        with_error("Failed to retrieve position aggregation", auc),
                    )
                )
            )

        return Reply(
            position_pb2.GetPositionAggregationResponse(
                api_response=api_response(
                    grpc.StatusCode.OK, "Position aggregation retrieved successfully"
                ),
                aggregation=project_aggregation(request.user_id, auc),
            )
        )
