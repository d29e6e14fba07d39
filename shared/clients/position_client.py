"""Position Service gRPC client."""

from shared.generated import position_pb2, position_pb2_grpc

from .base import GrpcClient


class PositionClient(GrpcClient):
    """Client for ``hubinvest.position.PositionService``."""

    service_label = "Position"
    stub_factory = position_pb2_grpc.PositionServiceStub

    async def get_positions(self, token: str, user_id: str) -> position_pb2.GetPositionsResponse:
        request = position_pb2.GetPositionsRequest(user_id=user_id)
        return await self._invoke("GetPositions", request, token)

    async def get_aggregation(
        self, token: str, user_id: str
    ) -> position_pb2.GetPositionAggregationResponse:
        request = position_pb2.GetPositionAggregationRequest(user_id=user_id)
        return await self._invoke("GetPositionAggregation", request, token)
