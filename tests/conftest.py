"""
Pytest configuration and fixtures for the gRPC edge tests.

Use cases are AsyncMocks; the token service is a real HS256 JWTTokenService.
"""

import os
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import grpc
import pytest

os.environ.setdefault("SERVICE_NAME", "hubinvest-grpc-test")
os.environ.setdefault("CONTAINER_FACTORY", "")
os.environ.setdefault("METRICS_PORT", "0")

from hubinvest_grpc.auth import JWTTokenService  # noqa: E402
from hubinvest_grpc.models import (  # noqa: E402
    AssetModel,
    AucAggregationModel,
    CancelOrderResult,
    MarketDataModel,
    OrderStatusResult,
    PositionAggregationModel,
    SubmitOrderResult,
    User,
)

TEST_SECRET = "test-secret-key-for-jwt-testing-min-32-bytes"


class FakeContainer:
    """Container whose use cases are AsyncMocks with sensible defaults."""

    def __init__(self, token_service: JWTTokenService) -> None:
        self.token_service = token_service
        self.login = AsyncMock()
        self.login.execute = AsyncMock(
            return_value=User(
                id="u-1",
                email="alice@example.com",
                first_name="Alice",
                last_name="Smith",
            )
        )
        self.submit_order = AsyncMock()
        self.submit_order.execute = AsyncMock(
            return_value=SubmitOrderResult(order_id="ord-1", status="PENDING")
        )
        self.get_order_status = AsyncMock()
        self.get_order_status.execute = AsyncMock(return_value=sample_order_status())
        self.cancel_order = AsyncMock()
        self.cancel_order.execute = AsyncMock(
            return_value=CancelOrderResult(order_id="ord-1", status="CANCELLED")
        )
        self.position_aggregation = AsyncMock()
        self.position_aggregation.execute = AsyncMock(return_value=sample_auc())
        self.market_data = AsyncMock()
        self.market_data.execute = AsyncMock(
            return_value=[MarketDataModel(symbol="AAPL", name="Apple Inc.", last_quote=190.5, category=1)]
        )

    def do_login_usecase(self):
        return self.login

    def get_auth_service(self):
        return self.token_service

    def get_submit_order_usecase(self):
        return self.submit_order

    def get_get_order_status_usecase(self):
        return self.get_order_status

    def get_cancel_order_usecase(self):
        return self.cancel_order

    def get_position_aggregation_usecase(self):
        return self.position_aggregation

    def get_market_data_usecase(self):
        return self.market_data


def sample_order_status() -> OrderStatusResult:
    return OrderStatusResult(
        order_id="ord-1",
        user_id="u-1",
        symbol="AAPL",
        order_side="BUY",
        order_type="LIMIT",
        quantity=10.0,
        status="PENDING",
        created_at=datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc),
        updated_at=datetime(2024, 1, 15, 10, 31, 0, tzinfo=timezone.utc),
        price=150.0,
    )


def sample_auc() -> AucAggregationModel:
    """Two categories holding one asset each."""
    stocks = PositionAggregationModel(
        category=1,
        total_invested=1500.0,
        current_total=1600.0,
        pnl=100.0,
        pnl_percentage=6.67,
        assets=[AssetModel(symbol="AAPL", quantity=10, average_price=150.0, last_price=160.0, category=1)],
    )
    etfs = PositionAggregationModel(
        category=2,
        total_invested=2000.0,
        current_total=1900.0,
        pnl=-100.0,
        pnl_percentage=-5.0,
        assets=[AssetModel(symbol="VOO", quantity=5, average_price=400.0, last_price=380.0, category=2)],
    )
    return AucAggregationModel(
        total_invested=3500.0,
        current_total=3500.0,
        position_aggregation=[stocks, etfs],
    )


@pytest.fixture
def mock_context() -> MagicMock:
    """Create mock gRPC context whose abort() raises like the real one."""
    context = MagicMock()
    context.abort = AsyncMock(side_effect=grpc.aio.AbortError())
    return context


@pytest.fixture
def token_service() -> JWTTokenService:
    """Create an HS256 token service for testing."""
    return JWTTokenService(secret_key=TEST_SECRET, expire_minutes=10)


@pytest.fixture
def container(token_service: JWTTokenService) -> FakeContainer:
    return FakeContainer(token_service)


@pytest.fixture
def auc() -> AucAggregationModel:
    return sample_auc()


@pytest.fixture
def order_status() -> OrderStatusResult:
    return sample_order_status()
