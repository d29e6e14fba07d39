"""
Application-layer values exchanged between servicers and use cases.

Commands flow from the edge into use cases; results and read models flow
back and are projected onto wire messages by the servicers.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class User:
    """Authenticated user returned by the login use case."""

    id: str
    email: str
    first_name: str = ""
    last_name: str = ""


@dataclass
class TokenClaims:
    """Claims extracted from a verified bearer token."""

    user_id: str
    email: str = ""
    expires_at: int = 0


@dataclass
class SubmitOrderCommand:
    """Request to place an order on behalf of ``user_id``."""

    user_id: str
    symbol: str
    order_type: str
    order_side: str
    quantity: float
    price: Optional[float] = None


@dataclass
class SubmitOrderResult:
    order_id: str
    status: str
    message: str = "Order submitted successfully"
    market_price_at_submission: Optional[float] = None
    estimated_execution_price: Optional[float] = None


@dataclass
class CancelOrderCommand:
    order_id: str
    user_id: str
    reason: str = ""


@dataclass
class CancelOrderResult:
    order_id: str
    status: str
    message: str = ""


@dataclass
class OrderStatusResult:
    """Read model of a single order as seen by its owner."""

    order_id: str
    user_id: str
    symbol: str
    order_side: str
    order_type: str
    quantity: float
    status: str
    created_at: datetime
    updated_at: datetime
    price: Optional[float] = None


@dataclass
class AssetModel:
    """A holding inside a position category."""

    symbol: str
    quantity: float
    average_price: float
    last_price: float
    category: int = 0

    def calculate_investment(self) -> float:
        return self.average_price * self.quantity

    def calculate_current_value(self) -> float:
        return self.last_price * self.quantity

    def calculate_pnl(self) -> float:
        return self.calculate_current_value() - self.calculate_investment()

    def calculate_pnl_percentage(self) -> float:
        investment = self.calculate_investment()
        if investment == 0:
            return 0.0
        return self.calculate_pnl() / investment * 100


@dataclass
class PositionAggregationModel:
    """Positions of one asset category with their totals."""

    category: int
    total_invested: float
    current_total: float
    pnl: float
    pnl_percentage: float
    assets: list[AssetModel] = field(default_factory=list)


@dataclass
class AucAggregationModel:
    """Assets under custody for a user, grouped by category."""

    total_invested: float
    current_total: float
    position_aggregation: list[PositionAggregationModel] = field(default_factory=list)


@dataclass
class MarketDataModel:
    symbol: str
    name: str
    last_quote: float
    category: int = 0
