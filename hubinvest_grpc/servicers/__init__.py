"""gRPC servicers of the HubInvestments edge."""

from .auth import AuthServicer
from .market_data import MarketDataServicer
from .order import OrderServicer
from .position import PositionServicer

__all__ = [
    "AuthServicer",
    "MarketDataServicer",
    "OrderServicer",
    "PositionServicer",
]
