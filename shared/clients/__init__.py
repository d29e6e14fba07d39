"""Outbound gRPC clients for the HubInvestments edge and User services."""

from .auth_client import AuthClient
from .base import ClientConfig, ClientError, GrpcClient
from .manager import ClientCloseError, ClientManager
from .order_client import OrderClient
from .position_client import PositionClient
from .user_client import UserProfile, UserServiceClient, UserServiceError

__all__ = [
    "AuthClient",
    "ClientCloseError",
    "ClientConfig",
    "ClientError",
    "ClientManager",
    "GrpcClient",
    "OrderClient",
    "PositionClient",
    "UserProfile",
    "UserServiceClient",
    "UserServiceError",
]
