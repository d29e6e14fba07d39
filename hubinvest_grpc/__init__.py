"""
HubInvestments gRPC edge.

Serves the Auth, Order, Position and MarketData services behind a bearer
token interceptor and reports every outcome in a uniform response envelope.
"""

from .container import Container, load_container
from .errors import (
    ContainerLoadError,
    InvalidCredentialsError,
    InvalidTokenError,
    OrderNotFoundError,
    ServerBindError,
)
from .interceptors import PUBLIC_METHODS, AuthInterceptor, authenticated_as, current_user_id
from .server import GRPCServer, create_server

__version__ = "0.1.0"

__all__ = [
    "AuthInterceptor",
    "Container",
    "ContainerLoadError",
    "GRPCServer",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "OrderNotFoundError",
    "PUBLIC_METHODS",
    "ServerBindError",
    "authenticated_as",
    "create_server",
    "current_user_id",
    "load_container",
]
