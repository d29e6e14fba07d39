"""
Transport endpoint of the gRPC edge.

``create_server`` binds the listening address, installs the authentication
interceptor and registers the Auth, Order, Position, MarketData and health
services. The returned ``GRPCServer`` is driven by the caller.
"""

import logging
from typing import Iterable, Optional, Union

import grpc
from grpc_health.v1 import health, health_pb2, health_pb2_grpc
from shared.generated import (
    auth_pb2,
    auth_pb2_grpc,
    market_data_pb2,
    market_data_pb2_grpc,
    order_pb2,
    order_pb2_grpc,
    position_pb2,
    position_pb2_grpc,
)

from .auth import LocalTokenValidator
from .container import Container, TokenValidator
from .errors import ServerBindError
from .interceptors import PUBLIC_METHODS, AuthInterceptor
from .servicers import AuthServicer, MarketDataServicer, OrderServicer, PositionServicer

logger = logging.getLogger(__name__)

SERVICE_NAMES = (
    auth_pb2.DESCRIPTOR.services_by_name["AuthService"].full_name,
    order_pb2.DESCRIPTOR.services_by_name["OrderService"].full_name,
    position_pb2.DESCRIPTOR.services_by_name["PositionService"].full_name,
    market_data_pb2.DESCRIPTOR.services_by_name["MarketDataService"].full_name,
)


def listen_address(port: Union[int, str]) -> str:
    """Normalize ``50051``, ``":50051"`` or ``"host:port"`` to a bind address.

    A bare port binds all interfaces.
    """
    value = str(port).strip()
    if value.startswith(":"):
        value = value[1:]
    if value.isdigit():
        return f"[::]:{value}"
    return value


class GRPCServer:
    """A bound gRPC server together with its health state."""

    def __init__(
        self,
        server: grpc.aio.Server,
        health_servicer: health.HealthServicer,
        address: str,
        port: int,
    ) -> None:
        self._server = server
        self._health = health_servicer
        self.address = address
        self._port = port

    @property
    def port(self) -> int:
        """The bound TCP port (resolved when binding port 0)."""
        return self._port

    async def start(self) -> None:
        await self._server.start()
        logger.info(f"gRPC server started on {self.address} (port {self._port})")

    async def serve(self) -> None:
        """Start the server and wait until it terminates."""
        await self.start()
        await self._server.wait_for_termination()

    async def stop(self, grace: Optional[float] = None) -> None:
        """Mark every service NOT_SERVING, then stop, letting calls finish within ``grace``."""
        self._health.enter_graceful_shutdown()
        await self._server.stop(grace)
        logger.info("gRPC server stopped")


def create_server(
    container: Container,
    port: Union[int, str],
    token_validator: Optional[TokenValidator] = None,
    public_methods: Iterable[str] = PUBLIC_METHODS,
) -> GRPCServer:
    """
    Build the edge server and bind its listening port.

    Args:
        container: Source of the use cases and the auth service.
        port: ``50051``, ``":50051"`` or ``"host:port"``.
        token_validator: Validator used by the interceptor; defaults to the
            container's auth service.
        public_methods: Method paths callable without a bearer token.

    Returns:
        The bound, not yet started, server.

    Raises:
        ServerBindError: If the address cannot be bound.
    """
    if token_validator is None:
        token_validator = LocalTokenValidator(container.get_auth_service())

    server = grpc.aio.server(interceptors=[AuthInterceptor(token_validator, public_methods)])

    auth_pb2_grpc.add_AuthServiceServicer_to_server(
        AuthServicer(
            login_usecase=container.do_login_usecase(),
            token_service=container.get_auth_service(),
        ),
        server,
    )
    order_pb2_grpc.add_OrderServiceServicer_to_server(
        OrderServicer(
            submit_order_usecase=container.get_submit_order_usecase(),
            get_order_status_usecase=container.get_get_order_status_usecase(),
            cancel_order_usecase=container.get_cancel_order_usecase(),
        ),
        server,
    )
    position_pb2_grpc.add_PositionServiceServicer_to_server(
        PositionServicer(position_aggregation_usecase=container.get_position_aggregation_usecase()),
        server,
    )
    market_data_pb2_grpc.add_MarketDataServiceServicer_to_server(
        MarketDataServicer(market_data_usecase=container.get_market_data_usecase()),
        server,
    )

    health_servicer = health.HealthServicer()
    health_servicer.set("", health_pb2.HealthCheckResponse.SERVING)
    for service_name in SERVICE_NAMES:
        health_servicer.set(service_name, health_pb2.HealthCheckResponse.SERVING)
    health_pb2_grpc.add_HealthServicer_to_server(health_servicer, server)

    address = listen_address(port)
    try:
        bound_port = server.add_insecure_port(address)
    except RuntimeError as e:
        raise ServerBindError(f"failed to listen on {address}: {e}") from e
    if not bound_port:
        raise ServerBindError(f"failed to listen on {address}")

    logger.info(f"gRPC server bound to {address}")
    return GRPCServer(server, health_servicer, address, bound_port)
