"""
HubInvestments gRPC edge - process entry point.

Loads configuration, builds the container named by ``CONTAINER_FACTORY``
and serves Auth, Order, Position and MarketData until cancelled.
"""

import asyncio
import logging
from typing import Optional

from shared.clients import ClientConfig, UserServiceClient
from shared.utils import setup_logger, start_metrics_server

from .auth import JWTTokenService, LocalTokenValidator, UserServiceTokenValidator
from .config import ServiceConfig, config
from .container import TokenValidator, load_container
from .interceptors import current_user_id
from .server import create_server

logger = logging.getLogger(__name__)


def _log_context() -> dict:
    return {"user_id": current_user_id()}


def configure_logging(cfg: ServiceConfig) -> None:
    """Send every package logger to JSON output tagged with the current principal."""
    for package in ("hubinvest_grpc", "shared"):
        setup_logger(
            cfg.service_name,
            level=cfg.log_level,
            context=_log_context,
            logger_name=package,
        )


def create_token_validator(
    cfg: ServiceConfig,
) -> tuple[Optional[TokenValidator], Optional[UserServiceClient]]:
    """Pick the interceptor's token validator from configuration.

    Returns:
        The validator (None means "use the container's auth service") and
        the User service client it owns, if any.
    """
    if cfg.token_validator == "user-service":
        user_client = UserServiceClient(ClientConfig(server_address=cfg.user_service_address))
        logger.info(f"Validating tokens with the User service at {cfg.user_service_address}")
        return UserServiceTokenValidator(user_client), user_client

    if cfg.jwt_secret_key:
        logger.info("Validating tokens with the configured HS256 secret")
        token_service = JWTTokenService(
            secret_key=cfg.jwt_secret_key,
            expire_minutes=cfg.access_token_expire_minutes,
        )
        return LocalTokenValidator(token_service), None

    logger.info("Validating tokens with the container's auth service")
    return None, None


async def serve(cfg: Optional[ServiceConfig] = None) -> None:
    """Start and run the gRPC server."""
    cfg = cfg or config
    configure_logging(cfg)

    logger.info(f"Starting {cfg.service_name} service...")

    container = load_container(cfg.container_factory)
    logger.info(f"Container loaded from {cfg.container_factory}")

    token_validator, user_client = create_token_validator(cfg)

    if cfg.metrics_port:
        start_metrics_server(cfg.metrics_port)
        logger.info(f"Metrics exposed on port {cfg.metrics_port}")

    server = create_server(container, cfg.grpc_port, token_validator=token_validator)

    # Handle shutdown
    async def shutdown() -> None:
        logger.info("Shutting down...")
        await server.stop(grace=cfg.shutdown_grace_seconds)
        if user_client:
            await user_client.close()
            logger.info("User Service client disconnected")
        logger.info("Shutdown complete")

    try:
        await server.serve()
    except asyncio.CancelledError:
        await shutdown()


def main() -> None:
    """Main entry point."""
    asyncio.run(serve())


if __name__ == "__main__":
    main()
