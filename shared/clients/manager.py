"""Convenience holder for all gRPC edge clients."""

import logging
from typing import Optional

from .auth_client import AuthClient
from .base import ClientConfig
from .order_client import OrderClient
from .position_client import PositionClient

logger = logging.getLogger(__name__)


class ClientCloseError(Exception):
    """One or more clients failed to close."""

    def __init__(self, errors: list[Exception]) -> None:
        super().__init__(f"errors closing clients: {errors}")
        self.errors = errors


class ClientManager:
    """Auth, Order and Position clients sharing one configuration."""

    def __init__(self, config: Optional[ClientConfig] = None) -> None:
        self.config = config or ClientConfig()
        self.auth = AuthClient(self.config)
        self.order = OrderClient(self.config)
        self.position = PositionClient(self.config)

    async def close(self) -> None:
        """Close every client, even if some of them fail.

        Raises:
            ClientCloseError: Listing every failure, after all clients were
                given the chance to close.
        """
        errors: list[Exception] = []
        for client in (self.auth, self.order, self.position):
            try:
                await client.close()
            except Exception as e:
                logger.error(f"Failed to close {client.service_label} client: {e}")
                errors.append(e)

        if errors:
            raise ClientCloseError(errors)
