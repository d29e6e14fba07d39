"""Common plumbing for outbound gRPC clients.

Each client owns a single lazily dialled ``grpc.aio`` channel and one stub.
``connect()`` has no suspension point between the "already connected" check
and the assignment, so concurrent first use on one event loop dials once.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

import grpc

logger = logging.getLogger(__name__)

DEFAULT_SERVER_ADDRESS = "localhost:50051"
DEFAULT_TIMEOUT = 30.0

_CHANNEL_OPTIONS = [
    ("grpc.keepalive_time_ms", 10000),
    ("grpc.keepalive_timeout_ms", 5000),
]


@dataclass(frozen=True)
class ClientConfig:
    """Where to reach the gRPC edge and how long a call may take.

    Attributes:
        server_address: ``host:port`` of the server.
        timeout: Per-call deadline in seconds.
    """

    server_address: str = DEFAULT_SERVER_ADDRESS
    timeout: float = DEFAULT_TIMEOUT


class ClientError(Exception):
    """A remote call failed at the transport level."""

    def __init__(self, message: str, code: Optional[grpc.StatusCode] = None) -> None:
        super().__init__(message)
        self.code = code


class GrpcClient:
    """Base class for single-channel gRPC clients.

    Subclasses set ``service_label`` (used in error messages) and
    ``stub_factory`` (the generated stub class).
    """

    service_label: str = ""
    stub_factory: Callable[[grpc.aio.Channel], Any]

    def __init__(self, config: Optional[ClientConfig] = None) -> None:
        self.config = config or ClientConfig()
        self.channel: grpc.aio.Channel | None = None
        self.stub: Any = None

    @property
    def address(self) -> str:
        return self.config.server_address

    async def connect(self) -> None:
        """Dial the server if not connected yet. Safe to call repeatedly."""
        if self.channel is not None:
            return

        self.channel = grpc.aio.insecure_channel(self.address, options=_CHANNEL_OPTIONS)
        self.stub = self.stub_factory(self.channel)
        logger.info(f"{self.service_label} client connected to {self.address}")

    async def close(self) -> None:
        """Close the channel. Calling it on a closed client is a no-op."""
        if self.channel is None:
            return

        channel = self.channel
        self.channel = None
        self.stub = None
        await channel.close()
        logger.info(f"{self.service_label} client closed")

    async def _invoke(self, rpc: str, request: Any, token: str = "") -> Any:
        """Call ``rpc`` on the stub with the configured deadline.

        Args:
            rpc: gRPC method name, e.g. ``SubmitOrder``.
            request: Request message.
            token: Optional bearer token sent as ``authorization`` metadata.

        Raises:
            ClientError: If the call fails at the transport level.
        """
        if self.stub is None:
            await self.connect()
        assert self.stub is not None, "stub should be initialized after connect()"

        metadata = (("authorization", f"Bearer {token}"),) if token else None

        try:
            return await getattr(self.stub, rpc)(
                request,
                timeout=self.config.timeout,
                metadata=metadata,
            )
        except grpc.RpcError as e:
            logger.error(f"{self.service_label}.{rpc} failed: {e.code()} - {e.details()}")
            raise ClientError(
                f"{self.service_label}.{rpc} failed: {e.details()}",
                code=e.code(),
            ) from e
