"""
Collaborator contracts of the gRPC edge.

Servicers depend on one narrow capability each; the ``Container`` protocol
is only the bundle the process entry point resolves them from. Any object
with these accessors can back the server without servicer changes.
"""

import importlib
from typing import Any, Protocol, runtime_checkable

from .errors import ContainerLoadError
from .models import (
    AucAggregationModel,
    CancelOrderCommand,
    CancelOrderResult,
    MarketDataModel,
    OrderStatusResult,
    SubmitOrderCommand,
    SubmitOrderResult,
    TokenClaims,
    User,
)


class LoginUseCase(Protocol):
    async def execute(self, email: str, password: str) -> User:
        """Return the user for valid credentials; raise otherwise."""
        ...


class TokenService(Protocol):
    """The container's auth service: mints and verifies bearer tokens."""

    def create_token(self, email: str, user_id: str) -> str: ...

    def verify_token(self, token: str) -> TokenClaims: ...


class TokenValidator(Protocol):
    """Resolves a bearer token to a principal id for the interceptor."""

    async def validate(self, token: str) -> str: ...


class SubmitOrderUseCase(Protocol):
    async def execute(self, command: SubmitOrderCommand) -> SubmitOrderResult: ...


class GetOrderStatusUseCase(Protocol):
    async def execute(self, order_id: str, user_id: str) -> OrderStatusResult: ...


class CancelOrderUseCase(Protocol):
    async def execute(self, command: CancelOrderCommand) -> CancelOrderResult: ...


class PositionAggregationUseCase(Protocol):
    async def execute(self, user_id: str) -> AucAggregationModel: ...


class MarketDataUseCase(Protocol):
    async def execute(self, symbols: list[str]) -> list[MarketDataModel]: ...


@runtime_checkable
class Container(Protocol):
    def do_login_usecase(self) -> LoginUseCase: ...

    def get_auth_service(self) -> TokenService: ...

    def get_submit_order_usecase(self) -> SubmitOrderUseCase: ...

    def get_get_order_status_usecase(self) -> GetOrderStatusUseCase: ...

    def get_cancel_order_usecase(self) -> CancelOrderUseCase: ...

    def get_position_aggregation_usecase(self) -> PositionAggregationUseCase: ...

    def get_market_data_usecase(self) -> MarketDataUseCase: ...


def load_container(path: str) -> Container:
    """Build a container from a ``"package.module:factory"`` import path.

    ``factory`` may be a callable returning the container or the container
    object itself.

    Raises:
        ContainerLoadError: If the path is malformed, cannot be imported,
            or does not produce a Container.
    """
    module_name, sep, attribute = path.partition(":")
    if not module_name or not sep or not attribute:
        raise ContainerLoadError(f"container path must look like 'module:attribute', got {path!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ContainerLoadError(f"cannot import container module {module_name!r}: {e}") from e

    try:
        target: Any = getattr(module, attribute)
    except AttributeError as e:
        raise ContainerLoadError(f"{module_name!r} has no attribute {attribute!r}") from e

    # a class or factory function is called; a ready container is used as-is
    if isinstance(target, type) or (callable(target) and not isinstance(target, Container)):
        try:
            container = target()
        except Exception as e:
            raise ContainerLoadError(f"container factory {path!r} failed: {e}") from e
    else:
        container = target

    if isinstance(container, type) or not isinstance(container, Container):
        raise ContainerLoadError(f"{path!r} did not produce a Container")
    return container
