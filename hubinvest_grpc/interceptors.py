"""
Authentication interceptor for the gRPC edge.

Every call, unary or streaming, must carry an ``authorization`` metadata
entry holding a bearer token, except methods listed in ``PUBLIC_METHODS``.
The token is resolved to a principal id by a ``TokenValidator``; the id is
then visible to the handler through ``current_user_id()`` for the whole
call. Calls that fail validation are aborted with UNAUTHENTICATED and never
reach their handler.
"""

import contextvars
import inspect
import logging
from contextlib import contextmanager
from typing import Any, Awaitable, Callable, Iterable, Iterator, Optional

import grpc
from shared.utils.metrics import record_auth_rejection

logger = logging.getLogger(__name__)

AUTHORIZATION_KEY = "authorization"
BEARER_PREFIX = "Bearer "

# Methods callable without a token.
PUBLIC_METHODS = frozenset({
    "/hubinvest.auth.AuthService/Login",
    "/hubinvest.auth.AuthService/ValidateToken",
    "/grpc.health.v1.Health/Check",
    "/grpc.health.v1.Health/Watch",
})

_user_id: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("userId", default=None)


def current_user_id() -> Optional[str]:
    """Principal id of the call being handled, or None outside an authenticated call."""
    return _user_id.get()


@contextmanager
def authenticated_as(user_id: str) -> Iterator[str]:
    """Make ``user_id`` the principal for the enclosed block."""
    token = _user_id.set(user_id)
    try:
        yield user_id
    finally:
        _user_id.reset(token)


def extract_bearer_token(metadata: Optional[Iterable[Any]]) -> str:
    """Return the token from the ``authorization`` entry, without ``Bearer ``.

    Returns an empty string when the entry is missing or blank.
    """
    for key, value in metadata or ():
        if key == AUTHORIZATION_KEY:
            if isinstance(value, bytes):
                value = value.decode("utf-8")
            value = value.lstrip()
            if value.startswith(BEARER_PREFIX):
                value = value[len(BEARER_PREFIX):]
            return value.strip()
    return ""


def _handler_factory(handler: grpc.RpcMethodHandler) -> Callable[..., grpc.RpcMethodHandler]:
    if handler.request_streaming and handler.response_streaming:
        return grpc.stream_stream_rpc_method_handler
    if handler.request_streaming:
        return grpc.stream_unary_rpc_method_handler
    if handler.response_streaming:
        return grpc.unary_stream_rpc_method_handler
    return grpc.unary_unary_rpc_method_handler


def _behavior(handler: grpc.RpcMethodHandler) -> Callable[..., Any]:
    return (
        handler.unary_unary
        or handler.unary_stream
        or handler.stream_unary
        or handler.stream_stream
    )


def _rebuild(handler: grpc.RpcMethodHandler, behavior: Callable[..., Any]) -> grpc.RpcMethodHandler:
    return _handler_factory(handler)(
        behavior,
        request_deserializer=handler.request_deserializer,
        response_serializer=handler.response_serializer,
    )


def _rejecting(handler: grpc.RpcMethodHandler, details: str) -> grpc.RpcMethodHandler:
    async def reject(request_or_iterator: Any, context: grpc.aio.ServicerContext) -> None:
        await context.abort(grpc.StatusCode.UNAUTHENTICATED, details)

    return _rebuild(handler, reject)


def _authenticated(handler: grpc.RpcMethodHandler, user_id: str) -> grpc.RpcMethodHandler:
    behavior = _behavior(handler)

    if inspect.isasyncgenfunction(behavior):
        async def stream_with_principal(request_or_iterator: Any, context: grpc.aio.ServicerContext):
            # each RPC runs in its own task, so the value never leaks to other calls
            _user_id.set(user_id)
            async for response in behavior(request_or_iterator, context):
                yield response

        return _rebuild(handler, stream_with_principal)

    async def call_with_principal(request_or_iterator: Any, context: grpc.aio.ServicerContext) -> Any:
        with authenticated_as(user_id):
            result = behavior(request_or_iterator, context)
            if inspect.isawaitable(result):
                result = await result
            return result

    return _rebuild(handler, call_with_principal)


class AuthInterceptor(grpc.aio.ServerInterceptor):
    """Validates bearer tokens and attaches the principal to each call.

    Args:
        validator: Object with ``async validate(token) -> user_id``.
        public_methods: Full method paths that skip validation.
    """

    def __init__(self, validator: Any, public_methods: Iterable[str] = PUBLIC_METHODS) -> None:
        self.validator = validator
        self.public_methods = frozenset(public_methods)

    async def intercept_service(
        self,
        continuation: Callable[[grpc.HandlerCallDetails], Awaitable[grpc.RpcMethodHandler]],
        handler_call_details: grpc.HandlerCallDetails,
    ) -> grpc.RpcMethodHandler:
        handler = await continuation(handler_call_details)
        method = handler_call_details.method

        if handler is None or method in self.public_methods:
            return handler

        token = extract_bearer_token(handler_call_details.invocation_metadata)
        if not token:
            logger.info(f"Rejected {method}: missing authorization header")
            record_auth_rejection(method)
            return _rejecting(handler, "missing authorization header")

        try:
            user_id = await self.validator.validate(token)
        except Exception as e:
            logger.info(f"Rejected {method}: invalid token ({e})")
            record_auth_rejection(method)
            return _rejecting(handler, f"invalid token: {e}")

        if not user_id:
            record_auth_rejection(method)
            return _rejecting(handler, "invalid token claims")

        logger.debug(f"Authenticated {method} for user {user_id}")
        return _authenticated(handler, user_id)
