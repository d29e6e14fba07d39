"""
Response envelope and the two failure channels of the gRPC edge.

Every response embeds an ``APIResponse`` block. Domain and validation
failures travel inside it (``success=False``) on an RPC that succeeds at the
transport level. Only authentication and ownership failures fail the RPC
itself. Servicer resolvers return an ``Outcome``; ``deliver`` maps it onto
the wire at the boundary.
"""

import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar, Union

import grpc
from shared.generated import common_pb2

from .interceptors import current_user_id

T = TypeVar("T")


@dataclass(frozen=True)
class Reply(Generic[T]):
    """The RPC succeeds with ``response`` (whose envelope may report failure)."""

    response: T


@dataclass(frozen=True)
class Reject:
    """The RPC fails with a transport status and no response body."""

    code: grpc.StatusCode
    details: str


Outcome = Union[Reply[T], Reject]


def api_response(code: grpc.StatusCode, message: str) -> common_pb2.APIResponse:
    """Build the envelope; ``success`` is true exactly when ``code`` is OK."""
    return common_pb2.APIResponse(
        success=code == grpc.StatusCode.OK,
        message=message,
        code=code.value[0],
        timestamp=int(time.time()),
    )


def rfc3339(moment: datetime) -> str:
    """Format a datetime as RFC3339; naive datetimes are taken as UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def rfc3339_now() -> str:
    return rfc3339(datetime.now(timezone.utc))


def with_error(message: str, error: BaseException) -> str:
    """Append the collaborator error to a human message."""
    detail = str(error) or type(error).__name__
    return f"{message}: {detail}"


def authorize(request_user_id: Optional[str] = None) -> Union[str, Reject]:
    """Resolve the caller and check it owns the request.

    Args:
        request_user_id: ``user_id`` carried in the request body, or None
            for requests that carry no owner.

    Returns:
        The authenticated principal id, or a Reject when the call has no
        principal (UNAUTHENTICATED) or names another user (PERMISSION_DENIED).
    """
    user_id = current_user_id()
    if not user_id:
        return Reject(grpc.StatusCode.UNAUTHENTICATED, "user not authenticated")
    if request_user_id is not None and request_user_id != user_id:
        return Reject(grpc.StatusCode.PERMISSION_DENIED, "access denied")
    return user_id


async def deliver(outcome: "Outcome[Any]", context: grpc.aio.ServicerContext) -> Any:
    """Return the response of a Reply or abort the call for a Reject."""
    if isinstance(outcome, Reject):
        # abort() raises; nothing after it runs
        await context.abort(outcome.code, outcome.details)
    return outcome.response
