"""
Prometheus metrics for the HubInvestments gRPC edge.

Usage:
    from shared.utils.metrics import track_grpc_call, record_order_submitted

    @track_grpc_call(service="order", method="SubmitOrder")
    async def SubmitOrder(self, request, context):
        ...

    record_order_submitted("BUY", success=True)
    start_metrics_server(port=9100)
"""

import functools
import inspect
import time
from typing import Any, Callable, Optional, TypeVar

from prometheus_client import (
    REGISTRY,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
    start_http_server,
)

F = TypeVar("F", bound=Callable[..., Any])

grpc_requests_total = Counter(
    "grpc_requests_total",
    "Total number of gRPC requests handled",
    ["service", "method", "status"],
)

grpc_request_duration_seconds = Histogram(
    "grpc_request_duration_seconds",
    "gRPC request duration in seconds",
    ["service", "method"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

grpc_auth_rejections_total = Counter(
    "grpc_auth_rejections_total",
    "Calls rejected by the authentication interceptor",
    ["method"],
)

orders_submitted_total = Counter(
    "orders_submitted_total",
    "Orders submitted through the gRPC edge",
    ["order_side", "status"],
)


def track_grpc_call(service: str, method: str) -> Callable[[F], F]:
    """
    Record count, duration and outcome of a servicer method.

    A call that raises (including ``context.abort``) is counted with
    ``status="error"``. Responses carrying an in-envelope failure are still
    successful RPCs and count as ``status="success"``.

    Args:
        service: Short service label (e.g. "order").
        method: gRPC method name (e.g. "SubmitOrder").
    """

    def decorator(func: F) -> F:
        if not inspect.iscoroutinefunction(func):
            raise TypeError(f"track_grpc_call expects a coroutine function, got {func!r}")

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            start_time = time.perf_counter()
            status = "success"
            try:
                return await func(*args, **kwargs)
            except BaseException:
                status = "error"
                raise
            finally:
                grpc_requests_total.labels(service=service, method=method, status=status).inc()
                grpc_request_duration_seconds.labels(service=service, method=method).observe(
                    time.perf_counter() - start_time
                )

        return wrapper  # type: ignore[return-value]

    return decorator


def record_auth_rejection(method: str) -> None:
    """Count a call rejected before reaching its handler."""
    grpc_auth_rejections_total.labels(method=method).inc()


def record_order_submitted(order_side: str, success: bool) -> None:
    """Count an order submission attempt that reached the use case."""
    status = "success" if success else "failed"
    orders_submitted_total.labels(order_side=order_side or "UNKNOWN", status=status).inc()


def get_metrics(registry: Optional[CollectorRegistry] = None) -> bytes:
    """Render metrics in the Prometheus text exposition format."""
    return generate_latest(registry or REGISTRY)


def start_metrics_server(port: int = 9100, addr: str = "0.0.0.0") -> None:
    """Expose ``/metrics`` over HTTP on a background thread."""
    start_http_server(port, addr=addr)
