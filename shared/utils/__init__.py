"""
Shared utilities for HubInvestments services

Contents:
- JSONFormatter: JSON log formatter with per-call context fields
- setup_logger: Logger configuration utility
- track_grpc_call: Prometheus instrumentation for servicer methods
- start_metrics_server: Expose /metrics over HTTP
"""

from .logging import JSONFormatter, setup_logger
from .metrics import (
    get_metrics,
    record_auth_rejection,
    record_order_submitted,
    start_metrics_server,
    track_grpc_call,
)

__all__ = [
    "JSONFormatter",
    "get_metrics",
    "record_auth_rejection",
    "record_order_submitted",
    "setup_logger",
    "start_metrics_server",
    "track_grpc_call",
]
