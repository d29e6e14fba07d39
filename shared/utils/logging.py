"""
Structured JSON logging for HubInvestments services.

Every log line is a single JSON object so the edge service can be shipped to
any log collector without a parsing step. Per-call information (such as the
authenticated principal) is attached through an optional context provider,
which keeps this module free of any dependency on the gRPC layer.
"""

import json
import logging
import os
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

ContextProvider = Callable[[], Dict[str, Any]]


class JSONFormatter(logging.Formatter):
    """
    Logging formatter that renders records as JSON objects.

    Fields emitted on every line:
    - timestamp: ISO 8601 UTC timestamp with millisecond precision
    - service: Name of the emitting service
    - level: Log level name
    - logger: Name of the logger that produced the record
    - message: The formatted log message

    Fields passed through ``extra=`` and fields returned by the context
    provider are merged in; ``extra`` wins on key collisions.

    Example:
        >>> formatter = JSONFormatter(
        ...     service_name="hubinvest-grpc",
        ...     context=lambda: {"user_id": "u-1"},
        ... )
        >>> logger.info("Order submitted", extra={"order_id": "ord-9"})
        {"timestamp": "...", "service": "hubinvest-grpc", "level": "INFO",
         "logger": "...", "message": "Order submitted", "user_id": "u-1",
         "order_id": "ord-9"}
    """

    _RESERVED_ATTRS = frozenset({
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "pathname", "process", "processName", "relativeCreated",
        "stack_info", "exc_info", "exc_text", "thread", "threadName",
        "taskName", "message",
    })

    def __init__(self, service_name: str, context: Optional[ContextProvider] = None) -> None:
        """
        Args:
            service_name: Value of the ``service`` field on every entry.
            context: Optional callable returning extra fields for the
                current call; ``None`` values are dropped.
        """
        super().__init__()
        self.service_name = service_name
        self.context = context

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": self._format_timestamp(record.created),
            "service": self.service_name,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if self.context is not None:
            for key, value in self.context().items():
                if value is not None:
                    log_entry[key] = self._serialize_value(value)

        for key, value in record.__dict__.items():
            if key not in self._RESERVED_ATTRS and not key.startswith("_"):
                log_entry[key] = self._serialize_value(value)

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False)

    def _format_timestamp(self, created: float) -> str:
        dt = datetime.fromtimestamp(created, tz=timezone.utc)
        return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"

    def _serialize_value(self, value: Any) -> Any:
        if isinstance(value, (str, int, float, bool, type(None), list, dict)):
            return value
        return str(value)


def setup_logger(
    service_name: str,
    level: Optional[str] = None,
    context: Optional[ContextProvider] = None,
    logger_name: Optional[str] = None,
) -> logging.Logger:
    """
    Configure a logger to write JSON lines to stderr.

    The level comes from ``level``, then the ``LOG_LEVEL`` environment
    variable, then defaults to INFO. Existing handlers on the logger are
    replaced so repeated calls do not duplicate output, and propagation to
    the root logger is disabled.

    Args:
        service_name: Value of the ``service`` field, and the logger name
            when ``logger_name`` is not given.
        level: Optional level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        context: Optional per-call context provider, see JSONFormatter.
        logger_name: Logger to configure. Passing a package name (e.g.
            ``hubinvest_grpc``) configures every module logger below it.

    Returns:
        The configured logger.
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(logger_name or service_name)
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setLevel(numeric_level)
    handler.setFormatter(JSONFormatter(service_name=service_name, context=context))
    logger.addHandler(handler)

    logger.propagate = False
    return logger
