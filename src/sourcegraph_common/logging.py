"""Structured logging helpers with correlation IDs.

This module provides a LoggerAdapter that injects structured fields
(correlation_id, operation, status, duration_ms) into every record, and
module-level loggers with NullHandler so the library never configures
handlers on behalf of applications.

Examples
--------
>>> from sourcegraph_common.logging import get_logger
>>> logger = get_logger(__name__)
>>> logger.info("Request sent", extra={"operation": "api_request", "status": "started"})
"""

from __future__ import annotations

import contextvars
import json
import logging
import sys
from contextlib import AbstractContextManager
from typing import TYPE_CHECKING, Any, Self

if TYPE_CHECKING:
    from collections.abc import Mapping, MutableMapping
    from types import TracebackType

    from sourcegraph_common.types import JsonValue

__all__ = [
    "CorrelationContext",
    "JsonFormatter",
    "LoggerAdapter",
    "get_correlation_id",
    "get_logger",
    "set_correlation_id",
    "setup_logging",
    "with_fields",
]

_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "sourcegraph_correlation_id", default=None
)

_STRUCTURED_FIELDS = ("correlation_id", "operation", "status", "duration_ms")

# Attributes every LogRecord carries; anything else came from ``extra``.
_RESERVED_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "message",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "thread",
        "threadName",
        "taskName",
        "exc_info",
        "exc_text",
        "stack_info",
    }
)


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Formats log records as one JSON object per line with timestamp, level,
    logger name, message and the structured fields. The correlation ID is
    taken from context when the record does not carry one.

    Examples
    --------
    >>> import logging
    >>> handler = logging.StreamHandler()
    >>> handler.setFormatter(JsonFormatter())
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON.

        Parameters
        ----------
        record : logging.LogRecord
            Log record to format. Extra fields in ``record.__dict__`` are
            included when they are JSON-friendly scalars or containers.

        Returns
        -------
        str
            JSON-encoded log entry.
        """
        data: dict[str, JsonValue] = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S") + f".{int(record.msecs):03d}Z",
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        for field in _STRUCTURED_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                data[field] = value

        if "correlation_id" not in data:
            ctx_correlation_id = _correlation_id.get()
            if ctx_correlation_id is not None:
                data["correlation_id"] = ctx_correlation_id

        for key, value in record.__dict__.items():
            if (
                key not in _RESERVED_ATTRS
                and key not in data
                and not key.startswith("_")
                and value is not None
                and isinstance(value, (str, int, float, bool, list, dict))
            ):
                data[key] = value

        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(data, default=str)


class LoggerAdapter(logging.LoggerAdapter):  # type: ignore[type-arg]
    """Logger adapter that injects structured context fields.

    Every record gets ``operation`` and ``status`` (inferred from the level
    when not given) and the active correlation ID.

    Parameters
    ----------
    logger : logging.Logger
        Base logger instance to wrap.
    extra : Mapping[str, object] | None, optional
        Fields bound to every record emitted through this adapter.
        Defaults to None.
    """

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        """Merge bound fields and the correlation ID into ``extra``.

        Parameters
        ----------
        msg : Any
            Log message.
        kwargs : MutableMapping[str, Any]
            Keyword arguments from the logging call.

        Returns
        -------
        tuple[Any, MutableMapping[str, Any]]
            The message and kwargs with a populated ``extra`` dict.
        """
        extra: dict[str, Any] = dict(kwargs.get("extra") or {})
        for key, value in (self.extra or {}).items():
            extra.setdefault(key, value)
        if "correlation_id" not in extra:
            ctx_correlation_id = _correlation_id.get()
            if ctx_correlation_id is not None:
                extra["correlation_id"] = ctx_correlation_id
        kwargs["extra"] = extra
        return msg, kwargs

    def log(self, level: int, msg: object, *args: object, **kwargs: Any) -> None:
        """Log ``msg`` at ``level`` with structured fields.

        Parameters
        ----------
        level : int
            Logging level.
        msg : object
            Log message.
        *args : object
            Message formatting arguments.
        **kwargs : Any
            Keyword arguments forwarded to :meth:`logging.Logger.log`.
        """
        if not self.isEnabledFor(level):
            return
        msg, kwargs = self.process(msg, kwargs)
        self._ensure_operation_and_status(kwargs["extra"], level)
        self.logger.log(level, msg, *args, **kwargs)

    @staticmethod
    def _ensure_operation_and_status(extra: dict[str, Any], level: int) -> None:
        if "operation" not in extra:
            extra["operation"] = "unknown"
        if "status" not in extra:
            if level >= logging.ERROR:
                extra["status"] = "error"
            elif level >= logging.WARNING:
                extra["status"] = "warning"
            else:
                extra["status"] = "success"

    def log_success(
        self,
        message: str,
        *,
        operation: str | None = None,
        duration_ms: float | None = None,
        **fields: object,
    ) -> None:
        """Log a successful operation with structured fields.

        Parameters
        ----------
        message : str
            Success message.
        operation : str | None, optional
            Operation name. Defaults to None.
        duration_ms : float | None, optional
            Operation duration in milliseconds. Defaults to None.
        **fields : object
            Additional structured fields.
        """
        extra: dict[str, object] = {"status": "success"}
        if operation is not None:
            extra["operation"] = operation
        if duration_ms is not None:
            extra["duration_ms"] = duration_ms
        extra.update(fields)
        self.info(message, extra=extra)

    def log_failure(
        self,
        message: str,
        *,
        exception: Exception | None = None,
        operation: str | None = None,
        duration_ms: float | None = None,
        level: int = logging.ERROR,
        **fields: object,
    ) -> None:
        """Log a failure with structured fields.

        Parameters
        ----------
        message : str
            Failure message.
        exception : Exception | None, optional
            Exception that caused the failure; its type and text are recorded
            as ``error_type`` and ``error_detail``. Defaults to None.
        operation : str | None, optional
            Operation name. Defaults to None.
        duration_ms : float | None, optional
            Operation duration in milliseconds. Defaults to None.
        level : int, optional
            Level to log at. Defaults to ``logging.ERROR``.
        **fields : object
            Additional structured fields.
        """
        extra: dict[str, object] = {"status": "error"}
        if operation is not None:
            extra["operation"] = operation
        if duration_ms is not None:
            extra["duration_ms"] = duration_ms
        if exception is not None:
            extra["error_type"] = exception.__class__.__name__
            extra["error_detail"] = str(exception)
        extra.update(fields)
        self.log(level, message, extra=extra)


def get_logger(name: str) -> LoggerAdapter:
    """Get a logger adapter with structured logging support.

    Library loggers get a NullHandler when they have no handlers, so nothing
    is printed unless the application configures logging (see
    :func:`setup_logging`).

    Parameters
    ----------
    name : str
        Logger name (typically ``__name__``).

    Returns
    -------
    LoggerAdapter
        Adapter injecting structured fields.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return LoggerAdapter(logger, {})


def setup_logging(level: int | str = logging.INFO) -> None:
    """Configure the root logger to emit JSON lines on stdout.

    Parameters
    ----------
    level : int | str, optional
        Level threshold, as a number or a name such as ``"DEBUG"``.
        Defaults to ``logging.INFO``.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=level, handlers=[handler], force=True)


def set_correlation_id(correlation_id: str | None) -> None:
    """Set the correlation ID for the current context (None clears it)."""
    _correlation_id.set(correlation_id)


def get_correlation_id() -> str | None:
    """Return the correlation ID for the current context, if any."""
    return _correlation_id.get()


class CorrelationContext:
    """Context manager that sets a correlation ID and restores the previous one.

    Parameters
    ----------
    correlation_id : str | None
        Correlation ID to set while the context is active.

    Examples
    --------
    >>> with CorrelationContext("req-123"):
    ...     assert get_correlation_id() == "req-123"
    """

    def __init__(self, correlation_id: str | None) -> None:
        self.correlation_id = correlation_id
        self._token: contextvars.Token[str | None] | None = None

    def __enter__(self) -> Self:
        self._token = _correlation_id.set(self.correlation_id)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._token is not None:
            _correlation_id.reset(self._token)
            self._token = None


class _WithFieldsContext(AbstractContextManager[LoggerAdapter]):
    """Context manager implementation for :func:`with_fields`."""

    def __init__(
        self, logger: logging.Logger | LoggerAdapter, fields: Mapping[str, object]
    ) -> None:
        self._logger = logger
        self._fields = dict(fields)
        self._token: contextvars.Token[str | None] | None = None

    def __enter__(self) -> LoggerAdapter:
        if isinstance(self._logger, LoggerAdapter):
            base_logger = self._logger.logger
            fields = {**(self._logger.extra or {}), **self._fields}
        else:
            base_logger = self._logger
            fields = self._fields
        correlation_id = self._fields.get("correlation_id")
        if isinstance(correlation_id, str):
            self._token = _correlation_id.set(correlation_id)
        return LoggerAdapter(base_logger, fields)

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._token is not None:
            _correlation_id.reset(self._token)
            self._token = None


def with_fields(
    logger: logging.Logger | LoggerAdapter,
    **fields: object,
) -> AbstractContextManager[LoggerAdapter]:
    """Bind structured fields to every record logged inside the context.

    A ``correlation_id`` field is also set in context for the duration of
    the block, so requests issued inside it carry the ID.

    Parameters
    ----------
    logger : logging.Logger | LoggerAdapter
        Base logger (may already be an adapter).
    **fields : object
        Fields to inject (e.g., ``correlation_id``, ``operation``).

    Returns
    -------
    AbstractContextManager[LoggerAdapter]
        Context manager yielding an adapter with the bound fields.

    Examples
    --------
    >>> logger = get_logger(__name__)
    >>> with with_fields(logger, correlation_id="req-1", operation="sync") as log:
    ...     log.info("Syncing")
    """
    return _WithFieldsContext(logger, fields)
