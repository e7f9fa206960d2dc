"""Logging configuration for MCP Jira Tasks.

Records carry a ``context`` field (``key=value`` pairs such as the tool being
run and a trace id) so log lines of one tool call can be told apart. The
context lives in a ``contextvars.ContextVar``: concurrent tool calls each see
their own, and it follows the call into ``asyncio.to_thread`` workers.
"""

import logging
import os
import sys
import time
import types
import uuid
from collections.abc import Mapping
from contextvars import ContextVar, Token
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, cast

DEFAULT_LOGGER_NAME = "mcp-jira-tasks"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] [%(context)s] %(message)s"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_DIRECTORY = "logs"
MAX_LOG_SIZE = 10 * 1024 * 1024  # bytes per file before rotation
LOG_BACKUP_COUNT = 5
NO_CONTEXT = "no-context"

# Shared by every ContextualLogger so records of module loggers carry the
# context of the operation they run in.
_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})


def format_context() -> str:
    """Render the current context as ``k1=v1,k2=v2``, or ``no-context``."""
    values = _log_context.get()
    if not values:
        return NO_CONTEXT
    return ",".join(f"{key}={value}" for key, value in values.items())


class ContextualLogger(logging.Logger):
    """Logger that stamps every record with the current operation context."""

    def _log(
        self,
        level: int,
        msg: object,
        args: tuple[object, ...] | Mapping[str, object],
        exc_info: Any = None,
        extra: Mapping[str, object] | None = None,
        stack_info: bool = False,
        stacklevel: int = 1,
    ) -> None:
        fields = dict(extra or {})
        fields.setdefault("context", format_context())
        super()._log(level, msg, args, exc_info, fields, stack_info, stacklevel + 1)

    def set_context(self, **values: Any) -> Token:
        """Add values to the context.

        Returns:
            Token that restores the previous context when passed to
            ``reset_context``
        """
        return _log_context.set({**_log_context.get(), **values})

    def reset_context(self, token: Token) -> None:
        _log_context.reset(token)

    def get_context(self) -> dict[str, Any]:
        return dict(_log_context.get())

    def clear_context(self) -> None:
        _log_context.set({})


class ContextFilter(logging.Filter):
    """Adds the current context to records from plain loggers.

    Handlers installed by ``setup_logger`` format ``%(context)s``, which
    records created by non-contextual loggers lack.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            record.context = format_context()
        return True


class OperationLog:
    """Logs the start, duration and outcome of one operation.

    The operation name, a trace id and any extra values are added to the
    logging context for the duration of the block.
    """

    def __init__(self, logger: logging.Logger, operation: str, **context: Any) -> None:
        self.logger = logger
        self.operation = operation
        self.trace_id = str(context.pop("trace_id", None) or uuid.uuid4().hex[:8])
        self.context = context
        self._token: Token | None = None
        self._started = 0.0

    def __enter__(self) -> "OperationLog":
        self._token = _log_context.set(
            {
                **_log_context.get(),
                "operation": self.operation,
                "trace_id": self.trace_id,
                **self.context,
            }
        )
        self._started = time.monotonic()
        self.logger.info(f"Operation started: {self.operation}")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        elapsed = time.monotonic() - self._started
        if exc_type is None:
            self.logger.debug(f"Operation completed: {self.operation} in {elapsed:.3f}s")
        else:
            self.logger.error(
                f"Operation failed: {self.operation} after {elapsed:.3f}s - {exc_val}"
            )

        if self._token is not None:
            _log_context.reset(self._token)
            self._token = None


def setup_logger(
    name: str = DEFAULT_LOGGER_NAME,
    level: str | None = None,
    log_to_file: bool = False,
    log_dir: str | None = None,
    log_format: str | None = None,
) -> ContextualLogger:
    """
    Configure the application logger.

    Console output is written to stderr; stdout belongs to the stdio
    transport. Calling this again replaces the handlers of the previous call.

    Args:
        name: Logger name, parent of the package's module loggers
        level: Level name; LOG_LEVEL or INFO when omitted
        log_to_file: Also write to a rotating file
        log_dir: Directory of the log file; LOG_DIR or ./logs when omitted
        log_format: Format string; LOG_FORMAT or DEFAULT_FORMAT when omitted

    Returns:
        The configured ContextualLogger
    """
    logging.setLoggerClass(ContextualLogger)
    logger = logging.getLogger(name)

    level_name = (level or os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, None)
    logger.setLevel(log_level if isinstance(log_level, int) else logging.INFO)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(log_format or os.getenv("LOG_FORMAT") or DEFAULT_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_to_file:
        directory = Path(log_dir or os.getenv("LOG_DIR") or DEFAULT_LOG_DIRECTORY)
        directory.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                directory / f"{name}.log",
                maxBytes=MAX_LOG_SIZE,
                backupCount=LOG_BACKUP_COUNT,
            )
        )

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(ContextFilter())
        logger.addHandler(handler)

    # Module loggers propagate here; the root logger stays untouched
    logger.propagate = False
    return cast(ContextualLogger, logger)


def log_operation(logger: logging.Logger, operation: str, **context: Any) -> OperationLog:
    """Context manager logging ``operation`` on ``logger``.

    Example:
        with log_operation(logger, "create_task", project="PROJ"):
            ...
    """
    return OperationLog(logger, operation, **context)
