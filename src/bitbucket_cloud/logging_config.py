"""Logging configuration for bitbucket-cloud."""

import logging
import os
import sys
import threading
import time
import types
import uuid
from collections.abc import Mapping
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, cast

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] [%(context)s] %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_DIRECTORY = "logs"
MAX_LOG_SIZE = 5 * 1024 * 1024  # 5 MB
LOG_BACKUP_COUNT = 3


class ContextualLogger(logging.Logger):
    """Logger that stamps every record with the current operation context."""

    def __init__(self, name: str, level: int = 0) -> None:
        super().__init__(name, level)
        self._context_data = threading.local()

    @property
    def context(self) -> dict[str, Any]:
        """The context of the current thread (a copy)."""
        return dict(getattr(self._context_data, "data", {}))

    def _get_context_str(self) -> str:
        data = getattr(self._context_data, "data", {})
        if not data:
            return "no-context"
        return ",".join(f"{key}={value}" for key, value in data.items())

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
        extra = dict(extra or {})
        extra.setdefault("context", self._get_context_str())
        super()._log(level, msg, args, exc_info, extra, stack_info, stacklevel + 1)

    def set_context(self, **kwargs: Any) -> None:
        """
        Add values to the context of the current thread.

        Args:
            **kwargs: Key-value pairs to add to the context
        """
        if not hasattr(self._context_data, "data"):
            self._context_data.data = {}
        self._context_data.data.update(kwargs)

    def restore_context(self, data: dict[str, Any]) -> None:
        """Replace the context of the current thread."""
        self._context_data.data = data

    def clear_context(self) -> None:
        """Remove all context data of the current thread."""
        self._context_data.data = {}


class ContextFilter(logging.Filter):
    """Give records from plain child loggers an empty context."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            record.context = "no-context"
        return True


class LoggingContextManager:
    """Context manager that logs the start and failure of an operation."""

    def __init__(
        self, logger: ContextualLogger, operation: str, **context: Any
    ) -> None:
        """
        Initialize the logging context manager.

        Args:
            logger: Contextual logger
            operation: Name of the operation being executed
            **context: Additional context data
        """
        self.logger = logger
        self.operation = operation
        self.context = context.copy()
        self.trace_id = context.get("trace_id", str(uuid.uuid4())[:8])
        self.start_time = time.monotonic()
        self.old_context: dict[str, Any] = {}

    def __enter__(self) -> "LoggingContextManager":
        self.old_context = self.logger.context
        self.context["operation"] = self.operation
        self.context["trace_id"] = self.trace_id
        self.logger.set_context(**self.context)
        self.logger.debug(f"Operation started: {self.operation}")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        duration = time.monotonic() - self.start_time
        if exc_type:
            self.logger.error(
                f"Operation failed: {self.operation} after {duration:.3f}s - {exc_val}"
            )
        else:
            self.logger.debug(
                f"Operation completed: {self.operation} in {duration:.3f}s"
            )
        self.logger.restore_context(self.old_context)


def setup_logger(
    name: str = "bitbucket-cloud",
    level: str | None = None,
    log_to_file: bool = False,
    log_dir: str | None = None,
    log_format: str | None = None,
) -> ContextualLogger:
    """
    Configure and return a contextual logger.

    Calling it again for the same name updates the level without stacking
    handlers. A file handler is still added on a later call that asks for one.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, etc.), defaults to LOG_LEVEL env var
        log_to_file: If True, also log to a rotating file
        log_dir: Directory to store log files
        log_format: Log format

    Returns:
        Configured contextual logger
    """
    logging.setLoggerClass(ContextualLogger)
    logger = logging.getLogger(name)

    log_level = level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    logger.setLevel(getattr(logging, log_level.upper()))

    formatter = logging.Formatter(log_format or os.getenv("LOG_FORMAT", DEFAULT_FORMAT))

    if not getattr(logger, "_bitbucket_configured", False):
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.addFilter(ContextFilter())
        logger.addHandler(console_handler)

    has_file_handler = any(
        isinstance(handler, RotatingFileHandler) for handler in logger.handlers
    )
    if log_to_file and not has_file_handler:
        log_directory = Path(log_dir or os.getenv("LOG_DIR", DEFAULT_LOG_DIRECTORY))
        log_directory.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_directory / f"{name}.log",
            maxBytes=MAX_LOG_SIZE,
            backupCount=LOG_BACKUP_COUNT,
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(ContextFilter())
        logger.addHandler(file_handler)

    logger.propagate = False
    logger._bitbucket_configured = True  # type: ignore[attr-defined]
    return cast(ContextualLogger, logger)


def log_operation(
    logger: ContextualLogger, operation: str, **context: Any
) -> LoggingContextManager:
    """
    Create a context manager for operation logging.

    Args:
        logger: Contextual logger
        operation: Name of the operation
        **context: Additional context data

    Returns:
        Context manager configured for operation logging
    """
    return LoggingContextManager(logger, operation, **context)
