"""Logger manager with colored console output, rotation and JSON records.

Drivers use it to trace how phases are routed to diagnostic handlers and how
phase switches resolve. Context passed through :meth:`LoggerManager.context`
is attached to every record emitted inside the block.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
import datetime
import json
import logging
from logging import (
    Handler,
    Logger,
    LogRecord,
    getLevelName,
    getLogRecordFactory,
    setLogRecordFactory,
)
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys
from typing import Any, ClassVar

import colorlog

from scalac_meta.config.defaults import LOGGING_DEFAULTS


@dataclass
class LoggerConfig:
    """Configuration for LoggerManager."""

    log_dir: Path = Path("logs")
    log_level: str = str(LOGGING_DEFAULTS["log_level"])
    log_file_name: str = str(LOGGING_DEFAULTS["log_file_name"])
    max_file_size_mb: int = int(LOGGING_DEFAULTS["max_file_size_mb"])  # type: ignore[call-overload]
    backup_count: int = int(LOGGING_DEFAULTS["backup_count"])  # type: ignore[call-overload]
    structured_logging: bool = bool(LOGGING_DEFAULTS["structured_logging"])
    log_filters: dict[str, Callable[[LogRecord], bool]] | None = None
    log_colors: dict[str, str] | None = None

    DEFAULT_LOG_COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "red,bg_white",
    }

    def __post_init__(self) -> None:
        """Normalize paths and levels."""
        self.log_dir = Path(self.log_dir).resolve()
        self.log_level = self.log_level.upper()
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.log_colors = self.log_colors or self.DEFAULT_LOG_COLORS


class ContextLogRecord(LogRecord):
    """LogRecord carrying the context dict of the enclosing block."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.phase_context: dict[str, Any] = {}


def _as_context_record(record: LogRecord) -> ContextLogRecord:
    return ContextLogRecord(
        record.name,
        record.levelno,
        record.pathname,
        record.lineno,
        record.msg,
        record.args,
        record.exc_info,
        record.funcName,
        record.stack_info,
    )


class StructuredFormatter(logging.Formatter):
    """Render each record as one JSON object."""

    def format(self, record: LogRecord) -> str:
        log_data = {
            "timestamp": datetime.datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
            "context": getattr(record, "phase_context", {}),
        }
        return json.dumps(log_data, ensure_ascii=False, default=str)


class LoggerSettings:
    """Builds logging handlers from a LoggerConfig."""

    def __init__(self, config: LoggerConfig) -> None:
        self.config = config
        self._file_handler: RotatingFileHandler | None = None

    def get_handlers(self) -> tuple[Handler, Handler | None]:
        """Return console and file handlers."""
        return self._get_console_handler(), self._get_file_handler()

    def _apply_filters(self, handler: Handler) -> None:
        if self.config.log_filters:
            for filter_fn in self.config.log_filters.values():
                handler.addFilter(filter_fn)

    def _get_console_handler(self) -> Handler:
        """Create and configure a console handler."""
        handler = colorlog.StreamHandler()
        formatter: logging.Formatter = (
            StructuredFormatter()
            if self.config.structured_logging
            else colorlog.ColoredFormatter(
                "%(log_color)s%(asctime)s - [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
                log_colors=self.config.log_colors,
            )
        )
        handler.setFormatter(formatter)
        self._apply_filters(handler)
        return handler

    def _get_file_handler(self) -> RotatingFileHandler | None:
        """Create and configure a size-rotated file handler."""
        file_path = self.config.log_dir / self.config.log_file_name
        try:
            handler = RotatingFileHandler(
                file_path,
                maxBytes=self.config.max_file_size_mb * 1024 * 1024,
                backupCount=self.config.backup_count,
                encoding="utf-8",
            )
        except OSError as e:
            print(f"Failed to create RotatingFileHandler: {e}", file=sys.stderr)
            return None
        handler.setFormatter(
            StructuredFormatter()
            if self.config.structured_logging
            else logging.Formatter(
                "%(asctime)s - [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        self._apply_filters(handler)
        self._file_handler = handler
        return handler


class LoggerManager:
    """Owns one configured logger and its handlers."""

    def __init__(
        self,
        name: str | LoggerConfig = "scalac_meta",
        config: LoggerConfig | None = None,
    ) -> None:
        if isinstance(name, LoggerConfig):
            config = name
            name = "scalac_meta"
        self.name = name
        self.config = config or LoggerConfig()
        self.settings = LoggerSettings(self.config)
        self._logger = self._configure_logger()

    def get_logger(self) -> Logger:
        """Return the configured logger."""
        return self._logger

    def _configure_logger(self) -> Logger:
        logger = logging.getLogger(self.name)
        if getattr(logger, "_is_configured", False):
            return logger

        logger.setLevel(getLevelName(self.config.log_level))
        console_handler, file_handler = self.settings.get_handlers()
        logger.addHandler(console_handler)
        if file_handler:
            logger.addHandler(file_handler)

        logger.propagate = False
        logger._is_configured = True  # type: ignore[attr-defined]
        return logger

    @contextmanager
    def context(self, **context_kwargs: Any) -> Iterator[Logger]:
        """Attach ``context_kwargs`` to every record logged inside the block."""
        current_factory = getLogRecordFactory()

        def context_log_record_factory(*args: Any, **kwargs: Any) -> LogRecord:
            record = _as_context_record(current_factory(*args, **kwargs))
            record.phase_context = dict(context_kwargs)
            return record

        setLogRecordFactory(context_log_record_factory)
        try:
            yield self._logger
        finally:
            setLogRecordFactory(current_factory)

    def add_filter(self, name: str, filter_fn: Callable[[LogRecord], bool]) -> None:
        """Add a custom log filter to every handler."""
        if self.config.log_filters is None:
            self.config.log_filters = {}
        self.config.log_filters[name] = filter_fn
        for handler in self._logger.handlers:
            handler.addFilter(filter_fn)

    def flush(self) -> None:
        """Flush all handlers to ensure logs are written."""
        for handler in self._logger.handlers:
            handler.flush()


__all__ = [
    "LoggerConfig",
    "LoggerManager",
    "LoggerSettings",
    "StructuredFormatter",
]
