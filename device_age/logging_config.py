"""Logging setup for the age monitors.

Monitor and scheduler code logs through get_logger(), passing context
such as monitor=, age_hours= or level= as keyword arguments. Those land
on the record as ``extra_fields`` and are rendered by whichever formatter
setup_logging() installed. Records emitted inside a scheduler tick also
carry that tick's evaluation ID, so the lage and mage lines of one tick
can be grouped.
"""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

# Short hex ID set by check_all_monitors() for the duration of one tick
evaluation_id_ctx: ContextVar[str | None] = ContextVar("evaluation_id", default=None)

DEFAULT_SERVICE_NAME = "device-age-monitor"


class JsonFormatter(logging.Formatter):
    """One JSON object per line, for log shippers.

    Monitor fields (monitor, age_hours, level, group ...) are merged into
    the top level next to timestamp, level, service, logger and message.
    """

    def __init__(self, service_name: str = DEFAULT_SERVICE_NAME):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "service": self.service_name,
            "logger": record.name,
            "message": record.getMessage(),
        }

        evaluation_id = evaluation_id_ctx.get()
        if evaluation_id:
            payload["evaluation_id"] = evaluation_id

        extra_fields = getattr(record, "extra_fields", None)
        if extra_fields:
            payload.update(extra_fields)

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


class TextFormatter(logging.Formatter):
    """Single-line output for a terminal.

    Example:
        2026-10-19 12:00:00 - device-age-monitor - INFO - [3f2a9c1b7d04] -
        Requested age notification monitor=lage group=LAGE age_hours=25
    """

    def __init__(self, service_name: str = DEFAULT_SERVICE_NAME):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S")
        evaluation_id = evaluation_id_ctx.get() or "-"

        line = (
            f"{timestamp} - {self.service_name} - {record.levelname} - "
            f"[{evaluation_id}] - {record.getMessage()}"
        )

        extra_fields = getattr(record, "extra_fields", None)
        if extra_fields:
            line += " " + " ".join(f"{k}={v}" for k, v in extra_fields.items())

        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"

        return line


def setup_logging(
    log_format: str = "json",
    log_level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
) -> None:
    """Install a single stdout handler on the root logger.

    Called once by scheduler_lifespan() from the values in Settings.

    Args:
        log_format: 'json' for structured logging, 'text' for human-readable
        log_level: Logging level name (DEBUG, INFO, WARNING, ...)
        service_name: Service name included in every record
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    if log_format.lower() == "json":
        handler.setFormatter(JsonFormatter(service_name=service_name))
    else:
        handler.setFormatter(TextFormatter(service_name=service_name))
    root_logger.addHandler(handler)

    # APScheduler logs every job execution at INFO
    logging.getLogger("apscheduler").setLevel(logging.WARNING)


class StructuredLogger:
    """Thin wrapper over logging.Logger taking context as keyword arguments.

    ``logger.info("Evaluated device age", monitor="lage", age_hours=3)``
    """

    def __init__(self, name: str):
        self._logger = logging.getLogger(name)

    def _log(self, level: int, msg: str, extra_fields: dict[str, Any]) -> None:
        extra = {"extra_fields": extra_fields} if extra_fields else {}
        self._logger.log(level, msg, extra=extra)

    def debug(self, msg: str, **extra_fields: Any) -> None:
        self._log(logging.DEBUG, msg, extra_fields)

    def info(self, msg: str, **extra_fields: Any) -> None:
        self._log(logging.INFO, msg, extra_fields)

    def warning(self, msg: str, **extra_fields: Any) -> None:
        self._log(logging.WARNING, msg, extra_fields)

    def error(self, msg: str, **extra_fields: Any) -> None:
        self._log(logging.ERROR, msg, extra_fields)

    def exception(self, msg: str, **extra_fields: Any) -> None:
        """Log at ERROR with the active exception's traceback."""
        extra = {"extra_fields": extra_fields} if extra_fields else {}
        self._logger.exception(msg, extra=extra)


def get_logger(name: str) -> StructuredLogger:
    """Return the StructuredLogger for a module name."""
    return StructuredLogger(name)
