"""Logging configuration using Loguru.

The library logs through a name-bound Loguru logger. Its records are
disabled on import and handlers are left alone. Applications that want
the library's output call ``setup_logging`` once, which enables them:
- Structured JSON lines for production
- Human-readable colorized output for development
- Intercept standard library logging (httpx, httpcore)
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import orjson
from loguru import logger

from mealdb.core.config import get_settings

if TYPE_CHECKING:
    from typing import Any

    from mealdb.core.config import Settings


class InterceptHandler(logging.Handler):
    """Intercept standard library logging and redirect to Loguru.

    httpx and httpcore log through the standard library; this handler
    sends those records through the same Loguru sinks.
    """

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a log record by forwarding to Loguru."""
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where the logged message originated
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _format_record(record: dict[str, Any]) -> str:
    """Format a log record as a single JSON line.

    The JSON is stored in ``extra["serialized"]`` and referenced from the
    returned template, since Loguru formats the template afterwards.
    """
    extra = {k: v for k, v in record["extra"].items() if k != "serialized"}
    serialize_fields = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "message": record["message"],
        "logger": record["name"],
        "function": record["function"],
        "line": record["line"],
        **extra,
    }

    if record["exception"]:
        serialize_fields["exception"] = {
            "type": record["exception"].type.__name__ if record["exception"].type else None,
            "value": str(record["exception"].value) if record["exception"].value else None,
        }

    record["extra"]["serialized"] = orjson.dumps(serialize_fields, default=str).decode()
    return "{extra[serialized]}\n"


def _format_record_dev(record: dict[str, Any]) -> str:
    """Format a log record for development, with bound extras appended."""
    extra = {k: v for k, v in record["extra"].items() if k not in ("name", "serialized")}

    extra_str = ""
    if extra:
        extra_str = " | " + " ".join(f"{k}={{extra[{k}]}}" for k in extra)

    fmt = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan>"
        f"{extra_str} - "
        "<level>{message}</level>\n"
    )

    if record["exception"]:
        fmt += "{exception}\n"

    return fmt


def setup_logging(
    log_level: str = "INFO",
    log_format: str = "text",
    *,
    is_development: bool = False,
) -> None:
    """Configure Loguru sinks for applications using the client.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format ("json" or "text")
        is_development: Force the human-readable format
    """
    logger.remove()

    use_json = log_format == "json" and not is_development

    if use_json:
        logger.add(
            sys.stdout,
            format=_format_record,
            level=log_level.upper(),
            colorize=False,
            serialize=False,  # Serialization happens in _format_record
            backtrace=True,
            diagnose=False,
        )
    else:
        logger.add(
            sys.stdout,
            format=_format_record_dev,
            level=log_level.upper(),
            colorize=True,
            backtrace=True,
            diagnose=is_development,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    # Transport chatter stays at WARNING
    for logger_name in ["httpx", "httpcore"]:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    logger.enable("mealdb")


def configure_logging(settings: Settings | None = None) -> None:
    """Apply ``setup_logging`` using the logging section of the settings."""
    settings = settings if settings is not None else get_settings()
    setup_logging(
        settings.logging.level,
        settings.logging.format,
        is_development=settings.is_development,
    )


def get_logger(name: str) -> "logger":  # type: ignore[valid-type]
    """Get a logger instance bound to a name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        A Loguru logger instance
    """
    return logger.bind(name=name)


__all__ = [
    "InterceptHandler",
    "configure_logging",
    "get_logger",
    "logger",
    "setup_logging",
]
