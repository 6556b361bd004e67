"""Logging setup for the mealdb client."""

from mealdb.observability.logging import configure_logging, get_logger, setup_logging


__all__ = [
    "configure_logging",
    "get_logger",
    "setup_logging",
]
