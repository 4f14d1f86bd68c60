"""Utilities for the Zillow client."""

from zillow.util.log import configure_logging, get_logger, shutdown_logging

__all__ = [
    "configure_logging",
    "get_logger",
    "shutdown_logging",
]
