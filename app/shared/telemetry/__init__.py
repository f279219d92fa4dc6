"""Shared telemetry: logging setup."""

from app.shared.telemetry.logging import RequestIdFilter, get_logger, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "RequestIdFilter",
]
