"""
Diagnostics for echolog itself.

structlog pipeline fanned out to stderr (console/json) and file (JSON lines)
sinks. Never writes to stdout.

Library: structlog + orjson.
"""

from .core import configure_logging, get_logger, shutdown_logging

__all__ = ["configure_logging", "get_logger", "shutdown_logging"]
