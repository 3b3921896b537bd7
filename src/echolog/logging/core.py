"""
Core diagnostics configuration and initialization logic.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

import structlog
from structlog.typing import EventDict, WrappedLogger

from .sinks import BaseSink, FileSink, LogFormat, StdioSink

# =============================================================================
# Global State
# =============================================================================

_sinks: list[BaseSink] = []
_configured = False


def get_logger(name: str | None = None) -> structlog.typing.FilteringBoundLogger:
    """Get a structured logger instance, configuring from settings on first use."""
    if not _configured:
        configure_from_settings()
    return structlog.get_logger(_name=name or "echolog")


# =============================================================================
# Structlog Processors
# =============================================================================


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add ISO 8601 timestamp to log event."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def add_logger_name(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Move the bound ``_name`` into the ``logger`` key."""
    event_dict["logger"] = event_dict.pop("_name", "echolog")
    return event_dict


def multi_sink_renderer(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
    """Render to all configured sinks. Returns empty to suppress default output."""
    for sink in _sinks:
        try:
            sink.emit(dict(event_dict))
        except Exception:
            pass  # diagnostics must never break a user's write
    return ""


class _NopFile:
    def write(self, s: str) -> None:
        pass

    def flush(self) -> None:
        pass


_NOP_FILE = _NopFile()


class SilentPrintLoggerFactory:
    """Logger factory whose loggers write nowhere; sinks do the real output."""

    def __call__(self, *args: Any) -> structlog.PrintLogger:
        return structlog.PrintLogger(file=_NOP_FILE)


# =============================================================================
# Configuration Logic
# =============================================================================


def _initialize_sinks(sinks: str, fmt: str, file_path: str) -> list[dict[str, str]]:
    """Build the requested sinks and return the ones that could not be opened.

    A sink that fails to open is skipped; if nothing is left, stderr is used.
    """
    for sink in _sinks:
        sink.close()
    _sinks.clear()

    log_format: LogFormat = "json" if fmt.lower() == "json" else "console"
    failed: list[dict[str, str]] = []

    for name in (s.strip().lower() for s in sinks.split(",")):
        if name == "stdio":
            _sinks.append(StdioSink(fmt=log_format))
        elif name == "file":
            try:
                _sinks.append(FileSink(file_path))
            except OSError as exc:
                failed.append({"sink": "file", "path": file_path, "reason": str(exc)})

    if failed and not _sinks:
        _sinks.append(StdioSink(fmt=log_format))
    return failed


def configure_logging(
    *,
    level: str = "WARNING",
    sinks: str = "stdio",
    fmt: str = "console",
    file_path: str = "logs/echolog.log",
) -> None:
    """
    Configure echolog's diagnostics.

    Never raises for a sink that cannot be opened: the sink is dropped and an
    ``echolog.diagnostics_sink_failed`` warning is logged to the remaining ones.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        sinks: Comma-separated sink names (stdio, file)
        fmt: Output format for the stdio sink (console, json)
        file_path: Path for the file sink
    """
    global _configured

    failed = _initialize_sinks(sinks, fmt, file_path)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            add_timestamp,
            add_logger_name,
            structlog.processors.format_exc_info,
            multi_sink_renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper(), logging.WARNING)),
        context_class=dict,
        logger_factory=SilentPrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
    _configured = True

    for failure in failed:
        structlog.get_logger(_name=__name__).warning("echolog.diagnostics_sink_failed", **failure)


def configure_from_settings() -> None:
    """Configure diagnostics from ``settings.logging``.

    Invalid ``ECHOLOG_LOG_*`` values fall back to the defaults of
    :func:`configure_logging` and are reported as a warning.
    """
    from pydantic import ValidationError

    from echolog.config import settings

    try:
        log_settings = settings.logging
    except ValidationError as exc:
        configure_logging()
        structlog.get_logger(_name=__name__).warning(
            "echolog.logging_settings_invalid",
            fields=[".".join(str(p) for p in err["loc"]) for err in exc.errors()],
        )
        return

    configure_logging(
        level=log_settings.level.value,
        sinks=log_settings.sinks,
        fmt=log_settings.format.value,
        file_path=log_settings.file_path,
    )


def shutdown_logging() -> None:
    """Close all sinks. The next get_logger() call reconfigures from settings."""
    global _configured

    for sink in _sinks:
        sink.close()
    _sinks.clear()
    _configured = False
