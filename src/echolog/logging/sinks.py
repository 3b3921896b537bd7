"""
Diagnostic log sinks.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Literal

import orjson
from structlog.typing import EventDict

from .formatters import ConsoleFormatter

LogFormat = Literal["console", "json"]


def orjson_dumps(v: Any, *, default: Any = None) -> str:
    """Fast JSON serialization using orjson."""
    return orjson.dumps(v, default=default or str, option=orjson.OPT_UTC_Z | orjson.OPT_NAIVE_UTC).decode()


class BaseSink(ABC):
    """Abstract base class for diagnostic sinks."""

    @abstractmethod
    def emit(self, event_dict: EventDict) -> None:
        """Emit a log event to the sink."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Close the sink and release resources."""
        ...


class StdioSink(BaseSink):
    """Standard error sink with configurable format.

    The stream is looked up at emit time when none is given, so a redirected
    ``sys.stderr`` is honoured. Diagnostics never go to stdout.

    Args:
        fmt: Output format - "console" (human-readable) or "json"
        stream: Output stream (default: current sys.stderr)
    """

    def __init__(self, fmt: LogFormat = "console", stream: Any = None):
        self._fmt = fmt
        self._stream = stream

    def emit(self, event_dict: EventDict) -> None:
        stream = self._stream or sys.stderr
        if self._fmt == "json":
            output = orjson_dumps(event_dict)
        else:
            use_color = bool(getattr(stream, "isatty", lambda: False)())
            output = ConsoleFormatter.format(event_dict, use_color=use_color)

        stream.write(output + "\n")
        stream.flush()

    def close(self) -> None:
        pass


class FileSink(BaseSink):
    """JSON-lines file sink. The handle stays open until close()."""

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self._path, "a", encoding="utf-8")

    def emit(self, event_dict: EventDict) -> None:
        self._file.write(orjson_dumps(event_dict) + "\n")
        self._file.flush()

    def close(self) -> None:
        self._file.close()
