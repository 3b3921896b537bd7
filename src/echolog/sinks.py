"""
Output destinations (Strategy Pattern).

A sink receives already-rendered text and reports how many bytes it wrote.
Three cases exist: standard output, standard error, and a named file that is
opened in append mode for the duration of one emit.
"""

from __future__ import annotations

import os
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Literal, Union

from .config import settings
from .exceptions import DestinationError

StreamName = Literal["stdout", "stderr"]

Destination = Union[StreamName, str, "os.PathLike[str]", IO[str], "BaseSink"]


def _byte_count(text: str, encoding: str | None, errors: str | None) -> int:
    return len(text.encode(encoding or "utf-8", errors or "strict"))


class BaseSink(ABC):
    """Abstract base class for output destinations."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable destination name used in errors and diagnostics."""
        ...

    @abstractmethod
    def emit(self, text: str) -> int:
        """Write ``text`` verbatim and return the number of bytes written.

        Raises:
            DestinationError: the destination could not be opened or written.
        """
        ...


class StreamSink(BaseSink):
    """Standard stream sink.

    With a stream name, ``sys.stdout``/``sys.stderr`` is looked up on every
    emit so redirection is honoured. An explicit stream object is used as-is.
    """

    def __init__(self, stream: StreamName | IO[str] = "stdout", *, flush: bool | None = None):
        if isinstance(stream, str) and stream not in ("stdout", "stderr"):
            raise ValueError(f"Unknown stream name: {stream!r}. Available: ['stdout', 'stderr']")
        self._stream = stream
        self._flush = flush

    @property
    def name(self) -> str:
        if isinstance(self._stream, str):
            return self._stream
        return getattr(self._stream, "name", None) or type(self._stream).__name__

    def _resolve(self) -> IO[str]:
        if isinstance(self._stream, str):
            return getattr(sys, self._stream)
        return self._stream

    def emit(self, text: str) -> int:
        stream = self._resolve()
        flush = settings.output.flush if self._flush is None else self._flush
        try:
            stream.write(text)
            if flush:
                stream.flush()
        except (OSError, ValueError) as exc:
            raise DestinationError(destination=self.name, reason=str(exc)) from exc
        return _byte_count(
            text,
            getattr(stream, "encoding", None),
            getattr(stream, "errors", None),
        )


class FileSink(BaseSink):
    """Append-mode file sink.

    The file is opened, written and closed inside every emit; no handle is
    kept between calls. Concurrent appenders interleave at whatever
    granularity the platform's append semantics allow.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        *,
        encoding: str | None = None,
        errors: str | None = None,
        create_parents: bool | None = None,
    ):
        self._path = Path(path)
        self._encoding = encoding
        self._errors = errors
        self._create_parents = create_parents

    @property
    def path(self) -> Path:
        return self._path

    @property
    def name(self) -> str:
        return str(self._path)

    def emit(self, text: str) -> int:
        output = settings.output
        encoding = self._encoding or output.encoding
        errors = self._errors or output.errors
        create_parents = output.create_parent_dirs if self._create_parents is None else self._create_parents

        try:
            if create_parents:
                self._path.parent.mkdir(parents=True, exist_ok=True)
            # newline="" keeps the template's line endings byte-for-byte
            with open(self._path, "a", encoding=encoding, errors=errors, newline="") as f:
                f.write(text)
        except (OSError, ValueError) as exc:
            raise DestinationError(destination=self.name, reason=str(exc)) from exc
        return _byte_count(text, encoding, errors)


def resolve_sink(destination: Destination) -> BaseSink:
    """Map a destination value onto a sink.

    ``"stdout"``/``"stderr"`` select a standard stream, any other ``str`` or
    path-like is a file path, an object with ``write`` is used as a stream,
    and a ``BaseSink`` is returned unchanged.
    """
    if isinstance(destination, BaseSink):
        return destination
    if isinstance(destination, str) and destination in ("stdout", "stderr"):
        return StreamSink(destination)
    if isinstance(destination, (str, os.PathLike)):
        return FileSink(destination)
    if callable(getattr(destination, "write", None)):
        return StreamSink(destination)
    raise TypeError(f"Unsupported destination type: {type(destination).__name__}")
