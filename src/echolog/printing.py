"""
printf-style print and log helpers.

Every helper is a thin caller of :func:`write` with a fixed destination.
All of them return the number of bytes written and raise on failure:

- :class:`~echolog.exceptions.FormatMismatch` before anything is written
- :class:`~echolog.exceptions.DestinationError` when a destination rejects the text

No line terminator is ever added.
"""

from __future__ import annotations

import os
from typing import Any

from .exceptions import DestinationError, FormatMismatch
from .formatting import render
from .logging import get_logger
from .sinks import BaseSink, Destination, FileSink, StreamSink, resolve_sink


_STDOUT = StreamSink("stdout")
_STDERR = StreamSink("stderr")


def _render(template: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    try:
        return render(template, *args, **kwargs)
    except FormatMismatch as exc:
        get_logger(__name__).warning("echolog.format_mismatch", template=template, reason=exc.details["reason"])
        raise


def _emit(sink: BaseSink, text: str) -> int:
    # diagnostics are set up before the write, never after it
    logger = get_logger(__name__)
    try:
        written = sink.emit(text)
    except DestinationError as exc:
        logger.warning("echolog.write_failed", destination=sink.name, reason=exc.details["reason"])
        raise
    logger.debug("echolog.write", destination=sink.name, bytes=written)
    return written


def write(destination: Destination, template: str, *args: Any, **kwargs: Any) -> int:
    """Render ``template`` and write it to ``destination``.

    Args:
        destination: ``"stdout"``, ``"stderr"``, a file path (appended to),
            an open text stream, or a :class:`~echolog.sinks.BaseSink`.
        template: printf-style template (``%s``, ``%d``, ``%f``, ``%%``, ``%(name)s``).
        *args: positional values for the template.
        **kwargs: keyword values for ``%(name)`` directives.

    Returns:
        Number of bytes written, in the destination's encoding.
    """
    sink = resolve_sink(destination)
    return _emit(sink, _render(template, args, kwargs))


def print(template: str, *args: Any, **kwargs: Any) -> int:
    """Write to standard output."""
    return _emit(_STDOUT, _render(template, args, kwargs))


def print_error(template: str, *args: Any, **kwargs: Any) -> int:
    """Write to standard error. Rendering is identical to :func:`print`."""
    return _emit(_STDERR, _render(template, args, kwargs))


def print_notice(template: str, *args: Any, **kwargs: Any) -> int:
    """Write a notice to standard output."""
    return _emit(_STDOUT, _render(template, args, kwargs))


def print_warning(template: str, *args: Any, **kwargs: Any) -> int:
    """Write a warning to standard output."""
    return _emit(_STDOUT, _render(template, args, kwargs))


def log_to_file(path: str | os.PathLike[str], template: str, *args: Any, **kwargs: Any) -> int:
    """Append to the file at ``path``; the file is opened and closed per call."""
    return _emit(FileSink(path), _render(template, args, kwargs))


def print_and_log(path: str | os.PathLike[str], template: str, *args: Any, **kwargs: Any) -> int:
    """Append to ``path`` and write to standard output, in that order.

    The message is rendered once. Both writes are always attempted: a failed
    file write does not stop the console write. The first failure is raised
    after both attempts, with ``details["completed"]`` listing the
    destinations that did receive the text.

    Returns:
        Number of bytes written to standard output.
    """
    text = _render(template, args, kwargs)
    completed: list[str] = []
    first_error: DestinationError | None = None
    written = 0

    for sink in (FileSink(path), _STDOUT):
        try:
            written = _emit(sink, text)
        except DestinationError as exc:
            if first_error is None:
                first_error = exc
            continue
        completed.append(sink.name)

    if first_error is not None:
        first_error.details["completed"] = completed
        raise first_error
    return written


notate = print_and_log

__all__ = [
    "log_to_file",
    "notate",
    "print",
    "print_and_log",
    "print_error",
    "print_notice",
    "print_warning",
    "write",
]
