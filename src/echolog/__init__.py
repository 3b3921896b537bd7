"""
echolog: printf-style print and log helpers.

    import echolog

    echolog.print("Hello %s\\n", "World")
    echolog.log_to_file("out.txt", "count=%d\\n", 42)
    echolog.print_and_log("out.txt", "%s\\n", "X")
"""

from .exceptions import DestinationError, EchologError, FormatMismatch
from .formatting import render
from .printing import (
    log_to_file,
    notate,
    print,
    print_and_log,
    print_error,
    print_notice,
    print_warning,
    write,
)
from .sinks import BaseSink, FileSink, StreamSink, resolve_sink

__all__ = [
    "BaseSink",
    "DestinationError",
    "EchologError",
    "FileSink",
    "FormatMismatch",
    "StreamSink",
    "log_to_file",
    "notate",
    "print",
    "print_and_log",
    "print_error",
    "print_notice",
    "print_warning",
    "render",
    "resolve_sink",
    "write",
]
