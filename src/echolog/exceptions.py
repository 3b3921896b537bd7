"""
Unified exception hierarchy for echolog.

Two orthogonal failure classes:
- FormatMismatch: the caller's arguments do not fit the template (caller error)
- DestinationError: the rendered text could not be delivered (I/O error)
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class EchologError(Exception):
    """Root of all echolog exceptions.

    Carries a stable ``code`` and a ``details`` dict for programmatic handling.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class FormatMismatch(EchologError):
    """Raised when arguments do not match the template's directives.

    Rendering happens before any destination is touched, so nothing has been
    written when this is raised.
    """

    def __init__(self, *, template: str, arg_count: int, reason: str) -> None:
        super().__init__(
            f"Arguments do not match template {template!r}: {reason}",
            code="FORMAT_MISMATCH",
            details={"template": template, "arg_count": arg_count, "reason": reason},
        )


class DestinationError(EchologError):
    """Raised when a destination cannot be opened or written.

    The underlying OSError/ValueError is chained as ``__cause__``.
    ``print_and_log`` adds ``details["completed"]`` before re-raising.
    """

    def __init__(self, *, destination: str, reason: str) -> None:
        super().__init__(
            f"Cannot write to {destination}: {reason}",
            code="DESTINATION_UNWRITABLE",
            details={"destination": destination, "reason": reason},
        )
        self.destination = destination
