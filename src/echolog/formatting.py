"""
Template rendering with Python's native ``%`` operator.

Positional values fill ``%s``/``%d``/``%f`` directives in order; keyword values
fill ``%(name)s`` directives. A single mapping passed positionally fills
``%(name)s`` directives too, the same way stdlib ``logging`` treats record
arguments, but only when the template has such directives; otherwise it is
an ordinary positional value.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from .exceptions import FormatMismatch

# "%(" not preceded by an odd run of "%"
_NAMED_DIRECTIVE = re.compile(r"(?<!%)(?:%%)*%\(")


def render(template: str, *args: Any, **kwargs: Any) -> str:
    """Render ``template`` against ``args`` or ``kwargs``.

    The template is always passed through ``%``, so ``%%`` collapses to ``%``
    even when no arguments are given. Every value must be consumed: a mapping
    or keyword values given to a template without ``%(name)`` directives is a
    mismatch, like any other extra argument.

    Raises:
        FormatMismatch: wrong arity, wrong types, unknown keys, malformed
            directives, unused keyword values, or positional and keyword
            values mixed in one call.
    """
    if not isinstance(template, str):
        raise TypeError(f"template must be str, not {type(template).__name__}")

    arg_count = len(args) + len(kwargs)
    if args and kwargs:
        raise FormatMismatch(
            template=template,
            arg_count=arg_count,
            reason="positional and keyword values cannot be mixed",
        )

    named = _NAMED_DIRECTIVE.search(template) is not None
    if kwargs and not named:
        raise FormatMismatch(
            template=template,
            arg_count=arg_count,
            reason="keyword values given but the template has no %(name) directives",
        )

    values: Any
    if kwargs:
        values = kwargs
    elif named and len(args) == 1 and isinstance(args[0], Mapping):
        values = args[0]
    else:
        values = tuple(args)

    try:
        return template % values
    except (TypeError, ValueError, KeyError) as exc:
        raise FormatMismatch(
            template=template,
            arg_count=arg_count,
            reason=str(exc) if not isinstance(exc, KeyError) else f"missing key {exc}",
        ) from exc
