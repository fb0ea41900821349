"""
Various utility functions.
"""

import marshmallow
import typing
from .errors import ExpressionError


def format_validation_error(e: marshmallow.ValidationError) -> str:
    """
    Format a marshmallow validation error into a readable message, one field per line.
    """
    if isinstance(e.messages, dict):
        return "\n".join(f"{field}: {format_messages(msgs)}" for field, msgs in e.messages.items())
    return format_messages(e.messages)


def format_messages(msgs: typing.Any) -> str:
    if isinstance(msgs, (list, tuple)):
        return " ".join(str(m) for m in msgs)
    if isinstance(msgs, dict):
        return "; ".join(f"{k}: {format_messages(v)}" for k, v in msgs.items())
    return str(msgs)


def highlight_error(source: str, error: ExpressionError) -> str:
    """
    Format a conversion error with the source text and a marker under the part
    of the source that caused it.

    Errors without a location (end of input) are marked right after the end.
    E.g.

        Expected a number, identifier or '(' but found '*'
        2+*3
          ^
    """
    if error.span is None:
        offset, length = len(source.rstrip()), 1
    else:
        offset, length = error.span
    # Tabs and newlines would put the marker in the wrong place
    line = "".join(" " if c.isspace() else c for c in source)
    return f"{error.message}\n{line}\n{' ' * offset}{'^' * length}"
