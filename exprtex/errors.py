"""
Errors raised while converting an expression.

Every error carries the token it refers to (if any), so that the caller can
highlight the offending part of the input.
"""

import typing
from .lexer import Token


class ExpressionError(ValueError):
    """
    Base class for all conversion errors.

    The kind is one of "syntax", "format" or "internal".
    """

    kind = None # type: str

    def __init__(self, message: str, token: typing.Optional[Token] = None):
        super().__init__(message)
        self.message = message
        self.token = token

    @property
    def span(self) -> typing.Optional[typing.Tuple[int, int]]:
        """
        The (offset, length) of the token this error refers to, or None if the
        error happened at the end of the input.
        """
        if self.token is None:
            return None
        return (self.token.offset, self.token.length)


class ExpressionSyntaxError(ExpressionError):
    """
    The input could not be parsed.

    If the token is None, the input ended too early.
    """

    kind = "syntax"


class FormatError(ExpressionError):
    """
    The expression parsed but cannot be converted into LaTeX, e.g. because of an
    unknown function or an invalid identifier.
    """

    kind = "format"


class InternalError(ExpressionError):
    """
    The renderer does not know how to handle a node.
    """

    kind = "internal"
