r"""
Convert simple, easy-to-read math expressions into LaTeX.

E.g. `(a+b)*c/2` becomes `\frac{\left(a+b\right) c}{2}`.
"""

import logging
from .errors import ExpressionError, ExpressionSyntaxError, FormatError, InternalError
from .lexer import Token, TokenKind, tokenize
from .nodes import Node
from .parser import parse
from .renderer import render


__version__ = "v0.1.0"


logger = logging.getLogger("exprtex")


def str_to_latex(expr: str) -> str:
    """
    Parse an expression and convert it into LaTeX.

    Raises ExpressionSyntaxError or FormatError if the expression is invalid.
    """
    latex = render(parse(expr))
    logger.debug(f"Converted {expr!r} into {latex!r}")
    return latex
