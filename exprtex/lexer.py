"""
Split an expression into tokens.
"""

import enum
import lark
import typing
from dataclasses import dataclass


GRAMMAR = r"""
WS: /\s+/
%ignore WS

NUMBER.3: /[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?/
IDENTIFIER.2: /[A-Za-z_][A-Za-z_0-9]*/
OPERATOR: /\S/

start: (NUMBER | IDENTIFIER | OPERATOR)*
"""


class TokenKind(enum.Enum):
    """
    The kind of a token.
    """

    IDENTIFIER = "IDENTIFIER"
    NUMBER = "NUMBER"
    OPERATOR = "OPERATOR"


@dataclass(frozen=True)
class Token:
    """
    A token from the input.

    The offset is the index of the first character of the token in the input.
    """

    text: str
    offset: int
    kind: TokenKind

    @property
    def length(self) -> int:
        return len(self.text)

    def is_operator(self, *ops: str) -> bool:
        """
        Check whether this token is one of the given operators.
        """
        return self.kind is TokenKind.OPERATOR and self.text in ops


def tokenize(text: str) -> typing.List[Token]:
    """
    Split the text into tokens, skipping whitespace.

    This never fails; characters that are not part of a number or identifier
    each become an operator token, meaningful or not.
    """
    return [Token(tok.value, tok.start_pos, TokenKind(tok.type)) for tok in lexer.lex(text)]


lexer = lark.Lark(GRAMMAR, start="start", parser="lalr", lexer="basic")
