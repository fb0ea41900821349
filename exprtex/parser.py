"""
A recursive descent parser for expressions.

Grammar:

    expr    ::= mulexpr { ("+" | "-") mulexpr }
    mulexpr ::= powexpr { ("*" | "/") powexpr }
    powexpr ::= { "+" } ( "-" powexpr | atom [ "^" powexpr ] )
    atom    ::= identifier [ "(" expr { "," expr } ")" ] | number | "(" expr ")"
"""

import logging
import typing
from . import nodes
from .errors import ExpressionSyntaxError
from .lexer import Token, TokenKind, tokenize


logger = logging.getLogger("exprtex")


BINARY_OPS = {
    "+": nodes.Add,
    "-": nodes.Subtract,
    "*": nodes.Multiply,
    "/": nodes.Divide,
}


class Parser:
    """
    Parses a single list of tokens.

    Create a new parser for each input.
    """

    def __init__(self, tokens: typing.List[Token]):
        self.tokens = tokens
        self.index = 0

    def peek(self) -> typing.Optional[Token]:
        """
        Get the next token without consuming it, or None at the end of the input.
        """
        return self.tokens[self.index] if self.index < len(self.tokens) else None

    def next(self) -> Token:
        """
        Consume and return the next token.

        Raises ExpressionSyntaxError (with no token) at the end of the input.
        """
        token = self.peek()
        if token is None:
            raise ExpressionSyntaxError("Unexpected end of input")
        self.index += 1
        return token

    def accept(self, *ops: str) -> typing.Optional[Token]:
        """
        Consume the next token if it is one of the given operators.
        """
        token = self.peek()
        if token is not None and token.is_operator(*ops):
            self.index += 1
            return token
        return None

    def expect(self, *ops: str) -> Token:
        """
        Consume the next token, which must be one of the given operators.
        """
        token = self.peek()
        if token is None or not token.is_operator(*ops):
            expected = " or ".join(f"'{op}'" for op in ops)
            if token is None:
                raise ExpressionSyntaxError(f"Expected {expected} but reached the end of input")
            raise ExpressionSyntaxError(f"Expected {expected} but found '{token.text}'", token)
        self.index += 1
        return token

    def parse(self) -> nodes.Node:
        """
        Parse the entire input.

        Raises ExpressionSyntaxError if the input is invalid or has tokens left over.
        """
        root = self.parse_expr()
        token = self.peek()
        if token is not None:
            raise ExpressionSyntaxError(f"Unexpected '{token.text}' after end of expression", token)
        return root

    def parse_expr(self) -> nodes.Node:
        left = self.parse_mulexpr()
        while True:
            op = self.accept("+", "-")
            if op is None:
                return left
            left = BINARY_OPS[op.text](op, left, self.parse_mulexpr())

    def parse_mulexpr(self) -> nodes.Node:
        left = self.parse_powexpr()
        while True:
            op = self.accept("*", "/")
            if op is None:
                return left
            left = BINARY_OPS[op.text](op, left, self.parse_powexpr())

    def parse_powexpr(self) -> nodes.Node:
        # Unary plus does nothing
        while self.accept("+"):
            pass
        op = self.accept("-")
        if op is not None:
            return nodes.Negate(op, self.parse_powexpr())
        base = self.parse_atom()
        op = self.accept("^")
        if op is not None:
            # Recurse for the exponent to get right-associativity
            return nodes.Power(op, base, self.parse_powexpr())
        return base

    def parse_atom(self) -> nodes.Node:
        token = self.next()
        if token.kind is TokenKind.IDENTIFIER:
            if self.accept("("):
                args = [self.parse_expr()]
                while self.expect(",", ")").text == ",":
                    args.append(self.parse_expr())
                return nodes.FunctionCall(token, *args)
            return nodes.Identifier(token)
        if token.kind is TokenKind.NUMBER:
            return nodes.Number(token)
        if token.is_operator("("):
            inner = self.parse_expr()
            self.expect(")")
            return inner
        raise ExpressionSyntaxError(f"Expected a number, identifier or '(' but found '{token.text}'", token)


def parse(text: str) -> nodes.Node:
    """
    Parse an expression into a tree.

    Raises ExpressionSyntaxError if the expression is invalid or too deeply nested.
    The error's token is None if the expression ended too early.
    """
    tokens = tokenize(text)
    logger.debug(f"Tokenized {text!r} into {len(tokens)} tokens")
    try:
        return Parser(tokens).parse()
    except RecursionError:
        raise ExpressionSyntaxError("Expression is too deeply nested") from None
