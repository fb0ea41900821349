"""
The nodes of an expression tree.

Every node type has a fixed precedence that is used to decide where brackets
are needed when the tree is turned back into text. Nodes are never modified
after they are created.
"""

import typing
from .lexer import Token


class Node:
    """
    A node in an expression tree.

    The token is the token the node was created from (the operator for operations,
    the name for function calls).
    """

    __slots__ = ("token", "children")

    PRECEDENCE = None # type: int

    def __init__(self, token: Token, *children: "Node"):
        object.__setattr__(self, "token", token)
        object.__setattr__(self, "children", children)

    def __setattr__(self, name: str, value: typing.Any):
        raise AttributeError(f"{type(self).__name__} nodes cannot be modified")

    def __delattr__(self, name: str):
        raise AttributeError(f"{type(self).__name__} nodes cannot be modified")

    @property
    def precedence(self) -> int:
        return self.PRECEDENCE

    def __eq__(self, other: typing.Any) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.token.text == other.token.text and self.children == other.children

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.token.text, self.children))

    def __repr__(self) -> str:
        if not self.children:
            return f"{type(self).__name__}({self.token.text!r})"
        return f"{type(self).__name__}({', '.join(repr(c) for c in self.children)})"


class BinaryOp(Node):
    """
    An operation with a left and right operand.
    """

    __slots__ = ()

    def __init__(self, token: Token, left: Node, right: Node):
        super().__init__(token, left, right)

    @property
    def left(self) -> Node:
        return self.children[0]

    @property
    def right(self) -> Node:
        return self.children[1]


class Add(BinaryOp):
    __slots__ = ()
    PRECEDENCE = 1


class Subtract(BinaryOp):
    __slots__ = ()
    PRECEDENCE = 1


class Multiply(BinaryOp):
    __slots__ = ()
    PRECEDENCE = 2


class Divide(BinaryOp):
    __slots__ = ()
    PRECEDENCE = 2


class Negate(Node):
    __slots__ = ()
    PRECEDENCE = 3

    def __init__(self, token: Token, operand: Node):
        super().__init__(token, operand)

    @property
    def operand(self) -> Node:
        return self.children[0]


class Power(BinaryOp):
    """
    Exponentiation. Unlike the other binary operations this is right-associative.
    """

    __slots__ = ()
    PRECEDENCE = 4


class Identifier(Node):
    __slots__ = ()
    PRECEDENCE = 9

    def __init__(self, token: Token):
        super().__init__(token)

    @property
    def name(self) -> str:
        return self.token.text


class Number(Node):
    __slots__ = ()
    PRECEDENCE = 9

    def __init__(self, token: Token):
        super().__init__(token)

    @property
    def text(self) -> str:
        return self.token.text


class FunctionCall(Node):
    """
    A call to a named function with one or more arguments.

    The number of arguments is not checked until the call is rendered.
    """

    __slots__ = ()
    PRECEDENCE = 9

    def __init__(self, token: Token, *args: Node):
        super().__init__(token, *args)

    @property
    def name(self) -> str:
        return self.token.text

    @property
    def args(self) -> typing.Tuple[Node, ...]:
        return self.children
