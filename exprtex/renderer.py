r"""
Convert expression trees into LaTeX.

E.g. the tree for `sin(sqrt(x+a)/2)` becomes `\sin\left(\frac{\sqrt{x+a}}{2}\right)`.
"""

import typing
from . import nodes
from .errors import FormatError, InternalError


GREEK_LETTERS = frozenset((
    "alpha", "beta", "gamma", "delta", "epsilon", "zeta", "eta", "theta",
    "iota", "kappa", "lambda", "mu", "nu", "xi", "omicron", "pi",
    "rho", "sigma", "tau", "upsilon", "phi", "chi", "psi", "omega",
    "Alpha", "Beta", "Gamma", "Delta", "Epsilon", "Zeta", "Eta", "Theta",
    "Iota", "Kappa", "Lambda", "Mu", "Nu", "Xi", "Omicron", "Pi",
    "Rho", "Sigma", "Tau", "Upsilon", "Phi", "Chi", "Psi", "Omega",
))


# Function name -> (number of arguments, formatter for the rendered arguments)
SPECIAL_FUNCS = {
    "sqrt": (1, lambda x: f"\\sqrt{{{x}}}"),
    "abs": (1, lambda x: f"\\left|{x}\\right|"),
    "sin": (1, lambda x: f"\\sin\\left({x}\\right)"),
    "cos": (1, lambda x: f"\\cos\\left({x}\\right)"),
}


SPECIAL_OPS = {
    nodes.Add: "+",
    nodes.Subtract: "-",
    nodes.Multiply: " ",
}


def bracket(node: nodes.Node, needed: bool) -> str:
    """
    Convert a node into LaTeX, surrounding it with brackets if needed.
    """
    latex = node_to_latex(node)
    return f"\\left({latex}\\right)" if needed else latex


def left_assoc_to_latex(node: nodes.BinaryOp) -> str:
    """
    Convert a left-associative operation (+, -, *) into LaTeX.

    An operand on the right with the same precedence still needs brackets, since
    otherwise it would be grouped with the left side, e.g. `a-(b-c)`.
    """
    left = bracket(node.left, node.left.precedence < node.precedence)
    right = bracket(node.right, node.right.precedence <= node.precedence)
    return left + SPECIAL_OPS[type(node)] + right


def power_to_latex(node: nodes.Power) -> str:
    """
    Convert a power into LaTeX. Powers are right-associative, so `a^b^c` is `a^{b^{c}}`.
    """
    base = bracket(node.left, node.left.precedence <= node.precedence)
    exponent = bracket(node.right, node.right.precedence < node.precedence)
    return f"{base}^{{{exponent}}}"


def identifier_to_latex(node: nodes.Identifier) -> str:
    name = node.name
    if len(name) == 1 and name.isascii() and name.isalpha():
        return name
    if name in GREEK_LETTERS:
        return "\\" + name
    raise FormatError(f"Invalid identifier '{name}': identifier must be a Latin letter or Greek letter name", node.token)


def number_to_latex(node: nodes.Number) -> str:
    text = node.text
    for i, c in enumerate(text):
        if c in "eE":
            return f"{text[:i]} \\times 10^{{{text[i + 1:]}}}"
    return text


def function_to_latex(node: nodes.FunctionCall) -> str:
    if node.name not in SPECIAL_FUNCS:
        raise FormatError(f"Unknown function '{node.name}'", node.token)
    arg_count, formatter = SPECIAL_FUNCS[node.name]
    if len(node.args) != arg_count:
        plural = "argument" if arg_count == 1 else "arguments"
        raise FormatError(f"Function '{node.name}' takes exactly {arg_count} {plural} "
                          f"but {len(node.args)} were given", node.token)
    return formatter(*(node_to_latex(arg) for arg in node.args))


NODE_PROCESSORS = {
    nodes.Add: left_assoc_to_latex,
    nodes.Subtract: left_assoc_to_latex,
    nodes.Multiply: left_assoc_to_latex,
    nodes.Divide: lambda n: f"\\frac{{{node_to_latex(n.left)}}}{{{node_to_latex(n.right)}}}",
    nodes.Power: power_to_latex,
    nodes.Negate: lambda n: "-" + bracket(n.operand, n.operand.precedence < n.precedence),
    nodes.Identifier: identifier_to_latex,
    nodes.Number: number_to_latex,
    nodes.FunctionCall: function_to_latex,
} # type: typing.Dict[typing.Type[nodes.Node], typing.Callable[[typing.Any], str]]


def node_to_latex(node: nodes.Node) -> str:
    """
    Convert a node and all its children into LaTeX.
    """
    processor = NODE_PROCESSORS.get(type(node))
    if processor is None:
        raise InternalError(f"Don't know how to convert {type(node).__name__} into LaTeX", node.token)
    return processor(node)


def render(root: nodes.Node) -> str:
    r"""
    Convert an expression tree from `parse()` into LaTeX.

    Brackets are only added where they are needed to preserve the structure of the tree.
    Multiplication is implicit (`a*b` becomes `a b`), division becomes `\frac`, and numbers
    in scientific notation are written out with `\times 10^{...}`.

    Identifiers must be either a single Latin letter or the name of a Greek letter, which is
    converted into the corresponding LaTeX command (e.g. `theta` becomes `\theta`).
    The only functions supported are `sqrt`, `abs`, `sin` and `cos`, each with a single argument.

    Raises FormatError if the tree contains an invalid identifier or function call, or is
    too deeply nested.
    """
    try:
        return node_to_latex(root)
    except RecursionError:
        raise FormatError("Expression is too deeply nested") from None
