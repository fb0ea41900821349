import pytest
from exprtex import nodes, str_to_latex
from exprtex.errors import FormatError, InternalError
from exprtex.lexer import Token, TokenKind
from exprtex.parser import parse
from exprtex.renderer import GREEK_LETTERS, render


@pytest.mark.parametrize("text, latex", [
    ("a-b-c", "a-b-c"),
    ("a-(b-c)", "a-\\left(b-c\\right)"),
    ("a+(b+c)", "a+\\left(b+c\\right)"),
    ("(a+b)+c", "a+b+c"),
    ("(a+b)*c", "\\left(a+b\\right) c"),
    ("a*b+c", "a b+c"),
    ("a*(b*c)", "a \\left(b c\\right)"),
    ("a+b/c+d", "a+\\frac{b}{c}+d"),
    ("(a+b)/(c-d)", "\\frac{a+b}{c-d}"),
    ("a/b/c", "\\frac{\\frac{a}{b}}{c}"),
    ("2*x", "2 x"),
])
def test_binary_operations(text, latex):
    assert render(parse(text)) == latex


@pytest.mark.parametrize("text, latex", [
    ("a^b^c", "a^{b^{c}}"),
    ("(a^b)^c", "\\left(a^{b}\\right)^{c}"),
    ("x^10", "x^{10}"),
    ("x^(n+1)", "x^{\\left(n+1\\right)}"),
    ("x^-1", "x^{\\left(-1\\right)}"),
    ("(a*b)^2", "\\left(a b\\right)^{2}"),
    ("e^sin(x)", "e^{\\sin\\left(x\\right)}"),
])
def test_power(text, latex):
    assert render(parse(text)) == latex


@pytest.mark.parametrize("text, latex", [
    ("-x^2", "-x^{2}"),
    ("(-x)^2", "\\left(-x\\right)^{2}"),
    ("--x", "--x"),
    ("-(a+b)", "-\\left(a+b\\right)"),
    ("-(a*b)", "-\\left(a b\\right)"),
    ("a-(-b)", "a--b"),
    ("+x", "x"),
])
def test_negate(text, latex):
    assert render(parse(text)) == latex


def test_identifiers():
    assert render(parse("x")) == "x"
    assert render(parse("Q")) == "Q"
    assert render(parse("theta")) == "\\theta"
    assert render(parse("Omega")) == "\\Omega"
    assert render(parse("alpha*beta")) == "\\alpha \\beta"


def test_greek_letters():
    assert len(GREEK_LETTERS) == 48
    for name in GREEK_LETTERS:
        assert render(parse(name)) == "\\" + name


@pytest.mark.parametrize("text", ["foo", "xy", "_", "x1", "THETA", "theta_1"])
def test_invalid_identifiers(text):
    with pytest.raises(FormatError) as e:
        render(parse(text))
    assert "Latin letter or Greek letter name" in e.value.message
    assert e.value.span == (0, len(text))


def test_invalid_identifier_location():
    with pytest.raises(FormatError) as e:
        render(parse("a + foo"))
    assert e.value.span == (4, 3)


@pytest.mark.parametrize("text, latex", [
    ("42", "42"),
    ("3.14", "3.14"),
    ("1.23e-4", "1.23 \\times 10^{-4}"),
    ("6E23", "6 \\times 10^{23}"),
    ("2e+5", "2 \\times 10^{+5}"),
])
def test_numbers(text, latex):
    assert render(parse(text)) == latex


@pytest.mark.parametrize("text, latex", [
    ("sqrt(x)", "\\sqrt{x}"),
    ("sqrt(x^2+1)", "\\sqrt{x^{2}+1}"),
    ("abs(a-b)", "\\left|a-b\\right|"),
    ("sin(x)", "\\sin\\left(x\\right)"),
    ("cos(2*theta)", "\\cos\\left(2 \\theta\\right)"),
    ("sin(sqrt(x+a)/2)", "\\sin\\left(\\frac{\\sqrt{x+a}}{2}\\right)"),
    ("2*sqrt(x)", "2 \\sqrt{x}"),
])
def test_functions(text, latex):
    assert render(parse(text)) == latex


@pytest.mark.parametrize("text", ["sqrt(x,y)", "abs(a,b,c)", "sin(x,y)", "cos(1,2)"])
def test_function_wrong_arg_count(text):
    with pytest.raises(FormatError) as e:
        render(parse(text))
    assert "takes exactly 1 argument" in e.value.message
    assert e.value.token.offset == 0
    assert e.value.kind == "format"


@pytest.mark.parametrize("text", ["foo(x)", "tan(x)", "x(y)", "Sqrt(x)"])
def test_unknown_function(text):
    with pytest.raises(FormatError) as e:
        render(parse(text))
    assert "Unknown function" in e.value.message
    assert e.value.span == (0, text.index("("))


def test_function_arguments_checked():
    with pytest.raises(FormatError) as e:
        render(parse("sqrt(foo)"))
    assert e.value.token.text == "foo"


def test_unknown_node_type():
    class Modulo(nodes.BinaryOp):
        __slots__ = ()
        PRECEDENCE = 2

    x = nodes.Identifier(Token("x", 0, TokenKind.IDENTIFIER))
    node = Modulo(Token("%", 1, TokenKind.OPERATOR), x, x)
    with pytest.raises(InternalError) as e:
        render(node)
    assert e.value.kind == "internal"
    assert e.value.span == (1, 1)


def test_str_to_latex():
    assert str_to_latex("(a+b)*c/2") == "\\frac{\\left(a+b\\right) c}{2}"


def test_too_deeply_nested():
    node = nodes.Identifier(Token("x", 0, TokenKind.IDENTIFIER))
    for _ in range(5000):
        node = nodes.Negate(Token("-", 0, TokenKind.OPERATOR), node)
    with pytest.raises(FormatError) as e:
        render(node)
    assert "too deeply nested" in e.value.message
    assert e.value.span is None
