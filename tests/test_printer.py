import pytest
from mal.printer import UNBALANCED, pr_str
from mal.reader import read
from mal.types import List, Literal, Operator, OperatorAtom


def test_print_operator():
    assert pr_str(OperatorAtom(Operator.DIV)) == "/"


def test_print_literal_verbatim():
    assert pr_str(Literal('"a b"')) == '"a b"'


def test_print_empty_list():
    assert pr_str(List(())) == "()"


def test_print_nested():
    form = List((Literal("a"), List((Literal("b"), Literal("c"))), Literal("d")))
    assert pr_str(form) == "(a (b c) d)"


def test_print_deep_nesting():
    depth = 5000
    src = "(" * depth + "a b" + ")" * depth
    assert pr_str(read(src)) == src


def test_print_deep_built_tree():
    form = Literal("x")
    for _ in range(3000):
        form = List((form, Literal("y")))
    text = pr_str(form)
    assert text.startswith("(" * 3000 + "x y)")
    assert text.endswith(" y)")


def test_print_not_a_form_inside_list():
    with pytest.raises(TypeError, match="not a form"):
        pr_str(List((Literal("a"), 42)))


def test_print_not_a_form():
    with pytest.raises(TypeError, match="not a form"):
        pr_str("abc")


def test_print_unterminated_string():
    assert pr_str(read('"abc')) == '"abc' + UNBALANCED


@pytest.mark.parametrize("src,expected", [
    ("(+ 1 2)", "(+ 1 2)"),
    ("(a (b c) d)", "(a (b c) d)"),
    ("  (  a ,b,  ( c   d ) )  ", "(a b (c d))"),
    ('(str "x y" 12)', '(str "x y" 12)'),
    (r'(str "a\"b")', r'(str "a\"b")'),
    ("(a 'b)", "(a b)"),
    ("(f ; comment\n x)", "(f x)"),
    ("((()))", "((()))"),
    ("(* (/ 6 3) (- 4 1))", "(* (/ 6 3) (- 4 1))"),
])
def test_round_trip(src, expected):
    first = read(src)
    text = pr_str(first)
    assert text == expected
    second = read(text)
    assert second == first
    assert pr_str(second) == text
