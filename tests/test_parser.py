import pytest

from prop_dnf.config import Settings
from prop_dnf.errors import ExpressionError, LexError, ParseError
from prop_dnf.parser import parse
from prop_dnf.tree import BinaryExpr, Negation, Var


def test_single_variable():
    expr = parse("A")
    assert expr.tree == Var("A")
    assert expr.variables == ("A",)
    assert expr.evaluate({"A": True}) is True
    assert expr.evaluate({"A": False}) is False


def test_operators_chain_to_the_right():
    expr = parse("A & B & C")
    assert expr.tree == BinaryExpr(Var("A"), "&", BinaryExpr(Var("B"), "&", Var("C")))
    assert str(parse("A > B | C")) == "(A > (B | C))"


def test_negation_binds_next_primary_only():
    assert parse("!A & B").tree == BinaryExpr(Negation(Var("A")), "&", Var("B"))
    assert str(parse("!(A & B)")) == "!(A & B)"
    assert parse("!A & B").evaluate({"A": False, "B": False}) is False
    assert parse("!(A & B)").evaluate({"A": False, "B": False}) is True


@pytest.mark.parametrize("value", [True, False])
def test_double_negation(value):
    assert parse("!!A").evaluate({"A": value}) is value
    assert parse("!!A").tree == Negation(Negation(Var("A")))


def test_grouping_changes_meaning():
    left = parse("(A & B) | C")
    right = parse("A & (B | C)")
    assert str(left) == "((A & B) | C)"
    assert str(right) == "(A & (B | C))"
    assignment = {"A": False, "B": False, "C": True}
    assert left.evaluate(assignment) is True
    assert right.evaluate(assignment) is False
    assert left.evaluate({"A": True, "B": False, "C": True}) is True
    assert right.evaluate({"A": True, "B": False, "C": True}) is True


def test_nested_groups():
    expr = parse("((A))")
    assert expr.tree == Var("A")
    assert str(parse("!((A + B) - C)")) == "!((A + B) - C)"


def test_variables_are_sorted_and_unique():
    assert parse("C & A | C > B").variables == ("A", "B", "C")


@pytest.mark.parametrize("source, message", [
    ("", "empty input"),
    ("   ", "empty input"),
    ("(A & B", "unmatched \\("),
    ("((A)", "unmatched \\("),
    ("A & B)", "unexpected token \\)"),
    ("(A))", "unexpected token \\)"),
    (")", "unexpected token \\)"),
    ("()", "unexpected token \\)"),
    ("& A", "unexpected token &"),
    ("A B", "unknown operator B"),
    ("A !B", "unknown operator !"),
    ("(A)(B)", "unknown operator \\("),
    ("A &", "unexpected end of input"),
    ("!", "unexpected end of input"),
    ("(", "unexpected end of input"),
])
def test_malformed_input(source, message):
    with pytest.raises(ParseError, match=message):
        parse(source)


def test_lex_errors_propagate():
    with pytest.raises(LexError):
        parse("A & b")


def test_token_limit():
    source = "!" * 10 + "A"
    with pytest.raises(ParseError, match="too long"):
        parse(source, Settings(max_tokens=10))
    assert parse(source, Settings(max_tokens=11)).evaluate({"A": True}) is True


def test_default_limit_parses_deep_nesting():
    source = "(" * 120 + "A" + ")" * 120
    assert parse(source).tree == Var("A")


def test_errors_share_a_base():
    for source in ["a", "(A"]:
        with pytest.raises(ExpressionError):
            parse(source)
