import pytest

from plot_expression.expression_tree.parsing import Token, TokenKind, tokenize, parse_number

OP = TokenKind.OPERATOR
NUM = TokenKind.NUMBER
VAR = TokenKind.VARIABLE
IDENT = TokenKind.IDENTIFIER
OPEN = TokenKind.OPEN_PAREN
CLOSE = TokenKind.CLOSE_PAREN


def kinds_and_text(text):
    return [(t.kind, t.text) for t in tokenize(text)]


def test_mixed_formula():
    """sin(3 * x + 4) + x ^ -5 yields twelve tokens"""
    assert kinds_and_text("sin(3 * x + 4) + x ^ -5") == [
        (IDENT, "sin"), (OPEN, "("), (NUM, "3"), (OP, "*"), (VAR, "x"),
        (OP, "+"), (NUM, "4"), (CLOSE, ")"), (OP, "+"), (VAR, "x"),
        (OP, "^"), (NUM, "-5"),
    ]


def test_whitespace_separates_numbers():
    assert kinds_and_text("4 5") == [(NUM, "4"), (NUM, "5")]
    assert kinds_and_text("45") == [(NUM, "45")]


def test_whitespace_around_operators_is_irrelevant():
    assert tokenize("4+5") == tokenize("4 + 5") == tokenize("  4\t+\n5  ")


def test_whitespace_separates_function_from_variable():
    assert kinds_and_text("sin x") == [(IDENT, "sin"), (VAR, "x")]
    assert kinds_and_text("sinx") == [(IDENT, "sinx")]


@pytest.mark.parametrize("text, expected", [
    ("x-1", [(VAR, "x"), (NUM, "-1")]),
    ("x - 1", [(VAR, "x"), (OP, "-"), (NUM, "1")]),
    ("--1", [(OP, "-"), (NUM, "-1")]),
    ("-x", [(OP, "-"), (VAR, "x")]),
    ("-.5", [(NUM, "-.5")]),
    ("1-", [(NUM, "1"), (OP, "-")]),
    ("1-2", [(NUM, "1"), (NUM, "-2")]),
])
def test_minus_sign_disambiguation(text, expected):
    assert kinds_and_text(text) == expected


def test_number_stops_at_minus_and_letters():
    assert kinds_and_text("1.5-2.5") == [(NUM, "1.5"), (NUM, "-2.5")]
    assert kinds_and_text("2x") == [(NUM, "2"), (VAR, "x")]
    assert kinds_and_text("x2") == [(VAR, "x"), (NUM, "2")]


def test_identifiers():
    assert kinds_and_text("xx") == [(IDENT, "xx")]
    assert kinds_and_text("asin(x)") == [(IDENT, "asin"), (OPEN, "("), (VAR, "x"), (CLOSE, ")")]
    # unrecognised characters are absorbed rather than rejected
    assert kinds_and_text("@# $") == [(IDENT, "@#"), (IDENT, "$")]


def test_malformed_number_is_one_token():
    assert kinds_and_text("1.2.3") == [(NUM, "1.2.3")]


def test_empty_input():
    assert tokenize("") == ()
    assert tokenize("   ") == ()


def test_tokens_are_immutable():
    token = tokenize("x")[0]
    assert token == Token(VAR, "x")
    with pytest.raises(AttributeError):
        token.text = "y"


@pytest.mark.parametrize("text, value", [
    ("45", 45.0),
    ("-5", -5.0),
    ("0.25", 0.25),
    (".5", 0.5),
    ("-.5", -0.5),
    ("5.", 5.0),
    ("007", 7.0),
    ("1.2.3", 1.2),
    ("3..1", 3.0),
    (".", 0.0),
    ("-.", 0.0),
    ("..5", 0.0),
])
def test_parse_number_uses_longest_valid_prefix(text, value):
    assert parse_number(text) == value
