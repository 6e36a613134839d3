import pytest

from infixcalc.errors import InvalidCharacter
from infixcalc.operators import OperatorRole, describe_precedence, resolve_operator
from infixcalc.tokenizer import (
    Token,
    TokenType,
    next_token,
    read_number,
    read_operator,
    skip_whitespace,
    tokenize,
    untokenize,
)


def test_tokenize() -> None:
    tokens = tokenize("12 + (3<=45)")
    assert [str(t) for t in tokens] == [
        "<NUMBER>12",
        "<OPERATOR>+",
        "<BRACKET_OPEN>(",
        "<NUMBER>3",
        "<OPERATOR><=",
        "<NUMBER>45",
        "<BRACKET_CLOSE>)",
    ]
    assert [t.start_idx for t in tokens] == [0, 3, 5, 6, 7, 9, 11]
    assert tokens[5].value == 45
    assert tokens[4].end_idx == 9


@pytest.mark.parametrize(
    "code, expected_lexemes",
    [
        pytest.param("+++2", ["++", "+", "2"]),
        pytest.param("1--1", ["1", "--", "1"]),
        pytest.param("1- -1", ["1", "-", "-", "1"]),
        pytest.param("!!0", ["!", "!", "0"]),
        pytest.param("1<=2>=3", ["1", "<=", "2", ">=", "3"]),
        pytest.param("1<2", ["1", "<", "2"]),
        pytest.param("1&&0", ["1", "&&", "0"]),
        pytest.param("1||0!=2==3", ["1", "||", "0", "!=", "2", "==", "3"]),
        pytest.param("", []),
        pytest.param(" \t ", []),
    ],
)
def test_longest_operator_match(code: str, expected_lexemes: list[str]) -> None:
    assert [t.lexeme for t in tokenize(code)] == expected_lexemes


def test_tokenize_invalid_character() -> None:
    with pytest.raises(InvalidCharacter) as exc_info:
        tokenize("1 + #")
    assert exc_info.value.error_char_idx == 4


def test_cursor_helpers() -> None:
    assert skip_whitespace("   7", 0) == 3
    assert skip_whitespace("7", 0) == 0
    assert read_number("x1234y", 1) == (1234, 5)
    assert read_number("0042", 0) == (42, 4)
    assert read_operator("a>=b", 1) == (">=", 3)
    assert read_operator("a>b", 1) == (">", 2)
    assert read_operator("a&b", 1) == (None, 1)
    assert read_operator("<", 0) == ("<", 1)
    assert read_operator("", 0) == (None, 0)


def test_next_token_at_end() -> None:
    assert next_token("1  ", 1) == (None, 3)
    token, i = next_token("  (", 0)
    assert token == Token(type=TokenType.BRACKET_OPEN, lexeme="(", start_idx=2)
    assert i == 3


def test_number_value_only_for_numbers() -> None:
    with pytest.raises(TypeError):
        _ = Token(type=TokenType.OPERATOR, lexeme="+", start_idx=0).value


def test_untokenize() -> None:
    assert untokenize(tokenize("( 1+2 )*3 ^ 2")) == "(1 + 2) * 3^2"


@pytest.mark.parametrize(
    "symbol, expect_operand, role, precedence",
    [
        pytest.param("-", True, OperatorRole.UNARY, 8),
        pytest.param("-", False, OperatorRole.BINARY, 5),
        pytest.param("+", True, OperatorRole.UNARY, 8),
        pytest.param("!", False, OperatorRole.UNARY, 8),
        pytest.param("++", False, OperatorRole.UNARY, 8),
        pytest.param("*", True, OperatorRole.BINARY, 6),
        pytest.param("^", False, OperatorRole.BINARY, 7),
        pytest.param("||", False, OperatorRole.BINARY, 1),
    ],
)
def test_resolve_operator(symbol: str, expect_operand: bool, role: OperatorRole, precedence: int) -> None:
    operator = resolve_operator(symbol, expect_operand)
    assert operator.role is role
    assert operator.precedence == precedence


def test_resolve_unknown_operator() -> None:
    with pytest.raises(ValueError):
        resolve_operator("=", expect_operand=False)


def test_describe_precedence() -> None:
    lines = describe_precedence()
    assert lines[0] == "  8: ! + - ++ -- (prefix)"
    assert lines[1] == "  7: ^"
    assert lines[-1] == "  1: ||"
    assert len(lines) == 8
