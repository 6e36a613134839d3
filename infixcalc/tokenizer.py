import enum
import re
from dataclasses import dataclass
from typing import Optional

from infixcalc.errors import InvalidCharacter
from infixcalc.operators import ONE_CHAR_OPERATORS, TWO_CHAR_OPERATORS
from infixcalc.utils import PrintableEnum


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    OPERATOR = enum.auto()
    BRACKET_OPEN = enum.auto()
    BRACKET_CLOSE = enum.auto()


@dataclass
class Token:
    type: TokenType
    lexeme: str
    start_idx: int

    @property
    def end_idx(self) -> int:
        return self.start_idx + len(self.lexeme)

    @property
    def value(self) -> int:
        if self.type is not TokenType.NUMBER:
            raise TypeError(f"{self.type} token has no numeric value")
        value, _ = read_number(self.lexeme, 0)
        return value

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


BRACKET_TOKENS = {
    "(": TokenType.BRACKET_OPEN,
    ")": TokenType.BRACKET_CLOSE,
}


def _is_digit(s: str) -> bool:
    return s.isascii() and s.isdigit()


def skip_whitespace(code: str, i: int) -> int:
    while i < len(code) and code[i].isspace():
        i += 1
    return i


def read_number(code: str, i: int) -> tuple[int, int]:
    value = 0
    while i < len(code) and _is_digit(code[i]):
        value = value * 10 + (ord(code[i]) - ord("0"))
        i += 1
    return value, i


def read_operator(code: str, i: int) -> tuple[Optional[str], int]:
    """Longest match first, so "<=" is never read as "<" followed by "=" """
    two_chars = code[i : i + 2]
    if len(two_chars) == 2 and two_chars in TWO_CHAR_OPERATORS:
        return two_chars, i + 2
    one_char = code[i : i + 1]
    if one_char and one_char in ONE_CHAR_OPERATORS:
        return one_char, i + 1
    return None, i


def next_token(code: str, i: int) -> tuple[Optional[Token], int]:
    i = skip_whitespace(code, i)
    if i >= len(code):
        return None, i

    if _is_digit(code[i]):
        _, number_end_idx = read_number(code, i)
        return Token(type=TokenType.NUMBER, lexeme=code[i:number_end_idx], start_idx=i), number_end_idx
    elif code[i] in BRACKET_TOKENS:
        return Token(type=BRACKET_TOKENS[code[i]], lexeme=code[i], start_idx=i), i + 1

    operator, operator_end_idx = read_operator(code, i)
    if operator is None:
        raise InvalidCharacter(f"Invalid character: {code[i]!r}", code=code, error_char_idx=i)
    return Token(type=TokenType.OPERATOR, lexeme=operator, start_idx=i), operator_end_idx


def tokenize(code: str) -> list[Token]:
    tokens: list[Token] = []
    i = 0
    while True:
        token, i = next_token(code, i)
        if token is None:
            return tokens
        tokens.append(token)


def untokenize(tokens: list[Token]) -> str:
    result = " ".join(t.lexeme for t in tokens)

    # ( 1 + 2 ) => (1 + 2)
    result = re.sub(r"\(\s+", "(", result)
    result = re.sub(r"\s+\)", ")", result)

    # 4 ^ 5 => 4^5
    result = re.sub(r"\s+\^\s+", "^", result)
    return result
