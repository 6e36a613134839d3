import enum
from dataclasses import dataclass

from infixcalc.utils import PrintableEnum

UNARY_PRECEDENCE = 8
GROUP_PRECEDENCE = 0

BINARY_PRECEDENCE: dict[str, int] = {
    "^": 7,
    "*": 6,
    "/": 6,
    "%": 6,
    "+": 5,
    "-": 5,
    ">": 4,
    ">=": 4,
    "<": 4,
    "<=": 4,
    "==": 3,
    "!=": 3,
    "&&": 2,
    "||": 1,
}

UNARY_CAPABLE = frozenset({"+", "-", "!", "++", "--"})

# symbols with no binary form: always applied to a single operand
PREFIX_ONLY = UNARY_CAPABLE - frozenset(BINARY_PRECEDENCE)

ALL_OPERATORS = UNARY_CAPABLE | frozenset(BINARY_PRECEDENCE)
TWO_CHAR_OPERATORS = frozenset(op for op in ALL_OPERATORS if len(op) == 2)
ONE_CHAR_OPERATORS = frozenset(op for op in ALL_OPERATORS if len(op) == 1)

GROUP_SYMBOL = "("


class OperatorRole(PrintableEnum):
    UNARY = enum.auto()
    BINARY = enum.auto()
    GROUP = enum.auto()


@dataclass(frozen=True)
class OperatorToken:
    symbol: str
    role: OperatorRole

    @property
    def precedence(self) -> int:
        if self.role is OperatorRole.UNARY:
            return UNARY_PRECEDENCE
        elif self.role is OperatorRole.BINARY:
            return BINARY_PRECEDENCE[self.symbol]
        else:
            return GROUP_PRECEDENCE

    @property
    def arity(self) -> int:
        return 1 if self.role is OperatorRole.UNARY else 2

    def __str__(self) -> str:
        return f"<{self.role}>{self.symbol}"


GROUP_MARKER = OperatorToken(symbol=GROUP_SYMBOL, role=OperatorRole.GROUP)


def is_unary_capable(symbol: str) -> bool:
    return symbol in UNARY_CAPABLE


def resolve_operator(symbol: str, expect_operand: bool) -> OperatorToken:
    """Decides once whether an operator symbol acts on one or two operands.

    A unary-capable symbol standing where an operand is expected (start of the
    expression, after "(" or after another operator) is unary. Prefix-only
    symbols ("!", "++", "--") are unary wherever they appear.
    """
    if symbol not in ALL_OPERATORS:
        raise ValueError(f"Unknown operator: {symbol!r}")
    if (expect_operand and is_unary_capable(symbol)) or symbol in PREFIX_ONLY:
        return OperatorToken(symbol=symbol, role=OperatorRole.UNARY)
    return OperatorToken(symbol=symbol, role=OperatorRole.BINARY)


def describe_precedence() -> list[str]:
    rows: dict[int, list[str]] = {UNARY_PRECEDENCE: sorted(UNARY_CAPABLE, key=lambda s: (len(s), s))}
    for symbol, precedence in BINARY_PRECEDENCE.items():
        rows.setdefault(precedence, []).append(symbol)
    lines = []
    for precedence in sorted(rows, reverse=True):
        symbols = " ".join(rows[precedence])
        note = " (prefix)" if precedence == UNARY_PRECEDENCE else ""
        lines.append(f"  {precedence}: {symbols}{note}")
    return lines
