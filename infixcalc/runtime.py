from typing import Callable

from infixcalc.errors import ExpressionError
from infixcalc.operators import GROUP_MARKER, OperatorRole, OperatorToken, resolve_operator
from infixcalc.tokenizer import Token, TokenType, next_token
from infixcalc.utils import to_flag
from infixcalc.validator import validate


class CalcRuntimeError(ExpressionError):
    stage = "Runtime error"


class DivisionByZero(CalcRuntimeError):
    pass


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _truncating_mod(a: int, b: int) -> int:
    return a - b * _truncating_div(a, b)


def _power(a: int, b: int) -> int:
    # repeated multiplication never runs for a negative exponent
    return a**b if b >= 0 else 1


UnaryOperationImpl = Callable[[int], int]
BinaryOperationImpl = Callable[[int, int], int]

unary_impls: dict[str, UnaryOperationImpl] = {
    "+": lambda a: a,
    "-": lambda a: -a,
    "!": lambda a: to_flag(a == 0),
    "++": lambda a: a + 1,
    "--": lambda a: a - 1,
}

binary_impls: dict[str, BinaryOperationImpl] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_div,
    "%": _truncating_mod,
    "^": _power,
    ">": lambda a, b: to_flag(a > b),
    ">=": lambda a, b: to_flag(a >= b),
    "<": lambda a, b: to_flag(a < b),
    "<=": lambda a, b: to_flag(a <= b),
    "==": lambda a, b: to_flag(a == b),
    "!=": lambda a, b: to_flag(a != b),
    "&&": lambda a, b: to_flag(a != 0 and b != 0),
    "||": lambda a, b: to_flag(a != 0 or b != 0),
}

ZERO_DIVISOR_OPERATORS = frozenset({"/", "%"})


class Evaluator:
    """Two-stack precedence climbing over an already validated expression.

    Every instance owns its cursor and stacks; create one per expression.
    """

    def __init__(self, code: str) -> None:
        self.code = code
        self.cursor = 0
        self.operands: list[int] = []
        self.operators: list[OperatorToken] = []
        self.expect_operand = True

    def run(self) -> int:
        while True:
            token, next_idx = next_token(self.code, self.cursor)
            if token is None:
                self.cursor = next_idx
                break

            if token.type is TokenType.BRACKET_CLOSE:
                # the reduction happens with the cursor still on ")"
                self.cursor = token.start_idx
                self._close_group()
                self.cursor = next_idx
            else:
                self.cursor = next_idx
                self._consume(token)

        while self.operators:
            self.apply_operator(self.operators.pop())

        return self.operands[-1] if self.operands else 0

    def apply_operator(self, operator: OperatorToken) -> None:
        """Applies one popped operator to the operand stack.

        Skipped without error when the stack holds fewer operands than the
        operator needs; input that slipped past validation degrades to a no-op.
        """
        if operator.role is OperatorRole.GROUP:
            return
        if len(self.operands) < operator.arity:
            return

        if operator.role is OperatorRole.UNARY:
            a = self.operands.pop()
            self.operands.append(unary_impls[operator.symbol](a))
            return

        b = self.operands.pop()
        a = self.operands.pop()
        if operator.symbol in ZERO_DIVISOR_OPERATORS and b == 0:
            raise DivisionByZero("Division by zero", code=self.code, error_char_idx=self.cursor)
        self.operands.append(binary_impls[operator.symbol](a, b))

    def _consume(self, token: Token) -> None:
        if token.type is TokenType.NUMBER:
            self.operands.append(token.value)
            self.expect_operand = False
        elif token.type is TokenType.BRACKET_OPEN:
            self.operators.append(GROUP_MARKER)
            self.expect_operand = True
        else:
            self._push_operator(resolve_operator(token.lexeme, self.expect_operand))

    def _push_operator(self, operator: OperatorToken) -> None:
        if not (self.expect_operand and operator.role is OperatorRole.UNARY):
            while (
                self.operators
                and self.operators[-1].role is not OperatorRole.GROUP
                and self.operators[-1].precedence >= operator.precedence
            ):
                self.apply_operator(self.operators.pop())
        self.operators.append(operator)
        self.expect_operand = True

    def _close_group(self) -> None:
        while self.operators:
            operator = self.operators.pop()
            if operator.role is OperatorRole.GROUP:
                break
            self.apply_operator(operator)
        self.expect_operand = False


def evaluate(code: str) -> int:
    validate(code)
    return Evaluator(code).run()
