from infixcalc.errors import (
    DuplicateOperand,
    DuplicateOperator,
    EmptyInput,
    LeadingBinaryOperator,
    LeadingCloseParen,
    UnmatchedParenthesis,
)
from infixcalc.operators import is_unary_capable
from infixcalc.tokenizer import TokenType, next_token


def validate(code: str) -> None:
    """Scans the whole expression once and raises on the first syntax defect.

    Only the token sequence is checked: a dangling operator such as "1+" or an
    empty group "()" passes here and is handled leniently by the evaluator.
    """
    if not code.strip():
        raise EmptyInput("Empty expression", code=code)

    last_was_operand = False
    last_was_operator = False
    is_first = True
    paren_depth = 0

    i = 0
    while True:
        token, i = next_token(code, i)
        if token is None:
            break

        if token.type is TokenType.BRACKET_OPEN:
            paren_depth += 1
            last_was_operand = False
            last_was_operator = False
        elif token.type is TokenType.BRACKET_CLOSE:
            # leading defects are always reported at the start of the expression
            if is_first:
                raise LeadingCloseParen(
                    "Expression can't start with a closing parenthesis", code=code, error_char_idx=0
                )
            paren_depth -= 1
            if paren_depth < 0:
                raise UnmatchedParenthesis("Mismatched parentheses", code=code, error_char_idx=token.start_idx)
            # a closed group counts as an operand
            last_was_operand = True
            last_was_operator = False
        elif token.type is TokenType.NUMBER:
            if last_was_operand:
                raise DuplicateOperand("Two operands in a row", code=code, error_char_idx=token.start_idx)
            last_was_operand = True
            last_was_operator = False
        else:
            if is_first and not is_unary_capable(token.lexeme):
                raise LeadingBinaryOperator(
                    f"Expression can't start with a binary operator {token.lexeme!r}",
                    code=code,
                    error_char_idx=0,
                )
            if last_was_operator and not is_unary_capable(token.lexeme):
                raise DuplicateOperator(
                    f"Two binary operators in a row, {token.lexeme!r} can't follow an operator",
                    code=code,
                    error_char_idx=token.start_idx,
                )
            last_was_operand = False
            last_was_operator = True

        is_first = False

    if paren_depth != 0:
        raise UnmatchedParenthesis("Mismatched parentheses", code=code)
