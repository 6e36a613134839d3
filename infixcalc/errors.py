from dataclasses import dataclass
from typing import Optional


@dataclass
class ExpressionError(Exception):
    errmsg: str
    code: str
    error_char_idx: Optional[int] = None

    stage = "Error"

    def __str__(self) -> str:
        if self.error_char_idx is None:
            return f"[{self.stage}] {self.errmsg}"
        print_start_idx = max(0, self.error_char_idx - 10)
        print_ellipsis_pre = print_start_idx > 0
        print_end_idx = min(len(self.code), self.error_char_idx + 10)
        print_ellipsis_post = print_end_idx < len(self.code)
        return "\n".join(
            [
                f"[{self.stage}] {self.errmsg} @ char {self.error_char_idx}",
                (
                    ("..." if print_ellipsis_pre else "")
                    + f"{self.code[print_start_idx:print_end_idx]}"
                    + ("..." if print_ellipsis_post else "")
                ),
                " " * (self.error_char_idx - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
            ]
        )


class ExpressionSyntaxError(ExpressionError):
    stage = "Syntax error"


class EmptyInput(ExpressionSyntaxError):
    pass


class LeadingCloseParen(ExpressionSyntaxError):
    pass


class LeadingBinaryOperator(ExpressionSyntaxError):
    pass


class UnmatchedParenthesis(ExpressionSyntaxError):
    pass


class DuplicateOperand(ExpressionSyntaxError):
    pass


class DuplicateOperator(ExpressionSyntaxError):
    pass


class InvalidCharacter(ExpressionSyntaxError):
    pass
