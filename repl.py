from infixcalc.errors import ExpressionError
from infixcalc.operators import describe_precedence
from infixcalc.runtime import evaluate

QUIT_COMMANDS = {"q", "quit", "exit"}

EXAMPLES = [
    "1+2*3",
    "2+2*2*3",
    "1==2",
    "1+3 > 2",
    "(4>=4) && 0",
    "(1+2)*3",
    "-2^2 - !0",
    "++4 * --4 % 4",
]


def banner() -> str:
    lines = ["Infix expression evaluator", "", "Operators by precedence (higher binds tighter):"]
    lines.extend(describe_precedence())
    lines.append("  () for grouping")
    lines.append("")
    lines.append("Examples:")
    lines.extend(f"  {code:<14} -> {evaluate(code)}" for code in EXAMPLES)
    lines.append("")
    lines.append(f"Type 'help' to see this again, {'/'.join(sorted(QUIT_COMMANDS))} or Ctrl-D to leave.")
    return "\n".join(lines)


if __name__ == "__main__":
    print(banner())

    while True:
        try:
            code = input("> ")
        except EOFError:
            print()
            break

        command = code.strip()
        if not command:
            continue
        if command in QUIT_COMMANDS:
            break
        if command == "help":
            print(banner())
            continue

        try:
            result = evaluate(code)
        except ExpressionError as e:
            print(e)
            continue

        print(result)
