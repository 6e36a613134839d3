from infixcalc.errors import ExpressionError
from infixcalc.runtime import evaluate
from infixcalc.tokenizer import tokenize, untokenize

for code in [
    "5",
    "-1",
    "1 + 1",
    "1 + -1",
    "4 + 6 * 3",
    "(4+6) * 3",
    "80225/+2",
    "-7/2",
    "-7%2",
    "5^2",
    "2^-1",
    "!0 && 3 >= 2",
    "++4 * --4",
    "1 + (2",
    "10 / (5 - 5)",
    "3 $ 4",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        tokens = tokenize(code)
    except ExpressionError as e:
        print(e)
        continue

    print(f"tokens: {' '.join(str(t) for t in tokens)}")
    print(f"normalized: {untokenize(tokens)}")

    try:
        result = evaluate(code)
    except ExpressionError as e:
        print(e)
        continue
    print(f"result: {result}")
