import random
import re
import string
import warnings

from infixcalc.runtime import evaluate

warnings.filterwarnings("ignore")


def eval_py(code: str) -> int | str:
    try:
        return eval(code)
    except Exception as e:
        return str(e)


def eval_my(code: str) -> int | str:
    try:
        return evaluate(code)
    except Exception as e:
        return str(e)


if __name__ == "__main__":
    alphabet = string.digits + "()+-* "

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        code = generate(10)

        if re.findall(r"\*\s*\*", code):
            continue  # avoid generating powers (10**4)

        if re.findall(r"\+\+|--", code):
            continue  # prefix increment/decrement, python reads these as double signs

        if re.findall(r"\(\s*\)|[-+*]\s*(\)|$)|\(\s*\*", code):
            continue  # empty groups and dangling operators are evaluated leniently here

        if re.findall(r"[\d)]\s*\(", code):
            continue  # python reads "2(3)" and "(1)(2)" as calls

        res_py = eval_py(code)
        res_my = eval_my(code)
        if isinstance(res_py, int) and res_py == res_my:
            continue
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue
        if isinstance(res_py, str) and res_py.startswith("leading zeros in decimal integer literals are not permitted"):
            continue
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
