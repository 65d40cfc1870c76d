"""Differential fuzzing against Python's own arithmetic"""
import math
import random
import re
import string
import warnings

from calculex.runtime import calculate
from calculex.symbols import CONSTANTS, SymbolTable
from calculex.tokens import FUNCTION_NAMES

warnings.filterwarnings("ignore")

PY_FUNCS = {
    "sqrt": math.sqrt,
    "log": math.log,
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
    "arcsin": math.asin,
    "arccos": math.acos,
    "arctan": math.atan,
}

NUMBER_RE = re.compile(r"\d+(\.\d*)?|\.\d+")

# unary sign binds tighter than '^' here but looser than '**' in Python
UNARY_SIGN_RE = re.compile(r"(^|[-+*/^(])\s*[-+]")


def to_python(code: str) -> str:
    # float literals keep huge powers fast and make them overflow like ours do
    code = NUMBER_RE.sub(lambda m: m.group() if "." in m.group() else m.group() + ".0", code)
    return code.replace("^", "**")


def eval_py(code: str) -> float | str:
    try:
        res = eval(to_python(code), {"__builtins__": {}}, {**PY_FUNCS, **CONSTANTS})
    except Exception as e:
        return str(e)
    if isinstance(res, complex) or (isinstance(res, float) and math.isnan(res)):
        return "not a real number"
    return res


def eval_my(code: str) -> float | str:
    try:
        return calculate(code, SymbolTable())
    except Exception as e:
        return str(e)


if __name__ == "__main__":
    chunks = list(string.digits + ".()+-*/^ ") + [f"{name}(" for name in FUNCTION_NAMES] + list(CONSTANTS)

    def generate(length: int) -> str:
        return "".join(random.choices(chunks, k=length))

    while True:
        code = generate(8)

        if re.findall(r"\*\s*\*", code):
            continue  # avoid generating python powers (10**4)

        if re.findall(r"/\s*/", code):
            continue  # avoid generating int devision (10 // 3)

        if "^" in code and UNARY_SIGN_RE.search(code):
            continue  # -2^2 is 4 here, -2**2 is -4 in python

        res_py = eval_py(code)
        res_my = eval_my(code)
        if isinstance(res_py, float) and isinstance(res_my, float) and math.isclose(res_my, res_py):
            continue
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue
        if isinstance(res_py, str) and isinstance(res_my, float) and math.isinf(res_my):
            continue  # python raises on overflow and poles (0 ** -1, log(0)) where we give infinity
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
