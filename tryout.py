from calculex.errors import EvalError, ParserError
from calculex.parser import parse
from calculex.runtime import execute
from calculex.symbols import SymbolTable
from calculex.tokenizer import TokenizerError, tokenize

symbols = SymbolTable()

for code in [
    "5",
    "-1",
    "1 + 1",
    "-1 + 1",
    "1 + -1",
    "4 + 6 * 3",
    "(4 + 6)",
    "(4+6) * 3",
    "80225/+2",
    "7/6/2000",
    "5^2",
    "2^2^2^2",
    "1 - 2 - 3",
    "a = 1",
    "b = a + 2",
    "var = (1 + 14 * (54^2))",
    "sqrt(2) * sqrt 2",
    "sin(pi / 2) + log euler",
    "+-(2 - -2)*+3",
    "a = b = 10",
    "5 + 3 * a - ^ (2",
    "(1 + 2",
    "3 / (1 - 1)",
    "(0 - 1) ^ 0.5",
    "undefined + 1",
    "2 + @",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        tokens = tokenize(code)
    except TokenizerError as e:
        print(e)
        continue

    print(f"tokens: {' '.join(str(t) for t in tokens)}")

    try:
        statement = parse(tokens)
    except ParserError as e:
        print(e.render(code))
        continue
    print(f"ast: {statement!r}")
    print(f"as text: {statement}")

    try:
        result = execute(statement, symbols)
    except EvalError as e:
        print(e)
        continue
    print(f"result: {result}")

print("=" * 10)
print(f"symbols: {symbols}")
