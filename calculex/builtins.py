import math
from typing import Callable

from calculex.tokens import TokenType

UnaryFunc = Callable[[float], float]
BinaryFunc = Callable[[float, float], float]

UNARY_FUNCS: dict[TokenType, UnaryFunc] = dict()
BINARY_FUNCS: dict[TokenType, BinaryFunc] = dict()


class DomainError(ArithmeticError):
    """Argument outside of the real domain of a function; the evaluator turns it into a ``ComplexResultError``"""


def register_unary_func(token_type: TokenType):
    def decorator(fn: Callable[[float], float]) -> UnaryFunc:
        def decorated(arg: float) -> float:
            try:
                res = fn(arg)
            except ValueError as e:
                raise DomainError(f"{token_type} is not defined for {arg!r}") from e
            return res

        UNARY_FUNCS[token_type] = decorated
        return decorated

    return decorator


def register_binary_func(token_type: TokenType):
    def decorator(fn: BinaryFunc) -> BinaryFunc:
        BINARY_FUNCS[token_type] = fn
        return fn

    return decorator


@register_unary_func(TokenType.PLUS)
def pos_(arg: float) -> float:
    return +arg


@register_unary_func(TokenType.MINUS)
def neg_(arg: float) -> float:
    return -arg


@register_unary_func(TokenType.SQRT)
def sqrt_(arg: float) -> float:
    return math.sqrt(arg)


@register_unary_func(TokenType.LOG)
def log_(arg: float) -> float:
    # natural logarithm, with the C library value at the pole
    if arg == 0.0:
        return -math.inf
    return math.log(arg)


@register_unary_func(TokenType.SIN)
def sin_(arg: float) -> float:
    return math.sin(arg)


@register_unary_func(TokenType.COS)
def cos_(arg: float) -> float:
    return math.cos(arg)


@register_unary_func(TokenType.TAN)
def tan_(arg: float) -> float:
    return math.tan(arg)


@register_unary_func(TokenType.ARCSIN)
def arcsin_(arg: float) -> float:
    return math.asin(arg)


@register_unary_func(TokenType.ARCCOS)
def arccos_(arg: float) -> float:
    return math.acos(arg)


@register_unary_func(TokenType.ARCTAN)
def arctan_(arg: float) -> float:
    return math.atan(arg)


@register_binary_func(TokenType.PLUS)
def add_(a: float, b: float) -> float:
    return a + b


@register_binary_func(TokenType.MINUS)
def sub_(a: float, b: float) -> float:
    return a - b


@register_binary_func(TokenType.STAR)
def mul_(a: float, b: float) -> float:
    return a * b


@register_binary_func(TokenType.SLASH)
def div_(a: float, b: float) -> float:
    # the evaluator rejects zero divisors before getting here
    return a / b


@register_binary_func(TokenType.CARET)
def pow_(a: float, b: float) -> float:
    if a == 0.0 and b < 0.0:
        return _infinity_like(a, b)
    try:
        res = math.pow(a, b)
    except ValueError as e:
        # negative base with a fractional exponent
        raise DomainError(f"{a!r} ^ {b!r} is not a real number") from e
    except OverflowError:
        return _infinity_like(a, b)
    return res


def _infinity_like(a: float, b: float) -> float:
    # sign of a ^ b when it does not fit in a float
    odd_integer_exponent = b.is_integer() and b % 2 == 1
    return math.copysign(math.inf, a) if odd_integer_exponent else math.inf
