import math

import pytest

from calculex.parser import parse
from calculex.runtime import calculate, evaluate
from calculex.symbols import SymbolTable
from calculex.tokenizer import tokenize


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("1", 1.0),
        pytest.param("-1", -1.0),
        pytest.param("1+2", 3.0),
        pytest.param("(1+2)", 3.0),
        pytest.param("-(1+2)", -3.0),
        pytest.param("(((1)))", 1.0),
        pytest.param("1 * 4 + 5", 9.0),
        pytest.param("1 + 4 * 5", 21.0),
        pytest.param("10 / 5 / 2 / 2", 0.5),
        pytest.param("10 + 2 * (5 + 3 - 1)", 24.0),
        pytest.param("2 + 2", 4.0),
        pytest.param("1 + 2 + 3 + 4 + 5", 15.0),
        # precedence
        pytest.param("3+4*5", 23.0),
        pytest.param("(3 + 4) * 5 - 6 / 2^2", 33.5),
        pytest.param("2 * 3 ^ 2", 18.0),
        # associativity
        pytest.param("2^2^2^2", 65536.0),
        pytest.param("2^3^2", 512.0),
        pytest.param("1-2-3", -4.0),
        pytest.param("2-2-2", -2.0),
        pytest.param("64 / 4 / 2", 8.0),
        # unary operators
        pytest.param("+-(2 - -2)*+3", -12.0),
        pytest.param("--1", 1.0),
        pytest.param("-2^2", 4.0),
        pytest.param("2^-1", 0.5),
        pytest.param("sqrt 16 * 2", 8.0),
        pytest.param("sqrt(16 * 4)", 8.0),
        pytest.param("log euler", 1.0),
        pytest.param("cos 0", 1.0),
        pytest.param("arctan 0 + arcsin 0", 0.0),
        # numbers
        pytest.param("1.5 + .5", 2.0),
        pytest.param("1e3 / 1E-3", 1e6),
        # constants
        pytest.param("pi", math.pi),
        pytest.param("phi ^ 2 - phi", 1.0),
        pytest.param("eulerMascheroni", 0.5772156649015329),
        # assignments return the bound value
        pytest.param("a = 1", 1.0),
        pytest.param("c = 2 + 2 * 3", 8.0),
    ],
)
def test_eval_arithmetic(code: str, expected_ret_val: float) -> None:
    assert calculate(code, SymbolTable()) == pytest.approx(expected_ret_val)


@pytest.mark.parametrize(
    "variables, code, expected_ret_val",
    [
        pytest.param({"a": 7, "b": 3, "c": 2, "d": 0.5}, "(a + 1 - b * c) / d", 4.0),
        pytest.param({"x": 2}, "x ^ x ^ x", 16.0),
        pytest.param({"pi": 3}, "pi * 2", 6.0),
    ],
)
def test_eval_with_variables(variables: dict[str, float], code: str, expected_ret_val: float) -> None:
    assert calculate(code, SymbolTable.from_mapping(variables)) == pytest.approx(expected_ret_val)


def test_symbol_table_persists_between_statements() -> None:
    symbols = SymbolTable()
    statements = [parse(tokenize(code)) for code in ["a = 1", "b = 2", "c = a + b", "c * 10"]]
    assert evaluate(statements, symbols) == [1.0, 2.0, 3.0, 30.0]
    assert symbols.get("c") == 3.0


def test_near_zero_divisor_is_not_an_error() -> None:
    assert abs(calculate("1 / sin(pi)", SymbolTable())) > 1e15
