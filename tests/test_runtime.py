import logging

import pytest

from calculex.errors import DivideByZeroError, ExpectedOperator
from calculex.parser import parse
from calculex.runtime import calculate, evaluate, execute
from calculex.symbols import SymbolTable
from calculex.tokenizer import TokenizerError, tokenize


def test_execute_expression_does_not_mutate() -> None:
    symbols = SymbolTable()
    assert execute(parse(tokenize("pi * 2")), symbols) == pytest.approx(6.283185307179586)
    assert len(symbols) == 4


def test_execute_assignment() -> None:
    symbols = SymbolTable()
    assert execute(parse(tokenize("r = 2")), symbols) == 2.0
    assert calculate("pi * r ^ 2", symbols) == pytest.approx(12.566370614359172)


def test_evaluate_stops_at_first_error() -> None:
    symbols = SymbolTable()
    statements = [parse(tokenize(code)) for code in ["a = 1", "b = a / 0", "c = 3"]]
    with pytest.raises(DivideByZeroError):
        evaluate(statements, symbols)
    assert symbols.get("a") == 1.0
    assert symbols.get("b") is None
    assert symbols.get("c") is None


def test_calculate_propagates_errors() -> None:
    with pytest.raises(TokenizerError):
        calculate("1 + $", SymbolTable())
    with pytest.raises(ExpectedOperator):
        calculate("1 + 2 3", SymbolTable())


def test_logging(caplog: pytest.LogCaptureFixture) -> None:
    symbols = SymbolTable()
    with caplog.at_level(logging.DEBUG, logger="calculex"):
        calculate("x = 1 + 1", symbols)
        with pytest.raises(DivideByZeroError):
            calculate("x / 0", symbols)

    messages = [(r.name, r.levelno, r.getMessage()) for r in caplog.records]
    assert ("calculex.parser", logging.DEBUG, "Parsed statement: x = 1 + 1") in messages
    assert ("calculex.runtime", logging.DEBUG, "x := 2.0") in messages
    assert ("calculex.runtime", logging.INFO, "Evaluation of (x / 0) failed: Division by zero in (x / 0)") in messages
