import logging
from typing import Iterable

from calculex.errors import EvalError
from calculex.parser import parse
from calculex.symbols import SymbolTable
from calculex.syntax_tree import Assignment, Statement
from calculex.tokenizer import tokenize

logger = logging.getLogger("calculex.runtime")


def execute(statement: Statement, symbols: SymbolTable) -> float:
    """Evaluate an expression or execute an assignment, returning the computed value"""
    try:
        if isinstance(statement, Assignment):
            value = statement.execute(symbols)
            logger.debug("%s := %r", statement.name, value)
        else:
            value = statement.evaluate(symbols)
            logger.debug("%s => %r", statement, value)
    except EvalError as e:
        logger.info("Evaluation of %s failed: %s", statement, e.errmsg)
        raise
    return value


def evaluate(statements: Iterable[Statement], symbols: SymbolTable) -> list[float]:
    """Run statements one after another against the same table, stopping at the first error"""
    results: list[float] = []
    for statement in statements:
        results.append(execute(statement, symbols))
    return results


def calculate(code: str, symbols: SymbolTable) -> float:
    """Tokenize, parse and run one line of input"""
    return execute(parse(tokenize(code)), symbols)
