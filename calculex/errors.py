"""Errors raised while parsing and evaluating statements.

The two families never overlap: a ``ParserError`` means the token sequence is malformed and
points at the offending token, an ``EvalError`` means a well-formed expression produced an
invalid value and carries a copy of the offending subexpression.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from calculex.tokenizer import render_caret
from calculex.tokens import BINARY_OPERATORS, Token, TokenType
from calculex.utils import human_join

if TYPE_CHECKING:
    from calculex.syntax_tree import Expression, Operand


def describe_token(token: Token) -> str:
    if token.type in (TokenType.END_OF_FILE, TokenType.NEWLINE):
        return token.type.describe()
    elif token.type is TokenType.ERROR:
        return f"invalid character {token.lexeme!r}"
    elif token.lexeme:
        return f"{token.type.describe()} {token.lexeme!r}" if token.is_operand() else repr(token.lexeme)
    else:
        return str(token)


@dataclass
class ParserError(Exception):
    errmsg: str
    token: Token

    def __str__(self) -> str:
        return f"[Parser error] {self.errmsg}"

    def render(self, code: str) -> str:
        """Error message followed by an excerpt of ``code`` pointing at the offending token"""
        if self.token.position is None:
            return str(self)
        return "\n".join([str(self), *render_caret(code, self.token.position)])


class ExpectedToken(ParserError):
    def __init__(self, expected: Iterable[TokenType], actual: Token) -> None:
        self.expected = tuple(expected)
        if not self.expected:
            raise ValueError("At least one expected token type is required")
        if len(self.expected) == 1:
            what = self.expected[0].describe()
        else:
            what = "one of " + human_join(t.describe() for t in self.expected)
        super().__init__(errmsg=f"Expected {what}, found {describe_token(actual)}", token=actual)

    @property
    def actual(self) -> Token:
        return self.token


class ExpectedOperator(ExpectedToken):
    def __init__(self, actual: Token) -> None:
        super().__init__(BINARY_OPERATORS, actual)
        self.errmsg = f"Binary operator expected, found {describe_token(actual)}"


class MismatchedParentheses(ParserError):
    """A parenthesis without its pair.

    ``opening`` is the unmatched parenthesis itself: a ``(`` that was never closed, or a stray
    ``)`` with no ``(`` before it, in which case ``nearby`` is that same token.
    """

    def __init__(self, opening: Token, nearby: Token) -> None:
        self.opening = opening
        self.nearby = nearby
        if opening.type is TokenType.BRACKET_CLOSE:
            errmsg = "Unmatched closing parenthesis ')'"
        else:
            errmsg = f"Mismatched parenthesis {opening.lexeme or str(opening)!r} near {describe_token(nearby)}"
        super().__init__(errmsg=errmsg, token=nearby)


@dataclass
class EvalError(Exception):
    errmsg: str
    expression: "Expression"

    def __str__(self) -> str:
        return f"[Evaluation error] {self.errmsg}"


class UndefinedVariable(EvalError):
    def __init__(self, expression: "Operand") -> None:
        super().__init__(errmsg=f"Variable {expression.token.name!r} is not defined", expression=expression)

    @property
    def name(self) -> str:
        return self.expression.token.name  # type: ignore


class DivideByZeroError(EvalError):
    """Raised only when the divisor is exactly zero.

    Divisors that come out as tiny non-zero numbers because of rounding (``1 / sin(pi)``)
    are divided normally.
    """

    def __init__(self, expression: "Expression") -> None:
        super().__init__(errmsg=f"Division by zero in {expression}", expression=expression)


class ComplexResultError(EvalError):
    def __init__(self, expression: "Expression") -> None:
        super().__init__(errmsg=f"Result of {expression} is not a real number", expression=expression)
