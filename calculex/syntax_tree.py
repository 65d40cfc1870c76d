"""Expression trees and their evaluation.

Every node owns its children: trees are built bottom-up by the parser and never share
subtrees, so ``clone`` is a plain structural copy costing O(size of the subtree). Evaluation
errors carry a clone of the failing subexpression, so raising one costs as much as copying it.
"""

import math
from dataclasses import dataclass
from typing import Union

from calculex.builtins import BINARY_FUNCS, UNARY_FUNCS, DomainError
from calculex.errors import ComplexResultError, DivideByZeroError, UndefinedVariable
from calculex.symbols import SymbolTable
from calculex.tokens import Token, TokenType


@dataclass
class Operand:
    token: Token

    def __post_init__(self) -> None:
        if not self.token.is_operand():
            raise ValueError(f"Operand requires a number or identifier token, got {self.token}")

    def evaluate(self, symbols: SymbolTable) -> float:
        if self.token.type is TokenType.NUMBER:
            return self.token.value  # type: ignore
        value = symbols.get(self.token.value)  # type: ignore
        if value is None:
            raise UndefinedVariable(self.clone())
        return value

    def clone(self) -> "Operand":
        return Operand(self.token)

    def __str__(self) -> str:
        if self.token.type is TokenType.NUMBER:
            return f"{self.token.value:g}"
        return str(self.token.value)


@dataclass
class UnaryOp:
    operator: Token
    operand: "Expression"

    def __post_init__(self) -> None:
        if not self.operator.is_unary_operator():
            raise ValueError(f"Unary operation requires a unary operator token, got {self.operator}")
        if self.operand is None:
            raise ValueError("Unary operation requires an operand")

    def evaluate(self, symbols: SymbolTable) -> float:
        arg = self.operand.evaluate(symbols)
        try:
            result = UNARY_FUNCS[self.operator.type](arg)
        except DomainError:
            raise ComplexResultError(self.clone()) from None
        if math.isnan(result):
            raise ComplexResultError(self.clone())
        return result

    def clone(self) -> "UnaryOp":
        return UnaryOp(self.operator, self.operand.clone())

    def __str__(self) -> str:
        if self.operator.type in (TokenType.PLUS, TokenType.MINUS):
            return f"{_SYMBOLS[self.operator.type]}{self.operand}"
        return f"{self.operator.type.name.lower()}({_strip_parens(str(self.operand))})"


@dataclass
class BinOp:
    operator: Token
    left: "Expression"
    right: "Expression"

    def __post_init__(self) -> None:
        if not self.operator.is_binary_operator():
            raise ValueError(f"Binary operation requires a binary operator token, got {self.operator}")
        missing = [side for side, child in (("left", self.left), ("right", self.right)) if child is None]
        if missing:
            raise ValueError(f"Binary operation is missing its {' and '.join(missing)} operand")

    def evaluate(self, symbols: SymbolTable) -> float:
        # both sides are always evaluated, left first
        left_res = self.left.evaluate(symbols)
        right_res = self.right.evaluate(symbols)
        if self.operator.type is TokenType.SLASH and right_res == 0.0:  # also true for -0.0
            raise DivideByZeroError(self.clone())
        try:
            result = BINARY_FUNCS[self.operator.type](left_res, right_res)
        except DomainError:
            raise ComplexResultError(self.clone()) from None
        if math.isnan(result):
            raise ComplexResultError(self.clone())
        return result

    def clone(self) -> "BinOp":
        return BinOp(self.operator, self.left.clone(), self.right.clone())

    def __str__(self) -> str:
        return f"({self.left} {_SYMBOLS[self.operator.type]} {self.right})"


Expression = Union[Operand, UnaryOp, BinOp]


@dataclass
class Assignment:
    target: Token
    value: Expression

    def __post_init__(self) -> None:
        if self.target.type is not TokenType.IDENTIFIER:
            raise ValueError(f"Only identifiers can be assigned to, got {self.target}")
        if self.value is None:
            raise ValueError("Assignment requires a right-hand side expression")

    @property
    def name(self) -> str:
        return self.target.value  # type: ignore

    def execute(self, symbols: SymbolTable) -> float:
        """Evaluate the right-hand side and bind it; the table is left untouched if evaluation fails"""
        value = self.value.evaluate(symbols)
        symbols.set(self.name, value)
        return value

    def clone(self) -> "Assignment":
        return Assignment(self.target, self.value.clone())

    def __str__(self) -> str:
        return f"{self.name} = {_strip_parens(str(self.value))}"


Statement = Union[Expression, Assignment]


_SYMBOLS = {
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.STAR: "*",
    TokenType.SLASH: "/",
    TokenType.CARET: "^",
}


def _strip_parens(s: str) -> str:
    # only when the outer pair encloses the whole string
    if not (s.startswith("(") and s.endswith(")")):
        return s
    depth = 0
    for i, char in enumerate(s):
        depth += {"(": 1, ")": -1}.get(char, 0)
        if depth == 0 and i < len(s) - 1:
            return s
    return s[1:-1]
