import logging
from typing import Iterable, Union

from calculex.errors import ExpectedOperator, ExpectedToken, MismatchedParentheses
from calculex.syntax_tree import Assignment, BinOp, Expression, Operand, Statement, UnaryOp
from calculex.token_stream import TokenStream
from calculex.tokens import EXPRESSION_TERMINATORS, LOWEST_BINDING_POWER, Token, TokenType

logger = logging.getLogger("calculex.parser")


class Parser:
    """Precedence climbing parser for a single statement.

    Each call to ``parse_expression`` parses an operand (or a prefix operator with its
    operand), then keeps folding binary operators into the left-hand side for as long as
    they bind tighter than ``min_bp``. The threshold test is strict for the right-associative
    ``^`` and non-strict for the other operators, which makes ``2^2^2`` group as ``2^(2^2)``
    and ``2-2-2`` as ``(2-2)-2``.
    """

    def __init__(self, tokens: Union[TokenStream, Iterable[Token]]) -> None:
        self.tokens = tokens if isinstance(tokens, TokenStream) else TokenStream(tokens)

    def parse_statement(self) -> Statement:
        if self.tokens.peek().type is not TokenType.IDENTIFIER:
            return self.parse_expression()

        target = self.tokens.next()
        if self.tokens.peek().type is not TokenType.EQUAL:
            self.tokens.give_back(target)
            return self.parse_expression()
        self.tokens.next()  # skipping '='
        return Assignment(target=target, value=self.parse_expression())

    def parse_expression(self, min_bp: int = LOWEST_BINDING_POWER) -> Expression:
        first = self.tokens.next()
        lhs: Expression
        if first.is_operand():
            lhs = Operand(first)
        elif first.type is TokenType.BRACKET_OPEN:
            lhs = self.parse_expression(LOWEST_BINDING_POWER)
            closing = self.tokens.next()
            if closing.type is not TokenType.BRACKET_CLOSE:
                raise MismatchedParentheses(opening=first, nearby=closing)
        elif first.is_unary_operator():
            lhs = UnaryOp(operator=first, operand=self.parse_expression(first.unary_binding_power()))  # type: ignore
        else:
            raise ExpectedToken([TokenType.IDENTIFIER, TokenType.NUMBER, TokenType.BRACKET_OPEN], first)

        while True:
            operator = self.tokens.peek()
            if operator.type in EXPRESSION_TERMINATORS:
                return lhs

            bp = operator.binary_binding_power()
            if bp is None:
                # also covers functions, which are only valid in prefix position
                raise ExpectedOperator(operator)
            if bp < min_bp or (bp == min_bp and not operator.is_right_associative()):
                return lhs

            self.tokens.next()
            rhs = self.parse_expression(bp)
            lhs = BinOp(operator=operator, left=lhs, right=rhs)


def parse(tokens: Union[TokenStream, Iterable[Token]]) -> Statement:
    """Parse exactly one statement, which must span the whole token sequence"""
    parser = Parser(tokens)
    statement = parser.parse_statement()

    trailing = parser.tokens.next()
    if trailing.type is TokenType.NEWLINE:
        trailing = parser.tokens.next()
    if trailing.type is TokenType.BRACKET_CLOSE:
        # closes a group that was never opened
        raise MismatchedParentheses(opening=trailing, nearby=trailing)
    if trailing.type is not TokenType.END_OF_FILE:
        raise ExpectedToken([TokenType.END_OF_FILE], trailing)

    logger.debug("Parsed statement: %s", statement)
    return statement
