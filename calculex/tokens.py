import enum
from dataclasses import dataclass, field
from typing import Optional, Union

from calculex.utils import PrintableEnum


class TokenType(PrintableEnum):
    END_OF_FILE = enum.auto()
    NEWLINE = enum.auto()
    NUMBER = enum.auto()
    IDENTIFIER = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    CARET = enum.auto()
    SQRT = enum.auto()
    LOG = enum.auto()
    SIN = enum.auto()
    COS = enum.auto()
    TAN = enum.auto()
    ARCSIN = enum.auto()
    ARCCOS = enum.auto()
    ARCTAN = enum.auto()
    EQUAL = enum.auto()
    BRACKET_OPEN = enum.auto()
    BRACKET_CLOSE = enum.auto()
    ERROR = enum.auto()

    def describe(self) -> str:
        return _DESCRIPTIONS.get(self, self.name)


_DESCRIPTIONS = {
    TokenType.END_OF_FILE: "end of input",
    TokenType.NEWLINE: "line break",
    TokenType.NUMBER: "number",
    TokenType.IDENTIFIER: "identifier",
    TokenType.PLUS: "'+'",
    TokenType.MINUS: "'-'",
    TokenType.STAR: "'*'",
    TokenType.SLASH: "'/'",
    TokenType.CARET: "'^'",
    TokenType.EQUAL: "'='",
    TokenType.BRACKET_OPEN: "'('",
    TokenType.BRACKET_CLOSE: "')'",
    TokenType.ERROR: "invalid token",
}


FUNCTION_NAMES = {
    "sqrt": TokenType.SQRT,
    "log": TokenType.LOG,
    "sin": TokenType.SIN,
    "cos": TokenType.COS,
    "tan": TokenType.TAN,
    "arcsin": TokenType.ARCSIN,
    "arccos": TokenType.ARCCOS,
    "arctan": TokenType.ARCTAN,
}

for _name, _type in FUNCTION_NAMES.items():
    _DESCRIPTIONS[_type] = f"function {_name!r}"

BINARY_OPERATORS = (TokenType.PLUS, TokenType.MINUS, TokenType.STAR, TokenType.SLASH, TokenType.CARET)

# higher binds tighter
BINARY_BINDING_POWER = {
    TokenType.PLUS: 1,
    TokenType.MINUS: 1,
    TokenType.STAR: 2,
    TokenType.SLASH: 2,
    TokenType.CARET: 3,
}

UNARY_BINDING_POWER = {
    TokenType.PLUS: 5,
    TokenType.MINUS: 5,
    **{function_type: 4 for function_type in FUNCTION_NAMES.values()},
}

LOWEST_BINDING_POWER = 0

RIGHT_ASSOCIATIVE = frozenset({TokenType.CARET})

# statement or group boundaries: an expression ends right before them
EXPRESSION_TERMINATORS = frozenset({TokenType.END_OF_FILE, TokenType.NEWLINE, TokenType.BRACKET_CLOSE})


TokenValue = Union[float, str, None]


@dataclass(frozen=True)
class Token:
    """Tagged token. Numbers carry a float, identifiers carry their name, other kinds carry nothing.

    ``lexeme`` and ``position`` only serve diagnostics and do not take part in comparison.
    """

    type: TokenType
    value: TokenValue = None
    lexeme: str = field(default="", compare=False)
    position: Optional[int] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.type is TokenType.NUMBER:
            if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
                raise ValueError(f"Number token requires a numeric value, got {self.value!r}")
            object.__setattr__(self, "value", float(self.value))
        elif self.type is TokenType.IDENTIFIER:
            if not isinstance(self.value, str) or not self.value:
                raise ValueError(f"Identifier token requires a name, got {self.value!r}")
        elif self.value is not None:
            raise ValueError(f"{self.type} token does not carry a value, got {self.value!r}")

    @classmethod
    def number(cls, value: float, lexeme: str = "", position: Optional[int] = None) -> "Token":
        return cls(type=TokenType.NUMBER, value=value, lexeme=lexeme or str(value), position=position)

    @classmethod
    def identifier(cls, name: str, lexeme: str = "", position: Optional[int] = None) -> "Token":
        return cls(type=TokenType.IDENTIFIER, value=name, lexeme=lexeme or name, position=position)

    @property
    def number_value(self) -> Optional[float]:
        return self.value if self.type is TokenType.NUMBER else None  # type: ignore

    @property
    def name(self) -> Optional[str]:
        return self.value if self.type is TokenType.IDENTIFIER else None  # type: ignore

    def is_operand(self) -> bool:
        return self.type in (TokenType.NUMBER, TokenType.IDENTIFIER)

    def is_unary_operator(self) -> bool:
        return self.type in UNARY_BINDING_POWER

    def is_binary_operator(self) -> bool:
        return self.type in BINARY_BINDING_POWER

    def is_operator(self) -> bool:
        return self.is_unary_operator() or self.is_binary_operator()

    def is_right_associative(self) -> bool:
        return self.type in RIGHT_ASSOCIATIVE

    def binary_binding_power(self) -> Optional[int]:
        return BINARY_BINDING_POWER.get(self.type)

    def unary_binding_power(self) -> Optional[int]:
        return UNARY_BINDING_POWER.get(self.type)

    def __str__(self) -> str:
        if self.type is TokenType.NUMBER:
            return f"<{self.type}>{self.value:g}"
        elif self.type is TokenType.IDENTIFIER:
            return f"<{self.type}>{self.value}"
        else:
            return f"<{self.type}>{self.lexeme}"
