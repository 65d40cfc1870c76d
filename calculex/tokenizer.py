import re
from dataclasses import dataclass

from calculex.tokens import FUNCTION_NAMES, Token, TokenType


def render_caret(code: str, error_char_idx: int) -> list[str]:
    """Excerpt of ``code`` around ``error_char_idx`` with a caret line under it"""
    print_start_idx = max(0, error_char_idx - 10)
    print_ellipsis_pre = print_start_idx > 0
    print_end_idx = min(len(code), error_char_idx + 10)
    print_ellipsis_post = print_end_idx < len(code)
    return [
        (
            ("..." if print_ellipsis_pre else "")
            + f"{code[print_start_idx:print_end_idx]}"
            + ("..." if print_ellipsis_post else "")
        ),
        " " * (error_char_idx - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
    ]


@dataclass
class TokenizerError(Exception):
    errmsg: str
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        return "\n".join([f"[Tokenizer error] {self.errmsg}", *render_caret(self.code, self.error_char_idx)])


SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "^": TokenType.CARET,
    "=": TokenType.EQUAL,
    "(": TokenType.BRACKET_OPEN,
    ")": TokenType.BRACKET_CLOSE,
    "\n": TokenType.NEWLINE,
}

NUMBER_RE = re.compile(r"(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")
IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def tokenize(code: str, strict: bool = True) -> list[Token]:
    """Split one line of input into tokens, always terminated by an END_OF_FILE token.

    Characters that cannot start a token raise ``TokenizerError``, or become ERROR tokens
    when ``strict`` is off so the parser gets to report them.
    """
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        number_match = NUMBER_RE.match(code, i)
        ident_match = IDENTIFIER_RE.match(code, i)
        if number_match:
            lexeme = number_match.group()
            tokens.append(Token.number(float(lexeme), lexeme=lexeme, position=i))
            i = number_match.end()
            continue
        elif ident_match:
            lexeme = ident_match.group()
            if lexeme in FUNCTION_NAMES:
                tokens.append(Token(type=FUNCTION_NAMES[lexeme], lexeme=lexeme, position=i))
            else:
                tokens.append(Token.identifier(lexeme, position=i))
            i = ident_match.end()
            continue
        elif code[i] in SINGLE_CHAR_TOKENS:
            tokens.append(Token(type=SINGLE_CHAR_TOKENS[code[i]], lexeme=code[i], position=i))
        elif code[i].isspace():
            pass
        elif strict:
            raise TokenizerError(f"Unexpected character: {code[i]!r}", code=code, error_char_idx=i)
        else:
            tokens.append(Token(type=TokenType.ERROR, lexeme=code[i], position=i))
        i += 1

    tokens.append(Token(type=TokenType.END_OF_FILE, lexeme="", position=len(code)))
    return tokens


def untokenize(tokens: list[Token]) -> str:
    result = " ".join(t.lexeme for t in tokens if t.lexeme and t.type is not TokenType.NEWLINE)

    # ( 1 + 2 ) => (1 + 2)
    result = re.sub(r"\(\s+", "(", result)
    result = re.sub(r"\s+\)", ")", result)

    # 4 ^ 5 => 4^5
    result = re.sub(r"\s+\^\s+", "^", result)
    return result
