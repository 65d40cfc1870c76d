from typing import Iterable, Optional

from calculex.tokens import Token, TokenType


class TokenStream:
    """Cursor over a finished token sequence with one token of lookahead and one slot of push-back"""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = list(tokens)
        if not self._tokens or self._tokens[-1].type is not TokenType.END_OF_FILE:
            self._tokens.append(Token(type=TokenType.END_OF_FILE))
        self._idx = 0
        self._given_back: Optional[Token] = None

    def peek(self) -> Token:
        if self._given_back is not None:
            return self._given_back
        return self._tokens[self._idx]

    def next(self) -> Token:
        if self._given_back is not None:
            token, self._given_back = self._given_back, None
            return token
        token = self._tokens[self._idx]
        if token.type is not TokenType.END_OF_FILE:
            self._idx += 1
        return token

    def give_back(self, token: Token) -> None:
        if self._given_back is not None:
            raise RuntimeError(f"Only one token can be given back, {self._given_back} is already pending")
        self._given_back = token

    def at_end(self) -> bool:
        return self.peek().type is TokenType.END_OF_FILE

    def __repr__(self) -> str:
        remaining = ([self._given_back] if self._given_back is not None else []) + self._tokens[self._idx :]
        return f"TokenStream({' '.join(str(t) for t in remaining)})"
