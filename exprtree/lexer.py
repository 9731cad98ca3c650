# exprtree/lexer.py
from enum import Enum, auto
from typing import List, NamedTuple

from .errors import LexError

DIGITS = "0123456789"
LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
OPERATORS = "+-*/"
# the JavaScript \s class; str.isspace() also admits \x1c-\x1f and \x85
WHITESPACE = (
    " \t\n\v\f\r\u00a0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200b))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


class TokenType(Enum):
    NUMBER = auto()
    OPERATOR = auto()
    LPAREN = auto()
    RPAREN = auto()
    FUNCTION = auto()
    COMMA = auto()


class Token(NamedTuple):
    type: TokenType
    value: str
    pos: int

    def __repr__(self):
        return f"Token({self.type.name}, {self.value!r})"


_SINGLE = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ",": TokenType.COMMA,
}


class Lexer:
    """Left-to-right scanner over ``text``; raises on the first unknown character."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    @property
    def current(self):
        return self.text[self.pos] if self.pos < len(self.text) else None

    def _run(self, charset: str, type_: TokenType) -> Token:
        start = self.pos
        while self.current is not None and self.current in charset:
            self.pos += 1
        return Token(type_, self.text[start:self.pos], start)

    def generate_tokens(self) -> List[Token]:
        tokens = []
        while self.current is not None:
            ch = self.current

            if ch in WHITESPACE:
                self.pos += 1
                continue

            if ch in DIGITS:
                tokens.append(self._run(DIGITS, TokenType.NUMBER))
                continue

            if ch in LETTERS:
                tokens.append(self._run(LETTERS, TokenType.FUNCTION))
                continue

            if ch in OPERATORS:
                tokens.append(Token(TokenType.OPERATOR, ch, self.pos))
            elif ch in _SINGLE:
                tokens.append(Token(_SINGLE[ch], ch, self.pos))
            else:
                raise LexError(ch, self.pos)

            self.pos += 1

        return tokens


def tokenize(text: str) -> List[Token]:
    return Lexer(text).generate_tokens()
