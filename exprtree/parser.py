from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import ParseError
from .lexer import Token, TokenType, tokenize

PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}


class Node: ...

@dataclass(frozen=True)
class Number(Node):
    value: str

@dataclass(frozen=True)
class BinaryExpression(Node):
    operator: str
    left: Node
    right: Node

@dataclass(frozen=True)
class FunctionCall(Node):
    name: str
    arguments: Tuple[Node, ...] = ()


def operator_precedence(op: str) -> int:
    return PRECEDENCE.get(op, 0)


class Parser:
    """Precedence-climbing parser over a token list.

    ``self.index`` is the only mutable state; running past the end of
    ``self.tokens`` is how end of input is detected.
    """

    def __init__(self, tokens: List[Token], allow_trailing: bool = False):
        self.tokens = list(tokens)
        self.index = 0
        self.allow_trailing = allow_trailing

    @property
    def current(self) -> Optional[Token]:
        return self.tokens[self.index] if self.index < len(self.tokens) else None

    def advance(self) -> Token:
        token = self.current
        if token is None:
            raise ParseError()
        self.index += 1
        return token

    def expect(self, type_: TokenType) -> Token:
        token = self.current
        if token is None or token.type != type_:
            raise ParseError(token, expected=type_)
        self.index += 1
        return token

    def parse(self) -> Node:
        # each '(' or call costs two Python frames
        try:
            result = self.parse_expression()
        except RecursionError:
            raise ParseError(message="Expression is nested too deeply") from None
        if self.current is not None and not self.allow_trailing:
            raise ParseError(self.current)
        return result

    def parse_expression(self, min_precedence: int = 0) -> Node:
        left = self.parse_primary()

        while self.current is not None and self.current.type == TokenType.OPERATOR:
            op = self.current.value
            prec = operator_precedence(op)
            if prec <= min_precedence:
                break
            self.advance()
            # same-tier operators stop the recursive call, so they fold left here
            right = self.parse_expression(prec)
            left = BinaryExpression(op, left, right)

        return left

    def parse_primary(self) -> Node:
        token = self.current

        if token is None:
            raise ParseError()

        if token.type == TokenType.NUMBER:
            self.advance()
            return Number(token.value)

        if token.type == TokenType.LPAREN:
            self.advance()
            expr = self.parse_expression()
            self.expect(TokenType.RPAREN)
            return expr

        if token.type == TokenType.FUNCTION:
            return self.parse_call()

        raise ParseError(token)

    def parse_call(self) -> FunctionCall:
        name = self.expect(TokenType.FUNCTION).value
        self.expect(TokenType.LPAREN)

        args = []
        while True:
            token = self.current
            if token is None:
                raise ParseError(expected=TokenType.RPAREN)
            if token.type == TokenType.RPAREN:
                break
            if token.type == TokenType.COMMA:
                self.advance()
                continue
            args.append(self.parse_expression())

        self.expect(TokenType.RPAREN)
        return FunctionCall(name, tuple(args))


def parse(tokens: List[Token], allow_trailing: bool = False) -> Node:
    return Parser(tokens, allow_trailing=allow_trailing).parse()

def parse_expression_text(text: str, allow_trailing: bool = False) -> Node:
    return parse(tokenize(text), allow_trailing=allow_trailing)
