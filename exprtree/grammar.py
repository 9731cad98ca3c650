"""Grammar-based reference parser.

Builds the same parse-tree classes as :mod:`exprtree.parser` from a lark
LALR grammar, so the hand-written parser can be checked against it.
"""
from lark import Lark, v_args
from lark.visitors import Transformer_NonRecursive
from lark.exceptions import UnexpectedCharacters, UnexpectedInput, UnexpectedToken

from .errors import LexError, ParseError
from .lexer import Token, TokenType
from .parser import Number, BinaryExpression, FunctionCall

GRAMMAR = r"""
?start: expr
?expr: add_expr
?add_expr: mul_expr (ADD_OP mul_expr)*
?mul_expr: atom (MUL_OP atom)*
?atom: NUMBER        -> number
     | func_call
     | "(" expr ")"
func_call: NAME "(" _arg* ")"
_arg: expr | ","
ADD_OP: "+" | "-"
MUL_OP: "*" | "/"
NAME: /[A-Za-z]+/
NUMBER: /[0-9]+/
WS: /[ \t\n\v\f\r\u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+/
%ignore WS
"""

parser = Lark(GRAMMAR, start="start", parser="lalr", lexer="basic")

# lark terminal name -> our token type
_TERMINALS = {
    "NUMBER": TokenType.NUMBER,
    "NAME": TokenType.FUNCTION,
    "ADD_OP": TokenType.OPERATOR,
    "MUL_OP": TokenType.OPERATOR,
    "LPAR": TokenType.LPAREN,
    "RPAR": TokenType.RPAREN,
    "COMMA": TokenType.COMMA,
}

@v_args(inline=True)
class TreeBuilder(Transformer_NonRecursive):
    def number(self, tok): return Number(str(tok))

    def func_call(self, name, *args):
        return FunctionCall(str(name), tuple(args))

    def _fold(self, a, rest):
        n = a
        it = iter(rest)
        for op, b in zip(it, it):
            n = BinaryExpression(str(op), n, b)
        return n

    def add_expr(self, a, *rest): return self._fold(a, rest)
    def mul_expr(self, a, *rest): return self._fold(a, rest)


def _to_parse_error(err: UnexpectedInput) -> ParseError:
    if isinstance(err, UnexpectedToken) and err.token.type in _TERMINALS:
        tok = err.token
        return ParseError(Token(_TERMINALS[tok.type], str(tok), tok.start_pos))
    return ParseError()

def parse_with_grammar(text: str):
    try:
        tree = parser.parse(text)
    except UnexpectedCharacters as e:
        raise LexError(text[e.pos_in_stream], e.pos_in_stream) from None
    except UnexpectedInput as e:
        raise _to_parse_error(e) from None
    return TreeBuilder().transform(tree)
