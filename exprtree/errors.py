from typing import Optional


class ExpressionError(Exception):
    """Base class for everything the expression pipeline raises."""


class LexError(ExpressionError):
    def __init__(self, char: str, pos: int):
        self.char, self.pos = char, pos
        super().__init__(f"Unexpected character {char!r} at position {pos}")


class ParseError(ExpressionError):
    """Raised on an unexpected token, or on end of input when ``token`` is None."""

    def __init__(self, token=None, expected=None, message: Optional[str] = None):
        self.token, self.expected = token, expected
        super().__init__(message or self._describe())

    def _describe(self) -> str:
        if self.token is None:
            msg = "Unexpected end of input"
        else:
            msg = f"Unexpected token {self.token.type.name} {self.token.value!r} at position {self.token.pos}"
        if self.expected is not None:
            msg += f", expected {self.expected.name}"
        return msg
