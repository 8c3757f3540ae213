"""
Postfix Emitter
===============

Renders recognized operands and operators as text. Each rendering is
followed by a single space, so the tokens of one statement come out
space separated; statement terminators and the program frame are
written by the parser through write().

Rendering Table
---------------
| Token          | Output        |
|----------------|---------------|
| + - *          | itself        |
| / (or \\)      | \\            |
| %              | %             |
| div            | DIV           |
| mod            | MOD           |
| number         | decimal value |
| identifier     | its lexeme    |
"""

from typing import TextIO, Union

from pasfix.translator.lexer import TokenType
from pasfix.translator.symbols import SymbolTable


# Fixed renderings for operator tokens
OPERATOR_TEXT: dict[TokenType, str] = {
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.STAR: "*",
    TokenType.SLASH: "\\",
    TokenType.PERCENT: "%",
    TokenType.DIV: "DIV",
    TokenType.MOD: "MOD",
}


class Emitter:
    """
    Writes postfix output to a text stream.

    Attributes:
        out: Destination stream; text is written as soon as it is emitted
        symbols: Table used to recover identifier text from handles
    """

    def __init__(self, out: TextIO, symbols: SymbolTable):
        self.out = out
        self.symbols = symbols

    def render(self, token_type: TokenType, value: Union[int, str, None] = None) -> str:
        """Return the text for one token, without the trailing space."""
        if token_type in OPERATOR_TEXT:
            return OPERATOR_TEXT[token_type]
        if token_type == TokenType.NUM:
            return str(value)
        if token_type == TokenType.ID:
            return self.symbols.lexeme(value)
        # Unreachable from the grammar
        return f"token {token_type.name}, tokenval {value}"

    def emit(self, token_type: TokenType, value: Union[int, str, None] = None) -> None:
        """Write one rendered token followed by a space."""
        self.out.write(self.render(token_type, value) + " ")

    def write(self, text: str) -> None:
        """Write structural text (header, terminators) verbatim."""
        self.out.write(text)
