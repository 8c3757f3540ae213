"""
Lexical Analyzer
================

This module converts a character stream into tokens for the parser.
Tokens are produced on demand, one per call to Lexer.next_token(); the
parser never sees more than one token ahead.

Token Categories
----------------
- Keywords: div, mod, program, input, output
- Identifiers: a letter followed by letters and digits
- Numbers: unsigned decimal integers
- Punctuation: + - * / % ( ) { } , ;
- Alternate division: a backslash lexes as '/'
- Any other character becomes an OTHER token carrying that character

Comments
--------
``#`` starts a comment that runs to the end of the line.

Example Usage
-------------
>>> from pasfix.translator.lexer import Lexer, CharReader, new_symbol_table
>>> lexer = Lexer(CharReader("a + 10;"), new_symbol_table())
>>> for token in lexer.tokenize():
...     print(token)
Token(ID, 6, line 1)
Token(PLUS, line 1)
Token(NUM, 10, line 1)
Token(SEMICOLON, line 1)
Token(DONE, line 1)
"""

import io
import logging
import string
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional, TextIO, Union

from pasfix.errors import SourceLocation
from pasfix.translator.errors import NumberTooLongError, TokenTooLongError
from pasfix.translator.symbols import (
    DEFAULT_CAPACITY,
    NOT_FOUND,
    SymbolTable,
)

logger = logging.getLogger(__name__)

# Lexeme buffer size; an identifier this long is rejected
DEFAULT_MAX_TOKEN_LENGTH = 128

# CPython refuses int/str conversion of longer digit strings
INT_DIGIT_LIMIT = 4300


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Token kinds produced by the lexer."""

    # === Structural ===
    DONE = auto()           # End of input

    # === Literals and Names ===
    NUM = auto()            # Decimal integer literal
    ID = auto()             # User identifier

    # === Keywords ===
    DIV = auto()            # div
    MOD = auto()            # mod
    PROGRAM = auto()        # program
    INPUT = auto()          # input
    OUTPUT = auto()         # output

    # === Operators ===
    PLUS = auto()           # +
    MINUS = auto()          # -
    STAR = auto()           # *
    SLASH = auto()          # / or \
    PERCENT = auto()        # %

    # === Delimiters ===
    LPAREN = auto()         # (
    RPAREN = auto()         # )
    LBRACE = auto()         # {
    RBRACE = auto()         # }
    COMMA = auto()          # ,
    SEMICOLON = auto()      # ;

    # === Anything else ===
    OTHER = auto()          # Unrecognized character, carried as the value


# Reserved words, in the order they are seeded into the symbol table
KEYWORDS: list[tuple[str, TokenType]] = [
    ("div", TokenType.DIV),
    ("mod", TokenType.MOD),
    ("program", TokenType.PROGRAM),
    ("input", TokenType.INPUT),
    ("output", TokenType.OUTPUT),
]

PUNCTUATION: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "\\": TokenType.SLASH,
    "%": TokenType.PERCENT,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
}

# Source spelling of each fixed token kind, for diagnostics
SPELLINGS: dict[TokenType, str] = {
    **{token_type: lexeme for lexeme, token_type in KEYWORDS},
    **{token_type: char for char, token_type in PUNCTUATION.items() if char != "\\"},
    TokenType.DONE: "end of input",
    TokenType.NUM: "number",
    TokenType.ID: "identifier",
}


def describe(token_type: TokenType) -> str:
    """Human readable name of a token kind: 'div', "';'", 'identifier'."""
    spelling = SPELLINGS.get(token_type)
    if spelling is None:
        return token_type.name
    if token_type in (TokenType.DONE, TokenType.NUM, TokenType.ID):
        return spelling
    return f"'{spelling}'"


def new_symbol_table(capacity: int = DEFAULT_CAPACITY) -> SymbolTable:
    """Create a symbol table pre-populated with the reserved words."""
    table = SymbolTable(capacity)
    table.seed(KEYWORDS)
    return table


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single lexical unit.

    Attributes:
        type: The TokenType classification
        value: Integer value for NUM, symbol handle for ID and keywords,
               the character itself for OTHER, None otherwise
        line: Line counter at the moment the token was produced
    """
    type: TokenType
    value: Union[int, str, None] = None
    line: int = 1

    def __repr__(self) -> str:
        if self.value is not None:
            return f"Token({self.type.name}, {self.value!r}, line {self.line})"
        return f"Token({self.type.name}, line {self.line})"

    __str__ = __repr__

    @property
    def location(self) -> SourceLocation:
        return SourceLocation(self.line)

    def describe(self) -> str:
        """Describe the token for a diagnostic ("'+'", "number 12", ...)."""
        if self.type == TokenType.OTHER:
            return f"character {self.value!r}"
        if self.type == TokenType.NUM:
            return f"number {self.value}"
        return describe(self.type)


# =============================================================================
# Character Stream
# =============================================================================

class CharReader:
    """
    Character source with one character of push-back.

    End of input is reported as an empty string, and stays that way
    on every later read.

    Usage:
        reader = CharReader(open("prog.pas"))
        char = reader.read()
        reader.unread(char)
    """

    def __init__(self, source: Union[str, TextIO]):
        if isinstance(source, str):
            source = io.StringIO(source)
        self._stream = source
        self._pushed: Optional[str] = None

    def read(self) -> str:
        """Consume and return the next character, or "" at end of input."""
        if self._pushed is not None:
            char, self._pushed = self._pushed, None
            return char
        return self._stream.read(1)

    def unread(self, char: str) -> None:
        """Push one character back so the next read() returns it."""
        if self._pushed is not None:
            raise RuntimeError("only one character of push-back is supported")
        self._pushed = char


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Produces tokens from a CharReader, interning names in a SymbolTable.

    Attributes:
        reader: The character source
        symbols: Table shared with the emitter
        max_token_length: Size of the identifier buffer
    """

    DIGITS = string.digits
    LETTERS = string.ascii_letters
    IDENT_CHARS = string.ascii_letters + string.digits

    def __init__(
        self,
        reader: CharReader,
        symbols: SymbolTable,
        max_token_length: int = DEFAULT_MAX_TOKEN_LENGTH,
        filename: Optional[str] = None,
    ):
        self.reader = reader
        self.symbols = symbols
        self.max_token_length = max_token_length
        self.filename = filename
        self._line = 1

    @property
    def lineno(self) -> int:
        """Number of the line currently being read (1-indexed)."""
        return self._line

    @property
    def location(self) -> SourceLocation:
        return SourceLocation(self._line, self.filename)

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens up to and including the first DONE token."""
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.DONE:
                return

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Raises:
            TokenTooLongError: If an identifier overflows the buffer
            NumberTooLongError: If a digit run overflows the buffer
            SymbolTableFullError: If a new identifier does not fit
        """
        while True:
            char = self.reader.read()

            if char in (" ", "\t"):
                continue

            if char == "\n":
                self._line += 1
                continue

            if char == "#":
                self._skip_comment()
                continue

            if char == "":
                return self._make_token(TokenType.DONE)

            if char in self.DIGITS:
                return self._scan_number(char)

            if char in self.LETTERS:
                return self._scan_word(char)

            if char in PUNCTUATION:
                return self._make_token(PUNCTUATION[char])

            return self._make_token(TokenType.OTHER, char)

    # =========================================================================
    # Scanning Helpers
    # =========================================================================

    def _make_token(self, token_type: TokenType, value=None) -> Token:
        return Token(token_type, value, self._line)

    def _skip_comment(self) -> None:
        """Discard up to and including the next newline."""
        while True:
            char = self.reader.read()
            if char == "":
                return
            if char == "\n":
                self._line += 1
                return

    def _scan_number(self, first: str) -> Token:
        """Scan a decimal literal; digit runs share the lexeme buffer limit."""
        limit = min(self.max_token_length, INT_DIGIT_LIMIT)
        digits = [first]
        char = self.reader.read()
        while char and char in self.DIGITS:
            digits.append(char)
            if len(digits) >= limit:
                raise NumberTooLongError(limit, self.location)
            char = self.reader.read()
        if char:
            self.reader.unread(char)
        return self._make_token(TokenType.NUM, int("".join(digits)))

    def _scan_word(self, first: str) -> Token:
        """Scan an identifier or keyword and resolve it to a handle."""
        chars = []
        char = first
        while char and char in self.IDENT_CHARS:
            chars.append(char)
            if len(chars) >= self.max_token_length:
                raise TokenTooLongError(self.max_token_length, self.location)
            char = self.reader.read()

        if char:
            self.reader.unread(char)

        lexeme = "".join(chars)
        handle = self.symbols.lookup(lexeme)
        if handle == NOT_FOUND:
            handle = self.symbols.insert(lexeme, TokenType.ID, self.location)
            logger.debug(f"Interned {lexeme!r} as handle {handle}")

        return self._make_token(self.symbols.entry(handle).token_type, handle)
