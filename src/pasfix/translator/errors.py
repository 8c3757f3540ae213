"""
Translator Error Hierarchy
==========================

This module defines the exceptions raised by the postfix translator.
All of them inherit from TranslatorError, which itself inherits from
the base PasfixError.

Exception Hierarchy
-------------------
TranslatorError (base for all translator errors)
├── TranslatorSyntaxError - parser saw a token the grammar does not allow
│   └── UnexpectedTokenError - expected one kind of token, found another
└── TranslatorLimitError - a bounded resource overflowed
    ├── TokenTooLongError - identifier longer than the lexeme buffer
    ├── NumberTooLongError - digit run longer than the lexeme buffer
    ├── SymbolTableFullError - more distinct lexemes than table slots
    └── NestingTooDeepError - parentheses nested beyond the call stack

Every error is fatal for the current run: nothing in the translator
catches them, and the first one raised is the only one reported.

Error Message Format
--------------------
    line 3: syntax error in match: expected ';', found ')'
"""

from typing import Optional

from pasfix.errors import PasfixError, SourceLocation


# =============================================================================
# Base Translator Exception
# =============================================================================

class TranslatorError(PasfixError):
    """
    Base exception for all translator errors.

    Attributes:
        message: The error description
        location: Line (and file) where the error was detected
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
    ):
        self.message = message
        self.location = location
        super().__init__(self._format_message())

    @property
    def line(self) -> Optional[int]:
        """Line number of the error, if known."""
        return self.location.line if self.location else None

    def _format_message(self) -> str:
        """Format as 'line N: message', the single diagnostic line."""
        if self.location:
            return f"{self.location}: {self.message}"
        return self.message


# =============================================================================
# Syntax Errors
# =============================================================================

class TranslatorSyntaxError(TranslatorError):
    """
    Syntax error in the source program.

    Examples:
        - header missing the 'input' keyword
        - statement missing its terminating ';'
        - operator where an operand is required
    """
    pass


class UnexpectedTokenError(TranslatorSyntaxError):
    """
    The lookahead token is not the one a grammar rule requires.

    Attributes:
        expected: Description of what the grammar wanted (may be None)
        found: Description of the token actually seen
    """

    def __init__(
        self,
        found: str,
        expected: Optional[str] = None,
        location: Optional[SourceLocation] = None,
        context: str = "syntax error",
    ):
        self.found = found
        self.expected = expected

        if expected:
            message = f"{context}: expected {expected}, found {found}"
        else:
            message = f"{context}: unexpected {found}"

        super().__init__(message, location=location)


# =============================================================================
# Resource Limit Errors
# =============================================================================

class TranslatorLimitError(TranslatorError):
    """A fixed-capacity buffer or table overflowed."""
    pass


class TokenTooLongError(TranslatorLimitError):
    """
    Identifier longer than the lexeme buffer.

    Raised as soon as the buffered identifier reaches the buffer
    capacity, before the rest of the run is read.
    """

    def __init__(
        self,
        limit: int,
        location: Optional[SourceLocation] = None,
    ):
        self.limit = limit
        super().__init__("compiler error: token too long", location=location)


class SymbolTableFullError(TranslatorLimitError):
    """More distinct lexemes than the symbol table can hold."""

    def __init__(
        self,
        capacity: int,
        location: Optional[SourceLocation] = None,
    ):
        self.capacity = capacity
        super().__init__("symbol table full", location=location)


class NestingTooDeepError(TranslatorLimitError):
    """Parentheses nested deeper than the parser's call stack allows."""

    def __init__(self, location: Optional[SourceLocation] = None):
        super().__init__("expression nested too deeply", location=location)


class NumberTooLongError(TranslatorLimitError):
    """Integer literal with more digits than the lexeme buffer holds."""

    def __init__(
        self,
        limit: int,
        location: Optional[SourceLocation] = None,
    ):
        self.limit = limit
        super().__init__("compiler error: number too long", location=location)
