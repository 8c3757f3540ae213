"""
pasfix - Postfix Translator for a Pascal-like Expression Language
=================================================================

This package translates small Pascal-style programs made of arithmetic
expression statements into the same program with every expression
written in postfix order.

Main Components
---------------
- **translator**: symbol table, lexer, recursive descent parser and
  emitter, fused into a single pass
- **cli**: the ``pasfix`` command-line tool

Quick Start
-----------
    >>> from pasfix import translate
    >>> print(translate("program P ( input , output ) { a + b * c ; }"), end="")
    program P(input,output)
    {
    a b c * + ;
    }

Or from the command line:
    $ pasfix prog.pas prog.out
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from pasfix.errors import PasfixError, SourceLocation
from pasfix.translator import (
    Translator,
    TranslatorOptions,
    TranslationResult,
    translate,
    TranslatorError,
    TranslatorSyntaxError,
    UnexpectedTokenError,
    TranslatorLimitError,
    TokenTooLongError,
    SymbolTableFullError,
    NumberTooLongError,
    NestingTooDeepError,
)

__all__ = [
    "__version__",
    # Errors
    "PasfixError",
    "SourceLocation",
    "TranslatorError",
    "TranslatorSyntaxError",
    "UnexpectedTokenError",
    "TranslatorLimitError",
    "TokenTooLongError",
    "SymbolTableFullError",
    "NumberTooLongError",
    "NestingTooDeepError",
    # Translation
    "Translator",
    "TranslatorOptions",
    "TranslationResult",
    "translate",
]
