"""
Postfix Translator
==================

This package implements a single-pass translator for a small
Pascal-like language. A program consists of a header and a braced
list of arithmetic expression statements; every expression is
rewritten in postfix order with the operators after their operands.

- A symbol table interning identifiers and keywords to handles
- A lexer producing one token at a time
- A recursive descent parser that emits output while it parses
- An emitter rendering operands and operators

Pipeline
--------
    Source → Lexer → Parser (+ Emitter) → Postfix program

There is no syntax tree and no error recovery; the first error ends
the run.

Usage
-----
>>> from pasfix.translator import translate
>>> translate("program P ( input , output ) { ( a + b ) * c ; }")
'program P(input,output)\\n{\\na b + c * ;\\n}\\n'
"""

from pasfix.translator.translator import (
    Translator,
    TranslatorOptions,
    TranslationResult,
    translate,
)
from pasfix.translator.errors import (
    TranslatorError,
    TranslatorSyntaxError,
    UnexpectedTokenError,
    TranslatorLimitError,
    TokenTooLongError,
    SymbolTableFullError,
    NumberTooLongError,
    NestingTooDeepError,
)
from pasfix.translator.lexer import CharReader, Lexer, Token, TokenType, KEYWORDS
from pasfix.translator.symbols import SymbolTable, SymbolEntry, NOT_FOUND
from pasfix.translator.parser import Parser
from pasfix.translator.emitter import Emitter

__all__ = [
    # Main API
    "Translator",
    "TranslatorOptions",
    "TranslationResult",
    "translate",
    # Errors
    "TranslatorError",
    "TranslatorSyntaxError",
    "UnexpectedTokenError",
    "TranslatorLimitError",
    "TokenTooLongError",
    "SymbolTableFullError",
    "NumberTooLongError",
    "NestingTooDeepError",
    # Lexer
    "CharReader",
    "Lexer",
    "Token",
    "TokenType",
    "KEYWORDS",
    # Symbol table
    "SymbolTable",
    "SymbolEntry",
    "NOT_FOUND",
    # Parser and emitter
    "Parser",
    "Emitter",
]
