"""
Translator Main Module
======================

This module provides the main interface for translating programs.
It wires the single-pass pipeline together for each run:

    Characters → Lexer → Parser ⇄ Emitter → Output text

Usage
-----
Command line:
    $ pasfix prog.pas prog.out

Programmatic:
    >>> from pasfix.translator import translate
    >>> print(translate("program P ( input , output ) { 1 + 2 ; }"), end="")
    program P(input,output)
    {
    1 2 + ;
    }

Error Handling
--------------
Translation stops at the first error. The error propagates to the
caller unchanged; any output already written to a stream stays there.
"""

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO, Union

from pasfix.translator.emitter import Emitter
from pasfix.translator.lexer import (
    DEFAULT_MAX_TOKEN_LENGTH,
    CharReader,
    Lexer,
    new_symbol_table,
)
from pasfix.translator.parser import Parser
from pasfix.translator.symbols import DEFAULT_CAPACITY, SymbolTable

logger = logging.getLogger(__name__)


@dataclass
class TranslatorOptions:
    """
    Translator configuration options.

    Attributes:
        max_token_length: Identifier buffer size; an identifier of this
                          many characters is rejected
        symbol_table_size: Symbol table slots, including the reserved
                           slot 0 (so one fewer lexemes fit)
        strict: Reject tokens after the closing brace of the program
                instead of ignoring them
    """
    max_token_length: int = DEFAULT_MAX_TOKEN_LENGTH
    symbol_table_size: int = DEFAULT_CAPACITY
    strict: bool = False

    def __post_init__(self):
        if self.max_token_length < 1:
            raise ValueError("max_token_length must be at least 1")
        # Five keywords plus the reserved slot
        if self.symbol_table_size < 6:
            raise ValueError("symbol_table_size must be at least 6")


@dataclass
class TranslationResult:
    """
    Result of one translation run.

    Attributes:
        filename: Source name used in diagnostics
        output: Translated text (None when written to a caller's stream)
        program_name: Name from the program header
        statement_count: Number of statements translated
        line_count: Value of the line counter when translation finished
        symbols: The run's symbol table
    """
    filename: str
    output: Optional[str] = None
    program_name: Optional[str] = None
    statement_count: int = 0
    line_count: int = 0
    symbols: Optional[SymbolTable] = None


class Translator:
    """
    Translates programs to postfix form.

    Every run gets its own symbol table, lexer and line counter, so a
    Translator can be reused for any number of sources.

    Example:
        translator = Translator(TranslatorOptions(strict=True))
        result = translator.translate_file("prog.pas", "prog.out")
        print(result.statement_count)
    """

    def __init__(self, options: Optional[TranslatorOptions] = None):
        self.options = options or TranslatorOptions()

    def translate_stream(
        self,
        source: Union[str, TextIO],
        out: TextIO,
        filename: str = "<input>",
    ) -> TranslationResult:
        """
        Translate from a string or text stream, writing to ``out``.

        Output is written while parsing proceeds.

        Raises:
            TranslatorError: On the first syntax or resource error
        """
        logger.debug(f"Translating {filename}")

        symbols = new_symbol_table(self.options.symbol_table_size)
        lexer = Lexer(
            CharReader(source),
            symbols,
            max_token_length=self.options.max_token_length,
            filename=filename,
        )
        parser = Parser(lexer, Emitter(out, symbols), strict=self.options.strict)
        parser.parse()

        logger.debug(
            f"Finished {filename}: {parser.statement_count} statements, "
            f"{len(symbols)} symbols, {lexer.lineno} lines"
        )

        return TranslationResult(
            filename=filename,
            program_name=parser.program_name,
            statement_count=parser.statement_count,
            line_count=lexer.lineno,
            symbols=symbols,
        )

    def translate_source(self, source: str, filename: str = "<input>") -> TranslationResult:
        """Translate a source string and capture the output text."""
        out = io.StringIO()
        result = self.translate_stream(source, out, filename)
        result.output = out.getvalue()
        return result

    def translate_file(
        self,
        input_path: Union[str, Path],
        output_path: Union[str, Path],
    ) -> TranslationResult:
        """
        Translate one file into another.

        Both files are opened before translation starts. The source is
        read as UTF-8; a byte that does not decode is reported as a
        syntax error on its line rather than as a decoding failure. On error the
        output file keeps whatever was written before the failure.

        Raises:
            FileNotFoundError: If the source file does not exist
            OSError: If either file cannot be opened
            TranslatorError: On the first translation error
        """
        input_path = Path(input_path)
        output_path = Path(output_path)

        # Undecodable bytes become U+FFFD and lex as OTHER tokens
        with open(input_path, encoding="utf-8", errors="replace") as source:
            with open(output_path, "w", encoding="utf-8") as out:
                return self.translate_stream(source, out, str(input_path))


def translate(source: str, options: Optional[TranslatorOptions] = None) -> str:
    """
    Convenience function to translate a source string.

    Args:
        source: Program text
        options: Translator configuration (defaults if None)

    Returns:
        The translated program text
    """
    return Translator(options).translate_source(source).output
