"""
Recursive Descent Translator
============================

This module implements the parser for the Pascal-like source language.
It pulls tokens from the lexer one at a time and drives the emitter as
a side effect of recognizing each production, so translation finishes
in a single pass without building a syntax tree.

Grammar (EBNF)
--------------
program   ::= 'program' ID '(' 'input' ',' 'output' ')' '{' stmt* '}'
stmt      ::= expr ';'
expr      ::= term expr_tail
expr_tail ::= ('+' | '-') term emit(op) expr_tail | ε
term      ::= factor term_tail
term_tail ::= ('*' | '/' | 'div' | 'mod' | '%') factor emit(op) term_tail | ε
factor    ::= '(' expr ')' | NUM emit(NUM) | ID emit(ID)

Operator Precedence (lowest to highest)
---------------------------------------
1. additive        + -               (left associative)
2. multiplicative  * / div mod %     (left associative)
3. primary         NUM, ID, '(' expr ')'

An operator is emitted only after both of its operands have been
emitted, which yields postfix order. Parentheses shape the parse but
are never written.

Example
-------
    program P ( input , output ) { a + b * c ; }

translates to

    program P(input,output)
    {
    a b c * + ;
    }
"""

import logging
from typing import NoReturn

from pasfix.translator.emitter import Emitter
from pasfix.translator.errors import NestingTooDeepError, UnexpectedTokenError
from pasfix.translator.lexer import Lexer, Token, TokenType, describe

logger = logging.getLogger(__name__)


ADDITIVE_OPERATORS = (TokenType.PLUS, TokenType.MINUS)

MULTIPLICATIVE_OPERATORS = (
    TokenType.STAR,
    TokenType.SLASH,
    TokenType.DIV,
    TokenType.MOD,
    TokenType.PERCENT,
)


class Parser:
    """
    LL(1) recursive descent translator.

    Holds exactly one token of lookahead, which no other component
    reads or writes.

    Attributes:
        lexer: Token source
        emitter: Output sink
        strict: Reject any token after the closing brace
        program_name: Name from the program header, once parsed
        statement_count: Number of statements translated so far
    """

    def __init__(self, lexer: Lexer, emitter: Emitter, strict: bool = False):
        self.lexer = lexer
        self.emitter = emitter
        self.strict = strict

        self.program_name: str | None = None
        self.statement_count = 0

        self._lookahead: Token | None = None

    def parse(self) -> None:
        """
        Translate a whole program.

        Raises:
            TranslatorError: On the first syntax or resource error
        """
        self._lookahead = self.lexer.next_token()
        self._parse_header()

        try:
            while not self._check(TokenType.RBRACE):
                self._parse_statement()
        except RecursionError:
            # Each open parenthesis costs three Python frames
            raise NestingTooDeepError(self.lexer.location) from None

        self._expect(TokenType.RBRACE)
        self.emitter.write("}\n")

        if self.strict and not self._check(TokenType.DONE):
            self._error(describe(TokenType.DONE), "trailing input after program")

        logger.debug(
            f"Translated program '{self.program_name}' "
            f"({self.statement_count} statements)"
        )

    # =========================================================================
    # Token Access Methods
    # =========================================================================

    def _check(self, *types: TokenType) -> bool:
        """Check if the lookahead is one of the given types."""
        return self._lookahead.type in types

    def _advance(self) -> Token:
        """Consume the lookahead and fetch the next token."""
        token = self._lookahead
        self._lookahead = self.lexer.next_token()
        return token

    def _expect(self, token_type: TokenType) -> Token:
        """
        Consume the lookahead if it has the expected type.

        Raises:
            UnexpectedTokenError: If the lookahead is of another type
        """
        if self._check(token_type):
            return self._advance()
        self._error(describe(token_type), "syntax error in match")

    def _error(self, expected: str | None, context: str) -> NoReturn:
        raise UnexpectedTokenError(
            self._lookahead.describe(),
            expected=expected,
            location=self.lexer.location,
            context=context,
        )

    # =========================================================================
    # Productions
    # =========================================================================

    def _parse_header(self) -> None:
        """program ID ( input , output ) {"""
        self._expect(TokenType.PROGRAM)

        if not self._check(TokenType.ID):
            self._error("program identifier", "syntax error in header")
        name_token = self._advance()
        self.program_name = self.lexer.symbols.lexeme(name_token.value)

        self._expect(TokenType.LPAREN)
        self._expect(TokenType.INPUT)
        self._expect(TokenType.COMMA)
        self._expect(TokenType.OUTPUT)
        self._expect(TokenType.RPAREN)
        self._expect(TokenType.LBRACE)

        self.emitter.write(f"program {self.program_name}(input,output)\n{{\n")

    def _parse_statement(self) -> None:
        """stmt ::= expr ';'"""
        self._parse_expression()
        self._expect(TokenType.SEMICOLON)
        self.emitter.write(";\n")
        self.statement_count += 1

    def _parse_expression(self) -> None:
        """expr ::= term expr_tail"""
        self._parse_term()
        self._parse_expression_tail()

    def _parse_expression_tail(self) -> None:
        # Loop instead of tail recursion; same left-associative emission
        while self._check(*ADDITIVE_OPERATORS):
            op = self._advance()
            self._parse_term()
            self.emitter.emit(op.type)

    def _parse_term(self) -> None:
        """term ::= factor term_tail"""
        self._parse_factor()
        self._parse_term_tail()

    def _parse_term_tail(self) -> None:
        while self._check(*MULTIPLICATIVE_OPERATORS):
            op = self._advance()
            self._parse_factor()
            self.emitter.emit(op.type)

    def _parse_factor(self) -> None:
        """factor ::= '(' expr ')' | NUM | ID"""
        if self._check(TokenType.LPAREN):
            self._advance()
            self._parse_expression()
            self._expect(TokenType.RPAREN)
        elif self._check(TokenType.NUM, TokenType.ID):
            # Emit before advancing so output order matches recognition
            self.emitter.emit(self._lookahead.type, self._lookahead.value)
            self._advance()
        else:
            self._error("'(', number or identifier", "syntax error in factor")
