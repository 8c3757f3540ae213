"""
Translator Test Suite
=====================

Tests for the recursive descent translator and its emitter, covering
postfix ordering, the program frame, error reporting and options.

Test Organization
-----------------
- TestEmitter: Token rendering
- TestExpressions: Postfix ordering of expressions
- TestProgramFrame: Header, statement lines and closing brace
- TestSyntaxErrors: First-error-aborts behaviour
- TestTranslator: Options, results and file translation
"""

import io

import pytest

from pasfix import PasfixError
from pasfix.translator import (
    Translator,
    TranslatorOptions,
    translate,
)
from pasfix.translator.emitter import Emitter
from pasfix.translator.errors import (
    NestingTooDeepError,
    NumberTooLongError,
    SymbolTableFullError,
    TokenTooLongError,
    TranslatorLimitError,
    TranslatorSyntaxError,
    UnexpectedTokenError,
)
from pasfix.translator.lexer import TokenType, new_symbol_table


# =============================================================================
# Helper Functions
# =============================================================================

def program(*statements: str, name: str = "P") -> str:
    body = " ".join(statements)
    return f"program {name} ( input , output ) {{ {body} }}"


def statement_lines(source: str, **options) -> list[str]:
    """Translate and return only the statement lines."""
    output = translate(source, TranslatorOptions(**options))
    lines = output.splitlines()
    assert lines[1] == "{"
    assert lines[-1] == "}"
    return lines[2:-1]


def postfix(expression: str) -> str:
    """Translate a single expression statement."""
    (line,) = statement_lines(program(f"{expression} ;"))
    return line


# =============================================================================
# Emitter Tests
# =============================================================================

class TestEmitter:
    """Tests for token rendering."""

    def setup_method(self):
        self.symbols = new_symbol_table()
        self.out = io.StringIO()
        self.emitter = Emitter(self.out, self.symbols)

    @pytest.mark.parametrize("token_type,text", [
        (TokenType.PLUS, "+"),
        (TokenType.MINUS, "-"),
        (TokenType.STAR, "*"),
        (TokenType.SLASH, "\\"),
        (TokenType.PERCENT, "%"),
        (TokenType.DIV, "DIV"),
        (TokenType.MOD, "MOD"),
    ])
    def test_operators(self, token_type, text):
        self.emitter.emit(token_type)
        assert self.out.getvalue() == text + " "

    def test_number(self):
        self.emitter.emit(TokenType.NUM, 42)
        assert self.out.getvalue() == "42 "

    def test_identifier(self):
        handle = self.symbols.insert("speed", TokenType.ID)
        self.emitter.emit(TokenType.ID, handle)
        assert self.out.getvalue() == "speed "

    def test_fallback(self):
        self.emitter.emit(TokenType.LPAREN)
        assert self.out.getvalue() == "token LPAREN, tokenval None "

    def test_write_is_verbatim(self):
        self.emitter.write(";\n")
        assert self.out.getvalue() == ";\n"


# =============================================================================
# Expression Tests
# =============================================================================

class TestExpressions:
    """Postfix ordering and precedence."""

    def test_single_operand(self):
        assert postfix("x") == "x ;"

    def test_single_number(self):
        assert postfix("7") == "7 ;"

    def test_precedence(self):
        assert postfix("a + b * c") == "a b c * + ;"

    def test_parentheses_override_precedence(self):
        assert postfix("( a + b ) * c") == "a b + c * ;"

    def test_keyword_operators(self):
        assert postfix("10 div 3 mod 2") == "10 3 DIV 2 MOD ;"

    def test_additive_left_associative(self):
        assert postfix("a - b + c") == "a b - c + ;"

    def test_multiplicative_left_associative(self):
        assert postfix("a * b % c") == "a b * c % ;"

    def test_mixed(self):
        assert postfix("a * b + c * d - e") == "a b * c d * + e - ;"

    def test_nested_parentheses(self):
        assert postfix("( ( a ) )") == "a ;"
        assert postfix("a - ( b - c )") == "a b c - - ;"

    def test_both_division_spellings(self):
        assert postfix("a / b") == "a b \\ ;"
        assert postfix("a \\ b") == "a b \\ ;"

    def test_whitespace_not_required(self):
        assert postfix("(a+b)*c") == "a b + c * ;"

    def test_comment_inside_expression(self):
        source = "program P ( input , output ) {\n a + # comment ; }\n b ;\n}"
        assert statement_lines(source) == ["a b + ;"]


# =============================================================================
# Program Frame Tests
# =============================================================================

class TestProgramFrame:
    """Header, statements and closing brace."""

    def test_minimal_program(self):
        output = translate("program P ( input , output ) { 1 + 2 ; }")
        assert output == "program P(input,output)\n{\n1 2 + ;\n}\n"

    def test_empty_body(self):
        output = translate(program())
        assert output == "program P(input,output)\n{\n}\n"

    def test_one_line_per_statement(self):
        lines = statement_lines(program("a ;", "b + c ;", "d * e ;"))
        assert lines == ["a ;", "b c + ;", "d e * ;"]

    def test_program_name_preserved(self):
        output = translate(program(name="Demo42"))
        assert output.startswith("program Demo42(input,output)\n")

    def test_multiline_source(self):
        source = (
            "# demo\n"
            "program calc (input, output)\n"
            "{\n"
            "    x * (y + 1);\n"
            "    x div 2;\n"
            "}\n"
        )
        assert translate(source) == (
            "program calc(input,output)\n"
            "{\n"
            "x y 1 + * ;\n"
            "x 2 DIV ;\n"
            "}\n"
        )

    def test_trailing_tokens_ignored(self):
        output = translate(program("a ;") + " junk ; 1 2 3")
        assert output.endswith("a ;\n}\n")


# =============================================================================
# Syntax Error Tests
# =============================================================================

class TestSyntaxErrors:
    """The first error aborts translation."""

    def test_missing_input_keyword(self):
        with pytest.raises(UnexpectedTokenError) as exc_info:
            translate("program P (\n output ) { a ; }")
        error = exc_info.value
        assert error.line == 2
        assert "'input'" in str(error)
        assert str(error).startswith("line 2: ")

    def test_malformed_header_emits_nothing(self):
        translator = Translator()
        out = io.StringIO()
        with pytest.raises(TranslatorSyntaxError):
            translator.translate_stream("program P ( input output ) { a ; }", out)
        assert out.getvalue() == ""

    def test_missing_program_name(self):
        with pytest.raises(UnexpectedTokenError) as exc_info:
            translate("program ( input , output ) { }")
        assert "program identifier" in str(exc_info.value)

    def test_keyword_as_program_name(self):
        with pytest.raises(UnexpectedTokenError):
            translate("program div ( input , output ) { }")

    def test_missing_program_keyword(self):
        with pytest.raises(UnexpectedTokenError):
            translate("P ( input , output ) { }")

    def test_empty_source(self):
        with pytest.raises(UnexpectedTokenError) as exc_info:
            translate("")
        assert "end of input" in str(exc_info.value)

    def test_missing_semicolon(self):
        with pytest.raises(UnexpectedTokenError) as exc_info:
            translate(program("a + b }"))
        assert "';'" in str(exc_info.value)

    def test_operator_in_factor_position(self):
        with pytest.raises(UnexpectedTokenError) as exc_info:
            translate(program("a + * b ;"))
        assert "syntax error in factor" in str(exc_info.value)

    def test_unbalanced_parenthesis(self):
        with pytest.raises(UnexpectedTokenError):
            translate(program("( a + b ;"))

    def test_unterminated_body(self):
        with pytest.raises(UnexpectedTokenError):
            translate("program P ( input , output ) { a ;")

    def test_unknown_character(self):
        with pytest.raises(UnexpectedTokenError) as exc_info:
            translate(program("a @ b ;"))
        assert "'@'" in str(exc_info.value)

    def test_error_line_number(self):
        source = "program P ( input , output ) {\n a ;\n# note\n b + ;\n}"
        with pytest.raises(UnexpectedTokenError) as exc_info:
            translate(source)
        assert exc_info.value.line == 4

    def test_partial_output_kept(self):
        out = io.StringIO()
        with pytest.raises(UnexpectedTokenError):
            Translator().translate_stream(program("a + b ;", "c * ;"), out)
        assert out.getvalue() == "program P(input,output)\n{\na b + ;\nc "

    def test_errors_share_base_class(self):
        with pytest.raises(PasfixError):
            translate("program")


# =============================================================================
# Translator Tests
# =============================================================================

class TestTranslator:
    """Options, results and file translation."""

    def test_result_fields(self):
        result = Translator().translate_source(program("a ;", "b ;", name="Q"))
        assert result.program_name == "Q"
        assert result.statement_count == 2
        assert result.line_count == 1
        assert result.output.endswith("}\n")
        assert "a" in result.symbols

    def test_runs_are_independent(self):
        translator = Translator()
        first = translator.translate_source(program("a ;"))
        second = translator.translate_source(program("b ;"))
        assert "a" not in second.symbols
        assert first.symbols is not second.symbols

    def test_strict_rejects_trailing_tokens(self):
        with pytest.raises(UnexpectedTokenError) as exc_info:
            translate(program("a ;") + " extra", TranslatorOptions(strict=True))
        assert "trailing input" in str(exc_info.value)

    def test_strict_accepts_clean_end(self):
        output = translate(program("a ;") + "\n# done\n", TranslatorOptions(strict=True))
        assert output.endswith("a ;\n}\n")

    def test_token_length_option(self):
        with pytest.raises(TokenTooLongError):
            translate(program("abcdefghij ;"), TranslatorOptions(max_token_length=8))

    def test_overlong_identifier_stops_statement(self):
        out = io.StringIO()
        with pytest.raises(TokenTooLongError):
            Translator().translate_stream(program("a + " + "z" * 200 + " ;"), out)
        assert not out.getvalue().endswith(";\n")

    def test_long_number_literal_emitted(self):
        digits = "7" * 120
        assert postfix(f"{digits} + 1") == f"{digits} 1 + ;"

    def test_overlong_number_literal(self):
        with pytest.raises(NumberTooLongError) as exc_info:
            translate(program("1" * 5000 + " ;"))
        assert str(exc_info.value).startswith("line 1: ")

    def test_moderate_nesting(self):
        assert postfix("(" * 100 + "a" + ")" * 100) == "a ;"

    def test_deep_nesting_is_a_limit_error(self):
        out = io.StringIO()
        with pytest.raises(NestingTooDeepError) as exc_info:
            Translator().translate_stream(program("(" * 400 + "a" + ")" * 400 + " ;"), out)
        assert isinstance(exc_info.value, TranslatorLimitError)
        assert str(exc_info.value) == "line 1: expression nested too deeply"
        assert out.getvalue() == "program P(input,output)\n{\n"

    def test_translator_usable_after_deep_nesting(self):
        translator = Translator()
        with pytest.raises(NestingTooDeepError):
            translator.translate_source(program("(" * 400 + "a" + ")" * 400 + " ;"))
        assert translator.translate_source(program("a ;")).statement_count == 1

    def test_symbol_table_option(self):
        names = " + ".join(f"v{i}" for i in range(10))
        with pytest.raises(SymbolTableFullError):
            translate(program(f"{names} ;"), TranslatorOptions(symbol_table_size=10))

    @pytest.mark.parametrize("kwargs", [
        {"max_token_length": 0},
        {"symbol_table_size": 5},
    ])
    def test_invalid_options(self, kwargs):
        with pytest.raises(ValueError):
            TranslatorOptions(**kwargs)

    def test_translate_file(self, tmp_path):
        source = tmp_path / "prog.pas"
        target = tmp_path / "prog.out"
        source.write_text("program F ( input , output ) {\n  a % 3 ;\n}\n")

        result = Translator().translate_file(source, target)

        assert target.read_text() == "program F(input,output)\n{\na 3 % ;\n}\n"
        assert result.output is None
        assert result.filename == str(source)

    def test_translate_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Translator().translate_file(tmp_path / "missing.pas", tmp_path / "out")
        assert not (tmp_path / "out").exists()

    def test_undecodable_byte_is_syntax_error(self, tmp_path):
        source = tmp_path / "latin.pas"
        source.write_bytes(b"program L ( input , output ) {\n  a \xff b ;\n}\n")

        with pytest.raises(UnexpectedTokenError) as exc_info:
            Translator().translate_file(source, tmp_path / "latin.out")

        assert exc_info.value.line == 2
        assert "\ufffd" in exc_info.value.found
