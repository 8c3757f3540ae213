#!/usr/bin/env python3
"""
pasfix Translator Demo
======================

This script demonstrates how to use the translator API to:
1. Translate a source string
2. Inspect the translation result
3. Report a syntax error

Usage:
    python examples/translate_demo.py
"""

from pathlib import Path

from pasfix import Translator, TranslatorError, translate


def main():
    # ==========================================================================
    # 1. Translate a string
    # ==========================================================================
    print(translate("program P ( input , output ) { a + b * c ; }"))

    # ==========================================================================
    # 2. Translate the sample file and look at the result
    # ==========================================================================
    source = (Path(__file__).parent / "calc.pas").read_text()
    result = Translator().translate_source(source, "calc.pas")
    print(result.output)
    print(f"{result.statement_count} statements, {len(result.symbols)} symbols")

    # ==========================================================================
    # 3. Errors carry the line number
    # ==========================================================================
    try:
        translate("program P ( input , output ) {\n  a + ;\n}")
    except TranslatorError as e:
        print(e)


if __name__ == "__main__":
    main()
