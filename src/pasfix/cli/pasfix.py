"""
pasfix - Postfix Translator Command-Line Interface
==================================================

This module implements the command-line interface for the translator.

Usage Examples
--------------
Translate a program:
    $ pasfix prog.pas prog.out

Reject anything after the closing brace (extension; off by default,
so trailing input is ignored):
    $ pasfix --strict prog.pas prog.out

Verbose mode (debug logging on stderr), also an extension:
    $ pasfix -v prog.pas prog.out

Exit Codes
----------
0 - Success
1 - Syntax error or resource limit exceeded
2 - Invalid arguments, or a file that cannot be opened
3 - Internal error
"""

import logging
from pathlib import Path

import click

from pasfix import __version__
from pasfix.cli.errors import handle_cli_exception
from pasfix.translator import Translator, TranslatorOptions

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.argument(
    "output_file",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail if anything follows the closing brace (off by default: "
    "trailing input is ignored)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="pasfix")
def main(
    input_file: Path,
    output_file: Path,
    strict: bool,
    verbose: bool,
) -> None:
    """
    Translate a program's expressions to postfix form.

    INPUT_FILE is the source program; OUTPUT_FILE receives the
    translated program. The two file arguments are the whole base
    interface; --strict, --verbose and --version are extensions.

    \b
    Example:
        program demo ( input , output ) {
            ( a + b ) * c ;
        }
    becomes:
        program demo(input,output)
        {
        a b + c * ;
        }
    """
    setup_logging(verbose)

    translator = Translator(TranslatorOptions(strict=strict))

    try:
        result = translator.translate_file(input_file, output_file)
    except Exception as e:
        handle_cli_exception(e, verbose)

    if verbose:
        click.echo(
            f"Translated {result.statement_count} statements "
            f"of program '{result.program_name}'",
            err=True,
        )
    logger.debug(f"Wrote {output_file}")


if __name__ == "__main__":
    main()
