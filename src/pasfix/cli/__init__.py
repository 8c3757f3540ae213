"""
pasfix Command-Line Interface
=============================

- **pasfix**: translate a program's expressions to postfix form

The tool is a Click-based CLI application with help and error
reporting shared through pasfix.cli.errors.
"""

__all__ = ["pasfix"]
