"""
pasfix Error Hierarchy
======================

This module defines the base of the exception hierarchy for pasfix.
All exceptions inherit from PasfixError, allowing callers to catch every
translator-related error with a single except clause if desired.

Exception Hierarchy
-------------------
PasfixError (base)
└── TranslatorError (see pasfix.translator.errors)
    ├── TranslatorSyntaxError - token does not fit the grammar
    └── TranslatorLimitError - a fixed resource limit was exceeded

Error messages follow this format:
    line <n>: <message>
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class PasfixError(Exception):
    """
    Base exception for all pasfix errors.

        try:
            translate(source)
        except PasfixError as e:
            print(e)
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source text for error reporting.

    The translator only counts lines, so a location is a line number
    plus the name of the file it belongs to.

    Attributes:
        line: Line number (1-indexed)
        filename: Name of the source file (or "<input>" for string input)
    """
    line: int
    filename: Optional[str] = None

    def __str__(self) -> str:
        """Format as 'line N' for diagnostics."""
        return f"line {self.line}"
