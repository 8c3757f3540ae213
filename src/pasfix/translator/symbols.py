"""
Symbol Table
============

Interns identifier and keyword lexemes to stable integer handles.

Handles are assigned in insertion order starting at 1. Handle 0 is
never assigned and is returned by lookup() when a lexeme is absent,
so the table holds at most ``capacity - 1`` entries.

Keywords are seeded before any source text is read, which gives them
the lowest handles and guarantees that a user identifier with the same
spelling resolves to the keyword entry instead of a fresh one.

Example:
    >>> from pasfix.translator.lexer import TokenType
    >>> table = SymbolTable()
    >>> table.seed([("div", TokenType.DIV)])
    >>> table.lookup("div")
    1
    >>> table.lookup("x")
    0
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, Optional

from pasfix.errors import SourceLocation
from pasfix.translator.errors import SymbolTableFullError

if TYPE_CHECKING:
    from pasfix.translator.lexer import TokenType

logger = logging.getLogger(__name__)

# Returned by lookup() for an unknown lexeme
NOT_FOUND = 0

# Slots in a default table, including the reserved slot 0
DEFAULT_CAPACITY = 100


@dataclass(frozen=True)
class SymbolEntry:
    """
    One interned lexeme.

    Attributes:
        lexeme: The text as it appeared in the source
        token_type: Token kind the lexeme resolves to (keyword or identifier)
    """
    lexeme: str
    token_type: "TokenType"


class SymbolTable:
    """
    Append-only table of lexemes keyed by handle.

    Entries are immutable once inserted. insert() does not check for
    duplicates; callers intern by calling lookup() first.

    Attributes:
        capacity: Number of slots, including the reserved slot 0
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        self.capacity = capacity
        self._entries: list[SymbolEntry] = []

    def seed(self, keywords: Iterable[tuple[str, "TokenType"]]) -> None:
        """Insert reserved words in the given order."""
        for lexeme, token_type in keywords:
            self.insert(lexeme, token_type)
        logger.debug(f"Seeded symbol table with {len(self._entries)} keywords")

    def insert(
        self,
        lexeme: str,
        token_type: "TokenType",
        location: Optional[SourceLocation] = None,
    ) -> int:
        """
        Append a new entry and return its handle.

        Raises:
            SymbolTableFullError: If every usable slot is taken
        """
        if len(self._entries) + 2 > self.capacity:
            raise SymbolTableFullError(self.capacity, location)

        self._entries.append(SymbolEntry(lexeme, token_type))
        return len(self._entries)

    def lookup(self, lexeme: str) -> int:
        """
        Return the handle of ``lexeme`` or NOT_FOUND.

        Scans from the most recent entry back to the first, so if a
        lexeme was ever inserted twice the newer handle wins.
        """
        for handle in range(len(self._entries), 0, -1):
            if self._entries[handle - 1].lexeme == lexeme:
                return handle
        return NOT_FOUND

    def entry(self, handle: int) -> SymbolEntry:
        """Return the entry for a handle."""
        if not 0 < handle <= len(self._entries):
            raise KeyError(handle)
        return self._entries[handle - 1]

    def lexeme(self, handle: int) -> str:
        """Return the original text of a handle."""
        return self.entry(handle).lexeme

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[int, SymbolEntry]]:
        return iter(enumerate(self._entries, start=1))

    def __contains__(self, lexeme: str) -> bool:
        return self.lookup(lexeme) != NOT_FOUND

    def __repr__(self) -> str:
        return f"SymbolTable({len(self._entries)}/{self.capacity - 1} entries)"
