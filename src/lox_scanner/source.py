"""
Source Positions and Character Streams
======================================

This module holds the two things the scanner needs from its input:

- **Location**: an immutable (line, column) coordinate
- **CharStream**: a cursor over characters with one character of lookahead

Position Rules
--------------
Lines start at 1 and columns start at 0. Every consumed character moves
the column forward by one, except a newline, which moves to the next line
and resets the column to 0. A location therefore names the position
*after* the most recently consumed character:

    source   a \\n b
    consume  a        -> 1, 1
    consume  \\n      -> 2, 0
    consume  b        -> 2, 1

Character Sources
-----------------
The scanner only ever calls ``peek()`` and ``advance()``. Anything that
provides those two methods satisfies ``CharSource``. ``CharStream`` adapts
the common cases:

    >>> CharStream("print 1;")                  # a string
    >>> CharStream(open("script.lox"))          # a text file (yields lines)
    >>> CharStream(["var a;\\n", "print a;\\n"])  # any iterable of chunks

Copyright (c) 2026 lox-scanner contributors
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Protocol, Union, runtime_checkable


# =============================================================================
# Source Location
# =============================================================================

@dataclass(frozen=True)
class Location:
    """
    A (line, column) position in Lox source text.

    Frozen so that a token's location can never drift after the scanner
    moves on; the scanner replaces its current location rather than
    updating it in place.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (0 before the first character of a line)
    """
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'line, column'."""
        return f"{self.line}, {self.column}"

    @classmethod
    def start(cls) -> "Location":
        """Location before any character has been consumed."""
        return cls(line=1, column=0)

    def advanced(self, char: str) -> "Location":
        """Return the location after consuming ``char`` from here."""
        if char == "\n":
            return Location(self.line + 1, 0)
        return Location(self.line, self.column + 1)


# =============================================================================
# Character Source Protocol
# =============================================================================

@runtime_checkable
class CharSource(Protocol):
    """
    Minimal input contract for the scanner.

    peek() returns the next character without consuming it, advance()
    consumes and returns it. Both return None once the input is exhausted.
    """

    def peek(self) -> Optional[str]:
        ...

    def advance(self) -> Optional[str]:
        ...


class CharStream:
    """
    Peekable character cursor over a string or an iterable of text chunks.

    Chunks are pulled lazily, one at a time, so a file object or a
    generator of lines is never read further than the scanner has asked
    for. Empty chunks are skipped.

    Usage:
        stream = CharStream("1 + 2")
        stream.peek()      # '1'
        stream.advance()   # '1'
        stream.advance()   # ' '
    """

    def __init__(self, chunks: Union[str, Iterable[str]]):
        if isinstance(chunks, str):
            chunks = (chunks,)
        self._chunks: Iterator[str] = iter(chunks)
        self._buffer = ""
        self._pos = 0

    def _fill(self) -> bool:
        """Make sure the buffer holds an unread character. False at end."""
        while self._pos >= len(self._buffer):
            chunk = next(self._chunks, None)
            if chunk is None:
                return False
            self._buffer = chunk
            self._pos = 0
        return True

    def peek(self) -> Optional[str]:
        if not self._fill():
            return None
        return self._buffer[self._pos]

    def advance(self) -> Optional[str]:
        if not self._fill():
            return None
        char = self._buffer[self._pos]
        self._pos += 1
        return char

    def at_end(self) -> bool:
        """Return True if no characters remain."""
        return not self._fill()


def as_char_source(source: Union[str, Iterable[str], CharSource]) -> CharSource:
    """
    Wrap ``source`` in a CharStream unless it already is a CharSource.

    Strings are checked first: a ``str`` is iterable but never a
    CharSource, and must be treated as one chunk.
    """
    if isinstance(source, str):
        return CharStream(source)
    if isinstance(source, CharSource):
        return source
    return CharStream(source)
