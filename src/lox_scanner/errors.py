"""
Lox Scanner Error Types
=======================

This module defines two kinds of error:

1. **ScanError**, a plain value the scanner yields in place of a token
   when one lexeme is malformed. Scanning carries on after it; the caller
   decides whether to report it, stop, or ignore it.

2. **LoxError** and its subclasses, ordinary exceptions raised by the
   layers around the scanner (the driver and the command line), or by
   callers that prefer to turn a ScanError into an exception.

Exception Hierarchy
-------------------
LoxError (base)
├── LoxSyntaxError - raisable form of a ScanError
└── ScriptFileError - a script file could not be opened or read

Error Message Format
--------------------
ScanError values print the way the reference scanner does:

    ScannerError<1, 4>: Illegal token: ILLEGAL(@)

LoxSyntaxError adds source context and a hint:

    1, 4: error: Illegal token: ILLEGAL(@)
        var@ = 1;
           ^
    hint: remove the character or put it inside a string
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from lox_scanner.source import Location


# =============================================================================
# Base Exception Class
# =============================================================================

class LoxError(Exception):
    """
    Base exception for all lox-scanner errors.

    Catch this to handle every error the package raises:

        try:
            run_file("script.lox")
        except LoxError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Recoverable Scan Errors
# =============================================================================

class ScanErrorKind(Enum):
    """Classification of recoverable scan errors."""
    ILLEGAL_CHARACTER = auto()    # Character starts no lexeme
    UNTERMINATED_STRING = auto()  # Input ended inside a string literal
    INCOMPLETE_NUMBER = auto()    # '.' with no digit after it
    NUMBER_PARSE = auto()         # Digits could not be read as a float


DEFAULT_HINTS: dict[ScanErrorKind, str] = {
    ScanErrorKind.ILLEGAL_CHARACTER: "remove the character or put it inside a string",
    ScanErrorKind.UNTERMINATED_STRING: "add closing '\"' to complete the string",
    ScanErrorKind.INCOMPLETE_NUMBER: "add a digit after the decimal point",
}


@dataclass(frozen=True)
class ScanError:
    """
    A malformed lexeme, reported in place of a token.

    This is a value, not an exception: the scanner yields it and the next
    pull resumes wherever the cursor stopped.

    Attributes:
        location: Cursor location when the error was detected
        message: Human readable description
        kind: Which of the scan error classes this is
    """
    location: Location
    message: str
    kind: ScanErrorKind = ScanErrorKind.ILLEGAL_CHARACTER

    def __str__(self) -> str:
        return f"ScannerError<{self.location}>: {self.message}"

    def to_exception(self, source_line: Optional[str] = None) -> "LoxSyntaxError":
        """
        Convert to a raisable LoxSyntaxError.

        Args:
            source_line: Text of the offending line, shown with a caret

        Returns:
            LoxSyntaxError carrying this error's location and a default hint
        """
        return LoxSyntaxError(
            self.message,
            location=self.location,
            hint=DEFAULT_HINTS.get(self.kind),
            source_line=source_line,
            kind=self.kind,
        )


# =============================================================================
# Raisable Errors
# =============================================================================

class LoxSyntaxError(LoxError):
    """
    Syntax error in Lox source, in exception form.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text at the error location (optional)
        kind: The ScanErrorKind this error came from (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[Location] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
        kind: Optional[ScanErrorKind] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        self.kind = kind
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            1, 4: error: Illegal token: ILLEGAL(@)
                var@ = 1;
                   ^
            hint: remove the character or put it inside a string
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Columns name the position after the offending character, so
        # column N points at the Nth character of the line.
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class ScriptFileError(LoxError):
    """
    A script file could not be opened or read.

    Attributes:
        path: The file that failed
        reason: The underlying OS error message
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"IO Error: {path}: {reason}")
