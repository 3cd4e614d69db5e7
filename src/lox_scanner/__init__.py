"""
lox-scanner - Lexical Scanner for the Lox Language
==================================================

This package turns Lox source text into a stream of classified tokens,
each tagged with its line and column. It is the first stage of a Lox
front end; there is no parser or interpreter here.

Main Components
---------------
- **source**: Location values and peekable character streams
- **tokens**: TokenType, the keyword table and the Token value
- **scanner**: The Scanner state machine
- **errors**: ScanError values and the LoxError exception hierarchy
- **driver**: Run the scanner over strings, files or a prompt
- **cli**: The ``loxscan`` command-line tool

Quick Start
-----------
Scan a string:
    >>> from lox_scanner import Scanner
    >>> for item in Scanner("var answer = 42;"):
    ...     print(item)
    VAR
    IDENTIFIER(answer)
    EQUAL
    NUMBER(42)
    SEMICOLON

Scan a file lazily:
    >>> with open("script.lox") as f:
    ...     results = list(Scanner(f))

Errors are values, not exceptions:
    >>> from lox_scanner import ScanError
    >>> [r for r in Scanner('"open') if isinstance(r, ScanError)]
    [ScanError(location=Location(line=1, column=5), ...)]

Or use the command-line tool:
    $ loxscan script.lox

Copyright (c) 2026 lox-scanner contributors
"""

__version__ = "0.1.0"
__author__ = "lox-scanner contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from lox_scanner.source import Location, CharSource, CharStream
from lox_scanner.tokens import Token, TokenType, KEYWORDS
from lox_scanner.errors import (
    LoxError,
    LoxSyntaxError,
    ScanError,
    ScanErrorKind,
    ScriptFileError,
)
from lox_scanner.scanner import Scanner, ScanResult, scan, tokens_only, errors_only
from lox_scanner.config import DriverConfig

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Positions and input
    "Location",
    "CharSource",
    "CharStream",
    # Tokens
    "Token",
    "TokenType",
    "KEYWORDS",
    # Scanner
    "Scanner",
    "ScanResult",
    "scan",
    "tokens_only",
    "errors_only",
    # Errors
    "LoxError",
    "LoxSyntaxError",
    "ScanError",
    "ScanErrorKind",
    "ScriptFileError",
    # Configuration
    "DriverConfig",
]
