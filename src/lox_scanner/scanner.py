"""
Lox Scanner
===========

This module implements the lexical scanner for Lox. It walks a character
source and produces tokens lazily, one per pull, each tagged with the
location where the lexeme ended.

Malformed input never stops the scan. A bad lexeme produces a ScanError
value in place of a token, and the next pull carries on from wherever the
cursor stopped:

    >>> for item in Scanner('var x = 1.; @ "ok"'):
    ...     print(item)
    VAR
    IDENTIFIER(x)
    EQUAL
    ScannerError<1, 10>: Incomplete number literal 1.
    SEMICOLON
    ScannerError<1, 13>: Illegal token: ILLEGAL(@)
    STRING(ok)

Lexeme Rules
------------
| Starts with        | Produces                                      |
|--------------------|-----------------------------------------------|
| ( ) { } , . - + ; *| single-character token                        |
| ! = < >            | one-character token, or two with a trailing = |
| //                 | COMMENT up to and including the newline       |
| /                  | SLASH                                         |
| "                  | STRING up to the closing quote                |
| letter or _        | IDENTIFIER or keyword                         |
| digit              | NUMBER, digits with an optional .digits part  |
| anything else      | ScanError (illegal character)                 |

End of input is signalled by the iterator finishing; no EOF token is
produced.

Copyright (c) 2026 lox-scanner contributors
"""

import logging
import string
from typing import Iterable, Iterator, Optional, Union

from lox_scanner.errors import ScanError, ScanErrorKind
from lox_scanner.source import CharSource, Location, as_char_source
from lox_scanner.tokens import Token, TokenType

logger = logging.getLogger(__name__)

ScanResult = Union[Token, ScanError]


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes Lox source code.

    The scanner is an iterator: each ``next()`` returns a Token or a
    ScanError, and iteration stops when the source is exhausted. It owns
    its cursor exclusively and cannot be restarted; scan the same text
    twice by building a second Scanner.

    Usage:
        scanner = Scanner(source_text)
        results = list(scanner)

    Attributes:
        location: Current cursor location (read-only view)
    """

    SINGLE_TOKENS: dict[str, TokenType] = {
        "(": TokenType.LEFT_PAREN,
        ")": TokenType.RIGHT_PAREN,
        "{": TokenType.LEFT_BRACE,
        "}": TokenType.RIGHT_BRACE,
        ",": TokenType.COMMA,
        ".": TokenType.DOT,
        "-": TokenType.MINUS,
        "+": TokenType.PLUS,
        ";": TokenType.SEMICOLON,
        "*": TokenType.STAR,
    }

    # First character -> (kind when followed by '=', kind when alone)
    EQUAL_SUFFIX_TOKENS: dict[str, tuple[TokenType, TokenType]] = {
        "!": (TokenType.BANG_EQUAL, TokenType.BANG),
        "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
        "<": (TokenType.LESS_EQUAL, TokenType.LESS),
        ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
    }

    # Only ASCII digits start or continue a number
    DIGITS = string.digits

    # str.isspace() accepts the ASCII information separators, which are
    # not Unicode White_Space; they scan as illegal characters instead.
    NOT_WHITESPACE = "\x1c\x1d\x1e\x1f"

    def __init__(self, source: Union[str, Iterable[str], CharSource]):
        """
        Initialize the scanner over a character source.

        Args:
            source: A string, an iterable of text chunks (such as an open
                text file), or any object with peek() and advance()
        """
        self._source = as_char_source(source)
        self._location = Location.start()

    @property
    def location(self) -> Location:
        return self._location

    def __iter__(self) -> Iterator[ScanResult]:
        return self

    def __next__(self) -> ScanResult:
        result = self.next_token()
        if result is None:
            raise StopIteration
        return result

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _peek(self) -> Optional[str]:
        return self._source.peek()

    def _advance(self) -> Optional[str]:
        """
        Consume and return the next character, updating the location.

        Returns None at end of input without moving.
        """
        char = self._source.advance()
        if char is not None:
            self._location = self._location.advanced(char)
        return char

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it equals ``expected``."""
        if self._peek() == expected:
            self._advance()
            return True
        return False

    def _skip_whitespace(self) -> None:
        while True:
            char = self._peek()
            if char is None or not char.isspace() or char in self.NOT_WHITESPACE:
                return
            self._advance()

    # =========================================================================
    # Result Creation
    # =========================================================================

    def _make_token(
        self,
        token_type: TokenType,
        start: Location,
        value: Union[str, float, None] = None,
    ) -> Token:
        return Token(token_type, self._location, value, start=start)

    def _error(self, message: str, kind: ScanErrorKind) -> ScanError:
        """Create a ScanError at the current cursor location."""
        error = ScanError(self._location, message, kind)
        logger.debug("scan error at %s: %s", error.location, message)
        return error

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def next_token(self) -> Optional[ScanResult]:
        """
        Scan one lexeme.

        Returns:
            The next Token or ScanError, or None once input is exhausted
        """
        self._skip_whitespace()

        start = self._location
        char = self._advance()
        if char is None:
            return None

        if char in self.SINGLE_TOKENS:
            return self._make_token(self.SINGLE_TOKENS[char], start)

        if char in self.EQUAL_SUFFIX_TOKENS:
            double, single = self.EQUAL_SUFFIX_TOKENS[char]
            if self._match("="):
                return self._make_token(double, start)
            return self._make_token(single, start)

        if char == "/":
            if self._match("/"):
                return self._scan_comment(start)
            return self._make_token(TokenType.SLASH, start)

        if char == '"':
            return self._scan_string(start)

        if char.isalpha() or char == "_":
            return self._scan_identifier(char, start)

        if char in self.DIGITS:
            return self._scan_number(char, start)

        illegal = Token(TokenType.ILLEGAL, self._location, char, start=start)
        return self._error(f"Illegal token: {illegal}", ScanErrorKind.ILLEGAL_CHARACTER)

    def _scan_comment(self, start: Location) -> Token:
        """
        Scan the rest of a // comment.

        Blanks right after the marker are dropped. The text runs up to and
        including the terminating newline; a comment that reaches the end
        of input keeps whatever was left.
        """
        while self._peek() in (" ", "\t"):
            self._advance()

        chars = []
        while True:
            char = self._advance()
            if char is None:
                break
            chars.append(char)
            if char == "\n":
                break

        return self._make_token(TokenType.COMMENT, start, "".join(chars))

    def _scan_string(self, start: Location) -> ScanResult:
        """
        Scan a string literal after its opening quote.

        Strings may span lines and have no escape sequences. The quotes are
        not part of the value.
        """
        chars = []
        while True:
            char = self._peek()
            if char is None:
                text = "".join(chars)
                return self._error(
                    f'Unterminated string literal "{text}',
                    ScanErrorKind.UNTERMINATED_STRING,
                )
            if char == '"':
                break
            chars.append(self._advance())

        self._advance()  # closing "
        return self._make_token(TokenType.STRING, start, "".join(chars))

    def _scan_identifier(self, first: str, start: Location) -> Token:
        """Scan an identifier or keyword whose first character is consumed."""
        chars = [first]
        while True:
            char = self._peek()
            if char is None or not (char.isalnum() or char == "_"):
                break
            chars.append(self._advance())

        return Token.from_identifier("".join(chars), self._location, start=start)

    def _scan_digits(self) -> str:
        chars = []
        while True:
            char = self._peek()
            if char is None or char not in self.DIGITS:
                break
            chars.append(self._advance())
        return "".join(chars)

    def _scan_number(self, first: str, start: Location) -> ScanResult:
        """
        Scan a number literal whose first digit is consumed.

        Grammar: digits ( '.' digits )?. A '.' must be followed by at
        least one digit; the '.' is consumed either way.
        """
        text = first + self._scan_digits()

        if self._match("."):
            text += "." + self._scan_digits()
            if text.endswith("."):
                return self._error(
                    f"Incomplete number literal {text}",
                    ScanErrorKind.INCOMPLETE_NUMBER,
                )

        try:
            value = float(text)
        except ValueError as e:
            return self._error(str(e), ScanErrorKind.NUMBER_PARSE)

        return self._make_token(TokenType.NUMBER, start, value)


# =============================================================================
# Convenience Functions
# =============================================================================

def scan(source: Union[str, Iterable[str], CharSource]) -> list[ScanResult]:
    """
    Scan a whole source and return every token and error in order.

    >>> [str(t) for t in scan("print 1;")]
    ['PRINT', 'NUMBER(1)', 'SEMICOLON']
    """
    return list(Scanner(source))


def tokens_only(results: Iterable[ScanResult]) -> Iterator[Token]:
    """Yield just the tokens from a stream of scan results."""
    for result in results:
        if isinstance(result, Token):
            yield result


def errors_only(results: Iterable[ScanResult]) -> Iterator[ScanError]:
    """Yield just the errors from a stream of scan results."""
    for result in results:
        if isinstance(result, ScanError):
            yield result
