"""
Lox Token Model
===============

Token kinds, the reserved keyword table, and the immutable Token value
produced by the scanner.

Token Categories
----------------
- Punctuation: ( ) { } , . - + ; *
- Operators: ! != = == < <= > >= /
- Literals: identifiers, "strings", numbers (always floating point)
- Keywords: and class else false for fun if nil or print return
            super this true var while
- Scanner kinds: ILLEGAL (unrecognized character), COMMENT (// text)

Display Format
--------------
Tokens print using the uppercase names of the Lox reference grammar,
with literal payloads in parentheses:

    >>> str(Token(TokenType.LEFT_PAREN, Location(1, 1)))
    'LEFT_PAREN'
    >>> str(Token(TokenType.NUMBER, Location(1, 4), 3.14))
    'NUMBER(3.14)'
    >>> str(Token.from_identifier("iffy", Location(1, 4)))
    'IDENTIFIER(iffy)'

Copyright (c) 2026 lox-scanner contributors
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum, auto
import math
from typing import Optional, Union

from lox_scanner.source import Location


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Token kinds for the Lox language.

    Member names double as the display names, so they follow the
    reference grammar's spelling (LEFT_PAREN, BANG_EQUAL, ...).
    """

    # === Single-character Tokens ===
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )
    LEFT_BRACE = auto()     # {
    RIGHT_BRACE = auto()    # }
    COMMA = auto()          # ,
    DOT = auto()            # .
    MINUS = auto()          # -
    PLUS = auto()           # +
    SEMICOLON = auto()      # ;
    SLASH = auto()          # /
    STAR = auto()           # *

    # === One or Two Character Tokens ===
    BANG = auto()           # !
    BANG_EQUAL = auto()     # !=
    EQUAL = auto()          # =
    EQUAL_EQUAL = auto()    # ==
    GREATER = auto()        # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()           # <
    LESS_EQUAL = auto()     # <=

    # === Literals ===
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # === Keywords ===
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # === Scanner Kinds ===
    ILLEGAL = auto()        # Unrecognized character
    COMMENT = auto()        # // comment text

    # Never produced by the scanner; the token iterator simply ends.
    EOF = auto()


# =============================================================================
# Keyword Mapping
# =============================================================================

KEYWORDS: dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

KEYWORD_TYPES = frozenset(KEYWORDS.values())

# Kinds whose display interpolates the token value
PAYLOAD_TYPES = frozenset({
    TokenType.IDENTIFIER,
    TokenType.STRING,
    TokenType.NUMBER,
    TokenType.ILLEGAL,
    TokenType.COMMENT,
})

LITERAL_TYPES = frozenset({
    TokenType.IDENTIFIER,
    TokenType.STRING,
    TokenType.NUMBER,
})


def format_number(value: float) -> str:
    """
    Render a number literal value the way Lox prints numbers.

    Uses the shortest round-tripping digits, written out positionally
    with no exponent, and drops a '.0' on integral values:

        123.0   -> '123'
        1e-05   -> '0.00001'
        1e+24   -> '1000000000000000000000000'

    Digit strings too long for a double scan to infinity, shown as 'inf'.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    text = format(Decimal(repr(value)), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexeme.

    The ``location`` is where the scanner's cursor stood once the whole
    lexeme had been consumed, i.e. the position of its last character.
    ``start`` records the position just before the first character and is
    informational only: it is excluded from equality so tokens compare by
    kind, payload and end location.

    Attributes:
        type: The TokenType classification
        location: Cursor location after the lexeme
        value: Payload for literal and scanner kinds (str or float)
        start: Cursor location before the lexeme (optional)
    """
    type: TokenType
    location: Location
    value: Union[str, float, None] = None
    start: Optional[Location] = field(default=None, compare=False)

    @classmethod
    def from_identifier(
        cls,
        text: str,
        location: Location,
        start: Optional[Location] = None,
    ) -> "Token":
        """
        Build a keyword token if ``text`` is reserved, else an IDENTIFIER.

        The lookup is an exact, case-sensitive match: 'iffy' and 'If' are
        both identifiers.
        """
        keyword = KEYWORDS.get(text)
        if keyword is not None:
            return cls(keyword, location, start=start)
        return cls(TokenType.IDENTIFIER, location, text, start=start)

    def __str__(self) -> str:
        name = self.type.name
        if self.type not in PAYLOAD_TYPES:
            return name
        if self.type == TokenType.NUMBER:
            return f"{name}({format_number(self.value)})"
        return f"{name}({self.value})"

    def __repr__(self) -> str:
        """Format token for debugging output."""
        return f"Token({self}, {self.location})"

    def is_keyword(self) -> bool:
        """Return True if this token is a reserved word."""
        return self.type in KEYWORD_TYPES

    def is_literal(self) -> bool:
        """Return True for IDENTIFIER, STRING and NUMBER tokens."""
        return self.type in LITERAL_TYPES

    def is_comment(self) -> bool:
        return self.type == TokenType.COMMENT
