# =============================================================================
# test_scanner.py - Scanner Unit Tests
# =============================================================================
# Tests for the Lox lexical scanner.
#
# Test coverage includes:
#   - Whitespace handling and end of input
#   - Single-character punctuation and one/two-character operators
#   - Comments, strings, numbers, identifiers and keywords
#   - Line/column tracking (end-of-lexeme locations)
#   - Recoverable errors and resumption after them
#   - Character sources other than plain strings
# =============================================================================

import pytest

from conftest import kinds, scan_all, tokens
from lox_scanner.errors import ScanError, ScanErrorKind
from lox_scanner.scanner import Scanner, errors_only, scan, tokens_only
from lox_scanner.source import CharStream, Location
from lox_scanner.tokens import Token, TokenType


# =============================================================================
# Whitespace and End of Input
# =============================================================================

class TestWhitespace:
    """Whitespace produces nothing and input exhaustion ends the sequence."""

    def test_empty_source(self):
        assert scan_all("") == []

    @pytest.mark.parametrize("source", [" ", "\t", "\n", "  \t\n\r\n   ", "\u00a0\f\v"])
    def test_whitespace_only(self, source):
        """Any whitespace-only input yields an empty sequence."""
        assert scan_all(source) == []

    def test_next_token_returns_none_at_end(self):
        scanner = Scanner("   ")
        assert scanner.next_token() is None
        assert scanner.next_token() is None

    def test_iterator_is_exhausted_once(self):
        """A scanner cannot be restarted."""
        scanner = Scanner("+ -")
        assert len(list(scanner)) == 2
        assert list(scanner) == []

    def test_iter_returns_self(self):
        scanner = Scanner("+")
        assert iter(scanner) is scanner

    def test_no_eof_token(self):
        """End of input is signalled by exhaustion, not an EOF token."""
        assert TokenType.EOF not in kinds("var a = 1;")


# =============================================================================
# Punctuation and Operators
# =============================================================================

class TestPunctuation:
    """Single-character punctuation."""

    def test_all_single_characters_in_order(self):
        result = tokens("(){},.+-;*")
        assert [t.type for t in result] == [
            TokenType.LEFT_PAREN,
            TokenType.RIGHT_PAREN,
            TokenType.LEFT_BRACE,
            TokenType.RIGHT_BRACE,
            TokenType.COMMA,
            TokenType.DOT,
            TokenType.PLUS,
            TokenType.MINUS,
            TokenType.SEMICOLON,
            TokenType.STAR,
        ]

    def test_columns_non_decreasing(self):
        columns = [t.location.column for t in tokens("(){},.+-;*")]
        assert columns == sorted(columns)
        assert columns == list(range(1, 11))

    def test_punctuation_has_no_value(self):
        assert tokens("(")[0].value is None


class TestOperators:
    """One and two character operators."""

    @pytest.mark.parametrize("source,expected", [
        ("!=", TokenType.BANG_EQUAL),
        ("==", TokenType.EQUAL_EQUAL),
        ("<=", TokenType.LESS_EQUAL),
        (">=", TokenType.GREATER_EQUAL),
    ])
    def test_two_character_operators(self, source, expected):
        assert kinds(source) == [expected]

    @pytest.mark.parametrize("source,expected", [
        ("!", TokenType.BANG),
        ("=", TokenType.EQUAL),
        ("<", TokenType.LESS),
        (">", TokenType.GREATER),
        ("/", TokenType.SLASH),
    ])
    def test_one_character_operators(self, source, expected):
        assert kinds(source) == [expected]

    def test_two_character_location_is_second_char(self):
        assert tokens("!=")[0].location == Location(1, 2)

    def test_triple_equals(self):
        """'===' is EQUAL_EQUAL followed by EQUAL."""
        assert kinds("===") == [TokenType.EQUAL_EQUAL, TokenType.EQUAL]

    def test_operators_separated_by_space(self):
        """A space between '!' and '=' gives two one-character tokens."""
        assert kinds("! =") == [TokenType.BANG, TokenType.EQUAL]

    def test_division(self):
        assert kinds("a / b") == [
            TokenType.IDENTIFIER,
            TokenType.SLASH,
            TokenType.IDENTIFIER,
        ]


# =============================================================================
# Comments
# =============================================================================

class TestComments:
    """// comments are tokens carrying their text."""

    def test_comment_with_newline(self):
        result = tokens("// hi\n")
        assert len(result) == 1
        assert result[0].type == TokenType.COMMENT
        assert result[0].value == "hi\n"

    def test_comment_at_end_of_input(self):
        """An unterminated comment simply captures the rest of the input."""
        result = tokens("// trailing")
        assert result[0].value == "trailing"

    def test_comment_without_space(self):
        assert tokens("//hi\n")[0].value == "hi\n"

    def test_empty_comment(self):
        assert tokens("//")[0].value == ""
        assert tokens("//\n")[0].value == "\n"

    def test_comment_keeps_inner_slashes(self):
        assert tokens("// a // b\n")[0].value == "a // b\n"

    def test_code_after_comment_line(self):
        result = tokens("// note\nprint")
        assert [t.type for t in result] == [TokenType.COMMENT, TokenType.PRINT]
        assert result[1].location == Location(2, 5)

    def test_comment_after_code(self):
        assert kinds("x; // done") == [
            TokenType.IDENTIFIER,
            TokenType.SEMICOLON,
            TokenType.COMMENT,
        ]

    def test_comment_location_after_newline(self):
        """The comment consumes its newline, so it ends on the next line."""
        assert tokens("// hi\n")[0].location == Location(2, 0)


# =============================================================================
# String Literals
# =============================================================================

class TestStrings:
    """String literal scanning."""

    def test_simple_string(self):
        result = tokens('"abc"')
        assert len(result) == 1
        assert result[0].type == TokenType.STRING
        assert result[0].value == "abc"

    def test_empty_string(self):
        assert tokens('""')[0].value == ""

    def test_string_with_spaces_and_symbols(self):
        assert tokens('"a + b; // c"')[0].value == "a + b; // c"

    def test_multiline_string(self):
        """Strings may span lines; the location follows the newlines."""
        result = tokens('"one\ntwo"')
        assert result[0].value == "one\ntwo"
        assert result[0].location == Location(2, 4)

    def test_no_escape_sequences(self):
        assert tokens(r'"a\nb"')[0].value == r"a\nb"

    def test_unterminated_string(self):
        """A missing closing quote yields exactly one error and no token."""
        result = scan_all('"abc')
        assert len(result) == 1
        error = result[0]
        assert isinstance(error, ScanError)
        assert error.kind == ScanErrorKind.UNTERMINATED_STRING
        assert "Unterminated" in error.message
        assert "abc" in error.message

    def test_unterminated_string_location_is_end_of_input(self):
        error = scan_all('x = "ab\ncd')[-1]
        assert error.location == Location(2, 2)

    def test_string_followed_by_tokens(self):
        assert kinds('"a" + "b"') == [
            TokenType.STRING,
            TokenType.PLUS,
            TokenType.STRING,
        ]


# =============================================================================
# Number Literals
# =============================================================================

class TestNumbers:
    """Number literal scanning."""

    def test_integer(self):
        result = tokens("123")
        assert result[0].type == TokenType.NUMBER
        assert result[0].value == 123.0
        assert isinstance(result[0].value, float)

    def test_fraction(self):
        assert tokens("1.5")[0].value == 1.5

    def test_leading_zeros(self):
        assert tokens("007")[0].value == 7.0

    def test_incomplete_fraction(self):
        result = scan_all("1.")
        assert len(result) == 1
        assert isinstance(result[0], ScanError)
        assert result[0].kind == ScanErrorKind.INCOMPLETE_NUMBER
        assert result[0].message == "Incomplete number literal 1."

    def test_incomplete_fraction_resumes_after_dot(self):
        """The '.' is consumed with the error; scanning continues after it."""
        result = scan_all("1.a")
        assert isinstance(result[0], ScanError)
        assert isinstance(result[1], Token)
        assert result[1].type == TokenType.IDENTIFIER
        assert result[1].value == "a"

    def test_leading_dot_is_not_a_number(self):
        assert kinds(".5") == [TokenType.DOT, TokenType.NUMBER]

    def test_method_call_on_number_is_an_error(self):
        """'1.foo' is an incomplete literal, then the identifier."""
        result = scan_all("1.foo")
        assert isinstance(result[0], ScanError)
        assert result[1].value == "foo"

    def test_second_dot(self):
        """Only one fractional part is read; the second dot is a DOT."""
        result = tokens("1.5.2")
        assert [t.type for t in result] == [
            TokenType.NUMBER,
            TokenType.DOT,
            TokenType.NUMBER,
        ]
        assert result[0].value == 1.5
        assert result[2].value == 2.0

    def test_negative_number_is_two_tokens(self):
        assert kinds("-3") == [TokenType.MINUS, TokenType.NUMBER]

    def test_number_location(self):
        assert tokens("  42")[0].location == Location(1, 4)


# =============================================================================
# Identifiers and Keywords
# =============================================================================

class TestIdentifiers:
    """Identifier and keyword scanning."""

    def test_identifier(self):
        result = tokens("iffy")
        assert result[0].type == TokenType.IDENTIFIER
        assert result[0].value == "iffy"

    def test_keyword(self):
        assert kinds("if") == [TokenType.IF]

    @pytest.mark.parametrize("word", [
        "and", "class", "else", "false", "for", "fun", "if", "nil",
        "or", "print", "return", "super", "this", "true", "var", "while",
    ])
    def test_every_keyword(self, word):
        result = tokens(word)
        assert result[0].type.name == word.upper()
        assert result[0].value is None

    def test_keywords_are_case_sensitive(self):
        assert kinds("If WHILE") == [TokenType.IDENTIFIER, TokenType.IDENTIFIER]

    def test_underscores_and_digits(self):
        assert tokens("_tmp_1")[0].value == "_tmp_1"

    def test_identifier_stops_at_punctuation(self):
        assert kinds("foo(bar)") == [
            TokenType.IDENTIFIER,
            TokenType.LEFT_PAREN,
            TokenType.IDENTIFIER,
            TokenType.RIGHT_PAREN,
        ]

    def test_digit_then_letters(self):
        """'1abc' is a number followed by an identifier."""
        assert kinds("1abc") == [TokenType.NUMBER, TokenType.IDENTIFIER]

    def test_unicode_letters(self):
        assert tokens("café")[0].value == "café"


# =============================================================================
# Location Tracking
# =============================================================================

class TestLocations:
    """Tokens carry the cursor location after their lexeme."""

    def test_two_lines(self):
        a, b = tokens("a\nb")
        assert a.location == Location(1, 1)
        assert b.location == Location(2, 1)

    def test_location_is_end_of_lexeme(self):
        token = tokens("  print")[0]
        assert token.location == Location(1, 7)

    def test_start_location(self):
        token = tokens("  print")[0]
        assert token.start == Location(1, 2)

    def test_start_does_not_affect_equality(self):
        token = tokens("x")[0]
        assert token == Token(TokenType.IDENTIFIER, Location(1, 1), "x")

    def test_scanner_location_property(self):
        scanner = Scanner("ab\ncd")
        next(scanner)
        assert scanner.location == Location(1, 2)
        next(scanner)
        assert scanner.location == Location(2, 2)

    def test_locations_monotonic(self):
        source = 'var x = "a\nb";\n// c\nprint x + 1.5;'
        locations = [(t.location.line, t.location.column) for t in tokens(source)]
        lines = [line for line, _ in locations]
        assert lines == sorted(lines)


# =============================================================================
# Error Recovery
# =============================================================================

class TestErrorRecovery:
    """Illegal characters are recoverable, one character at a time."""

    def test_illegal_character(self):
        result = scan_all("@")
        assert len(result) == 1
        error = result[0]
        assert isinstance(error, ScanError)
        assert error.kind == ScanErrorKind.ILLEGAL_CHARACTER
        assert error.message == "Illegal token: ILLEGAL(@)"
        assert error.location == Location(1, 1)

    def test_resumes_after_illegal_character(self):
        """No characters are skipped or duplicated after an error."""
        result = scan_all("a@b")
        assert isinstance(result[0], Token) and result[0].value == "a"
        assert isinstance(result[1], ScanError)
        assert isinstance(result[2], Token) and result[2].value == "b"
        assert result[2].location == Location(1, 3)

    @pytest.mark.parametrize("separator", ["\x1c", "\x1d", "\x1e", "\x1f"])
    def test_information_separators_are_illegal(self, separator):
        """ASCII separators are not whitespace even though str.isspace() says so."""
        result = scan_all(f"a{separator}b")
        assert [type(r) for r in result] == [Token, ScanError, Token]
        assert result[1].kind == ScanErrorKind.ILLEGAL_CHARACTER
        assert result[1].location == Location(1, 2)

    def test_consecutive_illegal_characters(self):
        result = scan_all("#$%")
        assert len(result) == 3
        assert all(isinstance(r, ScanError) for r in result)
        assert [r.location.column for r in result] == [1, 2, 3]

    def test_mixed_stream(self):
        result = scan_all('var x = 1.; @ "ok"')
        assert [str(r) for r in result] == [
            "VAR",
            "IDENTIFIER(x)",
            "EQUAL",
            "ScannerError<1, 10>: Incomplete number literal 1.",
            "SEMICOLON",
            "ScannerError<1, 13>: Illegal token: ILLEGAL(@)",
            "STRING(ok)",
        ]

    def test_tokens_only_and_errors_only(self):
        results = scan("a @ b")
        assert [t.value for t in tokens_only(results)] == ["a", "b"]
        assert len(list(errors_only(results))) == 1


# =============================================================================
# Character Sources
# =============================================================================

class TestSources:
    """The scanner accepts any peekable character source."""

    def test_iterable_of_chunks(self):
        """Lexemes may straddle chunk boundaries."""
        result = tokens(["pri", "nt 1", "2.", "5;"])
        assert [str(t) for t in result] == ["PRINT", "NUMBER(12.5)", "SEMICOLON"]

    def test_text_file(self, script_file):
        path = script_file("var a = 1;\nprint a;\n")
        with open(path, encoding="utf-8") as handle:
            result = tokens(handle)
        assert len(result) == 8
        assert result[-1].location == Location(2, 8)

    def test_char_stream_instance(self):
        stream = CharStream("x")
        assert kinds(stream) == [TokenType.IDENTIFIER]

    def test_custom_source(self):
        """Any object with peek() and advance() works."""

        class Reversed:
            def __init__(self, text):
                self.chars = list(text)

            def peek(self):
                return self.chars[-1] if self.chars else None

            def advance(self):
                return self.chars.pop() if self.chars else None

        assert kinds(Reversed(";)(")) == [
            TokenType.LEFT_PAREN,
            TokenType.RIGHT_PAREN,
            TokenType.SEMICOLON,
        ]

    def test_generator_is_read_lazily(self):
        pulled = []

        def lines():
            for line in ["a\n", "b\n", "c\n"]:
                pulled.append(line)
                yield line

        scanner = Scanner(lines())
        next(scanner)
        assert pulled == ["a\n"]
