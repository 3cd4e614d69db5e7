# =============================================================================
# conftest.py - Shared Test Helpers
# =============================================================================

import pytest

from lox_scanner.errors import ScanError
from lox_scanner.scanner import Scanner
from lox_scanner.tokens import Token


@pytest.fixture
def script_file(tmp_path):
    """
    Fixture: write a Lox script into a temporary directory.

    Returns a function taking the source text (and optional file name) and
    returning the path written.
    """
    def _write(source: str, name: str = "script.lox"):
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return path
    return _write


def scan_all(source) -> list:
    """Scan ``source`` and return every Token and ScanError produced."""
    return list(Scanner(source))


def tokens(source) -> list[Token]:
    """Scan ``source``, asserting that no errors were produced."""
    results = scan_all(source)
    errors = [r for r in results if isinstance(r, ScanError)]
    assert errors == [], f"unexpected scan errors: {errors}"
    return results


def kinds(source) -> list:
    """Token types for ``source``, in order."""
    return [t.type for t in tokens(source)]
