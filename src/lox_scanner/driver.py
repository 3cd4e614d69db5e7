"""
Scan Driver
===========

The I/O glue around the scanner: feed it text from a string, a stream, a
file or an interactive prompt, print the tokens it produces, and report
its errors on stderr.

Comment tokens are dropped here (unless configured otherwise); the
scanner itself always produces them.

Usage Examples
--------------
    >>> from lox_scanner.driver import run
    >>> tokens = run("print 1 + 2; // sum")
    PRINT
    NUMBER(1)
    PLUS
    NUMBER(2)
    SEMICOLON

Copyright (c) 2026 lox-scanner contributors
"""

import logging
import sys
from pathlib import Path
from typing import IO, Iterable, Optional, Union

import click

from lox_scanner.config import DriverConfig
from lox_scanner.errors import ScanError, ScriptFileError
from lox_scanner.scanner import Scanner
from lox_scanner.tokens import Token

logger = logging.getLogger(__name__)


def report_error(error: Union[ScanError, Exception]) -> None:
    """Write an error to stderr."""
    click.echo(str(error), err=True)


def format_token(token: Token, config: DriverConfig) -> str:
    """Render a token for output, with its location if configured."""
    if config.show_locations:
        return f"{token.location}: {token}"
    return str(token)


def run(
    source: Union[str, Iterable[str]],
    config: Optional[DriverConfig] = None,
    out: Optional[IO[str]] = None,
) -> list[Token]:
    """
    Scan ``source``, print its tokens and report its errors.

    Args:
        source: Text, or an iterable of text chunks such as an open file
        config: Driver settings (defaults if omitted)
        out: Stream for token output (stdout if omitted)

    Returns:
        The tokens that were printed, in order
    """
    printed: list[Token] = []
    _print_results(Scanner(source), config or DriverConfig(), out, printed)
    return printed


def _print_results(
    scanner: Scanner,
    config: DriverConfig,
    out: Optional[IO[str]],
    printed: list[Token],
) -> None:
    """Drain ``scanner``, appending each printed token to ``printed``."""
    error_count = 0

    for result in scanner:
        if isinstance(result, ScanError):
            error_count += 1
            report_error(result)
            continue
        if result.is_comment() and not config.show_comments:
            continue
        click.echo(format_token(result, config), file=out)
        printed.append(result)

    logger.debug("scanned %d tokens, %d errors", len(printed), error_count)


def run_read(
    stream: IO[str],
    config: Optional[DriverConfig] = None,
    out: Optional[IO[str]] = None,
) -> list[Token]:
    """
    Scan everything left in a text stream.

    The stream is consumed lazily, one line at a time. A read or decode
    failure is reported on stderr and ends the scan; tokens printed before
    the failure are still returned.
    """
    printed: list[Token] = []
    try:
        _print_results(Scanner(stream), config or DriverConfig(), out, printed)
    except (OSError, UnicodeDecodeError) as e:
        report_error(e)
    return printed


def run_file(
    path: Union[str, Path],
    config: Optional[DriverConfig] = None,
    out: Optional[IO[str]] = None,
) -> list[Token]:
    """
    Scan a script file.

    Raises:
        ScriptFileError: If the file cannot be opened
    """
    config = config or DriverConfig()
    logger.debug("opening %s (%s)", path, config.encoding)
    try:
        handle = open(path, "r", encoding=config.encoding)
    except (OSError, LookupError) as e:
        reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        raise ScriptFileError(str(path), reason) from e

    with handle:
        return run_read(handle, config, out)


def run_prompt(
    config: Optional[DriverConfig] = None,
    stdin: Optional[IO[str]] = None,
    out: Optional[IO[str]] = None,
) -> None:
    """
    Interactive loop: read a line, scan it, print its tokens, repeat.

    Each line is scanned on its own, so a string literal cannot continue
    onto the next line. The loop ends at end of input or on Ctrl-C.
    """
    config = config or DriverConfig()
    stdin = stdin or sys.stdin

    while True:
        click.echo(config.prompt, nl=False, file=out)
        try:
            line = stdin.readline()
        except KeyboardInterrupt:
            click.echo(file=out)
            break
        except OSError as e:
            report_error(e)
            break

        if not line:
            click.echo(file=out)
            break

        if config.echo_input:
            text = line.rstrip("\n")
            click.echo(f"Got token: {text}", file=out)
        run(line, config, out)
