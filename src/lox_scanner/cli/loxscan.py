"""
loxscan - Lox Scanner Command-Line Interface
============================================

Scan a Lox script, or lines typed at an interactive prompt, and print one
token per line. Scan errors go to stderr and do not stop the scan.

Usage Examples
--------------
Scan a script:
    $ loxscan hello.lox

Interactive prompt (Ctrl-D to quit):
    $ loxscan
    > print 1;
    Got token: print 1;
    PRINT
    NUMBER(1)
    SEMICOLON

Show positions and comments:
    $ loxscan --locations --comments hello.lox

Exit Codes
----------
0  - Success (scan errors inside the script are reported, not fatal)
64 - Usage error
65 - Script file cannot be read
70 - Internal error
"""

import logging
from pathlib import Path
from typing import Optional

import click

from lox_scanner import __version__
from lox_scanner.cli.errors import ExitCode, handle_cli_exception
from lox_scanner.config import DriverConfig
from lox_scanner.driver import run_file, run_prompt

logger = logging.getLogger(__name__)


class ScriptCommand(click.Command):
    """Click command whose usage errors exit with status 64."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = ExitCode.USAGE
            raise


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command(cls=ScriptCommand)
@click.argument(
    "script",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--comments",
    is_flag=True,
    help="Print COMMENT tokens instead of filtering them out",
)
@click.option(
    "--locations",
    is_flag=True,
    help="Prefix each token with its 'line, column'",
)
@click.option(
    "--no-echo",
    is_flag=True,
    help="In prompt mode, do not echo each input line",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose (debug) logging",
)
@click.version_option(version=__version__, prog_name="loxscan")
def main(
    script: Optional[Path],
    comments: bool,
    locations: bool,
    no_echo: bool,
    verbose: bool,
) -> None:
    """
    Tokenize Lox source code.

    SCRIPT is the Lox file to scan. Without it, lines are read from an
    interactive prompt until end of input.

    \b
    Environment:
        LOX_SHOW_COMMENTS, LOX_SHOW_LOCATIONS, LOX_ECHO_INPUT,
        LOX_PROMPT, LOX_ENCODING
    """
    setup_logging(verbose)

    config = DriverConfig.from_env()
    if comments:
        config.show_comments = True
    if locations:
        config.show_locations = True
    if no_echo:
        config.echo_input = False

    try:
        if script is None:
            logger.debug("starting prompt")
            run_prompt(config)
        else:
            run_file(script, config)
    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
