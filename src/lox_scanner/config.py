"""
Driver Configuration
====================

Settings for the driver layer (what gets printed and how input is read).
The scanner itself has no settings. Configuration can come from:
- Default values (defined here)
- Environment variables (``DriverConfig.from_env``)
- Command-line flags, applied on top by ``loxscan``

Environment Variables
---------------------
| Variable            | Field           | Example |
|---------------------|-----------------|---------|
| LOX_SHOW_COMMENTS   | show_comments   | 1       |
| LOX_SHOW_LOCATIONS  | show_locations  | true    |
| LOX_ECHO_INPUT      | echo_input      | off     |
| LOX_PROMPT          | prompt          | "lox> " |
| LOX_ENCODING        | encoding        | latin-1 |
"""

from dataclasses import dataclass
from typing import Mapping, Optional
import logging
import os

logger = logging.getLogger(__name__)

_TRUE_STRINGS = ("1", "true", "yes", "on")
_FALSE_STRINGS = ("0", "false", "no", "off")


def parse_bool(value: str) -> Optional[bool]:
    """
    Interpret a boolean environment string.

    Returns:
        True or False, or None if the string is not recognised
    """
    lowered = value.strip().lower()
    if lowered in _TRUE_STRINGS:
        return True
    if lowered in _FALSE_STRINGS:
        return False
    return None


@dataclass
class DriverConfig:
    """
    Configuration for the scan driver.

    Attributes:
        show_comments: Print COMMENT tokens (filtered out by default)
        show_locations: Prefix each token with its 'line, column'
        echo_input: In prompt mode, echo each line before scanning it
        prompt: Prompt string for interactive mode
        encoding: Text encoding used to open script files
    """

    show_comments: bool = False
    show_locations: bool = False
    echo_input: bool = True
    prompt: str = "> "
    encoding: str = "utf-8"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DriverConfig":
        """
        Create DriverConfig from environment variables.

        Unrecognised boolean values are logged and ignored, leaving the
        default in place.

        Args:
            environ: Mapping to read instead of os.environ (for tests)

        Returns:
            DriverConfig with values from the environment
        """
        if environ is None:
            environ = os.environ
        config = cls()

        for variable, attribute in (
            ("LOX_SHOW_COMMENTS", "show_comments"),
            ("LOX_SHOW_LOCATIONS", "show_locations"),
            ("LOX_ECHO_INPUT", "echo_input"),
        ):
            if raw := environ.get(variable):
                flag = parse_bool(raw)
                if flag is None:
                    logger.warning("ignoring %s=%r: not a boolean", variable, raw)
                else:
                    setattr(config, attribute, flag)

        if (prompt := environ.get("LOX_PROMPT")) is not None:
            config.prompt = prompt

        if encoding := environ.get("LOX_ENCODING"):
            config.encoding = encoding

        return config
