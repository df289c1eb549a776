"""
BL Toolkit - Configuration
==========================

Settings shared by the command-line tools. Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line options (applied by the CLI on top of the above)
"""

from dataclasses import dataclass
import codecs
import logging
import os

from bl_lang.language.printer import DEFAULT_INDENT_SIZE

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class BLConfig:
    """
    Configuration for BL tools.

    Attributes:
        indent_size: Spaces per nesting level in pretty-printed output
        log_level: Logging level name used when not in verbose mode
        encoding: Text encoding of BL source files
    """

    indent_size: int = DEFAULT_INDENT_SIZE
    log_level: str = "WARNING"
    encoding: str = "utf-8"

    @classmethod
    def from_env(cls) -> "BLConfig":
        """
        Create BLConfig from environment variables.

        Environment variables (all optional):
            BL_INDENT_SIZE: Pretty-printer indentation (positive integer)
            BL_LOG_LEVEL: Logging level name (e.g., "INFO")
            BL_ENCODING: Source file encoding (e.g., "latin-1")

        Invalid values are ignored and the default is kept.
        """
        config = cls()

        if indent := os.environ.get("BL_INDENT_SIZE"):
            try:
                value = int(indent)
            except ValueError:
                value = 0
            if value > 0:
                config.indent_size = value

        if level := os.environ.get("BL_LOG_LEVEL"):
            if level.upper() in LOG_LEVELS:
                config.log_level = level.upper()

        if encoding := os.environ.get("BL_ENCODING"):
            try:
                codecs.lookup(encoding)
            except LookupError:
                pass  # Unknown codec, keep default
            else:
                config.encoding = encoding

        return config

    def setup_logging(self, verbose: bool = False) -> None:
        """Configure logging based on verbosity and log_level."""
        level = logging.DEBUG if verbose else getattr(logging, self.log_level)
        logging.basicConfig(
            level=level,
            format="%(levelname)s: %(message)s" if verbose else "%(message)s",
        )
