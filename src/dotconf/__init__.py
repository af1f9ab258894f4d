"""Typed configuration values read from dotenv files."""

from dotconf.errors import (
    DotEnvError,
    KeyNotFoundError,
    LineParseError,
    SourceUnavailableError,
    ValueTypeError,
)
from dotconf.loader import DotEnv, load_dotenv_file
from dotconf.parser import ParsedLine, ParseResult, SkippedLine, parse_line, parse_lines

__all__ = [
    "DotEnv",
    "DotEnvError",
    "KeyNotFoundError",
    "LineParseError",
    "ParseResult",
    "ParsedLine",
    "SkippedLine",
    "SourceUnavailableError",
    "ValueTypeError",
    "load_dotenv_file",
    "parse_line",
    "parse_lines",
]
