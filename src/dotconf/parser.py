"""Line parser for the dotenv format.

Each meaningful line is handled in four steps: trailing comments are
dropped (hashes inside quotes survive), the line is split on the first
``=`` (or ``:`` for YAML-style input), the key loses an ``export`` prefix,
and a quoted value loses its quotes and gets ``\\"`` and ``\\n`` expanded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Iterable, Iterator, TextIO

from dotconf.errors import LineParseError

logger = logging.getLogger(__name__)

COMMENT = "#"
SEPARATORS = ("=", ":")
EXPORT_PREFIX = "export"
QUOTES = ('"', "'")


@dataclass(frozen=True)
class ParsedLine:
    line_number: int
    key: str
    value: str


@dataclass(frozen=True)
class SkippedLine:
    line_number: int
    text: str
    reason: str


@dataclass
class ParseResult:
    entries: list[ParsedLine] = field(default_factory=list)
    skipped: list[SkippedLine] = field(default_factory=list)
    values: dict[str, str] = field(default_factory=dict)


def iter_lines(stream: TextIO) -> Iterator[str]:
    for raw in stream:
        line = raw[:-1] if raw.endswith("\n") else raw
        if line.endswith("\r"):
            line = line[:-1]
        yield line


def is_ignored_line(line: str) -> bool:
    trimmed = line.strip(" \n\t")
    return not trimmed or trimmed.startswith(COMMENT)


def strip_comment(line: str) -> str:
    """Drop a trailing ``#`` comment while keeping hashes inside quotes.

    The line is cut into the segments between hashes. A segment holding
    exactly one double or exactly one single quote opens or closes a quoted
    region; segments are kept while a region is open. Any other segment
    after the first one belongs to a comment.
    """
    if COMMENT not in line:
        return line

    quotes_open = False
    kept: list[str] = []
    for segment in line.split(COMMENT):
        if segment.count('"') == 1 or segment.count("'") == 1:
            if quotes_open:
                quotes_open = False
                kept.append(segment)
            else:
                quotes_open = True

        if not kept or quotes_open:
            kept.append(segment)

    return COMMENT.join(kept)


def split_key_value(line: str) -> tuple[str, str]:
    if not line:
        raise LineParseError(line, "zero length string")
    for separator in SEPARATORS:
        key, found, value = line.partition(separator)
        if found:
            return key, value
    raise LineParseError(line, "can't separate key from value")


def normalize_key(raw: str) -> str:
    key = raw
    if key.startswith(EXPORT_PREFIX):
        key = key[len(EXPORT_PREFIX):]
    return key.strip(" ")


def _quote_count(value: str, quote: str) -> int:
    count = value.count(quote)
    if quote == '"':
        count -= value.count('\\"')
    return count


def normalize_value(raw: str) -> str:
    value = raw.strip(" ")
    quoted = [quote for quote in QUOTES if _quote_count(value, quote) == 2]
    if not quoted:
        return value

    # Each end loses at most one quote, independently of the other end.
    for quote in quoted:
        if value.startswith(quote) or value.endswith(quote):
            if value.startswith(quote):
                value = value[1:]
            if value.endswith(quote):
                value = value[:-1]
            break

    value = value.replace('\\"', '"')
    return value.replace("\\n", "\n")


def parse_line(line: str) -> tuple[str, str]:
    raw_key, raw_value = split_key_value(strip_comment(line))
    return normalize_key(raw_key), normalize_value(raw_value)


def parse_lines(lines: Iterable[str]) -> ParseResult:
    result = ParseResult()
    for line_number, line in enumerate(lines, start=1):
        if is_ignored_line(line):
            continue
        try:
            key, value = parse_line(line)
        except LineParseError as exc:
            logger.debug("Skipping line %d: %s", line_number, exc.reason)
            result.skipped.append(SkippedLine(line_number, line, exc.reason))
            continue
        result.entries.append(ParsedLine(line_number, key, value))
        # Later entries overwrite earlier ones.
        result.values[key] = value
    return result
