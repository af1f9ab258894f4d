"""Exception types for dotconf."""

from __future__ import annotations


class DotEnvError(Exception):
    """Base class for every error raised by dotconf."""


class SourceUnavailableError(DotEnvError):
    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Unable to read dotenv source {source}: {reason}")
        self.source = source
        self.reason = reason


class LineParseError(DotEnvError, ValueError):
    def __init__(self, line: str, reason: str) -> None:
        super().__init__(reason)
        self.line = line
        self.reason = reason


class KeyNotFoundError(DotEnvError, KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Variable does not exist: {self.name}"


class ValueTypeError(DotEnvError, ValueError):
    def __init__(self, name: str, value: str, expected: str) -> None:
        super().__init__(f"Variable {name} is not a valid {expected}: {value!r}")
        self.name = name
        self.value = value
        self.expected = expected
