"""Dotenv-backed store with typed accessors."""

from __future__ import annotations

import io
import logging
import math
import os
import re
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Iterator, Mapping, TextIO

from dotconf.errors import KeyNotFoundError, SourceUnavailableError, ValueTypeError
from dotconf.parser import ParsedLine, SkippedLine, iter_lines, parse_lines

logger = logging.getLogger(__name__)

Source = Callable[[], TextIO]

TRUE_TOKENS = frozenset({"1", "t", "true"})
FALSE_TOKENS = frozenset({"0", "f", "false"})

# ASCII decimal notation only; no digit separators, padding or hex.
FLOAT_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)
INT_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


class DotEnv:
    """Key/value store read from a dotenv source.

    ``source`` is called once per :meth:`setup` and must return a readable
    text stream; the loader closes the stream once it has been read. Values
    are kept as strings and converted when an accessor asks for them.
    """

    def __init__(self, source: Source, *, description: str | None = None) -> None:
        self._source = source
        self.description = description or "<stream>"
        self._values: dict[str, str] = {}
        self._entries: tuple[ParsedLine, ...] = ()
        self._skipped: tuple[SkippedLine, ...] = ()
        self._loaded = False

    @classmethod
    def from_file(cls, path: str | os.PathLike[str], *, encoding: str = "utf-8") -> "DotEnv":
        file_path = Path(path)
        # Lines end at "\n" only; a lone "\r" stays part of the value.
        return cls(
            lambda: file_path.open("r", encoding=encoding, newline="\n"),
            description=str(file_path),
        )

    @classmethod
    def from_string(cls, text: str) -> "DotEnv":
        return cls(lambda: io.StringIO(text), description="<string>")

    def setup(self) -> "DotEnv":
        self._values = {}
        self._entries = ()
        self._skipped = ()
        self._loaded = False
        try:
            with self._source() as stream:
                result = parse_lines(iter_lines(stream))
        except (OSError, UnicodeDecodeError) as exc:
            reason = getattr(exc, "strerror", None) or str(exc)
            raise SourceUnavailableError(self.description, reason) from exc

        self._values = result.values
        self._entries = tuple(result.entries)
        self._skipped = tuple(result.skipped)
        self._loaded = True
        logger.debug(
            "Loaded %d values from %s (%d lines skipped)",
            len(self._values),
            self.description,
            len(self._skipped),
        )
        return self

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def values(self) -> Mapping[str, str]:
        return MappingProxyType(self._values)

    @property
    def entries(self) -> tuple[ParsedLine, ...]:
        return self._entries

    @property
    def skipped(self) -> tuple[SkippedLine, ...]:
        return self._skipped

    def keys(self) -> list[str]:
        return list(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def _value(self, name: str) -> str:
        try:
            return self._values[name]
        except KeyError:
            raise KeyNotFoundError(name) from None

    def get_string(self, name: str) -> str:
        return self._value(name)

    def get_int(self, name: str) -> int:
        """Return ``name`` as an int.

        Float notation is accepted and truncated toward zero, so ``"1.0"``
        and ``"1.9"`` both read as ``1``.
        """
        raw = self._value(name)
        if FLOAT_PATTERN.fullmatch(raw):
            number = float(raw)
            if math.isfinite(number):
                return int(number)
        # Integers too large for a float still parse exactly.
        if INT_PATTERN.fullmatch(raw):
            return int(raw, 10)
        raise ValueTypeError(name, raw, "int")

    def get_bool(self, name: str) -> bool:
        raw = self._value(name)
        token = raw.lower()
        if token in TRUE_TOKENS:
            return True
        if token in FALSE_TOKENS:
            return False
        raise ValueTypeError(name, raw, "bool")


def load_dotenv_file(path: str | os.PathLike[str], *, encoding: str = "utf-8") -> DotEnv:
    return DotEnv.from_file(path, encoding=encoding).setup()
