# SPDX-License-Identifier: MIT
"""Tokenizing of free-form version strings.

A version string is scanned left to right and split into typed components:
- Numeric: a maximal run of ASCII digits (unsigned 32-bit range)
- Text: a maximal run of ASCII letters, optionally led by one hyphen ("-beta")

Every other character is a delimiter and produces no component.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

logger = logging.getLogger(__name__)

# Largest value a numeric component may hold (unsigned 32-bit)
MAX_NUMERIC = 0xFFFFFFFF

# Parsing stops once this many components have been produced
MAX_COMPONENTS = 64

VersionInput = Union[str, bytes]


class VersionSorterError(Exception):
    """Base class for errors raised by version_sorter."""

    pass


class VersionOverflowError(VersionSorterError, OverflowError):
    """Raised when a numeric run exceeds the unsigned 32-bit range."""

    def __init__(self, version: VersionInput, index: int | None = None, message: str = ""):
        self.version = version
        self.index = index
        self.message = message or f"Numeric overflow in version string: {version!r}"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class NumericComponent:
    """A run of decimal digits."""

    value: int

    @property
    def is_numeric(self) -> bool:
        return True


@dataclass(frozen=True, slots=True, eq=False)
class TextComponent:
    """A run of letters, referencing a slice of the original string.

    Attributes:
        source: The original version string (str or bytes)
        offset: Start of the slice within source
        length: Number of characters in the slice
    """

    source: VersionInput
    offset: int
    length: int

    @property
    def is_numeric(self) -> bool:
        return False

    @property
    def text(self) -> VersionInput:
        """Return the characters this component covers."""
        return self.source[self.offset : self.offset + self.length]

    def as_bytes(self) -> bytes:
        """Return the slice as bytes (text slices are always ASCII)."""
        text = self.text
        return text.encode("ascii") if isinstance(text, str) else bytes(text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextComponent):
            return NotImplemented
        return self.as_bytes() == other.as_bytes()

    def __hash__(self) -> int:
        return hash(self.as_bytes())


Component = Union[NumericComponent, TextComponent]


@dataclass(frozen=True, slots=True, eq=False)
class ParsedVersion:
    """The component sequence of one version string.

    Attributes:
        original: The string the components were scanned from
        components: Components in left-to-right order (at most MAX_COMPONENTS)
        index: Position of the original string in its input list
    """

    original: VersionInput
    components: tuple[Component, ...]
    index: int = 0

    def __len__(self) -> int:
        return len(self.components)

    def __repr__(self) -> str:
        return f"<ParsedVersion({self.original!r}, index={self.index})>"

    # Ordering is defined by the structural comparator; equality means the two
    # versions cannot be told apart by it, not that the strings are identical.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParsedVersion):
            return NotImplemented
        return _compare(self, other) == 0

    def __lt__(self, other: ParsedVersion) -> bool:
        if not isinstance(other, ParsedVersion):
            return NotImplemented
        return _compare(self, other) < 0

    def __le__(self, other: ParsedVersion) -> bool:
        if not isinstance(other, ParsedVersion):
            return NotImplemented
        return _compare(self, other) <= 0

    def __gt__(self, other: ParsedVersion) -> bool:
        if not isinstance(other, ParsedVersion):
            return NotImplemented
        return _compare(self, other) > 0

    def __ge__(self, other: ParsedVersion) -> bool:
        if not isinstance(other, ParsedVersion):
            return NotImplemented
        return _compare(self, other) >= 0

    __hash__ = None  # type: ignore[assignment]


def _compare(a: ParsedVersion, b: ParsedVersion) -> int:
    from .compare import compare_parsed

    return compare_parsed(a, b)


def _code_at(version: VersionInput, pos: int) -> int:
    """Return the character code at pos (bytes already index as ints)."""
    if isinstance(version, str):
        return ord(version[pos])
    return version[pos]


def _is_digit(code: int) -> bool:
    return 0x30 <= code <= 0x39


def _is_alpha(code: int) -> bool:
    return 0x41 <= code <= 0x5A or 0x61 <= code <= 0x7A


_HYPHEN = 0x2D


def parse_version(version: VersionInput, index: int = 0) -> ParsedVersion:
    """Split a version string into numeric and text components.

    Args:
        version: The version string (str or bytes); need not be well formed
        index: Position of the string in its input list

    Returns:
        A ParsedVersion referencing the original string

    Raises:
        VersionOverflowError: If a digit run exceeds 4294967295
        TypeError: If version is not str or bytes

    Examples:
        >>> [c.value for c in parse_version("1.10").components]
        [1, 10]

        >>> parse_version("1.0-beta").components[2].text
        '-beta'
    """
    if not isinstance(version, (str, bytes, bytearray)):
        raise TypeError(f"Version must be str or bytes, got {type(version).__name__}")

    size = len(version)
    components: list[Component] = []
    pos = 0

    while pos < size:
        if len(components) >= MAX_COMPONENTS:
            logger.debug(
                "Version %r truncated after %d components", version, MAX_COMPONENTS
            )
            break

        code = _code_at(version, pos)

        if _is_digit(code):
            number = 0
            while pos < size and _is_digit(_code_at(version, pos)):
                number = number * 10 + (_code_at(version, pos) - 0x30)
                if number > MAX_NUMERIC:
                    raise VersionOverflowError(version, index)
                pos += 1
            components.append(NumericComponent(number))
            continue

        leading_hyphen = (
            code == _HYPHEN and pos + 1 < size and _is_alpha(_code_at(version, pos + 1))
        )
        if leading_hyphen or _is_alpha(code):
            start = pos
            pos += 1
            while pos < size and _is_alpha(_code_at(version, pos)):
                pos += 1
            components.append(TextComponent(version, start, pos - start))
            continue

        # Delimiter
        pos += 1

    return ParsedVersion(original=version, components=tuple(components), index=index)


def tokenize(version: VersionInput) -> list[int | VersionInput]:
    """Return the plain values of a version's components.

    Examples:
        >>> tokenize("v10.3a")
        ['v', 10, 3, 'a']
        >>> tokenize("2.1-beta")
        [2, 1, '-beta']
    """
    return [
        c.value if isinstance(c, NumericComponent) else c.text
        for c in parse_version(version).components
    ]
