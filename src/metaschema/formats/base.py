"""Format capability and its built-in implementations.

A Format decides whether a candidate string has a given shape. Formats are
registered by name on a MetaSchemaBuilder and wrapped into the reserved
``format`` keyword at build time.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class Format(Protocol):
    """Protocol for named string-shape checkers."""

    @property
    def name(self) -> str: ...

    @property
    def message_key(self) -> str: ...

    def matches(self, value: str) -> bool: ...


@dataclass(frozen=True)
class PatternFormat:
    """Format backed by a regular expression.

    The expression must match the whole value; a trailing newline is not
    ignored.

    Example:
        >>> fmt = PatternFormat.of("alpha", r"^[a-zA-Z]+$")
        >>> fmt.matches("abc"), fmt.matches("ab1")
        (True, False)
    """

    name: str
    pattern: re.Pattern[str]
    message_key: str = "format"

    @classmethod
    def of(cls, name: str, regex: str, message_key: str | None = None) -> PatternFormat:
        return cls(name=name, pattern=re.compile(regex), message_key=message_key or "format")

    def matches(self, value: str) -> bool:
        return self.pattern.fullmatch(value) is not None


@dataclass(frozen=True)
class PredicateFormat:
    """Format backed by an arbitrary predicate.

    Example:
        >>> even = PredicateFormat("even-length", lambda v: len(v) % 2 == 0)
        >>> even.matches("ab")
        True
    """

    name: str
    predicate: Callable[[str], bool] = field(compare=False)
    message_key: str = "format"

    def matches(self, value: str) -> bool:
        return bool(self.predicate(value))


def pattern(name: str, regex: str, message_key: str | None = None) -> PatternFormat:
    """Shorthand for PatternFormat.of."""
    return PatternFormat.of(name, regex, message_key)
