"""Enumerations for metaschema.

This module defines the ordered set of schema specification generations.
"""

from __future__ import annotations

from enum import Enum


class SpecVersion(str, Enum):
    """Schema specification generations.

    The value is the canonical meta-schema URI. Generations are ordered by
    ``flag``; vocabularies were introduced with 2019-09.

    Example:
        >>> SpecVersion.V202012.supports_vocabularies()
        True
        >>> SpecVersion.V7.supports_vocabularies()
        False
        >>> SpecVersion.from_id("http://json-schema.org/draft-07/schema")
        <SpecVersion.V7: 'http://json-schema.org/draft-07/schema#'>
    """

    V4 = "http://json-schema.org/draft-04/schema#"
    V6 = "http://json-schema.org/draft-06/schema#"
    V7 = "http://json-schema.org/draft-07/schema#"
    V201909 = "https://json-schema.org/draft/2019-09/schema"
    V202012 = "https://json-schema.org/draft/2020-12/schema"

    @property
    def id(self) -> str:
        """Canonical meta-schema URI of this generation."""
        return self.value

    @property
    def flag(self) -> int:
        """Ordering flag; later generations have larger flags."""
        return _VERSION_FLAGS[self]

    def supports_vocabularies(self) -> bool:
        """Check if this generation composes its keywords from vocabularies."""
        return self.flag >= SpecVersion.V201909.flag

    def __ge__(self, other: object) -> bool:
        if isinstance(other, SpecVersion):
            return self.flag >= other.flag
        return NotImplemented

    def __gt__(self, other: object) -> bool:
        if isinstance(other, SpecVersion):
            return self.flag > other.flag
        return NotImplemented

    def __le__(self, other: object) -> bool:
        if isinstance(other, SpecVersion):
            return self.flag <= other.flag
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, SpecVersion):
            return self.flag < other.flag
        return NotImplemented

    @classmethod
    def from_id(cls, uri: str) -> SpecVersion | None:
        """Return the generation whose canonical id matches uri, ignoring a trailing '#'."""
        normalized = uri.rstrip("#")
        for version in cls:
            if version.value.rstrip("#") == normalized:
                return version
        return None


_VERSION_FLAGS: dict[SpecVersion, int] = {
    SpecVersion.V4: 1,
    SpecVersion.V6: 2,
    SpecVersion.V7: 4,
    SpecVersion.V201909: 8,
    SpecVersion.V202012: 16,
}
