"""String format checkers composed into the reserved ``format`` keyword."""

from metaschema.formats.base import Format, PatternFormat, PredicateFormat, pattern
from metaschema.formats.builtin import COMMON_BUILTIN_FORMATS

__all__ = [
    "COMMON_BUILTIN_FORMATS",
    "Format",
    "PatternFormat",
    "PredicateFormat",
    "pattern",
]
