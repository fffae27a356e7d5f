"""Type aliases for metaschema.

This module defines type aliases to document the semantic meaning of
plain string and JSON types.
"""

from typing import Any, TypeAlias

KeywordName: TypeAlias = str
"""Name of a schema keyword (e.g. 'properties', '$ref')"""

FormatName: TypeAlias = str
"""Name of a string format (e.g. 'date-time')"""

VocabularyID: TypeAlias = str
"""Vocabulary identifier URI (e.g. 'https://json-schema.org/draft/2020-12/vocab/core')"""

URI: TypeAlias = str
"""Uniform Resource Identifier"""

SchemaNode: TypeAlias = Any
"""A JSON-compatible value: dict, list, str, int, float, bool or None"""
