"""metaschema: keyword resolution and validator dispatch for schema dialects.

Example:
    >>> from metaschema import ValidationContext, builder, get_v202012
    >>> from metaschema.vocabularies import V202012_CORE, V202012_VALIDATION
    >>>
    >>> strict = (
    ...     builder("https://example.com/strict", get_v202012())
    ...     .vocabularies({V202012_CORE: True, V202012_VALIDATION: True})
    ...     .build()
    ... )
    >>> "properties" in strict.keywords
    False
"""

from metaschema.config import ValidatorsConfig
from metaschema.context import ValidationContext
from metaschema.dialects import (
    get_meta_schema,
    get_v4,
    get_v6,
    get_v7,
    get_v201909,
    get_v202012,
)
from metaschema.dispatch import KeywordDispatcher, UnknownKeywordRegistry
from metaschema.errors import InvalidMetaSchemaError, MetaSchemaError, SchemaConstructionError
from metaschema.meta_schema import MetaSchema, MetaSchemaBuilder, builder
from metaschema.models.enums import SpecVersion

__version__ = "0.1.0"

__all__ = [
    "InvalidMetaSchemaError",
    "KeywordDispatcher",
    "MetaSchema",
    "MetaSchemaBuilder",
    "MetaSchemaError",
    "SchemaConstructionError",
    "SpecVersion",
    "UnknownKeywordRegistry",
    "ValidationContext",
    "ValidatorsConfig",
    "builder",
    "get_meta_schema",
    "get_v4",
    "get_v6",
    "get_v7",
    "get_v201909",
    "get_v202012",
]
