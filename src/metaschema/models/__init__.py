"""Metaschema Models.

Value objects, enumerations and constants shared by the keyword registry,
the meta-schema builder and the validator dispatcher.
"""

from metaschema.models.base import MetaSchemaBaseModel
from metaschema.models.constants import (
    DEFAULT_ID_KEYWORD,
    DISCRIMINATOR_KEYWORD,
    FORMAT_KEYWORD,
    MESSAGE_KEYWORD,
)
from metaschema.models.enums import SpecVersion
from metaschema.models.paths import EvaluationPath, SchemaLocation
from metaschema.models.types import URI, FormatName, KeywordName, SchemaNode, VocabularyID

__all__ = [
    "DEFAULT_ID_KEYWORD",
    "DISCRIMINATOR_KEYWORD",
    "FORMAT_KEYWORD",
    "MESSAGE_KEYWORD",
    "EvaluationPath",
    "FormatName",
    "KeywordName",
    "MetaSchemaBaseModel",
    "SchemaLocation",
    "SchemaNode",
    "SpecVersion",
    "URI",
    "VocabularyID",
]
