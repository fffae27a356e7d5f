"""Standard meta-schemas for each specification generation.

Each dialect is built once per process and reused; MetaSchema instances are
immutable. Derive customised dialects with
``metaschema.meta_schema.builder(uri, get_v202012())``.
"""

from __future__ import annotations

from functools import lru_cache

from metaschema.formats.builtin import COMMON_BUILTIN_FORMATS
from metaschema.keywords.builtin import non_validation_keywords, validator_keywords
from metaschema.meta_schema import MetaSchema, MetaSchemaBuilder
from metaschema.models.enums import SpecVersion
from metaschema.vocabularies import default_vocabularies


def standard_builder(specification: SpecVersion) -> MetaSchemaBuilder:
    """Return a builder staged with the standard dialect of specification."""
    return (
        MetaSchemaBuilder(specification.id)
        .specification(specification)
        .id_keyword("id" if specification is SpecVersion.V4 else "$id")
        .add_formats(COMMON_BUILTIN_FORMATS)
        .add_keywords(validator_keywords(specification))
        .add_keywords(non_validation_keywords(specification))
        .vocabularies(default_vocabularies(specification))
    )


@lru_cache(maxsize=None)
def get_meta_schema(specification: SpecVersion) -> MetaSchema:
    """Return the shared standard MetaSchema of specification."""
    return standard_builder(specification).build()


def get_v4() -> MetaSchema:
    return get_meta_schema(SpecVersion.V4)


def get_v6() -> MetaSchema:
    return get_meta_schema(SpecVersion.V6)


def get_v7() -> MetaSchema:
    return get_meta_schema(SpecVersion.V7)


def get_v201909() -> MetaSchema:
    return get_meta_schema(SpecVersion.V201909)


def get_v202012() -> MetaSchema:
    return get_meta_schema(SpecVersion.V202012)
