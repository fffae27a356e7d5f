"""Vocabulary catalog and keyword resolution.

From 2019-09 on, a specification composes its keywords from vocabularies
that a meta-schema may enable or leave out. This module holds the read-only
catalog of those vocabularies, the default toggle map of each
vocabulary-aware specification, and the resolver that prunes a keyword map
down to the vocabularies a derived meta-schema actually requests.

Example:
    >>> from metaschema.models.enums import SpecVersion
    >>> keywords = {"type": ..., "properties": ..., "title": ...}
    >>> resolved = resolve_vocabulary_keywords(
    ...     keywords,
    ...     {V202012_CORE: True, V202012_VALIDATION: True},
    ...     SpecVersion.V202012,
    ...     "https://example.com/dialect",
    ... )
    >>> sorted(resolved)
    ['type']
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TypeVar

from pydantic import Field

from metaschema.models.base import MetaSchemaBaseModel
from metaschema.models.enums import SpecVersion
from metaschema.models.types import URI, KeywordName, VocabularyID

_V = TypeVar("_V")


class Vocabulary(MetaSchemaBaseModel):
    """A named bundle of keywords enabled or disabled as a unit."""

    id: VocabularyID = Field(..., description="Vocabulary identifier URI")
    keywords: frozenset[KeywordName] = Field(
        default=frozenset(), description="Keywords it contributes"
    )


V201909_CORE = "https://json-schema.org/draft/2019-09/vocab/core"
V201909_APPLICATOR = "https://json-schema.org/draft/2019-09/vocab/applicator"
V201909_VALIDATION = "https://json-schema.org/draft/2019-09/vocab/validation"
V201909_META_DATA = "https://json-schema.org/draft/2019-09/vocab/meta-data"
V201909_FORMAT = "https://json-schema.org/draft/2019-09/vocab/format"
V201909_CONTENT = "https://json-schema.org/draft/2019-09/vocab/content"

V202012_CORE = "https://json-schema.org/draft/2020-12/vocab/core"
V202012_APPLICATOR = "https://json-schema.org/draft/2020-12/vocab/applicator"
V202012_UNEVALUATED = "https://json-schema.org/draft/2020-12/vocab/unevaluated"
V202012_VALIDATION = "https://json-schema.org/draft/2020-12/vocab/validation"
V202012_META_DATA = "https://json-schema.org/draft/2020-12/vocab/meta-data"
V202012_FORMAT_ANNOTATION = "https://json-schema.org/draft/2020-12/vocab/format-annotation"
V202012_FORMAT_ASSERTION = "https://json-schema.org/draft/2020-12/vocab/format-assertion"
V202012_CONTENT = "https://json-schema.org/draft/2020-12/vocab/content"

_META_DATA_KEYWORDS = frozenset(
    {"title", "description", "default", "deprecated", "readOnly", "writeOnly", "examples"}
)
_VALIDATION_KEYWORDS = frozenset(
    {
        "type", "const", "enum", "multipleOf", "maximum", "exclusiveMaximum", "minimum",
        "exclusiveMinimum", "maxLength", "minLength", "pattern", "maxItems", "minItems",
        "uniqueItems", "maxContains", "minContains", "maxProperties", "minProperties",
        "required", "dependentRequired",
    }
)
_CONTENT_KEYWORDS = frozenset({"contentEncoding", "contentMediaType", "contentSchema"})
_FORMAT_KEYWORDS = frozenset({"format"})

_CATALOG: dict[VocabularyID, Vocabulary] = {
    vocabulary.id: vocabulary
    for vocabulary in (
        Vocabulary(
            id=V201909_CORE,
            keywords=frozenset(
                {
                    "$id", "$schema", "$anchor", "$ref", "$recursiveRef", "$recursiveAnchor",
                    "$vocabulary", "$comment", "$defs",
                }
            ),
        ),
        Vocabulary(
            id=V201909_APPLICATOR,
            keywords=frozenset(
                {
                    "additionalItems", "unevaluatedItems", "items", "contains",
                    "additionalProperties", "unevaluatedProperties", "properties",
                    "patternProperties", "dependentSchemas", "propertyNames", "if", "then",
                    "else", "allOf", "anyOf", "oneOf", "not",
                }
            ),
        ),
        Vocabulary(id=V201909_VALIDATION, keywords=_VALIDATION_KEYWORDS),
        Vocabulary(id=V201909_META_DATA, keywords=_META_DATA_KEYWORDS),
        Vocabulary(id=V201909_FORMAT, keywords=_FORMAT_KEYWORDS),
        Vocabulary(id=V201909_CONTENT, keywords=_CONTENT_KEYWORDS),
        Vocabulary(
            id=V202012_CORE,
            keywords=frozenset(
                {
                    "$id", "$schema", "$ref", "$anchor", "$dynamicRef", "$dynamicAnchor",
                    "$vocabulary", "$comment", "$defs",
                }
            ),
        ),
        Vocabulary(
            id=V202012_APPLICATOR,
            keywords=frozenset(
                {
                    "prefixItems", "items", "contains", "additionalProperties", "properties",
                    "patternProperties", "dependentSchemas", "propertyNames", "if", "then",
                    "else", "allOf", "anyOf", "oneOf", "not",
                }
            ),
        ),
        Vocabulary(
            id=V202012_UNEVALUATED,
            keywords=frozenset({"unevaluatedItems", "unevaluatedProperties"}),
        ),
        Vocabulary(id=V202012_VALIDATION, keywords=_VALIDATION_KEYWORDS),
        Vocabulary(id=V202012_META_DATA, keywords=_META_DATA_KEYWORDS),
        Vocabulary(id=V202012_FORMAT_ANNOTATION, keywords=_FORMAT_KEYWORDS),
        Vocabulary(id=V202012_FORMAT_ASSERTION, keywords=_FORMAT_KEYWORDS),
        Vocabulary(id=V202012_CONTENT, keywords=_CONTENT_KEYWORDS),
    )
}

DEFAULT_VOCABULARIES: Mapping[SpecVersion, Mapping[VocabularyID, bool]] = MappingProxyType(
    {
        SpecVersion.V201909: MappingProxyType(
            {
                V201909_CORE: True,
                V201909_APPLICATOR: True,
                V201909_VALIDATION: True,
                V201909_META_DATA: True,
                V201909_FORMAT: False,
                V201909_CONTENT: True,
            }
        ),
        SpecVersion.V202012: MappingProxyType(
            {
                V202012_CORE: True,
                V202012_APPLICATOR: True,
                V202012_UNEVALUATED: True,
                V202012_VALIDATION: True,
                V202012_META_DATA: True,
                V202012_FORMAT_ANNOTATION: True,
                V202012_CONTENT: True,
            }
        ),
    }
)

# Either format vocabulary enables the format keyword.
FORMAT_VOCABULARY_EQUIVALENTS: Mapping[VocabularyID, VocabularyID] = MappingProxyType(
    {
        V202012_FORMAT_ANNOTATION: V202012_FORMAT_ASSERTION,
        V202012_FORMAT_ASSERTION: V202012_FORMAT_ANNOTATION,
    }
)


def get_vocabulary(vocabulary_id: VocabularyID) -> Vocabulary | None:
    """Return the catalog entry for vocabulary_id, or None if unknown."""
    return _CATALOG.get(vocabulary_id)


def default_vocabularies(specification: SpecVersion | None) -> dict[VocabularyID, bool]:
    """Return a fresh copy of the default vocabulary toggles of a specification.

    Empty for specifications that predate vocabularies.
    """
    if specification is None:
        return {}
    return dict(DEFAULT_VOCABULARIES.get(specification, {}))


def resolve_vocabulary_keywords(
    keywords: Mapping[KeywordName, _V],
    requested: Mapping[VocabularyID, bool],
    specification: SpecVersion | None,
    uri: URI,
) -> dict[KeywordName, _V]:
    """Prune keywords contributed by vocabularies a derived meta-schema leaves out.

    Applies only to vocabulary-aware specifications and only when ``uri`` is
    not the specification's own id. Every vocabulary in the specification's
    default set that is not a key of ``requested`` has its keywords removed,
    unless its format equivalent is requested. A vocabulary counts as
    requested by presence, whatever its toggle value. Keywords are never
    added.

    Args:
        keywords: Keyword map to prune (not modified).
        requested: Vocabulary toggles declared by the meta-schema.
        specification: Specification the meta-schema is based on.
        uri: URI of the meta-schema being built.

    Returns:
        A new keyword map.
    """
    resolved = dict(keywords)
    if specification is None or not specification.supports_vocabularies():
        return resolved
    if uri == specification.id:
        return resolved

    current = set(requested)
    for vocabulary_id in DEFAULT_VOCABULARIES.get(specification, {}):
        if vocabulary_id in current:
            continue
        equivalent = FORMAT_VOCABULARY_EQUIVALENTS.get(vocabulary_id)
        if equivalent is not None and equivalent in current:
            continue
        vocabulary = get_vocabulary(vocabulary_id)
        if vocabulary is None:
            continue
        for keyword in vocabulary.keywords:
            resolved.pop(keyword, None)
    return resolved
