"""Meta-schemas: the immutable keyword configuration of a schema dialect.

A MetaSchema fixes which keywords a dialect understands, how the reserved
``format`` keyword checks strings, which vocabularies the dialect declares
and which specification generation it follows. MetaSchemaBuilder stages
those pieces and ``build()`` freezes them.

Example:
    >>> from metaschema.dialects import get_v202012
    >>> from metaschema.formats import pattern
    >>>
    >>> custom = (
    ...     builder("https://example.com/dialect", get_v202012())
    ...     .add_format(pattern("ticket", r"^[A-Z]+-\\d+$"))
    ...     .build()
    ... )
    >>> str(custom)
    'https://example.com/dialect'
    >>> "ticket" in custom.format_keyword.formats
    True
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from metaschema.context import ValidationContext
from metaschema.dispatch import KeywordDispatcher, UnknownKeywordRegistry
from metaschema.errors import InvalidMetaSchemaError
from metaschema.formats.base import Format
from metaschema.keywords.base import JsonValidator, Keyword
from metaschema.keywords.format import FormatKeyword, FormatKeywordFactory
from metaschema.models.constants import (
    ANCHOR_KEYWORD,
    DEFAULT_ID_KEYWORD,
    DYNAMIC_ANCHOR_KEYWORD,
    FORMAT_KEYWORD,
)
from metaschema.models.enums import SpecVersion
from metaschema.models.paths import EvaluationPath, SchemaLocation
from metaschema.models.types import URI, FormatName, KeywordName, SchemaNode, VocabularyID
from metaschema.observability import get_logger
from metaschema.vocabularies import resolve_vocabulary_keywords

logger = get_logger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _read_text(node: SchemaNode, field_name: str) -> str | None:
    if not isinstance(node, Mapping):
        return None
    value = node.get(field_name)
    return value if isinstance(value, str) else None


@dataclass(frozen=True, eq=False, repr=False)
class MetaSchema:
    """Immutable keyword configuration of one dialect.

    Safe to share across threads: keyword and vocabulary maps are exposed
    as read-only views over private copies.

    Attributes:
        uri: Canonical URI of the meta-schema
        id_keyword: Keyword holding a schema's own identifier ("id" or "$id")
        keywords: Keyword name to Keyword capability
        vocabularies: Vocabulary id to enabled flag, as declared
        specification: Specification generation, or None if version-agnostic
    """

    uri: URI
    id_keyword: KeywordName
    keywords: Mapping[KeywordName, Keyword]
    vocabularies: Mapping[VocabularyID, bool] = field(default_factory=dict)
    specification: SpecVersion | None = None
    unknown_keywords: UnknownKeywordRegistry | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if _is_blank(self.uri):
            raise InvalidMetaSchemaError("uri must not be null or blank")
        if _is_blank(self.id_keyword):
            raise InvalidMetaSchemaError(
                "id_keyword must not be null or blank", details={"uri": self.uri}
            )
        if self.keywords is None:
            raise InvalidMetaSchemaError("keywords must not be null", details={"uri": self.uri})
        object.__setattr__(self, "keywords", MappingProxyType(dict(self.keywords)))
        object.__setattr__(self, "vocabularies", MappingProxyType(dict(self.vocabularies or {})))
        object.__setattr__(self, "_dispatcher", KeywordDispatcher(self, self.unknown_keywords))

    @property
    def format_keyword(self) -> FormatKeyword | None:
        keyword = self.keywords.get(FORMAT_KEYWORD)
        return keyword if isinstance(keyword, FormatKeyword) else None

    def read_id(self, schema_node: SchemaNode) -> str | None:
        """Return the schema's identifier under this dialect's id keyword."""
        return _read_text(schema_node, self.id_keyword)

    def read_anchor(self, schema_node: SchemaNode) -> str | None:
        if ANCHOR_KEYWORD in self.keywords:
            return _read_text(schema_node, ANCHOR_KEYWORD)
        return None

    def read_dynamic_anchor(self, schema_node: SchemaNode) -> str | None:
        if DYNAMIC_ANCHOR_KEYWORD in self.keywords:
            return _read_text(schema_node, DYNAMIC_ANCHOR_KEYWORD)
        return None

    def new_validator(
        self,
        context: ValidationContext,
        schema_location: SchemaLocation,
        evaluation_path: EvaluationPath,
        keyword: KeywordName,
        schema_node: SchemaNode,
        parent_schema: Any,
    ) -> JsonValidator | None:
        """Construct the validator for one keyword occurrence, or return None.

        See KeywordDispatcher.new_validator.
        """
        dispatcher: KeywordDispatcher = self._dispatcher  # type: ignore[attr-defined]
        return dispatcher.new_validator(
            context, schema_location, evaluation_path, keyword, schema_node, parent_schema
        )

    def __str__(self) -> str:
        return self.uri

    def __repr__(self) -> str:
        spec = self.specification.name if self.specification else None
        return f"MetaSchema(uri={self.uri!r}, specification={spec}, keywords={len(self.keywords)})"


class MetaSchemaBuilder:
    """Mutable staging area for a MetaSchema.

    Not thread-safe; confine a builder to one construction sequence. Each
    ``build()`` assembles fresh maps, so mutating the builder afterwards
    never changes a MetaSchema it already produced.

    Example:
        >>> from metaschema.keywords import NonValidationKeyword
        >>> meta_schema = (
        ...     MetaSchemaBuilder("https://example.com/minimal")
        ...     .id_keyword("$id")
        ...     .add_keyword(NonValidationKeyword("title"))
        ...     .build()
        ... )
        >>> sorted(meta_schema.keywords)
        ['format', 'title']
    """

    def __init__(self, uri: URI) -> None:
        self._uri = uri
        self._id_keyword: KeywordName = DEFAULT_ID_KEYWORD
        self._specification: SpecVersion | None = None
        self._keywords: dict[KeywordName, Keyword] = {}
        self._formats: dict[FormatName, Format] = {}
        self._vocabularies: dict[VocabularyID, bool] = {}
        self._format_keyword_factory: FormatKeywordFactory | None = None
        self._unknown_keywords: UnknownKeywordRegistry | None = None

    def id_keyword(self, id_keyword: KeywordName) -> MetaSchemaBuilder:
        self._id_keyword = id_keyword
        return self

    def specification(self, specification: SpecVersion | None) -> MetaSchemaBuilder:
        self._specification = specification
        return self

    def vocabularies(self, vocabularies: Mapping[VocabularyID, bool]) -> MetaSchemaBuilder:
        """Replace the declared vocabulary toggles."""
        self._vocabularies = dict(vocabularies)
        return self

    def vocabulary(self, vocabulary_id: VocabularyID, enabled: bool = True) -> MetaSchemaBuilder:
        self._vocabularies[vocabulary_id] = enabled
        return self

    def add_keyword(self, keyword: Keyword) -> MetaSchemaBuilder:
        """Register keyword under its own name, replacing any previous one.

        Raises:
            InvalidMetaSchemaError: If keyword claims the reserved ``format``
                name without being a FormatKeyword.
        """
        _check_format_override(keyword.value, keyword)
        self._keywords[keyword.value] = keyword
        return self

    def add_keywords(self, keywords: Iterable[Keyword]) -> MetaSchemaBuilder:
        for keyword in keywords:
            self.add_keyword(keyword)
        return self

    def keywords(
        self, customizer: Callable[[dict[KeywordName, Keyword]], None]
    ) -> MetaSchemaBuilder:
        """Let customizer edit the staged keyword map in place."""
        customizer(self._keywords)
        return self

    def add_format(self, format: Format) -> MetaSchemaBuilder:
        self._formats[format.name] = format
        return self

    def add_formats(self, formats: Iterable[Format]) -> MetaSchemaBuilder:
        for fmt in formats:
            self.add_format(fmt)
        return self

    def formats(
        self, customizer: Callable[[dict[FormatName, Format]], None]
    ) -> MetaSchemaBuilder:
        """Let customizer edit the staged format map in place."""
        customizer(self._formats)
        return self

    def format_keyword_factory(self, factory: FormatKeywordFactory | None) -> MetaSchemaBuilder:
        """Build the reserved format keyword with factory instead of FormatKeyword."""
        self._format_keyword_factory = factory
        return self

    def unknown_keywords(self, registry: UnknownKeywordRegistry | None) -> MetaSchemaBuilder:
        """Deduplicate unknown-keyword warnings through registry instead of the shared one."""
        self._unknown_keywords = registry
        return self

    def _create_keywords_map(self) -> dict[KeywordName, Keyword]:
        keywords: dict[KeywordName, Keyword] = {}
        for name, keyword in self._keywords.items():
            if name == FORMAT_KEYWORD:
                # Rebuilt below from the staged formats.
                _check_format_override(name, keyword)
                continue
            keywords[keyword.value] = keyword

        formats = dict(self._formats)
        if self._format_keyword_factory is not None:
            format_keyword = self._format_keyword_factory(formats)
            if not isinstance(format_keyword, FormatKeyword) or (
                format_keyword.value != FORMAT_KEYWORD
            ):
                raise InvalidMetaSchemaError(
                    "format_keyword_factory must return a FormatKeyword named 'format'",
                    details={"uri": self._uri, "returned": type(format_keyword).__name__},
                )
            logger.debug(
                "metaschema.builder.format_factory",
                uri=self._uri,
                format_keyword=type(format_keyword).__name__,
            )
        else:
            format_keyword = FormatKeyword(formats)
        keywords[format_keyword.value] = format_keyword
        return keywords

    def build(self) -> MetaSchema:
        """Freeze the staged configuration into a MetaSchema.

        Raises:
            InvalidMetaSchemaError: On a blank uri or id keyword, a direct
                override of the format keyword, or a factory that does not
                produce a FormatKeyword.
        """
        if _is_blank(self._uri):
            raise InvalidMetaSchemaError("uri must not be null or blank")
        keywords = self._create_keywords_map()
        if self._specification is not None:
            keywords = resolve_vocabulary_keywords(
                keywords, self._vocabularies, self._specification, self._uri
            )
        meta_schema = MetaSchema(
            uri=self._uri,
            id_keyword=self._id_keyword,
            keywords=keywords,
            vocabularies=dict(self._vocabularies),
            specification=self._specification,
            unknown_keywords=self._unknown_keywords,
        )
        logger.debug(
            "metaschema.built",
            uri=meta_schema.uri,
            specification=meta_schema.specification.name if meta_schema.specification else None,
            keyword_count=len(meta_schema.keywords),
            vocabulary_count=len(meta_schema.vocabularies),
        )
        return meta_schema


def _check_format_override(name: KeywordName, keyword: Keyword) -> None:
    if name == FORMAT_KEYWORD and not isinstance(keyword, FormatKeyword):
        raise InvalidMetaSchemaError(
            "overriding the keyword 'format' is not supported; "
            "use format_keyword_factory and extend FormatKeyword",
            details={"keyword": type(keyword).__name__},
        )


def builder(uri: URI, blueprint: MetaSchema | None = None) -> MetaSchemaBuilder:
    """Start a MetaSchemaBuilder, optionally pre-populated from blueprint.

    With a blueprint the builder copies its id keyword, keywords, formats,
    specification, vocabularies and unknown-keyword registry; only the URI
    differs.

    Args:
        uri: URI of the meta-schema to build.
        blueprint: Existing meta-schema to derive from.

    Raises:
        InvalidMetaSchemaError: If blueprint has no format keyword.
    """
    if blueprint is None:
        return MetaSchemaBuilder(uri)
    format_keyword = blueprint.format_keyword
    if format_keyword is None:
        raise InvalidMetaSchemaError(
            "the format keyword does not exist - blueprint is invalid",
            details={"blueprint": blueprint.uri},
        )
    non_format = [kw for name, kw in blueprint.keywords.items() if name != FORMAT_KEYWORD]
    return (
        MetaSchemaBuilder(uri)
        .id_keyword(blueprint.id_keyword)
        .add_keywords(non_format)
        .add_formats(format_keyword.formats.values())
        .specification(blueprint.specification)
        .vocabularies(dict(blueprint.vocabularies))
        .unknown_keywords(blueprint.unknown_keywords)
    )
