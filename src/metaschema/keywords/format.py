"""The reserved ``format`` keyword.

A meta-schema always carries exactly one FormatKeyword, built from the
builder's format map by the default constructor or by a custom
FormatKeywordFactory. Subclass FormatKeyword to change how format
validators are built; registering another keyword named ``format`` is
rejected.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable

from metaschema.errors import SchemaConstructionError
from metaschema.formats.base import Format
from metaschema.keywords.base import KeywordValidator, ValidationMessage
from metaschema.models.constants import FORMAT_KEYWORD
from metaschema.models.paths import EvaluationPath, SchemaLocation
from metaschema.models.types import FormatName, SchemaNode

if TYPE_CHECKING:
    from metaschema.context import ValidationContext


class FormatValidator(KeywordValidator):
    """Checks string instances against one named format.

    ``format`` is None when the schema names a format nobody registered;
    such schemas pass unless the context asks for strict formats.
    """

    def __init__(
        self,
        schema_location: SchemaLocation,
        evaluation_path: EvaluationPath,
        schema_node: SchemaNode,
        parent_schema: Any,
        context: ValidationContext | None,
        format: Format | None,
    ) -> None:
        super().__init__(
            FORMAT_KEYWORD, schema_location, evaluation_path, schema_node, parent_schema, context
        )
        self.format = format

    def validate(self, instance: Any) -> list[ValidationMessage]:
        if not isinstance(instance, str):
            return []
        if self.format is None:
            if self.context is not None and self.context.config.strict_formats:
                return [self.message("format.unknown", str(self.schema_node))]
            return []
        if self.format.matches(instance):
            return []
        return [self.message(self.format.message_key, instance, self.format.name)]


class FormatKeyword:
    """Keyword wrapping the registered formats.

    Example:
        >>> from metaschema.formats import COMMON_BUILTIN_FORMATS
        >>> keyword = FormatKeyword({f.name: f for f in COMMON_BUILTIN_FORMATS})
        >>> keyword.value
        'format'
        >>> "date-time" in keyword.formats
        True
    """

    def __init__(self, formats: Mapping[FormatName, Format] | Iterable[Format] = ()) -> None:
        if isinstance(formats, Mapping):
            staged = dict(formats)
        else:
            staged = {fmt.name: fmt for fmt in formats}
        self._formats: Mapping[FormatName, Format] = MappingProxyType(staged)

    @property
    def value(self) -> str:
        return FORMAT_KEYWORD

    @property
    def formats(self) -> Mapping[FormatName, Format]:
        """Read-only view of the formats this keyword checks, by name."""
        return self._formats

    def new_validator(
        self,
        schema_location: SchemaLocation,
        evaluation_path: EvaluationPath,
        schema_node: SchemaNode,
        parent_schema: Any,
        context: ValidationContext,
    ) -> FormatValidator:
        if not isinstance(schema_node, str):
            raise SchemaConstructionError(
                FORMAT_KEYWORD,
                message=f"'format' must be a string, got {type(schema_node).__name__}",
                details={"schema_location": str(schema_location)},
            )
        return FormatValidator(
            schema_location,
            evaluation_path,
            schema_node,
            parent_schema,
            context,
            self._formats.get(schema_node),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(formats={sorted(self._formats)})"


FormatKeywordFactory = Callable[[Mapping[FormatName, Format]], FormatKeyword]
"""Builds the reserved format keyword from the builder's current format map."""
