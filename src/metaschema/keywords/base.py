"""Keyword capability and the validators keywords construct.

A Keyword turns one occurrence of its name in a schema into a validator.
The validator algorithms themselves live with the schema compiler; the
built-in keywords here bind names to factories, and callers plug real
validator classes in through ValidatorKeyword.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Protocol, runtime_checkable

from pydantic import Field

from metaschema.models.base import MetaSchemaBaseModel
from metaschema.models.paths import EvaluationPath, SchemaLocation
from metaschema.models.types import SchemaNode

if TYPE_CHECKING:
    from metaschema.context import ValidationContext


class ValidationMessage(MetaSchemaBaseModel):
    """One failed assertion reported by a validator."""

    keyword: str = Field(..., description="Keyword that produced the message")
    message_key: str = Field(..., description="Lookup key for localized message text")
    evaluation_path: str = Field(..., description="Evaluation path of the failing keyword")
    schema_location: str = Field(..., description="Schema location of the failing keyword")
    arguments: tuple[str, ...] = Field(default=(), description="Message template arguments")

    def __str__(self) -> str:
        return f"{self.evaluation_path}: {self.message_key} {list(self.arguments)}"


@runtime_checkable
class JsonValidator(Protocol):
    """Protocol for constructed validators."""

    keyword: str
    schema_location: SchemaLocation
    evaluation_path: EvaluationPath
    schema_node: SchemaNode

    def validate(self, instance: Any) -> list[ValidationMessage]: ...


@dataclass
class KeywordValidator:
    """Validator bound to one keyword occurrence.

    The base implementation records where it was constructed and reports no
    messages; subclasses override ``validate``.
    """

    keyword: str
    schema_location: SchemaLocation
    evaluation_path: EvaluationPath
    schema_node: SchemaNode
    parent_schema: Any = field(default=None, repr=False)
    context: ValidationContext | None = field(default=None, repr=False, compare=False)

    def validate(self, instance: Any) -> list[ValidationMessage]:
        return []

    def message(self, message_key: str, *arguments: str) -> ValidationMessage:
        return ValidationMessage(
            keyword=self.keyword,
            message_key=message_key,
            evaluation_path=str(self.evaluation_path),
            schema_location=str(self.schema_location),
            arguments=arguments,
        )


class AnnotationValidator(KeywordValidator):
    """Validator for keywords that only annotate (title, $comment, ...)."""


ValidatorFactory = Callable[..., JsonValidator]
"""Called as ``factory(keyword, schema_location, evaluation_path, schema_node, parent_schema, context)``."""


@runtime_checkable
class Keyword(Protocol):
    """Protocol for named validator-construction capabilities."""

    @property
    def value(self) -> str: ...

    def new_validator(
        self,
        schema_location: SchemaLocation,
        evaluation_path: EvaluationPath,
        schema_node: SchemaNode,
        parent_schema: Any,
        context: ValidationContext,
    ) -> JsonValidator: ...


@dataclass(frozen=True)
class ValidatorKeyword:
    """Keyword that delegates validator construction to a factory.

    Example:
        >>> class MaxLength(KeywordValidator):
        ...     def validate(self, instance):
        ...         if isinstance(instance, str) and len(instance) > self.schema_node:
        ...             return [self.message("maxLength", str(self.schema_node))]
        ...         return []
        >>> keyword = ValidatorKeyword("maxLength", MaxLength)
    """

    value: str
    factory: ValidatorFactory = field(default=KeywordValidator, compare=False)

    def new_validator(
        self,
        schema_location: SchemaLocation,
        evaluation_path: EvaluationPath,
        schema_node: SchemaNode,
        parent_schema: Any,
        context: ValidationContext,
    ) -> JsonValidator:
        return self.factory(
            self.value, schema_location, evaluation_path, schema_node, parent_schema, context
        )


@dataclass(frozen=True)
class NonValidationKeyword:
    """Keyword that is recognised but never asserts anything."""

    value: str

    def new_validator(
        self,
        schema_location: SchemaLocation,
        evaluation_path: EvaluationPath,
        schema_node: SchemaNode,
        parent_schema: Any,
        context: ValidationContext,
    ) -> JsonValidator:
        return AnnotationValidator(
            self.value, schema_location, evaluation_path, schema_node, parent_schema, context
        )
