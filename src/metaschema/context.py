"""Compilation context handed to keywords when they construct validators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from metaschema.config import ValidatorsConfig
from metaschema.models.paths import EvaluationPath, SchemaLocation
from metaschema.models.types import KeywordName, SchemaNode

if TYPE_CHECKING:
    from metaschema.keywords.base import JsonValidator
    from metaschema.meta_schema import MetaSchema


@dataclass(frozen=True)
class ValidationContext:
    """The active meta-schema and configuration of one schema compilation.

    Attributes:
        meta_schema: Meta-schema the schema being compiled is written against
        config: Validator toggles consulted during dispatch
    """

    meta_schema: MetaSchema
    config: ValidatorsConfig = field(default_factory=ValidatorsConfig)

    def new_validator(
        self,
        schema_location: SchemaLocation,
        evaluation_path: EvaluationPath,
        keyword: KeywordName,
        schema_node: SchemaNode,
        parent_schema: Any,
    ) -> JsonValidator | None:
        """Shorthand for ``context.meta_schema.new_validator(context, ...)``."""
        return self.meta_schema.new_validator(
            self, schema_location, evaluation_path, keyword, schema_node, parent_schema
        )
