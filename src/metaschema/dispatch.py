"""Validator dispatch for schema compilation.

KeywordDispatcher resolves a keyword found in a schema node to a validator
through its meta-schema's keyword map, or signals with None that the
keyword is not a validation keyword.

Thread Safety:
    A dispatcher only reads its immutable meta-schema. The single shared
    mutable state is the UnknownKeywordRegistry, which guards its set with
    a lock so each unknown keyword is reported once.

Example:
    >>> from metaschema.context import ValidationContext
    >>> from metaschema.dialects import get_v202012
    >>> from metaschema.models.paths import EvaluationPath, SchemaLocation
    >>>
    >>> meta_schema = get_v202012()
    >>> dispatcher = KeywordDispatcher(meta_schema, UnknownKeywordRegistry())
    >>> context = ValidationContext(meta_schema)
    >>> validator = dispatcher.new_validator(
    ...     context, SchemaLocation(), EvaluationPath(), "format", "date", {"format": "date"}
    ... )
    >>> validator.validate("2024-02-30")[0].message_key
    'format.date'
"""

from __future__ import annotations

from threading import Lock
from typing import TYPE_CHECKING, Any

from metaschema.errors import SchemaConstructionError
from metaschema.keywords.base import JsonValidator
from metaschema.keywords.builtin import DISCRIMINATOR
from metaschema.models.constants import DISCRIMINATOR_KEYWORD, MESSAGE_KEYWORD
from metaschema.models.paths import EvaluationPath, SchemaLocation
from metaschema.models.types import KeywordName, SchemaNode
from metaschema.observability import get_logger

if TYPE_CHECKING:
    from metaschema.context import ValidationContext
    from metaschema.meta_schema import MetaSchema

logger = get_logger(__name__)


class UnknownKeywordRegistry:
    """Grow-only set of keyword names already reported as unknown.

    Example:
        >>> seen = UnknownKeywordRegistry()
        >>> seen.add("x-internal"), seen.add("x-internal")
        (True, False)
    """

    def __init__(self) -> None:
        self._seen: set[KeywordName] = set()
        self._lock = Lock()

    def add(self, keyword: KeywordName) -> bool:
        """Record keyword; return True only for the first caller to record it."""
        with self._lock:
            if keyword in self._seen:
                return False
            self._seen.add(keyword)
            return True

    def __contains__(self, keyword: object) -> bool:
        with self._lock:
            return keyword in self._seen

    def __len__(self) -> int:
        with self._lock:
            return len(self._seen)


# Shared by every meta-schema that is not given its own registry.
DEFAULT_UNKNOWN_KEYWORDS = UnknownKeywordRegistry()


def _chained_construction_error(exc: BaseException) -> SchemaConstructionError | None:
    seen: set[int] = set()
    current = exc.__cause__ or exc.__context__
    while current is not None and id(current) not in seen:
        if isinstance(current, SchemaConstructionError):
            return current
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return None


class KeywordDispatcher:
    """Turns (keyword, schema subtree) pairs into validators for one meta-schema.

    Attributes:
        meta_schema: Meta-schema whose keyword map is consulted
        unknown_keywords: Registry deduplicating unknown-keyword warnings
    """

    def __init__(
        self,
        meta_schema: MetaSchema,
        unknown_keywords: UnknownKeywordRegistry | None = None,
    ) -> None:
        self.meta_schema = meta_schema
        self.unknown_keywords = (
            unknown_keywords if unknown_keywords is not None else DEFAULT_UNKNOWN_KEYWORDS
        )

    def new_validator(
        self,
        context: ValidationContext,
        schema_location: SchemaLocation,
        evaluation_path: EvaluationPath,
        keyword: KeywordName,
        schema_node: SchemaNode,
        parent_schema: Any,
    ) -> JsonValidator | None:
        """Construct the validator for one keyword occurrence.

        Args:
            context: Compilation context (meta-schema and config toggles).
            schema_location: Location of the keyword's value.
            evaluation_path: Evaluation path that reached the keyword.
            keyword: Keyword name found in the schema node.
            schema_node: The keyword's value.
            parent_schema: The schema object that contains the keyword.

        Returns:
            The constructed validator, or None when the keyword is not a
            validation keyword (custom message, unknown keyword).

        Raises:
            SchemaConstructionError: If the keyword fails to construct its
                validator; foreign exceptions are wrapped with their cause.
        """
        kw = self.meta_schema.keywords.get(keyword)
        if kw is None:
            if keyword == MESSAGE_KEYWORD and context.config.custom_message_supported:
                return None
            if keyword == DISCRIMINATOR_KEYWORD and context.config.openapi3_style_discriminators:
                kw = DISCRIMINATOR
            else:
                if self.unknown_keywords.add(keyword):
                    logger.warning(
                        "metaschema.keyword.unknown",
                        keyword=keyword,
                        meta_schema=self.meta_schema.uri,
                        hint=(
                            "define your own meta-schema; if the keyword is irrelevant "
                            "for validation, register a NonValidationKeyword"
                        ),
                    )
                return None

        try:
            return kw.new_validator(
                schema_location, evaluation_path, schema_node, parent_schema, context
            )
        except SchemaConstructionError:
            raise
        except Exception as exc:
            inner = _chained_construction_error(exc)
            if inner is not None:
                logger.error(
                    "metaschema.validator.construction_error",
                    keyword=keyword,
                    error=inner.message,
                    wrapper=type(exc).__name__,
                )
                raise inner
            logger.warning(
                "metaschema.validator.load_failed",
                keyword=keyword,
                schema_location=str(schema_location),
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise SchemaConstructionError(keyword, cause=exc) from exc
