"""Keyword capabilities: names bound to validator construction."""

from metaschema.keywords.base import (
    AnnotationValidator,
    JsonValidator,
    Keyword,
    KeywordValidator,
    NonValidationKeyword,
    ValidationMessage,
    ValidatorFactory,
    ValidatorKeyword,
)
from metaschema.keywords.builtin import (
    BUILTIN_KEYWORDS,
    BUILTIN_NON_VALIDATION_KEYWORDS,
    DISCRIMINATOR,
    BuiltinKeyword,
    non_validation_keywords,
    validator_keywords,
)
from metaschema.keywords.format import FormatKeyword, FormatKeywordFactory, FormatValidator

__all__ = [
    "AnnotationValidator",
    "BUILTIN_KEYWORDS",
    "BUILTIN_NON_VALIDATION_KEYWORDS",
    "BuiltinKeyword",
    "DISCRIMINATOR",
    "FormatKeyword",
    "FormatKeywordFactory",
    "FormatValidator",
    "JsonValidator",
    "Keyword",
    "KeywordValidator",
    "NonValidationKeyword",
    "ValidationMessage",
    "ValidatorFactory",
    "ValidatorKeyword",
    "non_validation_keywords",
    "validator_keywords",
]
