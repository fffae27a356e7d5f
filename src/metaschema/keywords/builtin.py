"""Built-in keyword table.

Each entry names a keyword and the range of specification generations
that define it. ``validator_keywords`` and ``non_validation_keywords``
select the entries active for one generation; the standard dialects are
assembled from them.
"""

from __future__ import annotations

from dataclasses import dataclass

from metaschema.keywords.base import NonValidationKeyword, ValidatorKeyword
from metaschema.models.constants import DISCRIMINATOR_KEYWORD
from metaschema.models.enums import SpecVersion


@dataclass(frozen=True)
class BuiltinKeyword:
    """A keyword name and the generations [since, until] that define it."""

    name: str
    since: SpecVersion = SpecVersion.V4
    until: SpecVersion | None = None

    def applies_to(self, specification: SpecVersion) -> bool:
        if specification < self.since:
            return False
        return self.until is None or specification <= self.until


_V4 = SpecVersion.V4
_V6 = SpecVersion.V6
_V7 = SpecVersion.V7
_V201909 = SpecVersion.V201909
_V202012 = SpecVersion.V202012

BUILTIN_KEYWORDS: tuple[BuiltinKeyword, ...] = (
    BuiltinKeyword("$ref"),
    BuiltinKeyword("additionalItems", until=_V201909),
    BuiltinKeyword("additionalProperties"),
    BuiltinKeyword("allOf"),
    BuiltinKeyword("anyOf"),
    BuiltinKeyword("const", since=_V6),
    BuiltinKeyword("contains", since=_V6),
    BuiltinKeyword("contentEncoding", since=_V7),
    BuiltinKeyword("contentMediaType", since=_V7),
    BuiltinKeyword("dependencies", until=_V7),
    BuiltinKeyword("dependentRequired", since=_V201909),
    BuiltinKeyword("dependentSchemas", since=_V201909),
    BuiltinKeyword("$dynamicRef", since=_V202012),
    BuiltinKeyword("enum"),
    BuiltinKeyword("exclusiveMaximum", since=_V6),
    BuiltinKeyword("exclusiveMinimum", since=_V6),
    BuiltinKeyword("if", since=_V7),
    BuiltinKeyword("items"),
    BuiltinKeyword("maxContains", since=_V201909),
    BuiltinKeyword("maxItems"),
    BuiltinKeyword("maxLength"),
    BuiltinKeyword("maxProperties"),
    BuiltinKeyword("maximum"),
    BuiltinKeyword("minContains", since=_V201909),
    BuiltinKeyword("minItems"),
    BuiltinKeyword("minLength"),
    BuiltinKeyword("minProperties"),
    BuiltinKeyword("minimum"),
    BuiltinKeyword("multipleOf"),
    BuiltinKeyword("not"),
    BuiltinKeyword("oneOf"),
    BuiltinKeyword("pattern"),
    BuiltinKeyword("patternProperties"),
    BuiltinKeyword("prefixItems", since=_V202012),
    BuiltinKeyword("properties"),
    BuiltinKeyword("propertyNames", since=_V6),
    BuiltinKeyword("readOnly", since=_V7),
    BuiltinKeyword("$recursiveRef", since=_V201909, until=_V201909),
    BuiltinKeyword("required"),
    BuiltinKeyword("type"),
    BuiltinKeyword("unevaluatedItems", since=_V201909),
    BuiltinKeyword("unevaluatedProperties", since=_V201909),
    BuiltinKeyword("uniqueItems"),
    BuiltinKeyword("writeOnly", since=_V7),
)

# Recognised keywords that never assert
BUILTIN_NON_VALIDATION_KEYWORDS: tuple[BuiltinKeyword, ...] = (
    BuiltinKeyword("$schema"),
    BuiltinKeyword("id", until=_V4),
    BuiltinKeyword("$id", since=_V6),
    BuiltinKeyword("title"),
    BuiltinKeyword("description"),
    BuiltinKeyword("default"),
    BuiltinKeyword("definitions"),
    BuiltinKeyword("examples", since=_V6),
    BuiltinKeyword("$comment", since=_V7),
    BuiltinKeyword("then", since=_V7),
    BuiltinKeyword("else", since=_V7),
    BuiltinKeyword("$defs", since=_V201909),
    BuiltinKeyword("$anchor", since=_V201909),
    BuiltinKeyword("$vocabulary", since=_V201909),
    BuiltinKeyword("deprecated", since=_V201909),
    BuiltinKeyword("contentSchema", since=_V201909),
    BuiltinKeyword("$recursiveAnchor", since=_V201909, until=_V201909),
    BuiltinKeyword("$dynamicAnchor", since=_V202012),
)

DISCRIMINATOR = ValidatorKeyword(DISCRIMINATOR_KEYWORD)
"""OpenAPI 3 discriminator, dispatched outside the registry when enabled."""


def validator_keywords(specification: SpecVersion) -> list[ValidatorKeyword]:
    return [
        ValidatorKeyword(entry.name)
        for entry in BUILTIN_KEYWORDS
        if entry.applies_to(specification)
    ]


def non_validation_keywords(specification: SpecVersion) -> list[NonValidationKeyword]:
    return [
        NonValidationKeyword(entry.name)
        for entry in BUILTIN_NON_VALIDATION_KEYWORDS
        if entry.applies_to(specification)
    ]
