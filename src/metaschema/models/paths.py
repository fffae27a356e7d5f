"""Positional metadata passed through to constructed validators.

SchemaLocation identifies where a schema subtree lives (document IRI plus
a JSON pointer fragment); EvaluationPath records the keyword path taken
while compiling. Both are immutable; ``append`` returns a new instance.
"""

from __future__ import annotations

from pydantic import Field

from metaschema.models.base import MetaSchemaBaseModel


def _escape(token: str | int) -> str:
    return str(token).replace("~", "~0").replace("/", "~1")


def _render(tokens: tuple[str | int, ...]) -> str:
    return "".join(f"/{_escape(token)}" for token in tokens)


class EvaluationPath(MetaSchemaBaseModel):
    """Path of keywords and indices followed during schema compilation.

    Example:
        >>> str(EvaluationPath().append("properties").append("name"))
        '/properties/name'
    """

    tokens: tuple[str | int, ...] = Field(default=())

    def append(self, token: str | int) -> EvaluationPath:
        return EvaluationPath(tokens=(*self.tokens, token))

    def __str__(self) -> str:
        return _render(self.tokens)


class SchemaLocation(MetaSchemaBaseModel):
    """Absolute location of a schema subtree.

    Example:
        >>> loc = SchemaLocation(absolute_iri="https://example.com/s.json")
        >>> str(loc.append("properties").append("a/b"))
        'https://example.com/s.json#/properties/a~1b'
    """

    absolute_iri: str | None = Field(default=None)
    fragment: tuple[str | int, ...] = Field(default=())

    def append(self, token: str | int) -> SchemaLocation:
        return SchemaLocation(absolute_iri=self.absolute_iri, fragment=(*self.fragment, token))

    def __str__(self) -> str:
        return f"{self.absolute_iri or ''}#{_render(self.fragment)}"
