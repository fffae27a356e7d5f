"""Tests for MetaSchema and MetaSchemaBuilder."""

from __future__ import annotations

from collections.abc import Mapping

import pytest

from metaschema.dialects import get_v7, get_v201909, get_v202012
from metaschema.errors import InvalidMetaSchemaError
from metaschema.formats import COMMON_BUILTIN_FORMATS, Format, pattern
from metaschema.keywords import FormatKeyword, NonValidationKeyword, ValidatorKeyword
from metaschema.meta_schema import MetaSchema, MetaSchemaBuilder, builder
from metaschema.models.enums import SpecVersion
from metaschema.vocabularies import (
    V202012_CORE,
    V202012_FORMAT_ASSERTION,
    V202012_VALIDATION,
)

CUSTOM_URI = "https://example.com/dialect"


class CustomFormatKeyword(FormatKeyword):
    """FormatKeyword subclass installed through the factory hook."""


class TestBuild:
    def test_minimal_build_always_has_format_keyword(self) -> None:
        meta_schema = MetaSchemaBuilder(CUSTOM_URI).build()

        assert list(meta_schema.keywords) == ["format"]
        assert isinstance(meta_schema.keywords["format"], FormatKeyword)
        assert meta_schema.id_keyword == "id"
        assert meta_schema.specification is None
        assert meta_schema.vocabularies == {}

    def test_str_is_uri(self) -> None:
        meta_schema = MetaSchemaBuilder(CUSTOM_URI).build()

        assert str(meta_schema) == CUSTOM_URI
        assert meta_schema.uri == CUSTOM_URI
        assert CUSTOM_URI in repr(meta_schema)

    @pytest.mark.parametrize("uri", ["", "   ", None])
    def test_blank_uri_rejected(self, uri: str | None) -> None:
        with pytest.raises(InvalidMetaSchemaError) as exc_info:
            MetaSchemaBuilder(uri).build()  # type: ignore[arg-type]
        assert "uri" in exc_info.value.reason

    @pytest.mark.parametrize("id_keyword", ["", "  "])
    def test_blank_id_keyword_rejected(self, id_keyword: str) -> None:
        with pytest.raises(InvalidMetaSchemaError) as exc_info:
            MetaSchemaBuilder(CUSTOM_URI).id_keyword(id_keyword).build()
        assert "id_keyword" in exc_info.value.reason

    def test_null_keyword_map_rejected(self) -> None:
        with pytest.raises(InvalidMetaSchemaError) as exc_info:
            MetaSchema(uri=CUSTOM_URI, id_keyword="$id", keywords=None)  # type: ignore[arg-type]
        assert "keywords" in exc_info.value.reason

    def test_keywords_registered_by_own_name(self) -> None:
        meta_schema = (
            MetaSchemaBuilder(CUSTOM_URI)
            .add_keyword(ValidatorKeyword("type"))
            .add_keywords([NonValidationKeyword("title"), NonValidationKeyword("$comment")])
            .build()
        )

        assert set(meta_schema.keywords) == {"type", "title", "$comment", "format"}

    def test_later_registration_replaces(self) -> None:
        replacement = ValidatorKeyword("type")
        meta_schema = (
            MetaSchemaBuilder(CUSTOM_URI)
            .add_keyword(NonValidationKeyword("type"))
            .add_keyword(replacement)
            .build()
        )

        assert meta_schema.keywords["type"] is replacement

    def test_formats_reach_format_keyword(self) -> None:
        ticket = pattern("ticket", r"^[A-Z]+-\d+$")
        meta_schema = (
            MetaSchemaBuilder(CUSTOM_URI)
            .add_formats(COMMON_BUILTIN_FORMATS)
            .add_format(ticket)
            .build()
        )

        formats = meta_schema.format_keyword.formats
        assert formats["ticket"] is ticket
        assert "date-time" in formats

    def test_formats_customizer(self) -> None:
        def drop_convenience_formats(formats: dict[str, Format]) -> None:
            for name in ("alpha", "alphanumeric", "color"):
                formats.pop(name, None)

        meta_schema = (
            MetaSchemaBuilder(CUSTOM_URI)
            .add_formats(COMMON_BUILTIN_FORMATS)
            .formats(drop_convenience_formats)
            .build()
        )

        assert "alpha" not in meta_schema.format_keyword.formats
        assert "uuid" in meta_schema.format_keyword.formats

    def test_keywords_customizer(self) -> None:
        meta_schema = (
            MetaSchemaBuilder(CUSTOM_URI)
            .add_keyword(ValidatorKeyword("type"))
            .keywords(lambda keywords: keywords.pop("type"))
            .build()
        )

        assert "type" not in meta_schema.keywords

    def test_vocabulary_toggles(self) -> None:
        meta_schema = (
            MetaSchemaBuilder(CUSTOM_URI)
            .vocabularies({V202012_CORE: True})
            .vocabulary(V202012_VALIDATION)
            .vocabulary(V202012_FORMAT_ASSERTION, False)
            .build()
        )

        assert meta_schema.vocabularies == {
            V202012_CORE: True,
            V202012_VALIDATION: True,
            V202012_FORMAT_ASSERTION: False,
        }


class TestFormatSlot:
    def test_direct_format_override_rejected_on_insert(self) -> None:
        with pytest.raises(InvalidMetaSchemaError) as exc_info:
            MetaSchemaBuilder(CUSTOM_URI).add_keyword(ValidatorKeyword("format"))
        assert "format" in exc_info.value.reason

    def test_direct_format_override_rejected_at_build(self) -> None:
        staged = MetaSchemaBuilder(CUSTOM_URI).keywords(
            lambda keywords: keywords.update({"format": NonValidationKeyword("format")})
        )

        with pytest.raises(InvalidMetaSchemaError):
            staged.build()

    def test_staged_format_keyword_is_rebuilt_from_formats(self) -> None:
        staged_keyword = FormatKeyword([pattern("old", "o")])
        meta_schema = (
            MetaSchemaBuilder(CUSTOM_URI)
            .add_keyword(staged_keyword)
            .add_format(pattern("new", "n"))
            .build()
        )

        assert meta_schema.keywords["format"] is not staged_keyword
        assert set(meta_schema.format_keyword.formats) == {"new"}

    def test_custom_factory_receives_formats(self) -> None:
        received: list[Mapping[str, Format]] = []

        def factory(formats: Mapping[str, Format]) -> FormatKeyword:
            received.append(formats)
            return CustomFormatKeyword(formats)

        meta_schema = (
            MetaSchemaBuilder(CUSTOM_URI)
            .add_format(pattern("alpha", r"^[a-z]+$"))
            .format_keyword_factory(factory)
            .build()
        )

        assert isinstance(meta_schema.keywords["format"], CustomFormatKeyword)
        assert set(received[0]) == {"alpha"}

    def test_factory_must_return_format_keyword(self) -> None:
        staged = MetaSchemaBuilder(CUSTOM_URI).format_keyword_factory(
            lambda formats: NonValidationKeyword("format")  # type: ignore[arg-type,return-value]
        )

        with pytest.raises(InvalidMetaSchemaError):
            staged.build()


class TestVocabularyResolution:
    def test_core_and_validation_only_prunes_format(self) -> None:
        meta_schema = (
            builder(CUSTOM_URI, get_v202012())
            .vocabularies({V202012_CORE: True, V202012_VALIDATION: True})
            .build()
        )

        assert "format" not in meta_schema.keywords
        assert "properties" not in meta_schema.keywords
        assert "type" in meta_schema.keywords
        assert meta_schema.format_keyword is None

    def test_format_assertion_keeps_format(self) -> None:
        meta_schema = (
            builder(CUSTOM_URI, get_v202012())
            .vocabularies({V202012_CORE: True, V202012_FORMAT_ASSERTION: True})
            .build()
        )

        assert isinstance(meta_schema.keywords["format"], FormatKeyword)

    def test_canonical_uri_is_never_pruned(self) -> None:
        meta_schema = (
            MetaSchemaBuilder(SpecVersion.V202012.id)
            .specification(SpecVersion.V202012)
            .add_keyword(ValidatorKeyword("properties"))
            .build()
        )

        assert "properties" in meta_schema.keywords
        assert "format" in meta_schema.keywords

    def test_pre_vocabulary_specification_is_never_pruned(self) -> None:
        meta_schema = builder(CUSTOM_URI, get_v7()).vocabularies({}).build()

        assert set(meta_schema.keywords) == set(get_v7().keywords)


class TestBlueprint:
    @pytest.mark.parametrize("blueprint_getter", [get_v7, get_v201909, get_v202012])
    def test_derivation_preserves_everything_but_uri(self, blueprint_getter) -> None:
        blueprint = blueprint_getter()
        derived = builder(CUSTOM_URI, blueprint).build()

        assert derived.uri == CUSTOM_URI
        assert derived.id_keyword == blueprint.id_keyword
        assert set(derived.keywords) == set(blueprint.keywords)
        assert derived.format_keyword.formats == blueprint.format_keyword.formats
        assert derived.vocabularies == blueprint.vocabularies
        assert derived.specification is blueprint.specification

    def test_derivation_shares_non_format_keywords(self) -> None:
        blueprint = get_v202012()
        derived = builder(CUSTOM_URI, blueprint).build()

        assert derived.keywords["type"] is blueprint.keywords["type"]

    def test_blueprint_without_format_keyword_rejected(self) -> None:
        pruned = (
            builder(CUSTOM_URI, get_v202012())
            .vocabularies({V202012_CORE: True})
            .build()
        )

        with pytest.raises(InvalidMetaSchemaError) as exc_info:
            builder("https://example.com/other", pruned)
        assert "blueprint" in exc_info.value.reason

    def test_derived_builder_vocabularies_are_a_copy(self) -> None:
        blueprint = get_v202012()
        builder(CUSTOM_URI, blueprint).vocabulary("https://example.com/vocab/extra").build()

        assert "https://example.com/vocab/extra" not in blueprint.vocabularies


class TestImmutability:
    def test_mappings_are_read_only(self) -> None:
        meta_schema = get_v202012()

        with pytest.raises(TypeError):
            meta_schema.keywords["x"] = ValidatorKeyword("x")  # type: ignore[index]
        with pytest.raises(TypeError):
            meta_schema.vocabularies["x"] = True  # type: ignore[index]

    def test_attributes_are_frozen(self) -> None:
        meta_schema = get_v202012()

        with pytest.raises(AttributeError):
            meta_schema.uri = "https://example.com/other"  # type: ignore[misc]

    def test_builder_mutation_after_build_does_not_leak(self) -> None:
        staged = MetaSchemaBuilder(CUSTOM_URI).add_keyword(ValidatorKeyword("type"))
        first = staged.build()

        staged.add_keyword(ValidatorKeyword("enum")).add_format(pattern("alpha", "a"))
        second = staged.build()

        assert "enum" not in first.keywords
        assert "alpha" not in first.format_keyword.formats
        assert "enum" in second.keywords


class TestReaders:
    def test_read_id_uses_id_keyword(self) -> None:
        assert get_v202012().read_id({"$id": "https://example.com/a"}) == "https://example.com/a"
        assert get_v202012().read_id({"id": "https://example.com/a"}) is None

    def test_read_id_non_text(self) -> None:
        assert get_v202012().read_id({"$id": 5}) is None
        assert get_v202012().read_id(True) is None

    def test_read_anchor_requires_keyword(self) -> None:
        node = {"$anchor": "foo", "$dynamicAnchor": "bar"}

        assert get_v202012().read_anchor(node) == "foo"
        assert get_v202012().read_dynamic_anchor(node) == "bar"
        assert get_v7().read_anchor(node) is None
        assert get_v201909().read_dynamic_anchor(node) is None
