"""Tests for metaschema.testing fixtures."""

from metaschema.context import ValidationContext
from metaschema.dialects import get_v202012
from metaschema.dispatch import UnknownKeywordRegistry
from metaschema.meta_schema import MetaSchema
from metaschema.testing import MockKeyword
from metaschema.testing.fixtures import ISOLATED_META_SCHEMA_URI


class TestIsolatedMetaSchemaFixture:
    def test_derives_from_2020_12(self, isolated_meta_schema: MetaSchema) -> None:
        assert isolated_meta_schema.uri == ISOLATED_META_SCHEMA_URI
        assert isolated_meta_schema.specification is get_v202012().specification
        assert set(get_v202012().keywords) < set(isolated_meta_schema.keywords)

    def test_knows_mock_keyword(
        self, isolated_meta_schema: MetaSchema, mock_keyword: MockKeyword
    ) -> None:
        assert isolated_meta_schema.keywords[mock_keyword.value] is mock_keyword

    def test_uses_isolated_registry(
        self, isolated_meta_schema: MetaSchema, unknown_keywords: UnknownKeywordRegistry
    ) -> None:
        assert isolated_meta_schema.unknown_keywords is unknown_keywords
        assert len(unknown_keywords) == 0

    def test_validation_context(
        self, validation_context: ValidationContext, isolated_meta_schema: MetaSchema
    ) -> None:
        assert validation_context.meta_schema is isolated_meta_schema
        assert validation_context.config.custom_message_supported is True
