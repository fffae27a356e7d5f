"""Pytest fixtures for metaschema tests.

Fixtures (use with pytest):
    unknown_keywords: Fresh UnknownKeywordRegistry isolated from the process default.
    mock_keyword: MockKeyword named "x-mock".
    isolated_meta_schema: 2020-12 derivative that reports unknown keywords
        to the ``unknown_keywords`` fixture and knows ``mock_keyword``.
    validation_context: ValidationContext over ``isolated_meta_schema``.
"""

import pytest

from metaschema.config import ValidatorsConfig
from metaschema.context import ValidationContext
from metaschema.dialects import get_v202012
from metaschema.dispatch import UnknownKeywordRegistry
from metaschema.meta_schema import MetaSchema, builder
from metaschema.testing.mocks import MockKeyword

ISOLATED_META_SCHEMA_URI = "https://example.com/test/isolated"


@pytest.fixture
def unknown_keywords() -> UnknownKeywordRegistry:
    return UnknownKeywordRegistry()


@pytest.fixture
def mock_keyword() -> MockKeyword:
    return MockKeyword()


@pytest.fixture
def isolated_meta_schema(
    unknown_keywords: UnknownKeywordRegistry, mock_keyword: MockKeyword
) -> MetaSchema:
    return (
        builder(ISOLATED_META_SCHEMA_URI, get_v202012())
        .add_keyword(mock_keyword)
        .unknown_keywords(unknown_keywords)
        .build()
    )


@pytest.fixture
def validation_context(isolated_meta_schema: MetaSchema) -> ValidationContext:
    return ValidationContext(isolated_meta_schema, ValidatorsConfig())
