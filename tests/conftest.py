"""Shared pytest fixtures for metaschema tests.

Fixtures from metaschema.testing.fixtures are loaded for every module;
the helpers below build paths and contexts used across test modules.
"""

from __future__ import annotations

import pytest

from metaschema.models.paths import EvaluationPath, SchemaLocation

pytest_plugins = ["metaschema.testing.fixtures"]

TEST_SCHEMA_IRI = "https://example.com/schemas/person.json"


@pytest.fixture
def schema_location() -> SchemaLocation:
    return SchemaLocation(absolute_iri=TEST_SCHEMA_IRI).append("properties").append("name")


@pytest.fixture
def evaluation_path() -> EvaluationPath:
    return EvaluationPath().append("properties").append("name")
