# Copyright 2026 Subgraph Schema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for schema loading and parsing."""

from pathlib import Path

import pytest
from graphql.language import DocumentNode

from subgraph_schema.compiler.loader import (
    SchemaError,
    SchemaLoadError,
    SchemaParseError,
    load_schema,
    parse_schema,
)


def test_load_schema(tmp_path: Path) -> None:
    schema = tmp_path / "schema.graphql"
    schema.write_text("type Token @entity {\n  id: ID!\n}\n", encoding="utf-8")
    assert load_schema(schema).startswith("type Token")


def test_load_missing_schema(tmp_path: Path) -> None:
    with pytest.raises(SchemaLoadError, match="Failed to load GraphQL schema") as exc_info:
        load_schema(tmp_path / "missing.graphql")
    assert isinstance(exc_info.value.__cause__, OSError)


def test_load_directory_fails(tmp_path: Path) -> None:
    with pytest.raises(SchemaLoadError):
        load_schema(tmp_path)


def test_parse_schema() -> None:
    document = parse_schema("type Token @entity {\n  id: ID!\n}\n")
    assert isinstance(document, DocumentNode)
    assert document.definitions[0].name.value == "Token"


def test_parse_empty_document_fails() -> None:
    with pytest.raises(SchemaParseError, match="Invalid GraphQL schema"):
        parse_schema("")


def test_parse_syntax_error() -> None:
    with pytest.raises(SchemaParseError, match="Invalid GraphQL schema") as exc_info:
        parse_schema("type Token @entity {")
    assert exc_info.value.__cause__ is not None


def test_parse_rejects_executable_definitions() -> None:
    with pytest.raises(SchemaParseError, match="executable definitions"):
        parse_schema("query { tokens { id } }")


def test_failure_kinds_are_distinct() -> None:
    assert issubclass(SchemaLoadError, SchemaError)
    assert issubclass(SchemaParseError, SchemaError)
    assert not issubclass(SchemaLoadError, SchemaParseError)
    assert not issubclass(SchemaParseError, SchemaLoadError)
