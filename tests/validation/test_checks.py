# Copyright 2026 Subgraph Schema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for schema-level validation: dispatch, collisions and entry points."""

from pathlib import Path

import pytest
from graphql import parse
from graphql.language import NameNode, OperationDefinitionNode, OperationType, SelectionSetNode

from subgraph_schema.compiler.loader import SchemaLoadError, SchemaParseError
from subgraph_schema.model.diagnostics import UNIT_LOCATION, Diagnostic
from subgraph_schema.validation.checks import (
    check_naming_collisions,
    validate_definition,
    validate_document,
    validate_schema,
)

# ###############
# Test Helpers
# ###############

_VALID_SCHEMA = """
type _Schema_ @import(types: ["Token"], from: { name: "tokens" })

enum Side {
  Buy
  Sell
}

type Trader @entity {
  id: ID!
  orders: [Order!]! @derivedFrom(field: "trader")
}

type Order @entity {
  id: ID!
  trader: Trader!
  side: Side!
  token: Token!
  amount: BigInt!
}
"""


def _validate(source: str) -> list[Diagnostic]:
    return validate_document(parse(source))


def _messages(diagnostics: list[Diagnostic]) -> list[str]:
    return [d.message for d in diagnostics]


# ###############
# Whole Schemas
# ###############


class TestValidateDocument:
    def test_valid_schema(self) -> None:
        diagnostics = _validate(_VALID_SCHEMA)
        assert diagnostics == [], f"Expected no diagnostics but got: {_messages(diagnostics)}"

    def test_all_findings_are_collected(self) -> None:
        messages = _messages(
            _validate("""
type Token {
  id: String!
  tags: [String]
}

type _Schema_ @import(types: ["Pool"])
""")
        )
        assert messages == [
            "Defined without @entity directive",
            "Field 'id': Entity IDs must be of type ID!",
            "Field 'tags':\nField has type [String] but\nmust have type [String!]\n\n"
            "Reason: Lists with null elements are not supported.",
            "@import argument 'from' must be specified",
        ]

    def test_diagnostics_follow_definition_order(self) -> None:
        diagnostics = _validate("""
type B {
  id: ID!
}

type A {
  id: ID!
}
""")
        assert [d.entity for d in diagnostics] == ["B", "A"]

    def test_collisions_come_last(self) -> None:
        diagnostics = _validate("""
type Token @entity {
  id: ID!
}

type Token {
  id: ID!
}
""")
        assert _messages(diagnostics) == [
            "Defined without @entity directive",
            "Type 'Token' is defined more than once",
        ]

    def test_type_extension_is_accepted_unchecked(self) -> None:
        assert _validate("extend type Token @import(types: 1) {\n  id: String\n}\n") == []

    def test_other_type_system_kinds_are_unchecked(self) -> None:
        assert (
            _validate("""
scalar Timestamp
union Anything = A | B
input Filter {
  id: ID
}
directive @entity on OBJECT
""")
            == []
        )

    def test_validation_is_repeatable(self) -> None:
        document = parse(_VALID_SCHEMA.replace("Token!", "Tokn!") + "\ntype Token @entity { id: ID! }\n")
        first = validate_document(document)
        second = validate_document(document)
        assert first == second
        assert first != []


class TestDispatch:
    def test_unregistered_definition_kind_raises(self) -> None:
        operation = OperationDefinitionNode(
            operation=OperationType.QUERY,
            name=NameNode(value="Q"),
            variable_definitions=[],
            directives=[],
            selection_set=SelectionSetNode(selections=[]),
        )
        with pytest.raises(TypeError, match="OperationDefinitionNode"):
            validate_definition([operation], operation)

    def test_reserved_type_is_not_checked_as_entity(self) -> None:
        document = parse('type _Schema_ @import(types: ["Token"], from: { name: "x" })')
        assert validate_definition(document.definitions, document.definitions[0]) == []


# ###############
# Naming Collisions
# ###############


class TestNamingCollisions:
    def test_no_collisions(self) -> None:
        assert check_naming_collisions(["A", "B"], ["C"]) == []

    def test_duplicate_local_type(self) -> None:
        diagnostics = check_naming_collisions(["Token", "Token"], [])
        assert diagnostics == [
            Diagnostic(location=UNIT_LOCATION, entity="Token", message="Type 'Token' is defined more than once")
        ]

    def test_three_occurrences_report_once(self) -> None:
        diagnostics = check_naming_collisions(["Token", "Token", "Token"], [])
        assert len(diagnostics) == 1

    def test_local_and_imported_collide(self) -> None:
        diagnostics = check_naming_collisions(["Token"], ["Pool", "Token"])
        assert [d.entity for d in diagnostics] == ["Token"]

    def test_each_colliding_name_reported_in_scan_order(self) -> None:
        diagnostics = check_naming_collisions(["B", "A", "B", "A", "B"], [])
        assert [d.entity for d in diagnostics] == ["B", "A"]

    def test_three_definitions_in_schema(self) -> None:
        messages = _messages(
            _validate("""
type Token @entity {
  id: ID!
}

type Token @entity {
  id: ID!
}

type Token @entity {
  id: ID!
}
""")
        )
        assert messages == ["Type 'Token' is defined more than once"]

    def test_alias_collides_with_local_type(self) -> None:
        messages = _messages(
            _validate("""
type _Schema_ @import(types: [{ name: "Token", as: "Pool" }], from: { name: "x" })

type Pool @entity {
  id: ID!
}
""")
        )
        assert messages == ["Type 'Pool' is defined more than once"]

    def test_enum_and_object_collide(self) -> None:
        messages = _messages(
            _validate("""
enum Kind {
  A
}

type Kind @entity {
  id: ID!
}
""")
        )
        assert messages == ["Type 'Kind' is defined more than once"]


# ###############
# validate_schema
# ###############


class TestValidateSchema:
    def test_valid_file(self, tmp_path: Path) -> None:
        schema = tmp_path / "schema.graphql"
        schema.write_text(_VALID_SCHEMA, encoding="utf-8")
        assert validate_schema(schema) == []

    def test_file_with_findings(self, tmp_path: Path) -> None:
        schema = tmp_path / "schema.graphql"
        schema.write_text("type Token @entity {\n  id: String!\n}\n", encoding="utf-8")
        messages = _messages(validate_schema(schema))
        assert messages == ["Field 'id': Entity IDs must be of type ID!"]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SchemaLoadError, match="Failed to load GraphQL schema"):
            validate_schema(tmp_path / "missing.graphql")

    def test_invalid_syntax(self, tmp_path: Path) -> None:
        schema = tmp_path / "schema.graphql"
        schema.write_text("type Token @entity {\n  id: \n", encoding="utf-8")
        with pytest.raises(SchemaParseError, match="Invalid GraphQL schema"):
            validate_schema(schema)
