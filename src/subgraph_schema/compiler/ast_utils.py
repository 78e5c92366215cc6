# Copyright 2026 Subgraph Schema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Read-only helpers for navigating parsed GraphQL type definitions."""

from __future__ import annotations

from collections.abc import Iterable

from graphql.language import (
    ArgumentNode,
    DirectiveNode,
    FieldDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectFieldNode,
    TypeNode,
    print_ast,
)

# ###############
# Public Interface
# ###############


def unwrap_type(type_node: TypeNode) -> NamedTypeNode:
    """Return the innermost named type, stripping any list and non-null wrappers."""
    if isinstance(type_node, (ListTypeNode, NonNullTypeNode)):
        return unwrap_type(type_node.type)
    return type_node  # type: ignore[return-value]


def type_name(type_node: TypeNode) -> str:
    """Return the name of the innermost named type."""
    return unwrap_type(type_node).name.value


def print_type(type_node: TypeNode) -> str:
    """Render a type expression back to SDL, e.g. ``[String!]!``."""
    return print_ast(type_node)


def find_field(fields: Iterable[FieldDefinitionNode] | None, name: str) -> FieldDefinitionNode | None:
    """Return the first field called *name*, or None."""
    return _find_by_name(fields, name)


def find_directive(directives: Iterable[DirectiveNode] | None, name: str) -> DirectiveNode | None:
    """Return the first directive called *name*, or None."""
    return _find_by_name(directives, name)


def has_directive(directives: Iterable[DirectiveNode] | None, name: str) -> bool:
    """Return True if a directive called *name* is present."""
    return find_directive(directives, name) is not None


def find_argument(arguments: Iterable[ArgumentNode] | None, name: str) -> ArgumentNode | None:
    """Return the first argument called *name*, or None."""
    return _find_by_name(arguments, name)


def find_object_field(fields: Iterable[ObjectFieldNode] | None, name: str) -> ObjectFieldNode | None:
    """Return the first field of an object literal called *name*, or None."""
    return _find_by_name(fields, name)


# ################
# Implementation
# ################


def _find_by_name(nodes, name):
    for node in nodes or ():
        if node.name.value == name:
            return node
    return None
