# Copyright 2026 Subgraph Schema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema-wide symbol tables: locally defined and imported type names."""

from __future__ import annotations

from collections.abc import Sequence

from graphql.language import (
    DefinitionNode,
    EnumTypeDefinitionNode,
    InterfaceTypeDefinitionNode,
    ListValueNode,
    ObjectTypeDefinitionNode,
    ObjectValueNode,
    StringValueNode,
    ValueNode,
)

from subgraph_schema.compiler.ast_utils import find_argument, find_object_field, has_directive

# ###############
# Public Interface
# ###############

# Scalars available to every schema without declaration.
BUILTIN_SCALAR_TYPES: tuple[str, ...] = (
    "Boolean",
    "Int",
    "BigDecimal",
    "String",
    "BigInt",
    "Bytes",
    "ID",
)

# By convention, imports are declared as directives on this otherwise empty type.
RESERVED_TYPE = "_Schema_"


def gather_local_types(definitions: Sequence[DefinitionNode]) -> list[str]:
    """Return the names of all object, enum and interface types, in definition order.

    Entity directives are not required; every such type is a usable name.
    """
    return [
        definition.name.value
        for definition in definitions
        if isinstance(definition, (ObjectTypeDefinitionNode, EnumTypeDefinitionNode, InterfaceTypeDefinitionNode))
    ]


def gather_imported_types(definitions: Sequence[DefinitionNode]) -> list[str]:
    """Return the visible names of all types imported via ``@import`` on ``_Schema_``.

    Each entry of an ``@import(types: [...])`` list is either a plain string,
    which is imported under its own name, or an object ``{ name, as }``,
    whose alias becomes the visible name. Entries of any other shape, and
    ``types`` arguments that are not lists, contribute nothing.
    """
    imported: list[str] = []
    for definition in definitions:
        if not isinstance(definition, ObjectTypeDefinitionNode) or definition.name.value != RESERVED_TYPE:
            continue
        for directive in definition.directives or ():
            if directive.name.value != "import":
                continue
            types = find_argument(directive.arguments, "types")
            if types is None or not isinstance(types.value, ListValueNode):
                continue
            for value in types.value.values:
                name = _imported_name(value)
                if name is not None:
                    imported.append(name)
    return imported


def entity_type_by_name(
    definitions: Sequence[DefinitionNode], name: str
) -> ObjectTypeDefinitionNode | InterfaceTypeDefinitionNode | None:
    """Return the object or interface type called *name* that carries ``@entity``."""
    for definition in definitions:
        if (
            isinstance(definition, (ObjectTypeDefinitionNode, InterfaceTypeDefinitionNode))
            and definition.name.value == name
            and has_directive(definition.directives, "entity")
        ):
            return definition
    return None


# ################
# Implementation
# ################


def _imported_name(value: ValueNode) -> str | None:
    if isinstance(value, StringValueNode):
        return value.value
    if isinstance(value, ObjectValueNode):
        alias = find_object_field(value.fields, "as")
        if alias is not None and isinstance(alias.value, StringValueNode):
            return alias.value.value
    return None
