# Copyright 2026 Subgraph Schema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Checks for entity types, their fields, and ``@derivedFrom`` back-references.

Each check returns a (possibly empty) list of diagnostics and never stops the
others from running: an entity missing both ``@entity`` and a valid ``id``
reports both problems.
"""

from __future__ import annotations

from collections.abc import Sequence

from graphql.language import (
    DefinitionNode,
    DirectiveNode,
    FieldDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    StringValueNode,
)

from subgraph_schema.compiler.ast_utils import find_directive, find_field, print_type, type_name
from subgraph_schema.compiler.suggestions import suggest_type
from subgraph_schema.compiler.symbols import (
    BUILTIN_SCALAR_TYPES,
    RESERVED_TYPE,
    entity_type_by_name,
    gather_imported_types,
    gather_local_types,
)
from subgraph_schema.model.diagnostics import Diagnostic, Location

# ###############
# Public Interface
# ###############


def check_entity_type(
    definitions: Sequence[DefinitionNode],
    definition: ObjectTypeDefinitionNode,
) -> list[Diagnostic]:
    """Run all checks for an object type that is not the reserved import type.

    Checks performed:

    1. The type carries an ``@entity`` directive.
    2. The type has an ``id`` field of type ``ID!``.
    3. Every field passes :func:`check_entity_field`.
    4. The type carries no ``@import`` directive.
    """
    diagnostics: list[Diagnostic] = []
    diagnostics.extend(_check_entity_directive(definition))
    diagnostics.extend(_check_entity_id(definition))
    available_types = _available_types(definitions)
    for field_def in definition.fields or ():
        diagnostics.extend(check_entity_field(definitions, definition, field_def, available_types))
    diagnostics.extend(_check_no_import_directive(definition))
    return diagnostics


def check_entity_field(
    definitions: Sequence[DefinitionNode],
    definition: ObjectTypeDefinitionNode,
    field_def: FieldDefinitionNode,
    available_types: set[str] | None = None,
) -> list[Diagnostic]:
    """Check a single field of an entity type.

    Args:
        definitions: All definitions of the schema, used to resolve types.
        definition: The entity type the field belongs to.
        field_def: The field to check.
        available_types: Names a field type may refer to. Computed from
            *definitions* when omitted.

    Returns:
        Diagnostics for list nullability, unknown types, field arguments and
        ``@derivedFrom`` directives, in that order.
    """
    if available_types is None:
        available_types = _available_types(definitions)

    diagnostics: list[Diagnostic] = []
    diagnostics.extend(_check_list_field_type(definition, field_def))
    diagnostics.extend(_check_inner_field_type(definition, field_def, available_types))
    diagnostics.extend(_check_field_arguments(definition, field_def))
    for directive in field_def.directives or ():
        if directive.name.value == "derivedFrom":
            diagnostics.extend(check_derived_from_directive(definitions, definition, field_def, directive))
    return diagnostics


def check_derived_from_directive(
    definitions: Sequence[DefinitionNode],
    definition: ObjectTypeDefinitionNode,
    field_def: FieldDefinitionNode,
    directive: DirectiveNode,
) -> list[Diagnostic]:
    """Check a ``@derivedFrom(field: "...")`` directive on an entity field.

    The field's type must resolve to an entity that has the named field, and
    that field must in turn point back to the type the directive is declared
    on. When the field's own type is unknown nothing is reported here, since
    the unknown type is already reported by the field type check.
    """
    arguments = directive.arguments or ()
    if len(arguments) != 1 or arguments[0].name.value != "field":
        return [
            _diagnostic(
                directive,
                definition,
                f"Field '{field_def.name.value}': @derivedFrom directive must have a 'field' argument",
            )
        ]

    value = arguments[0].value
    if not isinstance(value, StringValueNode):
        return [
            _diagnostic(
                directive,
                definition,
                f"Field '{field_def.name.value}': Value of the @derivedFrom 'field' argument must be a string",
            )
        ]

    target_entity = entity_type_by_name(definitions, type_name(field_def.type))
    if target_entity is None:
        return []

    target_name = target_entity.name.value
    backref_field = find_field(target_entity.fields, value.value)
    if backref_field is None:
        return [
            _diagnostic(
                directive,
                definition,
                f"Field '{field_def.name.value}': @derivedFrom field '{value.value}' "
                f"does not exist on type '{target_name}'",
            )
        ]

    origin = definition.name.value
    backref_entity = entity_type_by_name(definitions, type_name(backref_field.type))
    if backref_entity is None or backref_entity.name.value != origin:
        return [
            _diagnostic(
                directive,
                definition,
                f"Field '{field_def.name.value}': @derivedFrom field '{value.value}' "
                f"on type '{target_name}' must have the type '{origin}', '{origin}!' or '[{origin}!]!'",
            )
        ]

    return []


# ################
# Implementation
# ################


def _diagnostic(node, definition: ObjectTypeDefinitionNode, message: str) -> Diagnostic:
    return Diagnostic(location=Location.of(node), entity=definition.name.value, message=message)


def _available_types(definitions: Sequence[DefinitionNode]) -> set[str]:
    """Return every type name a field may refer to: built-ins, local and imported types."""
    return set(BUILTIN_SCALAR_TYPES) | set(gather_local_types(definitions)) | set(gather_imported_types(definitions))


def _check_entity_directive(definition: ObjectTypeDefinitionNode) -> list[Diagnostic]:
    if find_directive(definition.directives, "entity") is not None:
        return []
    return [_diagnostic(definition, definition, "Defined without @entity directive")]


def _check_entity_id(definition: ObjectTypeDefinitionNode) -> list[Diagnostic]:
    id_field = find_field(definition.fields, "id")
    if id_field is None:
        return [_diagnostic(definition, definition, "Missing field: id: ID!")]

    id_type = id_field.type
    if (
        isinstance(id_type, NonNullTypeNode)
        and isinstance(id_type.type, NamedTypeNode)
        and id_type.type.name.value == "ID"
    ):
        return []
    return [_diagnostic(id_field, definition, "Field 'id': Entity IDs must be of type ID!")]


def _check_list_field_type(
    definition: ObjectTypeDefinitionNode,
    field_def: FieldDefinitionNode,
) -> list[Diagnostic]:
    """Reject lists whose elements may be null: ``[T]`` and ``[T]!``."""
    field_type = field_def.type
    non_null = isinstance(field_type, NonNullTypeNode)
    list_type = field_type.type if non_null else field_type
    if not isinstance(list_type, ListTypeNode) or isinstance(list_type.type, NonNullTypeNode):
        return []

    element = print_type(list_type.type)
    suffix = "!" if non_null else ""
    return [
        _diagnostic(
            field_def,
            definition,
            f"Field '{field_def.name.value}':\n"
            f"Field has type [{element}]{suffix} but\n"
            f"must have type [{element}!]{suffix}\n"
            "\n"
            "Reason: Lists with null elements are not supported.",
        )
    ]


def _check_inner_field_type(
    definition: ObjectTypeDefinitionNode,
    field_def: FieldDefinitionNode,
    available_types: set[str],
) -> list[Diagnostic]:
    name = type_name(field_def.type)
    if name in available_types:
        return []

    message = f"Field '{field_def.name.value}': Unknown type '{name}'."
    suggestion = suggest_type(name)
    if suggestion is not None:
        message += f" Did you mean '{suggestion}'?"
    return [_diagnostic(field_def, definition, message)]


def _check_field_arguments(
    definition: ObjectTypeDefinitionNode,
    field_def: FieldDefinitionNode,
) -> list[Diagnostic]:
    if not field_def.arguments:
        return []
    return [_diagnostic(field_def, definition, f"Field '{field_def.name.value}': Field arguments are not supported.")]


def _check_no_import_directive(definition: ObjectTypeDefinitionNode) -> list[Diagnostic]:
    if find_directive(definition.directives, "import") is None:
        return []
    return [
        _diagnostic(
            definition.name,
            definition,
            f"@import directive only allowed on '{RESERVED_TYPE}' type",
        )
    ]
