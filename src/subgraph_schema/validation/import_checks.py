# Copyright 2026 Subgraph Schema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Checks for the reserved ``_Schema_`` type and its ``@import`` directives.

Accepted import shapes::

    type _Schema_
      @import(types: ["Token", { name: "Pool", as: "UniswapPool" }], from: { name: "uniswap" })
      @import(types: ["Account"], from: { id: "Qm..." })
"""

from __future__ import annotations

from graphql.language import (
    ArgumentNode,
    DirectiveNode,
    ListValueNode,
    ObjectTypeDefinitionNode,
    ObjectValueNode,
    StringValueNode,
    ValueNode,
)

from subgraph_schema.compiler.ast_utils import find_argument
from subgraph_schema.compiler.symbols import RESERVED_TYPE
from subgraph_schema.model.diagnostics import Diagnostic, Location

# ###############
# Public Interface
# ###############


def check_schema_type(definition: ObjectTypeDefinitionNode) -> list[Diagnostic]:
    """Run all checks for the reserved ``_Schema_`` type.

    The type must declare no fields and may only carry ``@import``
    directives, each of which must be well-formed.
    """
    diagnostics: list[Diagnostic] = []
    diagnostics.extend(_check_type_has_no_fields(definition))
    for directive in definition.directives or ():
        if directive.name.value != "import":
            diagnostics.append(
                _diagnostic(
                    directive.name,
                    definition,
                    f"{RESERVED_TYPE} directives only allows @import directives",
                )
            )
            continue
        diagnostics.extend(check_import_directive(definition, directive))
    return diagnostics


def check_import_directive(definition: ObjectTypeDefinitionNode, directive: DirectiveNode) -> list[Diagnostic]:
    """Check the ``types`` and ``from`` arguments of one ``@import`` directive."""
    diagnostics: list[Diagnostic] = []

    types = find_argument(directive.arguments, "types")
    if types is None:
        diagnostics.append(_diagnostic(directive.name, definition, "@import argument 'types' must be specified"))
    else:
        diagnostics.extend(_check_types_argument(definition, directive, types))

    source = find_argument(directive.arguments, "from")
    if source is None:
        diagnostics.append(_diagnostic(directive.name, definition, "@import argument 'from' must be specified"))
    else:
        diagnostics.extend(_check_from_argument(definition, directive, source))

    return diagnostics


# ################
# Implementation
# ################

_IMPORT_SHAPE_MESSAGE = 'Import must be one of "Name" or { name: "Name", as: "Alias" }'
_IMPORT_FIELDS = ("name", "as")
_FROM_FIELDS = ("name", "id")


def _diagnostic(node, definition: ObjectTypeDefinitionNode, message: str) -> Diagnostic:
    return Diagnostic(location=Location.of(node), entity=definition.name.value, message=message)


def _check_type_has_no_fields(definition: ObjectTypeDefinitionNode) -> list[Diagnostic]:
    if not definition.fields:
        return []
    return [
        _diagnostic(
            definition.name,
            definition,
            f"{definition.name.value} type is not allowed any fields by convention",
        )
    ]


def _check_types_argument(
    definition: ObjectTypeDefinitionNode,
    directive: DirectiveNode,
    argument: ArgumentNode,
) -> list[Diagnostic]:
    if not isinstance(argument.value, ListValueNode):
        return [_diagnostic(directive.name, definition, "@import argument 'types' must be an list")]

    diagnostics: list[Diagnostic] = []
    for value in argument.value.values:
        diagnostics.extend(_check_imported_type(definition, directive, value))
    return diagnostics


def _check_imported_type(
    definition: ObjectTypeDefinitionNode,
    directive: DirectiveNode,
    value: ValueNode,
) -> list[Diagnostic]:
    """Check one entry of the ``types`` list: ``"Name"`` or ``{ name: "Name", as: "Alias" }``."""
    if isinstance(value, StringValueNode):
        return []
    if not isinstance(value, ObjectValueNode) or len(value.fields) != 2:
        return [_diagnostic(directive.name, definition, _IMPORT_SHAPE_MESSAGE)]

    diagnostics: list[Diagnostic] = []
    for object_field in value.fields:
        if object_field.name.value not in _IMPORT_FIELDS:
            diagnostics.append(
                _diagnostic(
                    directive.name,
                    definition,
                    f"@import field '{object_field.name.value}' invalid, may only be one of: [name, as]",
                )
            )
        elif not isinstance(object_field.value, StringValueNode):
            diagnostics.append(_diagnostic(directive.name, definition, "@import fields [name, as] must be strings"))
    return diagnostics


def _check_from_argument(
    definition: ObjectTypeDefinitionNode,
    directive: DirectiveNode,
    argument: ArgumentNode,
) -> list[Diagnostic]:
    """Check the import source: ``{ name: "Name" }`` or ``{ id: "ID" }``."""
    if not isinstance(argument.value, ObjectValueNode):
        return [_diagnostic(directive.name, definition, "@import argument 'from' must be an object")]

    if len(argument.value.fields) != 1:
        return [_diagnostic(directive.name, definition, "@import argument 'from' must have an 'id' or 'name' field")]

    diagnostics: list[Diagnostic] = []
    for object_field in argument.value.fields:
        if object_field.name.value not in _FROM_FIELDS:
            diagnostics.append(
                _diagnostic(
                    object_field.name,
                    definition,
                    "@import argument 'from' must be one of { name: \"Name\" } or { id: \"ID\" }",
                )
            )
        elif not isinstance(object_field.value, StringValueNode):
            diagnostics.append(
                _diagnostic(
                    object_field.name,
                    definition,
                    "@import argument 'from' must be one of { name: \"Name\" } or { id: \"ID\" } with string values",
                )
            )
    return diagnostics
