# Copyright 2026 Subgraph Schema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry points for validating a subgraph schema.

Diagnostics are ordered by definition, then field, then directive, with the
schema-wide naming collision pass appended last. Validation is a pure
function of the parsed document: running it twice yields equal results.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from graphql.language import (
    DefinitionNode,
    DirectiveDefinitionNode,
    DocumentNode,
    EnumTypeDefinitionNode,
    EnumTypeExtensionNode,
    InputObjectTypeDefinitionNode,
    InputObjectTypeExtensionNode,
    InterfaceTypeDefinitionNode,
    InterfaceTypeExtensionNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    ScalarTypeDefinitionNode,
    ScalarTypeExtensionNode,
    SchemaDefinitionNode,
    SchemaExtensionNode,
    UnionTypeDefinitionNode,
    UnionTypeExtensionNode,
)

from subgraph_schema.compiler.loader import load_schema, parse_schema
from subgraph_schema.compiler.symbols import RESERVED_TYPE, gather_imported_types, gather_local_types
from subgraph_schema.model.diagnostics import UNIT_LOCATION, Diagnostic
from subgraph_schema.validation.entity_checks import check_entity_type
from subgraph_schema.validation.import_checks import check_schema_type

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def validate_schema(path: Path) -> list[Diagnostic]:
    """Load, parse and validate the schema file at *path*.

    Returns:
        All diagnostics found. An empty list means the schema is valid.

    Raises:
        SchemaLoadError: If the file cannot be read.
        SchemaParseError: If the file is not a valid GraphQL schema document.
    """
    document = parse_schema(load_schema(path))
    return validate_document(document)


def validate_document(document: DocumentNode) -> list[Diagnostic]:
    """Validate an already parsed schema document."""
    return validate_definitions(document.definitions)


def validate_definitions(definitions: Sequence[DefinitionNode]) -> list[Diagnostic]:
    """Validate a sequence of schema definitions.

    Checks performed:

    1. Per-definition rules, dispatched on the definition kind: entity types,
       the reserved ``_Schema_`` import type, and type extensions.
    2. Naming collisions across all local and imported type names.
    """
    diagnostics: list[Diagnostic] = []
    for definition in definitions:
        diagnostics.extend(validate_definition(definitions, definition))
    diagnostics.extend(
        check_naming_collisions(
            gather_local_types(definitions),
            gather_imported_types(definitions),
        )
    )
    logger.debug("Validated %d definitions: %d diagnostics", len(definitions), len(diagnostics))
    return diagnostics


def validate_definition(
    definitions: Sequence[DefinitionNode],
    definition: DefinitionNode,
) -> list[Diagnostic]:
    """Run the rules registered for the kind of *definition*.

    Raises:
        TypeError: If no rule set is registered for the definition's node type.
    """
    try:
        validator = _DEFINITION_VALIDATORS[type(definition)]
    except KeyError:
        raise TypeError(f"No validation rules registered for {type(definition).__name__}") from None
    return validator(definitions, definition)


def check_naming_collisions(local_types: Sequence[str], imported_types: Sequence[str]) -> list[Diagnostic]:
    """Return one diagnostic per type name that is defined or imported more than once.

    A name seen three or more times is still reported only once.
    """
    seen: set[str] = set()
    reported: set[str] = set()
    diagnostics: list[Diagnostic] = []
    for name in [*local_types, *imported_types]:
        if name in seen:
            if name not in reported:
                diagnostics.append(
                    Diagnostic(
                        location=UNIT_LOCATION,
                        entity=name,
                        message=f"Type '{name}' is defined more than once",
                    )
                )
                reported.add(name)
        else:
            seen.add(name)
    return diagnostics


# ################
# Implementation
# ################

_DefinitionValidator = Callable[[Sequence[DefinitionNode], DefinitionNode], list[Diagnostic]]


def _validate_object_type(
    definitions: Sequence[DefinitionNode],
    definition: ObjectTypeDefinitionNode,
) -> list[Diagnostic]:
    if definition.name.value == RESERVED_TYPE:
        return check_schema_type(definition)
    return check_entity_type(definitions, definition)


def _validate_object_type_extension(
    definitions: Sequence[DefinitionNode],
    definition: ObjectTypeExtensionNode,
) -> list[Diagnostic]:
    # Extensions are accepted as-is; no rules apply to them yet.
    return []


def _unchecked(definitions: Sequence[DefinitionNode], definition: DefinitionNode) -> list[Diagnostic]:
    return []


# Every type system node kind is listed so that a kind without rules is an
# explicit decision rather than a fall-through.
_DEFINITION_VALIDATORS: dict[type[DefinitionNode], _DefinitionValidator] = {
    ObjectTypeDefinitionNode: _validate_object_type,
    ObjectTypeExtensionNode: _validate_object_type_extension,
    InterfaceTypeDefinitionNode: _unchecked,
    EnumTypeDefinitionNode: _unchecked,
    ScalarTypeDefinitionNode: _unchecked,
    UnionTypeDefinitionNode: _unchecked,
    InputObjectTypeDefinitionNode: _unchecked,
    DirectiveDefinitionNode: _unchecked,
    SchemaDefinitionNode: _unchecked,
    SchemaExtensionNode: _unchecked,
    InterfaceTypeExtensionNode: _unchecked,
    EnumTypeExtensionNode: _unchecked,
    ScalarTypeExtensionNode: _unchecked,
    UnionTypeExtensionNode: _unchecked,
    InputObjectTypeExtensionNode: _unchecked,
}
