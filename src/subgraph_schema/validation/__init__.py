# Copyright 2026 Subgraph Schema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entity-model rules for subgraph schemas (entities, fields, imports, collisions)."""

from subgraph_schema.validation.checks import (
    check_naming_collisions,
    validate_definition,
    validate_definitions,
    validate_document,
    validate_schema,
)

__all__ = [
    "check_naming_collisions",
    "validate_definition",
    "validate_definitions",
    "validate_document",
    "validate_schema",
]
