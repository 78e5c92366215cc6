# Copyright 2026 Subgraph Schema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema loading, parsing, and the AST helpers and symbol tables the rules build on."""

from subgraph_schema.compiler.loader import SchemaError, SchemaLoadError, SchemaParseError, load_schema, parse_schema
from subgraph_schema.compiler.suggestions import TYPE_SUGGESTIONS, suggest_type
from subgraph_schema.compiler.symbols import (
    BUILTIN_SCALAR_TYPES,
    RESERVED_TYPE,
    entity_type_by_name,
    gather_imported_types,
    gather_local_types,
)

__all__ = [
    "BUILTIN_SCALAR_TYPES",
    "RESERVED_TYPE",
    "SchemaError",
    "SchemaLoadError",
    "SchemaParseError",
    "TYPE_SUGGESTIONS",
    "entity_type_by_name",
    "gather_imported_types",
    "gather_local_types",
    "load_schema",
    "parse_schema",
    "suggest_type",
]
