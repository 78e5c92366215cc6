# Copyright 2026 Subgraph Schema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Validator for subgraph entity schemas written in GraphQL SDL."""

from subgraph_schema.compiler.loader import SchemaError, SchemaLoadError, SchemaParseError
from subgraph_schema.compiler.suggestions import suggest_type
from subgraph_schema.model.diagnostics import Diagnostic, Location
from subgraph_schema.validation.checks import validate_document, validate_schema

__all__ = [
    "Diagnostic",
    "Location",
    "SchemaError",
    "SchemaLoadError",
    "SchemaParseError",
    "suggest_type",
    "validate_document",
    "validate_schema",
]
