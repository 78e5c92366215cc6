# Copyright 2026 Subgraph Schema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Loading and parsing of GraphQL schema files.

Reading the file and parsing its text are separate steps with separate
failure types, so callers can tell an unreadable schema from a malformed one.
"""

from __future__ import annotations

import logging
from pathlib import Path

from graphql import GraphQLSyntaxError, parse
from graphql.language import DocumentNode, ExecutableDefinitionNode

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class SchemaError(Exception):
    """Base class for failures that prevent a schema from being validated."""


class SchemaLoadError(SchemaError):
    """Raised when the schema file cannot be read."""


class SchemaParseError(SchemaError):
    """Raised when the schema text is not a valid GraphQL type system document."""


def load_schema(path: Path) -> str:
    """Read the schema text from *path*.

    Raises:
        SchemaLoadError: If the file cannot be read or decoded.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SchemaLoadError(f"Failed to load GraphQL schema: {exc}") from exc
    logger.debug("Loaded schema from %s (%d characters)", path, len(text))
    return text


def parse_schema(text: str) -> DocumentNode:
    """Parse schema text into a GraphQL document.

    Raises:
        SchemaParseError: If the text is not valid GraphQL, or if it contains
            executable definitions (queries, mutations, fragments).
    """
    try:
        document = parse(text)
    except GraphQLSyntaxError as exc:
        raise SchemaParseError(f"Invalid GraphQL schema: {exc}") from exc

    for definition in document.definitions:
        if isinstance(definition, ExecutableDefinitionNode):
            raise SchemaParseError(
                "Invalid GraphQL schema: executable definitions are not allowed in a schema document"
            )

    logger.debug("Parsed %d schema definitions", len(document.definitions))
    return document
