# Copyright 2026 Subgraph Schema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Diagnostic values produced by schema validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from graphql.language import Node

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Location:
    """A character span in the schema source.

    Attributes:
        start: Offset of the first character of the span.
        end: Offset one past the last character of the span.
    """

    start: int
    end: int

    @classmethod
    def of(cls, node: Node) -> Location:
        """Return the span of a parsed AST node.

        Nodes parsed without location information map to :data:`UNIT_LOCATION`.
        """
        if node.loc is None:
            return UNIT_LOCATION
        return cls(start=node.loc.start, end=node.loc.end)


# Placeholder for findings that have no single source span (e.g. a type name
# that collides across several definitions or imports).
UNIT_LOCATION = Location(start=1, end=1)


@dataclass(frozen=True)
class Diagnostic:
    """A rule violation found in a syntactically valid schema.

    Attributes:
        location: Source span the finding is attached to.
        entity: Name of the type that owns the finding.
        message: Human-readable description; may span several lines.
    """

    location: Location
    entity: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible representation of the diagnostic."""
        return {
            "location": {"start": self.location.start, "end": self.location.end},
            "entity": self.entity,
            "message": self.message,
        }
