# Copyright 2026 Subgraph Schema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Value types shared by the loader, the validator and the CLI."""

from subgraph_schema.model.diagnostics import UNIT_LOCATION, Diagnostic, Location

__all__ = [
    "Diagnostic",
    "Location",
    "UNIT_LOCATION",
]
