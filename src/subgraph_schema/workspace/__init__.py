# Copyright 2026 Subgraph Schema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Subgraph manifest handling."""

from subgraph_schema.workspace.manifest import (
    MANIFEST_NAME,
    ManifestError,
    SchemaReference,
    SubgraphManifest,
    load_manifest,
    resolve_schema_path,
)

__all__ = [
    "MANIFEST_NAME",
    "ManifestError",
    "SchemaReference",
    "SubgraphManifest",
    "load_manifest",
    "resolve_schema_path",
]
