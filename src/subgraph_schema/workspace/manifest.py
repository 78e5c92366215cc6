# Copyright 2026 Subgraph Schema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML loader for the subgraph manifest.

Only the parts of the manifest the validator needs are modelled; data
sources, templates and other sections are ignored.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

MANIFEST_NAME = "subgraph.yaml"


class ManifestError(Exception):
    """Raised when the manifest cannot be read or is invalid."""


class SchemaReference(BaseModel):
    """The ``schema`` section of the manifest."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    file: str


class SubgraphManifest(BaseModel):
    """Top-level manifest model."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    spec_version: str | None = Field(alias="specVersion", default=None)
    description: str | None = None
    schema_ref: SchemaReference = Field(alias="schema")


def load_manifest(path: Path) -> SubgraphManifest:
    """Load and validate the manifest from disk.

    Args:
        path: Path to the ``subgraph.yaml`` file.

    Returns:
        A validated SubgraphManifest instance.

    Raises:
        ManifestError: If the file cannot be read, contains invalid YAML,
            or does not declare a schema file.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"Cannot read manifest '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ManifestError(f"Invalid YAML in manifest '{path}': {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestError(f"Invalid manifest '{path}': manifest must be a YAML mapping")

    try:
        manifest = SubgraphManifest.model_validate(data)
    except ValidationError as exc:
        raise ManifestError(f"Invalid manifest '{path}': {exc}") from exc

    logger.debug("Loaded manifest %s (schema: %s)", path, manifest.schema_ref.file)
    return manifest


def resolve_schema_path(manifest_path: Path, manifest: SubgraphManifest) -> Path:
    """Return the schema file path, resolved relative to the manifest's directory."""
    return (manifest_path.parent / manifest.schema_ref.file).resolve()
