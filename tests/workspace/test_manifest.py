# Copyright 2026 Subgraph Schema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the subgraph manifest module."""

from pathlib import Path

import pytest

from subgraph_schema.workspace import (
    MANIFEST_NAME,
    ManifestError,
    SubgraphManifest,
    load_manifest,
    resolve_schema_path,
)

# ###############
# Helpers
# ###############


def _write_manifest(tmp_path: Path, content: str) -> Path:
    """Write a manifest file and return its path."""
    manifest_file = tmp_path / MANIFEST_NAME
    manifest_file.write_text(content, encoding="utf-8")
    return manifest_file


# ###############
# Normal Cases
# ###############


def test_manifest_name_constant() -> None:
    assert MANIFEST_NAME == "subgraph.yaml"


def test_minimal_manifest(tmp_path: Path) -> None:
    """A manifest with only a schema section parses."""
    manifest = load_manifest(_write_manifest(tmp_path, "schema:\n  file: ./schema.graphql\n"))

    assert isinstance(manifest, SubgraphManifest)
    assert manifest.schema_ref.file == "./schema.graphql"
    assert manifest.spec_version is None


def test_full_manifest_ignores_unknown_sections(tmp_path: Path) -> None:
    content = """\
specVersion: 0.0.5
description: Token transfers
schema:
  file: ./schema.graphql
dataSources:
  - kind: ethereum/contract
    name: Token
    network: mainnet
"""
    manifest = load_manifest(_write_manifest(tmp_path, content))

    assert manifest.spec_version == "0.0.5"
    assert manifest.description == "Token transfers"


def test_resolve_schema_path(tmp_path: Path) -> None:
    manifest_file = _write_manifest(tmp_path, "schema:\n  file: ./graphql/schema.graphql\n")
    manifest = load_manifest(manifest_file)

    assert resolve_schema_path(manifest_file, manifest) == (tmp_path / "graphql" / "schema.graphql").resolve()


# ###############
# Error Cases
# ###############


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ManifestError, match="Cannot read manifest"):
        load_manifest(tmp_path / MANIFEST_NAME)


def test_invalid_yaml(tmp_path: Path) -> None:
    with pytest.raises(ManifestError, match="Invalid YAML"):
        load_manifest(_write_manifest(tmp_path, "schema: [unclosed\n"))


def test_not_a_mapping(tmp_path: Path) -> None:
    with pytest.raises(ManifestError, match="must be a YAML mapping"):
        load_manifest(_write_manifest(tmp_path, "- a\n- b\n"))


def test_empty_manifest(tmp_path: Path) -> None:
    with pytest.raises(ManifestError, match="must be a YAML mapping"):
        load_manifest(_write_manifest(tmp_path, ""))


def test_missing_schema_section(tmp_path: Path) -> None:
    with pytest.raises(ManifestError, match="Invalid manifest"):
        load_manifest(_write_manifest(tmp_path, "specVersion: 0.0.5\n"))


def test_schema_without_file(tmp_path: Path) -> None:
    with pytest.raises(ManifestError, match="Invalid manifest"):
        load_manifest(_write_manifest(tmp_path, "schema:\n  path: ./schema.graphql\n"))
