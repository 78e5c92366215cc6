# Copyright 2026 Subgraph Schema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the subgraph-schema command-line interface."""

import argparse
import json
import logging
import sys
from pathlib import Path

from graphql.language import Source, get_location
from yachalk import chalk

from subgraph_schema.compiler.loader import SchemaError, load_schema, parse_schema
from subgraph_schema.compiler.suggestions import suggest_type
from subgraph_schema.model.diagnostics import UNIT_LOCATION, Diagnostic
from subgraph_schema.validation.checks import validate_document
from subgraph_schema.workspace.manifest import MANIFEST_NAME, ManifestError, load_manifest, resolve_schema_path

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the subgraph-schema CLI."""
    parser = argparse.ArgumentParser(
        prog="subgraph-schema",
        description="Validate subgraph entity schemas",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Validate a subgraph schema",
        description=(
            "Validate a GraphQL schema file. PATH may be the schema itself, a "
            f"manifest, or a directory containing '{MANIFEST_NAME}'."
        ),
    )
    check_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help=f"Schema file, manifest, or directory containing {MANIFEST_NAME} (default: current directory)",
    )
    check_parser.add_argument(
        "--json",
        action="store_true",
        help="Print diagnostics as a JSON array on stdout",
    )
    check_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    # suggest subcommand
    suggest_parser = subparsers.add_parser(
        "suggest",
        help="Suggest the built-in scalar for a mistyped type name",
        description="Look up the built-in scalar a commonly mistyped type name most likely means.",
    )
    suggest_parser.add_argument("name", help="Type name to look up")

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "suggest":
        return _cmd_suggest(args)
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    path = Path(args.path).resolve()
    if not path.exists():
        print(f"Error: path '{path}' does not exist.", file=sys.stderr)
        return 1

    try:
        schema_path = _schema_path(path)
    except ManifestError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logger.debug("Validating schema %s", schema_path)
    try:
        text = load_schema(schema_path)
        document = parse_schema(text)
    except SchemaError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    diagnostics = validate_document(document)

    if args.json:
        print(json.dumps([d.to_dict() for d in diagnostics], indent=2))
        return 1 if diagnostics else 0

    source = Source(text, str(schema_path))
    for diagnostic in diagnostics:
        print(_format_diagnostic(diagnostic, source), file=sys.stderr)

    if diagnostics:
        print(chalk.red(f"Found {len(diagnostics)} issue(s) in {schema_path}."), file=sys.stderr)
        return 1

    print(chalk.green("No issues found."))
    return 0


def _cmd_suggest(args: argparse.Namespace) -> int:
    """Handle the suggest subcommand."""
    suggestion = suggest_type(args.name)
    if suggestion is None:
        print(f"No suggestion for '{args.name}'.", file=sys.stderr)
        return 1
    print(suggestion)
    return 0


def _schema_path(path: Path) -> Path:
    """Return the schema file for a schema, manifest, or directory path."""
    if path.is_dir():
        path = path / MANIFEST_NAME
        if not path.exists():
            raise ManifestError(f"No {MANIFEST_NAME} found in '{path.parent}'")
    if path.suffix in (".yaml", ".yml"):
        return resolve_schema_path(path, load_manifest(path))
    return path


def _format_diagnostic(diagnostic: Diagnostic, source: Source) -> str:
    """Render a diagnostic as ``Error: <entity> (line L, column C): <message>``."""
    prefix = chalk.red("Error:")
    if diagnostic.location == UNIT_LOCATION:
        return f"{prefix} {diagnostic.entity}: {diagnostic.message}"
    position = get_location(source, diagnostic.location.start)
    return f"{prefix} {diagnostic.entity} (line {position.line}, column {position.column}): {diagnostic.message}"
