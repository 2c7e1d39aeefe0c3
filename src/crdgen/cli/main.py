# Copyright 2026 crdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the crdgen command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from crdgen.config.settings import CrdConfig, CrdConfigError, StatusTypeNotFoundError, load_crd_config
from crdgen.discovery.artifact import read_artifact, write_artifact
from crdgen.discovery.reflect import ReflectionError, import_class, reflect_types
from crdgen.hierarchy.capability import is_namespaced
from crdgen.hierarchy.context import AnalysisContext
from crdgen.hierarchy.status import find_status_type
from crdgen.hierarchy.unroll import all_properties
from crdgen.model.entities import TypeDef, TypeTable
from crdgen.model.kinds import qualified_name
from crdgen.model.types import describe
from crdgen.validation.checks import check_type_table

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the crdgen CLI."""
    parser = argparse.ArgumentParser(
        prog="crdgen",
        description="crdgen - static type-hierarchy analysis for custom resources",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log analysis details to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # inspect subcommand
    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Show the flattened properties, scope and status of a type",
        description="Analyse a type's hierarchy and print the results.",
    )
    inspect_parser.add_argument(
        "target",
        help="Class to analyse ('pkg.mod.Class' or 'pkg.mod:Class'), or a qualified name with --types",
    )
    inspect_parser.add_argument(
        "--types",
        default=None,
        help="Type-table artifact to look the target up in instead of importing it",
    )
    inspect_parser.add_argument(
        "--config",
        default=None,
        help="YAML analysis configuration file",
    )

    # dump subcommand
    dump_parser = subparsers.add_parser(
        "dump",
        help="Write the type table of one or more classes to an artifact",
        description="Reflect classes and their supertypes into a type-table artifact.",
    )
    dump_parser.add_argument("targets", nargs="+", help="Classes to reflect")
    dump_parser.add_argument("-o", "--output", required=True, help="Artifact file to write")
    dump_parser.add_argument(
        "--config",
        default=None,
        help="YAML analysis configuration file (for excluded namespaces)",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check a type-table artifact for broken edges and cycles",
        description="Validate that a type-table artifact satisfies the analysis' input assumptions.",
    )
    check_parser.add_argument("--types", required=True, help="Type-table artifact to check")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "inspect":
        return _cmd_inspect(args)
    if args.command == "dump":
        return _cmd_dump(args)
    if args.command == "check":
        return _cmd_check(args)
    return 0


def _cmd_inspect(args: argparse.Namespace) -> int:
    """Handle the inspect subcommand."""
    try:
        config = _load_config(args.config)
        if args.types is not None:
            types, root = _lookup_in_artifact(Path(args.types), args.target)
        else:
            types, root = _reflect_target(args.target, config)
    except _CliError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    ctx = AnalysisContext(types=types, config=config)
    try:
        properties = all_properties(ctx, root)
        namespaced = is_namespaced(ctx, root)
        status = find_status_type(ctx, root)
    except (StatusTypeNotFoundError, ReflectionError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except KeyError as exc:
        print(f"Error: type table has no definition for {exc}", file=sys.stderr)
        return 1

    print(root.fully_qualified_name)
    for prop in properties:
        markers = "".join(f" @{a.fully_qualified_name}" for a in prop.annotations)
        print(f"  {prop.name}: {describe(prop.type_ref)}{markers}")
    print(f"namespaced: {'yes' if namespaced else 'no'}")
    print(f"status: {describe(status) if status is not None else '-'}")
    return 0


def _cmd_dump(args: argparse.Namespace) -> int:
    """Handle the dump subcommand."""
    try:
        config = _load_config(args.config)
        classes = [_import_target(t) for t in args.targets]
        types = reflect_types(*classes, excluded_namespaces=config.excluded_namespaces)
    except _CliError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except ReflectionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    output = Path(args.output)
    try:
        write_artifact(types, output)
    except OSError as exc:
        print(f"Error: cannot write '{output}': {exc}", file=sys.stderr)
        return 1
    print(f"Wrote {len(types)} type(s) to '{output}'.")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    try:
        types = _read_types(Path(args.types))
    except _CliError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    result = check_type_table(types)
    for warning in result.warnings:
        print(f"Warning: {warning.message}")
    for error in result.errors:
        print(f"Error: {error.message}", file=sys.stderr)

    if result.has_errors:
        return 1
    print(f"No issues found in {len(types)} type(s).")
    return 0


class _CliError(Exception):
    """A user-facing failure while preparing a subcommand's inputs."""


def _load_config(path: str | None) -> CrdConfig:
    if path is None:
        return CrdConfig()
    try:
        return load_crd_config(Path(path))
    except CrdConfigError as exc:
        raise _CliError(str(exc)) from exc


def _read_types(path: Path) -> TypeTable:
    try:
        return read_artifact(path)
    except OSError as exc:
        raise _CliError(f"cannot read '{path}': {exc}") from exc
    except ValueError as exc:
        raise _CliError(f"invalid type-table artifact '{path}': {exc}") from exc


def _lookup_in_artifact(path: Path, target: str) -> tuple[TypeTable, TypeDef]:
    types = _read_types(path)
    root = types.get(target)
    if root is None:
        raise _CliError(f"type '{target}' is not defined in '{path}'")
    return types, root


def _import_target(target: str) -> type:
    cls = import_class(target)
    if cls is None:
        raise _CliError(f"cannot import class '{target}'")
    return cls


def _reflect_target(target: str, config: CrdConfig) -> tuple[TypeTable, TypeDef]:
    cls = _import_target(target)
    try:
        types = reflect_types(cls, excluded_namespaces=config.excluded_namespaces)
    except ReflectionError as exc:
        raise _CliError(str(exc)) from exc
    return types, types.lookup(qualified_name(cls))
