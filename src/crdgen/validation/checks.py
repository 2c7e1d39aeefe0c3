# Copyright 2026 crdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Pre-flight checks for type tables handed to the hierarchy analysis.

The analysis assumes every supertype edge resolves and carries one argument
per target parameter, and does not verify either. These checks report
tables that break those assumptions before an analysis runs on them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from crdgen.model.entities import TypeDef, TypeTable
from crdgen.model.types import ClassRef

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class CheckWarning:
    """A suspicious construct that the analysis still tolerates.

    Attributes:
        message: Human-readable description of the warning.
    """

    message: str


@dataclass(frozen=True)
class CheckError:
    """A violation of the analysis' input assumptions.

    Attributes:
        message: Human-readable description of the error.
    """

    message: str


@dataclass
class CheckResult:
    """Result of running the type-table checks.

    Attributes:
        warnings: Issues the analysis tolerates.
        errors: Issues that make analysis results unreliable.
    """

    warnings: list[CheckWarning] = field(default_factory=list)
    errors: list[CheckError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any errors were found."""
        return len(self.errors) > 0


def check_type_table(types: TypeTable) -> CheckResult:
    """Run all checks on a type table.

    Checks performed:

    1. **Dangling edges** (error): every extends- and implements-edge must
       name a definition present in the table.

    2. **Argument count** (error): an edge that binds type arguments must
       bind exactly as many as the target declares parameters. An edge
       with no arguments at all (a raw supertype) is accepted.

    3. **Duplicate properties** (error): property names must be unique
       within one definition.

    4. **Extends cycles** (warning): a type that is its own ancestor.

    Args:
        types: The table to check.

    Returns:
        A :class:`CheckResult`; empty when the table is well-formed.
    """
    warnings: list[CheckWarning] = []
    errors: list[CheckError] = []

    for type_def in types.definitions():
        errors.extend(_check_edges(types, type_def))
        errors.extend(_check_duplicate_properties(type_def))
    warnings.extend(_check_extends_cycles(types))

    return CheckResult(warnings=warnings, errors=errors)


# ################
# Implementation
# ################


def _check_edges(types: TypeTable, type_def: TypeDef) -> list[CheckError]:
    errors: list[CheckError] = []
    owner = type_def.fully_qualified_name
    edges: list[tuple[str, ClassRef]] = [("extends", e) for e in type_def.extends_list]
    edges.extend(("implements", i) for i in type_def.implements_list)

    for keyword, edge in edges:
        target = types.get(edge.fully_qualified_name)
        if target is None:
            errors.append(CheckError(f"'{owner}' {keyword} unknown type '{edge.fully_qualified_name}'."))
            continue
        if edge.arguments and len(edge.arguments) != len(target.parameters):
            errors.append(
                CheckError(
                    f"'{owner}' {keyword} '{edge.fully_qualified_name}' with {len(edge.arguments)}"
                    f" type argument(s), but it declares {len(target.parameters)} parameter(s)."
                )
            )
    return errors


def _check_duplicate_properties(type_def: TypeDef) -> list[CheckError]:
    seen: set[str] = set()
    reported: set[str] = set()
    errors: list[CheckError] = []
    for prop in type_def.properties:
        if prop.name in seen and prop.name not in reported:
            errors.append(CheckError(f"Duplicate property '{prop.name}' in '{type_def.fully_qualified_name}'."))
            reported.add(prop.name)
        seen.add(prop.name)
    return errors


def _check_extends_cycles(types: TypeTable) -> list[CheckWarning]:
    """Report the first extends-cycle met when walking definitions in table order."""
    finished: set[str] = set()

    def _walk(name: str, path: list[str]) -> list[str] | None:
        if name in path:
            return path[path.index(name) :] + [name]
        type_def = types.get(name)
        if type_def is None or name in finished:
            return None
        path.append(name)
        for edge in type_def.extends_list:
            cycle = _walk(edge.fully_qualified_name, path)
            if cycle is not None:
                return cycle
        path.pop()
        finished.add(name)
        return None

    for type_def in types.definitions():
        cycle = _walk(type_def.fully_qualified_name, [])
        if cycle is not None:
            return [CheckWarning(f"Extends cycle detected: {' -> '.join(cycle)}.")]
    return []
