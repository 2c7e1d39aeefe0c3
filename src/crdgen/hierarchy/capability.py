# Copyright 2026 crdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Detection of transitively inherited marker types."""

from __future__ import annotations

from crdgen.hierarchy.context import AnalysisContext
from crdgen.model.entities import TypeDef

# ###############
# Public Interface
# ###############


def has_capability(ctx: AnalysisContext, type_def: TypeDef, marker: str) -> bool:
    """Return True if *type_def* is, extends or implements the *marker* type.

    Both implements- and extends-edges are followed, any number of levels
    deep. Types in an excluded namespace are leaves without capabilities.
    Cyclic graphs terminate: a type already on the current path is not
    entered again.

    Args:
        ctx: Analysis context.
        type_def: The type to check.
        marker: Fully-qualified name of the marker type.
    """
    return _has_capability(ctx, type_def, marker, frozenset())


def is_namespaced(ctx: AnalysisContext, type_def: TypeDef) -> bool:
    """Return True if *type_def* carries the configured namespace-scope marker."""
    return has_capability(ctx, type_def, ctx.config.namespaced_type)


# ################
# Implementation
# ################


def _has_capability(ctx: AnalysisContext, type_def: TypeDef, marker: str, visited: frozenset[str]) -> bool:
    name = type_def.fully_qualified_name
    if name == marker:
        return True

    if name in visited or type_def.in_namespace(ctx.config.excluded_namespaces):
        return False

    visited = visited | {name}
    for edge in (*type_def.implements_list, *type_def.extends_list):
        if _has_capability(ctx, ctx.types.lookup(edge.fully_qualified_name), marker, visited):
            return True
    return False
