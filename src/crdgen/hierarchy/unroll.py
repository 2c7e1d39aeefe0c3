# Copyright 2026 crdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Flattening of a type's extends-hierarchy into one property list.

The hierarchy is walked from the root, then each extends-edge depth-first
in declaration order. That order is the aggregation order consumers rely
on for first-match decisions: a type's own properties come before those of
its ancestors, and a nearer ancestor's before a farther one's.
Implements-edges are not followed; interfaces contribute no properties.
"""

from __future__ import annotations

import logging

from crdgen.hierarchy.context import AnalysisContext
from crdgen.hierarchy.substitution import apply_type_arguments
from crdgen.model.entities import TypeDef
from crdgen.model.types import Property

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def unroll_hierarchy(ctx: AnalysisContext, type_def: TypeDef) -> dict[str, TypeDef]:
    """Collect *type_def* and its specialized ancestors.

    - A type in an excluded namespace contributes nothing, and nor do its
      ancestors.
    - The configured resource base type contributes a copy reduced to the
      configured resource base properties, and its ancestors are not visited.
    - Any other type contributes itself, followed by the unrolled hierarchy
      of each of its extends-edges after type-argument substitution.

    Args:
        ctx: Analysis context.
        type_def: The root of the hierarchy.

    Returns:
        Definitions keyed by fully-qualified name in aggregation order. When
        an ancestor is reached twice, the first occurrence is kept.
    """
    hierarchy: dict[str, TypeDef] = {}
    _unroll(ctx, type_def, hierarchy, frozenset())
    return hierarchy


def all_properties(ctx: AnalysisContext, type_def: TypeDef) -> list[Property]:
    """Return all properties of *type_def*, including inherited ones.

    Properties are concatenated in the order of :func:`unroll_hierarchy`.
    Same-named properties of different ancestors are all kept.
    """
    return [p for member in unroll_hierarchy(ctx, type_def).values() for p in member.properties]


# ################
# Implementation
# ################


def _unroll(
    ctx: AnalysisContext,
    type_def: TypeDef,
    hierarchy: dict[str, TypeDef],
    path: frozenset[str],
) -> None:
    name = type_def.fully_qualified_name
    config = ctx.config

    if type_def.in_namespace(config.excluded_namespaces):
        logger.debug("Pruning %s: excluded namespace", name)
        return

    if name in path:
        logger.warning("Extends-cycle through %s; not descending again", name)
        return

    if name in hierarchy:
        return

    if name == config.resource_base_type:
        keep = set(config.resource_base_properties)
        hierarchy[name] = type_def.model_copy(
            update={"properties": [p for p in type_def.properties if p.name in keep]}
        )
        logger.debug("Reduced resource base %s to %s", name, sorted(keep))
        return

    hierarchy[name] = type_def
    for edge in type_def.extends_list:
        _unroll(ctx, apply_type_arguments(ctx, edge), hierarchy, path | {name})
