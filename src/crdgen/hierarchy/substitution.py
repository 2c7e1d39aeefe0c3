# Copyright 2026 crdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generic type-argument substitution along a supertype edge."""

from __future__ import annotations

from crdgen.hierarchy.context import AnalysisContext
from crdgen.model.entities import TypeDef
from crdgen.model.types import ClassRef, TypeParamRef, TypeRef

# ###############
# Public Interface
# ###############


def apply_type_arguments(ctx: AnalysisContext, ref: ClassRef) -> TypeDef:
    """Specialize the definition *ref* points at with the arguments *ref* carries.

    Argument *i* binds parameter *i* of the target. Every property whose
    declared type is a bound parameter gets the argument as its type; all
    other properties are left as they are, including type parameters nested
    inside another reference's arguments. Surplus arguments are ignored and
    unbound parameters stay unbound.

    Args:
        ctx: Context holding the type table the edge is resolved against.
        ref: The edge, e.g. ``Base[Widget]`` as declared by a subtype.

    Returns:
        A new definition; the one in the table is not modified.

    Raises:
        KeyError: If the target is missing from the type table.
    """
    definition = ctx.types.lookup(ref.fully_qualified_name)
    bounds: dict[str, TypeRef] = dict(zip(definition.parameters, ref.arguments))
    if not bounds:
        return definition

    properties = [
        p.model_copy(update={"type_ref": bounds[p.type_ref.name]})
        if isinstance(p.type_ref, TypeParamRef) and p.type_ref.name in bounds
        else p
        for p in definition.properties
    ]
    return definition.model_copy(update={"properties": properties})
