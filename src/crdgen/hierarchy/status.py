# Copyright 2026 crdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Resolution of the status facet of a resource type.

An explicitly configured status class name always wins. Without one, the
first property of the flattened hierarchy that is named ``status`` or
carries the status marker annotation determines the status type.
"""

from __future__ import annotations

import logging

from crdgen.config.settings import StatusTypeNotFoundError
from crdgen.hierarchy.context import AnalysisContext
from crdgen.hierarchy.unroll import all_properties
from crdgen.model.entities import TypeDef
from crdgen.model.types import Property, TypeRef

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

STATUS_PROPERTY_NAME = "status"


def find_status_type(ctx: AnalysisContext, type_def: TypeDef) -> TypeRef | None:
    """Find the type of the status facet of *type_def*.

    Args:
        ctx: Analysis context; its configuration may name the status class.
        type_def: The resource type.

    Returns:
        A reference to the configured status class, or else the type of the
        status property, or None if *type_def* has no status property.

    Raises:
        StatusTypeNotFoundError: If a status class name is configured but
            none of the context's resolvers knows it.
    """
    config = ctx.config
    if not config.autodetect_status:
        resolved = ctx.name_resolver.resolve(config.status_class_name)
        if resolved is None:
            raise StatusTypeNotFoundError(config.status_class_name)
        return resolved.to_reference()

    prop = find_status_property(ctx, type_def)
    return prop.type_ref if prop is not None else None


def find_status_property(ctx: AnalysisContext, type_def: TypeDef) -> Property | None:
    """Return the first status property in the flattened hierarchy of *type_def*."""
    for prop in all_properties(ctx, type_def):
        if is_status_property(ctx, prop):
            logger.debug("Status of %s is property '%s'", type_def.fully_qualified_name, prop.name)
            return prop
    return None


def is_status_property(ctx: AnalysisContext, prop: Property) -> bool:
    """Return True if *prop* is named ``status`` or carries the status marker."""
    return prop.name == STATUS_PROPERTY_NAME or prop.has_annotation(ctx.config.status_annotation_type)
