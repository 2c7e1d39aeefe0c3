# Copyright 2026 crdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type graph model: definitions, references, properties and marker types."""

from crdgen.model.entities import TypeDef, TypeTable
from crdgen.model.kinds import (
    CUSTOM_RESOURCE_TYPE,
    INT_OR_STRING_TYPE,
    NAMESPACED_TYPE,
    STATUS_ANNOTATION_TYPE,
    CustomResource,
    IntOrString,
    Namespaced,
    Status,
    qualified_name,
)
from crdgen.model.types import (
    AnnotationRef,
    ClassRef,
    Property,
    TypeParamRef,
    TypeRef,
    describe,
)

__all__ = [
    # References
    "AnnotationRef",
    "ClassRef",
    "TypeParamRef",
    "TypeRef",
    "Property",
    "describe",
    # Definitions
    "TypeDef",
    "TypeTable",
    # Marker types
    "CustomResource",
    "IntOrString",
    "Namespaced",
    "Status",
    "qualified_name",
    "CUSTOM_RESOURCE_TYPE",
    "INT_OR_STRING_TYPE",
    "NAMESPACED_TYPE",
    "STATUS_ANNOTATION_TYPE",
]
