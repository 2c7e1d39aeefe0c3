# Copyright 2026 crdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type-hierarchy resolution and property classification."""

from crdgen.hierarchy.capability import has_capability, is_namespaced
from crdgen.hierarchy.context import AnalysisContext
from crdgen.hierarchy.status import find_status_property, find_status_type, is_status_property
from crdgen.hierarchy.substitution import apply_type_arguments
from crdgen.hierarchy.unroll import all_properties, unroll_hierarchy

__all__ = [
    "AnalysisContext",
    "apply_type_arguments",
    "unroll_hierarchy",
    "all_properties",
    "has_capability",
    "is_namespaced",
    "find_status_type",
    "find_status_property",
    "is_status_property",
]
