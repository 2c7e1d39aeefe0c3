# Copyright 2026 crdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sources of type metadata: reflection, artifacts and name resolution."""

from crdgen.discovery.artifact import ARTIFACT_SUFFIX, deserialize, read_artifact, serialize, write_artifact
from crdgen.discovery.reflect import ReflectionError, class_to_typedef, import_class, reflect_types, to_type_ref
from crdgen.discovery.resolvers import ChainedResolver, RuntimeResolver, TableResolver, TypeNameResolver

__all__ = [
    "ARTIFACT_SUFFIX",
    "serialize",
    "deserialize",
    "write_artifact",
    "read_artifact",
    "ReflectionError",
    "class_to_typedef",
    "import_class",
    "reflect_types",
    "to_type_ref",
    "TypeNameResolver",
    "TableResolver",
    "RuntimeResolver",
    "ChainedResolver",
]
