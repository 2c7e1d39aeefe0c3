# Copyright 2026 crdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type references, annotations and properties of the crdgen type graph."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class ClassRef(BaseModel):
    """A concrete reference to a type definition, with bound type arguments.

    The target is named by its fully-qualified name and looked up through a
    :class:`~crdgen.model.entities.TypeTable`, so graphs may contain cycles.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["class"] = "class"
    fully_qualified_name: str
    arguments: list[TypeRef] = _Field(default_factory=list)


class TypeParamRef(BaseModel):
    """A reference to a generic type parameter that is not yet bound."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["param"] = "param"
    name: str


# A type reference: either concrete or a bare type parameter.
TypeRef = Annotated[ClassRef | TypeParamRef, _Field(discriminator="kind")]


class AnnotationRef(BaseModel):
    """A marker annotation attached to a type or property."""

    model_config = ConfigDict(frozen=True)

    fully_qualified_name: str


class Property(BaseModel):
    """A named, typed member declared by a type definition."""

    model_config = ConfigDict(frozen=True)

    name: str
    type_ref: TypeRef
    annotations: list[AnnotationRef] = _Field(default_factory=list)

    def has_annotation(self, fully_qualified_name: str) -> bool:
        """Return True if the property carries the named annotation."""
        return any(a.fully_qualified_name == fully_qualified_name for a in self.annotations)


def describe(type_ref: TypeRef) -> str:
    """Render a type reference as text, e.g. ``builtins.list[T]``."""
    if isinstance(type_ref, TypeParamRef):
        return type_ref.name
    if not type_ref.arguments:
        return type_ref.fully_qualified_name
    args = ", ".join(describe(a) for a in type_ref.arguments)
    return f"{type_ref.fully_qualified_name}[{args}]"


# Resolve forward references for models that use TypeRef.
ClassRef.model_rebuild()
Property.model_rebuild()
