# Copyright 2026 crdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type definitions and the identity-keyed table that holds them."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from crdgen.model.types import AnnotationRef, ClassRef, Property, TypeParamRef

# ###############
# Public Interface
# ###############


class TypeDef(BaseModel):
    """An immutable snapshot of a type: members, generics and supertypes.

    Identity is the fully-qualified name. Graph traversals key their
    bookkeeping on that name rather than on structural equality.
    """

    model_config = ConfigDict(frozen=True)

    package_name: str | None = None
    name: str
    parameters: list[str] = _Field(default_factory=list)
    properties: list[Property] = _Field(default_factory=list)
    extends_list: list[ClassRef] = _Field(default_factory=list)
    implements_list: list[ClassRef] = _Field(default_factory=list)
    annotations: list[AnnotationRef] = _Field(default_factory=list)

    @property
    def fully_qualified_name(self) -> str:
        if self.package_name:
            return f"{self.package_name}.{self.name}"
        return self.name

    def to_reference(self) -> ClassRef:
        """Return a reference to this definition, its arguments being its own parameters."""
        return ClassRef(
            fully_qualified_name=self.fully_qualified_name,
            arguments=[TypeParamRef(name=p) for p in self.parameters],
        )

    def in_namespace(self, namespaces: Iterable[str]) -> bool:
        """Return True if the package is one of *namespaces* or nested below one."""
        if not self.package_name:
            return False
        return any(self.package_name == ns or self.package_name.startswith(ns + ".") for ns in namespaces)


class TypeTable(BaseModel):
    """Type definitions keyed by fully-qualified name, in insertion order."""

    model_config = ConfigDict(frozen=True)

    types: dict[str, TypeDef] = _Field(default_factory=dict)

    @classmethod
    def of(cls, *type_defs: TypeDef) -> TypeTable:
        """Build a table from definitions; a later duplicate replaces an earlier one."""
        return cls(types={t.fully_qualified_name: t for t in type_defs})

    def get(self, fully_qualified_name: str) -> TypeDef | None:
        return self.types.get(fully_qualified_name)

    def lookup(self, fully_qualified_name: str) -> TypeDef:
        """Return the named definition.

        Raises:
            KeyError: If the table has no such definition. Edges are required
                to point at known definitions, so this signals broken input.
        """
        return self.types[fully_qualified_name]

    def with_types(self, *type_defs: TypeDef) -> TypeTable:
        """Return a new table extended (or overridden) by *type_defs*."""
        merged = dict(self.types)
        merged.update({t.fully_qualified_name: t for t in type_defs})
        return TypeTable(types=merged)

    def __contains__(self, fully_qualified_name: object) -> bool:
        return fully_qualified_name in self.types

    def definitions(self) -> list[TypeDef]:
        return list(self.types.values())

    def __len__(self) -> int:
        return len(self.types)
