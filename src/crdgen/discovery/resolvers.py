# Copyright 2026 crdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lookup of type definitions by qualified name.

A :class:`ChainedResolver` combines backends in a fixed order: the type
table built for the current analysis first, the importable runtime second.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from crdgen.discovery.reflect import class_to_typedef, import_class
from crdgen.model.entities import TypeDef, TypeTable

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class TypeNameResolver(ABC):
    """Resolves a qualified type name to a definition."""

    @abstractmethod
    def resolve(self, name: str) -> TypeDef | None:
        """Return the named definition, or None if this backend does not know it."""


class TableResolver(TypeNameResolver):
    """Resolves names against an in-memory :class:`TypeTable`."""

    def __init__(self, types: TypeTable) -> None:
        self._types = types

    def resolve(self, name: str) -> TypeDef | None:
        return self._types.get(name)


class RuntimeResolver(TypeNameResolver):
    """Resolves names by importing the class and reflecting on it."""

    def resolve(self, name: str) -> TypeDef | None:
        cls = import_class(name)
        if cls is None:
            return None
        return class_to_typedef(cls)


class ChainedResolver(TypeNameResolver):
    """Tries each backend in order; the first hit wins."""

    def __init__(self, *resolvers: TypeNameResolver) -> None:
        self._resolvers = resolvers

    def resolve(self, name: str) -> TypeDef | None:
        for resolver in self._resolvers:
            found = resolver.resolve(name)
            if found is not None:
                logger.debug("Resolved %s via %s", name, type(resolver).__name__)
                return found
        return None
