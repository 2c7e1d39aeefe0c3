# Copyright 2026 crdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""The explicit context every hierarchy operation runs against."""

from __future__ import annotations

from dataclasses import dataclass, field

from crdgen.config.settings import CrdConfig
from crdgen.discovery.resolvers import ChainedResolver, RuntimeResolver, TableResolver, TypeNameResolver
from crdgen.model.entities import TypeTable

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class AnalysisContext:
    """Type table, configuration and name resolution for one analysis.

    Attributes:
        types: Definitions that supertype edges are looked up in.
        config: Analysis options.
        resolver: Backend for explicit status class names. Defaults to the
            type table followed by the runtime registry.
    """

    types: TypeTable
    config: CrdConfig = field(default_factory=CrdConfig)
    resolver: TypeNameResolver | None = None

    @property
    def name_resolver(self) -> TypeNameResolver:
        if self.resolver is not None:
            return self.resolver
        return ChainedResolver(TableResolver(self.types), RuntimeResolver())
