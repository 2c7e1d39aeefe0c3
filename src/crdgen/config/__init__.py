# Copyright 2026 crdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration for crdgen analysis."""

from crdgen.config.settings import (
    AUTODETECT,
    DEFAULT_EXCLUDED_NAMESPACES,
    DEFAULT_RESOURCE_BASE_PROPERTIES,
    CrdConfig,
    CrdConfigError,
    StatusTypeNotFoundError,
    load_crd_config,
)

__all__ = [
    "AUTODETECT",
    "DEFAULT_EXCLUDED_NAMESPACES",
    "DEFAULT_RESOURCE_BASE_PROPERTIES",
    "CrdConfig",
    "CrdConfigError",
    "StatusTypeNotFoundError",
    "load_crd_config",
]
