# Copyright 2026 crdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Analysis configuration and its YAML loader."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from crdgen.model.kinds import CUSTOM_RESOURCE_TYPE, NAMESPACED_TYPE, STATUS_ANNOTATION_TYPE

# ###############
# Public Interface
# ###############

AUTODETECT = "AUTODETECT"

DEFAULT_EXCLUDED_NAMESPACES: tuple[str, ...] = (
    "builtins",
    "typing",
    "types",
    "abc",
    "collections",
    "enum",
    "pydantic",
    "java",
    "javax",
    "com.sun",
    "com.ibm",
)

DEFAULT_RESOURCE_BASE_PROPERTIES: tuple[str, ...] = ("spec", "status")


class CrdConfigError(Exception):
    """Raised when the analysis configuration is invalid or cannot be loaded."""


class StatusTypeNotFoundError(CrdConfigError):
    """Raised when an explicit status class name does not resolve to any type."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Class {name} could not be found neither in the type table, nor in the runtime registry"
        )
        self.name = name


class CrdConfig(BaseModel):
    """Options that steer hierarchy analysis and status detection.

    Attributes:
        status_class_name: Qualified name of an explicit status type, or
            :data:`AUTODETECT` to look for a status property instead.
        excluded_namespaces: Namespaces whose types contribute neither
            properties nor capabilities.
        resource_base_type: Qualified name of the resource base type that is
            reduced to :attr:`resource_base_properties`.
        resource_base_properties: Property names the resource base keeps.
        namespaced_type: Qualified name of the namespace-scope marker.
        status_annotation_type: Qualified name of the status property marker.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    status_class_name: str = Field(alias="status-class-name", default=AUTODETECT)
    excluded_namespaces: tuple[str, ...] = Field(alias="excluded-namespaces", default=DEFAULT_EXCLUDED_NAMESPACES)
    resource_base_type: str = Field(alias="resource-base-type", default=CUSTOM_RESOURCE_TYPE)
    resource_base_properties: tuple[str, ...] = Field(
        alias="resource-base-properties", default=DEFAULT_RESOURCE_BASE_PROPERTIES
    )
    namespaced_type: str = Field(alias="namespaced-type", default=NAMESPACED_TYPE)
    status_annotation_type: str = Field(alias="status-annotation-type", default=STATUS_ANNOTATION_TYPE)

    @property
    def autodetect_status(self) -> bool:
        """Return True when no explicit status class name is configured."""
        return self.status_class_name == AUTODETECT


def load_crd_config(path: Path) -> CrdConfig:
    """Load and validate an analysis configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A validated CrdConfig instance.

    Raises:
        CrdConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise CrdConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise CrdConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise CrdConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise CrdConfigError(f"{path}: config must be a YAML mapping")

    try:
        return CrdConfig.model_validate(data)
    except ValidationError as exc:
        raise CrdConfigError(f"Invalid config file '{path}': {exc}") from exc
