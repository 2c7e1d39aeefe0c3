# Copyright 2026 crdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization and deserialization of type-table artifacts.

A type table captured from any metadata source (reflection, a source
analyser for another language, ...) is stored as compact JSON so that the
hierarchy analysis can run against it later. The format is versioned so
future schema changes can be detected.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from crdgen.model.entities import TypeDef, TypeTable
from crdgen.model.types import AnnotationRef, ClassRef, Property, TypeParamRef, TypeRef

# ###############
# Public Interface
# ###############

ARTIFACT_FORMAT_VERSION = "1"
ARTIFACT_SUFFIX = ".types.json"


def serialize(types: TypeTable) -> str:
    """Serialize a TypeTable to a compact JSON string."""
    obj = {"v": ARTIFACT_FORMAT_VERSION, "types": [_type_def_to_dict(t) for t in types.definitions()]}
    return json.dumps(obj, separators=(",", ":"))


def deserialize(data: str) -> TypeTable:
    """Deserialize a TypeTable from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Returns:
        The reconstructed :class:`TypeTable`.

    Raises:
        ValueError: If the data is not JSON, the artifact format version is
            not recognised, or the structure does not match the format.
    """
    obj = json.loads(data)
    if not isinstance(obj, dict):
        raise ValueError(f"Invalid artifact: expected a JSON object, got {type(obj).__name__}")
    version = obj.get("v")
    if version != ARTIFACT_FORMAT_VERSION:
        raise ValueError(f"Unsupported artifact format version: {version!r}")
    try:
        return TypeTable.of(*(_type_def_from_dict(t) for t in obj.get("types", [])))
    except KeyError as exc:
        raise ValueError(f"Invalid artifact: missing key {exc}") from exc
    except (TypeError, AttributeError) as exc:
        raise ValueError(f"Invalid artifact: {exc}") from exc


def write_artifact(types: TypeTable, path: Path) -> None:
    """Write a type-table artifact to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(types), encoding="utf-8")


def read_artifact(path: Path) -> TypeTable:
    """Read and deserialize a type-table artifact from *path*."""
    return deserialize(path.read_text(encoding="utf-8"))


# ################
# Implementation
# ################


def _type_def_to_dict(type_def: TypeDef) -> dict[str, Any]:
    d: dict[str, Any] = {"name": type_def.name}
    if type_def.package_name is not None:
        d["package"] = type_def.package_name
    if type_def.parameters:
        d["params"] = type_def.parameters
    if type_def.properties:
        d["props"] = [_property_to_dict(p) for p in type_def.properties]
    if type_def.extends_list:
        d["extends"] = [_type_ref_to_dict(r) for r in type_def.extends_list]
    if type_def.implements_list:
        d["implements"] = [_type_ref_to_dict(r) for r in type_def.implements_list]
    if type_def.annotations:
        d["annotations"] = [a.fully_qualified_name for a in type_def.annotations]
    return d


def _type_def_from_dict(obj: dict[str, Any]) -> TypeDef:
    return TypeDef(
        package_name=obj.get("package"),
        name=obj["name"],
        parameters=obj.get("params", []),
        properties=[_property_from_dict(p) for p in obj.get("props", [])],
        extends_list=[_class_ref_from_dict(r) for r in obj.get("extends", [])],
        implements_list=[_class_ref_from_dict(r) for r in obj.get("implements", [])],
        annotations=[AnnotationRef(fully_qualified_name=a) for a in obj.get("annotations", [])],
    )


def _property_to_dict(prop: Property) -> dict[str, Any]:
    d: dict[str, Any] = {"name": prop.name, "type": _type_ref_to_dict(prop.type_ref)}
    if prop.annotations:
        d["annotations"] = [a.fully_qualified_name for a in prop.annotations]
    return d


def _property_from_dict(obj: dict[str, Any]) -> Property:
    return Property(
        name=obj["name"],
        type_ref=_type_ref_from_dict(obj["type"]),
        annotations=[AnnotationRef(fully_qualified_name=a) for a in obj.get("annotations", [])],
    )


def _type_ref_to_dict(type_ref: TypeRef) -> dict[str, Any]:
    """Encode a TypeRef as a tagged dict with compact keys."""
    if isinstance(type_ref, TypeParamRef):
        return {"k": "param", "n": type_ref.name}
    d: dict[str, Any] = {"k": "class", "n": type_ref.fully_qualified_name}
    if type_ref.arguments:
        d["args"] = [_type_ref_to_dict(a) for a in type_ref.arguments]
    return d


def _type_ref_from_dict(obj: dict[str, Any]) -> TypeRef:
    """Decode a TypeRef from a tagged dict."""
    kind = obj["k"]
    if kind == "param":
        return TypeParamRef(name=obj["n"])
    if kind == "class":
        return ClassRef(fully_qualified_name=obj["n"], arguments=[_type_ref_from_dict(a) for a in obj.get("args", [])])
    raise ValueError(f"Unknown type ref kind: {kind!r}")


def _class_ref_from_dict(obj: dict[str, Any]) -> ClassRef:
    ref = _type_ref_from_dict(obj)
    if not isinstance(ref, ClassRef):
        raise ValueError(f"Supertype edge must be a class reference, got {obj!r}")
    return ref
