# Copyright 2026 crdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Build type definitions from Python classes without instantiating them.

Only class metadata is read: own annotations become properties, type
variables become parameter references, and parameterised bases become
supertype edges carrying their bound arguments. Bases that are protocols
are recorded as implements-edges, every other base as an extends-edge.
"""

from __future__ import annotations

import importlib
import inspect
import logging
import types
from collections.abc import Iterable
from typing import (
    Annotated,
    Any,
    ClassVar,
    Generic,
    Literal,
    Protocol,
    TypeVar,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

from crdgen.config.settings import DEFAULT_EXCLUDED_NAMESPACES
from crdgen.model.entities import TypeDef, TypeTable
from crdgen.model.kinds import qualified_name
from crdgen.model.types import AnnotationRef, ClassRef, Property, TypeParamRef, TypeRef

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

UNION_TYPE = "typing.Union"


class ReflectionError(Exception):
    """Raised when a class cannot be described as a type definition."""


def class_to_typedef(cls: type) -> TypeDef:
    """Describe a single class as a :class:`TypeDef`.

    Args:
        cls: The class to describe.

    Returns:
        The definition with the class's own properties, type parameters and
        direct supertype edges.

    Raises:
        ReflectionError: If an annotation cannot be resolved or uses an
            unsupported typing construct.
    """
    extends_list: list[ClassRef] = []
    implements_list: list[ClassRef] = []
    for origin, args in _direct_bases(cls):
        ref = ClassRef(fully_qualified_name=qualified_name(origin), arguments=[to_type_ref(a) for a in args])
        if getattr(origin, "_is_protocol", False):
            implements_list.append(ref)
        else:
            extends_list.append(ref)

    metadata = getattr(cls, "__pydantic_generic_metadata__", None) or {}
    parameters = metadata.get("parameters") or getattr(cls, "__parameters__", ())
    return TypeDef(
        package_name=cls.__module__,
        name=cls.__qualname__,
        parameters=[p.__name__ for p in parameters if isinstance(p, TypeVar)],
        properties=_own_properties(cls),
        extends_list=extends_list,
        implements_list=implements_list,
    )


def reflect_types(
    *classes: type,
    excluded_namespaces: Iterable[str] = DEFAULT_EXCLUDED_NAMESPACES,
) -> TypeTable:
    """Describe *classes* and every supertype reachable from them.

    Classes in an excluded namespace are registered as bare leaves: they keep
    their name but contribute no properties and no further edges.

    Returns:
        A table in which every extends- and implements-edge resolves.
    """
    excluded = tuple(excluded_namespaces)
    found: dict[str, TypeDef] = {}
    pending = list(classes)
    while pending:
        cls = pending.pop(0)
        name = qualified_name(cls)
        if name in found:
            continue
        leaf = TypeDef(package_name=cls.__module__, name=cls.__qualname__)
        if leaf.in_namespace(excluded):
            logger.debug("Registering %s as an excluded leaf", name)
            found[name] = leaf
            continue
        found[name] = class_to_typedef(cls)
        pending.extend(origin for origin, _ in _direct_bases(cls))
    return TypeTable(types=found)


def to_type_ref(tp: Any) -> TypeRef:
    """Convert a resolved annotation into a type reference.

    ``Annotated`` metadata is dropped here; property markers are collected
    by the caller. Every union spelling maps onto :data:`UNION_TYPE`. A
    parametrised pydantic model refers to its generic origin.
    """
    if isinstance(tp, TypeVar):
        return TypeParamRef(name=tp.__name__)
    if tp is Any:
        return ClassRef(fully_qualified_name="typing.Any")
    if tp is None:
        return ClassRef(fully_qualified_name=qualified_name(type(None)))
    if tp is Ellipsis:
        return ClassRef(fully_qualified_name=qualified_name(type(Ellipsis)))

    origin = get_origin(tp)
    if origin is Annotated:
        return to_type_ref(get_args(tp)[0])
    if origin is Union or origin is types.UnionType:
        return ClassRef(fully_qualified_name=UNION_TYPE, arguments=[to_type_ref(a) for a in get_args(tp)])
    if origin is Literal:
        return ClassRef(fully_qualified_name="typing.Literal")
    if isinstance(origin, type):
        return ClassRef(fully_qualified_name=qualified_name(origin), arguments=[to_type_ref(a) for a in get_args(tp)])
    if isinstance(tp, type):
        origin, args = _split_generic(tp)
        return ClassRef(fully_qualified_name=qualified_name(origin), arguments=[to_type_ref(a) for a in args])
    raise ReflectionError(f"Unsupported type annotation: {tp!r}")


def import_class(name: str) -> type | None:
    """Import a class given as ``pkg.mod.Class`` or ``pkg.mod:Class``.

    For dotted names the longest importable module prefix wins. A bare name
    such as ``int`` has no module part and is not looked up in builtins.

    Returns:
        The class, or None if no module prefix imports or the attribute path
        does not lead to a class.
    """
    if ":" in name:
        module_name, _, attr_path = name.partition(":")
        candidates = [(module_name, attr_path.split("."))]
    else:
        parts = name.split(".")
        candidates = [(".".join(parts[:i]), parts[i:]) for i in range(len(parts) - 1, 0, -1)]

    for module_name, attrs in candidates:
        try:
            obj: Any = importlib.import_module(module_name)
        except ModuleNotFoundError:
            continue
        for attr in attrs:
            obj = getattr(obj, attr, None)
            if obj is None:
                break
        if isinstance(obj, type):
            return obj
    return None


# ################
# Implementation
# ################

_IGNORED_BASES: tuple[Any, ...] = (object, Generic, Protocol)


def _direct_bases(cls: type) -> list[tuple[type, tuple[Any, ...]]]:
    """Return ``(origin, arguments)`` for each declared base worth an edge."""
    bases = cls.__dict__.get("__orig_bases__", cls.__bases__)
    result: list[tuple[type, tuple[Any, ...]]] = []
    for base in bases:
        origin = get_origin(base)
        args = get_args(base)
        if origin is None:
            origin, args = _split_generic(base)
        if any(origin is ignored for ignored in _IGNORED_BASES):
            continue
        if not isinstance(origin, type):
            raise ReflectionError(f"Unsupported base {base!r} of {qualified_name(cls)}")
        result.append((origin, args))
    return result


def _split_generic(cls: Any) -> tuple[Any, tuple[Any, ...]]:
    """Return ``(origin, arguments)`` of a parametrised pydantic model.

    ``Model[X]`` of a generic pydantic model is a real subclass rather than
    a typing alias, so its origin and arguments live in the model's generic
    metadata. Any other class is returned unchanged with no arguments.
    """
    metadata = getattr(cls, "__pydantic_generic_metadata__", None) or {}
    if metadata.get("origin") is None:
        return cls, ()
    return metadata["origin"], tuple(metadata.get("args", ()))


def _own_properties(cls: type) -> list[Property]:
    """Describe the annotations declared directly on *cls*."""
    own = inspect.get_annotations(cls)
    if not own:
        return []
    try:
        hints = get_type_hints(cls, include_extras=True)
    except NameError as exc:
        raise ReflectionError(f"Cannot resolve annotations of {qualified_name(cls)}: {exc}") from exc

    properties: list[Property] = []
    for name in own:
        hint = hints.get(name, own[name])
        if get_origin(hint) is ClassVar:
            continue
        markers = [AnnotationRef(fully_qualified_name=m) for m in dict.fromkeys(_marker_names(hint))]
        properties.append(Property(name=name, type_ref=to_type_ref(hint), annotations=markers))
    return properties


def _marker_names(hint: Any) -> list[str]:
    """Collect ``Annotated`` metadata at the top level and inside union members.

    ``Optional[Annotated[X, Status]]`` marks the property just as
    ``Annotated[Optional[X], Status]`` does.
    """
    origin = get_origin(hint)
    if origin is Annotated:
        inner, *metadata = get_args(hint)
        return [_marker_name(m) for m in metadata] + _marker_names(inner)
    if origin is Union or origin is types.UnionType:
        return [name for arg in get_args(hint) for name in _marker_names(arg)]
    return []


def _marker_name(marker: Any) -> str:
    if isinstance(marker, type):
        return qualified_name(marker)
    return qualified_name(type(marker))
