# Copyright 2026 crdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for building type definitions from Python classes."""

from dataclasses import dataclass
from typing import Annotated, Any, ClassVar, Generic, Literal, Optional, Protocol, TypeVar

import pytest
from pydantic import BaseModel

from crdgen.discovery import ReflectionError, class_to_typedef, import_class, reflect_types, to_type_ref
from crdgen.model import (
    CUSTOM_RESOURCE_TYPE,
    NAMESPACED_TYPE,
    STATUS_ANNOTATION_TYPE,
    ClassRef,
    CustomResource,
    IntOrString,
    Namespaced,
    Status,
    TypeParamRef,
    qualified_name,
)

# ###############
# Fixture classes
# ###############

T = TypeVar("T")
U = TypeVar("U")


class Widget:
    size: int


class Holder(Generic[T]):
    item: T
    items: list[T]
    label: str
    registry: ClassVar[dict[str, int]] = {}


class WidgetHolder(Holder[Widget]):
    owner: str


class Scoped(Protocol):
    pass


class ScopedWidget(Widget, Scoped):
    pass


class Tagged:
    pass


class Reported:
    state: Annotated[str, Status]
    phase: Annotated[str, Status(), Tagged]
    note: Annotated[Optional[str], "free text"]


class OptionalReported:
    phase: Optional[Annotated[str, Status]]
    stage: Annotated[str, Status] | None
    step: Annotated[Optional[Annotated[str, Tagged]], Status]


class Gear(BaseModel):
    teeth: int


class GearBox(BaseModel, Generic[T]):
    gear: T


class SpurBox(GearBox[Gear]):
    ratio: float


@dataclass
class Point:
    x: float
    y: float = 0.0


class WidgetSpec:
    size: int


class WidgetStatus:
    ready: bool


class WidgetResource(CustomResource[WidgetSpec, WidgetStatus], Namespaced):
    pass


# ###############
# Single classes
# ###############


def test_own_annotations_become_properties() -> None:
    """Only annotations declared on the class itself are properties."""
    type_def = class_to_typedef(WidgetHolder)
    assert [p.name for p in type_def.properties] == ["owner"]
    assert type_def.package_name == WidgetHolder.__module__
    assert type_def.name == "WidgetHolder"


def test_type_variables_become_parameters() -> None:
    type_def = class_to_typedef(Holder)
    assert type_def.parameters == ["T"]
    props = {p.name: p.type_ref for p in type_def.properties}
    assert props["item"] == TypeParamRef(name="T")
    assert props["items"] == ClassRef(fully_qualified_name="builtins.list", arguments=[TypeParamRef(name="T")])
    assert props["label"] == ClassRef(fully_qualified_name="builtins.str")


def test_class_variables_are_skipped() -> None:
    names = [p.name for p in class_to_typedef(Holder).properties]
    assert "registry" not in names


def test_generic_bookkeeping_bases_are_not_edges() -> None:
    """Generic and object do not appear as supertypes."""
    type_def = class_to_typedef(Holder)
    assert type_def.extends_list == []
    assert type_def.implements_list == []


def test_parameterised_base_binds_arguments() -> None:
    type_def = class_to_typedef(WidgetHolder)
    widget = ClassRef(fully_qualified_name=qualified_name(Widget))
    assert type_def.extends_list == [ClassRef(fully_qualified_name=qualified_name(Holder), arguments=[widget])]


def test_protocol_bases_become_implements_edges() -> None:
    type_def = class_to_typedef(ScopedWidget)
    assert [e.fully_qualified_name for e in type_def.extends_list] == [qualified_name(Widget)]
    assert [i.fully_qualified_name for i in type_def.implements_list] == [qualified_name(Scoped)]


def test_annotated_metadata_becomes_property_annotations() -> None:
    """Marker classes and marker instances are both recorded by class name."""
    props = {p.name: p for p in class_to_typedef(Reported).properties}
    assert [a.fully_qualified_name for a in props["state"].annotations] == [STATUS_ANNOTATION_TYPE]
    phase_markers = [a.fully_qualified_name for a in props["phase"].annotations]
    assert phase_markers == [STATUS_ANNOTATION_TYPE, qualified_name(Tagged)]
    assert props["state"].type_ref == ClassRef(fully_qualified_name="builtins.str")


def test_optional_becomes_union_with_none() -> None:
    props = {p.name: p for p in class_to_typedef(Reported).properties}
    assert props["note"].type_ref == ClassRef(
        fully_qualified_name="typing.Union",
        arguments=[ClassRef(fully_qualified_name="builtins.str"), ClassRef(fully_qualified_name="builtins.NoneType")],
    )
    assert [a.fully_qualified_name for a in props["note"].annotations] == ["builtins.str"]


def test_annotated_metadata_inside_union_becomes_property_annotations() -> None:
    props = {p.name: p for p in class_to_typedef(OptionalReported).properties}
    optional_str = ClassRef(
        fully_qualified_name="typing.Union",
        arguments=[ClassRef(fully_qualified_name="builtins.str"), ClassRef(fully_qualified_name="builtins.NoneType")],
    )
    for name in ("phase", "stage"):
        assert props[name].type_ref == optional_str
        assert [a.fully_qualified_name for a in props[name].annotations] == [STATUS_ANNOTATION_TYPE]
    step_markers = [a.fully_qualified_name for a in props["step"].annotations]
    assert step_markers == [STATUS_ANNOTATION_TYPE, qualified_name(Tagged)]


def test_pydantic_generic_model_parameters_and_bases() -> None:
    """A parametrised pydantic base is an edge to its generic origin."""
    assert class_to_typedef(GearBox).parameters == ["T"]
    type_def = class_to_typedef(SpurBox)
    gear = ClassRef(fully_qualified_name=qualified_name(Gear))
    assert type_def.extends_list == [ClassRef(fully_qualified_name=qualified_name(GearBox), arguments=[gear])]
    assert [p.name for p in type_def.properties] == ["ratio"]


def test_dataclass_fields() -> None:
    props = [(p.name, p.type_ref) for p in class_to_typedef(Point).properties]
    assert props == [
        ("x", ClassRef(fully_qualified_name="builtins.float")),
        ("y", ClassRef(fully_qualified_name="builtins.float")),
    ]


# ###############
# Type references
# ###############


def _ref(fqn: str, *arguments: ClassRef | TypeParamRef) -> ClassRef:
    return ClassRef(fully_qualified_name=fqn, arguments=list(arguments))


@pytest.mark.parametrize(
    ("annotation", "expected"),
    [
        (int, _ref("builtins.int")),
        (T, TypeParamRef(name="T")),
        (Any, _ref("typing.Any")),
        (Literal["a", "b"], _ref("typing.Literal")),
        (Annotated[int, "meta"], _ref("builtins.int")),
        (int | str, _ref("typing.Union", _ref("builtins.int"), _ref("builtins.str"))),
        (dict[str, U], _ref("builtins.dict", _ref("builtins.str"), TypeParamRef(name="U"))),
        (tuple[int, ...], _ref("builtins.tuple", _ref("builtins.int"), _ref("builtins.ellipsis"))),
    ],
)
def test_to_type_ref(annotation: Any, expected: ClassRef | TypeParamRef) -> None:
    assert to_type_ref(annotation) == expected


def test_to_type_ref_rejects_unsupported_forms() -> None:
    with pytest.raises(ReflectionError):
        to_type_ref("NotAType")


def test_to_type_ref_of_parametrised_pydantic_model() -> None:
    assert to_type_ref(GearBox[Gear]) == _ref(qualified_name(GearBox), _ref(qualified_name(Gear)))


def test_reflect_types_skips_parametrised_pydantic_classes() -> None:
    table = reflect_types(SpurBox)
    assert [t.fully_qualified_name for t in table.definitions()] == [
        qualified_name(SpurBox),
        qualified_name(GearBox),
        "pydantic.main.BaseModel",
    ]


# ###############
# Type tables
# ###############


def test_reflect_types_registers_supertypes() -> None:
    """Every edge target reachable from the roots is in the table."""
    table = reflect_types(WidgetHolder)
    assert [t.fully_qualified_name for t in table.definitions()] == [
        qualified_name(WidgetHolder),
        qualified_name(Holder),
    ]


def test_reflect_types_covers_resource_markers() -> None:
    table = reflect_types(WidgetResource)
    assert qualified_name(WidgetResource) in table
    assert CUSTOM_RESOURCE_TYPE in table
    assert NAMESPACED_TYPE in table
    resource = table.lookup(CUSTOM_RESOURCE_TYPE)
    assert resource.parameters == ["S", "T"]
    assert [p.name for p in resource.properties] == ["api_version", "kind", "metadata", "spec", "status"]


def test_reflect_types_registers_excluded_bases_as_leaves() -> None:
    """Bases in excluded namespaces keep their name but nothing else."""

    class Dictish(dict):  # type: ignore[type-arg]
        extra: int

    table = reflect_types(Dictish)
    leaf = table.lookup("builtins.dict")
    assert leaf.properties == []
    assert leaf.extends_list == []


def test_reflect_types_deduplicates_roots() -> None:
    table = reflect_types(Widget, Widget, ScopedWidget)
    assert len(table) == 3


# ###############
# Importing
# ###############


@pytest.mark.parametrize(
    "name",
    ["crdgen.model.kinds.IntOrString", "crdgen.model.kinds:IntOrString"],
)
def test_import_class(name: str) -> None:
    assert import_class(name) is IntOrString


def test_import_nested_class() -> None:
    assert import_class("crdgen.model:kinds.IntOrString") is IntOrString


@pytest.mark.parametrize(
    "name",
    ["crdgen.model.kinds.Missing", "no_such_module.Thing", "crdgen.model.kinds.qualified_name", "Bare", "int"],
)
def test_import_class_returns_none_when_not_a_class(name: str) -> None:
    assert import_class(name) is None
