# Copyright 2026 crdgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for type-argument substitution along supertype edges."""

import pytest

from crdgen.hierarchy import AnalysisContext, apply_type_arguments
from crdgen.model import ClassRef, Property, TypeDef, TypeParamRef, TypeTable

# ###############
# Test Helpers
# ###############

_STR = ClassRef(fully_qualified_name="builtins.str")
_INT = ClassRef(fully_qualified_name="builtins.int")
_WIDGET = ClassRef(fully_qualified_name="shop.Widget")


def _prop(name: str, type_ref: ClassRef | TypeParamRef) -> Property:
    return Property(name=name, type_ref=type_ref)


_PAIR = TypeDef(
    package_name="shop",
    name="Pair",
    parameters=["K", "V"],
    properties=[
        _prop("key", TypeParamRef(name="K")),
        _prop("value", TypeParamRef(name="V")),
        _prop("label", _STR),
        _prop("values", ClassRef(fully_qualified_name="builtins.list", arguments=[TypeParamRef(name="V")])),
    ],
)

_PLAIN = TypeDef(package_name="shop", name="Plain", properties=[_prop("label", _STR), _prop("count", _INT)])


def _ctx() -> AnalysisContext:
    return AnalysisContext(types=TypeTable.of(_PAIR, _PLAIN))


# ###############
# Substitution
# ###############


def test_binds_arguments_positionally() -> None:
    """Argument i replaces parameter i wherever a property is typed by it."""
    ref = ClassRef(fully_qualified_name="shop.Pair", arguments=[_STR, _WIDGET])
    specialized = apply_type_arguments(_ctx(), ref)
    types = {p.name: p.type_ref for p in specialized.properties}
    assert types["key"] == _STR
    assert types["value"] == _WIDGET


def test_leaves_concrete_properties_untouched() -> None:
    """Properties typed by a concrete reference keep their type."""
    ref = ClassRef(fully_qualified_name="shop.Pair", arguments=[_STR, _WIDGET])
    specialized = apply_type_arguments(_ctx(), ref)
    assert specialized.properties[2] == _PAIR.properties[2]


def test_does_not_rewrite_nested_arguments() -> None:
    """A parameter nested inside another reference's arguments stays unbound."""
    ref = ClassRef(fully_qualified_name="shop.Pair", arguments=[_STR, _WIDGET])
    specialized = apply_type_arguments(_ctx(), ref)
    values = specialized.properties[3].type_ref
    assert isinstance(values, ClassRef)
    assert values.arguments == [TypeParamRef(name="V")]


def test_returns_new_definition_without_mutating_table() -> None:
    """The stored generic definition is not modified."""
    ctx = _ctx()
    ref = ClassRef(fully_qualified_name="shop.Pair", arguments=[_STR, _WIDGET])
    specialized = apply_type_arguments(ctx, ref)
    assert specialized is not ctx.types.lookup("shop.Pair")
    assert ctx.types.lookup("shop.Pair").properties[0].type_ref == TypeParamRef(name="K")
    assert specialized.fully_qualified_name == "shop.Pair"
    assert specialized.parameters == ["K", "V"]


def test_non_generic_target_is_structurally_identical() -> None:
    """Specializing a definition without parameters keeps its property set."""
    specialized = apply_type_arguments(_ctx(), ClassRef(fully_qualified_name="shop.Plain"))
    assert specialized.properties == _PLAIN.properties


def test_raw_edge_leaves_parameters_unbound() -> None:
    """An edge without arguments binds nothing."""
    specialized = apply_type_arguments(_ctx(), ClassRef(fully_qualified_name="shop.Pair"))
    assert specialized.properties[0].type_ref == TypeParamRef(name="K")


def test_partial_binding_leaves_remaining_parameters_unbound() -> None:
    """With fewer arguments than parameters, only the leading ones are bound."""
    ref = ClassRef(fully_qualified_name="shop.Pair", arguments=[_INT])
    specialized = apply_type_arguments(_ctx(), ref)
    assert specialized.properties[0].type_ref == _INT
    assert specialized.properties[1].type_ref == TypeParamRef(name="V")


def test_unknown_target_raises_key_error() -> None:
    """A dangling edge is a broken input, surfaced by the table lookup."""
    with pytest.raises(KeyError):
        apply_type_arguments(_ctx(), ClassRef(fully_qualified_name="shop.Missing"))
