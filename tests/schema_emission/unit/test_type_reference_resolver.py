"""Type reference resolver tests."""

from __future__ import annotations

from typing import Any

import pytest
from graphql_to_jddf.introspection_ingestion.introspection_models import (
    NamedType,
    NamedTypeRef,
    TypeKind,
    TypeRef,
    WrappedTypeRef,
)
from graphql_to_jddf.schema_emission.definition_registry import DefinitionRegistry
from graphql_to_jddf.schema_emission.type_reference_resolver import TypeReferenceResolver


def _non_null(inner: TypeRef | None) -> WrappedTypeRef:
    return WrappedTypeRef(kind=TypeKind.NON_NULL, of_type=inner)


def _list_of(inner: TypeRef | None) -> WrappedTypeRef:
    return WrappedTypeRef(kind=TypeKind.LIST, of_type=inner)


def _nested_lists(depth: int, inner: TypeRef) -> TypeRef:
    type_ref = inner
    for _ in range(depth):
        type_ref = _list_of(type_ref)
    return type_ref


def _resolver(max_list_depth: int = 3) -> tuple[TypeReferenceResolver, DefinitionRegistry]:
    registry = DefinitionRegistry(
        {"Node": NamedType(kind=TypeKind.OBJECT, name="Node")},
        convert=lambda named_type: {"properties": {}},
    )
    return TypeReferenceResolver(registry, max_list_depth=max_list_depth), registry


NODE = NamedTypeRef(kind=TypeKind.OBJECT, name="Node")


def test_scalar_is_inlined_and_not_registered() -> None:
    resolver, registry = _resolver()

    assert resolver.resolve(NamedTypeRef(kind=TypeKind.SCALAR, name="Int")) == {"type": "int32"}
    assert resolver.resolve(NamedTypeRef(kind=TypeKind.ENUM, name="Role")) == {"type": "string"}
    assert registry.definitions() == {}


def test_named_object_resolves_to_ref_and_registers_definition() -> None:
    resolver, registry = _resolver()

    assert resolver.resolve(NODE) == {"ref": "Node"}
    assert registry.definitions() == {"Node": {"properties": {}}}


def test_non_null_is_transparent_at_every_level() -> None:
    resolver, _ = _resolver()

    assert resolver.resolve(_non_null(NODE)) == {"ref": "Node"}
    assert resolver.resolve(_non_null(_list_of(_non_null(NODE)))) == {"elements": {"ref": "Node"}}


def test_nesting_within_budget_renders_every_list() -> None:
    resolver, _ = _resolver()

    assert resolver.resolve(_nested_lists(3, NODE)) == {
        "elements": {"elements": {"elements": {"ref": "Node"}}}
    }


def test_nesting_one_level_beyond_budget_bottoms_out_to_empty_schema() -> None:
    resolver, registry = _resolver()

    assert resolver.resolve(_nested_lists(4, NODE)) == {
        "elements": {"elements": {"elements": {"elements": {}}}}
    }
    assert "Node" not in registry


def test_deeper_nesting_collapses_to_same_shape() -> None:
    resolver, _ = _resolver()

    assert resolver.resolve(_nested_lists(6, NODE)) == resolver.resolve(_nested_lists(4, NODE))


def test_explicit_budget_overrides_configured_depth() -> None:
    resolver, _ = _resolver()

    assert resolver.resolve(_list_of(NODE), depth_budget=0) == {"elements": {}}
    assert resolver.resolve(_list_of(_list_of(NODE)), depth_budget=1) == {
        "elements": {"elements": {}}
    }


def test_truncated_wrapper_resolves_to_empty_schema() -> None:
    resolver, _ = _resolver()

    assert resolver.resolve(_non_null(None)) == {}
    assert resolver.resolve(_list_of(None)) == {}
    assert resolver.resolve(_list_of(_list_of(None))) == {"elements": {}}


def test_zero_depth_renders_single_catch_all_list() -> None:
    resolver, _ = _resolver(max_list_depth=0)

    result: dict[str, Any] = resolver.resolve(_list_of(NODE))
    assert result == {"elements": {}}


def test_negative_depth_is_rejected() -> None:
    registry = DefinitionRegistry({})

    with pytest.raises(ValueError):
        TypeReferenceResolver(registry, max_list_depth=-1)
