"""Definition registry tests."""

from __future__ import annotations

from typing import Any

import pytest
from graphql_to_jddf.introspection_ingestion.document_reader import MalformedInputError
from graphql_to_jddf.introspection_ingestion.introspection_models import NamedType, TypeKind
from graphql_to_jddf.schema_emission.definition_registry import DefinitionRegistry


def _types(*names: str) -> dict[str, NamedType]:
    return {name: NamedType(kind=TypeKind.OBJECT, name=name) for name in names}


def test_first_request_converts_and_returns_ref() -> None:
    calls: list[str] = []

    def convert(named_type: NamedType) -> dict[str, Any]:
        calls.append(named_type.name)
        return {"properties": {}}

    registry = DefinitionRegistry(_types("A"), convert=convert)

    assert registry.get_or_create_ref("A") == {"ref": "A"}
    assert registry.get_or_create_ref("A") == {"ref": "A"}
    assert calls == ["A"]
    assert registry.conversion_count("A") == 1
    assert registry.definitions() == {"A": {"properties": {}}}


def test_request_while_pending_returns_ref_without_reentering() -> None:
    registry = DefinitionRegistry(_types("A", "B"))
    observed: dict[str, Any] = {}

    def convert(named_type: NamedType) -> dict[str, Any]:
        other = "B" if named_type.name == "A" else "A"
        observed[named_type.name] = registry.is_pending(named_type.name)
        return {"properties": {"other": registry.get_or_create_ref(other)}}

    registry.convert = convert
    registry.get_or_create_ref("A")

    assert observed == {"A": True, "B": True}
    assert registry.definitions() == {
        "A": {"properties": {"other": {"ref": "B"}}},
        "B": {"properties": {"other": {"ref": "A"}}},
    }
    assert registry.conversion_count("A") == 1
    assert registry.conversion_count("B") == 1


def test_definitions_follow_first_discovery_order() -> None:
    registry = DefinitionRegistry(_types("Root", "Z", "M", "A"))

    def convert(named_type: NamedType) -> dict[str, Any]:
        if named_type.name == "Root":
            for child in ("Z", "M", "A", "Z"):
                registry.get_or_create_ref(child)
        return {}

    registry.convert = convert
    registry.get_or_create_ref("Root")

    assert list(registry.definitions()) == ["Root", "Z", "M", "A"]


def test_undeclared_type_raises_malformed_input() -> None:
    registry = DefinitionRegistry(_types("A"), convert=lambda named_type: {})

    with pytest.raises(MalformedInputError, match="Missing"):
        registry.get_or_create_ref("Missing")
    assert "Missing" not in registry


def test_definitions_refuse_pending_entries() -> None:
    registry = DefinitionRegistry(_types("A"))
    captured: list[Exception] = []

    def convert(named_type: NamedType) -> dict[str, Any]:
        try:
            registry.definitions()
        except RuntimeError as exc:
            captured.append(exc)
        return {}

    registry.convert = convert
    registry.get_or_create_ref("A")

    assert len(captured) == 1
    assert "A" in str(captured[0])


def test_missing_converter_is_reported() -> None:
    registry = DefinitionRegistry(_types("A"))

    with pytest.raises(RuntimeError, match="no converter"):
        registry.get_or_create_ref("A")


@pytest.mark.parametrize("kind", [TypeKind.SCALAR, TypeKind.ENUM])
def test_reference_to_scalar_or_enum_declaration_is_malformed(kind: TypeKind) -> None:
    calls: list[str] = []
    registry = DefinitionRegistry(
        {"DateTime": NamedType(kind=kind, name="DateTime")},
        convert=lambda named_type: calls.append(named_type.name) or {},
    )

    with pytest.raises(MalformedInputError, match=f"declared as {kind.value}"):
        registry.get_or_create_ref("DateTime")
    assert calls == []
    assert "DateTime" not in registry


def test_failed_conversion_leaves_no_pending_entry() -> None:
    def convert(named_type: NamedType) -> dict[str, Any]:
        raise MalformedInputError(f"cannot convert {named_type.name}")

    registry = DefinitionRegistry(_types("A"), convert=convert)

    with pytest.raises(MalformedInputError, match="cannot convert A"):
        registry.get_or_create_ref("A")
    assert "A" not in registry
    assert not registry.is_pending("A")
    assert registry.definitions() == {}
