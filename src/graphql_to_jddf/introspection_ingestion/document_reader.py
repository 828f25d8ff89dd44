"""Introspection document parsing service."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

from .introspection_models import (
    Field,
    IntrospectionSchema,
    NamedType,
    NamedTypeRef,
    TypeKind,
    TypeRef,
    WrappedTypeRef,
)


class MalformedInputError(Exception):
    """Raised when an introspection document lacks required structure."""


def parse_introspection_text(text: str) -> IntrospectionSchema:
    """Parse raw JSON text of an introspection response."""
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedInputError(f"Invalid introspection JSON: {exc}") from exc
    return parse_introspection_document(payload)


def parse_introspection_document(payload: Any) -> IntrospectionSchema:
    """Build the introspection model from a decoded response.

    Accepts both the full GraphQL response envelope (`{"data": {"__schema": ...}}`)
    and a bare `{"__schema": ...}` object.
    """
    if not isinstance(payload, Mapping):
        raise MalformedInputError("Introspection document root must be an object.")

    container: Any = payload
    if "__schema" not in payload:
        data = payload.get("data")
        if data is None:
            errors = payload.get("errors")
            if errors:
                raise MalformedInputError(
                    f"GraphQL response reported errors: {_error_summary(errors)}"
                )
            raise MalformedInputError("No data in GraphQL response.")
        container = _require_mapping(data, "data")

    schema = container.get("__schema")
    if schema is None:
        raise MalformedInputError("No __schema in GraphQL response.")
    schema = _require_mapping(schema, "__schema")

    types: dict[str, NamedType] = {}
    for index, raw_type in enumerate(_require_sequence(schema.get("types"), "__schema.types")):
        named_type = _parse_named_type(raw_type, f"__schema.types[{index}]")
        if named_type.name in types:
            raise MalformedInputError(f"Type '{named_type.name}' is declared more than once.")
        types[named_type.name] = named_type

    return IntrospectionSchema(
        query_type=_root_type_name(schema.get("queryType"), "queryType"),
        mutation_type=_root_type_name(schema.get("mutationType"), "mutationType"),
        subscription_type=_root_type_name(schema.get("subscriptionType"), "subscriptionType"),
        types=types,
    )


def _parse_named_type(value: Any, location: str) -> NamedType:
    raw = _require_mapping(value, location)
    kind = _parse_kind(raw.get("kind"), location)
    if kind.is_wrapper:
        raise MalformedInputError(f"{location} declares wrapper kind {kind.value} as a named type.")
    name = _require_name(raw.get("name"), location)
    location = f"type '{name}'"

    if kind in (TypeKind.OBJECT, TypeKind.INTERFACE):
        fields = _parse_fields(raw.get("fields"), location, "fields")
    elif kind is TypeKind.INPUT_OBJECT:
        fields = _parse_fields(raw.get("inputFields"), location, "inputFields")
    else:
        fields = ()

    possible_types: tuple[str, ...] = ()
    if kind in (TypeKind.UNION, TypeKind.INTERFACE) and raw.get("possibleTypes") is not None:
        possible_types = tuple(
            _require_name(_require_mapping(item, f"{location}.possibleTypes").get("name"), location)
            for item in _require_sequence(raw.get("possibleTypes"), f"{location}.possibleTypes")
        )

    enum_values: tuple[str, ...] = ()
    if kind is TypeKind.ENUM and raw.get("enumValues") is not None:
        enum_values = tuple(
            _require_name(_require_mapping(item, f"{location}.enumValues").get("name"), location)
            for item in _require_sequence(raw.get("enumValues"), f"{location}.enumValues")
        )

    return NamedType(
        kind=kind,
        name=name,
        fields=fields,
        possible_types=possible_types,
        enum_values=enum_values,
    )


def _parse_fields(value: Any, location: str, key: str) -> tuple[Field, ...]:
    # Introspection reports null fields for types queried without them.
    if value is None:
        return ()
    fields: list[Field] = []
    seen: set[str] = set()
    for raw_field in _require_sequence(value, f"{location}.{key}"):
        mapping = _require_mapping(raw_field, f"{location}.{key}")
        name = _require_name(mapping.get("name"), f"{location}.{key}")
        if name in seen:
            raise MalformedInputError(f"Field '{name}' is declared more than once on {location}.")
        seen.add(name)
        if mapping.get("type") is None:
            raise MalformedInputError(f"Field '{name}' on {location} has no type descriptor.")
        type_ref = parse_type_ref(mapping["type"], f"{location}.{name}")
        fields.append(Field(name=name, type_ref=type_ref))
    return tuple(fields)


def parse_type_ref(value: Any, location: str = "type") -> TypeRef:
    """Parse one `__Type` reference (kind/name/ofType chain)."""
    raw = _require_mapping(value, location)
    kind = _parse_kind(raw.get("kind"), location)
    if not kind.is_wrapper:
        return NamedTypeRef(kind=kind, name=_require_name(raw.get("name"), location))
    inner = raw.get("ofType")
    return WrappedTypeRef(
        kind=kind,
        of_type=None if inner is None else parse_type_ref(inner, location),
    )


def _root_type_name(value: Any, key: str) -> str | None:
    if value is None:
        return None
    return _require_name(_require_mapping(value, key).get("name"), key)


def _parse_kind(value: Any, location: str) -> TypeKind:
    if not isinstance(value, str):
        raise MalformedInputError(f"{location} has no kind.")
    try:
        return TypeKind(value)
    except ValueError as exc:
        raise MalformedInputError(f"{location} has unknown kind '{value}'.") from exc


def _require_name(value: Any, location: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise MalformedInputError(f"{location} has no name.")
    return value


def _require_mapping(value: Any, location: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise MalformedInputError(f"{location} must be an object.")
    return value


def _require_sequence(value: Any, location: str) -> Sequence[Any]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise MalformedInputError(f"{location} must be a list.")
    return value


def _error_summary(errors: Any) -> str:
    if isinstance(errors, Sequence) and not isinstance(errors, str):
        messages = [
            str(item.get("message")) if isinstance(item, Mapping) else str(item) for item in errors
        ]
        return "; ".join(messages)
    return str(errors)
