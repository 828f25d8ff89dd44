"""Composite named types to JDDF definitions."""

from __future__ import annotations

from typing import Any

from graphql_to_jddf.introspection_ingestion.introspection_models import NamedType, TypeKind

from .definition_registry import DefinitionRegistry
from .type_reference_resolver import TypeReferenceResolver


class CompositeTypeConverter:
    """Builds the definition of one OBJECT, INTERFACE, UNION or INPUT_OBJECT type."""

    def __init__(self, resolver: TypeReferenceResolver, registry: DefinitionRegistry):
        self._resolver = resolver
        self._registry = registry

    def convert(self, named_type: NamedType) -> dict[str, Any]:
        """Return the JDDF definition for `named_type`.

        Non-null fields go to `properties`, all others to `optionalProperties`.
        Unions and field-less interfaces become the empty schema; their possible
        types are still registered so each member gets its own definition.

        Raises:
          TypeError: For SCALAR and ENUM types, which are always inlined.
        """
        if named_type.kind in (TypeKind.SCALAR, TypeKind.ENUM):
            raise TypeError(
                f"{named_type.kind.value} '{named_type.name}' is inlined and has no definition."
            )

        degraded = named_type.kind is TypeKind.UNION or (
            named_type.kind is TypeKind.INTERFACE and not named_type.fields
        )
        if degraded:
            self._register_possible_types(named_type)
            return {}

        definition = self._convert_fields(named_type)
        self._register_possible_types(named_type)
        return definition

    def _convert_fields(self, named_type: NamedType) -> dict[str, Any]:
        required: dict[str, Any] = {}
        optional: dict[str, Any] = {}
        for field in named_type.fields:
            target = required if field.is_required else optional
            target[field.name] = self._resolver.resolve(field.type_ref)

        definition: dict[str, Any] = {}
        if required or not optional:
            definition["properties"] = required
        if optional:
            definition["optionalProperties"] = optional
        return definition

    def _register_possible_types(self, named_type: NamedType) -> None:
        for member in named_type.possible_types:
            self._registry.get_or_create_ref(member)
