"""Assembly of the final JDDF document."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from graphql_to_jddf.configuration.runtime_settings import ConversionSettings
from graphql_to_jddf.introspection_ingestion.document_reader import MalformedInputError
from graphql_to_jddf.introspection_ingestion.introspection_models import IntrospectionSchema

from .composite_conversion import CompositeTypeConverter
from .definition_registry import DEFINITION_KINDS, DefinitionRegistry
from .type_reference_resolver import TypeReferenceResolver

_LOGGER = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when the introspected schema declares no query root type."""


@dataclass(frozen=True)
class JddfDocument:
    """Shared definitions plus the ref to the query root."""

    definitions: Mapping[str, Any]
    ref: str

    def to_json_dict(self) -> dict[str, Any]:
        return {"definitions": dict(self.definitions), "ref": self.ref}


def build_registry(schema: IntrospectionSchema, max_list_depth: int) -> DefinitionRegistry:
    """Wire registry, resolver and converter around one schema."""
    registry = DefinitionRegistry(schema.types)
    resolver = TypeReferenceResolver(registry, max_list_depth=max_list_depth)
    registry.convert = CompositeTypeConverter(resolver, registry).convert
    return registry


def assemble(
    schema: IntrospectionSchema, settings: ConversionSettings | None = None
) -> JddfDocument:
    """Convert every type reachable from the query root into one JDDF document.

    Raises:
      ConfigurationError: If no query root type is declared.
      MalformedInputError: If a root or referenced type is missing or unusable.
    """
    settings = settings or ConversionSettings()
    query_type = schema.query_type
    if not query_type:
        raise ConfigurationError("Schema declares no query root type.")

    registry = build_registry(schema, settings.max_list_depth)
    for name in _root_names(query_type, schema, settings):
        root = schema.types.get(name)
        if root is None:
            raise MalformedInputError(f"Root type '{name}' is not declared.")
        if root.kind not in DEFINITION_KINDS:
            raise MalformedInputError(f"Root type '{name}' is a {root.kind.value}, not an object.")
        registry.get_or_create_ref(name)

    if settings.include_unreferenced_types:
        for named_type in schema.types.values():
            if named_type.kind in DEFINITION_KINDS and not named_type.name.startswith("__"):
                registry.get_or_create_ref(named_type.name)

    definitions = registry.definitions()
    _LOGGER.info("Emitted %d definitions rooted at '%s'", len(definitions), query_type)
    return JddfDocument(definitions=definitions, ref=query_type)


def _root_names(
    query_type: str, schema: IntrospectionSchema, settings: ConversionSettings
) -> Iterator[str]:
    yield query_type
    if settings.include_operation_roots:
        for name in (schema.mutation_type, schema.subscription_type):
            if name:
                yield name
