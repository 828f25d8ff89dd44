"""Wrapped type references to inline JDDF schemas."""

from __future__ import annotations

from typing import Any

from graphql_to_jddf.configuration.runtime_settings import DEFAULT_MAX_LIST_DEPTH
from graphql_to_jddf.introspection_ingestion.introspection_models import (
    NamedTypeRef,
    TypeKind,
    TypeRef,
)

from .definition_registry import DefinitionRegistry
from .scalar_mapping import map_scalar


class TypeReferenceResolver:
    """Unwraps NON_NULL/LIST layers down to a scalar schema or a definition ref.

    NON_NULL layers are transparent here; field-level nullability is decided by
    the owning composite type. Each LIST layer spends one unit of the depth
    budget. A LIST reached with no budget left still renders as `elements`, but
    everything beneath it collapses into the empty schema.
    """

    def __init__(self, registry: DefinitionRegistry, max_list_depth: int = DEFAULT_MAX_LIST_DEPTH):
        if max_list_depth < 0:
            raise ValueError("max_list_depth must not be negative.")
        self._registry = registry
        self.max_list_depth = max_list_depth

    def resolve(self, type_ref: TypeRef, depth_budget: int | None = None) -> dict[str, Any]:
        budget = self.max_list_depth if depth_budget is None else depth_budget

        if isinstance(type_ref, NamedTypeRef):
            if type_ref.kind in (TypeKind.SCALAR, TypeKind.ENUM):
                return map_scalar(type_ref.kind, type_ref.name)
            return self._registry.get_or_create_ref(type_ref.name)

        # Truncated by the introspection query.
        if type_ref.of_type is None:
            return {}

        if type_ref.kind is TypeKind.NON_NULL:
            return self.resolve(type_ref.of_type, budget)

        if budget <= 0:
            return {"elements": {}}
        return {"elements": self.resolve(type_ref.of_type, budget - 1)}
