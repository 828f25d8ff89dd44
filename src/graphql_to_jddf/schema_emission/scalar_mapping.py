"""Scalar and enum kinds to JDDF primitive types."""

from __future__ import annotations

from typing import Any

from graphql_to_jddf.introspection_ingestion.introspection_models import TypeKind

BUILTIN_SCALAR_TYPES = {
    "String": "string",
    "ID": "string",
    "Boolean": "boolean",
    "Int": "int32",
    "Float": "float64",
}


def map_scalar(kind: TypeKind, name: str) -> dict[str, Any]:
    """Return the inline JDDF schema for a scalar or enum.

    Enums become plain strings; their values are not enumerated. Custom scalars
    declare no representation through introspection, so they map to the empty
    schema.
    """
    if kind is TypeKind.ENUM:
        return {"type": "string"}
    jddf_type = BUILTIN_SCALAR_TYPES.get(name)
    if jddf_type is None:
        return {}
    return {"type": jddf_type}
