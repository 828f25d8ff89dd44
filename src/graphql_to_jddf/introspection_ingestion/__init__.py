"""Introspection ingestion exports."""

from .document_reader import (
    MalformedInputError,
    parse_introspection_document,
    parse_introspection_text,
    parse_type_ref,
)
from .introspection_models import (
    Field,
    IntrospectionSchema,
    NamedType,
    NamedTypeRef,
    TypeKind,
    TypeRef,
    WrappedTypeRef,
)
from .introspection_source import (
    INTROSPECTION_QUERY,
    IntrospectionSourceError,
    fetch_introspection,
    load_introspection_file,
    read_introspection_text,
)

__all__ = [
    "Field",
    "IntrospectionSchema",
    "NamedType",
    "NamedTypeRef",
    "TypeKind",
    "TypeRef",
    "WrappedTypeRef",
    "MalformedInputError",
    "parse_introspection_document",
    "parse_introspection_text",
    "parse_type_ref",
    "INTROSPECTION_QUERY",
    "IntrospectionSourceError",
    "fetch_introspection",
    "load_introspection_file",
    "read_introspection_text",
]
