"""Introspection domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum


class TypeKind(str, Enum):
    """`__TypeKind` values reported by GraphQL introspection."""

    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    ENUM = "ENUM"
    INPUT_OBJECT = "INPUT_OBJECT"
    NON_NULL = "NON_NULL"
    LIST = "LIST"

    @property
    def is_wrapper(self) -> bool:
        return self in (TypeKind.NON_NULL, TypeKind.LIST)


@dataclass(frozen=True)
class NamedTypeRef:
    """Reference to a named type at the end of a wrapper chain."""

    kind: TypeKind
    name: str


@dataclass(frozen=True)
class WrappedTypeRef:
    """NON_NULL or LIST layer around an inner type reference.

    `of_type` is None when the introspection query stopped descending before the
    chain reached a named type.
    """

    kind: TypeKind
    of_type: TypeRef | None


TypeRef = NamedTypeRef | WrappedTypeRef


@dataclass(frozen=True)
class Field:
    """Named field (or input field) of a composite type."""

    name: str
    type_ref: TypeRef

    @property
    def is_required(self) -> bool:
        return isinstance(self.type_ref, WrappedTypeRef) and self.type_ref.kind is TypeKind.NON_NULL


@dataclass(frozen=True)
class NamedType:
    """Named entry of the introspected type system."""

    kind: TypeKind
    name: str
    fields: tuple[Field, ...] = ()
    possible_types: tuple[str, ...] = ()
    enum_values: tuple[str, ...] = ()


@dataclass(frozen=True)
class IntrospectionSchema:
    """Root description plus every declared named type, in document order."""

    query_type: str | None
    types: Mapping[str, NamedType] = field(default_factory=dict)
    mutation_type: str | None = None
    subscription_type: str | None = None
