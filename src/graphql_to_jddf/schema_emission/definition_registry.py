"""Write-once table of converted named types."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable, Mapping
from typing import Any

from graphql_to_jddf.introspection_ingestion.document_reader import MalformedInputError
from graphql_to_jddf.introspection_ingestion.introspection_models import NamedType, TypeKind

_LOGGER = logging.getLogger(__name__)

# Marks a name whose conversion is still on the stack.
_PENDING = object()

DEFINITION_KINDS = (TypeKind.OBJECT, TypeKind.INTERFACE, TypeKind.UNION, TypeKind.INPUT_OBJECT)

TypeConverter = Callable[[NamedType], dict[str, Any]]


class DefinitionRegistry:
    """Tracks which named types have been converted and stores each result once.

    A name is marked pending before its converter runs, so a reference that
    leads back to it (A -> B -> A) gets a plain `{"ref": name}` instead of a
    second conversion. Insertion order of the table is first-discovery order.
    """

    def __init__(self, types: Mapping[str, NamedType], convert: TypeConverter | None = None):
        self._types = types
        self.convert = convert
        self._entries: dict[str, Any] = {}
        self._conversions: Counter[str] = Counter()

    def get_or_create_ref(self, name: str) -> dict[str, Any]:
        """Return `{"ref": name}`, converting the named type on first request."""
        if name in self._entries:
            if self._entries[name] is _PENDING:
                _LOGGER.debug("Cycle through '%s'; emitting ref to pending definition", name)
            return {"ref": name}

        named_type = self._types.get(name)
        if named_type is None:
            raise MalformedInputError(f"Type '{name}' is referenced but not declared.")
        if named_type.kind not in DEFINITION_KINDS:
            raise MalformedInputError(
                f"Type '{name}' is declared as {named_type.kind.value}, not an object type."
            )
        if self.convert is None:
            raise RuntimeError("DefinitionRegistry has no converter bound.")

        self._entries[name] = _PENDING
        self._conversions[name] += 1
        _LOGGER.debug("Converting %s '%s'", named_type.kind.value, name)
        try:
            definition = self.convert(named_type)
        except Exception:
            del self._entries[name]
            raise
        self._entries[name] = definition
        return {"ref": name}

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def is_pending(self, name: str) -> bool:
        return self._entries.get(name) is _PENDING

    def conversion_count(self, name: str) -> int:
        return self._conversions[name]

    def definitions(self) -> dict[str, dict[str, Any]]:
        """Return the finished definitions map in discovery order."""
        pending = [name for name, entry in self._entries.items() if entry is _PENDING]
        if pending:
            raise RuntimeError(f"Definitions still being converted: {', '.join(pending)}")
        return dict(self._entries)
