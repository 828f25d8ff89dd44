"""Schema emission exports."""

from .composite_conversion import CompositeTypeConverter
from .definition_registry import DefinitionRegistry
from .document_assembly import ConfigurationError, JddfDocument, assemble, build_registry
from .scalar_mapping import BUILTIN_SCALAR_TYPES, map_scalar
from .type_reference_resolver import TypeReferenceResolver

__all__ = [
    "BUILTIN_SCALAR_TYPES",
    "map_scalar",
    "TypeReferenceResolver",
    "DefinitionRegistry",
    "CompositeTypeConverter",
    "ConfigurationError",
    "JddfDocument",
    "assemble",
    "build_registry",
]
