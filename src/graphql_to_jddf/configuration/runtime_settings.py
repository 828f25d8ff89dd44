"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_MAX_LIST_DEPTH = 3
DEFAULT_TOKEN_ENV = "GRAPHQL_TOKEN"


@dataclass(frozen=True)
class EndpointSettings:
    """GraphQL endpoint queried for the introspection document."""

    url: str
    token: str | None = None
    timeout_seconds: int = 30


@dataclass(frozen=True)
class SourceSettings:
    """Where the introspection document comes from.

    At most one of `file` and `endpoint` is set; neither means standard input.
    """

    file: Path | None = None
    endpoint: EndpointSettings | None = None


@dataclass(frozen=True)
class ConversionSettings:
    """Knobs of the schema emitter."""

    max_list_depth: int = DEFAULT_MAX_LIST_DEPTH
    include_operation_roots: bool = False
    include_unreferenced_types: bool = False


@dataclass(frozen=True)
class OutputSettings:
    """JSON rendering of the emitted document."""

    path: Path | None = None
    indent: int | None = 2


@dataclass(frozen=True)
class Settings:
    """Top-level settings aggregate."""

    path: Path | None = None
    source: SourceSettings = field(default_factory=SourceSettings)
    conversion: ConversionSettings = field(default_factory=ConversionSettings)
    output: OutputSettings = field(default_factory=OutputSettings)
